"""
Advanced calculator tests — structure, heating, coatings, barriers, gaps.

Tests:
1-2.   Floor joist sizing
3-4.   Floor load
5-6.   Radiant heating
7.     Acoustic underlayment
8-9.   Concrete flooring
10-11. Epoxy flooring
12-13. Moisture barrier
14-15. Floating floor expansion gaps
"""

import pytest

from flooring_calc.calculators.registry import get_calculator


ROOM = {"room_length": 12, "room_width": 10}


def _calc(calculator_id, **fields):
    return get_calculator(calculator_id).calculate(fields)


# ============================================================
# Structure
# ============================================================

def test_floor_joist_span_bands():
    result = _calc("floor-joist", span_length=12)
    assert result["recommended_size"] == "2x10"
    assert result["max_span"] == 15.2
    assert result["load_capacity"] == 40
    assert result["joists_needed"] == 2
    assert result["material_cost"] == pytest.approx(25.5)

    assert _calc("floor-joist", span_length=8)["recommended_size"] == "2x8"
    assert _calc("floor-joist", span_length=18)["recommended_size"] == "2x12"


def test_floor_joist_long_span_goes_engineered():
    result = _calc("floor-joist", span_length=20, joist_spacing="24")
    assert result["recommended_size"] == "Engineered I-Joist"
    assert result["max_span"] == 20
    assert result["load_capacity"] == pytest.approx(40 * 16 / 24)


def test_floor_load_residential():
    result = _calc("floor-load", **ROOM)
    assert result["dead_load"] == 14
    assert result["live_load"] == 40
    assert result["total_load"] == 108                  # (14 + 40) x 2
    assert result["total_room_load"] == 108 * 120
    assert result["structural_requirements"] == "Enhanced structural support recommended"

    light = _calc("floor-load", safety_factor=1.5, **ROOM)
    assert light["structural_requirements"] == "Standard construction adequate"


def test_floor_load_warehouse_needs_reinforcement():
    result = _calc("floor-load", occupancy_type="warehouse", **ROOM)
    assert result["total_load"] == 278
    assert result["structural_requirements"] == "Reinforced framing required"


# ============================================================
# Heating + sound
# ============================================================

def test_radiant_heating_electric():
    result = _calc("radiant-heating", **ROOM)
    assert result["heating_area"] == pytest.approx(108)
    assert result["power_required"] == pytest.approx(1296)
    assert result["cable_length"] == pytest.approx(356.4)
    assert result["mat_quantity"] == 11
    assert result["material_cost"] == pytest.approx(108 * 8 + 275)
    assert result["labor_cost"] == pytest.approx(486)
    assert result["installation_cost"] == pytest.approx(1625)
    assert result["operating_cost"] == pytest.approx(149.2992)


def test_radiant_heating_hydronic_has_no_cable():
    result = _calc("radiant-heating", heating_type="hydronic", **ROOM)
    assert result["cable_length"] == 0
    assert result["power_required"] == pytest.approx(864)


def test_acoustic_underlayment():
    result = _calc("acoustic-underlayment", **ROOM)
    assert result["rolls_needed"] == 2
    assert result["acoustic_tape"] == 1
    assert result["total_cost"] == pytest.approx(132 * 1.25 + 35)
    assert result["sound_reduction"] == "IIC 65, STC 66"


# ============================================================
# Coatings
# ============================================================

def test_concrete_flooring_defaults():
    result = _calc("concrete-flooring", **ROOM)
    assert result["prep_cost"] == pytest.approx(480)
    assert result["material_cost"] == pytest.approx(588)    # 120 x 3.50 x 1.4
    assert result["labor_cost"] == pytest.approx(1008)
    assert result["sealer_cost"] == pytest.approx(150)
    assert result["polishing_cost"] == pytest.approx(300)
    assert result["total_cost"] == pytest.approx(2526)
    assert result["cost_per_sq_ft"] == pytest.approx(21.05)
    assert result["process_steps"][-2] == "Apply penetrating sealer"


def test_concrete_flooring_stain_steps():
    result = _calc("concrete-flooring", color_options="acid-stain", include_prep=False, **ROOM)
    assert result["prep_cost"] == 0
    assert "Apply acid stain" in result["process_steps"]
    assert "Surface preparation and repair" not in result["process_steps"]


def test_epoxy_flooring_two_coat():
    result = _calc("epoxy-flooring", **ROOM)
    assert result["primer_needed"] == pytest.approx(0.3)
    assert result["base_coat_needed"] == pytest.approx(0.48)
    assert result["topcoat_needed"] == pytest.approx(120 / 350)
    assert result["decorative_material"] == pytest.approx(6)
    assert result["total_material_cost"] == pytest.approx(
        0.3 * 45 + 0.48 * 85 + 120 / 350 * 65 + 6 * 3.50)
    assert result["prep_cost"] == pytest.approx(240)
    assert result["labor_hours"] == pytest.approx(43.2)


def test_epoxy_flooring_single_coat_no_topcoat():
    result = _calc("epoxy-flooring", coat_layers="single-coat", decorative_options="none", **ROOM)
    assert result["topcoat_needed"] == 0
    assert result["decorative_material"] == 0
    assert not any(step.startswith("Broadcast") for step in result["application_steps"])


# ============================================================
# Moisture + gaps
# ============================================================

def test_moisture_barrier_defaults():
    result = _calc("moisture-barrier", **ROOM)
    assert result["rolls_needed"] == 1
    assert result["seam_tape_needed"] == 1
    assert result["primer_needed"] == 0
    assert result["total_cost"] == pytest.approx(330)
    assert result["moisture_rating"] == "Enhanced vapor retarder recommended"


def test_moisture_barrier_large_membrane():
    result = _calc("moisture-barrier", room_length=30, room_width=20, barrier_type="membrane",
                   moisture_level="extreme", include_primer=True)
    # 660 sq ft -> 4 rolls; tape: 100 ft perimeter + 3 x 20 ft seams = 160 ft -> 4 rolls
    assert result["rolls_needed"] == 4
    assert result["seam_tape_needed"] == 4
    assert result["primer_needed"] == 3
    assert "Consider professional moisture testing" in result["installation_tips"]


def test_floating_floor_gap_minimums():
    result = _calc("floating-floor-gap", **ROOM)
    assert result["expansion_rate"] == pytest.approx(0.0052)
    assert result["expected_expansion"] == pytest.approx(0.0624)
    assert result["perimeter_gap"] == 0.25
    assert result["doorway_gap"] == 0.375
    assert result["transition_gap"] == 0.5
    assert result["max_run_length"] == 39
    assert result["t_molding_needed"] == 6
    assert result["gap_guidelines"][0] == 'Maintain 0.25" gap at all walls and fixed objects'


def test_floating_floor_gap_long_heated_room():
    result = _calc("floating-floor-gap", room_length=40, room_width=10,
                   flooring_type="vinyl-plank", seasonal_variation="high", underfloor_heating=True)
    assert result["expansion_rate"] == pytest.approx(0.006 * 1.8 * 1.4)
    assert result["perimeter_gap"] == pytest.approx(40 * 0.01512 * 2)
    assert result["max_run_length"] == pytest.approx(37.5)
    assert result["installation_tips"][-1] == "Gradually increase heating temperature over 7 days"
