"""
Room-shape and cost calculator tests.

Tests:
1-3.  Square footage, waste percentage, flooring cost through the registry
4-5.  L-shaped room
6-7.  Circular room
8-9.  Multi-room
10-12. Labor cost and duration
13-14. Installation cost
"""

import pytest

from flooring_calc.calculators.base import CalculatorInputError
from flooring_calc.calculators.labor_cost import format_duration
from flooring_calc.calculators.registry import get_calculator


ROOM = {"room_length": 12, "room_width": 10}


def _calc(calculator_id, **fields):
    return get_calculator(calculator_id).calculate(fields)


# ============================================================
# Basic calculators
# ============================================================

def test_square_footage_half_filled_form_is_zero():
    """Dimensions left out count as zero; nothing raises."""
    result = _calc("square-footage", shape="circle")
    assert result["area"] == 0
    assert result["perimeter"] == 0


def test_waste_percentage_defaults():
    result = _calc("waste-percentage")
    assert result["recommended_waste"] == 7
    assert result["factors"][0] == "Simple room layout"


def test_flooring_cost_rejects_waste_over_50():
    with pytest.raises(CalculatorInputError) as exc:
        _calc("flooring-cost", length=12, width=10, waste_percentage=60)
    assert exc.value.errors[0]["field"] == "waste_percentage"


# ============================================================
# L-shaped room
# ============================================================

def test_l_shaped_room():
    result = _calc("l-shaped-room", length1=10, width1=8, length2=6, width2=4)
    assert result["section1_area"] == 80
    assert result["section2_area"] == 24
    assert result["total_area"] == 104
    assert result["adjusted_area"] == pytest.approx(119.6)   # 15% default
    assert result["material_needed"] == 120
    assert result["seam_length"] == 4
    assert result["transition_strips"] == 0


def test_l_shaped_room_plank_floor_gets_transition():
    result = _calc("l-shaped-room", length1=10, width1=8, length2=6, width2=4,
                   flooring_type="laminate")
    assert result["transition_strips"] == 1
    assert "Use transition strips where floor direction changes" in result["installation_tips"]


# ============================================================
# Circular room
# ============================================================

def test_circular_room_tile():
    result = _calc("circular-room", radius=10)
    assert result["area"] == pytest.approx(314.159, abs=0.001)
    assert result["material_needed"] == 362     # 314.16 x 1.15 = 361.3
    assert result["center_tiles"] == 254        # floor(pi x 9^2)
    assert result["border_tiles"] == 108
    assert result["cuts"] == 87                 # 108 x 0.8 = 86.4


def test_circular_room_diameter_and_carpet():
    result = _calc("circular-room", radius=20, measurement_type="diameter", flooring_type="carpet")
    assert result["radius"] == 10
    assert result["diameter"] == 20
    assert result["cuts"] == 1
    assert result["center_tiles"] == 0

    small = _calc("circular-room", radius=0.2)
    assert small["center_tiles"] == 0           # no full tile fits
    assert small["border_tiles"] == small["material_needed"]


# ============================================================
# Multi-room
# ============================================================

def test_multi_room():
    calc = get_calculator("multi-room")
    result = calc.calculate(calc.example_inputs())
    assert [r["name"] for r in result["rooms"]] == ["Living Room", "Hallway"]
    assert result["total_area"] == 272                  # 224 + 48
    assert result["total_adjusted_area"] == pytest.approx(299.2)
    assert result["material_needed"] == 300
    assert result["savings"] == pytest.approx(48.75)    # 300 x 3.25 x 5%
    assert result["estimated_cost"] == pytest.approx(926.25)
    assert len(result["installation_tips"]) == 6


def test_multi_room_shapes_and_validation():
    result = _calc("multi-room", rooms=[
        {"name": "Nook", "length": 10, "width": 10, "shape": "l-shape"},
        {"name": "Rotunda", "length": 10, "width": 10, "shape": "circle"},
    ])
    areas = [r["area"] for r in result["rooms"]]
    assert areas[0] == pytest.approx(75)
    assert areas[1] == pytest.approx(78.54, abs=0.01)   # 10 ft diameter

    with pytest.raises(CalculatorInputError):
        _calc("multi-room", rooms=[])
    with pytest.raises(CalculatorInputError) as exc:
        _calc("multi-room", rooms=[{"name": "", "length": 10, "width": 10}])
    assert exc.value.errors[0]["field"] == "rooms.0.name"


# ============================================================
# Labor cost
# ============================================================

def test_labor_cost_defaults():
    result = _calc("labor-cost", **ROOM)
    assert result["hours_required"] == pytest.approx(54)      # 120 x 0.45
    assert result["base_hourly_rate"] == 45
    assert result["subtotal"] == pytest.approx(2430)
    assert result["total_labor_cost"] == pytest.approx(2065.5)  # x 0.85 crew
    assert result["days_required"] == 4                       # 54 / 13.6
    assert result["recommended_duration"] == "1 week"


def test_labor_cost_rush_metro():
    result = _calc("labor-cost", project_timeline="rush", region="metro",
                   experience_level="master", crew_size="1-person", **ROOM)
    assert result["total_labor_cost"] == pytest.approx(54 * 65 * 1.5 * 1.6)
    assert result["days_required"] == 7                       # 54 / 8
    assert result["recommended_duration"] == "2 weeks"


def test_format_duration():
    assert format_duration(1) == "1 day"
    assert format_duration(3) == "3 days"
    assert format_duration(5) == "1 week"
    assert format_duration(6) == "2 weeks"


# ============================================================
# Installation cost
# ============================================================

def test_installation_cost_defaults():
    result = _calc("installation-cost", **ROOM)
    assert result["installation_cost"] == pytest.approx(1020)
    assert result["removal_cost"] == 0
    assert result["total_cost"] == pytest.approx(1020)
    assert result["cost_per_sq_ft"] == pytest.approx(8.5)


def test_installation_cost_with_removal_and_subfloor():
    result = _calc("installation-cost", region="high-cost", include_removal=True,
                   include_subfloor=True, **ROOM)
    assert result["installation_cost"] == pytest.approx(1428)
    assert result["removal_cost"] == pytest.approx(420)
    assert result["subfloor_cost"] == pytest.approx(672)
    assert result["total_cost"] == pytest.approx(2520)
