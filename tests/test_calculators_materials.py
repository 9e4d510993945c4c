"""
Material calculator tests — tile, wood, vinyl, carpet, trim and friends.

Tests:
1-3.   Validation (schema errors, unknown options, defaults)
4-6.   Tile, hardwood
7-9.   Carpet, laminate
10-12. Vinyl, sheet vinyl
13-14. Engineered wood
15-17. Grout, adhesive, subfloor
18-21. Stair, baseboard, molding, transition strip
"""

import pytest

from flooring_calc.calculators.base import CalculatorInputError
from flooring_calc.calculators.registry import get_calculator


ROOM = {"room_length": 12, "room_width": 10}


def _calc(calculator_id, **fields):
    return get_calculator(calculator_id).calculate(fields)


# ============================================================
# Validation
# ============================================================

def test_room_dimensions_must_be_positive():
    with pytest.raises(CalculatorInputError) as exc:
        _calc("tile", room_length=0, room_width=10)
    assert exc.value.errors[0]["field"] == "room_length"
    assert "0.1" in exc.value.errors[0]["message"]


def test_unknown_option_is_rejected():
    """Choices are closed: no silent fallback to a missing table entry."""
    with pytest.raises(CalculatorInputError) as exc:
        _calc("hardwood", installation_type="stapled", **ROOM)
    assert exc.value.errors[0]["field"] == "installation_type"
    assert exc.value.calculator_id == "hardwood"


def test_missing_required_field_lists_every_error():
    with pytest.raises(CalculatorInputError) as exc:
        _calc("tile")
    fields = {e["field"] for e in exc.value.errors}
    assert fields == {"room_length", "room_width"}
    # CalculatorInputError is a ValueError
    assert isinstance(exc.value, ValueError)


# ============================================================
# Tile + hardwood
# ============================================================

def test_tile_defaults():
    result = _calc("tile", **ROOM)
    assert result["tiles_needed"] == 120
    assert result["tiles_with_waste"] == 132
    assert result["adhesive_needed"] == 3


def test_hardwood_nail_down():
    result = _calc("hardwood", **ROOM)
    # 3.25" x 84" board = 1.896 sq ft; 132 / 1.896 = 69.6 -> 70
    assert result["adjusted_area"] == pytest.approx(132)
    assert result["boards_needed"] == 70
    assert result["nails_needed"] == 2       # 120 / 100 -> 2 boxes
    assert result["adhesive_needed"] is None
    assert result["underlayment_needed"] is None


def test_hardwood_glue_down_and_floating():
    glue = _calc("hardwood", installation_type="glue-down", **ROOM)
    assert glue["adhesive_needed"] == 1
    assert glue["nails_needed"] is None
    floating = _calc("hardwood", installation_type="floating", **ROOM)
    assert floating["underlayment_needed"] == 132
    assert floating["nails_needed"] is None


# ============================================================
# Carpet + laminate
# ============================================================

def test_carpet_fits_one_roll_width():
    result = _calc("carpet", **ROOM)
    assert result["seams"] == 0
    assert result["carpet_needed"] == 144          # 12 ft run x 12 ft roll
    assert result["carpet_with_waste"] == pytest.approx(158.4)
    assert result["padding_needed"] == pytest.approx(126)
    assert result["tack_strips_needed"] == pytest.approx(37.4)
    assert result["labor_hours"] == pytest.approx(60)
    assert result["stair_carpet"] == 0


def test_carpet_wide_room_needs_seams():
    result = _calc("carpet", room_length=15, room_width=20, include_stairs=True, stair_count=12)
    assert result["seams"] == 1
    assert result["carpet_needed"] == 360          # 15 x 12 x 2 runs
    assert result["stair_carpet"] == pytest.approx(51)  # 12 x 17/12 x 3
    assert any("seam" in tip for tip in result["installation_tips"])


def test_laminate_defaults():
    result = _calc("laminate", **ROOM)
    # 48" x 7.5" plank = 2.5 sq ft; 48 planks + 10% -> 53
    assert result["plank_area"] == 2.5
    assert result["planks_needed"] == 53
    assert result["square_feet_needed"] == pytest.approx(132.5)
    assert result["boxes"] == 7
    assert result["underlayment_needed"] == 126
    assert result["molding_needed"] == 0
    assert result["labor_hours"] == pytest.approx(48)
    assert result["total_material_cost"] == pytest.approx(132.5 * 4.00 + 126 * 0.65)


# ============================================================
# Vinyl
# ============================================================

def test_vinyl_planks():
    result = _calc("vinyl", **ROOM)
    assert result["planks_needed"] == 66            # 132 / 2 sq ft
    assert result["rolls_needed"] is None
    assert result["linear_feet_needed"] is None
    assert result["molding_needed"] == 44


def test_vinyl_sheet():
    result = _calc("vinyl", vinyl_type="sheet", **ROOM)
    assert result["planks_needed"] is None
    assert result["linear_feet_needed"] == 12
    assert result["rolls_needed"] == 1


def test_sheet_vinyl_layouts():
    single = _calc("sheet-vinyl", **ROOM)
    assert single["rolls_needed"] == 1
    assert single["seam_layout"].startswith("Single piece")
    assert single["linear_feet_needed"] == 14      # (12 + 0.5) x 1.1 = 13.75
    assert single["total_square_feet"] == 165
    assert single["total_cost"] == pytest.approx(165 * 2.85)

    wide = _calc("sheet-vinyl", room_length=20, room_width=30)
    assert wide["rolls_needed"] == 2
    assert wide["seam_layout"] == "2 pieces running widthwise with 1 seam(s)"


# ============================================================
# Engineered wood
# ============================================================

def test_engineered_wood_click_lock():
    result = _calc("engineered-wood", **ROOM)
    assert result["planks_needed"] == 80           # 132 / 1.667
    assert result["boxes_needed"] == 7
    assert result["underlayment_needed"] is None   # only over 500 sq ft
    assert result["adhesive_needed"] is None
    assert result["labor_hours"] == 8              # 9.6 hrs x 0.8 = 7.68 -> 8
    assert result["total_material_cost"] == pytest.approx(594)


def test_engineered_wood_large_room_and_glue_down():
    large = _calc("engineered-wood", room_length=30, room_width=20)
    assert large["underlayment_needed"] == 660
    glue = _calc("engineered-wood", installation_type="glue-down", **ROOM)
    assert glue["adhesive_needed"] == 1
    assert glue["underlayment_needed"] is None


# ============================================================
# Grout, adhesive, subfloor
# ============================================================

def test_tile_grout():
    result = _calc("tile-grout", **ROOM)
    # joint = 2 x 24 x 0.125 x 0.25 = 1.5 cu in per tile
    assert result["tiles_needed"] == 120
    assert result["grout_volume"] == pytest.approx(1.5 * 120 / 1728)
    assert result["grout_pounds"] == pytest.approx(10.9375)
    assert result["grout_bags"] == 1
    assert result["total_cost"] == 18.0


def test_tile_adhesive():
    result = _calc("tile-adhesive", **ROOM)
    assert result["coverage_rate"] == pytest.approx(60)
    assert result["adhesive_needed"] == pytest.approx(2.0)
    assert result["adhesive_with_waste"] == pytest.approx(2.2)
    assert result["total_cost"] == 105.0          # 3 gallons x $35
    assert result["coverage_factors"]["Thickness"] == 1.0

    thick = _calc("tile-adhesive", tile_thickness=16, **ROOM)
    assert thick["coverage_rate"] == pytest.approx(30)


def test_subfloor():
    result = _calc("subfloor", **ROOM)
    assert result["sheets_needed"] == 5            # 132 / 32 -> 4.1 -> 5
    assert result["total_screws"] == 360           # 72 per sheet at 16" o.c.
    assert result["adhesive_tubes"] == 2
    assert result["labor_hours"] == pytest.approx(18)
    assert result["total_cost"] == pytest.approx(5 * 45 + 4 * 12 + 2 * 8)
    assert "Install moisture barrier" not in result["installation_steps"]

    odd_spacing = _calc("subfloor", joist_spacing="19.2-inch", moisture_barrier=True, **ROOM)
    assert odd_spacing["total_screws"] == 5 * 62   # 19.2" counts as 19"
    assert odd_spacing["moisture_barrier_needed"] == 132
    assert "Install moisture barrier" in odd_spacing["installation_steps"]


# ============================================================
# Stair + trim
# ============================================================

def test_stair():
    result = _calc("stair", number_of_steps=12)
    assert result["tread_area"] == pytest.approx(33)   # 12 x 36 x 11 / 144
    assert result["total_risers"] == 0
    assert result["adjusted_area"] == pytest.approx(37.95)
    assert result["nosing_needed"] == 36
    assert result["transition_strips"] == 2
    assert result["total_cost"] == pytest.approx(37.95 * 6.75 + 36 * 8 + 2 * 25)

    risers = _calc("stair", number_of_steps=12, riser_covering=True)
    assert risers["riser_area"] == pytest.approx(22.5)


def test_baseboard_trim():
    result = _calc("baseboard-trim", **ROOM)
    # 44 ft less one 32" door and two 36" windows
    assert result["adjusted_perimeter"] == pytest.approx(44 - 32 / 12 - 6)
    assert result["baseboard_needed"] == pytest.approx((44 - 32 / 12 - 6) * 1.1)
    assert result["door_casing_needed"] == pytest.approx((16 + 32 / 12) * 1.1)
    assert result["window_casing_needed"] == pytest.approx(30.8)
    assert result["nails_needed"] == 1
    assert result["caulk_needed"] == 2
    assert result["cutting_list"] == {"Baseboard": 39, "Door Casing": 21, "Window Casing": 31}


def test_molding():
    result = _calc("molding", **ROOM)
    assert result["adjusted_length"] == pytest.approx(37.95)   # (44 - 3 - 8) x 1.15
    assert result["molding_needed"] == 5
    assert result["nails_needed"] == 4
    assert result["caulk_needed"] == 1
    assert result["total_cost"] == pytest.approx(52.5)
    assert result["cutting_list"][0] == "4 full 8-foot pieces"

    # openings larger than the room never make a negative run
    tiny = _calc("molding", room_length=4, room_width=4, doors=5, windows=5)
    assert tiny["adjusted_length"] == 0
    assert tiny["molding_needed"] == 0


def test_transition_strip():
    result = _calc("transition-strip", total_length=10)
    assert result["adjusted_length"] == pytest.approx(11)
    assert result["pieces_needed"] == 2
    assert result["total_cost"] == 24.0
    brass = _calc("transition-strip", total_length=10, material="brass")
    assert brass["total_cost"] == 70.0
