"""
Shared formula tests.

Tests:
1-2.  Flooring cost
3-5.  Square footage by shape
6-7.  Waste percentage recommendation
8-9.  Tile requirements
10.   Zero dimensions give zero results
"""

import pytest

from flooring_calc.formulas import (
    calculate_flooring_cost,
    calculate_square_footage,
    calculate_tile_requirements,
    calculate_waste_percentage,
)


def test_flooring_cost_totals():
    result = calculate_flooring_cost(12, 10, 3.50, 2.00, 10, 100)
    assert result["base_area"] == 120
    assert result["adjusted_area"] == pytest.approx(132)
    assert result["material_total"] == pytest.approx(462)   # 132 * 3.50
    assert result["labor_total"] == pytest.approx(264)      # 132 * 2.00
    assert result["additional_total"] == 100
    assert result["grand_total"] == pytest.approx(826)
    assert result["cost_per_sq_ft"] == pytest.approx(826 / 120)


def test_flooring_cost_without_extras():
    result = calculate_flooring_cost(10, 10, 2, 0, 0)
    assert result["grand_total"] == pytest.approx(200)
    assert result["additional_total"] == 0


def test_square_footage_rectangle():
    result = calculate_square_footage("rectangle", length=12, width=10)
    assert result["area"] == 120
    assert result["perimeter"] == 44
    assert result["calculation"] == "12 ft × 10 ft = 120.00 sq ft"
    assert result["area_in_yards"] == pytest.approx(120 / 9)
    assert result["area_in_inches"] == 120 * 144


def test_square_footage_circle_and_triangle():
    circle = calculate_square_footage("circle", radius=5)
    assert circle["area"] == pytest.approx(78.54, abs=0.01)
    assert circle["perimeter"] == pytest.approx(31.416, abs=0.001)
    triangle = calculate_square_footage("triangle", base=10, height=6)
    assert triangle["area"] == 30
    assert triangle["perimeter"] == 0


def test_square_footage_l_shape():
    result = calculate_square_footage("l-shape", length1=10, width1=8, length2=6, width2=4)
    assert result["area"] == 104
    assert result["perimeter"] == 0
    assert result["calculation"] == "(10 × 8) + (6 × 4) = 104.00 sq ft"


def test_waste_percentage_simple_room():
    result = calculate_waste_percentage("simple", "tile", "straight", "rectangular")
    assert result["recommended_waste"] == 7   # 5 base + 2 tile
    assert result["min_waste"] == 5           # never below 5
    assert result["max_waste"] == 12
    assert len(result["factors"]) == 3
    assert "7%" in result["explanation"]


def test_waste_percentage_is_clamped():
    result = calculate_waste_percentage("complex", "hardwood", "pattern", "irregular")
    # 5 + 10 + 3 + 15 + 5 = 38 -> clamped to 30
    assert result["recommended_waste"] == 30
    assert result["min_waste"] == 27
    assert result["max_waste"] == 35
    assert "Irregular room shape" in result["factors"]


def test_tile_requirements():
    result = calculate_tile_requirements(12, 10, 12, 12, 0.125, 10)
    assert result["room_area"] == 120
    assert result["tile_area"] == 1.0
    assert result["tiles_needed"] == 120
    assert result["tiles_with_waste"] == 132
    assert result["grout_needed"] == 6       # 120 * 0.05 lbs
    assert result["adhesive_needed"] == 3    # 120 / 50 -> 2.4 -> 3


def test_tile_requirements_large_tile():
    result = calculate_tile_requirements(12, 10, 24, 12, waste_percentage=15)
    assert result["tile_area"] == 2.0
    assert result["tiles_needed"] == 60
    assert result["tiles_with_waste"] == 69


def test_zero_dimensions_give_zero_results():
    cost = calculate_flooring_cost(0, 0, 3, 2, 10)
    assert cost["base_area"] == 0
    assert cost["grand_total"] == 0
    assert cost["cost_per_sq_ft"] == 0

    area = calculate_square_footage("rectangle")
    assert area["area"] == 0

    tiles = calculate_tile_requirements(0, 0, 0, 0)
    assert tiles["tiles_needed"] == 0
    assert tiles["tiles_with_waste"] == 0
