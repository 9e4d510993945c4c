"""
Shared flooring formulas.

Pure functions over plain numbers. No validation happens here: missing
dimensions count as zero and flow through to zero-valued results. Schema
checks live in each calculator's input model.
"""

from .geometry import (
    circle_area,
    circle_circumference,
    l_shape_area,
    lookup,
    rectangle_area,
    rectangle_perimeter,
    safe_divide,
    sq_in_to_sq_ft,
    triangle_area,
    units_needed,
    with_waste,
    SQ_FT_PER_SQ_YD,
    SQ_IN_PER_SQ_FT,
)

SHAPES = ("rectangle", "square", "circle", "l-shape", "triangle")

# Waste percentage factors: (points added, description)
COMPLEXITY_WASTE = {
    "simple": (0, "Simple room layout"),
    "moderate": (5, "Moderate complexity with some cuts"),
    "complex": (10, "Complex room with many angles and cuts"),
}
MATERIAL_WASTE = {
    "tile": (2, "Ceramic/porcelain tile installation"),
    "hardwood": (3, "Hardwood flooring installation"),
    "vinyl": (1, "Vinyl flooring installation"),
    "laminate": (2, "Laminate flooring installation"),
    "carpet": (1, "Carpet installation"),
}
METHOD_WASTE = {
    "straight": (0, "Straight installation pattern"),
    "diagonal": (10, "Diagonal installation (+10% waste)"),
    "pattern": (15, "Complex pattern installation (+15% waste)"),
}
BASE_WASTE_PCT = 5
IRREGULAR_SHAPE_WASTE = 5
MIN_WASTE_PCT = 5
MAX_RECOMMENDED_WASTE_PCT = 30
MAX_WASTE_PCT = 35

GROUT_LBS_PER_SQ_FT = 0.05
SQ_FT_PER_ADHESIVE_BAG = 50


def _fmt_dim(value) -> str:
    # Mirrors how the inputs were typed: 12 stays "12", 12.5 stays "12.5"
    if value is None:
        return "0"
    return f"{value:g}"


def calculate_flooring_cost(length, width, material_cost, labor_cost,
                            waste_percentage, additional_costs=0) -> dict:
    """Material and labor priced on the waste-adjusted area, extras added flat."""
    base_area = rectangle_area(length, width)
    adjusted_area = with_waste(base_area, waste_percentage)
    material_total = adjusted_area * (material_cost or 0)
    labor_total = adjusted_area * (labor_cost or 0)
    additional_total = additional_costs or 0
    grand_total = material_total + labor_total + additional_total

    return {
        "base_area": base_area,
        "adjusted_area": adjusted_area,
        "material_total": material_total,
        "labor_total": labor_total,
        "additional_total": additional_total,
        "grand_total": grand_total,
        "cost_per_sq_ft": safe_divide(grand_total, base_area),
    }


def calculate_square_footage(shape, length=None, width=None, radius=None,
                             length1=None, width1=None, length2=None, width2=None,
                             base=None, height=None) -> dict:
    """
    Area of a single room shape, with the working shown as text.

    Perimeter is only defined for rectangles, squares and circles; L-shapes and
    triangles report 0.
    """
    perimeter = 0.0
    if shape in ("rectangle", "square"):
        area = rectangle_area(length, width)
        perimeter = rectangle_perimeter(length, width)
        calculation = f"{_fmt_dim(length)} ft × {_fmt_dim(width)} ft = {area:.2f} sq ft"
    elif shape == "circle":
        area = circle_area(radius)
        perimeter = circle_circumference(radius)
        calculation = f"π × {_fmt_dim(radius)}² = {area:.2f} sq ft"
    elif shape == "l-shape":
        area = l_shape_area(length1, width1, length2, width2)
        calculation = "(%s × %s) + (%s × %s) = %.2f sq ft" % (
            _fmt_dim(length1), _fmt_dim(width1), _fmt_dim(length2), _fmt_dim(width2), area)
    elif shape == "triangle":
        area = triangle_area(base, height)
        calculation = f"0.5 × {_fmt_dim(base)} × {_fmt_dim(height)} = {area:.2f} sq ft"
    else:
        raise ValueError(f"Unknown shape: {shape!r}. Expected one of: {list(SHAPES)}")

    return {
        "area": area,
        "perimeter": perimeter,
        "calculation": calculation,
        "area_in_yards": area / SQ_FT_PER_SQ_YD,
        "area_in_inches": area * SQ_IN_PER_SQ_FT,
    }


def calculate_waste_percentage(room_complexity, material_type,
                               installation_method, room_shape) -> dict:
    """Recommended waste factor built up from project conditions, clamped to 5-30%."""
    waste = BASE_WASTE_PCT
    factors = []

    for table, key, name in (
        (COMPLEXITY_WASTE, room_complexity, "room complexity"),
        (MATERIAL_WASTE, material_type, "material type"),
        (METHOD_WASTE, installation_method, "installation method"),
    ):
        points, description = lookup(table, key, name)
        waste += points
        factors.append(description)

    if room_shape == "irregular":
        waste += IRREGULAR_SHAPE_WASTE
        factors.append("Irregular room shape")

    recommended = min(max(waste, MIN_WASTE_PCT), MAX_RECOMMENDED_WASTE_PCT)
    minimum = max(recommended - 3, MIN_WASTE_PCT)
    maximum = min(recommended + 5, MAX_WASTE_PCT)

    return {
        "recommended_waste": recommended,
        "min_waste": minimum,
        "max_waste": maximum,
        "explanation": (
            f"Based on your project parameters, we recommend {recommended}% waste factor. "
            "This accounts for cuts, breakage, and future repairs."
        ),
        "factors": factors,
    }


def calculate_tile_requirements(room_length, room_width, tile_length, tile_width,
                                grout_width=0.0, waste_percentage=0.0) -> dict:
    """
    Tile count for a rectangular room. Tile dimensions are in inches.

    Grout and adhesive are rough per-area estimates; grout_width is accepted
    for display only.
    """
    room_area = rectangle_area(room_length, room_width)
    tile_area = sq_in_to_sq_ft(rectangle_area(tile_length, tile_width))
    tiles_needed = units_needed(room_area, tile_area)
    tiles_with_waste = units_needed(with_waste(tiles_needed, waste_percentage), 1)

    return {
        "room_area": room_area,
        "tile_area": tile_area,
        "tiles_needed": tiles_needed,
        "tiles_with_waste": tiles_with_waste,
        "grout_needed": units_needed(room_area * GROUT_LBS_PER_SQ_FT, 1),
        "adhesive_needed": units_needed(room_area, SQ_FT_PER_ADHESIVE_BAG),
    }
