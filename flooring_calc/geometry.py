# Room geometry and material-quantity helpers shared by every calculator.
# Lengths in feet and areas in square feet unless a name says otherwise.

import math

SQ_IN_PER_SQ_FT = 144.0
SQ_FT_PER_SQ_YD = 9.0
IN_PER_FT = 12.0
CU_IN_PER_CU_FT = 1728.0


def _num(value) -> float:
    """Missing inputs count as zero."""
    return float(value) if value is not None else 0.0


def rectangle_area(length, width) -> float:
    return _num(length) * _num(width)


def rectangle_perimeter(length, width) -> float:
    return 2 * (_num(length) + _num(width))


def circle_area(radius) -> float:
    return math.pi * _num(radius) ** 2


def circle_circumference(radius) -> float:
    return 2 * math.pi * _num(radius)


def triangle_area(base, height) -> float:
    return 0.5 * _num(base) * _num(height)


def l_shape_area(length1, width1, length2, width2) -> float:
    """L-shaped room as two non-overlapping rectangles."""
    return rectangle_area(length1, width1) + rectangle_area(length2, width2)


def with_waste(quantity, waste_pct) -> float:
    """quantity * (1 + waste%/100)."""
    return _num(quantity) * (1 + _num(waste_pct) / 100.0)


def units_needed(quantity, coverage) -> int:
    """
    Whole units (boxes, rolls, bags) to cover a quantity. Always rounds up,
    so units * coverage >= quantity. Zero coverage yields zero units.
    """
    coverage = _num(coverage)
    if coverage <= 0:
        return 0
    # 100 * 1.1 == 110.00000000000001; float noise must not buy an extra box
    return math.ceil(round(_num(quantity) / coverage, 9))


def safe_divide(numerator, denominator) -> float:
    denominator = _num(denominator)
    if denominator == 0:
        return 0.0
    return _num(numerator) / denominator


def sq_in_to_sq_ft(area_sq_in) -> float:
    return _num(area_sq_in) / SQ_IN_PER_SQ_FT


def inches_to_feet(inches) -> float:
    return _num(inches) / IN_PER_FT


def lookup(table: dict, key, name: str):
    """Fixed lookup-table access. Unknown keys are an input error, not a zero."""
    try:
        return table[key]
    except KeyError:
        raise ValueError(
            f"Unknown {name}: {key!r}. Expected one of: {list(table.keys())}"
        ) from None
