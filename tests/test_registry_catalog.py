"""
Registry + catalog tests.

Tests:
1-3.  Registry lookups
4-6.  Every calculator runs on its own example input
7-9.  Catalog entries and categories
"""

import pytest

from flooring_calc.calculators.base import BaseCalculator, CalculatorInputError
from flooring_calc.calculators.registry import (
    CALCULATOR_REGISTRY,
    get_calculator,
    has_calculator,
    list_calculators,
)
from flooring_calc.catalog import (
    CALCULATOR_CATALOG,
    CATEGORIES,
    get_calculators_by_category,
    get_catalog_entry,
)


# ============================================================
# Registry
# ============================================================

def test_registry_has_all_calculators():
    calcs = list_calculators()
    assert len(calcs) == 30
    for calculator_id in ["flooring-cost", "tile", "carpet", "multi-room", "floor-joist"]:
        assert calculator_id in calcs
        assert has_calculator(calculator_id)


def test_get_calculator_returns_instance_with_matching_id():
    for calculator_id in list_calculators():
        calc = get_calculator(calculator_id)
        assert isinstance(calc, BaseCalculator)
        assert calc.calculator_id == calculator_id


def test_get_calculator_unknown_id():
    assert not has_calculator("bamboo")
    with pytest.raises(ValueError, match="Available"):
        get_calculator("bamboo")


# ============================================================
# Example inputs
# ============================================================

@pytest.mark.parametrize("calculator_id", sorted(CALCULATOR_REGISTRY))
def test_calculator_accepts_example_inputs(calculator_id):
    """Default-valued input validates and produces a result with every labelled key."""
    calc = get_calculator(calculator_id)
    result = calc.calculate(calc.example_inputs())
    assert isinstance(result, dict)
    for key in calc.RESULT_LABELS:
        assert key in result, f"{calculator_id} missing {key}"
    assert calc.result_cards(result), f"{calculator_id} rendered no cards"


@pytest.mark.parametrize("calculator_id", sorted(CALCULATOR_REGISTRY))
def test_computed_areas_are_non_negative(calculator_id):
    calc = get_calculator(calculator_id)
    result = calc.calculate(calc.example_inputs())
    for key, value in result.items():
        if "area" in key and isinstance(value, (int, float)):
            assert value >= 0, f"{calculator_id}.{key} = {value}"


def test_unknown_enum_value_rejected_everywhere():
    """Every closed-choice field refuses a value outside its options."""
    checked = 0
    for calculator_id in list_calculators():
        calc = get_calculator(calculator_id)
        example = calc.example_inputs()
        for name, value in example.items():
            if isinstance(value, str):
                with pytest.raises(CalculatorInputError):
                    calc.calculate({**example, name: "not-an-option"})
                checked += 1
    assert checked > 50


# ============================================================
# Catalog
# ============================================================

def test_catalog_matches_registry():
    assert set(CALCULATOR_CATALOG) == set(CALCULATOR_REGISTRY)
    for calculator_id, entry in CALCULATOR_CATALOG.items():
        assert entry["category"] in CATEGORIES
        assert entry["route"].startswith("/calculator/")
        assert entry["title"]
        assert entry["keywords"]


def test_calculators_by_category():
    assert len(get_calculators_by_category()) == 30
    counts = {c: len(get_calculators_by_category(c)) for c in CATEGORIES}
    assert counts == {"basic": 3, "materials": 14, "room-shapes": 3, "costs": 2, "advanced": 8}
    ids = [e["id"] for e in get_calculators_by_category("room-shapes")]
    assert ids == ["l-shaped-room", "circular-room", "multi-room"]
    with pytest.raises(ValueError, match="Unknown category"):
        get_calculators_by_category("outdoor")


def test_get_catalog_entry():
    entry = get_catalog_entry("tile")
    assert entry["id"] == "tile"
    assert entry["category"] == "materials"
    with pytest.raises(ValueError):
        get_catalog_entry("bamboo")
