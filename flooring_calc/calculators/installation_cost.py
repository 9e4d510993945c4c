"""Flooring installation cost — labor by material, plus optional tear-out and subfloor work."""

from typing import Literal

from .base import BaseCalculator, RoomInputs
from ..geometry import safe_divide


class InstallationCostInputs(RoomInputs):
    flooring_type: Literal["tile", "hardwood", "vinyl", "laminate", "carpet", "stone"] = "tile"
    room_complexity: Literal["simple", "moderate", "complex"] = "simple"
    region: Literal["low-cost", "average", "high-cost"] = "average"
    include_removal: bool = False
    include_subfloor: bool = False


class InstallationCostCalculator(BaseCalculator):

    calculator_id = "installation-cost"
    input_model = InstallationCostInputs

    # $/sq ft
    LABOR_RATES = {
        "tile": 8.50, "hardwood": 12.00, "vinyl": 6.00,
        "laminate": 4.50, "carpet": 3.50, "stone": 15.00,
    }
    COMPLEXITY_MULTIPLIERS = {"simple": 1.0, "moderate": 1.3, "complex": 1.6}
    REGION_MULTIPLIERS = {"low-cost": 0.8, "average": 1.0, "high-cost": 1.4}
    REMOVAL_RATE = 2.50
    SUBFLOOR_RATE = 4.00

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "base_labor_rate": ("Base Labor Rate", "$"),
        "complexity_multiplier": ("Complexity Factor", "×"),
        "region_multiplier": ("Regional Factor", "×"),
        "installation_cost": ("Installation", "$"),
        "removal_cost": ("Old Floor Removal", "$"),
        "subfloor_cost": ("Subfloor Prep", "$"),
        "total_cost": ("Total Cost", "$"),
        "cost_per_sq_ft": ("Cost per Sq Ft", "$"),
    }

    def compute(self, inputs: InstallationCostInputs) -> dict:
        area = self.room_area(inputs)
        rate = self.lookup(self.LABOR_RATES, inputs.flooring_type, "flooring type")
        complexity = self.lookup(self.COMPLEXITY_MULTIPLIERS, inputs.room_complexity, "room complexity")
        region = self.lookup(self.REGION_MULTIPLIERS, inputs.region, "region")

        installation = area * rate * complexity * region
        removal = area * self.REMOVAL_RATE * region if inputs.include_removal else 0.0
        subfloor = area * self.SUBFLOOR_RATE * region if inputs.include_subfloor else 0.0
        total = installation + removal + subfloor

        return {
            "room_area": area,
            "base_labor_rate": rate,
            "complexity_multiplier": complexity,
            "region_multiplier": region,
            "installation_cost": installation,
            "removal_cost": removal,
            "subfloor_cost": subfloor,
            "total_cost": total,
            "cost_per_sq_ft": safe_divide(total, area),
        }
