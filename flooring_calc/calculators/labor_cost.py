"""
Flooring labor cost calculator.

Hours = area × hours-per-sq-ft for the material × complexity. Cost starts
from the installer's hourly rate, then timeline, crew and regional
multipliers apply. Duration spreads the hours across the crew's effective
8-hour days.
"""

import math
from typing import Literal

from .base import BaseCalculator, RoomInputs
from ..geometry import safe_divide


class LaborCostInputs(RoomInputs):
    flooring_type: Literal["tile", "hardwood", "vinyl", "laminate", "carpet", "stone", "concrete"] = "tile"
    installation_complexity: Literal["basic", "standard", "complex", "premium"] = "standard"
    project_timeline: Literal["standard", "rush", "weekend"] = "standard"
    crew_size: Literal["1-person", "2-person", "3-person", "crew"] = "2-person"
    region: Literal["rural", "suburban", "urban", "metro"] = "suburban"
    experience_level: Literal["apprentice", "journeyman", "master", "specialist"] = "journeyman"


def format_duration(days: int) -> str:
    """1 day, 2-3 days, then whole 5-day weeks."""
    if days <= 1:
        return "1 day"
    if days <= 3:
        return f"{days} days"
    weeks = math.ceil(days / 5)
    return f"{weeks} week{'s' if weeks > 1 else ''}"


class LaborCostCalculator(BaseCalculator):

    calculator_id = "labor-cost"
    input_model = LaborCostInputs

    HOURLY_RATES = {"apprentice": 25, "journeyman": 45, "master": 65, "specialist": 85}
    # Reported only; the hourly rate already reflects experience
    EXPERIENCE_MULTIPLIERS = {"apprentice": 0.8, "journeyman": 1.0, "master": 1.3, "specialist": 1.6}
    HOURS_PER_SQ_FT = {
        "tile": 0.45, "hardwood": 0.35, "vinyl": 0.25, "laminate": 0.20,
        "carpet": 0.15, "stone": 0.60, "concrete": 0.30,
    }
    COMPLEXITY_MULTIPLIERS = {"basic": 0.8, "standard": 1.0, "complex": 1.4, "premium": 1.8}
    TIMELINE_MULTIPLIERS = {"standard": 1.0, "rush": 1.5, "weekend": 1.3}
    CREW_MULTIPLIERS = {"1-person": 1.0, "2-person": 0.85, "3-person": 0.75, "crew": 0.70}
    CREW_SIZES = {"1-person": 1, "2-person": 2, "3-person": 3, "crew": 4}
    REGION_MULTIPLIERS = {"rural": 0.75, "suburban": 1.0, "urban": 1.25, "metro": 1.6}
    WORKING_HOURS_PER_DAY = 8

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "base_hourly_rate": ("Hourly Rate", "$"),
        "hours_required": ("Labor Hours", "hours"),
        "complexity_multiplier": ("Complexity Factor", "×"),
        "timeline_multiplier": ("Timeline Factor", "×"),
        "crew_multiplier": ("Crew Factor", "×"),
        "region_multiplier": ("Regional Factor", "×"),
        "experience_multiplier": ("Experience Factor", "×"),
        "subtotal": ("Subtotal", "$"),
        "total_labor_cost": ("Total Labor Cost", "$"),
        "cost_per_sq_ft": ("Cost per Sq Ft", "$"),
        "recommended_duration": ("Estimated Duration", ""),
    }

    def compute(self, inputs: LaborCostInputs) -> dict:
        area = self.room_area(inputs)
        rate = self.lookup(self.HOURLY_RATES, inputs.experience_level, "experience level")
        complexity = self.lookup(
            self.COMPLEXITY_MULTIPLIERS, inputs.installation_complexity, "installation complexity")
        timeline = self.lookup(self.TIMELINE_MULTIPLIERS, inputs.project_timeline, "project timeline")
        crew = self.lookup(self.CREW_MULTIPLIERS, inputs.crew_size, "crew size")
        region = self.lookup(self.REGION_MULTIPLIERS, inputs.region, "region")

        hours = area * self.lookup(self.HOURS_PER_SQ_FT, inputs.flooring_type, "flooring type") * complexity
        subtotal = hours * rate
        total = subtotal * timeline * crew * region

        effective_hours_per_day = self.WORKING_HOURS_PER_DAY * self.CREW_SIZES[inputs.crew_size] * crew
        days = self.units_needed(hours, effective_hours_per_day)

        return {
            "room_area": area,
            "base_hourly_rate": rate,
            "hours_required": hours,
            "complexity_multiplier": complexity,
            "timeline_multiplier": timeline,
            "crew_multiplier": crew,
            "region_multiplier": region,
            "experience_multiplier": self.EXPERIENCE_MULTIPLIERS[inputs.experience_level],
            "subtotal": subtotal,
            "total_labor_cost": total,
            "cost_per_sq_ft": safe_divide(total, area),
            "days_required": days,
            "recommended_duration": format_duration(days),
        }
