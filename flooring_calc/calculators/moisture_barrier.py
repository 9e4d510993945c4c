"""
Moisture barrier calculator.

Seam tape covers the perimeter plus an estimated 20 ft of internal seam for
every full 200 sq ft of barrier.
"""

import math
from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs

BarrierType = Literal["plastic-sheeting", "vapor-retarder", "membrane", "primer-sealer"]


class MoistureBarrierInputs(RoomInputs):
    subfloor_type: Literal["concrete", "crawlspace", "basement", "slab"] = "concrete"
    moisture_level: Literal["low", "moderate", "high", "extreme"] = "moderate"
    barrier_type: BarrierType = "vapor-retarder"
    waste_percentage: float = Field(default=10, ge=0, le=50)
    include_seam_tape: bool = True
    include_primer: bool = False


class MoistureBarrierCalculator(BaseCalculator):

    calculator_id = "moisture-barrier"
    input_model = MoistureBarrierInputs

    # sq ft per roll
    ROLL_COVERAGE = {"plastic-sheeting": 1000, "vapor-retarder": 500, "membrane": 200, "primer-sealer": 300}
    ROLL_PRICES = {"plastic-sheeting": 125.0, "vapor-retarder": 285.0, "membrane": 450.0, "primer-sealer": 350.0}
    SQ_FT_PER_SEAM = 200
    SEAM_LENGTH_FT = 20
    FT_PER_TAPE_ROLL = 50
    TAPE_ROLL_PRICE = 45.0
    SQ_FT_PER_PRIMER_GALLON = 200
    PRIMER_PRICE_GALLON = 65.0

    MOISTURE_RATINGS = {
        "low": "Standard protection adequate",
        "moderate": "Enhanced vapor retarder recommended",
        "high": "Premium membrane barrier required",
        "extreme": "Multiple barrier system needed",
    }

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "adjusted_area": ("Area with Waste", "sq ft"),
        "rolls_needed": ("Barrier Rolls", "rolls"),
        "seam_tape_needed": ("Seam Tape", "rolls"),
        "primer_needed": ("Primer", "gallons"),
        "total_cost": ("Total Cost", "$"),
        "moisture_rating": ("Recommendation", ""),
    }

    def compute(self, inputs: MoistureBarrierInputs) -> dict:
        room_area = self.room_area(inputs)
        adjusted_area = self.apply_waste(room_area, inputs.waste_percentage)
        rolls = self.units_needed(
            adjusted_area, self.lookup(self.ROLL_COVERAGE, inputs.barrier_type, "barrier type"))

        seam_tape = 0
        if inputs.include_seam_tape:
            internal_seams = math.floor(adjusted_area / self.SQ_FT_PER_SEAM) * self.SEAM_LENGTH_FT
            seam_tape = self.units_needed(
                self.room_perimeter(inputs) + internal_seams, self.FT_PER_TAPE_ROLL)
        primer = self.units_needed(room_area, self.SQ_FT_PER_PRIMER_GALLON) if inputs.include_primer else 0

        total_cost = (
            rolls * self.ROLL_PRICES[inputs.barrier_type]
            + seam_tape * self.TAPE_ROLL_PRICE
            + primer * self.PRIMER_PRICE_GALLON
        )

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "rolls_needed": rolls,
            "seam_tape_needed": seam_tape,
            "primer_needed": primer,
            "total_cost": total_cost,
            "installation_tips": self._tips(inputs),
            "moisture_rating": self.lookup(self.MOISTURE_RATINGS, inputs.moisture_level, "moisture level"),
        }

    def _tips(self, inputs: MoistureBarrierInputs) -> list:
        tips = [
            "Clean and prepare subfloor before installation",
            "Overlap seams by minimum 6 inches",
            "Seal all penetrations with appropriate sealant",
        ]
        if inputs.subfloor_type == "concrete":
            tips.append("Test concrete moisture levels before installation")
        if inputs.moisture_level in ("high", "extreme"):
            tips.append("Consider professional moisture testing")
            tips.append("Install dehumidification if needed")
        if inputs.barrier_type == "membrane":
            tips.append("Use compatible adhesives for membrane systems")
        tips.append("Allow proper cure time before flooring installation")
        return tips
