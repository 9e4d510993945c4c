"""
Floor load calculator.

Dead load is the flooring weight plus 10 psf for the structure itself. Live
load comes from the occupancy class. The sum, plus any extra load, is scaled
by the safety factor.
"""

from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs


class FloorLoadInputs(RoomInputs):
    occupancy_type: Literal["residential", "office", "retail", "warehouse", "industrial"] = "residential"
    flooring_weight: float = Field(default=4, ge=1, le=20, description="Flooring weight (psf)")
    additional_load: float = Field(default=0, ge=0, description="Additional load (psf)")
    safety_factor: float = Field(default=2, ge=1.5, le=3)


class FloorLoadCalculator(BaseCalculator):

    calculator_id = "floor-load"
    input_model = FloorLoadInputs

    STRUCTURE_DEAD_LOAD_PSF = 10
    # psf
    LIVE_LOADS = {"residential": 40, "office": 50, "retail": 75, "warehouse": 125, "industrial": 150}
    # (threshold psf, requirement), highest first
    REQUIREMENTS = [
        (150, "Reinforced framing required"),
        (100, "Enhanced structural support recommended"),
    ]
    STANDARD_REQUIREMENT = "Standard construction adequate"

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "dead_load": ("Dead Load", "psf"),
        "live_load": ("Live Load", "psf"),
        "total_load": ("Design Load", "psf"),
        "total_room_load": ("Total Room Load", "lbs"),
        "structural_requirements": ("Structural Requirement", ""),
    }

    def requirement_for(self, total_load: float) -> str:
        for threshold, requirement in self.REQUIREMENTS:
            if total_load > threshold:
                return requirement
        return self.STANDARD_REQUIREMENT

    def compute(self, inputs: FloorLoadInputs) -> dict:
        room_area = self.room_area(inputs)
        dead_load = inputs.flooring_weight + self.STRUCTURE_DEAD_LOAD_PSF
        live_load = self.lookup(self.LIVE_LOADS, inputs.occupancy_type, "occupancy type")
        total_load = (dead_load + live_load + inputs.additional_load) * inputs.safety_factor

        return {
            "room_area": room_area,
            "dead_load": dead_load,
            "live_load": live_load,
            "total_load": total_load,
            "load_per_sq_ft": total_load,
            "total_room_load": total_load * room_area,
            "structural_requirements": self.requirement_for(total_load),
            "recommendations": [
                "Verify with structural engineer for critical applications",
                "Check local building codes for specific requirements",
                "Consider point loads from heavy equipment",
                "Ensure adequate bearing surfaces at supports",
            ],
        }
