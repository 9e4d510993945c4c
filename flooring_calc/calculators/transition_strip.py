"""Transition strip calculator — 8 ft lengths priced per piece by material."""

from typing import Literal

from pydantic import BaseModel, Field

from .base import BaseCalculator


class TransitionStripInputs(BaseModel):
    number_of_transitions: int = Field(default=1, ge=1)
    transition_type: Literal["t-molding", "reducer", "threshold", "quarter-round", "stair-nose"] = "t-molding"
    material: Literal["oak", "maple", "cherry", "vinyl", "aluminum", "brass"] = "oak"
    total_length: float = Field(ge=0.1, description="Total length across all doorways (ft)")
    waste_percentage: float = Field(default=10, ge=5, le=20)


class TransitionStripCalculator(BaseCalculator):

    calculator_id = "transition-strip"
    input_model = TransitionStripInputs

    PIECE_LENGTH_FT = 8
    PIECE_PRICES = {
        "oak": 12.0, "maple": 14.0, "cherry": 18.0, "vinyl": 8.0, "aluminum": 25.0, "brass": 35.0,
    }

    RESULT_LABELS = {
        "total_length": ("Total Length", "ft"),
        "adjusted_length": ("Length with Waste", "ft"),
        "pieces_needed": ("8 ft Pieces", "pieces"),
        "total_cost": ("Total Cost", "$"),
    }

    def compute(self, inputs: TransitionStripInputs) -> dict:
        adjusted_length = self.apply_waste(inputs.total_length, inputs.waste_percentage)
        pieces = self.units_needed(adjusted_length, self.PIECE_LENGTH_FT)
        return {
            "total_length": inputs.total_length,
            "adjusted_length": adjusted_length,
            "pieces_needed": pieces,
            "total_cost": pieces * self.lookup(self.PIECE_PRICES, inputs.material, "strip material"),
            "installation_tips": [
                "Measure exact length before ordering",
                "Account for expansion gaps at walls",
                "Pre-drill screw holes to prevent splitting",
                "Use appropriate fasteners for subfloor type",
            ],
        }
