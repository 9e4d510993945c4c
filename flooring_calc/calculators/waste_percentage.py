"""Waste percentage calculator — recommended overage from room and install conditions."""

from typing import Literal

from pydantic import BaseModel

from .base import BaseCalculator
from ..formulas import calculate_waste_percentage


class WastePercentageInputs(BaseModel):
    room_complexity: Literal["simple", "moderate", "complex"] = "simple"
    material_type: Literal["tile", "hardwood", "vinyl", "carpet", "laminate"] = "tile"
    installation_method: Literal["straight", "diagonal", "pattern"] = "straight"
    room_shape: Literal["rectangular", "irregular"] = "rectangular"


class WastePercentageCalculator(BaseCalculator):

    calculator_id = "waste-percentage"
    input_model = WastePercentageInputs

    RESULT_LABELS = {
        "recommended_waste": ("Recommended Waste", "%"),
        "min_waste": ("Minimum Waste", "%"),
        "max_waste": ("Maximum Waste", "%"),
        "explanation": ("Explanation", ""),
    }

    def compute(self, inputs: WastePercentageInputs) -> dict:
        return calculate_waste_percentage(**inputs.model_dump())
