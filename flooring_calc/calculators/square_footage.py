"""
Square footage calculator — rectangle, square, circle, L-shape, triangle.

Only the dimensions for the chosen shape matter. Dimensions left out count
as zero, so a half-filled form gives a zero area instead of an error.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from .base import BaseCalculator
from ..formulas import calculate_square_footage


class SquareFootageInputs(BaseModel):
    shape: Literal["rectangle", "square", "circle", "l-shape", "triangle"] = "rectangle"
    length: Optional[float] = Field(default=None, ge=0)
    width: Optional[float] = Field(default=None, ge=0)
    radius: Optional[float] = Field(default=None, ge=0)
    length1: Optional[float] = Field(default=None, ge=0)
    width1: Optional[float] = Field(default=None, ge=0)
    length2: Optional[float] = Field(default=None, ge=0)
    width2: Optional[float] = Field(default=None, ge=0)
    base: Optional[float] = Field(default=None, ge=0)
    height: Optional[float] = Field(default=None, ge=0)


class SquareFootageCalculator(BaseCalculator):

    calculator_id = "square-footage"
    input_model = SquareFootageInputs

    RESULT_LABELS = {
        "area": ("Total Area", "sq ft"),
        "perimeter": ("Perimeter", "ft"),
        "area_in_yards": ("Square Yards", "sq yd"),
        "area_in_inches": ("Square Inches", "sq in"),
        "calculation": ("Calculation", ""),
    }

    def compute(self, inputs: SquareFootageInputs) -> dict:
        return calculate_square_footage(**inputs.model_dump())

    def example_inputs(self) -> dict:
        return {"shape": "rectangle", "length": 12.0, "width": 10.0}
