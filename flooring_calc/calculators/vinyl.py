"""
Vinyl calculator — LVT, LVP and sheet vinyl.

Plank types count planks on the adjusted area. Sheet vinyl counts linear
feet along the room length and rolls across its width.
"""

from typing import Literal, Optional

from pydantic import Field

from .base import BaseCalculator, RoomInputs
from ..geometry import sq_in_to_sq_ft


class VinylInputs(RoomInputs):
    vinyl_type: Literal["lvt", "lvp", "sheet"] = "lvt"
    plank_width: Optional[float] = Field(default=6, ge=1, description="Plank width (in)")
    plank_length: Optional[float] = Field(default=48, ge=1, description="Plank length (in)")
    roll_width: Optional[float] = Field(default=12, ge=1, description="Roll width (ft)")
    waste_percentage: float = Field(default=10, ge=0, le=50)


class VinylCalculator(BaseCalculator):

    calculator_id = "vinyl"
    input_model = VinylInputs

    DEFAULT_PLANK_WIDTH_IN = 6
    DEFAULT_PLANK_LENGTH_IN = 48
    DEFAULT_ROLL_WIDTH_FT = 12

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "adjusted_area": ("Area with Waste", "sq ft"),
        "planks_needed": ("Planks Needed", "planks"),
        "linear_feet_needed": ("Linear Feet", "ft"),
        "rolls_needed": ("Rolls Needed", "rolls"),
        "square_feet_needed": ("Square Feet to Order", "sq ft"),
        "underlayment_needed": ("Underlayment", "sq ft"),
        "molding_needed": ("Molding", "ft"),
    }

    def compute(self, inputs: VinylInputs) -> dict:
        room_area = self.room_area(inputs)
        adjusted_area = self.apply_waste(room_area, inputs.waste_percentage)
        perimeter = self.room_perimeter(inputs)

        planks = rolls = linear_feet = None
        if inputs.vinyl_type in ("lvt", "lvp"):
            plank_area = sq_in_to_sq_ft(
                (inputs.plank_width or self.DEFAULT_PLANK_WIDTH_IN)
                * (inputs.plank_length or self.DEFAULT_PLANK_LENGTH_IN)
            )
            planks = self.units_needed(adjusted_area, plank_area)
        else:
            roll_width = inputs.roll_width or self.DEFAULT_ROLL_WIDTH_FT
            linear_feet = self.units_needed(inputs.room_length)
            rolls = self.units_needed(inputs.room_width, roll_width)

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "planks_needed": planks,
            "square_feet_needed": adjusted_area,
            "rolls_needed": rolls,
            "linear_feet_needed": linear_feet,
            "underlayment_needed": self.units_needed(adjusted_area),
            "molding_needed": self.units_needed(perimeter),
        }
