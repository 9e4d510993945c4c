"""
Hardwood calculator.

Boards by face area (inches), waste on the room area. Fastening supplies
depend on the install method: nail boxes per 100 sq ft, adhesive gallons
per 200 sq ft, or underlayment 1:1 with the adjusted area for floating.
"""

from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs
from ..geometry import sq_in_to_sq_ft


class HardwoodInputs(RoomInputs):
    board_width: float = Field(default=3.25, ge=1, description="Board width (in)")
    board_length: float = Field(default=84, ge=1, description="Board length (in)")
    waste_percentage: float = Field(default=10, ge=0, le=50)
    installation_type: Literal["nail-down", "glue-down", "floating"] = "nail-down"


class HardwoodCalculator(BaseCalculator):

    calculator_id = "hardwood"
    input_model = HardwoodInputs

    SQ_FT_PER_NAIL_BOX = 100
    SQ_FT_PER_ADHESIVE_GALLON = 200

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "adjusted_area": ("Area with Waste", "sq ft"),
        "boards_needed": ("Boards Needed", "boards"),
        "square_feet_needed": ("Square Feet to Order", "sq ft"),
        "nails_needed": ("Nails", "boxes"),
        "adhesive_needed": ("Adhesive", "gallons"),
        "underlayment_needed": ("Underlayment", "sq ft"),
    }

    def compute(self, inputs: HardwoodInputs) -> dict:
        room_area = self.room_area(inputs)
        adjusted_area = self.apply_waste(room_area, inputs.waste_percentage)
        board_area = sq_in_to_sq_ft(inputs.board_width * inputs.board_length)

        nails = adhesive = underlayment = None
        if inputs.installation_type == "nail-down":
            nails = self.units_needed(room_area, self.SQ_FT_PER_NAIL_BOX)
        elif inputs.installation_type == "glue-down":
            adhesive = self.units_needed(room_area, self.SQ_FT_PER_ADHESIVE_GALLON)
        else:
            underlayment = self.units_needed(adjusted_area)

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "boards_needed": self.units_needed(adjusted_area, board_area),
            "square_feet_needed": adjusted_area,
            "nails_needed": nails,
            "adhesive_needed": adhesive,
            "underlayment_needed": underlayment,
        }
