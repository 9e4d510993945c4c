"""Acoustic underlayment calculator — 100 sq ft rolls, 50 ft rolls of seam tape."""

from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs


class AcousticUnderlaymentInputs(RoomInputs):
    flooring_type: Literal["laminate", "hardwood", "vinyl", "tile"] = "laminate"
    sound_rating: Literal["standard", "enhanced", "premium"] = "standard"
    building_type: Literal["single-family", "condo", "apartment", "commercial"] = "single-family"
    waste_percentage: float = Field(default=10, ge=5, le=15)


class AcousticUnderlaymentCalculator(BaseCalculator):

    calculator_id = "acoustic-underlayment"
    input_model = AcousticUnderlaymentInputs

    SQ_FT_PER_ROLL = 100
    FT_PER_TAPE_ROLL = 50
    TAPE_ROLL_PRICE = 35.0
    # $/sq ft
    RATING_PRICES = {"standard": 1.25, "enhanced": 2.15, "premium": 3.85}
    SOUND_REDUCTION = {
        "standard": "IIC 65, STC 66",
        "enhanced": "IIC 72, STC 71",
        "premium": "IIC 74, STC 73",
    }

    TIPS = [
        "Install perpendicular to flooring direction",
        "Butt seams tightly without overlapping",
        "Use acoustic tape on all seams",
        "Trim excess at walls with sharp knife",
        "Do not cover with plastic vapor barrier",
        "Install flooring immediately after underlayment",
    ]

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "adjusted_area": ("Area with Waste", "sq ft"),
        "rolls_needed": ("Underlayment Rolls", "rolls"),
        "acoustic_tape": ("Acoustic Tape", "rolls"),
        "sound_reduction": ("Sound Rating", ""),
        "total_cost": ("Total Cost", "$"),
    }

    def compute(self, inputs: AcousticUnderlaymentInputs) -> dict:
        room_area = self.room_area(inputs)
        adjusted_area = self.apply_waste(room_area, inputs.waste_percentage)
        tape_rolls = self.units_needed(self.room_perimeter(inputs), self.FT_PER_TAPE_ROLL)
        price = self.lookup(self.RATING_PRICES, inputs.sound_rating, "sound rating")

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "rolls_needed": self.units_needed(adjusted_area, self.SQ_FT_PER_ROLL),
            "acoustic_tape": tape_rolls,
            "total_cost": adjusted_area * price + tape_rolls * self.TAPE_ROLL_PRICE,
            "sound_reduction": self.SOUND_REDUCTION[inputs.sound_rating],
            "installation_tips": list(self.TIPS),
        }
