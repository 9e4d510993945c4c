"""
Molding calculator — sold in 8 ft sticks.

Each door takes 3 ft off the run and each window 4 ft; the remaining run is
never negative.
"""

import math
from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs


class MoldingInputs(RoomInputs):
    molding_type: Literal[
        "quarter-round", "shoe-molding", "crown-molding", "chair-rail", "wainscoting"
    ] = "quarter-round"
    material: Literal["pine", "oak", "maple", "mdf", "pvc"] = "pine"
    doors: int = Field(default=1, ge=0)
    windows: int = Field(default=2, ge=0)
    waste_percentage: float = Field(default=15, ge=10, le=25)


class MoldingCalculator(BaseCalculator):

    calculator_id = "molding"
    input_model = MoldingInputs

    PIECE_LENGTH_FT = 8
    DOOR_DEDUCTION_FT = 3
    WINDOW_DEDUCTION_FT = 4
    FT_PER_LB_NAILS = 12
    FT_PER_CAULK_TUBE = 350

    # $/8 ft piece
    PIECE_PRICES = {"pine": 2.85, "oak": 5.25, "maple": 6.15, "mdf": 1.95, "pvc": 4.35}
    NAIL_PRICE_LB = 8.50
    CAULK_PRICE_TUBE = 4.25

    RESULT_LABELS = {
        "total_perimeter": ("Room Perimeter", "ft"),
        "adjusted_length": ("Molding Run with Waste", "ft"),
        "molding_needed": ("8 ft Pieces", "pieces"),
        "nails_needed": ("Finish Nails", "lbs"),
        "caulk_needed": ("Caulk", "tubes"),
        "total_cost": ("Total Cost", "$"),
    }

    def compute(self, inputs: MoldingInputs) -> dict:
        perimeter = self.room_perimeter(inputs)
        net_run = max(
            perimeter
            - inputs.doors * self.DOOR_DEDUCTION_FT
            - inputs.windows * self.WINDOW_DEDUCTION_FT,
            0,
        )
        adjusted_length = self.apply_waste(net_run, inputs.waste_percentage)

        pieces = self.units_needed(adjusted_length, self.PIECE_LENGTH_FT)
        nails = self.units_needed(adjusted_length, self.FT_PER_LB_NAILS)
        caulk = self.units_needed(adjusted_length, self.FT_PER_CAULK_TUBE)
        total_cost = (
            pieces * self.lookup(self.PIECE_PRICES, inputs.material, "molding material")
            + nails * self.NAIL_PRICE_LB
            + caulk * self.CAULK_PRICE_TUBE
        )

        full_pieces = math.floor(adjusted_length / self.PIECE_LENGTH_FT)
        remainder = adjusted_length % self.PIECE_LENGTH_FT

        return {
            "total_perimeter": perimeter,
            "adjusted_length": adjusted_length,
            "molding_needed": pieces,
            "nails_needed": nails,
            "caulk_needed": caulk,
            "total_cost": total_cost,
            "cutting_list": [
                f"{full_pieces} full 8-foot pieces",
                f"1 piece at {remainder:.1f} feet",
                "Cut 45° miters for inside corners",
                "Cut 90° joints for outside corners",
            ],
        }
