"""
Baseboard and trim calculator.

Baseboard runs the room perimeter less door and window openings. Crown
molding runs the full perimeter. Casing wraps each door (two legs at ceiling
height plus a head) and each window (a 4 ft tall frame, all four sides).
"""

import math
from typing import Literal, Optional

from pydantic import Field

from .base import BaseCalculator, RoomInputs
from ..geometry import inches_to_feet

BaseboardHeight = Literal["3-inch", "4-inch", "5-inch", "6-inch", "custom"]


class BaseboardTrimInputs(RoomInputs):
    ceiling_height: float = Field(default=8, ge=6, description="Ceiling height (ft)")
    door_width: float = Field(default=32, ge=24, description="Door width (in)")
    number_of_doors: int = Field(default=1, ge=0, le=20)
    number_of_windows: int = Field(default=2, ge=0, le=50)
    window_width: float = Field(default=36, ge=12, description="Average window width (in)")
    baseboard_style: Literal["standard", "colonial", "modern", "craftsman", "victorian"] = "standard"
    baseboard_height: BaseboardHeight = "4-inch"
    custom_height: Optional[float] = Field(default=None, ge=2, le=12, description="Custom height (in)")
    include_quarter_round: bool = False
    include_crown_molding: bool = False
    include_casing: bool = True
    waste_percentage: float = Field(default=10, ge=5, le=25)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class BaseboardTrimCalculator(BaseCalculator):

    calculator_id = "baseboard-trim"
    input_model = BaseboardTrimInputs

    WINDOW_HEIGHT_FT = 4

    # $/linear ft by style and height
    BASEBOARD_PRICES = {
        "standard":  {"3-inch": 1.50, "4-inch": 2.25, "5-inch": 3.00, "6-inch": 4.50, "custom": 5.00},
        "colonial":  {"3-inch": 2.00, "4-inch": 3.25, "5-inch": 4.50, "6-inch": 6.00, "custom": 7.00},
        "modern":    {"3-inch": 2.50, "4-inch": 3.75, "5-inch": 5.25, "6-inch": 7.50, "custom": 8.50},
        "craftsman": {"3-inch": 3.00, "4-inch": 4.50, "5-inch": 6.25, "6-inch": 8.50, "custom": 10.00},
        "victorian": {"3-inch": 4.00, "4-inch": 6.00, "5-inch": 8.50, "6-inch": 12.00, "custom": 15.00},
    }
    QUARTER_ROUND_PRICE_FT = 1.25
    CROWN_PRICE_FT = 3.50
    CASING_PRICE_FT = 2.75
    NAIL_PRICE_LB = 8.50
    CAULK_PRICE_TUBE = 4.25

    FT_PER_LB_NAILS = 100
    FT_PER_CAULK_TUBE = 50
    LABOR_HOURS_PER_10_FT = 0.5

    RESULT_LABELS = {
        "room_perimeter": ("Room Perimeter", "ft"),
        "adjusted_perimeter": ("Perimeter less Openings", "ft"),
        "baseboard_needed": ("Baseboard", "ft"),
        "quarter_round_needed": ("Quarter Round", "ft"),
        "crown_molding_needed": ("Crown Molding", "ft"),
        "door_casing_needed": ("Door Casing", "ft"),
        "window_casing_needed": ("Window Casing", "ft"),
        "total_linear_feet": ("Total Trim", "ft"),
        "nails_needed": ("Finish Nails", "lbs"),
        "caulk_needed": ("Caulk", "tubes"),
        "labor_hours": ("Labor", "hours"),
        "total_cost": ("Total Cost", "$"),
        "cutting_list": ("Cutting List (ft)", ""),
    }

    def compute(self, inputs: BaseboardTrimInputs) -> dict:
        waste = inputs.waste_percentage
        room_perimeter = self.room_perimeter(inputs)
        door_ft = inches_to_feet(inputs.door_width)
        window_ft = inches_to_feet(inputs.window_width)

        openings = inputs.number_of_doors * door_ft + inputs.number_of_windows * window_ft
        adjusted_perimeter = max(room_perimeter - openings, 0)

        baseboard = self.apply_waste(adjusted_perimeter, waste)
        quarter_round = baseboard if inputs.include_quarter_round else 0.0
        crown = self.apply_waste(room_perimeter, waste) if inputs.include_crown_molding else 0.0

        door_casing = window_casing = 0.0
        if inputs.include_casing:
            per_door = inputs.ceiling_height * 2 + door_ft
            door_casing = self.apply_waste(inputs.number_of_doors * per_door, waste)
            per_window = self.WINDOW_HEIGHT_FT * 2 + window_ft * 2
            window_casing = self.apply_waste(inputs.number_of_windows * per_window, waste)

        total_linear_feet = baseboard + quarter_round + crown + door_casing + window_casing
        nails = self.units_needed(total_linear_feet, self.FT_PER_LB_NAILS)
        caulk = self.units_needed(total_linear_feet, self.FT_PER_CAULK_TUBE)

        baseboard_price = self.lookup(
            self.BASEBOARD_PRICES, inputs.baseboard_style, "baseboard style")[inputs.baseboard_height]
        total_cost = (
            baseboard * baseboard_price
            + quarter_round * self.QUARTER_ROUND_PRICE_FT
            + crown * self.CROWN_PRICE_FT
            + (door_casing + window_casing) * self.CASING_PRICE_FT
            + nails * self.NAIL_PRICE_LB
            + caulk * self.CAULK_PRICE_TUBE
        )

        cutting_list = {"Baseboard": _round_half_up(baseboard)}
        for name, feet in (
            ("Quarter Round", quarter_round),
            ("Crown Molding", crown),
            ("Door Casing", door_casing),
            ("Window Casing", window_casing),
        ):
            if feet > 0:
                cutting_list[name] = _round_half_up(feet)

        return {
            "room_perimeter": room_perimeter,
            "adjusted_perimeter": adjusted_perimeter,
            "baseboard_needed": baseboard,
            "quarter_round_needed": quarter_round,
            "crown_molding_needed": crown,
            "door_casing_needed": door_casing,
            "window_casing_needed": window_casing,
            "total_linear_feet": total_linear_feet,
            "nails_needed": nails,
            "caulk_needed": caulk,
            "total_cost": total_cost,
            "labor_hours": total_linear_feet / 10 * self.LABOR_HOURS_PER_10_FT,
            "cutting_list": cutting_list,
        }
