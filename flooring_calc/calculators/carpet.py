"""
Carpet calculator.

Carpet comes off a roll of fixed width, so the amount bought depends on the
layout, not just the floor area:
  - room width fits the roll  -> one run the length of the room
  - room length fits the roll -> rotate, one run the width of the room
  - neither fits              -> parallel runs, one seam between each pair
Padding, tack strip, transitions and stairs are optional extras.
"""

import math
from typing import Literal, Optional

from pydantic import Field

from .base import BaseCalculator, RoomInputs

CarpetStyle = Literal["cut-pile", "loop-pile", "cut-loop", "frieze", "berber", "shag"]


class CarpetInputs(RoomInputs):
    carpet_type: CarpetStyle = "cut-pile"
    carpet_width: Literal["12-ft", "13.2-ft", "15-ft"] = "12-ft"
    installation_type: Literal["stretch-in", "glue-down", "double-stick"] = "stretch-in"
    padding_thickness: Literal["6-lb", "8-lb", "10-lb", "none"] = "8-lb"
    waste_percentage: float = Field(default=10, ge=0, le=25)
    include_stairs: bool = False
    stair_count: Optional[int] = Field(default=0, ge=0, le=50)
    include_padding: bool = True
    include_tack_strips: bool = True
    include_transitions: bool = False


class CarpetCalculator(BaseCalculator):

    calculator_id = "carpet"
    input_model = CarpetInputs

    ROLL_WIDTHS_FT = {"12-ft": 12.0, "13.2-ft": 13.2, "15-ft": 15.0}

    # Labor multipliers
    STYLE_FACTORS = {
        "cut-pile": 1.0, "loop-pile": 1.1, "cut-loop": 1.2,
        "frieze": 1.3, "berber": 1.4, "shag": 1.5,
    }
    INSTALL_FACTORS = {"stretch-in": 1.0, "glue-down": 1.3, "double-stick": 1.5}

    # $/sq ft
    CARPET_PRICES = {
        "cut-pile": 4.50, "loop-pile": 3.80, "cut-loop": 5.20,
        "frieze": 6.00, "berber": 4.20, "shag": 7.50,
    }
    PADDING_PRICES = {"6-lb": 0.85, "8-lb": 1.20, "10-lb": 1.50, "none": 0.0}

    TACK_STRIP_PRICE_FT = 1.25
    TRANSITION_PRICE = 25.0
    LABOR_HOURS_PER_SQ_FT = 0.5
    STAIR_RUN_FT = 17 / 12  # 10" tread + 7" riser
    STAIR_WIDTH_FT = 3.0

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "carpet_needed": ("Carpet Needed", "sq ft"),
        "carpet_with_waste": ("Carpet with Waste", "sq ft"),
        "seams": ("Seams", ""),
        "stair_carpet": ("Stair Carpet", "sq ft"),
        "padding_needed": ("Padding", "sq ft"),
        "tack_strips_needed": ("Tack Strip", "ft"),
        "transition_strips": ("Transition Strips", ""),
        "labor_hours": ("Labor", "hours"),
        "total_material_cost": ("Material Cost", "$"),
    }

    def compute(self, inputs: CarpetInputs) -> dict:
        room_area = self.room_area(inputs)
        perimeter = self.room_perimeter(inputs)
        roll_width = self.lookup(self.ROLL_WIDTHS_FT, inputs.carpet_width, "carpet width")

        seams = 0
        if inputs.room_width <= roll_width:
            carpet_needed = inputs.room_length * roll_width
        elif inputs.room_length <= roll_width:
            carpet_needed = inputs.room_width * roll_width
        else:
            runs = math.ceil(inputs.room_width / roll_width)
            seams = runs - 1
            carpet_needed = inputs.room_length * roll_width * runs

        carpet_with_waste = self.apply_waste(carpet_needed, inputs.waste_percentage)

        stair_carpet = 0.0
        if inputs.include_stairs and inputs.stair_count:
            stair_carpet = inputs.stair_count * self.STAIR_RUN_FT * self.STAIR_WIDTH_FT

        padding = room_area * 1.05 if inputs.include_padding else 0.0
        tack_strip = perimeter * 0.85 if inputs.include_tack_strips else 0.0
        transitions = self.units_needed(perimeter, 20) if inputs.include_transitions else 0

        labor_hours = (
            room_area * self.LABOR_HOURS_PER_SQ_FT
            * self.lookup(self.STYLE_FACTORS, inputs.carpet_type, "carpet type")
            * self.lookup(self.INSTALL_FACTORS, inputs.installation_type, "installation type")
            * (1 + seams * 0.5)
        )

        carpet_cost = (carpet_with_waste + stair_carpet) * self.CARPET_PRICES[inputs.carpet_type]
        padding_cost = padding * self.lookup(
            self.PADDING_PRICES, inputs.padding_thickness, "padding thickness")
        total_material_cost = (
            carpet_cost
            + padding_cost
            + tack_strip * self.TACK_STRIP_PRICE_FT
            + transitions * self.TRANSITION_PRICE
        )

        return {
            "room_area": room_area,
            "carpet_needed": carpet_needed,
            "carpet_with_waste": carpet_with_waste,
            "padding_needed": padding,
            "tack_strips_needed": tack_strip,
            "transition_strips": transitions,
            "stair_carpet": stair_carpet,
            "labor_hours": labor_hours,
            "total_material_cost": total_material_cost,
            "seams": seams,
            "installation_tips": self._tips(inputs, seams),
        }

    def _tips(self, inputs: CarpetInputs, seams: int) -> list:
        tips = []
        if seams > 0:
            tips.append(f"{seams} seam(s) required - plan seam placement carefully")
        if inputs.carpet_type == "berber":
            tips.append("Berber carpet requires precise cutting to prevent unraveling")
        if inputs.installation_type == "stretch-in":
            tips.append("Allow carpet to acclimate for 24 hours before installation")
        if inputs.padding_thickness == "10-lb":
            tips.append("Premium padding extends carpet life significantly")
        tips.append("Maintain consistent pile direction for uniform appearance")
        tips.append("Use seaming tape and iron for professional seam quality")
        return tips
