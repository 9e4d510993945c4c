"""
Laminate calculator.

Planks are counted before waste (whole planks), then the waste factor is
applied to that count. Boxes assume 22 sq ft each. Accessories are opt-in.
"""

from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs
from ..geometry import sq_in_to_sq_ft


class LaminateInputs(RoomInputs):
    plank_length: float = Field(default=48, ge=12, description="Plank length (in)")
    plank_width: float = Field(default=7.5, ge=3, description="Plank width (in)")
    laminate_thickness: Literal["6mm", "7mm", "8mm", "10mm", "12mm"] = "8mm"
    installation_type: Literal["floating", "glue-down"] = "floating"
    room_complexity: Literal["simple", "moderate", "complex"] = "simple"
    waste_percentage: float = Field(default=10, ge=5, le=25)
    include_underlayment: bool = True
    include_molding: bool = False
    include_transitions: bool = False
    include_quarter_round: bool = False


class LaminateCalculator(BaseCalculator):

    calculator_id = "laminate"
    input_model = LaminateInputs

    SQ_FT_PER_BOX = 22
    LABOR_HOURS_PER_SQ_FT = 0.4

    COMPLEXITY_FACTORS = {"simple": 1.0, "moderate": 1.3, "complex": 1.6}
    INSTALL_FACTORS = {"floating": 1.0, "glue-down": 1.4}
    # $/sq ft by thickness
    LAMINATE_PRICES = {"6mm": 2.50, "7mm": 3.20, "8mm": 4.00, "10mm": 5.50, "12mm": 7.20}

    UNDERLAYMENT_PRICE = 0.65
    MOLDING_PRICE_FT = 2.80
    QUARTER_ROUND_PRICE_FT = 1.50
    TRANSITION_PRICE = 28.0

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "plank_area": ("Plank Area", "sq ft"),
        "planks_needed": ("Planks Needed", "planks"),
        "square_feet_needed": ("Square Feet to Order", "sq ft"),
        "boxes": ("Boxes", "boxes"),
        "underlayment_needed": ("Underlayment", "sq ft"),
        "molding_needed": ("Molding", "ft"),
        "quarter_round_needed": ("Quarter Round", "ft"),
        "transition_strips": ("Transition Strips", ""),
        "labor_hours": ("Labor", "hours"),
        "total_material_cost": ("Material Cost", "$"),
    }

    def compute(self, inputs: LaminateInputs) -> dict:
        room_area = self.room_area(inputs)
        perimeter = self.room_perimeter(inputs)
        plank_area = sq_in_to_sq_ft(inputs.plank_length * inputs.plank_width)

        base_planks = self.units_needed(room_area, plank_area)
        planks_needed = self.units_needed(self.apply_waste(base_planks, inputs.waste_percentage))
        square_feet_needed = planks_needed * plank_area

        underlayment = self.units_needed(room_area * 1.05) if inputs.include_underlayment else 0
        molding = self.units_needed(perimeter * 0.9) if inputs.include_molding else 0
        quarter_round = self.units_needed(perimeter * 0.85) if inputs.include_quarter_round else 0
        transitions = self.units_needed(perimeter, 15) if inputs.include_transitions else 0

        labor_hours = (
            room_area * self.LABOR_HOURS_PER_SQ_FT
            * self.lookup(self.COMPLEXITY_FACTORS, inputs.room_complexity, "room complexity")
            * self.lookup(self.INSTALL_FACTORS, inputs.installation_type, "installation type")
        )

        price = self.lookup(self.LAMINATE_PRICES, inputs.laminate_thickness, "laminate thickness")
        total_material_cost = (
            square_feet_needed * price
            + underlayment * self.UNDERLAYMENT_PRICE
            + molding * self.MOLDING_PRICE_FT
            + quarter_round * self.QUARTER_ROUND_PRICE_FT
            + transitions * self.TRANSITION_PRICE
        )

        return {
            "room_area": room_area,
            "plank_area": plank_area,
            "planks_needed": planks_needed,
            "square_feet_needed": square_feet_needed,
            "boxes": self.units_needed(square_feet_needed, self.SQ_FT_PER_BOX),
            "underlayment_needed": underlayment,
            "molding_needed": molding,
            "transition_strips": transitions,
            "quarter_round_needed": quarter_round,
            "labor_hours": labor_hours,
            "total_material_cost": total_material_cost,
            "installation_tips": self._tips(inputs),
        }

    def _tips(self, inputs: LaminateInputs) -> list:
        tips = []
        if inputs.installation_type == "floating":
            tips.append('Allow 1/4" expansion gap around perimeter')
            tips.append("Stagger end joints by at least 6 inches")
        if inputs.laminate_thickness == "12mm":
            tips.append("Thicker planks provide better sound dampening")
        if inputs.include_underlayment:
            tips.append("Use moisture barrier in basements and concrete subfloors")
        tips.append("Acclimate flooring 48 hours before installation")
        tips.append("Start installation from longest, straightest wall")
        tips.append("Use tapping block to protect tongue and groove edges")
        return tips
