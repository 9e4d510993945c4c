"""
Engineered wood calculator.

Click-lock floors only get underlayment on big rooms (over 500 sq ft);
glue-down gets adhesive at 200 sq ft per gallon. Labor is 8 hours per
100 sq ft, scaled by install method.
"""

from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs
from ..geometry import safe_divide, sq_in_to_sq_ft


class EngineeredWoodInputs(RoomInputs):
    plank_width: float = Field(default=5, ge=1, description="Plank width (in)")
    plank_length: float = Field(default=48, ge=1, description="Plank length (in)")
    installation_type: Literal["click-lock", "glue-down", "nail-down"] = "click-lock"
    waste_percentage: float = Field(default=10, ge=0, le=50)
    plank_cost: float = Field(default=4.50, ge=0, description="Plank cost ($/sq ft)")


class EngineeredWoodCalculator(BaseCalculator):

    calculator_id = "engineered-wood"
    input_model = EngineeredWoodInputs

    SQ_FT_PER_BOX = 20
    UNDERLAYMENT_MIN_AREA = 500
    UNDERLAYMENT_PRICE = 0.75
    ADHESIVE_PRICE_GALLON = 45.0

    LABOR_MULTIPLIERS = {"click-lock": 0.8, "glue-down": 1.2, "nail-down": 1.0}

    TIPS = {
        "click-lock": [
            'Ensure subfloor is level within 3/16" over 10 feet',
            'Leave 1/4" expansion gap around perimeter',
            "Install perpendicular to longest wall",
            "Use tapping block to avoid damage during installation",
        ],
        "glue-down": [
            "Test adhesive compatibility with subfloor",
            "Apply adhesive with recommended trowel size",
            "Work in small sections to prevent skin-over",
            "Roll planks with 100lb roller after installation",
        ],
        "nail-down": [
            'Use proper nail spacing: 6-8" apart',
            "Pre-drill near ends to prevent splitting",
            "Set nails flush with surface",
            "Check moisture content before installation",
        ],
    }

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "adjusted_area": ("Area with Waste", "sq ft"),
        "planks_needed": ("Planks Needed", "planks"),
        "boxes_needed": ("Boxes", "boxes"),
        "square_feet_needed": ("Square Feet to Order", "sq ft"),
        "underlayment_needed": ("Underlayment", "sq ft"),
        "adhesive_needed": ("Adhesive", "gallons"),
        "labor_hours": ("Labor", "hours"),
        "total_material_cost": ("Material Cost", "$"),
        "cost_per_sq_ft": ("Cost per Sq Ft", "$"),
    }

    def compute(self, inputs: EngineeredWoodInputs) -> dict:
        room_area = self.room_area(inputs)
        adjusted_area = self.apply_waste(room_area, inputs.waste_percentage)
        plank_area = sq_in_to_sq_ft(inputs.plank_width * inputs.plank_length)

        underlayment = adhesive = None
        if inputs.installation_type == "click-lock" and room_area > self.UNDERLAYMENT_MIN_AREA:
            underlayment = self.units_needed(adjusted_area)
        elif inputs.installation_type == "glue-down":
            adhesive = self.units_needed(adjusted_area, 200)

        multiplier = self.lookup(self.LABOR_MULTIPLIERS, inputs.installation_type, "installation type")
        total_material_cost = (
            adjusted_area * inputs.plank_cost
            + (underlayment or 0) * self.UNDERLAYMENT_PRICE
            + (adhesive or 0) * self.ADHESIVE_PRICE_GALLON
        )

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "planks_needed": self.units_needed(adjusted_area, plank_area),
            "boxes_needed": self.units_needed(adjusted_area, self.SQ_FT_PER_BOX),
            "square_feet_needed": adjusted_area,
            "underlayment_needed": underlayment,
            "adhesive_needed": adhesive,
            "total_material_cost": total_material_cost,
            "cost_per_sq_ft": safe_divide(total_material_cost, room_area),
            "labor_hours": self.units_needed(room_area / 100 * 8 * multiplier),
            "installation_tips": list(self.TIPS[inputs.installation_type]),
        }
