"""
Stair calculator.

Treads are step width × depth; risers, when covered, assume a 7.5" rise.
Every staircase gets a transition strip at the top and the bottom.
"""

from pydantic import BaseModel, Field

from .base import BaseCalculator, FlooringType
from ..geometry import inches_to_feet, sq_in_to_sq_ft


class StairInputs(BaseModel):
    number_of_steps: int = Field(ge=1)
    step_width: float = Field(default=36, ge=12, description="Step width (in)")
    step_depth: float = Field(default=11, ge=10, description="Tread depth (in)")
    flooring_type: FlooringType = "hardwood"
    nosing: bool = True
    riser_covering: bool = False
    waste_percentage: float = Field(default=15, ge=5, le=25)
    material_cost: float = Field(default=6.75, ge=0, description="Material cost ($/sq ft)")


class StairCalculator(BaseCalculator):

    calculator_id = "stair"
    input_model = StairInputs

    RISER_HEIGHT_IN = 7.5
    TRANSITION_STRIPS = 2
    NOSING_PRICE_FT = 8.0
    TRANSITION_PRICE = 25.0

    TIPS = [
        "Measure each step individually as they may vary",
        "Use appropriate stair nosing for safety and code compliance",
        "Ensure proper expansion gaps at walls",
        "Consider professional installation for curved stairs",
        "Test fit all pieces before final installation",
        "Use construction adhesive for secure attachment",
    ]

    RESULT_LABELS = {
        "total_treads": ("Treads", ""),
        "total_risers": ("Risers", ""),
        "tread_area": ("Tread Area", "sq ft"),
        "riser_area": ("Riser Area", "sq ft"),
        "total_area": ("Total Area", "sq ft"),
        "adjusted_area": ("Area with Waste", "sq ft"),
        "nosing_needed": ("Stair Nosing", "ft"),
        "transition_strips": ("Transition Strips", ""),
        "total_cost": ("Total Cost", "$"),
    }

    def compute(self, inputs: StairInputs) -> dict:
        treads = inputs.number_of_steps
        risers = inputs.number_of_steps if inputs.riser_covering else 0

        tread_area = sq_in_to_sq_ft(treads * inputs.step_width * inputs.step_depth)
        riser_area = sq_in_to_sq_ft(risers * inputs.step_width * self.RISER_HEIGHT_IN)
        total_area = tread_area + riser_area
        adjusted_area = self.apply_waste(total_area, inputs.waste_percentage)
        nosing = self.units_needed(inches_to_feet(treads * inputs.step_width)) if inputs.nosing else 0

        total_cost = (
            adjusted_area * inputs.material_cost
            + nosing * self.NOSING_PRICE_FT
            + self.TRANSITION_STRIPS * self.TRANSITION_PRICE
        )

        return {
            "total_treads": treads,
            "total_risers": risers,
            "tread_area": tread_area,
            "riser_area": riser_area,
            "total_area": total_area,
            "adjusted_area": adjusted_area,
            "nosing_needed": nosing,
            "transition_strips": self.TRANSITION_STRIPS,
            "total_cost": total_cost,
            "installation_tips": list(self.TIPS),
        }
