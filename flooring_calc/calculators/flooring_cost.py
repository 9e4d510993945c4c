"""
Flooring cost calculator.

Material and labor are priced per sq ft on the waste-adjusted area.
Additional costs (delivery, disposal, trim) are added flat.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .base import BaseCalculator
from ..formulas import calculate_flooring_cost


class FlooringCostInputs(BaseModel):
    length: float = Field(ge=0.1, description="Room length (ft)")
    width: float = Field(ge=0.1, description="Room width (ft)")
    material_cost: float = Field(default=0, ge=0, description="Material cost ($/sq ft)")
    labor_cost: float = Field(default=0, ge=0, description="Labor cost ($/sq ft)")
    waste_percentage: float = Field(default=10, ge=0, le=50)
    additional_costs: Optional[float] = Field(default=0, ge=0, description="Additional costs ($)")


class FlooringCostCalculator(BaseCalculator):

    calculator_id = "flooring-cost"
    input_model = FlooringCostInputs

    RESULT_LABELS = {
        "base_area": ("Base Area", "sq ft"),
        "adjusted_area": ("Area with Waste", "sq ft"),
        "material_total": ("Material Cost", "$"),
        "labor_total": ("Labor Cost", "$"),
        "additional_total": ("Additional Costs", "$"),
        "grand_total": ("Total Project Cost", "$"),
        "cost_per_sq_ft": ("Cost per Sq Ft", "$"),
    }

    def compute(self, inputs: FlooringCostInputs) -> dict:
        return calculate_flooring_cost(
            length=inputs.length,
            width=inputs.width,
            material_cost=inputs.material_cost,
            labor_cost=inputs.labor_cost,
            waste_percentage=inputs.waste_percentage,
            additional_costs=inputs.additional_costs or 0,
        )
