"""
Multi-room calculator — one flooring order across several rooms.

Room shapes are approximations: an L-shape is 75% of its bounding box and a
circle uses `length` as its diameter. Material is bought once for the whole
job, less the bulk discount.
"""

from typing import List, Literal

from pydantic import BaseModel, Field

from .base import BaseCalculator, FlooringType
from ..geometry import circle_area, rectangle_area


class RoomEntry(BaseModel):
    name: str = Field(min_length=1)
    length: float = Field(ge=0.1, description="Length (ft); diameter for circles")
    width: float = Field(ge=0.1, description="Width (ft)")
    shape: Literal["rectangle", "l-shape", "circle"] = "rectangle"


class MultiRoomInputs(BaseModel):
    rooms: List[RoomEntry] = Field(min_length=1)
    flooring_type: FlooringType = "vinyl"
    waste_percentage: float = Field(default=10, ge=0, le=50)
    bulk_discount: float = Field(default=5, ge=0, le=50, description="Bulk discount (%)")


class MultiRoomCalculator(BaseCalculator):

    calculator_id = "multi-room"
    input_model = MultiRoomInputs

    L_SHAPE_FILL = 0.75
    # $/sq ft
    MATERIAL_PRICES = {
        "tile": 4.50, "hardwood": 8.00, "vinyl": 3.25, "laminate": 2.75, "carpet": 3.00,
    }
    CONTRACTOR_DISCOUNT_ROOMS = 3

    TYPE_TIPS = {
        "hardwood": [
            "Run planks in same direction throughout connected spaces",
            "Acclimate all wood in climate-controlled area",
        ],
        "tile": [
            "Maintain consistent grout lines between rooms",
            "Plan tile layout to minimize cuts at doorways",
        ],
        "vinyl": [
            "Use transition strips at doorways and level changes",
            "Install underlayment consistently throughout",
        ],
        "carpet": [
            "Plan seams in low-traffic areas",
            "Maintain pile direction consistency",
        ],
    }
    TYPE_TIPS["laminate"] = TYPE_TIPS["vinyl"]

    RESULT_LABELS = {
        "total_area": ("Total Area", "sq ft"),
        "total_adjusted_area": ("Total with Waste", "sq ft"),
        "material_needed": ("Material to Order", "sq ft"),
        "estimated_cost": ("Estimated Cost", "$"),
        "savings": ("Bulk Savings", "$"),
    }

    def room_shape_area(self, room: RoomEntry) -> float:
        if room.shape == "l-shape":
            return rectangle_area(room.length, room.width) * self.L_SHAPE_FILL
        if room.shape == "circle":
            return circle_area(room.length / 2)
        return rectangle_area(room.length, room.width)

    def compute(self, inputs: MultiRoomInputs) -> dict:
        rooms = []
        for room in inputs.rooms:
            area = self.room_shape_area(room)
            rooms.append({
                "name": room.name,
                "area": area,
                "adjusted_area": self.apply_waste(area, inputs.waste_percentage),
            })

        total_area = sum(r["area"] for r in rooms)
        total_adjusted = sum(r["adjusted_area"] for r in rooms)
        material_needed = self.units_needed(total_adjusted)

        base_cost = material_needed * self.lookup(
            self.MATERIAL_PRICES, inputs.flooring_type, "flooring type")
        savings = base_cost * inputs.bulk_discount / 100

        tips = [
            "Order all materials at once to ensure consistent dye lots",
            "Plan installation sequence to minimize disruption",
            "Consider transition strips between rooms",
            "Schedule delivery to accommodate installation timeline",
        ]
        if len(inputs.rooms) > self.CONTRACTOR_DISCOUNT_ROOMS:
            tips.append("Large projects may qualify for contractor discounts")
        tips += self.TYPE_TIPS[inputs.flooring_type]

        return {
            "rooms": rooms,
            "total_area": total_area,
            "total_adjusted_area": total_adjusted,
            "material_needed": material_needed,
            "estimated_cost": base_cost - savings,
            "savings": savings,
            "installation_tips": tips,
        }

    def example_inputs(self) -> dict:
        example = super().example_inputs()
        example["rooms"] = [
            {"name": "Living Room", "length": 16.0, "width": 14.0, "shape": "rectangle"},
            {"name": "Hallway", "length": 12.0, "width": 4.0, "shape": "rectangle"},
        ]
        return example
