"""
L-shaped room calculator.

The room is split into two non-overlapping rectangles. The seam between them
runs the narrower of the two widths.
"""

from pydantic import BaseModel, Field

from .base import BaseCalculator, FlooringType
from ..geometry import rectangle_area


class LShapedRoomInputs(BaseModel):
    length1: float = Field(ge=0.1, description="Section 1 length (ft)")
    width1: float = Field(ge=0.1, description="Section 1 width (ft)")
    length2: float = Field(ge=0.1, description="Section 2 length (ft)")
    width2: float = Field(ge=0.1, description="Section 2 width (ft)")
    waste_percentage: float = Field(default=15, ge=0, le=50)
    flooring_type: FlooringType = "tile"


class LShapedRoomCalculator(BaseCalculator):

    calculator_id = "l-shaped-room"
    input_model = LShapedRoomInputs

    TYPE_TIPS = {
        "tile": [
            "Use chalk lines to establish grid patterns for both sections",
            "Consider running tiles in same direction through both sections",
            "Plan grout lines to align across the junction",
        ],
        "hardwood": [
            "Run planks parallel to longest wall when possible",
            "Consider T-molding transition at junction if direction changes",
            "Ensure expansion gaps at all walls",
        ],
        "vinyl": [
            "Maintain same plank direction throughout if possible",
            "Use transition strips where floor direction changes",
            "Stagger joints to avoid weak points at corners",
        ],
        "carpet": [
            "Seam carpet at the narrowest point of junction",
            "Run carpet pile in same direction for consistent appearance",
            "Use hot melt tape for strong seam connection",
        ],
    }
    TYPE_TIPS["laminate"] = TYPE_TIPS["vinyl"]

    RESULT_LABELS = {
        "section1_area": ("Section 1 Area", "sq ft"),
        "section2_area": ("Section 2 Area", "sq ft"),
        "total_area": ("Total Area", "sq ft"),
        "adjusted_area": ("Area with Waste", "sq ft"),
        "material_needed": ("Material to Order", "sq ft"),
        "seam_length": ("Junction Seam", "ft"),
        "transition_strips": ("Transition Strips", ""),
    }

    def compute(self, inputs: LShapedRoomInputs) -> dict:
        section1 = rectangle_area(inputs.length1, inputs.width1)
        section2 = rectangle_area(inputs.length2, inputs.width2)
        total_area = section1 + section2
        adjusted_area = self.apply_waste(total_area, inputs.waste_percentage)

        tips = [
            "Start installation from the longest straight wall",
            "Plan layout to minimize cuts at the L-junction",
            "Measure and mark the L-junction carefully",
        ]
        tips += self.TYPE_TIPS[inputs.flooring_type]
        tips.append("Work from inside corner outward when possible")
        tips.append("Check square at the L-junction frequently")

        return {
            "section1_area": section1,
            "section2_area": section2,
            "total_area": total_area,
            "adjusted_area": adjusted_area,
            "material_needed": self.units_needed(adjusted_area),
            "seam_length": min(inputs.width1, inputs.width2),
            # one strip at the L junction for plank floors
            "transition_strips": 1 if inputs.flooring_type in ("hardwood", "laminate") else 0,
            "installation_tips": tips,
        }
