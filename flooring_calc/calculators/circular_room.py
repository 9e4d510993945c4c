"""
Circular room calculator.

Tile layouts assume 12"×12" tiles: whole tiles fill a centre disc half a
tile inside the wall, the rest are border tiles, most of which need a cut.
Plank and carpet floors estimate cuts from the circumference.
"""

import math
from typing import Literal

from pydantic import BaseModel, Field

from .base import BaseCalculator, FlooringType
from ..geometry import circle_area, circle_circumference


class CircularRoomInputs(BaseModel):
    radius: float = Field(ge=0.1, description="Radius or diameter (ft), see measurement_type")
    measurement_type: Literal["radius", "diameter"] = "radius"
    waste_percentage: float = Field(default=15, ge=0, le=50)
    flooring_type: FlooringType = "tile"


class CircularRoomCalculator(BaseCalculator):

    calculator_id = "circular-room"
    input_model = CircularRoomInputs

    TILE_SQ_FT = 1.0
    # ft of wall per cut
    CUT_SPACING_FT = {"hardwood": 4, "vinyl": 3, "laminate": 3}

    TYPE_TIPS = {
        "tile": [
            "Use flexible tile spacers for curved edges",
            "Consider mosaic or smaller tiles for easier fitting",
            "Plan grout lines to follow circular pattern",
        ],
        "hardwood": [
            "Run planks toward center from multiple directions",
            "Steam bend planks for curved borders if possible",
            "Leave expansion gap around entire perimeter",
        ],
        "vinyl": [
            "Score and snap for clean curved cuts",
            "Heat material slightly for easier bending",
            "Install transition strip around entire perimeter",
        ],
        "carpet": [
            "Template with cardboard before cutting carpet",
            "Use sharp carpet knife for clean circular cut",
            "Stretch evenly to prevent wrinkles",
        ],
    }
    TYPE_TIPS["laminate"] = TYPE_TIPS["vinyl"]

    RESULT_LABELS = {
        "radius": ("Radius", "ft"),
        "diameter": ("Diameter", "ft"),
        "area": ("Floor Area", "sq ft"),
        "circumference": ("Circumference", "ft"),
        "adjusted_area": ("Area with Waste", "sq ft"),
        "material_needed": ("Material to Order", "sq ft"),
        "center_tiles": ("Full Center Tiles", "tiles"),
        "border_tiles": ("Border Tiles", "tiles"),
        "cuts": ("Estimated Cuts", ""),
    }

    def compute(self, inputs: CircularRoomInputs) -> dict:
        radius = inputs.radius / 2 if inputs.measurement_type == "diameter" else inputs.radius
        area = circle_area(radius)
        circumference = circle_circumference(radius)
        adjusted_area = self.apply_waste(area, inputs.waste_percentage)

        center_tiles = border_tiles = 0
        if inputs.flooring_type == "tile":
            material = self.units_needed(adjusted_area, self.TILE_SQ_FT)
            full_tile_radius = max(0, math.floor(radius - 0.5))
            center_tiles = math.floor(math.pi * full_tile_radius ** 2)
            border_tiles = material - center_tiles
            cuts = self.units_needed(border_tiles * 0.8)
        elif inputs.flooring_type == "carpet":
            material = self.units_needed(adjusted_area)
            cuts = 1  # one circular cut
        else:
            material = self.units_needed(adjusted_area)
            cuts = self.units_needed(circumference, self.CUT_SPACING_FT[inputs.flooring_type])

        tips = [
            "Mark center point and use string compass for layout",
            "Work from center outward in concentric circles",
            "Pre-plan cuts to minimize waste at perimeter",
        ]
        tips += self.TYPE_TIPS[inputs.flooring_type]

        return {
            "radius": radius,
            "diameter": radius * 2,
            "area": area,
            "circumference": circumference,
            "adjusted_area": adjusted_area,
            "material_needed": material,
            "border_tiles": border_tiles,
            "center_tiles": center_tiles,
            "cuts": cuts,
            "installation_tips": tips,
        }
