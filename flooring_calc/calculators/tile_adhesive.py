"""
Tile adhesive (thinset) calculator.

Coverage starts from the adhesive's rated sq ft per gallon and is scaled by
tile type, substrate and application method. Tiles thicker than 8 mm reduce
coverage proportionally.
"""

from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs
from ..geometry import inches_to_feet, safe_divide


class TileAdhesiveInputs(RoomInputs):
    tile_length: float = Field(default=12, ge=0.1, description="Tile length (in)")
    tile_width: float = Field(default=12, ge=0.1, description="Tile width (in)")
    tile_type: Literal["ceramic", "porcelain", "natural-stone", "glass", "metal"] = "ceramic"
    adhesive_type: Literal["standard", "premium", "epoxy", "rapid-set"] = "standard"
    substrate_type: Literal["concrete", "plywood", "cement-board", "existing-tile", "drywall"] = "concrete"
    tile_thickness: float = Field(default=8, ge=1, le=50, description="Tile thickness (mm)")
    application_method: Literal["trowel", "back-butter", "full-coverage"] = "trowel"
    waste_percentage: float = Field(default=10, ge=0, le=30)


class TileAdhesiveCalculator(BaseCalculator):

    calculator_id = "tile-adhesive"
    input_model = TileAdhesiveInputs

    # sq ft per gallon
    BASE_COVERAGE = {"standard": 60, "premium": 55, "epoxy": 45, "rapid-set": 50}
    TILE_FACTORS = {
        "ceramic": 1.0, "porcelain": 0.9, "natural-stone": 0.8, "glass": 1.1, "metal": 1.0,
    }
    SUBSTRATE_FACTORS = {
        "concrete": 1.0, "plywood": 1.2, "cement-board": 1.1, "existing-tile": 1.3, "drywall": 1.4,
    }
    METHOD_FACTORS = {"trowel": 1.0, "back-butter": 1.5, "full-coverage": 1.8}
    GALLON_PRICES = {"standard": 35.0, "premium": 50.0, "epoxy": 75.0, "rapid-set": 45.0}
    REFERENCE_THICKNESS_MM = 8

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "tile_area": ("Tile Area", "sq ft"),
        "tiles_needed": ("Tiles", "tiles"),
        "coverage_rate": ("Coverage Rate", "sq ft/gal"),
        "adhesive_needed": ("Adhesive Needed", "gallons"),
        "adhesive_with_waste": ("Adhesive with Waste", "gallons"),
        "total_cost": ("Total Cost", "$"),
        "coverage_factors": ("Coverage Factors", ""),
    }

    def compute(self, inputs: TileAdhesiveInputs) -> dict:
        room_area = self.room_area(inputs)
        tile_area = inches_to_feet(inputs.tile_length) * inches_to_feet(inputs.tile_width)

        tile_factor = self.lookup(self.TILE_FACTORS, inputs.tile_type, "tile type")
        substrate_factor = self.lookup(self.SUBSTRATE_FACTORS, inputs.substrate_type, "substrate type")
        method_factor = self.lookup(self.METHOD_FACTORS, inputs.application_method, "application method")
        thickness_factor = max(1.0, inputs.tile_thickness / self.REFERENCE_THICKNESS_MM)

        coverage_rate = (
            self.lookup(self.BASE_COVERAGE, inputs.adhesive_type, "adhesive type")
            * tile_factor * substrate_factor * method_factor / thickness_factor
        )
        adhesive_needed = safe_divide(room_area, coverage_rate)
        adhesive_with_waste = self.apply_waste(adhesive_needed, inputs.waste_percentage)

        return {
            "room_area": room_area,
            "tile_area": tile_area,
            "tiles_needed": self.units_needed(room_area, tile_area),
            "coverage_rate": coverage_rate,
            "adhesive_needed": adhesive_needed,
            "adhesive_with_waste": adhesive_with_waste,
            "total_cost": self.units_needed(adhesive_with_waste) * self.GALLON_PRICES[inputs.adhesive_type],
            "application_tips": self._tips(inputs),
            "coverage_factors": {
                "Tile Type": tile_factor,
                "Substrate": substrate_factor,
                "Application": method_factor,
                "Thickness": 1 / thickness_factor,
            },
        }

    def _tips(self, inputs: TileAdhesiveInputs) -> list:
        tips = []
        if inputs.tile_type == "natural-stone":
            tips.append("Use white adhesive to prevent staining light-colored stone")
        if inputs.tile_type == "porcelain":
            tips.append("Use premium adhesive for better bond with dense porcelain")
        if inputs.application_method == "back-butter":
            tips.append("Apply adhesive to both tile back and substrate for maximum bond")
        if inputs.substrate_type == "plywood":
            tips.append("Prime plywood substrate before adhesive application")
        if inputs.adhesive_type == "rapid-set":
            tips.append("Work in small sections - rapid-set adhesive cures quickly")
        tips.append("Allow adhesive to cure for 24-48 hours before grouting")
        tips.append("Check manufacturer specifications for trowel notch size")
        return tips
