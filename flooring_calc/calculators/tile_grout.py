"""
Tile grout calculator.

Grout volume per tile is the joint around its perimeter:
2 × (length + width) × joint width × joint depth, all in inches.
"""

from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs
from ..geometry import CU_IN_PER_CU_FT, sq_in_to_sq_ft


class TileGroutInputs(RoomInputs):
    tile_length: float = Field(default=12, ge=1, description="Tile length (in)")
    tile_width: float = Field(default=12, ge=1, description="Tile width (in)")
    grout_width: float = Field(default=0.125, ge=0.0625, description="Joint width (in)")
    grout_depth: float = Field(default=0.25, ge=0.125, description="Joint depth (in)")
    grout_type: Literal["sanded", "unsanded", "epoxy"] = "sanded"


class TileGroutCalculator(BaseCalculator):

    calculator_id = "tile-grout"
    input_model = TileGroutInputs

    LBS_PER_BAG = 25
    # lb per cubic foot
    GROUT_DENSITY = {"sanded": 105, "unsanded": 100, "epoxy": 110}
    BAG_PRICES = {"sanded": 18.0, "unsanded": 16.0, "epoxy": 45.0}

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "tile_area": ("Tile Area", "sq ft"),
        "tiles_needed": ("Tiles", "tiles"),
        "grout_volume": ("Grout Volume", "cu ft"),
        "grout_pounds": ("Grout Weight", "lbs"),
        "grout_bags": ("Grout Bags (25 lb)", "bags"),
        "total_cost": ("Total Cost", "$"),
    }

    def compute(self, inputs: TileGroutInputs) -> dict:
        room_area = self.room_area(inputs)
        tile_area = sq_in_to_sq_ft(inputs.tile_length * inputs.tile_width)
        tiles_needed = self.units_needed(room_area, tile_area)

        joint_cu_in = (
            2 * (inputs.tile_length + inputs.tile_width)
            * inputs.grout_width * inputs.grout_depth
        )
        grout_volume = joint_cu_in * tiles_needed / CU_IN_PER_CU_FT
        grout_pounds = grout_volume * self.lookup(self.GROUT_DENSITY, inputs.grout_type, "grout type")
        grout_bags = self.units_needed(grout_pounds, self.LBS_PER_BAG)

        tips = [
            "Mix only what you can use in 30 minutes",
            "Work diagonally across tiles to avoid pulling grout out",
            "Clean excess grout before it cures completely",
            "Allow 24-48 hours before sealing grout lines",
        ]
        if inputs.grout_type == "epoxy":
            tips.append("Epoxy grout requires immediate cleanup - have multiple sponges ready")
        if inputs.grout_width < 0.125:
            tips.append("Use unsanded grout for joints less than 1/8 inch")

        return {
            "room_area": room_area,
            "tile_area": tile_area,
            "tiles_needed": tiles_needed,
            "grout_volume": grout_volume,
            "grout_pounds": grout_pounds,
            "grout_bags": grout_bags,
            "total_cost": grout_bags * self.BAG_PRICES[inputs.grout_type],
            "application_tips": tips,
        }
