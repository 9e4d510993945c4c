"""Tile calculator — tiles by size, plus rough grout and adhesive quantities."""

from pydantic import Field

from .base import BaseCalculator, RoomInputs
from ..formulas import calculate_tile_requirements


class TileInputs(RoomInputs):
    tile_length: float = Field(default=12, ge=0.1, description="Tile length (in)")
    tile_width: float = Field(default=12, ge=0.1, description="Tile width (in)")
    grout_width: float = Field(default=0.125, ge=0, description="Grout joint width (in)")
    waste_percentage: float = Field(default=10, ge=0, le=50)


class TileCalculator(BaseCalculator):

    calculator_id = "tile"
    input_model = TileInputs

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "tile_area": ("Tile Area", "sq ft"),
        "tiles_needed": ("Tiles Needed", "tiles"),
        "tiles_with_waste": ("Tiles with Waste", "tiles"),
        "grout_needed": ("Grout Needed", "lbs"),
        "adhesive_needed": ("Adhesive Needed", "bags"),
    }

    def compute(self, inputs: TileInputs) -> dict:
        return calculate_tile_requirements(
            room_length=inputs.room_length,
            room_width=inputs.room_width,
            tile_length=inputs.tile_length,
            tile_width=inputs.tile_width,
            grout_width=inputs.grout_width,
            waste_percentage=inputs.waste_percentage,
        )
