"""
Sheet vinyl calculator.

Picks the seam layout that uses the fewest roll widths, adds seam tolerance
per piece, then waste. Linear feet and total sq ft are reported as whole
numbers; cost is on the unrounded quantity.
"""

from pydantic import Field

from .base import BaseCalculator, RoomInputs
from ..geometry import inches_to_feet, safe_divide


class SheetVinylInputs(RoomInputs):
    roll_width: float = Field(default=12, ge=6, description="Roll width (ft)")
    waste_percentage: float = Field(default=10, ge=0, le=30)
    seam_tolerance: float = Field(default=6, ge=0, le=12, description="Extra per piece for seam trimming (in)")
    vinyl_cost: float = Field(default=2.85, ge=0, description="Vinyl cost ($/sq ft)")


class SheetVinylCalculator(BaseCalculator):

    calculator_id = "sheet-vinyl"
    input_model = SheetVinylInputs

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "seam_layout": ("Layout", ""),
        "rolls_needed": ("Roll Widths", ""),
        "linear_feet_needed": ("Linear Feet", "ft"),
        "total_square_feet": ("Total Vinyl", "sq ft"),
        "waste_amount": ("Waste", "sq ft"),
        "total_cost": ("Total Cost", "$"),
        "cost_per_sq_ft": ("Cost per Sq Ft", "$"),
    }

    def compute(self, inputs: SheetVinylInputs) -> dict:
        length, width, roll = inputs.room_length, inputs.room_width, inputs.roll_width
        room_area = self.room_area(inputs)
        linear_feet, rolls, layout = self._layout(length, width, roll)

        linear_feet = self.apply_waste(
            linear_feet + inches_to_feet(inputs.seam_tolerance) * rolls,
            inputs.waste_percentage,
        )
        total_square_feet = linear_feet * roll
        total_cost = total_square_feet * inputs.vinyl_cost

        return {
            "room_area": room_area,
            "linear_feet_needed": self.units_needed(linear_feet),
            "total_square_feet": self.units_needed(total_square_feet),
            "seam_layout": layout,
            "waste_amount": total_square_feet - room_area,
            "total_cost": total_cost,
            "cost_per_sq_ft": safe_divide(total_cost, room_area),
            "installation_tips": [
                "Acclimate vinyl for 24 hours before installation",
                "Ensure subfloor is smooth and level",
                "Use sharp utility knife for clean cuts",
                "Roll out seams with 100lb roller",
                "Pattern match at seams for best appearance" if rolls > 1
                else "Single piece installation minimizes seams",
                'Leave 1/8" gap at walls for expansion',
            ],
            "rolls_needed": rolls,
        }

    def _layout(self, length: float, width: float, roll: float) -> tuple:
        """(linear feet before waste, roll widths, layout description)"""
        if width <= roll and length <= roll:
            return max(length, width), 1, "Single piece installation - no seams required"
        if width <= roll:
            return length, 1, "Single width - vinyl runs lengthwise"
        if length <= roll:
            return width, 1, "Single width - vinyl runs widthwise"

        pieces_across = self.units_needed(width, roll)
        pieces_along = self.units_needed(length, roll)
        if pieces_across <= pieces_along:
            return (length * pieces_across, pieces_across,
                    f"{pieces_across} pieces running lengthwise with {pieces_across - 1} seam(s)")
        return (width * pieces_along, pieces_along,
                f"{pieces_along} pieces running widthwise with {pieces_along - 1} seam(s)")
