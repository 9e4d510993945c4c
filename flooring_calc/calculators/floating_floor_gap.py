"""
Floating floor expansion gap calculator.

Expansion rate is inches of movement per foot of floor, scaled for seasonal
humidity swing and underfloor heating. Gaps are twice (walls), 1.5× (doorways)
or 2.5× (transitions) the expected movement across the longest dimension,
never below the usual minimums of 1/4", 3/8" and 1/2".
"""

from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs

FloatingFloor = Literal["laminate", "engineered-wood", "vinyl-plank", "bamboo"]


class FloatingFloorGapInputs(RoomInputs):
    flooring_type: FloatingFloor = "laminate"
    plank_length: float = Field(default=48, ge=12, description="Plank length (in)")
    plank_width: float = Field(default=7, ge=3, description="Plank width (in)")
    seasonal_variation: Literal["low", "moderate", "high"] = "moderate"
    underfloor_heating: bool = False


class FloatingFloorGapCalculator(BaseCalculator):

    calculator_id = "floating-floor-gap"
    input_model = FloatingFloorGapInputs

    # in per ft
    EXPANSION_COEFFICIENTS = {
        "laminate": 0.004, "engineered-wood": 0.003, "vinyl-plank": 0.006, "bamboo": 0.0035,
    }
    SEASONAL_FACTORS = {"low": 1.0, "moderate": 1.3, "high": 1.8}
    HEATING_FACTOR = 1.4

    # (multiplier on expected expansion, minimum gap in)
    PERIMETER_GAP = (2.0, 0.25)
    DOORWAY_GAP = (1.5, 0.375)
    TRANSITION_GAP = (2.5, 0.5)

    # ft before an expansion joint is needed
    MAX_RUN_FT = {"laminate": 39, "engineered-wood": 32, "vinyl-plank": 50, "bamboo": 35}
    HEATED_RUN_FACTOR = 0.75
    TRIM_PIECE_FT = 8

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "expansion_rate": ("Expansion Rate", "in/ft"),
        "expected_expansion": ("Expected Movement", "in"),
        "perimeter_gap": ("Wall Gap", "in"),
        "doorway_gap": ("Doorway Gap", "in"),
        "transition_gap": ("Transition Gap", "in"),
        "max_run_length": ("Max Continuous Run", "ft"),
        "t_molding_needed": ("T-Molding (8 ft)", "pieces"),
        "quarter_round_needed": ("Quarter Round (8 ft)", "pieces"),
    }

    def compute(self, inputs: FloatingFloorGapInputs) -> dict:
        heating = inputs.underfloor_heating
        expansion_rate = (
            self.lookup(self.EXPANSION_COEFFICIENTS, inputs.flooring_type, "flooring type")
            * self.lookup(self.SEASONAL_FACTORS, inputs.seasonal_variation, "seasonal variation")
            * (self.HEATING_FACTOR if heating else 1.0)
        )
        expected = max(inputs.room_length, inputs.room_width) * expansion_rate

        perimeter_gap, doorway_gap, transition_gap = (
            max(minimum, expected * factor)
            for factor, minimum in (self.PERIMETER_GAP, self.DOORWAY_GAP, self.TRANSITION_GAP)
        )

        max_run = self.MAX_RUN_FT[inputs.flooring_type]
        if heating:
            max_run = max_run * self.HEATED_RUN_FACTOR

        trim_pieces = self.units_needed(self.room_perimeter(inputs), self.TRIM_PIECE_FT)

        guidelines = [
            f'Maintain {perimeter_gap:.2f}" gap at all walls and fixed objects',
            f'Use {doorway_gap:.2f}" gap at doorways and openings',
            f'Provide {transition_gap:.2f}" gap when transitioning to other materials',
            f"Maximum continuous run: {max_run:.0f} feet",
            "Reduce gaps gradually during heating season startup" if heating
            else "Standard seasonal expansion expected",
            f'Expected seasonal movement: {expected:.3f}" per direction',
        ]
        tips = [
            "Use spacers consistently around entire perimeter",
            "Remove spacers only after installation completion",
            "Install baseboards with gap to allow floor movement",
            "Never nail or screw through floating floor",
            "Maintain gaps at all penetrations (pipes, vents, etc.)",
            "Gradually increase heating temperature over 7 days" if heating
            else "Acclimate flooring 48-72 hours before installation",
        ]

        return {
            "room_area": self.room_area(inputs),
            "expansion_rate": expansion_rate,
            "expected_expansion": expected,
            "perimeter_gap": perimeter_gap,
            "doorway_gap": doorway_gap,
            "transition_gap": transition_gap,
            "max_run_length": max_run,
            "t_molding_needed": trim_pieces,
            "quarter_round_needed": trim_pieces,
            "gap_guidelines": guidelines,
            "installation_tips": tips,
        }
