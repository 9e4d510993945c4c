"""
Floor joist calculator.

Rule-of-thumb sizing by span band, not an engineered design. Spans beyond
18 ft go to engineered I-joists.
"""

import math
from typing import Literal

from pydantic import BaseModel, Field

from .base import BaseCalculator


class FloorJoistInputs(BaseModel):
    span_length: float = Field(ge=6, le=32, description="Clear span (ft)")
    joist_spacing: Literal["12", "16", "19.2", "24"] = "16"
    lumber_grade: Literal["select-structural", "no1", "no2", "stud"] = "no2"
    species: Literal["douglas-fir", "southern-pine", "hem-fir", "spruce-pine-fir"] = "douglas-fir"
    load_type: Literal["residential", "commercial-light", "commercial-heavy"] = "residential"
    deflection_limit: Literal["L/240", "L/360", "L/480"] = "L/360"


class FloorJoistCalculator(BaseCalculator):

    calculator_id = "floor-joist"
    input_model = FloorJoistInputs

    # psf
    DESIGN_LOADS = {"residential": 40, "commercial-light": 50, "commercial-heavy": 80}
    # (max span ft, size, rated span ft)
    SPAN_BANDS = [
        (10, "2x8", 11.5),
        (14, "2x10", 15.2),
        (18, "2x12", 18.8),
    ]
    I_JOIST = "Engineered I-Joist"
    JOIST_PRICES = {"2x8": 8.50, "2x10": 12.75, "2x12": 18.25, I_JOIST: 28.50}
    REFERENCE_SPACING_IN = 16
    RUN_FT = 16

    TIPS = [
        "Check local building codes for span requirements",
        "Use proper hangers at beam connections",
        "Crown joists with bow up during installation",
        "Block or cross-bridge at mid-span for long spans",
        "Ensure proper bearing at supports",
        "Consider engineered lumber for longer spans",
    ]

    RESULT_LABELS = {
        "recommended_size": ("Recommended Size", ""),
        "max_span": ("Rated Span", "ft"),
        "deflection": ("Deflection Limit", ""),
        "load_capacity": ("Load Capacity", "psf"),
        "joists_needed": ("Joists per 16 ft", ""),
        "material_cost": ("Material Cost", "$"),
    }

    def size_for_span(self, span_length: float) -> tuple:
        for max_span, size, rated_span in self.SPAN_BANDS:
            if span_length <= max_span:
                return size, rated_span
        return self.I_JOIST, span_length

    def compute(self, inputs: FloorJoistInputs) -> dict:
        spacing = float(inputs.joist_spacing)
        size, rated_span = self.size_for_span(inputs.span_length)
        base_load = self.lookup(self.DESIGN_LOADS, inputs.load_type, "load type")
        joists = math.ceil(self.RUN_FT / spacing) + 1

        return {
            "recommended_size": size,
            "max_span": rated_span,
            "deflection": inputs.deflection_limit,
            "load_capacity": base_load * (self.REFERENCE_SPACING_IN / spacing),
            "joists_needed": joists,
            "material_cost": joists * self.JOIST_PRICES[size],
            "installation_tips": list(self.TIPS),
        }
