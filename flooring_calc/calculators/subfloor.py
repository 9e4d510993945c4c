"""
Subfloor calculator — 4×8 sheet goods over floor joists.

Screws: 2 per joist crossing, with a crossing every 8" along the 96" sheet.
Joist spacing is truncated to whole inches for the count (19.2" counts as 19").
"""

from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs

Thickness = Literal["1/2-inch", "5/8-inch", "3/4-inch", "1-inch", "1-1/8-inch"]


class SubfloorInputs(RoomInputs):
    subfloor_type: Literal["plywood", "osb", "particle-board", "cement-board", "drycore"] = "plywood"
    thickness: Thickness = "3/4-inch"
    joist_spacing: Literal["12-inch", "16-inch", "19.2-inch", "24-inch"] = "16-inch"
    existing: Literal["none", "remove", "over-existing"] = "none"
    moisture_barrier: bool = False
    sound_dampening: bool = False
    radiant_heat: bool = False
    waste_percentage: float = Field(default=10, ge=5, le=20)


class SubfloorCalculator(BaseCalculator):

    calculator_id = "subfloor"
    input_model = SubfloorInputs

    SHEET_SQ_FT = 32
    SHEET_WIDTH_IN = 48
    SHEET_LENGTH_IN = 96
    SCREW_ROW_SPACING_IN = 8
    SHEETS_PER_ADHESIVE_TUBE = 4
    LABOR_HOURS_PER_SQ_FT = 0.15

    EXISTING_FLOOR_FACTORS = {"none": 1.0, "remove": 2.5, "over-existing": 1.3}

    # $/sheet by type and thickness
    SHEET_PRICES = {
        "plywood":        {"1/2-inch": 32, "5/8-inch": 38, "3/4-inch": 45, "1-inch": 62, "1-1/8-inch": 68},
        "osb":            {"1/2-inch": 22, "5/8-inch": 26, "3/4-inch": 30, "1-inch": 42, "1-1/8-inch": 46},
        "particle-board": {"1/2-inch": 18, "5/8-inch": 22, "3/4-inch": 26, "1-inch": 36, "1-1/8-inch": 40},
        "cement-board":   {"1/2-inch": 45, "5/8-inch": 52, "3/4-inch": 58, "1-inch": 75, "1-1/8-inch": 82},
        "drycore":        {"1/2-inch": 55, "5/8-inch": 62, "3/4-inch": 68, "1-inch": 85, "1-1/8-inch": 92},
    }
    SCREW_PRICE_PER_100 = 12.0
    ADHESIVE_TUBE_PRICE = 8.0
    MOISTURE_BARRIER_PRICE = 0.35
    SOUND_DAMPENING_PRICE = 1.25

    TOOLS = [
        "Circular saw",
        "Drill/driver",
        "Chalk line",
        "Measuring tape",
        "Safety glasses",
        "Hearing protection",
        "Knee pads",
    ]

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "sheets_needed": ("Sheets (4×8)", "sheets"),
        "square_feet_needed": ("Sheet Coverage", "sq ft"),
        "total_screws": ("Screws", "screws"),
        "adhesive_tubes": ("Adhesive", "tubes"),
        "moisture_barrier_needed": ("Moisture Barrier", "sq ft"),
        "sound_dampening_needed": ("Sound Dampening", "sq ft"),
        "labor_hours": ("Labor", "hours"),
        "total_cost": ("Total Cost", "$"),
    }

    def compute(self, inputs: SubfloorInputs) -> dict:
        room_area = self.room_area(inputs)
        adjusted_area = self.apply_waste(room_area, inputs.waste_percentage)
        sheets = self.units_needed(adjusted_area, self.SHEET_SQ_FT)

        spacing_in = int(float(inputs.joist_spacing.split("-")[0]))
        screws_per_sheet = self.units_needed(
            self.SHEET_WIDTH_IN / spacing_in * (self.SHEET_LENGTH_IN / self.SCREW_ROW_SPACING_IN)
        ) * 2
        total_screws = sheets * screws_per_sheet
        adhesive_tubes = self.units_needed(sheets, self.SHEETS_PER_ADHESIVE_TUBE)

        moisture_barrier = self.units_needed(room_area * 1.1) if inputs.moisture_barrier else 0
        sound_dampening = self.units_needed(room_area * 1.05) if inputs.sound_dampening else 0

        labor_hours = room_area * self.LABOR_HOURS_PER_SQ_FT * self.lookup(
            self.EXISTING_FLOOR_FACTORS, inputs.existing, "existing floor")

        sheet_price = self.lookup(self.SHEET_PRICES, inputs.subfloor_type, "subfloor type")[inputs.thickness]
        total_cost = (
            sheets * sheet_price
            + self.units_needed(total_screws, 100) * self.SCREW_PRICE_PER_100
            + adhesive_tubes * self.ADHESIVE_TUBE_PRICE
            + moisture_barrier * self.MOISTURE_BARRIER_PRICE
            + sound_dampening * self.SOUND_DAMPENING_PRICE
        )

        tools = list(self.TOOLS)
        if inputs.subfloor_type == "cement-board":
            tools += ["Carbide blade", "Dust mask"]

        return {
            "room_area": room_area,
            "sheets_needed": sheets,
            "square_feet_needed": sheets * self.SHEET_SQ_FT,
            "total_screws": total_screws,
            "adhesive_tubes": adhesive_tubes,
            "moisture_barrier_needed": moisture_barrier,
            "sound_dampening_needed": sound_dampening,
            "labor_hours": labor_hours,
            "total_cost": total_cost,
            "installation_steps": self._steps(inputs),
            "tools_required": tools,
        }

    def _steps(self, inputs: SubfloorInputs) -> list:
        steps = []
        if inputs.existing == "remove":
            steps.append("Remove existing subfloor")
        steps += ["Check joist level and spacing", "Mark joist locations on walls"]
        if inputs.moisture_barrier:
            steps.append("Install moisture barrier")
        if inputs.sound_dampening:
            steps.append("Install sound dampening material")
        steps += [
            "Cut subfloor panels to fit",
            "Apply construction adhesive to joists",
            'Install subfloor panels with 1/8" gaps',
            "Secure with appropriate fasteners",
            "Check for squeaks and refasten if needed",
        ]
        return steps
