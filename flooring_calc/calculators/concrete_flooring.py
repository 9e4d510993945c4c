"""
Decorative concrete flooring calculator — polished, stained, overlay and
microtopping finishes.

All costs are per sq ft of floor. The finish level scales both material and
labor.
"""

from typing import Literal

from .base import BaseCalculator, RoomInputs
from ..geometry import safe_divide

ConcreteFloor = Literal["polished-concrete", "stained-concrete", "overlay", "microtopping"]


class ConcreteFlooringInputs(RoomInputs):
    floor_type: ConcreteFloor = "polished-concrete"
    concrete_condition: Literal["new", "existing-good", "existing-poor", "needs-repair"] = "existing-good"
    finish_level: Literal["basic", "standard", "premium", "decorative"] = "standard"
    color_options: Literal["natural", "integral-color", "acid-stain", "water-stain", "dye"] = "natural"
    sealer_type: Literal["none", "penetrating", "topical-acrylic", "urethane", "epoxy"] = "penetrating"
    aggregate_exposure: Literal["none", "light", "medium", "heavy"] = "light"
    include_prep: bool = True
    include_sealer: bool = True
    include_polishing: bool = True


class ConcreteFlooringCalculator(BaseCalculator):

    calculator_id = "concrete-flooring"
    input_model = ConcreteFlooringInputs

    # $/sq ft
    PREP_PRICES = {"new": 2.50, "existing-good": 4.00, "existing-poor": 8.50, "needs-repair": 15.00}
    MATERIAL_PRICES = {
        "polished-concrete": 3.50, "stained-concrete": 5.50, "overlay": 8.00, "microtopping": 12.00,
    }
    LABOR_RATES = {
        "polished-concrete": 6.00, "stained-concrete": 8.50, "overlay": 12.00, "microtopping": 18.00,
    }
    FINISH_MULTIPLIERS = {"basic": 1.0, "standard": 1.4, "premium": 1.8, "decorative": 2.5}
    COLOR_PRICES = {
        "natural": 0.0, "integral-color": 1.50, "acid-stain": 3.00, "water-stain": 2.50, "dye": 4.50,
    }
    SEALER_PRICES = {
        "none": 0.0, "penetrating": 1.25, "topical-acrylic": 2.00, "urethane": 3.50, "epoxy": 4.50,
    }
    POLISHING_PRICES = {"none": 0.0, "light": 2.50, "medium": 4.00, "heavy": 6.50}

    DURABILITY = {
        "polished-concrete": "Excellent - 25+ years",
        "stained-concrete": "Very Good - 15-20 years",
        "overlay": "Good - 10-15 years",
        "microtopping": "Good - 8-12 years",
    }
    MAINTENANCE = {
        "polished-concrete": "Very Low - Occasional dust mopping",
        "stained-concrete": "Low - Periodic resealing",
        "overlay": "Medium - Regular maintenance",
        "microtopping": "Medium - Careful maintenance",
    }
    LIFESPAN = {
        "polished-concrete": "25-50 years with proper care",
        "stained-concrete": "15-25 years with resealing",
        "overlay": "10-20 years depending on traffic",
        "microtopping": "8-15 years with maintenance",
    }

    RESULT_LABELS = {
        "room_area": ("Floor Area", "sq ft"),
        "prep_cost": ("Surface Prep", "$"),
        "material_cost": ("Materials", "$"),
        "labor_cost": ("Labor", "$"),
        "sealer_cost": ("Sealer", "$"),
        "polishing_cost": ("Polishing", "$"),
        "total_cost": ("Total Cost", "$"),
        "cost_per_sq_ft": ("Cost per Sq Ft", "$"),
        "durability_rating": ("Durability", ""),
        "maintenance_level": ("Maintenance", ""),
        "expected_lifespan": ("Expected Lifespan", ""),
    }

    def compute(self, inputs: ConcreteFlooringInputs) -> dict:
        area = self.room_area(inputs)
        finish = self.lookup(self.FINISH_MULTIPLIERS, inputs.finish_level, "finish level")

        prep_cost = 0.0
        if inputs.include_prep:
            prep_cost = area * self.lookup(self.PREP_PRICES, inputs.concrete_condition, "concrete condition")
        material_cost = (
            area * self.lookup(self.MATERIAL_PRICES, inputs.floor_type, "floor type") * finish
            + area * self.lookup(self.COLOR_PRICES, inputs.color_options, "color option")
        )
        labor_cost = area * self.LABOR_RATES[inputs.floor_type] * finish
        sealer_cost = 0.0
        if inputs.include_sealer:
            sealer_cost = area * self.lookup(self.SEALER_PRICES, inputs.sealer_type, "sealer type")
        polishing_cost = 0.0
        if inputs.include_polishing:
            polishing_cost = area * self.lookup(
                self.POLISHING_PRICES, inputs.aggregate_exposure, "aggregate exposure")

        total_cost = prep_cost + material_cost + labor_cost + sealer_cost + polishing_cost

        return {
            "room_area": area,
            "prep_cost": prep_cost,
            "material_cost": material_cost,
            "labor_cost": labor_cost,
            "sealer_cost": sealer_cost,
            "polishing_cost": polishing_cost,
            "total_cost": total_cost,
            "cost_per_sq_ft": safe_divide(total_cost, area),
            "durability_rating": self.DURABILITY[inputs.floor_type],
            "maintenance_level": self.MAINTENANCE[inputs.floor_type],
            "process_steps": self._steps(inputs),
            "expected_lifespan": self.LIFESPAN[inputs.floor_type],
        }

    def _steps(self, inputs: ConcreteFlooringInputs) -> list:
        steps = []
        if inputs.include_prep:
            steps.append("Surface preparation and repair")
        steps.append("Clean and profile concrete surface")
        if inputs.floor_type in ("overlay", "microtopping"):
            steps.append("Apply base overlay material")
        if inputs.color_options != "natural":
            steps.append("Apply %s" % inputs.color_options.replace("-", " ", 1))
        if inputs.include_polishing and inputs.aggregate_exposure != "none":
            steps.append(f"Polish to {inputs.aggregate_exposure} aggregate exposure")
        if inputs.include_sealer:
            steps.append("Apply %s sealer" % inputs.sealer_type.replace("-", " ", 1))
        steps.append("Final inspection and curing")
        return steps
