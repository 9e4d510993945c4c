"""
Epoxy floor coating calculator.

Gallons per coat come from per-product coverage rates (sq ft/gal). Coat
systems set how many base and top coats go down; primer and topcoat can be
left out. Labor scales with the floor's condition and the service environment.
"""

from typing import Literal

from .base import BaseCalculator, RoomInputs
from ..geometry import safe_divide

EpoxyProduct = Literal["standard-epoxy", "high-performance", "polyaspartic", "polyurea"]


class EpoxyFlooringInputs(RoomInputs):
    epoxy_type: EpoxyProduct = "standard-epoxy"
    coat_layers: Literal["single-coat", "two-coat", "three-coat"] = "two-coat"
    floor_condition: Literal["new-concrete", "existing-good", "existing-poor", "painted"] = "existing-good"
    decorative_options: Literal["none", "color-flakes", "metallic", "quartz-sand"] = "color-flakes"
    environment: Literal["residential", "light-commercial", "heavy-commercial", "industrial"] = "residential"
    include_prep: bool = True
    include_primer: bool = True
    include_topcoat: bool = True


class EpoxyFlooringCalculator(BaseCalculator):

    calculator_id = "epoxy-flooring"
    input_model = EpoxyFlooringInputs

    # sq ft per gallon: (primer, base, topcoat)
    COVERAGE = {
        "standard-epoxy": (400, 250, 350),
        "high-performance": (350, 200, 300),
        "polyaspartic": (300, 180, 250),
        "polyurea": (350, 200, 280),
    }
    # $ per gallon: (primer, base, topcoat)
    GALLON_PRICES = {
        "standard-epoxy": (45, 85, 65),
        "high-performance": (55, 120, 95),
        "polyaspartic": (75, 180, 150),
        "polyurea": (65, 160, 130),
    }
    # (base coats, top coats)
    COAT_SYSTEMS = {"single-coat": (1, 0), "two-coat": (1, 1), "three-coat": (2, 1)}

    PREP_FACTORS = {"new-concrete": 1.0, "existing-good": 1.2, "existing-poor": 1.8, "painted": 2.5}
    PREP_PRICES = {"new-concrete": 0.50, "existing-good": 2.00, "existing-poor": 5.00, "painted": 8.00}
    ENVIRONMENT_FACTORS = {
        "residential": 1.0, "light-commercial": 1.2, "heavy-commercial": 1.5, "industrial": 2.0,
    }
    LABOR_HOURS_PER_SQ_FT = 0.3

    # (lbs per sq ft, $ per lb)
    DECORATIVE = {
        "none": (0.0, 0.0),
        "color-flakes": (0.05, 3.50),
        "metallic": (0.02, 12.00),
        "quartz-sand": (0.1, 2.25),
    }

    DURABILITY = {
        "standard-epoxy": "5-10 years residential",
        "high-performance": "10-15 years commercial",
        "polyaspartic": "15-20 years high-traffic",
        "polyurea": "20+ years industrial",
    }
    CURE_TIMES = {
        "standard-epoxy": "7-14 days full cure",
        "high-performance": "5-7 days full cure",
        "polyaspartic": "24-48 hours full cure",
        "polyurea": "24 hours full cure",
    }

    RESULT_LABELS = {
        "room_area": ("Floor Area", "sq ft"),
        "primer_needed": ("Primer", "gallons"),
        "base_coat_needed": ("Base Coat", "gallons"),
        "topcoat_needed": ("Topcoat", "gallons"),
        "decorative_material": ("Decorative Media", "lbs"),
        "total_material_cost": ("Material Cost", "$"),
        "prep_cost": ("Surface Prep", "$"),
        "labor_hours": ("Labor", "hours"),
        "durability_rating": ("Durability", ""),
        "cure_time": ("Cure Time", ""),
    }

    def compute(self, inputs: EpoxyFlooringInputs) -> dict:
        area = self.room_area(inputs)
        primer_cov, base_cov, top_cov = self.lookup(self.COVERAGE, inputs.epoxy_type, "epoxy type")
        primer_price, base_price, top_price = self.GALLON_PRICES[inputs.epoxy_type]
        base_coats, top_coats = self.lookup(self.COAT_SYSTEMS, inputs.coat_layers, "coat layers")

        primer = safe_divide(area, primer_cov) if inputs.include_primer else 0.0
        base_coat = safe_divide(area, base_cov) * base_coats
        topcoat = safe_divide(area, top_cov) * top_coats if inputs.include_topcoat else 0.0

        lbs_per_sq_ft, price_per_lb = self.lookup(
            self.DECORATIVE, inputs.decorative_options, "decorative option")
        decorative = area * lbs_per_sq_ft

        total_material_cost = (
            primer * primer_price
            + base_coat * base_price
            + topcoat * top_price
            + decorative * price_per_lb
        )
        prep_cost = 0.0
        if inputs.include_prep:
            prep_cost = area * self.lookup(self.PREP_PRICES, inputs.floor_condition, "floor condition")
        labor_hours = (
            area * self.LABOR_HOURS_PER_SQ_FT
            * self.PREP_FACTORS[inputs.floor_condition]
            * self.lookup(self.ENVIRONMENT_FACTORS, inputs.environment, "environment")
        )

        return {
            "room_area": area,
            "primer_needed": primer,
            "base_coat_needed": base_coat,
            "topcoat_needed": topcoat,
            "decorative_material": decorative,
            "total_material_cost": total_material_cost,
            "prep_cost": prep_cost,
            "labor_hours": labor_hours,
            "durability_rating": self.DURABILITY[inputs.epoxy_type],
            "application_steps": self._steps(inputs, base_coats),
            "cure_time": self.CURE_TIMES[inputs.epoxy_type],
        }

    def _steps(self, inputs: EpoxyFlooringInputs, base_coats: int) -> list:
        steps = ["Surface preparation and cleaning"]
        if inputs.include_primer:
            steps.append("Apply primer coat and allow to cure")
        steps.append("Apply base epoxy coat with roller or squeegee")
        if inputs.decorative_options != "none":
            steps.append(f"Broadcast {inputs.decorative_options} while base is tacky")
        if base_coats > 1:
            steps.append("Apply second base coat if specified")
        if inputs.include_topcoat:
            steps.append("Apply clear topcoat for protection and gloss")
        steps.append("Allow full cure time before heavy use")
        return steps
