"""
Radiant floor heating calculator.

90% of the floor is heated (cabinets, toilets and walls excluded). Operating
cost assumes 8 hours a day over a 120-day heating season at $0.12/kWh.
"""

from typing import Literal

from pydantic import Field

from .base import BaseCalculator, RoomInputs


class RadiantHeatingInputs(RoomInputs):
    heating_type: Literal["electric", "hydronic"] = "electric"
    flooring_type: Literal["tile", "stone", "engineered-wood", "laminate"] = "tile"
    insulation_r_value: float = Field(default=10, ge=1, le=50)
    target_temp: float = Field(default=75, ge=65, le=85, description="Target floor temperature (°F)")


class RadiantHeatingCalculator(BaseCalculator):

    calculator_id = "radiant-heating"
    input_model = RadiantHeatingInputs

    HEATED_FRACTION = 0.9
    # W per sq ft
    POWER_DENSITY = {"electric": 12, "hydronic": 8}
    CABLE_FT_PER_SQ_FT = 3.3
    SQ_FT_PER_MAT = 10.76
    THERMOSTATS = 1

    # (per heated sq ft, per thermostat)
    SYSTEM_PRICES = {"electric": (8.0, 275.0), "hydronic": (12.0, 350.0)}
    LABOR_PRICE_SQ_FT = 4.5

    HOURS_PER_DAY = 8
    PRICE_PER_KWH = 0.12
    HEATING_DAYS = 120

    RESULT_LABELS = {
        "room_area": ("Room Area", "sq ft"),
        "heating_area": ("Heated Area", "sq ft"),
        "power_required": ("Power Required", "W"),
        "cable_length": ("Heating Cable", "ft"),
        "mat_quantity": ("Heating Mats", "mats"),
        "thermostat_needed": ("Thermostats", ""),
        "material_cost": ("Material Cost", "$"),
        "labor_cost": ("Labor Cost", "$"),
        "installation_cost": ("Installation Cost", "$"),
        "operating_cost": ("Seasonal Operating Cost", "$"),
        "total_project_cost": ("Total Project Cost", "$"),
    }

    def compute(self, inputs: RadiantHeatingInputs) -> dict:
        room_area = self.room_area(inputs)
        heating_area = room_area * self.HEATED_FRACTION
        electric = inputs.heating_type == "electric"

        power_required = heating_area * self.lookup(
            self.POWER_DENSITY, inputs.heating_type, "heating type")
        per_sq_ft, per_thermostat = self.SYSTEM_PRICES[inputs.heating_type]
        material_cost = heating_area * per_sq_ft + self.THERMOSTATS * per_thermostat
        labor_cost = heating_area * self.LABOR_PRICE_SQ_FT
        installation_cost = material_cost + labor_cost

        daily_kwh = power_required * self.HOURS_PER_DAY / 1000

        return {
            "room_area": room_area,
            "heating_area": heating_area,
            "power_required": power_required,
            "cable_length": heating_area * self.CABLE_FT_PER_SQ_FT if electric else 0.0,
            "mat_quantity": self.units_needed(heating_area, self.SQ_FT_PER_MAT),
            "thermostat_needed": self.THERMOSTATS,
            "material_cost": material_cost,
            "labor_cost": labor_cost,
            "installation_cost": installation_cost,
            "operating_cost": daily_kwh * self.PRICE_PER_KWH * self.HEATING_DAYS,
            "total_project_cost": installation_cost,
        }
