"""
Abstract base class for all flooring calculators.

Input: raw form fields dict (validated against the calculator's input model)
Output: plain result dict with snake_case keys
"""

import logging
from abc import ABC, abstractmethod
from typing import Literal, Type

from pydantic import BaseModel, Field, ValidationError

from .. import geometry

logger = logging.getLogger(__name__)


class CalculatorInputError(ValueError):
    """Form fields failed schema validation. `errors` is a list of {field, message}."""

    def __init__(self, calculator_id: str, errors: list):
        self.calculator_id = calculator_id
        self.errors = errors
        summary = "; ".join("%s: %s" % (e["field"], e["message"]) for e in errors)
        super().__init__(f"Invalid input for {calculator_id}: {summary}")


FlooringType = Literal["tile", "hardwood", "vinyl", "carpet", "laminate"]


class RoomInputs(BaseModel):
    """Rectangular room footprint in feet — shared by most calculators."""
    room_length: float = Field(ge=0.1, description="Room length (ft)")
    room_width: float = Field(ge=0.1, description="Room width (ft)")


class BaseCalculator(ABC):
    """All flooring calculators inherit from this."""

    calculator_id: str = ""
    input_model: Type[BaseModel] = BaseModel

    # result key -> (label, unit). Order here is display order.
    RESULT_LABELS: dict = {}

    def calculate(self, fields: dict) -> dict:
        """Validate raw fields, then run the formulas."""
        inputs = self.validate(fields)
        result = self.compute(inputs)
        logger.debug("%s computed %d result fields", self.calculator_id, len(result))
        return result

    def validate(self, fields: dict) -> BaseModel:
        try:
            return self.input_model.model_validate(fields or {})
        except ValidationError as e:
            errors = [
                {
                    "field": ".".join(str(part) for part in err["loc"]) or "__root__",
                    "message": err["msg"],
                }
                for err in e.errors()
            ]
            logger.info("Rejected %s input: %d error(s)", self.calculator_id, len(errors))
            raise CalculatorInputError(self.calculator_id, errors) from e

    @abstractmethod
    def compute(self, inputs) -> dict:
        """Takes validated inputs. Returns the result dict."""

    def example_inputs(self) -> dict:
        """Defaults from the input model — required dimensions filled with 10 ft."""
        example = {}
        for name, field in self.input_model.model_fields.items():
            if field.is_required():
                example[name] = 10.0
            else:
                example[name] = field.get_default(call_default_factory=True)
        return example

    # --- Helper methods for all calculators ---

    def apply_waste(self, quantity: float, waste_pct: float) -> float:
        """quantity × (1 + waste%). No rounding."""
        return geometry.with_waste(quantity, waste_pct)

    def units_needed(self, quantity: float, coverage: float = 1.0) -> int:
        """Whole units to cover a quantity. Always rounds up — you can't buy half a box."""
        return geometry.units_needed(quantity, coverage)

    def room_area(self, inputs) -> float:
        return geometry.rectangle_area(inputs.room_length, inputs.room_width)

    def room_perimeter(self, inputs) -> float:
        return geometry.rectangle_perimeter(inputs.room_length, inputs.room_width)

    def lookup(self, table: dict, key, name: str):
        return geometry.lookup(table, key, name)

    def result_cards(self, result: dict) -> list:
        from ..rendering import format_result_cards
        return format_result_cards(result, self.RESULT_LABELS)
