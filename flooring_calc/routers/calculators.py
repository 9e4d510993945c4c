import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from .. import models, schemas
from ..calculators.base import CalculatorInputError
from ..calculators.registry import get_calculator, has_calculator
from ..catalog import get_calculators_by_category, get_catalog_entry
from ..config import settings
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculators", tags=["calculators"])


def _load_calculator(calculator_id: str):
    if not has_calculator(calculator_id):
        logger.warning("Unknown calculator requested: %s", calculator_id)
        raise HTTPException(status_code=404, detail=f"Calculator not found: {calculator_id}")
    return get_calculator(calculator_id)


@router.get("/", response_model=List[schemas.CalculatorSummary])
def list_calculators(category: str = Query("all")):
    try:
        return get_calculators_by_category(category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{calculator_id}", response_model=schemas.CalculatorDetail)
def get_calculator_detail(calculator_id: str):
    calculator = _load_calculator(calculator_id)
    return {
        **get_catalog_entry(calculator_id),
        "input_schema": calculator.input_model.model_json_schema(),
        "example_inputs": calculator.example_inputs(),
    }


@router.post("/{calculator_id}/calculate", response_model=schemas.CalculateResponse)
def calculate(
    calculator_id: str,
    fields: Optional[dict] = Body(None),
    save: bool = Query(False),
    db: Session = Depends(get_db),
):
    """
    Run one calculator.

    Body: the calculator's input fields (see GET /calculators/{id} for the schema).
    ?save=true records the run in calculation history (when history is enabled).
    """
    calculator = _load_calculator(calculator_id)
    try:
        inputs = calculator.validate(fields)
    except CalculatorInputError as e:
        raise HTTPException(status_code=422, detail=e.errors)

    result = calculator.compute(inputs)
    input_fields = inputs.model_dump()
    logger.info("Calculated %s", calculator_id)

    calculation_id: Optional[int] = None
    if save and settings.HISTORY_ENABLED:
        record = models.Calculation(
            calculator_type=calculator_id,
            inputs=input_fields,
            results=result,
        )
        db.add(record)
        db.commit()
        db.refresh(record)
        calculation_id = record.id
        logger.info("Saved calculation %d (%s)", record.id, calculator_id)

    return {
        "calculator": calculator_id,
        "inputs": input_fields,
        "result": result,
        "cards": calculator.result_cards(result),
        "calculation_id": calculation_id,
    }
