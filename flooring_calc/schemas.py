from pydantic import BaseModel
from typing import Optional, List, Any
from datetime import datetime


class CalculatorSummary(BaseModel):
    id: str
    title: str
    description: str
    category: str
    route: str
    keywords: List[str] = []


class CalculatorDetail(CalculatorSummary):
    input_schema: dict
    example_inputs: dict


class ResultCard(BaseModel):
    key: str
    label: str
    value: Any
    display: str


class CalculateResponse(BaseModel):
    calculator: str
    inputs: dict
    result: dict
    cards: List[ResultCard]
    calculation_id: Optional[int] = None


class CalculationRecord(BaseModel):
    id: int
    calculator_type: str
    inputs: dict
    results: dict
    created_at: datetime
    class Config:
        from_attributes = True
