"""
Calculation history - saved calculator runs and their PDF result sheets.

GET    /api/calculations           - most recent first
GET    /api/calculations/{id}
DELETE /api/calculations/{id}
GET    /api/calculations/{id}/pdf  - download the result sheet
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session

from .. import models, schemas
from ..config import settings
from ..database import get_db
from ..pdf_generator import generate_result_pdf

router = APIRouter(prefix="/calculations", tags=["calculations"])


def _get_calculation(calculation_id: int, db: Session) -> models.Calculation:
    calculation = db.query(models.Calculation).filter(models.Calculation.id == calculation_id).first()
    if not calculation:
        raise HTTPException(status_code=404, detail="Calculation not found")
    return calculation


@router.get("/", response_model=List[schemas.CalculationRecord])
def list_calculations(calculator_type: Optional[str] = None, db: Session = Depends(get_db)):
    query = db.query(models.Calculation)
    if calculator_type:
        query = query.filter(models.Calculation.calculator_type == calculator_type)
    return (
        query.order_by(models.Calculation.created_at.desc(), models.Calculation.id.desc())
        .limit(settings.HISTORY_PAGE_LIMIT)
        .all()
    )


@router.get("/{calculation_id}", response_model=schemas.CalculationRecord)
def get_calculation(calculation_id: int, db: Session = Depends(get_db)):
    return _get_calculation(calculation_id, db)


@router.delete("/{calculation_id}")
def delete_calculation(calculation_id: int, db: Session = Depends(get_db)):
    calculation = _get_calculation(calculation_id, db)
    db.delete(calculation)
    db.commit()
    return {"ok": True}


@router.get("/{calculation_id}/pdf")
def download_pdf(calculation_id: int, db: Session = Depends(get_db)):
    """
    Generate and download the PDF result sheet for a saved calculation.

    Returns: application/pdf
    """
    calculation = _get_calculation(calculation_id, db)
    try:
        pdf_bytes = generate_result_pdf(
            calculation.calculator_type,
            calculation.inputs or {},
            calculation.results or {},
            created_at=calculation.created_at,
            app_name=settings.APP_NAME,
        )
    except ValueError as e:
        # Saved under an id that is no longer registered
        raise HTTPException(status_code=400, detail=str(e))

    filename = f"{calculation.calculator_type}-{calculation.id}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )
