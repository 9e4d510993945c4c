from sqlalchemy import Column, Integer, String, DateTime, JSON
from datetime import datetime
from .database import Base
import enum


class CalculatorCategory(str, enum.Enum):
    BASIC = "basic"
    MATERIALS = "materials"
    ROOM_SHAPES = "room-shapes"
    COSTS = "costs"
    ADVANCED = "advanced"


class Calculation(Base):
    """Snapshot of one calculator run. Inputs and results are stored as JSON copies."""
    __tablename__ = "calculations"

    id = Column(Integer, primary_key=True, index=True)
    calculator_type = Column(String, nullable=False, index=True)
    inputs = Column(JSON, nullable=False)
    results = Column(JSON, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
