from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .database import engine, Base
from .routers import calculators, calculations
from .calculators.registry import list_calculators

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("flooring_calc")

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_NAME,
    description="Flooring calculators: validated room and material inputs, quantities, costs",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculators.router, prefix="/api")
app.include_router(calculations.router, prefix="/api")

logger.info("%s ready with %d calculators", settings.APP_NAME, len(list_calculators()))


@app.get("/health")
def health():
    return {"status": "ok", "app": "flooring-calc", "calculators": len(list_calculators())}
