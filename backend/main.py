from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import calculators

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger("printcalc")

app = FastAPI(
    title="3D Print Tuning Calculators",
    description="Overhang angle, flow calibration, layer height and volumetric speed calculators",
    version="1.0.0"
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


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}


@app.on_event("startup")
def log_startup():
    """Log the registered calculators once the app is up."""
    from .calculators.registry import list_calculators
    logger.info("%s ready - calculators: %s", settings.APP_NAME, ", ".join(list_calculators()))
