"""
Calculator endpoints - one stateless handler per calculator.

GET  /api/calculators                    - registered calculator names
GET  /api/calculators/nozzles            - nozzle sizes the layer-height form offers
POST /api/calculators/overhang-angle     - maximum unsupported overhang
POST /api/calculators/flow-calibration   - corrected flow from 20 wall measurements
POST /api/calculators/layer-height       - layer height for a wall angle
POST /api/calculators/volumetric-speed   - mm³/s <-> mm/s
POST /api/calculators/{name}             - raw fields dict through the registry

Input problems come back as status "error" with HTTP 200 - only malformed
requests get a 422.
"""

import logging

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..models import SUPPORTED_NOZZLES
from ..calculators.registry import get_calculator, list_calculators, list_routes
from ..calculators.overhang_angle import compute_overhang_angle
from ..calculators.flow_calibration import compute_flow_calibration
from ..calculators.layer_height import compute_layer_height
from ..calculators.volumetric_speed import VolumetricSpeedCalculator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculators", tags=["calculators"])


@router.get("/")
def list_all():
    return {"calculators": list_calculators(), "routes": list_routes()}


@router.get("/nozzles")
def list_nozzles():
    return {"nozzle_diameters": SUPPORTED_NOZZLES}


@router.post("/overhang-angle", response_model=schemas.OverhangResult)
def overhang_angle(request: schemas.OverhangRequest):
    return compute_overhang_angle(request.nozzle_diameter, request.layer_height, request.slicer)


@router.post("/flow-calibration", response_model=schemas.FlowCalibrationResult)
def flow_calibration(request: schemas.FlowCalibrationRequest):
    return compute_flow_calibration(
        request.measurements, request.extrusion_width, request.configured_flow)


@router.post("/layer-height", response_model=schemas.LayerHeightResult)
def layer_height(request: schemas.LayerHeightRequest):
    return compute_layer_height(request.angle, request.slicer, request.nozzle_diameter)


@router.post("/volumetric-speed", response_model=schemas.VolumetricResult)
def volumetric_speed(request: schemas.VolumetricRequest):
    # Both speed fields may be posted; the mode picks which one is read
    return VolumetricSpeedCalculator().calculate(request.model_dump())


@router.post("/{name}")
def calculate(name: str, request: schemas.CalculateRequest):
    """Run any registered calculator on a raw fields dict."""
    try:
        calculator = get_calculator(name)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    result = calculator.calculate(request.fields)
    logger.info("%s → %s", name, result["status"])
    return result
