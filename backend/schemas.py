from pydantic import BaseModel
from typing import Optional, List, Union
from .models import SlicerConvention, VolumetricMode

# Form values may arrive as numbers or as text ("0.4", "0.4mm")
RawValue = Optional[Union[float, str]]


class Issue(BaseModel):
    code: str
    field: Optional[str] = None
    message: str


class CalculatorResultBase(BaseModel):
    calculator: str
    status: str
    message: Optional[str] = None
    errors: List[Issue] = []
    advisories: List[Issue] = []


# --- Overhang angle ---

class OverhangRequest(BaseModel):
    nozzle_diameter: RawValue = None
    layer_height: RawValue = None
    slicer: SlicerConvention = SlicerConvention.ORCA


class OverhangResult(CalculatorResultBase):
    angle_degrees: Optional[float] = None
    slicer: Optional[str] = None


# --- Flow calibration ---

class FlowCalibrationRequest(BaseModel):
    measurements: List[RawValue] = []
    extrusion_width: RawValue = None
    configured_flow: RawValue = None


class FlowCalibrationResult(CalculatorResultBase):
    new_flow_percent: Optional[float] = None
    average_measurement: Optional[float] = None


# --- Layer height ---

class LayerHeightRequest(BaseModel):
    angle: RawValue = None
    slicer: SlicerConvention = SlicerConvention.ORCA
    nozzle_diameter: RawValue = None


class LayerHeightResult(CalculatorResultBase):
    height_mm: Optional[float] = None
    is_valid: Optional[bool] = None
    within_ratio: Optional[bool] = None
    on_step: Optional[bool] = None
    reason: Optional[str] = None
    nozzle_diameter: Optional[float] = None
    slicer: Optional[str] = None
    suggested_angle: Optional[float] = None
    suggested_height: Optional[float] = None
    suggestion: Optional[str] = None


# --- Volumetric speed ---

class VolumetricRequest(BaseModel):
    layer_height: RawValue = None
    nozzle_diameter: RawValue = None
    mode: VolumetricMode = VolumetricMode.SOLVE_FOR_FLOW
    print_speed: RawValue = None
    volumetric_speed: RawValue = None


class VolumetricResult(CalculatorResultBase):
    derived_value: Optional[float] = None
    unit: Optional[str] = None
    mode: Optional[str] = None
    explanation: Optional[str] = None


# --- Generic dispatch ---

class CalculateRequest(BaseModel):
    fields: dict = {}
