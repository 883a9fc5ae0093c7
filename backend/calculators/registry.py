"""
Calculator registry - maps calculator names to calculator classes.

Names are the snake_case keys below. The hyphenated route names used by the
typed endpoints ("overhang-angle", "layer-height", ...) resolve to the same
calculators, so a form can post to either spelling.
"""

from .overhang_angle import OverhangAngleCalculator
from .flow_calibration import FlowCalibrationCalculator
from .layer_height import LayerHeightCalculator
from .volumetric_speed import VolumetricSpeedCalculator
from .base import BaseCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    "overhang_angle": OverhangAngleCalculator,
    "flow_calibration": FlowCalibrationCalculator,
    "layer_height": LayerHeightCalculator,
    "volumetric_speed": VolumetricSpeedCalculator,
}

# Route slug -> registry name
ROUTE_ALIASES: dict[str, str] = {
    name.replace("_", "-"): name for name in CALCULATOR_REGISTRY
}


def resolve_name(name: str) -> str:
    """Registry name for a calculator name or route slug. Unknown names pass through."""
    name = str(name).strip().lower()
    return ROUTE_ALIASES.get(name, name)


def route_for(name: str) -> str:
    """Route slug for a registered calculator ("layer_height" -> "layer-height")."""
    return resolve_name(name).replace("_", "-")


def get_calculator(name: str) -> BaseCalculator:
    """Returns an instance of the calculator for a name or route slug, or raises ValueError."""
    key = resolve_name(name)
    if key not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for: {name}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[key]()


def has_calculator(name: str) -> bool:
    """Check if a calculator exists for a name or route slug."""
    return resolve_name(name) in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered calculator names."""
    return list(CALCULATOR_REGISTRY.keys())


def list_routes() -> dict[str, str]:
    """Registered calculator name -> endpoint path under /api/calculators."""
    return {name: "/api/calculators/%s" % route_for(name) for name in CALCULATOR_REGISTRY}
