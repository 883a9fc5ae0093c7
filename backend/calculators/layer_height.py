"""
Layer height calculator - nozzle / layer ratio for a target wall angle.

Given the wall angle you want printed cleanly, derive the layer height whose
step matches it on the chosen nozzle:

    layer_height = tan(effective_angle) * (nozzle / 2)

OrcaSlicer measures the angle from horizontal; other slicers from vertical,
so they use 90 - angle.

A height is valid only if both hold:
    1. 20% <= height / nozzle <= 80%
    2. it sits within 0.001 mm of a 0.02 mm Z step

When the height fails, the nearest whole-degree offset from the requested angle
that does produce a valid height is suggested.
"""

import math

from ..config import settings
from ..models import SlicerConvention, SUPPORTED_NOZZLES, parse_slicer
from .base import BaseCalculator
from .normalize import format_number, round_half_up

MIN_ANGLE = 1
MAX_ANGLE = 89

SUGGESTION_MESSAGE = "Choose another angle to get a safe layer height for your nozzle setup."


class LayerHeightCalculator(BaseCalculator):

    name = "layer_height"
    RESULT_KEYS = (
        "height_mm", "is_valid", "within_ratio", "on_step", "reason",
        "nozzle_diameter", "slicer", "suggested_angle", "suggested_height",
        "suggestion",
    )

    def calculate(self, fields: dict) -> dict:
        angle = self.parse_number(fields.get("angle"))
        slicer = parse_slicer(fields.get("slicer"))
        nozzle_diameter = self.parse_nozzle(fields.get("nozzle_diameter"))

        if not self.is_number(angle) or angle < MIN_ANGLE or angle > MAX_ANGLE:
            return self.make_error(
                [self.make_issue(
                    "angle_out_of_range",
                    "Enter an angle between %d° and %d° to continue." % (MIN_ANGLE, MAX_ANGLE),
                    "angle")],
                self.RESULT_KEYS,
            )

        if nozzle_diameter not in SUPPORTED_NOZZLES:
            return self.make_error(
                [self.make_issue(
                    "unsupported_nozzle",
                    "Select one of the supported nozzle sizes: %s mm." % ", ".join(
                        format_number(n) for n in SUPPORTED_NOZZLES),
                    "nozzle_diameter")],
                self.RESULT_KEYS,
            )

        height = self.height_for_angle(angle, slicer, nozzle_diameter)
        within_ratio = self.within_layer_ratio(height, nozzle_diameter)
        on_step = self.is_on_step(height)
        is_valid = within_ratio and on_step

        message = "Ideal layer height for the %s mm nozzle: %s mm" % (
            format_number(nozzle_diameter), format_number(height))

        values = {
            "height_mm": height,
            "is_valid": is_valid,
            "within_ratio": within_ratio,
            "on_step": on_step,
            "reason": None,
            "nozzle_diameter": nozzle_diameter,
            "slicer": slicer.value,
            "suggested_angle": None,
            "suggested_height": None,
            "suggestion": None,
        }

        if is_valid:
            return self.make_result(values, message=message + " (valid)")

        advisories = []
        if not within_ratio:
            min_height, max_height = self.layer_ratio_bounds(nozzle_diameter)
            advisories.append(self.make_issue(
                "out_of_ratio",
                "Layer height is outside %s-%s mm (20%%-80%% of the nozzle diameter)." % (
                    format_number(min_height), format_number(max_height)),
                "height_mm"))
        if not on_step:
            advisories.append(self.make_issue(
                "off_step",
                "Layer height is not a multiple of %s mm." % format_number(settings.LAYER_STEP_MM),
                "height_mm"))

        suggested_angle, suggested_height = self.suggest_angle(angle, slicer, nozzle_diameter)

        values["reason"] = " ".join(a["message"] for a in advisories)
        values["suggestion"] = SUGGESTION_MESSAGE
        values["suggested_angle"] = suggested_angle
        values["suggested_height"] = suggested_height
        return self.make_result(values, message=message, advisories=advisories)

    def height_for_angle(self, angle: float, slicer: SlicerConvention,
                         nozzle_diameter: float) -> float:
        """Layer height (2 decimals) that produces angle on this nozzle."""
        effective_angle = angle if slicer == SlicerConvention.ORCA else 90 - angle
        return self.parse_number(math.tan(math.radians(effective_angle)) * (nozzle_diameter / 2))

    def is_on_step(self, height: float) -> bool:
        """True when height is within tolerance of the nearest Z step."""
        step = settings.LAYER_STEP_MM
        nearest = self.parse_number(round_half_up(height / step) * step)
        return abs(height - nearest) < settings.LAYER_STEP_TOLERANCE_MM

    def is_valid_height(self, height: float, nozzle_diameter: float) -> bool:
        return self.within_layer_ratio(height, nozzle_diameter) and self.is_on_step(height)

    def suggest_angle(self, angle: float, slicer: SlicerConvention,
                      nozzle_diameter: float) -> tuple:
        """
        Walk outward from angle one degree at a time (up first, then down)
        and return (angle, height) for the first valid height.
        Returns (None, None) when no angle in range works.
        """
        for offset in range(1, MAX_ANGLE - MIN_ANGLE + 1):
            for candidate in (angle + offset, angle - offset):
                if candidate < MIN_ANGLE or candidate > MAX_ANGLE:
                    continue
                candidate = self.parse_number(candidate)
                height = self.height_for_angle(candidate, slicer, nozzle_diameter)
                if self.is_valid_height(height, nozzle_diameter):
                    return candidate, height
        return None, None


def compute_layer_height(angle, slicer, nozzle_diameter) -> dict:
    """Ideal layer height for a wall angle, with ratio and Z-step validation."""
    return LayerHeightCalculator().calculate({
        "angle": angle,
        "slicer": slicer,
        "nozzle_diameter": nozzle_diameter,
    })
