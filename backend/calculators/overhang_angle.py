"""
Critical overhang angle calculator.

Extrusion width is taken as the nozzle diameter. A layer of height h laid on
half a bead width (d/2) can overhang up to atan(h / (d/2)) from the vertical.

Cura measures overhang from vertical, OrcaSlicer from horizontal, so the
Orca figure is the complement of the Cura one.
"""

import math

from ..models import SlicerConvention, SLICER_LABELS, parse_slicer
from .base import BaseCalculator
from .normalize import format_number


class OverhangAngleCalculator(BaseCalculator):

    name = "overhang_angle"
    RESULT_KEYS = ("angle_degrees", "slicer")

    def calculate(self, fields: dict) -> dict:
        nozzle_diameter = self.parse_nozzle(fields.get("nozzle_diameter"))
        layer_height = self.parse_number(fields.get("layer_height"))
        slicer = parse_slicer(fields.get("slicer"))

        if not self.is_number(nozzle_diameter) or not self.is_number(layer_height):
            return self.make_error(
                [self.make_issue("invalid_values", "Please enter valid values.")],
                self.RESULT_KEYS,
            )

        # Zero nozzle would saturate atan and report a bogus 0° / 90°
        errors = []
        if nozzle_diameter <= 0:
            errors.append(self.make_issue(
                "non_positive_value", "Nozzle diameter must be greater than zero.",
                "nozzle_diameter"))
        if layer_height <= 0:
            errors.append(self.make_issue(
                "non_positive_value", "Layer height must be greater than zero.",
                "layer_height"))
        if errors:
            return self.make_error(errors, self.RESULT_KEYS)

        extrusion_width = nozzle_diameter
        angle_rad = math.atan(self.parse_number(layer_height / (extrusion_width / 2)))
        overhang_angle = self.parse_number(90 - math.degrees(angle_rad))

        if slicer == SlicerConvention.ORCA:
            overhang_angle = self.parse_number(90 - overhang_angle)

        # h / (d/2) overflows for absurd layer heights
        if not self.is_number(overhang_angle):
            return self.make_error([self.out_of_range_issue("angle_degrees")],
                                   self.RESULT_KEYS)

        message = "Maximum overhang angle (%s): %s°" % (
            SLICER_LABELS[slicer], format_number(overhang_angle))

        return self.make_result(
            {"angle_degrees": overhang_angle, "slicer": slicer.value},
            message=message,
        )


def compute_overhang_angle(nozzle_diameter, layer_height, slicer="orca") -> dict:
    """Maximum unsupported overhang angle for a nozzle / layer height pair."""
    return OverhangAngleCalculator().calculate({
        "nozzle_diameter": nozzle_diameter,
        "layer_height": layer_height,
        "slicer": slicer,
    })
