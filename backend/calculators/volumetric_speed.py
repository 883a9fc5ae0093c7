"""
Volumetric speed calculator.

Volume extruded per second = layer height x line width x print speed, with
the line width taken as the nozzle diameter:

    Q (mm³/s) = h * d * v
    v (mm/s)  = Q / (h * d)

Solve for either side. A layer height outside 20%-80% of the nozzle is an
advisory only - the calculation still runs.
"""

from ..models import VolumetricMode, parse_mode
from .base import BaseCalculator
from .normalize import format_number


class VolumetricSpeedCalculator(BaseCalculator):

    name = "volumetric_speed"
    RESULT_KEYS = ("derived_value", "unit", "mode", "explanation")

    def calculate(self, fields: dict) -> dict:
        layer_height = self.parse_number(fields.get("layer_height"))
        nozzle_diameter = self.parse_nozzle(fields.get("nozzle_diameter"))
        mode = parse_mode(fields.get("mode"))

        advisories = []
        errors = []

        if self.is_number(layer_height) and self.is_number(nozzle_diameter):
            if not self.within_layer_ratio(layer_height, nozzle_diameter):
                advisories.append(self.make_issue(
                    "out_of_ratio",
                    "Warning: the layer height is outside the recommended ratio "
                    "(20% to 80% of the nozzle diameter).",
                    "layer_height"))

        # Report every missing field at once
        if not self.is_number(layer_height):
            errors.append(self.make_issue(
                "missing_value", "Enter the layer height to continue.", "layer_height"))
        elif layer_height <= 0:
            errors.append(self.make_issue(
                "non_positive_value", "Layer height must be greater than zero.", "layer_height"))

        if not self.is_number(nozzle_diameter):
            errors.append(self.make_issue(
                "missing_value", "Enter the nozzle diameter to continue.", "nozzle_diameter"))
        elif nozzle_diameter <= 0:
            errors.append(self.make_issue(
                "non_positive_value", "Nozzle diameter must be greater than zero.",
                "nozzle_diameter"))

        if mode is None:
            errors.append(self.make_issue(
                "invalid_mode",
                "Choose what to calculate: %s." % " or ".join(m.value for m in VolumetricMode),
                "mode"))
            return self.make_error(errors, self.RESULT_KEYS, advisories)

        if mode == VolumetricMode.SOLVE_FOR_FLOW:
            return self._solve_for_flow(fields, layer_height, nozzle_diameter,
                                        errors, advisories)
        return self._solve_for_speed(fields, layer_height, nozzle_diameter,
                                     errors, advisories)

    def _solve_for_flow(self, fields, layer_height, nozzle_diameter, errors, advisories):
        print_speed = self.parse_number(fields.get("print_speed"))

        if not self.is_number(print_speed):
            errors.append(self.make_issue(
                "missing_value", "Enter the print speed to run the calculation.",
                "print_speed"))
            return self.make_error(errors, self.RESULT_KEYS, advisories)
        if print_speed <= 0:
            errors.append(self.make_issue(
                "non_positive_value", "Print speed must be greater than zero.", "print_speed"))
        if errors:
            return self.make_error(errors, self.RESULT_KEYS, advisories)

        volumetric_speed = self.parse_number(layer_height * nozzle_diameter * print_speed)
        if not self.is_number(volumetric_speed):
            errors.append(self.out_of_range_issue("derived_value"))
            return self.make_error(errors, self.RESULT_KEYS, advisories)

        return self.make_result(
            {
                "derived_value": volumetric_speed,
                "unit": "mm³/s",
                "mode": VolumetricMode.SOLVE_FOR_FLOW.value,
                "explanation": (
                    "To print at %s mm/s, the filament must supply a volumetric "
                    "flow of %s mm³/s." % (format_number(print_speed),
                                           format_number(volumetric_speed))),
            },
            message="Calculated volumetric speed: %s mm³/s" % format_number(volumetric_speed),
            advisories=advisories,
        )

    def _solve_for_speed(self, fields, layer_height, nozzle_diameter, errors, advisories):
        volumetric_speed = self.parse_number(fields.get("volumetric_speed"))

        if not self.is_number(volumetric_speed):
            errors.append(self.make_issue(
                "missing_value", "Enter the volumetric speed to run the calculation.",
                "volumetric_speed"))
            return self.make_error(errors, self.RESULT_KEYS, advisories)
        if volumetric_speed <= 0:
            errors.append(self.make_issue(
                "non_positive_value", "Volumetric speed must be greater than zero.",
                "volumetric_speed"))
        # h * d is the divisor - any zero/missing value already produced an error
        if errors:
            return self.make_error(errors, self.RESULT_KEYS, advisories)

        print_speed = self.parse_number(volumetric_speed / (layer_height * nozzle_diameter))
        if not self.is_number(print_speed):
            errors.append(self.out_of_range_issue("derived_value"))
            return self.make_error(errors, self.RESULT_KEYS, advisories)

        return self.make_result(
            {
                "derived_value": print_speed,
                "unit": "mm/s",
                "mode": VolumetricMode.SOLVE_FOR_SPEED.value,
                "explanation": (
                    "To print with a volumetric flow of %s mm³/s, set the speed "
                    "to %s mm/s." % (format_number(volumetric_speed),
                                     format_number(print_speed))),
            },
            message="Calculated print speed: %s mm/s" % format_number(print_speed),
            advisories=advisories,
        )


def compute_volumetric(layer_height, nozzle_diameter, mode, known_value) -> dict:
    """
    Derive volumetric flow from print speed (solve_for_flow) or print speed
    from volumetric flow (solve_for_speed).
    """
    fields = {
        "layer_height": layer_height,
        "nozzle_diameter": nozzle_diameter,
        "mode": mode,
    }
    if parse_mode(mode) == VolumetricMode.SOLVE_FOR_SPEED:
        fields["volumetric_speed"] = known_value
    else:
        fields["print_speed"] = known_value
    return VolumetricSpeedCalculator().calculate(fields)
