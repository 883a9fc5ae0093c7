"""
Flow calibration calculator.

Print a single-wall calibration cube, measure each of its 4 walls at 5 points
(20 measurements) and compare the mean with the extrusion width configured in
the slicer. The flow scales by the same proportion:

    new_flow = (configured_width / mean_measured_width) * configured_flow
"""

from ..config import settings
from .base import BaseCalculator
from .normalize import format_number


class FlowCalibrationCalculator(BaseCalculator):

    name = "flow_calibration"
    RESULT_KEYS = ("new_flow_percent", "average_measurement")

    def calculate(self, fields: dict) -> dict:
        raw_measurements = fields.get("measurements")
        # Anything but a list of values counts as zero measurements
        if not isinstance(raw_measurements, (list, tuple)):
            raw_measurements = []

        # Grid position carries no weight - only parsed values count
        measurements = []
        for value in raw_measurements:
            value = self.parse_number(value)
            if self.is_number(value):
                measurements.append(value)

        expected = settings.FLOW_MEASUREMENT_COUNT
        if len(measurements) != expected:
            return self.make_error(
                [self.make_issue(
                    "incomplete_measurements",
                    "Fill in all %d measurements to calculate the new flow." % expected,
                    "measurements")],
                self.RESULT_KEYS,
            )

        average = self.parse_number(sum(measurements) / len(measurements))

        extrusion_width = self.parse_number(fields.get("extrusion_width"))
        configured_flow = self.parse_number(fields.get("configured_flow"))

        if not self.is_number(extrusion_width) or not self.is_number(configured_flow):
            return self.make_error(
                [self.make_issue(
                    "invalid_values",
                    "Enter the extrusion width and the configured flow to continue.")],
                self.RESULT_KEYS,
            )

        if average <= 0:
            return self.make_error(
                [self.make_issue(
                    "non_positive_value",
                    "The average wall measurement must be greater than zero.",
                    "measurements")],
                self.RESULT_KEYS,
            )

        new_flow = self.parse_number((extrusion_width / average) * configured_flow)
        if not self.is_number(new_flow):
            return self.make_error([self.out_of_range_issue("new_flow_percent")],
                                   self.RESULT_KEYS)

        return self.make_result(
            {"new_flow_percent": new_flow, "average_measurement": average},
            message="Recommended new flow value: %s%%" % format_number(new_flow),
        )


def compute_flow_calibration(measurements, configured_width, configured_flow) -> dict:
    """Corrected flow percentage from 20 wall measurements."""
    return FlowCalibrationCalculator().calculate({
        "measurements": measurements,
        "extrusion_width": configured_width,
        "configured_flow": configured_flow,
    })
