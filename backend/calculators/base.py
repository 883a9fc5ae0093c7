"""
Abstract base class for all tuning calculators.

Input: raw form fields dict (values may be text or numbers)
Output: CalculatorResult dict:
    {
        calculator: str,
        status: "ok" | "error",
        message: str | None,
        errors: [Issue],
        advisories: [Issue],
        ...calculator-specific values,
    }
Issue = {code: str, field: str | None, message: str}

Invalid input never raises - it comes back as status "error".
"""

import logging
from abc import ABC, abstractmethod

from ..config import settings
from .normalize import normalize_number, normalize_nozzle, is_number

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_ERROR = "error"


class BaseCalculator(ABC):
    """All tuning calculators inherit from this."""

    name = ""

    @abstractmethod
    def calculate(self, fields: dict) -> dict:
        """
        Takes the raw form fields.
        Returns a CalculatorResult dict.
        """
        pass

    # --- Helper methods for all calculators ---

    def parse_number(self, value, decimal_places: int = None) -> float:
        """Normalize a form value. NaN when it isn't a number."""
        return normalize_number(value, decimal_places)

    def parse_nozzle(self, value) -> float:
        """Normalize a nozzle diameter (1 decimal place)."""
        return normalize_nozzle(value)

    def is_number(self, value) -> bool:
        return is_number(value)

    def layer_ratio_bounds(self, nozzle_diameter: float) -> tuple:
        """Recommended (min, max) layer height for a nozzle - 20% to 80% of its diameter."""
        return (
            normalize_number(nozzle_diameter * settings.LAYER_RATIO_MIN),
            normalize_number(nozzle_diameter * settings.LAYER_RATIO_MAX),
        )

    def within_layer_ratio(self, layer_height: float, nozzle_diameter: float) -> bool:
        """True when layer_height is inside [0.2d, 0.8d]."""
        min_height, max_height = self.layer_ratio_bounds(nozzle_diameter)
        return min_height <= layer_height <= max_height

    def make_issue(self, code: str, message: str, field: str = None) -> dict:
        """Build an Issue dict (used for both errors and advisories)."""
        return {"code": code, "field": field, "message": message}

    def out_of_range_issue(self, field: str) -> dict:
        """Issue for a formula that overflowed to a non-finite value."""
        return self.make_issue(
            "result_out_of_range",
            "The inputs are too large to produce a usable result.",
            field)

    def make_result(self, values: dict, message: str = None,
                    advisories: list = None) -> dict:
        """Build a successful CalculatorResult."""
        result = {
            "calculator": self.name,
            "status": STATUS_OK,
            "message": message,
            "errors": [],
            "advisories": advisories or [],
        }
        result.update(values)
        return result

    def make_error(self, errors: list, empty_values: tuple = (),
                   advisories: list = None) -> dict:
        """
        Build a failed CalculatorResult.
        empty_values lists the calculator-specific keys, returned as None.
        """
        logger.debug("%s rejected input: %s", self.name,
                     ", ".join(e["code"] for e in errors))
        result = {
            "calculator": self.name,
            "status": STATUS_ERROR,
            "message": errors[0]["message"] if errors else None,
            "errors": errors,
            "advisories": advisories or [],
        }
        for key in empty_values:
            result[key] = None
        return result
