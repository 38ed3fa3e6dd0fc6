"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any

from .defaults import CurveParams, GridParams

KNOWN_SECTIONS = {
    "grid": set(GridParams.__dataclass_fields__),
    "curve": set(CurveParams.__dataclass_fields__),
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_grid_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate price grid parameters."""
        errors = []

        # Validate margin
        if "margin" in params:
            value = params["margin"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="margin",
                    message="Must be a non-negative number",
                    value=value
                ))

        # Validate step
        if "step" in params:
            value = params["step"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="step",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_curve_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate payoff curve parameters."""
        errors = []

        if "precision" in params:
            value = params["precision"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="precision",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "series_label" in params:
            value = params["series_label"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="series_label",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, value in config.items():
            if section not in KNOWN_SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=value
                ))
                continue
            if not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=value
                ))
                continue
            for key in value:
                if key not in KNOWN_SECTIONS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown parameter",
                        value=value[key]
                    ))

        if isinstance(config.get("grid"), dict):
            errors.extend(ConfigValidator.validate_grid_params(config["grid"]))

        if isinstance(config.get("curve"), dict):
            errors.extend(ConfigValidator.validate_curve_params(config["curve"]))

        return errors
