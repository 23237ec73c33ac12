"""Validation helpers for target size parameters."""

from __future__ import annotations

import math
from numbers import Real

from .errors import TargetParametersValidationError
from .models import SizeUnit, TargetParameters


def domain_parse_size_unit(unit: object) -> SizeUnit:
    """Parse a size unit value.

    Args:
        unit: Candidate unit (`SizeUnit` or its string value).

    Returns:
        SizeUnit: Parsed unit.

    Raises:
        TargetParametersValidationError: Raised when unit is not `KB` or `MB`.
    """

    if isinstance(unit, SizeUnit):
        return unit
    if isinstance(unit, str):
        try:
            return SizeUnit(unit.strip().upper())
        except ValueError:
            pass
    raise TargetParametersValidationError(f"unit must be one of KB, MB; got {unit!r}")


def domain_validate_target_size(size: object) -> float:
    """Validate a target size value.

    Args:
        size: Candidate size value.

    Returns:
        float: Validated positive finite size.

    Raises:
        TargetParametersValidationError: Raised when size is not a positive finite number.
    """

    if isinstance(size, bool) or not isinstance(size, Real):
        raise TargetParametersValidationError(f"size must be a number; got {size!r}")
    normalized_size = float(size)
    if not math.isfinite(normalized_size) or normalized_size <= 0:
        raise TargetParametersValidationError(f"size must be a positive finite number; got {size!r}")
    return normalized_size


def domain_build_target_parameters(size: object, unit: object) -> TargetParameters:
    """Build validated target parameters from raw user input.

    Args:
        size: Candidate size value.
        unit: Candidate unit value.

    Returns:
        TargetParameters: Validated parameters.

    Raises:
        TargetParametersValidationError: Raised when either value is invalid.
    """

    parameters = TargetParameters(size=domain_validate_target_size(size), unit=domain_parse_size_unit(unit))
    if not math.isfinite(parameters.target_size_bytes):
        raise TargetParametersValidationError(
            f"size {size!r} {parameters.unit.value} overflows the target byte count"
        )
    return parameters


def domain_merge_target_parameters(
    current: TargetParameters,
    size: object | None = None,
    unit: object | None = None,
) -> TargetParameters:
    """Merge optional overrides into existing parameters.

    Args:
        current: Parameters currently assigned to a job.
        size: Optional replacement size.
        unit: Optional replacement unit.

    Returns:
        TargetParameters: Validated merged parameters.

    Raises:
        TargetParametersValidationError: Raised when a supplied override is invalid.
    """

    return domain_build_target_parameters(
        size=current.size if size is None else size,
        unit=current.unit if unit is None else unit,
    )
