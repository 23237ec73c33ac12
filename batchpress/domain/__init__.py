"""Domain models used across orchestration layer boundaries."""

from .errors import (
    BatchpressError,
    ExportAlreadyActiveError,
    ExportBundlingError,
    InvalidStatusTransitionError,
    JobAlreadyRunningError,
    JobNotFoundError,
    TargetParametersValidationError,
    ViewHandleReleaseError,
)
from .formatting import domain_compute_savings_percent, domain_format_size_kb
from .models import Job, JobResult, JobStatus, SizeUnit, SourceImage, TargetParameters
from .parameters import (
    domain_build_target_parameters,
    domain_merge_target_parameters,
    domain_parse_size_unit,
    domain_validate_target_size,
)
from .state import domain_can_transition, domain_validate_transition

__all__ = [
    "BatchpressError",
    "ExportAlreadyActiveError",
    "ExportBundlingError",
    "InvalidStatusTransitionError",
    "JobAlreadyRunningError",
    "JobNotFoundError",
    "TargetParametersValidationError",
    "ViewHandleReleaseError",
    "Job",
    "JobResult",
    "JobStatus",
    "SizeUnit",
    "SourceImage",
    "TargetParameters",
    "domain_build_target_parameters",
    "domain_merge_target_parameters",
    "domain_parse_size_unit",
    "domain_validate_target_size",
    "domain_can_transition",
    "domain_validate_transition",
    "domain_compute_savings_percent",
    "domain_format_size_kb",
]
