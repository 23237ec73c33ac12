"""Project-native typed exceptions for job orchestration failures."""

from __future__ import annotations


class BatchpressError(Exception):
    """Base exception for orchestration-level failures."""


class TargetParametersValidationError(BatchpressError, ValueError):
    """Target size parameters failed validation; no state was mutated."""


class JobNotFoundError(BatchpressError, KeyError):
    """Requested job id is not present in the job store.

    Attributes:
        job_id: Missing job identifier.
    """

    def __init__(self, job_id: int):
        super().__init__(f"job not found: {job_id}")
        self.job_id = job_id

    def __str__(self) -> str:
        return str(self.args[0])


class JobAlreadyRunningError(BatchpressError, RuntimeError):
    """Re-run requested for a job whose transformation is still outstanding.

    Attributes:
        job_id: Running job identifier.
    """

    def __init__(self, job_id: int):
        super().__init__(f"job {job_id} is already running")
        self.job_id = job_id


class InvalidStatusTransitionError(BatchpressError, RuntimeError):
    """Attempted job status change is not part of the lifecycle."""

    def __init__(self, current_status: str, target_status: str):
        super().__init__(f"invalid job status transition: {current_status} -> {target_status}")
        self.current_status = current_status
        self.target_status = target_status


class ExportAlreadyActiveError(BatchpressError, RuntimeError):
    """Raised when an export is rejected because one bundling run is outstanding."""


class ExportBundlingError(BatchpressError, RuntimeError):
    """Archive collaborator failed; no archive was produced."""


class ViewHandleReleaseError(BatchpressError, RuntimeError):
    """View handle was released twice or was never acquired by this manager."""
