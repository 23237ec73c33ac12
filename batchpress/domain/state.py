"""Job status transition table.

Lifecycle: running -> done | error, and done | error -> running on re-run.
"""

from __future__ import annotations

from .errors import InvalidStatusTransitionError
from .models import JobStatus

_JOB_TRANSITIONS: frozenset[tuple[JobStatus, JobStatus]] = frozenset(
    {
        (JobStatus.RUNNING, JobStatus.DONE),
        (JobStatus.RUNNING, JobStatus.ERROR),
        (JobStatus.DONE, JobStatus.RUNNING),
        (JobStatus.ERROR, JobStatus.RUNNING),
    }
)


def domain_can_transition(current_status: JobStatus, target_status: JobStatus) -> bool:
    """Return whether a status change is part of the job lifecycle."""

    return (current_status, target_status) in _JOB_TRANSITIONS


def domain_validate_transition(current_status: JobStatus, target_status: JobStatus) -> None:
    """Validate a status change.

    Args:
        current_status: Status stored on the job.
        target_status: Requested status.

    Returns:
        None: Validation succeeds silently.

    Raises:
        InvalidStatusTransitionError: Raised when the change is not allowed.
    """

    if not domain_can_transition(current_status, target_status):
        raise InvalidStatusTransitionError(current_status.value, target_status.value)
