"""Typed domain models shared across orchestration layers.

Jobs are immutable snapshots. The job store replaces a job with an updated
copy on every mutation, so a snapshot returned to a caller never changes
underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SizeUnit(str, Enum):
    """Unit used to express a target output size."""

    KB = "KB"
    MB = "MB"

    @property
    def multiplier(self) -> int:
        """Return the byte multiplier for this unit."""

        if self is SizeUnit.MB:
            return 1024 * 1024
        return 1024


class JobStatus(str, Enum):
    """Job lifecycle status. Jobs enter `running` at creation."""

    RUNNING = "running"
    DONE = "done"
    ERROR = "error"


@dataclass(frozen=True)
class SourceImage:
    """One submitted input.

    Attributes:
        name: Original file name, used for export entry naming.
        payload: Immutable original image bytes.
    """

    name: str
    payload: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.payload)


@dataclass(frozen=True)
class TargetParameters:
    """Target output size configuration consumed by a run.

    Attributes:
        size: Positive finite target size value.
        unit: Unit the size value is expressed in.
    """

    size: float
    unit: SizeUnit

    @property
    def target_size_bytes(self) -> float:
        """Return the size budget in bytes passed to the transformation."""

        return self.size * self.unit.multiplier


@dataclass(frozen=True)
class JobResult:
    """Output of one successful run paired with the view handle presenting it.

    Attributes:
        payload: Transformed output bytes.
        view_handle: Handle acquired over `payload`; released when the result is retired.
    """

    payload: bytes
    view_handle: Any

    @property
    def size_bytes(self) -> int:
        return len(self.payload)


@dataclass(frozen=True)
class Job:
    """One submitted input's end-to-end transformation record.

    `last_result` is retained across re-runs and failures until a newer
    successful run replaces it or the job is reset or removed. Callers that
    need the presentable output should read `result_payload` and
    `result_view_handle`, which are only populated while the job is `done`.

    Attributes:
        job_id: Session-unique job identifier.
        source: Submitted input.
        source_view_handle: Handle presenting the source bytes.
        target_parameters: Parameters the next run consumes.
        status: Lifecycle status.
        run_epoch: Epoch of the most recent dispatch; stale completions carry an older value.
        last_result: Last successful output, if any.
        error_message: Failure description of the most recent failed run.
    """

    job_id: int
    source: SourceImage
    source_view_handle: Any
    target_parameters: TargetParameters
    status: JobStatus
    run_epoch: int
    last_result: JobResult | None = None
    error_message: str | None = None

    @property
    def result_payload(self) -> bytes | None:
        if self.status is JobStatus.DONE and self.last_result is not None:
            return self.last_result.payload
        return None

    @property
    def result_view_handle(self) -> Any | None:
        if self.status is JobStatus.DONE and self.last_result is not None:
            return self.last_result.view_handle
        return None
