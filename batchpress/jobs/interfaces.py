"""Typed result contracts for job-layer orchestration."""

from dataclasses import dataclass

RUN_OUTCOME_DONE = "done"
RUN_OUTCOME_ERROR = "error"
RUN_OUTCOME_DISCARDED = "discarded"


@dataclass(frozen=True)
class JobRunResult:
    """Outcome of one runner invocation.

    Attributes:
        job_id: Job identifier the run was dispatched for.
        run_epoch: Epoch the run was dispatched with.
        outcome: `done`, `error`, or `discarded` when the job was removed or superseded.
    """

    job_id: int
    run_epoch: int
    outcome: str


@dataclass(frozen=True)
class AggregateSnapshot:
    """Derived facts computed from one consistent view of the job store.

    Attributes:
        total_count: Number of jobs.
        done_count: Jobs with status `done` and a retained result.
        error_count: Jobs with status `error`.
        any_running: Whether at least one job is `running`.
        any_done: Whether `done_count` is positive.
        export_enabled: Export can start now.
        apply_to_all_enabled: Bulk parameter change can start now.
        clear_all_enabled: Clear-all can start now.
    """

    total_count: int
    done_count: int
    error_count: int
    any_running: bool
    any_done: bool
    export_enabled: bool
    apply_to_all_enabled: bool
    clear_all_enabled: bool


@dataclass(frozen=True)
class ExportArchive:
    """Archive produced by one export.

    Attributes:
        file_name: Suggested download file name.
        archive_bytes: Complete archive bytes.
        entry_names: Entry names in archive order.
    """

    file_name: str
    archive_bytes: bytes
    entry_names: tuple[str, ...]
