"""Derived-state aggregation over job store snapshots."""

from __future__ import annotations

from collections.abc import Iterable

from batchpress.domain import Job, JobStatus

from .interfaces import AggregateSnapshot


def job_aggregate_compute(jobs: Iterable[Job], export_active: bool = False) -> AggregateSnapshot:
    """Compute aggregate facts and enablement flags.

    Always recomputed from the supplied jobs; nothing is cached.

    Args:
        jobs: Job snapshots, typically `store_list()`.
        export_active: Whether an export is currently outstanding.

    Returns:
        AggregateSnapshot: Counts and enablement flags.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    total_count = 0
    done_count = 0
    error_count = 0
    any_running = False
    for job in jobs:
        total_count += 1
        if job.status is JobStatus.RUNNING:
            any_running = True
        elif job.status is JobStatus.DONE and job.result_payload is not None:
            done_count += 1
        elif job.status is JobStatus.ERROR:
            error_count += 1

    any_done = done_count > 0
    return AggregateSnapshot(
        total_count=total_count,
        done_count=done_count,
        error_count=error_count,
        any_running=any_running,
        any_done=any_done,
        export_enabled=any_done and not any_running and not export_active,
        apply_to_all_enabled=not any_running,
        clear_all_enabled=not any_running,
    )
