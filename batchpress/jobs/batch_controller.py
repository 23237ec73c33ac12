"""Batch controller coordinating user-intent operations over the job store."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from batchpress.domain import (
    Job,
    JobAlreadyRunningError,
    JobNotFoundError,
    JobStatus,
    SourceImage,
    TargetParameters,
    domain_build_target_parameters,
    domain_merge_target_parameters,
    domain_validate_transition,
)
from batchpress.resources import ViewLifecycleManager
from batchpress.store import JobStorePort

from .dispatch import BackgroundDispatcher
from .runner import TransformationRunner

logger = logging.getLogger(__name__)


class BatchController:
    """Concrete controller for submit, re-run, bulk, and removal operations.

    Every operation mutates the store synchronously first and only then
    dispatches runner tasks, so derived state computed between the two phases
    already sees the jobs as `running` with their new parameters.
    """

    def __init__(
        self,
        store: JobStorePort,
        resources: ViewLifecycleManager,
        runner: TransformationRunner,
        dispatcher: BackgroundDispatcher,
        default_parameters: TargetParameters,
    ):
        """Initialize controller dependencies.

        Args:
            store: Authoritative job store.
            resources: View handle lifecycle manager.
            runner: Transformation runner dispatched per job.
            dispatcher: Background task supervisor.
            default_parameters: Target parameters assigned at submission and on reset.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when dependencies are missing.
        """

        if store is None:
            raise ValueError("store must not be None")
        if resources is None:
            raise ValueError("resources must not be None")
        if runner is None:
            raise ValueError("runner must not be None")
        if dispatcher is None:
            raise ValueError("dispatcher must not be None")
        if default_parameters is None:
            raise ValueError("default_parameters must not be None")

        self._store = store
        self._resources = resources
        self._runner = runner
        self._dispatcher = dispatcher
        self._default_parameters = default_parameters

    @property
    def default_parameters(self) -> TargetParameters:
        return self._default_parameters

    def batch_submit(self, sources: Sequence[SourceImage]) -> tuple[int, ...]:
        """Create one `running` job per source and dispatch their runs.

        Args:
            sources: Submitted inputs in submission order.

        Returns:
            tuple[int, ...]: New job identifiers in submission order.

        Raises:
            RuntimeError: Raised when called without a running event loop, or when
                the view provider cannot allocate a handle. Handles acquired for
                earlier sources in the same call are released and no job is created.
        """

        if not sources:
            return ()
        self._dispatcher.dispatch_require_loop()
        entries = []
        try:
            for source in sources:
                entries.append((source, self._resources.resource_acquire_view(source.payload)))
        except Exception:
            for _, view_handle in entries:
                self._resources.resource_release_view(view_handle)
            raise
        created_ids = self._store.store_create_many(entries, self._default_parameters)
        logger.info("submitted %d jobs: %s", len(created_ids), list(created_ids))
        for job_id in created_ids:
            self._batch_dispatch(self._store.store_get(job_id))
        return created_ids

    def batch_rerun(self, job_id: int, size: Any = None, unit: Any = None) -> Job:
        """Re-run one job, optionally merging new target parameters first.

        Args:
            job_id: Job identifier.
            size: Optional replacement target size.
            unit: Optional replacement target unit.

        Returns:
            Job: Job snapshot after it was marked `running`.

        Raises:
            JobNotFoundError: Raised when the job does not exist.
            JobAlreadyRunningError: Raised when the job is already running.
            TargetParametersValidationError: Raised when overrides are invalid; nothing is mutated.
        """

        self._dispatcher.dispatch_require_loop()
        job = self._batch_require_idle_job(job_id)
        parameters = domain_merge_target_parameters(job.target_parameters, size=size, unit=unit)
        rerun_job = self._store.store_update(
            job_id,
            target_parameters=parameters,
            status=JobStatus.RUNNING,
            run_epoch=self._store.store_next_run_epoch(),
        )
        logger.info("re-running job %s with %s %s", job_id, parameters.size, parameters.unit.value)
        self._batch_dispatch(rerun_job)
        return rerun_job

    def batch_reset(self, job_id: int) -> Job:
        """Drop a job's retained result, restore default parameters, and re-run it.

        Args:
            job_id: Job identifier.

        Returns:
            Job: Job snapshot after it was marked `running`.

        Raises:
            JobNotFoundError: Raised when the job does not exist.
            JobAlreadyRunningError: Raised when the job is already running.
        """

        self._dispatcher.dispatch_require_loop()
        job = self._batch_require_idle_job(job_id)
        reset_job = self._store.store_update(
            job_id,
            target_parameters=self._default_parameters,
            status=JobStatus.RUNNING,
            run_epoch=self._store.store_next_run_epoch(),
            last_result=None,
            error_message=None,
        )
        if job.last_result is not None:
            self._resources.resource_release_view(job.last_result.view_handle)
        logger.info("reset job %s to default parameters", job_id)
        self._batch_dispatch(reset_job)
        return reset_job

    def batch_apply_to_all(self, size: Any, unit: Any) -> tuple[int, ...]:
        """Apply target parameters to every job not in `error` and re-run them.

        Jobs in `error` need an explicit individual retry and are left
        untouched. Running jobs are re-stamped with a new epoch so their
        in-flight run is discarded on completion.

        Args:
            size: Target size value.
            unit: Target size unit.

        Returns:
            tuple[int, ...]: Identifiers of the jobs that were re-run.

        Raises:
            TargetParametersValidationError: Raised when parameters are invalid; nothing is mutated.
        """

        parameters = domain_build_target_parameters(size=size, unit=unit)
        eligible_jobs = [job for job in self._store.store_list() if job.status is not JobStatus.ERROR]
        if not eligible_jobs:
            return ()
        self._dispatcher.dispatch_require_loop()

        updates = {
            job.job_id: {
                "target_parameters": parameters,
                "status": JobStatus.RUNNING,
                "run_epoch": self._store.store_next_run_epoch(),
            }
            for job in eligible_jobs
        }
        updated_ids = self._store.store_update_many(updates)
        logger.info(
            "applied %s %s to %d jobs",
            parameters.size,
            parameters.unit.value,
            len(updated_ids),
        )
        for job_id in updated_ids:
            self._batch_dispatch(self._store.store_get(job_id))
        return updated_ids

    def batch_remove(self, job_id: int) -> bool:
        """Release a job's view handles and remove it from the store.

        Args:
            job_id: Job identifier.

        Returns:
            bool: True when a job was removed; False when the id was absent.

        Raises:
            ViewHandleReleaseError: Raised when a handle was already released elsewhere.
        """

        job = self._store.store_get(job_id)
        if job is None:
            return False
        self._batch_release_job_views(job)
        self._store.store_remove(job_id)
        logger.info("removed job %s", job_id)
        return True

    def batch_clear_all(self) -> int:
        """Release every job's view handles, clear the store, and restart id assignment.

        In-flight runs are not cancelled; their completions are discarded.

        Returns:
            int: Number of jobs cleared.

        Raises:
            ViewHandleReleaseError: Raised when a handle was already released elsewhere.
        """

        jobs = self._store.store_list()
        for job in jobs:
            self._batch_release_job_views(job)
        self._store.store_reset()
        logger.info("cleared %d jobs", len(jobs))
        return len(jobs)

    def _batch_require_idle_job(self, job_id: int) -> Job:
        job = self._store.store_get(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        if job.status is JobStatus.RUNNING:
            raise JobAlreadyRunningError(job_id)
        domain_validate_transition(job.status, JobStatus.RUNNING)
        return job

    def _batch_release_job_views(self, job: Job) -> None:
        self._resources.resource_release_view(job.source_view_handle)
        if job.last_result is not None:
            self._resources.resource_release_view(job.last_result.view_handle)

    def _batch_dispatch(self, job: Job) -> None:
        self._dispatcher.dispatch_spawn(
            self._runner.job_run(job.job_id, job.run_epoch),
            name=f"job-{job.job_id}-run-{job.run_epoch}",
        )
