"""Transformation runner driving one job from `running` to a terminal status."""

from __future__ import annotations

import logging

from batchpress.adapters import ImageTransformationPort, TransformationRequest
from batchpress.domain import Job, JobResult, JobStatus, domain_validate_transition
from batchpress.resources import ViewLifecycleManager
from batchpress.store import JobStorePort

from .interfaces import RUN_OUTCOME_DISCARDED, RUN_OUTCOME_DONE, RUN_OUTCOME_ERROR, JobRunResult

logger = logging.getLogger(__name__)


class TransformationRunner:
    """Invoke the external transformation for one dispatched run and reconcile its outcome.

    The runner never moves a job into `running`; callers do that and hand
    over the epoch they stamped. Reconciliation only applies while the job
    still exists, is still `running`, and still carries that epoch. Anything
    else means the job was removed, cleared, or re-dispatched while the
    transformation was in flight, and the outcome is discarded.
    """

    def __init__(
        self,
        store: JobStorePort,
        resources: ViewLifecycleManager,
        transformation: ImageTransformationPort,
        max_dimension: int = 1920,
    ):
        """Initialize runner dependencies.

        Args:
            store: Authoritative job store.
            resources: View handle lifecycle manager.
            transformation: External image transformation.
            max_dimension: Longest-edge pixel bound passed to every run.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when dependencies or options are invalid.
        """

        if store is None:
            raise ValueError("store must not be None")
        if resources is None:
            raise ValueError("resources must not be None")
        if transformation is None:
            raise ValueError("transformation must not be None")
        if max_dimension < 1:
            raise ValueError("max_dimension must be positive")

        self._store = store
        self._resources = resources
        self._transformation = transformation
        self._max_dimension = max_dimension

    async def job_run(self, job_id: int, run_epoch: int) -> JobRunResult:
        """Execute one run and reconcile its outcome into the store.

        Args:
            job_id: Job identifier.
            run_epoch: Epoch stamped on the job when this run was dispatched.

        Returns:
            JobRunResult: Outcome of the run.

        Raises:
            RuntimeError: This method does not raise for transformation failures.
        """

        job = self._job_run_current(job_id, run_epoch)
        if job is None:
            return JobRunResult(job_id=job_id, run_epoch=run_epoch, outcome=RUN_OUTCOME_DISCARDED)

        request = TransformationRequest(
            target_size_bytes=job.target_parameters.target_size_bytes,
            max_dimension=self._max_dimension,
        )
        try:
            output = await self._transformation.adapter_transform(job.source.payload, request)
        except Exception as error:  # pylint: disable=broad-exception-caught
            return self._job_run_reconcile_failure(job_id, run_epoch, error)
        return self._job_run_reconcile_success(job_id, run_epoch, output)

    def _job_run_reconcile_success(self, job_id: int, run_epoch: int, output: bytes) -> JobRunResult:
        job = self._job_run_current(job_id, run_epoch)
        if job is None:
            return JobRunResult(job_id=job_id, run_epoch=run_epoch, outcome=RUN_OUTCOME_DISCARDED)

        domain_validate_transition(job.status, JobStatus.DONE)
        retired_result = job.last_result
        try:
            view_handle = self._resources.resource_acquire_view(output)
        except Exception as error:  # pylint: disable=broad-exception-caught
            # no handle was issued, so nothing is released and the previous result stays attached
            return self._job_run_reconcile_failure(job_id, run_epoch, error)
        self._store.store_update(
            job_id,
            status=JobStatus.DONE,
            last_result=JobResult(payload=output, view_handle=view_handle),
            error_message=None,
        )
        if retired_result is not None:
            self._resources.resource_release_view(retired_result.view_handle)

        logger.debug("job %s run %s done: %d -> %d bytes", job_id, run_epoch, job.source.size_bytes, len(output))
        return JobRunResult(job_id=job_id, run_epoch=run_epoch, outcome=RUN_OUTCOME_DONE)

    def _job_run_reconcile_failure(self, job_id: int, run_epoch: int, error: Exception) -> JobRunResult:
        job = self._job_run_current(job_id, run_epoch)
        if job is None:
            return JobRunResult(job_id=job_id, run_epoch=run_epoch, outcome=RUN_OUTCOME_DISCARDED)

        domain_validate_transition(job.status, JobStatus.ERROR)
        # last_result is kept: the store still reflects the last good output
        self._store.store_update(job_id, status=JobStatus.ERROR, error_message=str(error) or type(error).__name__)
        logger.warning("job %s run %s failed: %s: %s", job_id, run_epoch, type(error).__name__, error)
        return JobRunResult(job_id=job_id, run_epoch=run_epoch, outcome=RUN_OUTCOME_ERROR)

    def _job_run_current(self, job_id: int, run_epoch: int) -> Job | None:
        job = self._store.store_get(job_id)
        if job is None:
            logger.debug("job %s run %s discarded: job no longer exists", job_id, run_epoch)
            return None
        if job.run_epoch != run_epoch or job.status is not JobStatus.RUNNING:
            logger.debug(
                "job %s run %s discarded: superseded by run %s (%s)",
                job_id,
                run_epoch,
                job.run_epoch,
                job.status.value,
            )
            return None
        return job
