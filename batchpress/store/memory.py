"""In-memory job store keyed by monotonically assigned identifiers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from itertools import count
from typing import Any

from batchpress.domain import Job, JobStatus, SourceImage, TargetParameters

from .interfaces import JobStorePort, StoreListener

logger = logging.getLogger(__name__)


class InMemoryJobStore(JobStorePort):
    """Session-scoped job collection with atomic partial updates.

    Every public method runs to completion synchronously, so concurrent
    coroutines on one event loop always observe a whole mutation or none of
    it. Listeners receive the identifiers touched by one mutation call.
    """

    _INITIAL_JOB_ID = 0

    def __init__(self):
        self._jobs: dict[int, Job] = {}
        self._next_job_id = self._INITIAL_JOB_ID
        # run epochs survive store_reset so completions from cleared jobs never match reused ids
        self._run_epochs = count(1)
        self._listeners: list[StoreListener] = []

    def store_create(
        self,
        source: SourceImage,
        source_view_handle: Any,
        target_parameters: TargetParameters,
    ) -> int:
        created_ids = self.store_create_many([(source, source_view_handle)], target_parameters)
        return created_ids[0]

    def store_create_many(
        self,
        entries: list[tuple[SourceImage, Any]],
        target_parameters: TargetParameters,
    ) -> tuple[int, ...]:
        created_ids: list[int] = []
        for source, source_view_handle in entries:
            job_id = self._next_job_id
            self._next_job_id += 1
            self._jobs[job_id] = Job(
                job_id=job_id,
                source=source,
                source_view_handle=source_view_handle,
                target_parameters=target_parameters,
                status=JobStatus.RUNNING,
                run_epoch=self.store_next_run_epoch(),
            )
            created_ids.append(job_id)
        self._store_notify(tuple(created_ids))
        return tuple(created_ids)

    def store_update(self, job_id: int, **fields: Any) -> Job | None:
        updated_ids = self.store_update_many({job_id: fields})
        if not updated_ids:
            return None
        return self._jobs[job_id]

    def store_update_many(self, updates: Mapping[int, Mapping[str, Any]]) -> tuple[int, ...]:
        # build every replacement before assigning any so a bad field leaves the store untouched
        replacements = {
            job_id: replace(self._jobs[job_id], **fields)
            for job_id, fields in updates.items()
            if job_id in self._jobs
        }
        self._jobs.update(replacements)
        if replacements:
            self._store_notify(tuple(replacements))
        return tuple(replacements)

    def store_remove(self, job_id: int) -> Job | None:
        removed_job = self._jobs.pop(job_id, None)
        if removed_job is not None:
            self._store_notify((job_id,))
        return removed_job

    def store_get(self, job_id: int) -> Job | None:
        return self._jobs.get(job_id)

    def store_list(self) -> tuple[Job, ...]:
        return tuple(self._jobs.values())

    def store_reset(self) -> None:
        removed_ids = tuple(self._jobs)
        self._jobs.clear()
        self._next_job_id = self._INITIAL_JOB_ID
        self._store_notify(removed_ids)

    def store_next_run_epoch(self) -> int:
        return next(self._run_epochs)

    def store_subscribe(self, listener: StoreListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def __len__(self) -> int:
        return len(self._jobs)

    def _store_notify(self, job_ids: tuple[int, ...]) -> None:
        # the mutation is already applied; a failing listener must not surface as a failed store call
        for listener in list(self._listeners):
            try:
                listener(job_ids)
            except Exception:  # pylint: disable=broad-exception-caught
                logger.exception("store listener %r failed for jobs %s", listener, list(job_ids))
