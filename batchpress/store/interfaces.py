"""Typed interfaces for job store services.

The store owns job records and identifier generation only. View handles
referenced by jobs are owned by callers coordinating with the resource
lifecycle manager.
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol

from batchpress.domain import Job, SourceImage, TargetParameters

StoreListener = Callable[[tuple[int, ...]], None]


class JobStorePort(Protocol):
    """Port definition for the authoritative job collection."""

    def store_create(
        self,
        source: SourceImage,
        source_view_handle: Any,
        target_parameters: TargetParameters,
    ) -> int:
        """Insert a new `running` job and return its identifier.

        Args:
            source: Submitted input.
            source_view_handle: Handle presenting the source bytes.
            target_parameters: Initial target parameters.

        Returns:
            int: Newly assigned job identifier.

        Raises:
            RuntimeError: This operation does not raise runtime errors.
        """

    def store_create_many(
        self,
        entries: list[tuple[SourceImage, Any]],
        target_parameters: TargetParameters,
    ) -> tuple[int, ...]:
        """Insert several `running` jobs with one change notification.

        Args:
            entries: Source and source view handle pairs in submission order.
            target_parameters: Initial target parameters shared by all entries.

        Returns:
            tuple[int, ...]: Assigned identifiers in submission order.

        Raises:
            RuntimeError: This operation does not raise runtime errors.
        """

    def store_update(self, job_id: int, **fields: Any) -> Job | None:
        """Merge supplied fields into one job.

        Args:
            job_id: Target job identifier.
            **fields: Job fields to replace.

        Returns:
            Job | None: Updated job, or None when the id is absent.

        Raises:
            TypeError: Raised when a field name is not a job field.
        """

    def store_update_many(self, updates: Mapping[int, Mapping[str, Any]]) -> tuple[int, ...]:
        """Merge fields into several jobs with one change notification.

        Args:
            updates: Field mappings keyed by job identifier.

        Returns:
            tuple[int, ...]: Identifiers that were present and updated.

        Raises:
            TypeError: Raised when a field name is not a job field.
        """

    def store_remove(self, job_id: int) -> Job | None:
        """Remove one job; absent ids are ignored."""

    def store_get(self, job_id: int) -> Job | None:
        """Return one job snapshot or None."""

    def store_list(self) -> tuple[Job, ...]:
        """Return all job snapshots in insertion order."""

    def store_reset(self) -> None:
        """Remove all jobs and restart identifier assignment."""

    def store_next_run_epoch(self) -> int:
        """Return a fresh run epoch; epochs are never reused within a session."""

    def store_subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a change listener and return its unsubscribe callable.

        Listeners run after the mutation is applied. A listener that raises is
        logged and skipped; the mutation and the remaining listeners are unaffected.
        """
