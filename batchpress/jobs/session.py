"""Session context object owning all per-user orchestration state."""

from __future__ import annotations

import logging

from batchpress.resources import ViewLifecycleManager
from batchpress.store import JobStorePort

from .aggregator import job_aggregate_compute
from .batch_controller import BatchController
from .dispatch import BackgroundDispatcher
from .export import ExportBundler
from .interfaces import AggregateSnapshot

logger = logging.getLogger(__name__)


class CompressionSession:
    """Explicit container for one session's store, resources, and operations.

    No two sessions share state. Presentation code issues user intents
    through `controller` and `bundler` and re-renders from `store` and
    `session_aggregate()`.
    """

    def __init__(
        self,
        store: JobStorePort,
        resources: ViewLifecycleManager,
        dispatcher: BackgroundDispatcher,
        controller: BatchController,
        bundler: ExportBundler,
    ):
        self.store = store
        self.resources = resources
        self.dispatcher = dispatcher
        self.controller = controller
        self.bundler = bundler

    def session_aggregate(self) -> AggregateSnapshot:
        return job_aggregate_compute(self.store.store_list(), export_active=self.bundler.export_is_active())

    async def session_wait_idle(self) -> None:
        """Wait for every dispatched run to finish reconciling."""

        await self.dispatcher.dispatch_wait_idle()

    def session_close(self) -> int:
        """Tear down the session, releasing every view handle its jobs hold.

        Returns:
            int: Number of jobs discarded.
        """

        discarded_count = self.controller.batch_clear_all()
        leaked_count = self.resources.resource_outstanding_count()
        if leaked_count:
            logger.warning("session closed with %d view handles not owned by any job; releasing", leaked_count)
            self.resources.resource_release_all()
        return discarded_count
