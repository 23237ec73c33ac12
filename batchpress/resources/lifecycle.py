"""Resource lifecycle manager enforcing balanced acquire/release of view handles."""

from __future__ import annotations

import logging
from typing import Any

from batchpress.domain import ViewHandleReleaseError

from .interfaces import ViewHandleProviderPort

logger = logging.getLogger(__name__)


class ViewLifecycleManager:
    """Track every view handle from acquisition until its single release.

    Handles are tracked by identity, so providers may return any object.
    Releasing a handle twice, or one this manager did not issue, is a defect
    and raises `ViewHandleReleaseError` before the provider is touched.
    """

    def __init__(self, provider: ViewHandleProviderPort):
        """Initialize lifecycle manager.

        Args:
            provider: View handle provider that allocates concrete handles.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when provider is None.
        """

        if provider is None:
            raise ValueError("provider must not be None")
        self._provider = provider
        self._outstanding: dict[int, Any] = {}
        self._acquired_total = 0
        self._released_total = 0

    def resource_acquire_view(self, payload: bytes) -> Any:
        """Acquire a new handle presenting `payload`.

        Args:
            payload: Bytes to present.

        Returns:
            Any: Fresh handle; every call yields a distinct handle.

        Raises:
            ViewHandleReleaseError: Raised when the provider returns a handle that is still live.
        """

        handle = self._provider.resource_acquire(payload)
        if id(handle) in self._outstanding:
            raise ViewHandleReleaseError(f"provider returned a live handle twice: {handle!r}")
        self._outstanding[id(handle)] = handle
        self._acquired_total += 1
        return handle

    def resource_release_view(self, handle: Any) -> None:
        """Release a handle exactly once.

        Args:
            handle: Handle previously returned by `resource_acquire_view`.

        Returns:
            None: Release is a side effect.

        Raises:
            ViewHandleReleaseError: Raised on double release or unknown handle.
        """

        tracked_handle = self._outstanding.get(id(handle))
        if tracked_handle is None or tracked_handle is not handle:
            raise ViewHandleReleaseError(f"view handle is not outstanding: {handle!r}")
        del self._outstanding[id(handle)]
        self._provider.resource_release(handle)
        self._released_total += 1

    def resource_outstanding_count(self) -> int:
        return len(self._outstanding)

    def resource_release_all(self) -> int:
        """Release every outstanding handle.

        Returns:
            int: Number of handles released.
        """

        handles = list(self._outstanding.values())
        for handle in handles:
            self.resource_release_view(handle)
        if handles:
            logger.debug("released %d outstanding view handles", len(handles))
        return len(handles)

    @property
    def acquired_total(self) -> int:
        return self._acquired_total

    @property
    def released_total(self) -> int:
        return self._released_total
