"""In-process view handle provider issuing `blob:` URL handles."""

from __future__ import annotations

from uuid import uuid4

from .interfaces import ViewHandleProviderPort


class ObjectUrlViewProvider(ViewHandleProviderPort):
    """Provider that maps generated `blob:` URLs to read-only buffer views."""

    def __init__(self, url_prefix: str = "blob:batchpress/"):
        if not url_prefix.strip():
            raise ValueError("url_prefix must not be blank")
        self._url_prefix = url_prefix
        self._views: dict[str, memoryview] = {}

    def resource_acquire(self, payload: bytes) -> str:
        handle = f"{self._url_prefix}{uuid4()}"
        self._views[handle] = memoryview(payload).toreadonly()
        return handle

    def resource_release(self, handle: str) -> None:
        view = self._views.pop(handle)
        view.release()

    def resource_resolve(self, handle: str) -> memoryview:
        """Return the buffer view behind a live handle.

        Raises:
            KeyError: Raised when the handle was released or never issued.
        """

        return self._views[handle]

    def resource_live_count(self) -> int:
        return len(self._views)
