"""Typed interfaces for view handle responsibilities."""

from typing import Any, Protocol


class ViewHandleProviderPort(Protocol):
    """Port definition for making byte buffers presentable."""

    def resource_acquire(self, payload: bytes) -> Any:
        """Create one opaque handle presenting `payload`.

        Args:
            payload: Bytes to present.

        Returns:
            Any: Handle distinct from every other live handle.

        Raises:
            RuntimeError: Raised when the provider cannot allocate a handle.
        """

    def resource_release(self, handle: Any) -> None:
        """Invalidate a handle previously returned by `resource_acquire`.

        Args:
            handle: Handle to invalidate.

        Returns:
            None: Release is a side effect.

        Raises:
            KeyError: Raised when the handle is unknown to the provider.
        """
