"""Job store package for session-scoped job state."""

from .interfaces import JobStorePort, StoreListener
from .memory import InMemoryJobStore

__all__ = ["JobStorePort", "StoreListener", "InMemoryJobStore"]
