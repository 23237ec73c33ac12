"""Resource package for view handle lifecycle boundaries."""

from .interfaces import ViewHandleProviderPort
from .lifecycle import ViewLifecycleManager
from .object_urls import ObjectUrlViewProvider

__all__ = ["ViewHandleProviderPort", "ViewLifecycleManager", "ObjectUrlViewProvider"]
