"""Project-native typed exceptions for adapter failures."""

from __future__ import annotations


class ArchiveBuildError(RuntimeError):
    """Archive could not be assembled from the supplied entries."""
