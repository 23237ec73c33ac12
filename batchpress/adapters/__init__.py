"""Adapter package for external transformation and archiving collaborators."""

from .errors import ArchiveBuildError
from .interfaces import ArchiveEntry, ArchiverPort, ImageTransformationPort, TransformationRequest
from .zip_archiver import ZipArchiveAdapter

__all__ = [
    "ArchiveBuildError",
    "ArchiveEntry",
    "ArchiverPort",
    "ImageTransformationPort",
    "TransformationRequest",
    "ZipArchiveAdapter",
]
