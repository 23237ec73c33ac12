"""Typed interfaces for external transformation and archiving collaborators."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TransformationRequest:
    """Options passed to the image transformation for one run.

    Attributes:
        target_size_bytes: Upper-bound size hint; the transformation may miss it.
        max_dimension: Longest-edge pixel bound for the output image.
    """

    target_size_bytes: float
    max_dimension: int


@dataclass(frozen=True)
class ArchiveEntry:
    """One named payload handed to the archiver.

    Attributes:
        name: Entry name inside the archive; duplicates are allowed.
        payload: Entry bytes.
    """

    name: str
    payload: bytes


class ImageTransformationPort(Protocol):
    """Port definition for the opaque image compression function."""

    async def adapter_transform(self, payload: bytes, request: TransformationRequest) -> bytes:
        """Transform one image toward the requested size.

        Args:
            payload: Source image bytes.
            request: Size and dimension options.

        Returns:
            bytes: Transformed output bytes.

        Raises:
            Exception: Any failure is treated as a per-job transformation failure.
        """


class ArchiverPort(Protocol):
    """Port definition for bundling payloads into one archive."""

    async def adapter_build_archive(self, entries: tuple[ArchiveEntry, ...]) -> bytes:
        """Bundle entries into one archive buffer.

        Args:
            entries: Named payloads in archive order.

        Returns:
            bytes: Complete archive bytes.

        Raises:
            Exception: Any failure aborts the export without a partial archive.
        """
