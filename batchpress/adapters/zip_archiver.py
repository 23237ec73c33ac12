"""ZIP archive adapter running compression in a worker thread."""

from __future__ import annotations

import asyncio
import io
import zipfile
from concurrent.futures import Executor
from functools import partial

from .errors import ArchiveBuildError
from .interfaces import ArchiveEntry, ArchiverPort


class ZipArchiveAdapter(ArchiverPort):
    """Build deflated ZIP archives without blocking the event loop."""

    def __init__(self, compression_level: int = 6, executor: Executor | None = None):
        """Initialize ZIP adapter options.

        Args:
            compression_level: Deflate level from 0 (store) to 9.
            executor: Optional executor; defaults to the loop's default executor.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when compression level is out of range.
        """

        if not 0 <= compression_level <= 9:
            raise ValueError("compression_level must be between 0 and 9")
        self._compression_level = compression_level
        self._executor = executor

    async def adapter_build_archive(self, entries: tuple[ArchiveEntry, ...]) -> bytes:
        """Bundle entries into ZIP bytes in a worker thread.

        Args:
            entries: Named payloads in archive order.

        Returns:
            bytes: Complete ZIP archive.

        Raises:
            ArchiveBuildError: Raised when the archive cannot be written.
        """

        event_loop = asyncio.get_running_loop()
        bound = partial(self._adapter_write_zip, entries)
        return await event_loop.run_in_executor(self._executor, bound)

    def _adapter_write_zip(self, entries: tuple[ArchiveEntry, ...]) -> bytes:
        buffer = io.BytesIO()
        try:
            with zipfile.ZipFile(
                buffer,
                mode="w",
                compression=zipfile.ZIP_DEFLATED,
                compresslevel=self._compression_level,
            ) as archive:
                for entry in entries:
                    archive.writestr(entry.name, entry.payload)
        except (OSError, ValueError, zipfile.LargeZipFile) as error:
            raise ArchiveBuildError(f"failed to build zip archive: {error}") from error
        return buffer.getvalue()
