"""Export bundler handing completed outputs to the archiving collaborator."""

from __future__ import annotations

import logging

from batchpress.adapters import ArchiveEntry, ArchiverPort
from batchpress.domain import ExportAlreadyActiveError, ExportBundlingError, Job, JobStatus
from batchpress.store import JobStorePort

from .interfaces import ExportArchive

logger = logging.getLogger(__name__)


def job_export_output_name(job: Job, prefix: str) -> str:
    """Return the archive entry name for one job.

    Identical source names produce identical entry names; they are not de-duplicated.
    """

    return f"{prefix}{job.source.name}"


def job_export_select_entries(jobs: tuple[Job, ...], prefix: str) -> tuple[ArchiveEntry, ...]:
    """Select `done` jobs with a result, in store order, as archive entries."""

    return tuple(
        ArchiveEntry(name=job_export_output_name(job, prefix), payload=job.result_payload)
        for job in jobs
        if job.status is JobStatus.DONE and job.result_payload is not None
    )


class ExportBundler:
    """Single-flight export over a snapshot of completed jobs.

    Entries are captured synchronously before the archiver is awaited, so
    jobs that change while the archive is being built do not affect it.
    """

    def __init__(
        self,
        store: JobStorePort,
        archiver: ArchiverPort,
        output_name_prefix: str = "compressed-",
        archive_file_name: str = "compressed-images.zip",
    ):
        """Initialize export dependencies.

        Args:
            store: Authoritative job store.
            archiver: External archiving collaborator.
            output_name_prefix: Prefix prepended to source names.
            archive_file_name: Suggested file name for produced archives.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when dependencies or names are invalid.
        """

        if store is None:
            raise ValueError("store must not be None")
        if archiver is None:
            raise ValueError("archiver must not be None")
        if not output_name_prefix.strip():
            raise ValueError("output_name_prefix must not be blank")
        if not archive_file_name.strip():
            raise ValueError("archive_file_name must not be blank")

        self._store = store
        self._archiver = archiver
        self._output_name_prefix = output_name_prefix
        self._archive_file_name = archive_file_name
        self._active = False

    def export_is_active(self) -> bool:
        return self._active

    async def export_all(self) -> ExportArchive | None:
        """Bundle every completed output into one archive.

        Returns:
            ExportArchive | None: Produced archive, or None when no job is done
            (the archiver is not invoked).

        Raises:
            ExportAlreadyActiveError: Raised when another export is outstanding.
            ExportBundlingError: Raised when the archiver fails; no archive is produced.
        """

        if self._active:
            raise ExportAlreadyActiveError("an export is already in progress")

        entries = job_export_select_entries(self._store.store_list(), self._output_name_prefix)
        if not entries:
            logger.info("export skipped: no completed jobs")
            return None

        self._active = True
        try:
            archive_bytes = await self._archiver.adapter_build_archive(entries)
        except Exception as error:
            logger.error("export of %d entries failed: %s: %s", len(entries), type(error).__name__, error)
            raise ExportBundlingError("failed to build export archive") from error
        finally:
            self._active = False

        logger.info("exported %d entries (%d bytes)", len(entries), len(archive_bytes))
        return ExportArchive(
            file_name=self._archive_file_name,
            archive_bytes=archive_bytes,
            entry_names=tuple(entry.name for entry in entries),
        )
