"""Tests for the ZIP archive adapter."""

import io
import zipfile

import pytest

from batchpress.adapters import ArchiveEntry, ZipArchiveAdapter


@pytest.mark.asyncio
async def test_adapters_zip_archive_contains_entries_in_order() -> None:
    """Write every entry into a readable ZIP archive in the given order.

    Returns:
        None: Assertions validate archive content.

    Raises:
        AssertionError: Raised when archive content differs.
    """

    adapter = ZipArchiveAdapter()
    entries = (
        ArchiveEntry(name="compressed-b.jpg", payload=b"B" * 100),
        ArchiveEntry(name="compressed-a.jpg", payload=b"A" * 50),
    )

    archive_bytes = await adapter.adapter_build_archive(entries)

    with zipfile.ZipFile(io.BytesIO(archive_bytes)) as archive:
        assert archive.namelist() == ["compressed-b.jpg", "compressed-a.jpg"]
        assert archive.read("compressed-a.jpg") == b"A" * 50
        assert archive.testzip() is None


@pytest.mark.asyncio
@pytest.mark.filterwarnings("ignore:Duplicate name")
async def test_adapters_zip_archive_allows_duplicate_names() -> None:
    adapter = ZipArchiveAdapter(compression_level=0)
    entries = (ArchiveEntry(name="same.png", payload=b"1"), ArchiveEntry(name="same.png", payload=b"2"))

    archive_bytes = await adapter.adapter_build_archive(entries)

    with zipfile.ZipFile(io.BytesIO(archive_bytes)) as archive:
        assert [info.filename for info in archive.infolist()] == ["same.png", "same.png"]


def test_adapters_zip_rejects_out_of_range_level() -> None:
    with pytest.raises(ValueError, match="compression_level"):
        ZipArchiveAdapter(compression_level=10)
