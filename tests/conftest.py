"""Shared test doubles and fixtures for orchestration tests."""

from __future__ import annotations

import asyncio

import pytest

from batchpress.adapters import ArchiveEntry, TransformationRequest
from batchpress.bootstrap import bootstrap_create_session
from batchpress.config import AppSettings
from batchpress.domain import SourceImage


class _ViewHandleStub:
    """Opaque handle object issued by the recording provider."""

    def __init__(self, serial: int, size_bytes: int):
        self.serial = serial
        self.size_bytes = size_bytes

    def __repr__(self) -> str:
        return f"_ViewHandleStub({self.serial})"


class _RecordingViewProviderStub:
    """View handle provider that records every acquire and release."""

    def __init__(self):
        """Initialize capture containers.

        Returns:
            None: Initializer does not return values.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        self.acquired: list[_ViewHandleStub] = []
        self.released: list[_ViewHandleStub] = []

    def resource_acquire(self, payload: bytes) -> _ViewHandleStub:
        handle = _ViewHandleStub(serial=len(self.acquired), size_bytes=len(payload))
        self.acquired.append(handle)
        return handle

    def resource_release(self, handle: _ViewHandleStub) -> None:
        """Record one release.

        Args:
            handle: Released handle.

        Returns:
            None: Captured as side effect.

        Raises:
            AssertionError: Raised when a handle is released twice.
        """

        assert handle not in self.released, f"double release of {handle!r}"
        self.released.append(handle)

    def live_handles(self) -> list[_ViewHandleStub]:
        return [handle for handle in self.acquired if handle not in self.released]


class _PendingTransformation:
    """One outstanding transformation call awaiting an explicit outcome."""

    def __init__(self, payload: bytes, request: TransformationRequest, future: asyncio.Future):
        self.payload = payload
        self.request = request
        self.future = future

    def complete(self, output: bytes) -> None:
        self.future.set_result(output)

    def fail(self, error: Exception) -> None:
        self.future.set_exception(error)


class _GatedTransformationStub:
    """Transformation double whose calls resolve only when a test says so."""

    def __init__(self):
        self.calls: list[_PendingTransformation] = []

    async def adapter_transform(self, payload: bytes, request: TransformationRequest) -> bytes:
        """Park the call until the test completes or fails it.

        Args:
            payload: Source bytes.
            request: Size and dimension options.

        Returns:
            bytes: Output supplied by the test.

        Raises:
            Exception: Error supplied by the test.
        """

        pending = _PendingTransformation(payload, request, asyncio.get_running_loop().create_future())
        self.calls.append(pending)
        return await pending.future

    def outstanding(self) -> list[_PendingTransformation]:
        return [call for call in self.calls if not call.future.done()]


class _ArchiverStub:
    """Archiver double capturing entries, optionally gated or failing."""

    def __init__(self, error: Exception | None = None, gated: bool = False):
        self.error = error
        self.gated = gated
        self.gate: asyncio.Future | None = None
        self.calls: list[tuple[ArchiveEntry, ...]] = []

    async def adapter_build_archive(self, entries: tuple[ArchiveEntry, ...]) -> bytes:
        self.calls.append(entries)
        if self.gated:
            self.gate = asyncio.get_running_loop().create_future()
            await self.gate
        if self.error is not None:
            raise self.error
        return b"ARCHIVE:" + b"|".join(entry.name.encode() for entry in entries)


async def _settle(rounds: int = 10) -> None:
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def view_provider() -> _RecordingViewProviderStub:
    return _RecordingViewProviderStub()


@pytest.fixture
def transformation() -> _GatedTransformationStub:
    return _GatedTransformationStub()


@pytest.fixture
def archiver() -> _ArchiverStub:
    return _ArchiverStub()


@pytest.fixture
def session(transformation, archiver, view_provider, settings):
    """Build a session wired to gated test doubles.

    Returns:
        CompressionSession: Session with an empty store.

    Raises:
        RuntimeError: This fixture does not raise runtime errors.
    """

    return bootstrap_create_session(
        transformation=transformation,
        archiver=archiver,
        view_provider=view_provider,
        settings=settings,
    )


@pytest.fixture
def settle():
    """Return a coroutine function that lets scheduled tasks advance."""

    return _settle


@pytest.fixture
def make_sources():
    """Return a factory building named sources of the requested sizes."""

    def _make_sources(*sizes: int) -> list[SourceImage]:
        return [SourceImage(name=f"image-{index}.jpg", payload=bytes([index % 256]) * size) for index, size in enumerate(sizes)]

    return _make_sources


@pytest.fixture
def archiver_factory():
    """Return a factory for archivers with custom failure or gating behavior."""

    return _ArchiverStub
