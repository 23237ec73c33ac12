"""Session bootstrap wiring for startup validation and dependency assembly."""

import logging

from batchpress.adapters import ArchiverPort, ImageTransformationPort, ZipArchiveAdapter
from batchpress.config import AppSettings, config_load_settings
from batchpress.jobs import (
    BackgroundDispatcher,
    BatchController,
    CompressionSession,
    ExportBundler,
    TransformationRunner,
)
from batchpress.resources import ObjectUrlViewProvider, ViewHandleProviderPort, ViewLifecycleManager
from batchpress.store import InMemoryJobStore


def bootstrap_configure_logging(settings: AppSettings) -> None:
    """Apply the configured log level to the `batchpress` logger tree.

    A basic stderr handler is installed only when the root logger has none,
    so host applications keep control of their own logging setup.

    Args:
        settings: Validated runtime settings.

    Returns:
        None: Logging configuration is a side effect.
    """

    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("batchpress").setLevel(settings.log_level)


def bootstrap_create_session(
    transformation: ImageTransformationPort,
    archiver: ArchiverPort | None = None,
    view_provider: ViewHandleProviderPort | None = None,
    settings: AppSettings | None = None,
) -> CompressionSession:
    """Assemble one compression session after validating configuration.

    Args:
        transformation: External image transformation.
        archiver: Optional archiver; defaults to the ZIP adapter.
        view_provider: Optional view handle provider; defaults to `blob:` URL handles.
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        CompressionSession: Fully wired session with an empty store.

    Raises:
        SettingsLoadError: Raised when settings are loaded and fail validation.
    """

    resolved_settings = settings or config_load_settings()
    bootstrap_configure_logging(resolved_settings)

    store = InMemoryJobStore()
    resources = ViewLifecycleManager(provider=view_provider or ObjectUrlViewProvider())
    dispatcher = BackgroundDispatcher()
    runner = TransformationRunner(
        store=store,
        resources=resources,
        transformation=transformation,
        max_dimension=resolved_settings.max_dimension,
    )
    controller = BatchController(
        store=store,
        resources=resources,
        runner=runner,
        dispatcher=dispatcher,
        default_parameters=resolved_settings.default_target_parameters(),
    )
    bundler = ExportBundler(
        store=store,
        archiver=archiver or ZipArchiveAdapter(),
        output_name_prefix=resolved_settings.output_name_prefix,
        archive_file_name=resolved_settings.archive_file_name,
    )
    return CompressionSession(
        store=store,
        resources=resources,
        dispatcher=dispatcher,
        controller=controller,
        bundler=bundler,
    )
