"""Job layer package for orchestration of compression runs."""

from .aggregator import job_aggregate_compute
from .batch_controller import BatchController
from .dispatch import BackgroundDispatcher
from .export import ExportBundler, job_export_output_name, job_export_select_entries
from .interfaces import (
	RUN_OUTCOME_DISCARDED,
	RUN_OUTCOME_DONE,
	RUN_OUTCOME_ERROR,
	AggregateSnapshot,
	ExportArchive,
	JobRunResult,
)
from .runner import TransformationRunner
from .session import CompressionSession

__all__ = [
	"AggregateSnapshot",
	"BackgroundDispatcher",
	"BatchController",
	"CompressionSession",
	"ExportArchive",
	"ExportBundler",
	"JobRunResult",
	"RUN_OUTCOME_DISCARDED",
	"RUN_OUTCOME_DONE",
	"RUN_OUTCOME_ERROR",
	"TransformationRunner",
	"job_aggregate_compute",
	"job_export_output_name",
	"job_export_select_entries",
]
