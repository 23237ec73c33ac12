"""Regression tests for domain contracts, parameter validation, and status transitions."""

import math

import pytest

from batchpress.domain import (
    InvalidStatusTransitionError,
    Job,
    JobResult,
    JobStatus,
    SizeUnit,
    SourceImage,
    TargetParameters,
    TargetParametersValidationError,
    domain_build_target_parameters,
    domain_can_transition,
    domain_compute_savings_percent,
    domain_format_size_kb,
    domain_merge_target_parameters,
    domain_validate_transition,
)


def _job(status: JobStatus, last_result: JobResult | None = None) -> Job:
    return Job(
        job_id=0,
        source=SourceImage(name="a.png", payload=b"abc"),
        source_view_handle="blob:source",
        target_parameters=TargetParameters(size=500, unit=SizeUnit.KB),
        status=status,
        run_epoch=1,
        last_result=last_result,
    )


def test_domain_target_size_bytes_uses_binary_unit_multipliers() -> None:
    """Convert KB and MB target sizes with 1024-based multipliers.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when conversion is unexpected.
    """

    assert TargetParameters(size=500, unit=SizeUnit.KB).target_size_bytes == 512000
    assert TargetParameters(size=2, unit=SizeUnit.MB).target_size_bytes == 2 * 1024 * 1024
    assert TargetParameters(size=0.5, unit=SizeUnit.KB).target_size_bytes == 512


@pytest.mark.parametrize("size", [0, -1, -0.5, math.inf, math.nan, "500", None, True, [500]])
def test_domain_build_target_parameters_rejects_invalid_sizes(size) -> None:
    """Reject sizes that are not positive finite numbers.

    Args:
        size: Invalid candidate size.

    Returns:
        None: Assertions validate rejection.

    Raises:
        AssertionError: Raised when invalid size is accepted.
    """

    with pytest.raises(TargetParametersValidationError):
        domain_build_target_parameters(size=size, unit="KB")


def test_domain_build_target_parameters_normalizes_unit_text() -> None:
    parameters = domain_build_target_parameters(size=3, unit=" mb ")

    assert parameters == TargetParameters(size=3.0, unit=SizeUnit.MB)

    with pytest.raises(TargetParametersValidationError, match="unit must be one of KB, MB"):
        domain_build_target_parameters(size=3, unit="GB")


def test_domain_validation_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        domain_build_target_parameters(size=-5, unit="KB")


def test_domain_merge_target_parameters_keeps_unspecified_fields() -> None:
    """Merge only supplied overrides into existing parameters.

    Returns:
        None: Assertions validate merge behavior.

    Raises:
        AssertionError: Raised when untouched fields change.
    """

    current = TargetParameters(size=500, unit=SizeUnit.KB)

    assert domain_merge_target_parameters(current, size=200) == TargetParameters(size=200.0, unit=SizeUnit.KB)
    assert domain_merge_target_parameters(current, unit="MB") == TargetParameters(size=500.0, unit=SizeUnit.MB)
    assert domain_merge_target_parameters(current) == current


def test_domain_transitions_follow_job_lifecycle() -> None:
    """Allow only running->terminal and terminal->running status changes.

    Returns:
        None: Assertions validate the transition table.

    Raises:
        AssertionError: Raised when an illegal transition is allowed.
    """

    assert domain_can_transition(JobStatus.RUNNING, JobStatus.DONE)
    assert domain_can_transition(JobStatus.RUNNING, JobStatus.ERROR)
    assert domain_can_transition(JobStatus.DONE, JobStatus.RUNNING)
    assert domain_can_transition(JobStatus.ERROR, JobStatus.RUNNING)
    assert not domain_can_transition(JobStatus.RUNNING, JobStatus.RUNNING)
    assert not domain_can_transition(JobStatus.DONE, JobStatus.ERROR)
    assert not domain_can_transition(JobStatus.ERROR, JobStatus.DONE)

    with pytest.raises(InvalidStatusTransitionError, match="done -> error"):
        domain_validate_transition(JobStatus.DONE, JobStatus.ERROR)


def test_domain_job_exposes_result_only_while_done() -> None:
    """Hide the retained result from presentable fields unless status is done.

    Returns:
        None: Assertions validate result visibility.

    Raises:
        AssertionError: Raised when a non-done job exposes a result handle.
    """

    result = JobResult(payload=b"out", view_handle="blob:result")

    done_job = _job(JobStatus.DONE, result)
    assert done_job.result_payload == b"out"
    assert done_job.result_view_handle == "blob:result"

    for status in (JobStatus.RUNNING, JobStatus.ERROR):
        job = _job(status, result)
        assert job.last_result is result
        assert job.result_payload is None
        assert job.result_view_handle is None


def test_domain_format_size_kb() -> None:
    assert domain_format_size_kb(0) == "0.00 KB"
    assert domain_format_size_kb(500000) == "488.28 KB"
    assert domain_format_size_kb(1024) == "1.00 KB"


def test_domain_compute_savings_percent_rounds_half_up() -> None:
    """Round saved percentage to the nearest integer and allow negative savings.

    Returns:
        None: Assertions validate rounding.

    Raises:
        AssertionError: Raised when the percentage differs.
    """

    assert domain_compute_savings_percent(1000, 250) == 75
    assert domain_compute_savings_percent(3, 2) == 33
    assert domain_compute_savings_percent(1000, 333) == 67
    assert domain_compute_savings_percent(100, 100) == 0
    assert domain_compute_savings_percent(100, 150) == -50

    with pytest.raises(ValueError):
        domain_compute_savings_percent(0, 10)


def test_domain_build_target_parameters_rejects_overflowing_byte_count() -> None:
    """Reject a finite size whose byte count overflows once the unit is applied.

    Returns:
        None: Assertions validate overflow rejection.

    Raises:
        AssertionError: Raised when overflow is accepted.
    """

    with pytest.raises(TargetParametersValidationError, match="overflows"):
        domain_build_target_parameters(1e308, "MB")

    assert math.isfinite(domain_build_target_parameters(1e300, "MB").target_size_bytes)
