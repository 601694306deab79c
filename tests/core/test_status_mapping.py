"""Unit tests for job status translation."""

import pytest

from emr_notifier.core.job_status_notifier.status_mapping import (
    DATA_TRANSFER,
    FAILED,
    SUCCESS,
    needs_diagnostics,
    translate_status,
)


def test_success_becomes_data_transfer():
    """Test SUCCESS hands over to the data transfer phase."""
    assert translate_status(SUCCESS) == DATA_TRANSFER


@pytest.mark.parametrize(
    "state",
    ["SUBMITTED", "PENDING", "SCHEDULED", "RUNNING", "FAILED", "CANCELLING", "CANCELLED", "", "success"],
)
def test_other_states_pass_through(state):
    """Test every other state is persisted verbatim."""
    assert translate_status(state) == state


def test_only_failed_needs_diagnostics():
    """Test diagnostics are fetched for FAILED only."""
    assert needs_diagnostics(FAILED)
    assert not needs_diagnostics(SUCCESS)
    assert not needs_diagnostics(DATA_TRANSFER)
    assert not needs_diagnostics("failed")
