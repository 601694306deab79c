"""Unit tests for EventBridge event parsing."""

import json

import pytest

from emr_notifier.core.job_status_notifier.lambda_utils.event_parser import (
    parse_event,
    parse_job_run_detail,
)
from emr_notifier.core.job_status_notifier.lambda_utils.exceptions import MessageParseError


def test_parse_event_reads_source_and_detail(make_event):
    """Test envelope exposes source, detail-type and detail."""
    envelope = parse_event(make_event())

    assert envelope.source == "aws.emr-serverless"
    assert envelope.detail_type == "EMR Serverless Job Run State Change"
    assert envelope.detail["jobRunId"] == "j1"


def test_parse_event_missing_source_defaults_to_empty():
    """Test events without a source parse with an empty source."""
    envelope = parse_event({"detail": {}})
    assert envelope.source == ""


def test_parse_event_stringifies_envelope_metadata(make_event):
    """Test non-string id, time and detail-type are coerced instead of rejected."""
    event = make_event()
    event.update({"id": 123, "time": 1697700000, "detail-type": ["x"]})

    envelope = parse_event(event)

    assert envelope.source == "aws.emr-serverless"
    assert envelope.id == "123"
    assert envelope.time == "1697700000"
    assert envelope.detail_type == "['x']"


@pytest.mark.parametrize("event", [None, "not-an-event", ["source"], 42])
def test_parse_event_rejects_non_mapping(event):
    """Test non-mapping events raise MessageParseError."""
    with pytest.raises(MessageParseError, match="not a mapping"):
        parse_event(event)


def test_parse_detail_from_mapping():
    """Test detail dict is mapped onto JobRunStateChange."""
    change = parse_job_run_detail(
        {"jobRunId": "j1", "applicationId": "app-1", "state": "RUNNING", "previousState": "SCHEDULED"}
    )

    assert change.job_run_id == "j1"
    assert change.application_id == "app-1"
    assert change.state == "RUNNING"
    assert change.previous_state == "SCHEDULED"


def test_parse_detail_from_json_string_and_bytes():
    """Test raw JSON detail payloads are decoded."""
    raw = json.dumps({"jobRunId": "j2", "state": "SUCCESS"})

    assert parse_job_run_detail(raw).job_run_id == "j2"
    assert parse_job_run_detail(raw.encode("utf-8")).state == "SUCCESS"


def test_parse_detail_stringifies_non_string_values():
    """Test non-string values are converted to their textual form."""
    change = parse_job_run_detail({"jobRunId": 12345, "applicationId": 7, "state": True})

    assert change.job_run_id == "12345"
    assert change.application_id == "7"
    assert change.state == "True"


def test_parse_detail_missing_fields_become_empty_strings():
    """Test absent jobRunId/applicationId/state become empty strings."""
    change = parse_job_run_detail({"unrelated": "value"})

    assert change.job_run_id == ""
    assert change.application_id == ""
    assert change.state == ""


@pytest.mark.parametrize(
    "detail",
    [
        "{not json",
        b"\x80\x81\x82",
        "[1, 2, 3]",
        '"just a string"',
        None,
        ["jobRunId", "j1"],
        12,
    ],
)
def test_parse_detail_rejects_non_mapping_payloads(detail):
    """Test payloads that are not key/value structures raise MessageParseError."""
    with pytest.raises(MessageParseError):
        parse_job_run_detail(detail)
