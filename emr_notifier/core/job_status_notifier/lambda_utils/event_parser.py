"""
EventBridge event parsing utilities for Lambda.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from emr_notifier.core.job_status_notifier.lambda_utils.exceptions import MessageParseError
from emr_notifier.core.job_status_notifier.models.eventbridge_event import (
    EventBridgeEvent,
    JobRunStateChange,
)

logger = logging.getLogger(__name__)


def parse_event(event: Any) -> EventBridgeEvent:
    """
    Validate the EventBridge envelope.

    Raises:
        MessageParseError: Event is not a mapping or the envelope is invalid
    """
    if not isinstance(event, Mapping):
        raise MessageParseError(f"Event is not a mapping: {type(event).__name__}")
    try:
        return EventBridgeEvent.model_validate(dict(event))
    except ValidationError as e:
        raise MessageParseError(f"Invalid event envelope: {e}") from e


def parse_job_run_detail(detail: Any) -> JobRunStateChange:
    """
    Parse the detail payload of a job run state change.

    The Lambda runtime hands EventBridge detail over as a dict, but a raw
    JSON document (str or bytes) is accepted as well.

    Raises:
        MessageParseError: Detail is not a key/value mapping
    """
    try:
        if isinstance(detail, (str, bytes, bytearray)):
            detail = json.loads(detail)

        if not isinstance(detail, Mapping):
            raise MessageParseError(
                f"Event detail is not a key/value mapping: {type(detail).__name__}"
            )

        change = JobRunStateChange.model_validate(dict(detail))
        logger.debug(
            "parse_job_run_detail - Parsed detail",
            extra={
                "job_run_id": change.job_run_id,
                "application_id": change.application_id,
                "state": change.state,
            },
        )
        return change

    except json.JSONDecodeError as e:
        logger.error("parse_job_run_detail - JSONDecodeError: %s", e)
        raise MessageParseError(f"Invalid JSON in event detail: {e}") from e
    except ValidationError as e:
        logger.error("parse_job_run_detail - ValidationError: %s", e)
        raise MessageParseError(f"Invalid event detail: {e}") from e
    except ValueError as e:
        # bytes that are not valid UTF-8
        logger.error("parse_job_run_detail - ValueError: %s", e)
        raise MessageParseError(f"Undecodable event detail: {e}") from e
