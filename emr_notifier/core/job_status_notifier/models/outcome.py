"""
Outcome of handling a single event.
"""

from enum import Enum


class NotificationOutcome(str, Enum):
    """How far an event got through the notifier."""

    IGNORED = "ignored"
    PARSE_FAILED = "parse_failed"
    NOT_FOUND = "not_found"
    LOOKUP_FAILED = "lookup_failed"
    UPDATED = "updated"
    CONFIGURATION_FAILED = "configuration_failed"
