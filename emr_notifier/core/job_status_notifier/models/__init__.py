"""
Models for the job status notifier.

Exports: EventBridgeEvent, JobRunStateChange, JobDetail, JobFound, JobNotFound,
JobLookupFault, JobLookupResult, NotificationOutcome
"""

from .eventbridge_event import EventBridgeEvent, JobRunStateChange
from .job_detail import JobDetail
from .lookup_result import JobFound, JobLookupFault, JobLookupResult, JobNotFound
from .outcome import NotificationOutcome

__all__ = [
    "EventBridgeEvent",
    "JobRunStateChange",
    "JobDetail",
    "JobFound",
    "JobNotFound",
    "JobLookupFault",
    "JobLookupResult",
    "NotificationOutcome",
]
