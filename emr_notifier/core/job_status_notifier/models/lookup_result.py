"""
Tagged result of a job detail lookup.

Callers check each variant explicitly instead of comparing against a
sentinel "no rows" error.
"""

from dataclasses import dataclass

from .job_detail import JobDetail


@dataclass(frozen=True)
class JobFound:
    """Exactly one tracking row matched."""

    record: JobDetail


@dataclass(frozen=True)
class JobNotFound:
    """No tracking row exists (yet) for the job run."""

    job_id: str


@dataclass(frozen=True)
class JobLookupFault:
    """The lookup failed for a reason other than a missing row."""

    job_id: str
    error: Exception


JobLookupResult = JobFound | JobNotFound | JobLookupFault
