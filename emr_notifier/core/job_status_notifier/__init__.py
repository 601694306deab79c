"""
Job status notifier for EMR Serverless job runs.

Lambda-ready module that maps job run state change events onto the
emr_job_details tracking table.

Dependencies: boto3, sqlalchemy, asyncpg, pydantic, pydantic_settings
System role: Job status synchronisation entrypoint
"""

from .database.job_detail_store import JobDetailStore
from .models import JobDetail, NotificationOutcome
from .notifier import JobStatusNotifier
from .status_mapping import DATA_TRANSFER, EMR_SERVERLESS_SOURCE, FAILED, SUCCESS, translate_status

__all__ = [
    "JobStatusNotifier",
    "JobDetailStore",
    "JobDetail",
    "NotificationOutcome",
    "translate_status",
    "EMR_SERVERLESS_SOURCE",
    "SUCCESS",
    "FAILED",
    "DATA_TRANSFER",
]
