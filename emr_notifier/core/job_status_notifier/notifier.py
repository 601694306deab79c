"""
Job status notifier.

Handles one EMR Serverless job run state change event:
filter on source → parse detail → look up tracking row → translate status →
update row → on FAILED, fetch and log job run diagnostics.

Every failure is logged and the event dropped; nothing is raised to the
invoker and nothing is retried.

Dependencies: boto3 (via EMRServerlessClient), sqlalchemy (via JobDetailStore)
System role: Event handling logic behind the Lambda entry point
"""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from emr_notifier.boundary.aws.emr_serverless_client import EMRServerlessClient
from emr_notifier.observability.log_utils import dump_payload, log_exception_with_context
from .database.job_detail_store import JobDetailStore
from .lambda_utils.event_parser import parse_event, parse_job_run_detail
from .lambda_utils.exceptions import MessageParseError
from .models.eventbridge_event import JobRunStateChange
from .models.lookup_result import JobFound, JobLookupFault, JobNotFound
from .models.outcome import NotificationOutcome
from .status_mapping import EMR_SERVERLESS_SOURCE, needs_diagnostics, translate_status


class JobStatusNotifier:
    """Keep emr_job_details in step with EMR Serverless job run events."""

    def __init__(
        self,
        store: JobDetailStore,
        diagnostics_client: EMRServerlessClient,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize notifier with its collaborators.

        Args:
            store: Tracking table store
            diagnostics_client: EMR Serverless client used for failed runs
            logger: Logger to report through (module logger if None)
        """
        self._store = store
        self._diagnostics = diagnostics_client
        self._logger = logger or logging.getLogger(__name__)

    async def handle_event(self, event: Any) -> NotificationOutcome:
        """
        Process a single EventBridge event.

        Args:
            event: EventBridge event as delivered to the Lambda function

        Returns:
            NotificationOutcome: How far the event got
        """
        try:
            envelope = parse_event(event)
        except MessageParseError as e:
            self._logger.debug("handle_event - Ignoring unrecognised event: %s", e)
            return NotificationOutcome.IGNORED

        if envelope.source != EMR_SERVERLESS_SOURCE:
            self._logger.debug("handle_event - Ignoring event from source %s", envelope.source)
            return NotificationOutcome.IGNORED

        self._logger.info(
            "handle_event - Initiating EMR Notifier",
            extra={"event_id": envelope.id, "detail_type": envelope.detail_type},
        )

        try:
            change = parse_job_run_detail(envelope.detail)
        except MessageParseError as e:
            self._logger.error("handle_event - Failed to parse event detail with error: %s", e)
            return NotificationOutcome.PARSE_FAILED

        if not change.job_run_id or not change.state:
            self._logger.warning(
                "handle_event - Event detail missing jobRunId or state (jobRunId=%r, state=%r)",
                change.job_run_id,
                change.state,
            )

        job_id = change.job_run_id
        lookup = await self._store.get_job_detail(job_id)

        if isinstance(lookup, JobNotFound):
            self._logger.error(
                "handle_event - Failed to get job details for jobId: %s with error: no job record",
                job_id,
            )
            return NotificationOutcome.NOT_FOUND
        if isinstance(lookup, JobLookupFault):
            self._logger.error(
                "handle_event - Failed to get job details for jobId: %s with error: %s",
                job_id,
                lookup.error,
            )
            return NotificationOutcome.LOOKUP_FAILED
        if not isinstance(lookup, JobFound):
            raise TypeError(f"Unexpected lookup result: {lookup!r}")

        updated_status = translate_status(change.state)
        await self._store.update_job(lookup.record, updated_status)

        if needs_diagnostics(change.state):
            self._log_failure_diagnostics(change)

        return NotificationOutcome.UPDATED

    def _log_failure_diagnostics(self, change: JobRunStateChange) -> None:
        """Fetch the failed job run description and log it at ERROR."""
        try:
            job_run = self._diagnostics.get_job_run(change.application_id, change.job_run_id)
        except (ClientError, BotoCoreError) as e:
            log_exception_with_context(
                self._logger,
                "_log_failure_diagnostics - Failed to fetch job run details",
                e,
                application_id=change.application_id,
                job_run_id=change.job_run_id,
            )
            return
        except Exception as e:  # pylint: disable=broad-except
            log_exception_with_context(
                self._logger,
                "_log_failure_diagnostics - Unexpected error while fetching job run details",
                e,
                application_id=change.application_id,
                job_run_id=change.job_run_id,
            )
            return

        self._logger.error(
            "_log_failure_diagnostics - Job run %s failed: %s",
            change.job_run_id,
            dump_payload(job_run),
            extra={"application_id": change.application_id, "job_run_id": change.job_run_id},
        )
