"""
Lambda handler for EventBridge-triggered EMR Serverless job status updates.

Receives "EMR Serverless Job Run State Change" events and keeps the
emr_job_details tracking table in step:
SUBMITTED/PENDING/SCHEDULED/RUNNING/... are copied as-is, SUCCESS becomes
DATA_TRANSFER, and FAILED additionally logs the job run diagnostics.

Environment variables:
- DB_HOST, DB_PORT, DB_USER, DB_PASSWORD, DB_NAME: PostgreSQL connection
- DB_SECRET_ARN: Secrets Manager secret holding the DB password (optional)
- EMR_REGION / AWS_REGION: Region of the EMR Serverless applications
- LOG_LEVEL: Logging level

Dependencies: notifier, lambda_utils.config, observability
System role: Lambda entry point
"""

import asyncio
import logging
from typing import Any, Dict

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

from emr_notifier.configs import get_settings
from emr_notifier.observability.logger import configure_logging
from .lambda_utils.config import build_notifier
from .models.outcome import NotificationOutcome

logger = logging.getLogger(__name__)


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for EventBridge job run state change events.

    The notifier (database engine, EMR client) is built on the first
    invocation and reused by the container for later ones.

    Args:
        event: EventBridge event
        context: Lambda context object

    Returns:
        Dict with the NotificationOutcome value
    """
    if not hasattr(handler, "_notifier"):
        try:
            settings = get_settings()
            configure_logging(settings.log_level)
            handler._notifier = build_notifier(settings)
        except Exception as e:  # pylint: disable=broad-except
            logger.error("handler - Failed to build notifier: %s: %s", type(e).__name__, e)
            return {"outcome": NotificationOutcome.CONFIGURATION_FAILED.value}

    outcome = asyncio.run(handler._notifier.handle_event(event))
    logger.info("handler - Event handled", extra={"outcome": outcome.value})
    return {"outcome": outcome.value}
