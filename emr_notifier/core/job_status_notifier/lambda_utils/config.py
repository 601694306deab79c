"""
Configuration and secrets management utilities for Lambda.

Builds the notifier and its collaborators from Settings once per process.
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from emr_notifier.boundary.aws.emr_serverless_client import EMRServerlessClient
from emr_notifier.boundary.aws.secrets_client import SecretsManagerClient
from emr_notifier.boundary.db.connection import get_async_engine, get_async_session_factory
from emr_notifier.configs.database import DatabaseSettings
from emr_notifier.configs.settings import Settings
from emr_notifier.core.job_status_notifier.database.job_detail_store import JobDetailStore
from emr_notifier.core.job_status_notifier.lambda_utils.exceptions import ConfigurationError
from emr_notifier.core.job_status_notifier.notifier import JobStatusNotifier

logger = logging.getLogger(__name__)


def resolve_database_settings(
    db_config: DatabaseSettings,
    secrets_client: SecretsManagerClient | None = None,
    region: str = "us-east-1",
) -> DatabaseSettings:
    """
    Return database settings with the password taken from Secrets Manager.

    Settings are returned unchanged when DB_SECRET_ARN is not set.

    Raises:
        ConfigurationError: Secret cannot be read or has no password
    """
    if not db_config.secret_arn:
        return db_config

    client = secrets_client or SecretsManagerClient(region=region)
    try:
        secret = client.get_json_secret(db_config.secret_arn)
    except (ClientError, BotoCoreError, ValueError) as e:
        raise ConfigurationError(f"Failed to fetch database secret: {e}") from e

    password = secret.get("password")
    if not password:
        raise ConfigurationError("Database secret has no 'password' key")

    logger.info("resolve_database_settings - Database password loaded from secret")
    return db_config.model_copy(update={"password": password})


def build_notifier(settings: Settings) -> JobStatusNotifier:
    """
    Construct the notifier context: store, diagnostics client and logger.

    Raises:
        ConfigurationError: Database secret could not be resolved
    """
    db_config = resolve_database_settings(settings.database, region=settings.emr.region)
    engine = get_async_engine(db_config)
    store = JobDetailStore(get_async_session_factory(engine))
    diagnostics = EMRServerlessClient(region=settings.emr.region)

    logger.info(
        "build_notifier - Notifier ready",
        extra={"db_host": db_config.host, "emr_region": settings.emr.region},
    )
    return JobStatusNotifier(store, diagnostics)
