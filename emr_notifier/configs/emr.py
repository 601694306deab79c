"""
EMR Serverless client configuration.

Dependencies: pydantic, pydantic_settings
System role: Region selection for the diagnostics client
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from emr_notifier.configs.base import BaseSettings


class EMRServerlessSettings(BaseSettings):
    """EMR Serverless client configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    region: str = Field(
        default="us-east-1",
        validation_alias=AliasChoices("EMR_REGION", "AWS_REGION"),
        description="AWS region of the EMR Serverless applications",
    )
