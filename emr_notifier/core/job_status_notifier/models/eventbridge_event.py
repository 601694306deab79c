"""
EventBridge event schema for EMR Serverless job run state changes.

EMR Serverless publishes "EMR Serverless Job Run State Change" events:
{
    "source": "aws.emr-serverless",
    "detail-type": "EMR Serverless Job Run State Change",
    "detail": {
        "jobRunId": "00f1cbsc6anuij25",
        "applicationId": "00f1cbn5g4bb0c01",
        "state": "SUCCESS",
        "previousState": "RUNNING",
        ...
    }
}

Dependencies: pydantic
System role: Data validation and contract definition
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _stringify(value: Any) -> str:
    """Coerce any detail value to its textual form (missing -> empty string)."""
    if value is None:
        return ""
    return str(value)


class EventBridgeEvent(BaseModel):
    """EventBridge envelope. Only source and detail drive processing."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    source: str = ""
    detail_type: str | None = Field(default=None, alias="detail-type")
    detail: Any = None
    id: str | None = None
    time: str | None = None

    @field_validator("source", mode="before")
    @classmethod
    def _coerce_source(cls, value: Any) -> str:
        return _stringify(value)

    @field_validator("detail_type", "id", "time", mode="before")
    @classmethod
    def _coerce_envelope(cls, value: Any) -> str | None:
        return None if value is None else str(value)


class JobRunStateChange(BaseModel):
    """Job run state change detail payload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    job_run_id: str = Field(default="", alias="jobRunId")
    application_id: str = Field(default="", alias="applicationId")
    state: str = ""
    previous_state: str | None = Field(default=None, alias="previousState")
    release_label: str | None = Field(default=None, alias="releaseLabel")
    job_run_name: str | None = Field(default=None, alias="jobRunName")

    @field_validator("job_run_id", "application_id", "state", mode="before")
    @classmethod
    def _coerce_to_str(cls, value: Any) -> str:
        return _stringify(value)

    @field_validator("previous_state", "release_label", "job_run_name", mode="before")
    @classmethod
    def _coerce_optional(cls, value: Any) -> str | None:
        return None if value is None else str(value)
