"""
Job detail domain model.

Read-only snapshot of an emr_job_details row. The store is the source of
truth; this model is never written back whole.

Dependencies: pydantic
System role: Record passed from lookup to update
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobDetail(BaseModel):
    """Tracking record for one EMR Serverless job run."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str = Field(description="Internal surrogate identifier")
    job_id: str = Field(description="EMR Serverless job run ID")
    job_status: str | None = Field(default=None, description="Current lifecycle status")
    request_id: str | None = Field(default=None, description="Originating request ID")
    query: str | None = Field(default=None, description="Job definition / query text")
    destination: str | None = Field(default=None, description="Output location identifier")
    jti: str | None = Field(default=None, description="Token identifier kept for auditing")
    region: str | None = Field(default=None, description="Data-residency tag")
    client_ip: str | None = Field(default=None, description="Originating caller IP")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return str(value)
