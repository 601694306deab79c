"""
Job detail ORM model.

Maps the emr_job_details tracking table. Rows are inserted by the component
that submits EMR Serverless job runs; this service reads them and updates
jobstatus only.

Dependencies: sqlalchemy, emr_notifier.boundary.db.base
System role: Job run tracking row
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from emr_notifier.boundary.db.base import Base


class JobDetailModel(Base):
    """
    EMR job run tracking row.

    Attributes:
        id: Internal surrogate identifier
        job_id: EMR Serverless job run ID (column jobid)
        job_status: Current lifecycle status (column jobstatus)
        request_id: Originating request ID (column requestid)
        query: Job definition / query text
        destination: Output location identifier
        jti: Token identifier kept for auditing
        region: Data-residency tag (column cross_bucket_region)
        client_ip: Originating caller IP

    Constraints:
        jobid: at most one row per job run
    """

    __tablename__ = "emr_job_details"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    job_id: Mapped[str] = mapped_column("jobid", String, nullable=False, unique=True)
    job_status: Mapped[str | None] = mapped_column("jobstatus", String, nullable=True)
    request_id: Mapped[str | None] = mapped_column("requestid", String, nullable=True)
    query: Mapped[str | None] = mapped_column(String, nullable=True)
    destination: Mapped[str | None] = mapped_column(String, nullable=True)
    jti: Mapped[str | None] = mapped_column(String, nullable=True)
    region: Mapped[str | None] = mapped_column("cross_bucket_region", String, nullable=True)
    client_ip: Mapped[str | None] = mapped_column(String, nullable=True)
