"""
Job detail CRUD operations.

Read-by-job-id and status update for JobDetailModel. Rows are never created
or deleted by this service.

Dependencies: sqlalchemy, emr_notifier.boundary.db.models
System role: Job run tracking persistence operations
"""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from emr_notifier.boundary.db.models.job_detail_model import JobDetailModel


class JobDetailCRUD:
    """CRUD operations for JobDetailModel."""

    def __init__(self) -> None:
        """Initialize JobDetailCRUD with JobDetailModel."""
        self.model = JobDetailModel

    async def get_by_job_id(
        self,
        session: AsyncSession,
        job_id: str,
    ) -> JobDetailModel | None:
        """
        Retrieve the tracking row for an EMR Serverless job run.

        Args:
            session: Async database session
            job_id: EMR Serverless job run ID

        Returns:
            JobDetailModel if found, None otherwise. If several rows share
            the job ID the first one returned wins.
        """
        stmt = select(JobDetailModel).where(JobDetailModel.job_id == job_id).limit(1)
        result = await session.execute(stmt)
        return result.scalars().first()

    async def update_status(
        self,
        session: AsyncSession,
        job_id: str,
        status: str,
    ) -> int:
        """
        Set jobstatus on the row(s) matching job_id. Does not commit.

        Args:
            session: Async database session
            job_id: EMR Serverless job run ID
            status: New job status

        Returns:
            Number of rows matched
        """
        stmt = (
            update(JobDetailModel)
            .where(JobDetailModel.job_id == job_id)
            .values(job_status=status)
        )
        result = await session.execute(stmt)
        return result.rowcount


job_detail_crud = JobDetailCRUD()
