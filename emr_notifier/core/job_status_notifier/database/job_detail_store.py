"""
Job detail store for RDS.

Looks up the emr_job_details row for a job run and persists status changes.
Both operations are fail-soft: lookups return a tagged result, updates log
their failures and return normally.

Dependencies: sqlalchemy, asyncpg
System role: Database persistence layer for Lambda
"""

import logging

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import async_sessionmaker

from emr_notifier.boundary.db.CRUD.job_detail_crud import JobDetailCRUD, job_detail_crud
from emr_notifier.core.job_status_notifier.models.job_detail import JobDetail
from emr_notifier.core.job_status_notifier.models.lookup_result import (
    JobFound,
    JobLookupFault,
    JobLookupResult,
    JobNotFound,
)

logger = logging.getLogger(__name__)


class JobDetailStore:
    """Read and update job run tracking rows, one session per operation."""

    def __init__(
        self,
        session_factory: async_sessionmaker,
        crud: JobDetailCRUD = job_detail_crud,
    ) -> None:
        """
        Initialize with a session factory.

        Args:
            session_factory: async_sessionmaker bound to the tracking database
            crud: CRUD operations for the tracking table
        """
        self._session_factory = session_factory
        self._crud = crud

    async def get_job_detail(self, job_id: str) -> JobLookupResult:
        """
        Look up the tracking row for a job run.

        Args:
            job_id: EMR Serverless job run ID

        Returns:
            JobFound with the record, JobNotFound if no row matches, or
            JobLookupFault for any other data-access failure
        """
        logger.info("get_job_detail - Initiating lookup", extra={"job_id": job_id})

        try:
            async with self._session_factory() as session:
                row = await self._crud.get_by_job_id(session, job_id)
            if row is None:
                return JobNotFound(job_id=job_id)
            return JobFound(record=JobDetail.model_validate(row))

        except ValidationError as e:
            logger.error("get_job_detail - Unreadable row for jobId %s: %s", job_id, e)
            return JobLookupFault(job_id=job_id, error=e)
        except Exception as e:  # pylint: disable=broad-except
            logger.error("get_job_detail - %s: %s", type(e).__name__, e, extra={"job_id": job_id})
            return JobLookupFault(job_id=job_id, error=e)

    async def update_job(self, record: JobDetail, new_status: str) -> None:
        """
        Persist a new status for the record's job run.

        Failures are rolled back and logged, never raised.

        Args:
            record: Record returned by get_job_detail
            new_status: Status to write into jobstatus
        """
        logger.info("%s-> update_job - Updating record for jobId: %s", record.id, record.job_id)

        try:
            async with self._session_factory() as session:
                try:
                    matched = await self._crud.update_status(session, record.job_id, new_status)
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "%s-> update_job - Failed to update record for jobId: %s with error: %s: %s",
                record.id,
                record.job_id,
                type(e).__name__,
                e,
            )
            return

        if not matched:
            logger.warning(
                "%s-> update_job - No row matched jobId: %s, status not persisted",
                record.id,
                record.job_id,
            )
            return

        logger.info(
            "%s-> update_job - Successfully updated jobStatus: %s for jobId: %s",
            record.id,
            new_status,
            record.job_id,
        )
