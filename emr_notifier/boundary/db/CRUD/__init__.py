"""
CRUD operations for database models.

Usage:
    from emr_notifier.boundary.db.CRUD import job_detail_crud

    record = await job_detail_crud.get_by_job_id(session, job_run_id)
"""

from emr_notifier.boundary.db.CRUD.job_detail_crud import JobDetailCRUD, job_detail_crud

__all__ = [
    "JobDetailCRUD",
    "job_detail_crud",
]
