"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base: Model building block
  - get_async_engine(), get_async_session_factory(): Async connection management
  - JobDetailModel: emr_job_details row
  - JobDetailCRUD, job_detail_crud: CRUD operations

Dependencies: sqlalchemy, emr_notifier.configs
System role: Database adapter for the job run tracking table
"""

from emr_notifier.boundary.db.base import Base
from emr_notifier.boundary.db.connection import get_async_engine, get_async_session_factory
from emr_notifier.boundary.db.models.job_detail_model import JobDetailModel
from emr_notifier.boundary.db.CRUD import JobDetailCRUD, job_detail_crud

__all__ = [
    "Base",
    "get_async_engine",
    "get_async_session_factory",
    "JobDetailModel",
    "JobDetailCRUD",
    "job_detail_crud",
]
