"""
Database models package.

Exports:
  - JobDetailModel: emr_job_details ORM model

Dependencies: sqlalchemy, emr_notifier.boundary.db.base
System role: Database model definitions for domain entities
"""

from emr_notifier.boundary.db.models.job_detail_model import JobDetailModel

__all__ = ["JobDetailModel"]
