"""
SQLAlchemy declarative base.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    The emr_job_details table is owned by the upstream component that creates
    job rows; metadata here maps it, it is not used to migrate it.
    """

    pass
