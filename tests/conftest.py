"""
Shared test fixtures and configuration for entire test suite.

Provides: Database session mocks, in-memory SQLite job details table,
EventBridge event builders
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


SEED_ROWS = [
    {
        "id": "101",
        "jobid": "j1",
        "jobstatus": "SUBMITTED",
        "requestid": "req-1",
        "query": "SELECT * FROM sales",
        "destination": "s3://exports/req-1/",
        "jti": "token-1",
        "cross_bucket_region": "eu-west-1",
        "client_ip": "10.0.0.1",
    },
    {
        "id": "102",
        "jobid": "j2",
        "jobstatus": "RUNNING",
        "requestid": "req-2",
        "query": "SELECT * FROM orders",
        "destination": "s3://exports/req-2/",
        "jti": None,
        "cross_bucket_region": None,
        "client_ip": None,
    },
]


@pytest.fixture
def mock_session():
    """
    Create mock AsyncSession.

    Returns:
        AsyncMock: Session with async execute/commit/rollback
    """
    return AsyncMock()


@pytest.fixture
def session_factory(mock_session):
    """
    Create mock async_sessionmaker yielding mock_session.

    Returns:
        MagicMock: Callable usable as `async with factory() as session`
    """
    factory = MagicMock()
    factory.return_value.__aenter__.return_value = mock_session
    factory.return_value.__aexit__.return_value = False
    return factory


@pytest.fixture
async def sqlite_session_factory():
    """
    Create in-memory SQLite emr_job_details table seeded with SEED_ROWS.

    Yields:
        async_sessionmaker: Session factory bound to the test database
    """
    from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool
    from emr_notifier.boundary.db.base import Base
    from emr_notifier.boundary.db.models.job_detail_model import JobDetailModel

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(JobDetailModel.__table__.insert(), SEED_ROWS)

    yield async_sessionmaker(engine, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def make_event():
    """
    Build EventBridge job run state change events.

    Returns:
        Callable[..., dict]: make_event(job_run_id, state, source=..., application_id=...)
    """

    def _make_event(
        job_run_id="j1",
        state="RUNNING",
        source="aws.emr-serverless",
        application_id="app-1",
    ) -> dict:
        return {
            "version": "0",
            "id": "9f1b1c2e-0000-4d8a-9c51-1a2b3c4d5e6f",
            "detail-type": "EMR Serverless Job Run State Change",
            "source": source,
            "account": "123456789012",
            "time": "2026-10-19T10:00:00Z",
            "region": "us-east-1",
            "resources": [],
            "detail": {
                "jobRunId": job_run_id,
                "applicationId": application_id,
                "arn": f"arn:aws:emr-serverless:us-east-1:123456789012:/applications/{application_id}/jobruns/{job_run_id}",
                "releaseLabel": "emr-7.1.0",
                "state": state,
                "previousState": "SCHEDULED",
                "createdBy": "arn:aws:iam::123456789012:role/submitter",
                "updatedAt": "2026-10-19T10:00:00.000000Z",
                "createdAt": "2026-10-19T09:55:00.000000Z",
            },
        }

    return _make_event
