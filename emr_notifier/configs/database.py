"""
Database configuration settings.

Manages PostgreSQL connection parameters for the job details store.
Field names follow the DB_HOST / DB_PORT / DB_USER / DB_PASSWORD / DB_NAME
variables the Lambda function is deployed with.

Dependencies: pydantic, pydantic_settings, sqlalchemy
System role: Database connection configuration for SQLAlchemy
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict
from sqlalchemy.engine import URL

from emr_notifier.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="", description="PostgreSQL password")
    name: str = Field(default="postgres", description="PostgreSQL database name")

    sslmode: str = Field(default="disable", description="SSL mode for the connection")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    secret_arn: str | None = Field(
        default=None,
        description="Secrets Manager ARN holding the database password (optional)",
    )

    @property
    def async_database_url(self) -> URL:
        """
        Construct async PostgreSQL connection URL.

        Credentials are carried as URL fields, so passwords need no escaping.

        Returns:
            URL: SQLAlchemy async-compatible database URL (asyncpg uses 'ssl' param)
        """
        return URL.create(
            "postgresql+asyncpg",
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.name,
            query={"ssl": self.sslmode} if self.sslmode != "disable" else {},
        )
