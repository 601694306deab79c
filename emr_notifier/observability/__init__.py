"""
Observability module.

Provides logging configuration and structured-context helpers.
"""

from emr_notifier.observability.logger import configure_logging

__all__ = ["configure_logging"]
