"""
Exceptions for the job status notifier Lambda.
"""


class NotifierError(Exception):
    """Base class for notifier errors."""


class MessageParseError(NotifierError):
    """Raised when an event or its detail payload cannot be parsed."""


class ConfigurationError(NotifierError):
    """Raised when the notifier cannot be built from its configuration."""
