"""
Job status translation.

Statuses are free-form strings copied from the event. The one exception is
SUCCESS: a finished compute run hands over to the downstream data transfer
phase, so the record moves to DATA_TRANSFER rather than SUCCESS.
"""

EMR_SERVERLESS_SOURCE = "aws.emr-serverless"

SUCCESS = "SUCCESS"
FAILED = "FAILED"
DATA_TRANSFER = "DATA_TRANSFER"


def translate_status(state: str) -> str:
    """Map an EMR Serverless job run state to the status persisted in the store."""
    if state == SUCCESS:
        return DATA_TRANSFER
    return state


def needs_diagnostics(state: str) -> bool:
    """Whether the (untranslated) event state calls for a diagnostics fetch."""
    return state == FAILED
