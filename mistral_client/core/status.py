from enum import Enum

RETRY_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class StatusClass(Enum):
    SUCCESS = "success"
    RETRYABLE = "retryable"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


def classify(code: int) -> StatusClass:
    """Map an HTTP status code to how the dispatcher should treat it."""
    if code in RETRY_STATUS_CODES:
        return StatusClass.RETRYABLE
    if 400 <= code < 500:
        return StatusClass.CLIENT_ERROR
    if code >= 500:
        return StatusClass.SERVER_ERROR
    return StatusClass.SUCCESS
