from typing import Any, Dict


class MistralError(Exception):
    """Base exception, raised when nothing more specific applies."""

    def __init__(
        self,
        message: str,
        status_code: int = None,
        body: Any = None,
        headers: Dict[str, str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message

    @classmethod
    def from_response(cls, response, message: str = None, **kwargs) -> "MistralError":
        """Build an error carrying the status, body and headers of a response."""
        body = response.text
        return cls(
            message=message or f"Status: {response.status_code}. Message: {body}",
            status_code=response.status_code,
            body=body,
            headers=dict(response.headers or {}),
            **kwargs,
        )


class ConfigurationError(MistralError):
    """Raised for a missing API key or a missing model with no default."""
    pass


class APIConnectionError(MistralError):
    """Raised when the API server cannot be reached."""
    pass


class APIError(MistralError):
    """Raised for non-retryable 4xx responses and error payloads."""
    pass


class APIStatusError(APIError):
    """Raised when a retryable status outlives the retry budget."""
    pass


class DecodeError(MistralError):
    """Raised when a body or stream line is not valid JSON."""

    def __init__(self, message: str, line: str = None, **kwargs):
        super().__init__(message, **kwargs)
        self.line = line
