"""Python client for the Mistral AI API."""

import logging

__version__ = "0.2.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .config import ClientConfig, Config  # noqa: E402
from .core.client import MistralClient  # noqa: E402
from .core.dispatcher import Stream  # noqa: E402
from .core.exceptions import (  # noqa: E402
    APIConnectionError,
    APIError,
    APIStatusError,
    ConfigurationError,
    DecodeError,
    MistralError,
)
from .core.models import (  # noqa: E402
    ChatCompletionResponse,
    ChatCompletionStreamResponse,
    ChatMessage,
    EmbeddingResponse,
    Function,
    ModelList,
    ResponseFormat,
    ToolChoice,
)

__all__ = [
    "__version__",
    "Config",
    "ClientConfig",
    "MistralClient",
    "Stream",
    # Errors
    "MistralError",
    "ConfigurationError",
    "APIConnectionError",
    "APIError",
    "APIStatusError",
    "DecodeError",
    # Models
    "ChatMessage",
    "ChatCompletionResponse",
    "ChatCompletionStreamResponse",
    "EmbeddingResponse",
    "Function",
    "ModelList",
    "ResponseFormat",
    "ToolChoice",
]
