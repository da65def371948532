"""
Wire-format models for the Mistral API.

Requests accept either these models or plain dicts; responses are always
validated into them on construction.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel as PydanticModel
from pydantic import ConfigDict, Field


# =============================================================================
# Base
# =============================================================================

class BaseModel(PydanticModel):
    """Base model with dict-like access and serialization."""

    model_config = ConfigDict(extra="ignore", use_enum_values=False)

    def __getitem__(self, key):
        return getattr(self, key)

    def get(self, key, default=None):
        return getattr(self, key, default)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


# =============================================================================
# Common
# =============================================================================

class UsageInfo(BaseModel):
    prompt_tokens: int
    total_tokens: int
    completion_tokens: Optional[int] = None


# =============================================================================
# Chat
# =============================================================================

class Function(BaseModel):
    """A function the model may call."""
    name: str
    description: str
    parameters: Dict[str, Any]


class ToolType(str, Enum):
    function = "function"


class FunctionCall(BaseModel):
    name: str
    arguments: str


class ToolCall(BaseModel):
    id: str = "null"
    type: ToolType = ToolType.function
    function: FunctionCall


class ResponseFormats(str, Enum):
    text = "text"
    json_object = "json_object"


class ToolChoice(str, Enum):
    auto = "auto"
    any = "any"
    none = "none"

    def __str__(self):
        return self.value


class ResponseFormat(BaseModel):
    type: ResponseFormats = ResponseFormats.text


class ChatMessage(BaseModel):
    """A single message in a conversation."""
    role: str
    content: Optional[Union[str, List[str]]] = None
    name: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None


class DeltaMessage(BaseModel):
    """Incremental message carried by a stream chunk."""
    role: Optional[str] = None
    content: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None


class FinishReason(str, Enum):
    stop = "stop"
    length = "length"
    error = "error"
    tool_calls = "tool_calls"


class ChatCompletionResponseStreamChoice(BaseModel):
    index: int
    delta: DeltaMessage
    finish_reason: Optional[FinishReason] = None


class ChatCompletionStreamResponse(BaseModel):
    """One chunk of a streamed chat or completion response."""
    id: str
    model: str
    choices: List[ChatCompletionResponseStreamChoice]
    created: Optional[int] = None
    object: Optional[str] = None
    usage: Optional[UsageInfo] = None


class ChatCompletionResponseChoice(BaseModel):
    index: int
    message: ChatMessage
    finish_reason: Optional[FinishReason] = None


class ChatCompletionResponse(BaseModel):
    """A complete chat or completion response."""
    id: str
    object: str
    created: int
    model: str
    choices: List[ChatCompletionResponseChoice]
    usage: UsageInfo


# =============================================================================
# Embeddings
# =============================================================================

class EmbeddingObject(BaseModel):
    object: str
    embedding: List[float]
    index: int


class EmbeddingResponse(BaseModel):
    id: str
    object: str
    data: List[EmbeddingObject]
    model: str
    usage: UsageInfo


# =============================================================================
# Models
# =============================================================================

class ModelPermission(BaseModel):
    id: str
    object: str
    created: int
    allow_create_engine: bool = False
    allow_sampling: bool = True
    allow_logprobs: bool = True
    allow_search_indices: bool = False
    allow_view: bool = True
    allow_fine_tuning: bool = False
    organization: str = "*"
    group: Optional[str] = None
    is_blocking: bool = False


class ModelCard(BaseModel):
    id: str
    object: str
    created: int
    owned_by: str
    root: Optional[str] = None
    parent: Optional[str] = None
    permission: List[ModelPermission] = Field(default_factory=list)


class ModelList(BaseModel):
    object: str
    data: List[ModelCard]
