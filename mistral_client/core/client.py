import logging
import time
from functools import partial
from typing import Any, Callable, List, Type, TypeVar, Union

import pydantic

from ..config import ClientConfig, Config
from .dispatcher import Dispatcher, Stream
from .exceptions import MistralError
from .models import (
    ChatCompletionResponse,
    ChatCompletionStreamResponse,
    ChatMessage,
    EmbeddingResponse,
    ModelList,
    ResponseFormat,
    ToolChoice,
)
from .request import RequestBuilder
from .transport import HTTPTransport

T = TypeVar("T", bound=pydantic.BaseModel)


def validate(model: Type[T], data: Any) -> T:
    """Build a response model, reporting a body of the wrong shape as a MistralError."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise MistralError(f"Unexpected response: {data}") from e


class MistralClient:
    """
    Synchronous client for the Mistral API.

    Usage:
        client = MistralClient(api_key="...")

        response = client.chat(
            model="mistral-small-latest",
            messages=[ChatMessage(role="user", content="What is the best French cheese?")],
        )
        print(response.choices[0].message.content)

        for chunk in client.chat_stream(model="mistral-small-latest", messages=messages):
            print(chunk.choices[0].delta.content or "", end="")
    """

    def __init__(
        self,
        api_key: str = None,
        endpoint: str = Config.ENDPOINT,
        max_retries: int = Config.DEFAULT_MAX_RETRIES,
        timeout: float = Config.DEFAULT_TIMEOUT,
        transport=None,
        sleep: Callable[[float], None] = time.sleep,
        logger: logging.Logger = None,
    ):
        self.config = ClientConfig.create(
            api_key=api_key,
            endpoint=endpoint,
            max_retries=max_retries,
            timeout=timeout,
        )
        self._transport = transport or HTTPTransport(timeout=self.config.timeout)
        self._builder = RequestBuilder(default_model=self.config.default_model, logger=logger)
        self._dispatcher = Dispatcher(self.config, self._transport, sleep=sleep, logger=logger)

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    # -------------------------------------------------------------------------
    # Chat
    # -------------------------------------------------------------------------

    def chat(
        self,
        messages: List[Union[ChatMessage, dict]],
        model: str = None,
        tools: List[dict] = None,
        temperature: float = None,
        max_tokens: int = None,
        top_p: float = None,
        random_seed: int = None,
        safe_mode: bool = False,
        safe_prompt: bool = False,
        tool_choice: Union[str, ToolChoice] = None,
        response_format: Union[dict, ResponseFormat] = None,
    ) -> ChatCompletionResponse:
        """A chat endpoint that returns a single response.

        Args:
            messages: Messages to chat with, e.g. [{"role": "user", "content": "Hi"}]
            model: Model name, e.g. "mistral-small-latest"
            tools: Tool definitions the model may call
            temperature: Sampling temperature, e.g. 0.5
            max_tokens: Maximum number of tokens to generate
            top_p: Nucleus sampling probability, e.g. 0.9
            random_seed: Seed for sampling
            safe_mode: Deprecated, use safe_prompt instead
            safe_prompt: Whether to inject the safety prompt
            tool_choice: "auto", "any" or "none"
            response_format: e.g. {"type": "json_object"}
        """
        request = self._builder.build_chat_request(
            messages=messages,
            model=model,
            tools=tools,
            temperature=temperature,
            max_tokens=max_tokens,
            top_p=top_p,
            random_seed=random_seed,
            stream=False,
            safe_prompt=safe_mode or safe_prompt,
            tool_choice=tool_choice,
            response_format=response_format,
        )
        response = self._dispatcher.call("post", "v1/chat/completions", json=request)
        return validate(ChatCompletionResponse, response)

    def chat_stream(
        self,
        messages: List[Union[ChatMessage, dict]],
        model: str = None,
        tools: List[dict] = None,
        temperature: float = None,
        max_tokens: int = None,
        top_p: float = None,
        random_seed: int = None,
        safe_mode: bool = False,
        safe_prompt: bool = False,
        tool_choice: Union[str, ToolChoice] = None,
        response_format: Union[dict, ResponseFormat] = None,
    ) -> Stream:
        """A chat endpoint that streams ChatCompletionStreamResponse chunks.

        Takes the same arguments as chat().
        """
        request = self._builder.build_chat_request(
            messages=messages,
            model=model,
            tools=tools,
            temperature=temperature,
            max_tokens=max_tokens,
            top_p=top_p,
            random_seed=random_seed,
            stream=True,
            safe_prompt=safe_mode or safe_prompt,
            tool_choice=tool_choice,
            response_format=response_format,
        )
        stream = self._dispatcher.call("post", "v1/chat/completions", json=request, stream=True)
        return stream.cast(partial(validate, ChatCompletionStreamResponse))

    # -------------------------------------------------------------------------
    # Completion (fill-in-the-middle)
    # -------------------------------------------------------------------------

    def completion(
        self,
        prompt: str,
        model: str = None,
        suffix: str = None,
        temperature: float = None,
        max_tokens: int = None,
        top_p: float = None,
        random_seed: int = None,
        stop: List[str] = None,
    ) -> ChatCompletionResponse:
        """A completion endpoint that returns a single response.

        Args:
            prompt: Text before the cursor, e.g. "def add(a, b):"
            model: Model name, e.g. "codestral-latest"
            suffix: Text after the cursor, e.g. "return a + b"
            stop: Stop sequences, e.g. ["#"]
        """
        request = self._builder.build_completion_request(
            prompt=prompt,
            model=model,
            suffix=suffix,
            temperature=temperature,
            max_tokens=max_tokens,
            top_p=top_p,
            random_seed=random_seed,
            stop=stop,
            stream=False,
        )
        response = self._dispatcher.call("post", "v1/fim/completions", json=request)
        return validate(ChatCompletionResponse, response)

    def completion_stream(
        self,
        prompt: str,
        model: str = None,
        suffix: str = None,
        temperature: float = None,
        max_tokens: int = None,
        top_p: float = None,
        random_seed: int = None,
        stop: List[str] = None,
    ) -> Stream:
        """A completion endpoint that streams ChatCompletionStreamResponse chunks."""
        request = self._builder.build_completion_request(
            prompt=prompt,
            model=model,
            suffix=suffix,
            temperature=temperature,
            max_tokens=max_tokens,
            top_p=top_p,
            random_seed=random_seed,
            stop=stop,
            stream=True,
        )
        stream = self._dispatcher.call("post", "v1/fim/completions", json=request, stream=True)
        return stream.cast(partial(validate, ChatCompletionStreamResponse))

    # -------------------------------------------------------------------------
    # Embeddings / Models
    # -------------------------------------------------------------------------

    def embeddings(self, model: str, input: Union[str, List[str]]) -> EmbeddingResponse:
        """Embed a single input or a batch of inputs."""
        request = self._builder.build_embeddings_request(model=model, input=input)
        response = self._dispatcher.call("post", "v1/embeddings", json=request)
        return validate(EmbeddingResponse, response)

    def list_models(self) -> ModelList:
        """List the available models."""
        response = self._dispatcher.call("get", "v1/models")
        return validate(ModelList, response)

    def __repr__(self):
        return f"MistralClient(endpoint={self.endpoint!r}, api_key={'***' if self.api_key else None!r})"

    def close(self):
        self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
