import logging
from typing import Any, Dict, List, Optional, Union

from .exceptions import ConfigurationError
from .models import ChatMessage, Function, ResponseFormat, ToolChoice

log = logging.getLogger(__name__)


class RequestBuilder:
    """Assembles JSON request bodies from call parameters."""

    def __init__(self, default_model: str = None, logger: logging.Logger = None):
        self.default_model = default_model
        self._logger = logger or log

    # -------------------------------------------------------------------------
    # Normalization
    # -------------------------------------------------------------------------

    @staticmethod
    def parse_messages(messages: List[Union[ChatMessage, dict]]) -> List[dict]:
        return [
            message.to_dict() if isinstance(message, ChatMessage) else message
            for message in messages
        ]

    @staticmethod
    def parse_tools(tools: List[dict]) -> List[dict]:
        """Keep function tools only, converting Function models to dicts."""
        parsed_tools = []
        for tool in tools:
            if tool.get("type") != "function":
                continue
            function = tool.get("function")
            parsed_tools.append({
                "type": tool["type"],
                "function": function.to_dict() if isinstance(function, Function) else function,
            })
        return parsed_tools

    @staticmethod
    def parse_tool_choice(tool_choice: Union[str, ToolChoice]) -> str:
        return str(tool_choice) if isinstance(tool_choice, ToolChoice) else tool_choice

    @staticmethod
    def parse_response_format(response_format: Union[dict, ResponseFormat]) -> dict:
        if isinstance(response_format, ResponseFormat):
            return response_format.to_dict()
        return response_format

    @staticmethod
    def build_sampling_params(
        temperature: float = None,
        max_tokens: int = None,
        top_p: float = None,
        random_seed: int = None,
    ) -> Dict[str, Any]:
        params = {}
        if temperature is not None:
            params["temperature"] = temperature
        if max_tokens is not None:
            params["max_tokens"] = max_tokens
        if top_p is not None:
            params["top_p"] = top_p
        if random_seed is not None:
            params["random_seed"] = random_seed
        return params

    def resolve_model(self, model: Optional[str]) -> str:
        if model is not None:
            return model
        if self.default_model is None:
            raise ConfigurationError("model must be provided")
        return self.default_model

    # -------------------------------------------------------------------------
    # Request bodies
    # -------------------------------------------------------------------------

    def build_chat_request(
        self,
        messages: List[Union[ChatMessage, dict]],
        model: str = None,
        tools: List[dict] = None,
        temperature: float = None,
        max_tokens: int = None,
        top_p: float = None,
        random_seed: int = None,
        stream: bool = None,
        safe_prompt: bool = False,
        tool_choice: Union[str, ToolChoice] = None,
        response_format: Union[dict, ResponseFormat] = None,
    ) -> Dict[str, Any]:
        request_data = {
            "messages": self.parse_messages(messages),
            "safe_prompt": safe_prompt,
            "model": self.resolve_model(model),
        }

        if tools is not None:
            request_data["tools"] = self.parse_tools(tools)
        request_data.update(self.build_sampling_params(
            temperature=temperature,
            max_tokens=max_tokens,
            top_p=top_p,
            random_seed=random_seed,
        ))
        if stream is not None:
            request_data["stream"] = stream
        if tool_choice is not None:
            request_data["tool_choice"] = self.parse_tool_choice(tool_choice)
        if response_format is not None:
            request_data["response_format"] = self.parse_response_format(response_format)

        self._logger.debug("Chat request: %s", request_data)
        return request_data

    def build_completion_request(
        self,
        prompt: str,
        model: str = None,
        suffix: str = None,
        temperature: float = None,
        max_tokens: int = None,
        top_p: float = None,
        random_seed: int = None,
        stop: List[str] = None,
        stream: bool = False,
    ) -> Dict[str, Any]:
        request_data = {"prompt": prompt}
        if suffix is not None:
            request_data["suffix"] = suffix
        request_data["model"] = self.resolve_model(model)
        request_data["stream"] = stream
        if stop is not None:
            request_data["stop"] = stop

        request_data.update(self.build_sampling_params(
            temperature=temperature,
            max_tokens=max_tokens,
            top_p=top_p,
            random_seed=random_seed,
        ))

        self._logger.debug("Completion request: %s", request_data)
        return request_data

    def build_embeddings_request(self, model: str, input: Union[str, List[str]]) -> Dict[str, Any]:
        return {"model": self.resolve_model(model), "input": input}
