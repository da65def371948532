import pytest

from mistral_client.core.exceptions import ConfigurationError
from mistral_client.core.models import ChatMessage, Function, ResponseFormat, ToolChoice
from mistral_client.core.request import RequestBuilder


def test_chat_request_minimal():
    builder = RequestBuilder()
    request = builder.build_chat_request(
        messages=[ChatMessage(role="user", content="What is the best French cheese?")],
        model="mistral-small",
        stream=False,
    )
    assert request == {
        "messages": [{"role": "user", "content": "What is the best French cheese?"}],
        "safe_prompt": False,
        "model": "mistral-small",
        "stream": False,
    }
    assert list(request) == ["messages", "safe_prompt", "model", "stream"]


def test_unset_optional_fields_are_omitted():
    request = RequestBuilder().build_chat_request(messages=[], model="m")
    for field in ("temperature", "max_tokens", "top_p", "random_seed", "stream",
                  "tools", "tool_choice", "response_format"):
        assert field not in request
    assert None not in request.values()


def test_building_twice_is_identical():
    builder = RequestBuilder()
    params = dict(
        messages=[{"role": "user", "content": "hi"}],
        model="m",
        temperature=0.5,
        max_tokens=10,
        top_p=0.9,
        random_seed=42,
        stream=True,
        tool_choice=ToolChoice.auto,
    )
    first = builder.build_chat_request(**params)
    second = builder.build_chat_request(**params)
    assert first == second
    assert list(first) == list(second)


def test_missing_model_without_default_raises():
    with pytest.raises(ConfigurationError, match="model must be provided"):
        RequestBuilder().build_chat_request(messages=[{"role": "user", "content": "hi"}])
    with pytest.raises(ConfigurationError):
        RequestBuilder().build_completion_request(prompt="def f():")
    with pytest.raises(ConfigurationError):
        RequestBuilder().build_embeddings_request(model=None, input="x")


def test_default_model_is_substituted():
    builder = RequestBuilder(default_model="mistral")
    assert builder.build_chat_request(messages=[])["model"] == "mistral"
    assert builder.build_chat_request(messages=[], model="other")["model"] == "other"


def test_messages_are_normalized():
    plain = {"role": "assistant", "content": "plain"}
    request = RequestBuilder().build_chat_request(
        messages=[ChatMessage(role="user", content="model"), plain],
        model="m",
    )
    assert request["messages"] == [{"role": "user", "content": "model"}, plain]
    assert request["messages"][1] is plain


def test_tools_tool_choice_and_response_format_are_normalized():
    function = Function(name="lookup", description="Look it up", parameters={"type": "object"})
    request = RequestBuilder().build_chat_request(
        messages=[],
        model="m",
        tools=[
            {"type": "function", "function": function},
            {"type": "function", "function": {"name": "raw", "description": "d", "parameters": {}}},
            {"type": "retrieval"},
        ],
        tool_choice=ToolChoice.any,
        response_format=ResponseFormat(type="json_object"),
    )
    assert request["tools"] == [
        {"type": "function", "function": {"name": "lookup", "description": "Look it up",
                                          "parameters": {"type": "object"}}},
        {"type": "function", "function": {"name": "raw", "description": "d", "parameters": {}}},
    ]
    assert request["tool_choice"] == "any"
    assert request["response_format"] == {"type": "json_object"}


def test_plain_tool_choice_and_response_format_pass_through():
    request = RequestBuilder().build_chat_request(
        messages=[], model="m", tool_choice="none", response_format={"type": "text"}
    )
    assert request["tool_choice"] == "none"
    assert request["response_format"] == {"type": "text"}


def test_completion_request():
    request = RequestBuilder().build_completion_request(
        prompt="def add(a, b):",
        suffix="return a + b",
        model="mistral-small-latest",
        temperature=0.5,
        max_tokens=50,
        top_p=0.9,
        random_seed=42,
    )
    assert request == {
        "prompt": "def add(a, b):",
        "suffix": "return a + b",
        "model": "mistral-small-latest",
        "stream": False,
        "temperature": 0.5,
        "max_tokens": 50,
        "top_p": 0.9,
        "random_seed": 42,
    }


def test_completion_request_omits_suffix_and_keeps_stop():
    request = RequestBuilder().build_completion_request(
        prompt="p", model="m", stop=["#"], stream=True
    )
    assert request == {"prompt": "p", "model": "m", "stream": True, "stop": ["#"]}


def test_embeddings_request():
    request = RequestBuilder().build_embeddings_request(model="mistral-embed", input=["a", "b"])
    assert request == {"model": "mistral-embed", "input": ["a", "b"]}
