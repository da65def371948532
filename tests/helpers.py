import io
import json
from typing import Any, Dict, List

import requests


def event_stream_response(body: str) -> requests.Response:
    """A real requests.Response over an in-memory event-stream body with no charset."""
    response = requests.Response()
    response.status_code = 200
    response.headers["Content-Type"] = "text/event-stream"
    response.raw = io.BytesIO(body.encode("utf-8"))
    return response


class DummyResponse:
    """Stands in for requests.Response."""

    def __init__(self, status: int, body: str = "", headers: Dict[str, str] = None):
        self.status_code = status
        self.text = body
        self.headers = headers or {}
        self.closed = False
        self.lines_read = 0

    def iter_lines(self, decode_unicode: bool = False):
        for line in self.text.splitlines():
            self.lines_read += 1
            yield line if decode_unicode else line.encode("utf-8")

    def close(self):
        self.closed = True


class FakeTransport:
    """Replays queued responses (or raises queued exceptions) in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method, url, headers=None, json=None, stream=False):
        self.calls.append({
            "method": method,
            "url": url,
            "headers": headers,
            "json": json,
            "stream": stream,
        })
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def close(self):
        self.closed = True


def list_models_payload() -> str:
    def card(model_id: str, perm_id: str) -> dict:
        return {
            "id": model_id,
            "object": "model",
            "created": 1703186988,
            "owned_by": "mistralai",
            "root": None,
            "parent": None,
            "permission": [{
                "id": perm_id,
                "object": "model_permission",
                "created": 1703186988,
                "allow_create_engine": False,
                "allow_sampling": True,
                "allow_logprobs": False,
                "allow_search_indices": False,
                "allow_view": True,
                "allow_fine_tuning": False,
                "organization": "*",
                "group": None,
                "is_blocking": False,
            }],
        }

    return json.dumps({
        "object": "list",
        "data": [
            card("mistral-medium", "modelperm-15bebaf316264adb84b891bf06a84933"),
            card("mistral-small-latest", "modelperm-d0dced5c703242fa862f4ca3f241c00e"),
            card("mistral-tiny", "modelperm-0e64e727c3a94f17b29f8895d4be2910"),
            card("mistral-embed", "modelperm-ebdff9046f524e628059447b5932e3ad"),
        ],
    })


def embedding_payload(batch_size: int = 1) -> str:
    return json.dumps({
        "id": "embd-98c8c60e3fbf4fc49658eddaf447357c",
        "object": "list",
        "data": [
            {
                "object": "embedding",
                "embedding": [-0.018585205078125, 0.027099609375, 0.02587890625],
                "index": 0,
            }
        ] * batch_size,
        "model": "mistral-embed",
        "usage": {"prompt_tokens": 90, "total_tokens": 90, "completion_tokens": 0},
    })


def chat_payload(content: str = "What is the best French cheese?") -> str:
    return json.dumps({
        "id": "chat-98c8c60e3fbf4fc49658eddaf447357c",
        "object": "chat.completion",
        "created": 1703165682,
        "choices": [
            {
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
                "index": 0,
            }
        ],
        "model": "mistral-small-latest",
        "usage": {"prompt_tokens": 90, "total_tokens": 90, "completion_tokens": 0},
    })


def completion_payload() -> str:
    return chat_payload(content=" a + b")


def chat_streaming_payload() -> str:
    lines = [
        "data: " + json.dumps({
            "id": "cmpl-8cd9019d21ba490aa6b9740f5d0a883e",
            "model": "mistral-small-latest",
            "choices": [{"index": 0, "delta": {"role": "assistant"}, "finish_reason": None}],
        }) + "\n\n"
    ]
    for i in range(10):
        lines.append("data: " + json.dumps({
            "id": "cmpl-8cd9019d21ba490aa6b9740f5d0a883e",
            "object": "chat.completion.chunk",
            "created": 1703168544,
            "model": "mistral-small-latest",
            "choices": [{"index": i, "delta": {"content": f"stream response {i}"}, "finish_reason": None}],
        }) + "\n\n")
    lines.append("data: [DONE]\n\n")
    return "".join(lines)
