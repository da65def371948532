"""
Request dispatch: sends one logical API call, retries retryable statuses with
exponential backoff, and turns the response into a payload or a Stream.
"""

import json
import logging
import time
from typing import Any, Callable, Dict, Iterator, Union

import requests

from .. import __version__
from ..config import ClientConfig
from .exceptions import APIConnectionError, APIError, APIStatusError, DecodeError, MistralError
from .sse import LineKind, decode_line
from .status import StatusClass, classify

log = logging.getLogger(__name__)

USER_AGENT = f"mistral-client-python/{__version__}"


# =============================================================================
# Stream Wrapper
# =============================================================================

class Stream:
    """Single-pass iterator over the payloads of a streamed response.

    The underlying response is released once the stream is exhausted, fails,
    is closed, or is garbage collected.
    """

    def __init__(self, response, cast_to: Callable[[Any], Any] = None):
        self._response = response
        self._cast_to = cast_to
        self._closed = False
        self._iterator = self._iter_payloads()

    def _iter_payloads(self) -> Iterator[Any]:
        try:
            for raw_line in self._response.iter_lines():
                line = decode_line(raw_line)
                if line.kind is LineKind.IGNORE:
                    continue
                if line.kind is LineKind.DONE:
                    return
                yield line.payload if self._cast_to is None else self._cast_to(line.payload)
        except requests.exceptions.RequestException as e:
            raise MistralError(f"Unexpected exception ({type(e).__name__}): {e}") from e
        finally:
            self._release()

    def cast(self, cast_to: Callable[[Any], Any]) -> "Stream":
        """Convert each payload with cast_to before yielding it."""
        self._cast_to = cast_to
        return self

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._iterator)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _release(self):
        if not self._closed:
            self._closed = True
            self._response.close()

    def close(self):
        """Stop iteration and release the connection."""
        self._iterator.close()
        self._release()

    @property
    def closed(self) -> bool:
        return self._closed

    def __del__(self):
        if getattr(self, "_response", None) is not None:
            self._release()


# =============================================================================
# Dispatcher
# =============================================================================

class Dispatcher:
    """Runs endpoint calls against a transport."""

    def __init__(
        self,
        config: ClientConfig,
        transport,
        sleep: Callable[[float], None] = time.sleep,
        logger: logging.Logger = None,
    ):
        self.config = config
        self._transport = transport
        self._sleep = sleep
        self._logger = logger or log

    def build_url(self, path: str) -> str:
        return f"{self.config.endpoint.rstrip('/')}/{path.lstrip('/')}"

    def build_headers(self, stream: bool = False) -> Dict[str, str]:
        return {
            "Accept": "text/event-stream" if stream else "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    def call(
        self,
        method: str,
        path: str,
        json: Any = None,
        stream: bool = False,
    ) -> Union[Dict[str, Any], Stream]:
        """Make one API call, returning the parsed body or a Stream of chunks."""
        response = self._send(method, path, json, stream)
        if stream:
            return Stream(response)
        try:
            return self._parse_response(response)
        finally:
            response.close()

    def _send(self, method: str, path: str, body: Any, stream: bool):
        url = self.build_url(path)
        headers = self.build_headers(stream)

        attempt = 1
        while True:
            self._logger.debug("Sending request: %s %s %s", method.upper(), url, body)
            response = self._issue(method, url, headers, body, stream)
            status = classify(response.status_code)
            if status is StatusClass.SUCCESS:
                return response

            try:
                if status is StatusClass.RETRYABLE:
                    if attempt > self.config.max_retries:
                        raise APIStatusError.from_response(response)
                    backoff = 2 ** attempt
                    self._logger.warning(
                        "Status %s from %s %s, retrying in %ss (attempt %s/%s)",
                        response.status_code, method.upper(), url, backoff,
                        attempt, self.config.max_retries,
                    )
                    self._sleep(backoff)
                    attempt += 1
                    continue
                if status is StatusClass.CLIENT_ERROR:
                    raise APIError.from_response(response)
                raise MistralError.from_response(response)
            finally:
                response.close()

    def _issue(self, method: str, url: str, headers: Dict[str, str], body: Any, stream: bool):
        try:
            return self._transport.request(method, url, headers=headers, json=body, stream=stream)
        except requests.exceptions.Timeout as e:
            raise MistralError(f"Unexpected exception ({type(e).__name__}): {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise APIConnectionError(str(e)) from e
        except requests.exceptions.RequestException as e:
            raise MistralError(f"Unexpected exception ({type(e).__name__}): {e}") from e

    def _parse_response(self, response) -> Dict[str, Any]:
        try:
            data = json.loads(response.text)
        except ValueError as e:
            raise DecodeError.from_response(
                response, message=f"Failed to decode json body: {response.text}"
            ) from e

        if not isinstance(data, dict) or "object" not in data:
            raise MistralError(f"Unexpected response: {data}")
        if data["object"] == "error":
            raise APIError.from_response(response, message=data.get("message"))
        return data
