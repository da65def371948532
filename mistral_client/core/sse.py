"""Decoding of server-sent-event lines into JSON payloads."""

import json
from enum import Enum
from typing import Any, NamedTuple, Union

from .exceptions import DecodeError

DATA_PREFIX = "data: "
DONE_MARKER = "[DONE]"


class LineKind(Enum):
    IGNORE = "ignore"
    DONE = "done"
    PAYLOAD = "payload"


class StreamLine(NamedTuple):
    kind: LineKind
    payload: Any = None


IGNORE = StreamLine(LineKind.IGNORE)
DONE = StreamLine(LineKind.DONE)


def decode_line(raw_line: Union[str, bytes]) -> StreamLine:
    """Decode one raw line of an event stream."""
    if isinstance(raw_line, bytes):
        try:
            raw_line = raw_line.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Stream line is not valid UTF-8: {raw_line!r}", line=raw_line) from e

    if not raw_line.startswith(DATA_PREFIX):
        return IGNORE

    data = raw_line[len(DATA_PREFIX):].strip()
    if data == DONE_MARKER:
        return DONE

    try:
        return StreamLine(LineKind.PAYLOAD, json.loads(data))
    except json.JSONDecodeError as e:
        raise DecodeError(f"Failed to decode stream line {raw_line!r}: {e}", line=raw_line) from e
