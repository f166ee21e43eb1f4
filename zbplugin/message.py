"""Message segments in the OneBot chain format."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any, Iterable


def _escape(value: str, *, in_param: bool) -> str:
    value = value.replace("&", "&amp;").replace("[", "&#91;").replace("]", "&#93;")
    if in_param:
        value = value.replace(",", "&#44;")
    return value


@dataclass
class Segment:
    """One element of a message chain: a type and its string parameters."""

    type: str
    data: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.type == "text":
            return _escape(self.data.get("text", ""), in_param=False)
        params = "".join(
            f",{key}={_escape(value, in_param=True)}" for key, value in self.data.items()
        )
        return f"[CQ:{self.type}{params}]"


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _sprint(args: tuple[Any, ...]) -> str:
    """Join values, putting a space between two neighbours that are both non-strings."""
    parts: list[str] = []
    previous_is_str = True
    for position, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if position and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(_format_value(arg))
        previous_is_str = is_str
    return "".join(parts)


def text(*args: Any) -> Segment:
    """A plain text segment made from all arguments."""
    return Segment("text", {"text": _sprint(args)})


def image(file: str) -> Segment:
    """An image segment referring to a file, URL or base64 payload."""
    return Segment("image", {"file": file})


def image_bytes(data: bytes) -> Segment:
    """An image segment carrying the image bytes inline."""
    return image("base64://" + base64.b64encode(data).decode("ascii"))


def record(file: str) -> Segment:
    """A voice record segment."""
    return Segment("record", {"file": file})


def at(user_id: int) -> Segment:
    """A segment mentioning a user."""
    return Segment("at", {"qq": str(user_id)})


def reply(message_id: Any) -> Segment:
    """A segment quoting an earlier message."""
    return Segment("reply", {"id": str(message_id)})


def plain_text(segments: Iterable[Segment]) -> str:
    """The concatenated text of all text segments."""
    return "".join(seg.data.get("text", "") for seg in segments if seg.type == "text")