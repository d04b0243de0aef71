"""Snippet records, id allocation and lookup helpers."""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Mapping

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$"
)


class SnippetNotFoundError(LookupError):
    """Raised when no snippet carries the requested id."""


def _format_timestamp(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_timestamp(text: str) -> datetime:
    match = _RFC3339.match(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    base, fraction, zone = match.groups()
    moment = datetime.strptime(base, "%Y-%m-%dT%H:%M:%S")
    if fraction:
        moment = moment.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = 1 if zone[0] == "+" else -1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    return moment.replace(tzinfo=tz)


def _display_time(moment: datetime) -> str:
    try:
        local = moment.astimezone()
    except (OverflowError, ValueError):
        local = moment
    text = local.strftime("%Y-%m-%d %H:%M:%S")
    if local.microsecond:
        text += "." + f"{local.microsecond:06d}".rstrip("0")
    zone_offset = local.strftime("%z") or "+0000"
    zone_name = local.strftime("%Z") or "UTC"
    return f"{text} {zone_offset} {zone_name}"


def _require(value: Any, kind: type, key: str) -> Any:
    if not isinstance(value, kind) or isinstance(value, bool):
        raise TypeError(f"field {key!r} has the wrong type")
    return value


@dataclass
class Snippet:
    """A named piece of content with a description, tags and an id."""

    name: str
    content: str
    description: str = ""
    tags: list[str] = field(default_factory=list)
    created_at: datetime = _ZERO_TIME
    id: int = 0

    def __str__(self) -> str:
        tag_text = ", ".join(self.tags) if self.tags else "No Tags"
        return (
            f"Name: {self.name}\n"
            f"Description: {self.description}\n"
            f"Tags: {tag_text}\n"
            f"Created: {_display_time(self.created_at)}\n"
            f"Content: {self.content}\n"
            f"ID: {self.id}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping used by the snippet file."""
        return {
            "Name": self.name,
            "Content": self.content,
            "Description": self.description,
            "Tags": list(self.tags),
            "CreatedAt": _format_timestamp(self.created_at),
            "ID": self.id,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Snippet":
        """Build a snippet from a mapping; missing fields take zero values."""
        if not isinstance(data, Mapping):
            raise TypeError("snippet entry must be an object")
        tags = data.get("Tags")
        if tags is None:
            tags = []
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise TypeError("field 'Tags' must be a list of strings")
        created = data.get("CreatedAt")
        created_at = _ZERO_TIME if created is None else _parse_timestamp(
            _require(created, str, "CreatedAt")
        )
        return cls(
            name=_require(data.get("Name", ""), str, "Name"),
            content=_require(data.get("Content", ""), str, "Content"),
            description=_require(data.get("Description", ""), str, "Description"),
            tags=list(tags),
            created_at=created_at,
            id=_require(data.get("ID", 0), int, "ID"),
        )


class _IdSequence:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last = 0

    def reset(self, value: int) -> None:
        with self._lock:
            self._last = value

    def next(self) -> int:
        with self._lock:
            self._last += 1
            return self._last


_ids = _IdSequence()


def set_next_id(snippets: Iterable[Snippet]) -> int:
    """Continue id allocation after the largest id present; return that id."""
    highest = max((s.id for s in snippets), default=0)
    highest = max(highest, 0)
    _ids.reset(highest)
    return highest


def new_snippet(
    name: str, content: str, tags: Iterable[str], description: str
) -> Snippet:
    """Create a snippet stamped with the current time and the next id."""
    return Snippet(
        name=name,
        content=content,
        description=description,
        tags=list(tags),
        created_at=datetime.now().astimezone(),
        id=_ids.next(),
    )


def format_snippet_list(snippets: Iterable[Snippet]) -> str:
    """Render snippets one after another between separator lines."""
    parts = ["==============\n"]
    for snippet in snippets:
        parts.append(f"{snippet}\n===============\n")
    return "".join(parts)


def parse_id(text: str) -> int:
    """Parse a 64-bit integer id, accepting 0x, 0o, 0b and leading-zero octal."""
    error = ValueError(f"cannot convert value, please pass a int: {text!r}")
    body = text
    negative = False
    if body.startswith(("+", "-")):
        negative = body[0] == "-"
        body = body[1:]
    if not body or not body[0].isdigit():
        raise error
    if len(body) > 1 and body[0] == "0" and body[1] not in "xXoObB":
        body = "0o" + body[1:]
    try:
        value = int(body, 0)
    except ValueError:
        raise error from None
    if negative:
        value = -value
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"cannot convert value, value out of range: {text!r}")
    return value


def get_snippet(snippet_id: str, snippets: Iterable[Snippet]) -> Snippet:
    """Return the snippet with the given id."""
    wanted = parse_id(snippet_id)
    for snippet in snippets:
        if snippet.id == wanted:
            return snippet
    raise SnippetNotFoundError("cannot find id")


def delete_snippet(snippet_id: str, snippets: Iterable[Snippet]) -> list[Snippet]:
    """Return a new list without the first snippet carrying the given id."""
    wanted = parse_id(snippet_id)
    remaining = list(snippets)
    for position, snippet in enumerate(remaining):
        if snippet.id == wanted:
            del remaining[position]
            return remaining
    raise SnippetNotFoundError("snippet not found: " + snippet_id)