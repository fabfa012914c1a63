"""History entries and their rendering through user-supplied format strings."""

from __future__ import annotations

import enum
import sys
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import IO, Iterable, Sequence, Union

from histkit.duration import format_duration

HUMAN_FORMAT = "{time} · {duration}\t{command}"
REGULAR_FORMAT = "{time}\t{command}\t{duration}"

ESCAPE_HINT = (
    "If your formatting string contains curly braces (eg: {var}) "
    "you need to escape them this way: {{var}}."
)

# A parsed format is a sequence of (text, is_key) pairs.
Segment = tuple[str, bool]
ParsedFormat = list[Segment]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class History:
    """A single command that was run in a shell."""

    command: str
    timestamp: datetime = field(default_factory=_utc_now)
    duration: int = -1
    exit: int = -1
    cwd: str = ""
    session: str = ""
    hostname: str = ""
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


class ListMode(enum.Enum):
    """How a list of history entries is printed."""

    HUMAN = "human"
    CMD_ONLY = "cmd_only"
    REGULAR = "regular"

    @classmethod
    def from_flags(cls, human: bool, cmd_only: bool) -> "ListMode":
        """Pick a mode from command-line flags; ``human`` wins over ``cmd_only``."""
        if human:
            return cls.HUMAN
        if cmd_only:
            return cls.CMD_ONLY
        return cls.REGULAR


class FormatError(ValueError):
    """A format string could not be parsed or names an unknown variable."""


def _nanos_to_timedelta(nanos: int) -> timedelta:
    return timedelta(microseconds=max(nanos, 0) // 1000)


def format_field(history: History, key: str) -> str:
    """Render one named variable of ``history``."""
    if key == "command":
        return history.command.strip()
    if key == "directory":
        return history.cwd.strip()
    if key == "exit":
        return str(history.exit)
    if key == "duration":
        return format_duration(_nanos_to_timedelta(history.duration))
    if key == "time":
        return history.timestamp.strftime("%Y-%m-%d %H:%M:%S")
    if key == "relativetime":
        since = _utc_now() - history.timestamp
        return format_duration(max(since, timedelta(0)))
    if key == "host":
        return history.hostname.split(":", 1)[0]
    if key == "user":
        _, sep, user = history.hostname.partition(":")
        return user if sep else ""
    raise FormatError(f"unknown key: {key!r}")


def parse_format(fmt: str) -> ParsedFormat:
    """Split ``fmt`` into literal text and ``{key}`` references.

    ``{{`` and ``}}`` stand for literal braces.
    """
    segments: ParsedFormat = []
    literal: list[str] = []
    pos = 0
    n = len(fmt)
    while pos < n:
        ch = fmt[pos]
        if ch == "{":
            if fmt.startswith("{{", pos):
                literal.append("{")
                pos += 2
                continue
            close = fmt.find("}", pos + 1)
            if close == -1:
                raise FormatError(f"unclosed '{{' at position {pos}")
            key = fmt[pos + 1 : close]
            if "{" in key:
                raise FormatError(f"unexpected '{{' inside key at position {pos}")
            if literal:
                segments.append(("".join(literal), False))
                literal = []
            segments.append((key, True))
            pos = close + 1
        elif ch == "}":
            if fmt.startswith("}}", pos):
                literal.append("}")
                pos += 2
                continue
            raise FormatError(f"unmatched '}}' at position {pos}")
        else:
            literal.append(ch)
            pos += 1
    if literal:
        segments.append(("".join(literal), False))
    return segments


def format_history(history: History, fmt: Union[str, Sequence[Segment]]) -> str:
    """Render ``history`` with a format string or an already parsed format."""
    segments = parse_format(fmt) if isinstance(fmt, str) else fmt
    return "".join(
        format_field(history, text) if is_key else text for text, is_key in segments
    )


def _parsed_for(list_mode: ListMode, fmt: str | None) -> ParsedFormat:
    if list_mode is ListMode.CMD_ONLY:
        return [("command", True)]
    default = HUMAN_FORMAT if list_mode is ListMode.HUMAN else REGULAR_FORMAT
    text = (fmt if fmt is not None else default).replace("\\t", "\t")
    try:
        return parse_format(text)
    except FormatError as err:
        raise FormatError(f"{err}. {ESCAPE_HINT}") from err


def print_list(
    histories: Iterable[History],
    list_mode: ListMode,
    fmt: str | None = None,
    out: IO[str] | None = None,
) -> None:
    """Write ``histories`` newest-last (the input is walked in reverse).

    A closed pipe on the output ends printing quietly.
    """
    stream = sys.stdout if out is None else out
    parsed = _parsed_for(list_mode, fmt)
    try:
        for history in reversed(list(histories)):
            stream.write(format_history(history, parsed) + "\n")
    except BrokenPipeError:
        return
    try:
        stream.flush()
    except BrokenPipeError:
        pass