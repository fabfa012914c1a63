"""Command-usage statistics over shell history."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

COMMON_COMMAND_PREFIX = ("sudo",)
COMMON_SUBCOMMAND_PREFIX = ("cargo", "go", "git", "npm", "yarn", "pnpm")

_ASCII_WHITESPACE = " \t\n\x0c\r"

_RED = "\x1b[38;5;9m"
_YELLOW = "\x1b[38;5;11m"
_GREEN = "\x1b[38;5;10m"
_GREY = "\x1b[38;5;7m"
_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"
_BAR = "▮"


@dataclass
class Stats:
    """Most used commands plus total and distinct counts."""

    top: list[tuple[str, int]] = field(default_factory=list)
    total: int = 0
    unique: int = 0


def _first_non_whitespace(s: str) -> int | None:
    return next((i for i, c in enumerate(s) if c not in _ASCII_WHITESPACE), None)


def _first_whitespace(s: str) -> int:
    return next((i for i, c in enumerate(s) if c in _ASCII_WHITESPACE), len(s))


def interesting_command(command: str) -> str:
    """The part of ``command`` worth counting: the program, or program plus subcommand."""
    while True:
        i = _first_whitespace(command)
        prefix = command[:i]
        if prefix not in COMMON_COMMAND_PREFIX:
            break
        command = command[i:].lstrip()
        if not command:
            return prefix

    j = _first_non_whitespace(command[i:])
    if j is None or prefix not in COMMON_SUBCOMMAND_PREFIX:
        return prefix
    start = i + j
    end = start + _first_whitespace(command[start:])
    return command[:end]


def compute_stats(commands: Iterable[str], count: int) -> Stats:
    """Count commands and keep the ``count`` most used ones.

    Raises ValueError when nothing is left to show.
    """
    total = 0
    unique: set[str] = set()
    prefixes: Counter[str] = Counter()
    for raw in commands:
        total += 1
        command = raw.strip()
        unique.add(command)
        prefixes[interesting_command(command)] += 1

    top = prefixes.most_common(count) if count > 0 else []
    if not top:
        raise ValueError("No commands found")
    return Stats(top=top, total=total, unique=len(unique))


def _bar(in_ten: int) -> str:
    parts = [_RED]
    for i in range(in_ten):
        if i == 2:
            parts.append(_YELLOW)
        if i == 5:
            parts.append(_GREEN)
        parts.append(_BAR)
    parts.append(" " * (10 - in_ten))
    return "".join(parts)


def render_stats(stats: Stats) -> str:
    """Render ``stats`` as coloured terminal text, one bar per top command."""
    if not stats.top:
        raise ValueError("No commands found")
    highest = max(n for _, n in stats.top)
    width = len(str(highest))
    lines = [
        f"[{_bar(10 * n // highest)}{_RESET}] {_GREY}{n:>{width}}{_RESET} "
        f"{_BOLD}{command}{_RESET}"
        for command, n in stats.top
    ]
    lines.append(f"Total commands:   {stats.total}")
    lines.append(f"Unique commands:  {stats.unique}")
    return "\n".join(lines) + "\n"