"""An editable line of text with a cursor and word-wise movement."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class WordJumpMode(enum.Enum):
    """How word boundaries are found when jumping by word."""

    EMACS = "emacs"
    SUBL = "subl"


@dataclass(frozen=True)
class WordJumper:
    """Finds the positions of neighbouring words in a string."""

    word_chars: str
    mode: WordJumpMode

    def _is_word_boundary(self, c: str, next_c: str) -> bool:
        return (
            c.isspace() != next_c.isspace()
            or (c in self.word_chars) != (next_c in self.word_chars)
        )

    def _emacs_next(self, source: str, index: int) -> int:
        n = len(source)
        upper = max(n - 1, 0)
        start = next(
            (i for i in range(index + 1, upper) if source[i] in self.word_chars), n
        )
        return next(
            (i for i in range(start + 1, upper) if source[i] not in self.word_chars), n
        )

    def _emacs_prev(self, source: str, index: int) -> int:
        start = next(
            (i for i in reversed(range(1, index)) if source[i] in self.word_chars), 0
        )
        return next(
            (i + 1 for i in reversed(range(1, start)) if source[i] not in self.word_chars),
            0,
        )

    def _subl_next(self, source: str, index: int) -> int:
        n = len(source)
        boundary = next(
            (
                i
                for i in range(index, max(n - 1, 0))
                if self._is_word_boundary(source[i], source[i + 1])
            ),
            None,
        )
        if boundary is None:
            return n
        return next((i for i in range(boundary + 1, n) if not source[i].isspace()), n)

    def _subl_prev(self, source: str, index: int) -> int:
        start = next(
            (i for i in reversed(range(1, index)) if not source[i].isspace()), None
        )
        if start is None:
            return 0
        return next(
            (
                i
                for i in reversed(range(1, start))
                if self._is_word_boundary(source[i - 1], source[i])
            ),
            0,
        )

    def next_word_pos(self, source: str, index: int) -> int:
        """Position of the next word after ``index``."""
        if self.mode is WordJumpMode.EMACS:
            return self._emacs_next(source, index)
        return self._subl_next(source, index)

    def prev_word_pos(self, source: str, index: int) -> int:
        """Position of the previous word before ``index``."""
        if self.mode is WordJumpMode.EMACS:
            return self._emacs_prev(source, index)
        return self._subl_prev(source, index)


@dataclass
class Cursor:
    """Text plus a character index marking the insertion point."""

    text: str = ""
    index: int = 0

    def __str__(self) -> str:
        return self.text

    def substring(self) -> str:
        """The text before the cursor."""
        return self.text[: self.index]

    def char(self) -> str | None:
        """The character under the cursor, or None at the end."""
        return self.text[self.index] if self.index < len(self.text) else None

    def right(self) -> None:
        if self.index < len(self.text):
            self.index += 1

    def left(self) -> bool:
        """Move one character left; return whether the cursor moved."""
        if self.index > 0:
            self.index -= 1
            return True
        return False

    def next_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        self.index = jumper.next_word_pos(self.text, self.index)

    def prev_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        self.index = jumper.prev_word_pos(self.text, self.index)

    def insert(self, c: str) -> None:
        """Insert ``c`` at the cursor and move past it."""
        self.text = self.text[: self.index] + c + self.text[self.index :]
        self.index += len(c)

    def remove(self) -> str | None:
        """Delete and return the character under the cursor."""
        removed = self.char()
        if removed is not None:
            self.text = self.text[: self.index] + self.text[self.index + 1 :]
        return removed

    def remove_next_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        end = jumper.next_word_pos(self.text, self.index)
        self.text = self.text[: self.index] + self.text[end:]

    def remove_prev_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        start = jumper.prev_word_pos(self.text, self.index)
        self.text = self.text[:start] + self.text[self.index :]
        self.index = start

    def back(self) -> str | None:
        """Delete and return the character before the cursor."""
        return self.remove() if self.left() else None

    def clear(self) -> None:
        self.text = ""
        self.index = 0

    def end(self) -> None:
        self.index = len(self.text)

    def start(self) -> None:
        self.index = 0