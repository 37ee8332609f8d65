"""Line-addressable text storage.

The list operations never hold on to a copy of the document between calls.
They read the current lines from a LineBuffer and write every edit back with
a single replace_lines() call.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from todo_manager.errors import InvalidRangeError
from todo_manager.logging import get_logger

logger = get_logger("document.buffer")

LF = "\n"
CRLF = "\r\n"


def split_lines(text: str) -> tuple[list[str], str, bool]:
    """Split text into lines on line feeds only.

    Other characters that ``str.splitlines()`` treats as boundaries (form
    feed, U+2028 and friends) stay inside their line. The line ending is
    taken from the first line: ``\\r\\n`` when it ends that way, ``\\n``
    otherwise. With a ``\\r\\n`` ending, one trailing ``\\r`` is removed
    from every line.

    Returns:
        ``(lines, newline, trailing_newline)``
    """
    if not text:
        return [], LF, False

    first_break = text.find(LF)
    newline = CRLF if first_break > 0 and text[first_break - 1] == "\r" else LF

    trailing_newline = text.endswith(LF)
    lines = text.split(LF)
    if trailing_newline:
        lines.pop()
    if newline == CRLF:
        lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    return lines, newline, trailing_newline


@runtime_checkable
class LineBuffer(Protocol):
    """Host text storage, addressed by 1-indexed line numbers."""

    def read_lines(self) -> list[str]:
        """Return a copy of all lines."""
        ...

    @property
    def line_count(self) -> int: ...

    def replace_lines(self, start: int, end: int, new_lines: Iterable[str]) -> None:
        """Replace lines ``start..end`` (inclusive) with ``new_lines``.

        ``end == start - 1`` inserts before ``start`` without removing anything.
        """
        ...


class InMemoryBuffer:
    """LineBuffer backed by a Python list."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines = list(lines)

    @classmethod
    def from_text(cls, text: str) -> InMemoryBuffer:
        lines, _, _ = split_lines(text)
        return cls(lines)

    def read_lines(self) -> list[str]:
        return list(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def replace_lines(self, start: int, end: int, new_lines: Iterable[str]) -> None:
        if start < 1 or end < start - 1 or end > len(self._lines):
            raise InvalidRangeError(start, end, len(self._lines))
        self._lines[start - 1 : end] = list(new_lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(lines={len(self._lines)})"


class FileBuffer(InMemoryBuffer):
    """In-memory buffer loaded from, and saved back to, a text file.

    The file's line ending (``\\n`` or ``\\r\\n``) and whether it ends with
    one are remembered and written back unchanged.
    """

    def __init__(
        self,
        path: Path,
        lines: Iterable[str] = (),
        trailing_newline: bool = True,
        newline: str = LF,
    ) -> None:
        super().__init__(lines)
        self.path = path
        self.trailing_newline = trailing_newline
        self.newline = newline

    @classmethod
    def open(cls, path: str | Path) -> FileBuffer:
        """Load a file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        with path.open(encoding="utf-8", newline="") as f:
            text = f.read()
        lines, newline, trailing_newline = split_lines(text)
        buffer = cls(path, lines, trailing_newline=trailing_newline, newline=newline)
        logger.debug(
            "file_loaded",
            path=str(path),
            line_count=buffer.line_count,
            crlf=newline == CRLF,
        )
        return buffer

    def save(self) -> None:
        """Write the lines back with the original line ending."""
        text = self.newline.join(self._lines)
        if self.trailing_newline and self._lines:
            text += self.newline
        with self.path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
        logger.debug("file_saved", path=str(self.path), line_count=self.line_count)
