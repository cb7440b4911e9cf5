"""Line-oriented access to a structure file stream."""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, Iterator

from ..exceptions import (
    InvalidEncodingError,
    LineParseError,
    MoleculeError,
    ParseError,
    UnexpectedEndOfInputError,
)


class LineReader:
    """Forward-only reader of text lines with physical line numbering.

    Accepts binary streams (decoded as UTF-8) or text streams. Line
    terminators (LF or CRLF) are stripped from every line.

    Example:
        >>> import io
        >>> reader = LineReader(io.BytesIO(b"first\\r\\nsecond\\n"))
        >>> reader.next_line()
        'first'
        >>> reader.line_number
        1
    """

    __slots__ = ("_stream", "_line_number")

    def __init__(self, stream: IO[bytes] | IO[str]) -> None:
        self._stream = stream
        self._line_number = 0

    @property
    def line_number(self) -> int:
        """1-based number of the last line returned (0 before the first)."""
        return self._line_number

    def read_line_optional(self) -> str | None:
        """Read the next line, or return None at end of stream.

        Raises:
            LineParseError: If a line of a binary stream is not valid UTF-8.
        """
        raw = self._stream.readline()
        if not raw:
            return None
        self._line_number += 1
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise LineParseError(self._line_number, InvalidEncodingError(raw)) from exc
        if raw.endswith("\n"):
            raw = raw[:-1]
            if raw.endswith("\r"):
                raw = raw[:-1]
        return raw

    def next_line(self) -> str:
        """Read the next line.

        Raises:
            UnexpectedEndOfInputError: If the stream is exhausted.
        """
        line = self.read_line_optional()
        if line is None:
            raise UnexpectedEndOfInputError(
                f"Unexpected end of file after line {self._line_number}"
            )
        return line

    def read_lines(self, count: int) -> Iterator[str]:
        """Lazily read exactly `count` lines.

        The returned generator is a one-shot cursor: each pull advances this
        reader and raises UnexpectedEndOfInputError if the stream ends early.
        """
        for _ in range(count):
            yield self.next_line()


@contextmanager
def line_context(line_number: int) -> Iterator[None]:
    """Attribute decode errors raised in the block to a physical line.

    Raises:
        LineParseError: Wrapping any ParseError or MoleculeError.
    """
    try:
        yield
    except (ParseError, MoleculeError) as exc:
        raise LineParseError(line_number, exc) from exc
