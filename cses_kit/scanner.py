"""Whitespace-separated token reading from a text stream."""

from __future__ import annotations

from typing import Callable, Iterator, TextIO, TypeVar

T = TypeVar("T")


class Scanner:
    """Reads whitespace-separated tokens from a stream, one line at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: Iterator[str] = iter(())

    def __iter__(self) -> "Scanner":
        return self

    def __next__(self) -> str:
        while True:
            token = next(self._tokens, None)
            if token is not None:
                return token
            line = self._stream.readline()
            if not line:
                raise StopIteration
            self._tokens = iter(line.split())

    def read(self, convert: Callable[[str], T] = str) -> T:  # type: ignore[assignment]
        """Return the next token passed through ``convert``.

        Raises EOFError when the stream has no more tokens.
        """
        try:
            token = next(self)
        except StopIteration:
            raise EOFError("input ended before the expected token") from None
        return convert(token)

    def read_many(self, count: int, convert: Callable[[str], T] = str) -> list[T]:  # type: ignore[assignment]
        """Return the next ``count`` tokens, each passed through ``convert``."""
        return [self.read(convert) for _ in range(count)]