# -*- encoding: utf-8 -*-
# @File   : cursor.py
# @Time   : 2026/10/19 20:51:08
# @Author : Kariko Lin

"""Read position over a whole, already decoded cfg text.

Every token reader leaves the cursor *on* the character that stopped it
(a delimiter or whitespace), never past it.
"""

from ..abstract import SerializedComponents
from .consts import CfgMark


class Cursor(SerializedComponents[str]):
    def __init__(self, text: str, position: int = 0) -> None:
        self._text = text
        self._pos = position

    def reset_seek(self) -> None:
        self._pos = 0

    @property
    def seekable(self) -> bool:
        return self._pos < len(self._text)

    @property
    def position(self) -> int:
        return self._pos

    def next(self) -> None:
        if self.seekable:
            self._pos += 1

    @property
    def current(self) -> str:
        """Character under the cursor, or `''` at end of text."""
        return self._text[self._pos] if self.seekable else ''

    def __str__(self) -> str:
        return f'<Cursor {self._pos}/{len(self._text)}>'

    def _stops(self, ch: str, delimiter: str | None, spaced: bool) -> bool:
        return (delimiter is not None and ch in delimiter) or (
            spaced and ch.isspace())

    def skip_whitespace(self) -> None:
        while self.seekable and self.current.isspace():
            self._pos += 1

    def skip_insignificant(self) -> None:
        """Skip whitespace and `#` comments running up to end of line."""
        while self.seekable:
            ch = self.current
            if ch == CfgMark.COMMENT:
                eol = self._text.find('\n', self._pos)
                self._pos = len(self._text) if eol < 0 else eol
            elif ch.isspace():
                self._pos += 1
            else:
                break

    def measure_token(
        self, delimiter: str | None = None, *, spaced: bool | None = None
    ) -> int:
        """Count what `read_token()` would consume, without moving."""
        if spaced is None:
            spaced = delimiter is None
        end = self._pos
        while end < len(self._text) and not self._stops(
                self._text[end], delimiter, spaced):
            end += 1
        return end - self._pos

    def read_token(
        self, delimiter: str | None = None, limit: int | None = None, *,
        spaced: bool | None = None
    ) -> str:
        """Read until end of text or any char of `delimiter`.

        Whitespace stops the token as well when `spaced` is set,
        which is the default for a token without `delimiter`.
        Past `limit` characters the rest of the token is skipped,
        so the cursor always lands on the real end of the token.
        """
        length = self.measure_token(delimiter, spaced=spaced)
        start = self._pos
        self._pos += length
        if limit is not None and length > limit:
            length = limit
        return self._text[start:start + length]

    def open_quote(self) -> str | None:
        """Consume an opening `"` if any.

        Returns the delimiter the token must be read with:
        the quote itself, or `None` for a token ending at whitespace.
        """
        if self.current == CfgMark.QUOTE:
            self.next()
            return CfgMark.QUOTE
        return None

    def close_quote(self, delimiter: str | None) -> None:
        if delimiter == CfgMark.QUOTE and self.current == CfgMark.QUOTE:
            self.next()
