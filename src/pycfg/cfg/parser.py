# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 21:26:15
# @Author : Kariko Lin

"""Note: the whole text is parsed in one go, there is no streaming.

What gets accepted:

    ```ini
    # comment to end of line
    [sectionName]
    key = value
    quotedKey = "value with spaces"
    otherKey = "value with # not a comment"
    ```

Unquoted values end at whitespace, quoted ones at the next `"`
(there is no way to escape a quote). A key not followed by `=`
aborts the whole parse, there is no resync to the next line.
"""

import json
import logging
import warnings
from io import StringIO, TextIOBase
from os import PathLike
from typing import Any, Callable, cast

import chardet
import yaml

from ..abstract import FileHandler
from .consts import MAX_NAME_LEN, CfgMark
from .cursor import Cursor
from .model import CfgDocument, CfgSection

logger = logging.getLogger(__name__)


class CfgError(Exception):
    pass


class MalformedAssignment(CfgError):
    """A key which is not followed by `=`, or a bare `=` with no key."""
    def __init__(
        self, char: str | None, position: int, message: str | None = None
    ) -> None:
        self.char = char
        self.position = position
        if message is None:
            message = (
                "expected '=' got end of input" if char is None
                else f"expected '=' got '{char}'")
        self.message = message
        super().__init__(self.message)


class InvalidCfgRecord(CfgError):
    """To record errors when loading JSON or YAML renditions."""
    pass


def _read_name(
    cur: Cursor, delimiter: str | None, limit: int | None, *,
    spaced: bool | None = None
) -> str:
    length = cur.measure_token(delimiter, spaced=spaced)
    name = cur.read_token(delimiter, limit, spaced=spaced)
    if len(name) < length:
        logger.debug(
            'name at %d truncated from %d to %d chars: %r',
            cur.position - length, length, len(name), name)
    return name


def _parse_section(cur: Cursor, doc: CfgDocument, limit: int | None):
    cur.next()  # [
    # a `#` right after `[` is part of the name, not a comment.
    cur.skip_whitespace()
    name = _read_name(cur, CfgMark.SECTION_END, limit)
    if cur.current == CfgMark.SECTION_END:
        cur.next()
    return doc.append_section(name)


def _parse_assignment(
    cur: Cursor, section: CfgSection, limit: int | None
) -> None:
    delim = cur.open_quote()
    if delim is None:
        if cur.current == CfgMark.ASSIGN:
            raise MalformedAssignment(
                cur.current, cur.position, "expected a key before '='")
        # `key=value` is fine, so `=` ends a bare key as well.
        key = _read_name(cur, CfgMark.ASSIGN, limit, spaced=True)
    else:
        key = _read_name(cur, delim, limit)
    cur.close_quote(delim)

    cur.skip_insignificant()
    if cur.current != CfgMark.ASSIGN:
        raise MalformedAssignment(cur.current or None, cur.position)
    cur.next()
    cur.skip_insignificant()

    delim = cur.open_quote()
    length = cur.measure_token(delim)
    value = cur.read_token(delim, length)
    cur.close_quote(delim)
    section.append_entry(key, value)


def _check_name_len(limit: int | None) -> None:
    if limit is not None and limit < 0:
        raise ValueError(f'max_name_len must not be negative, got {limit}')


def parse(
    text: str,
    on_error: Callable[[str], Any] | None = None, *,
    max_name_len: int | None = MAX_NAME_LEN
) -> CfgDocument | None:
    """Parse a whole cfg text.

    Section and key names longer than `max_name_len` get truncated
    silently (`None` to keep them whole); values are never truncated.

    Raises `MalformedAssignment` on a key without `=`,
    unless `on_error` is given: it's then called once with the message
    and `None` is returned. Never returns a half built document.
    """
    _check_name_len(max_name_len)
    doc = CfgDocument()
    current = doc.root
    cur = Cursor(text)
    try:
        while True:
            cur.skip_insignificant()
            if not cur.seekable:
                return doc
            if cur.current == CfgMark.SECTION_BEGIN:
                current = _parse_section(cur, doc, max_name_len)
            else:
                _parse_assignment(cur, current, max_name_len)
    except MalformedAssignment as e:
        doc.clear()
        if on_error is None:
            raise
        on_error(e.message)
        return None


def _render_key(name: str) -> str:
    if name and name[0] not in '"[' and not any(
            c.isspace() or c in '=#' for c in name):
        return name
    return f'"{name}"'


def _render_value(value: str) -> str:
    # a bare value runs up to whitespace, `"` included.
    if CfgMark.QUOTE in value and not value.startswith(CfgMark.QUOTE) \
            and not any(c.isspace() for c in value):
        return value
    return f'"{value}"'


def dump(doc: CfgDocument) -> str:
    """Human readable rendition, one line per header or entry.

    Keys are quoted only when a bare key would not read back,
    values whenever they hold no `"`. The output parses back into the
    same triples, except for what no quoting can express (a `"` in a key
    or value which also needs quotes, a section name holding `]`).
    """
    buf = StringIO()
    for section in doc:
        if section.name is not None:
            buf.write(f'[{section.name}]\n')
        for i in section:
            buf.write(f'{_render_key(i.name)} = {_render_value(i.value)}\n')
    return buf.getvalue()


class CfgParser(FileHandler[CfgDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None, *,
        max_name_len: int | None = MAX_NAME_LEN
    ) -> None:
        _check_name_len(max_name_len)
        super().__init__(filename, encoding)
        self._limit = max_name_len

    def readstream(self, buf: TextIOBase) -> CfgDocument:
        """Parse an already decoded text stream.

        Unless there's a special need, just call `self.read()`.
        """
        # without `on_error` it raises rather than returning `None`.
        return cast(CfgDocument, parse(buf.read(), max_name_len=self._limit))

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8', 'confidence': 0.0}
        logger.info('%s: decoding as %s', self._fn, codec['encoding'])

        # fallbacks
        try:
            text = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            warnings.warn(
                f'{self._fn} is not {codec["encoding"]}, trying gbk.')
            text = raw.decode('gbk')
        return StringIO(text)

    def read(self) -> CfgDocument:
        """Read the file given to this `CfgParser`.

        Raises `MalformedAssignment` on bad content, `OSError` as `open()`.
        """
        try:
            # when encoding is None, `open()` falls back to system default,
            # and when that's wrong, let `chardet` guess.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file())

    def write(self, instance: CfgDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(dump(instance))

    def __str__(self) -> str:
        return 'cfg file: ' + super().__str__()


def _to_payload(doc: CfgDocument) -> dict[str, Any]:
    return {
        'sections': [
            {'name': s.name, 'entries': [[k, v] for k, v in s.items()]}
            for s in doc
        ]
    }


def _from_payload(payload: Any) -> CfgDocument:
    if not isinstance(payload, dict) or not isinstance(
            payload.get('sections'), list):
        raise InvalidCfgRecord('missing "sections" list.')
    doc = CfgDocument()
    for idx, s in enumerate(payload['sections']):
        if not isinstance(s, dict):
            raise InvalidCfgRecord(f'section #{idx} is not a mapping.')
        name = s.get('name')
        if idx == 0 and name is None:
            section = doc.root
        elif name is None:
            raise InvalidCfgRecord(f'section #{idx} has no name.')
        else:
            section = doc.append_section(str(name))
        for pair in s.get('entries') or []:
            if not isinstance(pair, list) or len(pair) != 2:
                raise InvalidCfgRecord(
                    f'bad entry in {section}: {pair!r}')
            # yaml may give us ints or bools for bare scalars.
            section.append_entry(str(pair[0]), str(pair[1]))
    return doc


class CfgJsonParser(FileHandler[CfgDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    def read(self) -> CfgDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            try:
                payload = json.load(fp)
            except json.JSONDecodeError as e:
                raise InvalidCfgRecord(f'{self._fn}: {e}') from e
        return _from_payload(payload)

    def write(self, instance: CfgDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(
                _to_payload(instance), fp, ensure_ascii=False, indent=indent)


class CfgYamlParser(FileHandler[CfgDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    def read(self) -> CfgDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            try:
                payload = yaml.safe_load(fp)
            except yaml.YAMLError as e:
                raise InvalidCfgRecord(f'{self._fn}: {e}') from e
        return _from_payload(payload)

    def write(self, instance: CfgDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                _to_payload(instance), fp,
                allow_unicode=True, sort_keys=False)


def to_json(doc: CfgDocument, indent: int = 2) -> str:
    return json.dumps(_to_payload(doc), ensure_ascii=False, indent=indent)


def to_yaml(doc: CfgDocument) -> str:
    return yaml.safe_dump(
        _to_payload(doc), allow_unicode=True, sort_keys=False)
