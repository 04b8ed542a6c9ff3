# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 21:03:44
# @Author : Kariko Lin

"""
Basically a flat cfg structure: ordered sections of ordered entries.

Nothing is merged. A second `[name]` header is a second section,
and a repeated key is a second entry within the same section.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterator, NamedTuple


@dataclass(kw_only=True)
class CfgEntry:
    name: str
    value: str


class CfgTriple(NamedTuple):
    """Flattened `(section, key, value)`, mainly for comparisons."""
    section: str | None
    key: str
    value: str


class CfgSection(Sequence[CfgEntry]):
    """Entries of one section, in declaration order.

    `name` is `None` only for the root section,
    which holds the pairs written before any header.
    """
    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self.__entries: list[CfgEntry] = []

    def __getitem__(self, index):
        return self.__entries[index]

    def __len__(self) -> int:
        return len(self.__entries)

    def __iter__(self) -> Iterator[CfgEntry]:
        return iter(self.__entries)

    def __contains__(self, key: object) -> bool:
        return any(i.name == key for i in self.__entries)

    def __str__(self) -> str:
        return '<root>' if self.name is None else f'[{self.name}]'

    def __repr__(self) -> str:
        return '%s { .cnt = %d }' % (self, len(self.__entries))

    def append_entry(self, name: str, value: str) -> CfgEntry:
        entry = CfgEntry(name=name, value=value)
        self.__entries.append(entry)
        return entry

    def get(self, key: str, default: str | None = None) -> str | None:
        """Value of the *first* entry named `key`."""
        for i in self.__entries:
            if i.name == key:
                return i.value
        return default

    def getall(self, key: str) -> list[str]:
        return [i.value for i in self.__entries if i.name == key]

    def keys(self) -> list[str]:
        return [i.name for i in self.__entries]

    def items(self) -> list[tuple[str, str]]:
        return [(i.name, i.value) for i in self.__entries]

    def clear(self) -> None:
        self.__entries.clear()


class CfgDocument(Sequence[CfgSection]):
    """A whole cfg file, like:

        ```ini
        key = val  # belongs to the root section, see `self.root`.

        [section]
        key233 = "val 666"
        [section]  # yet another section, not merged into the above.
        key233 = val114514
        ```

    There is always a root section at index 0, even when it is empty.
    """
    def __init__(self) -> None:
        self.__sections: list[CfgSection] = [CfgSection()]

    def __getitem__(self, index):
        return self.__sections[index]

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[CfgSection]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return f'<CfgDocument {self.__sections!r}>'

    @property
    def root(self) -> CfgSection:
        return self.__sections[0]

    @property
    def sections(self) -> list[CfgSection]:
        """A shallow copy: appending to it won't touch the document."""
        return list(self.__sections)

    def append_section(self, name: str) -> CfgSection:
        """Add a section at the end; the parser fills it from now on."""
        section = CfgSection(name)
        self.__sections.append(section)
        return section

    def find_sections(self, name: str | None) -> list[CfgSection]:
        return [i for i in self.__sections if i.name == name]

    def get(
        self, section: str | None, key: str, default: str | None = None
    ) -> str | None:
        """Look `key` up in the first section named `section`
        (`None` for the root)."""
        for i in self.__sections:
            if i.name == section:
                return i.get(key, default)
        return default

    def triples(self) -> list[CfgTriple]:
        return [
            CfgTriple(s.name, e.name, e.value)
            for s in self.__sections for e in s
        ]

    def clear(self) -> None:
        """Drop everything. Safe to call more than once."""
        for i in self.__sections:
            i.clear()
        self.__sections.clear()


def new_document() -> CfgDocument:
    return CfgDocument()
