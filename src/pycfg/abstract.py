# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/19 20:42:10
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike
from typing import Generic, TypeVar

T = TypeVar('T')


class SerializedComponents(Generic[T], metaclass=ABCMeta):
    """Anything walked over one unit at a time.

    `current` is only meaningful while `seekable` holds.
    """

    @abstractmethod
    def reset_seek(self) -> None:
        raise NotImplementedError

    @property
    @abstractmethod
    def seekable(self) -> bool:
        raise NotImplementedError

    @property
    @abstractmethod
    def position(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def next(self) -> None:
        raise NotImplementedError

    @property
    @abstractmethod
    def current(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError


class FileHandler(Generic[T], metaclass=ABCMeta):
    """One file on disk, read into (or written from) a `T`."""

    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        self._fn = str(filename)
        # `None` lets `open()` pick the system default.
        self._codec = encoding

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return f'{self._fn} ({self._codec or "default"})'
