"""Directory scanning with filtering and version-aware sorting.

Entries are read from a directory in the order the file system returns
them.  As with a classic ``readdir`` they include the ``.`` and ``..``
entries.  They can be filtered by a predicate and sorted by a
three-way comparison function such as :func:`alphasort` or
:func:`versionsort`.
"""

from __future__ import annotations

import errno
import locale
import os
import stat
from dataclasses import dataclass
from enum import IntEnum
from functools import cmp_to_key
from typing import Callable, Iterator, Optional


class EntryType(IntEnum):
    """File type of a directory entry; values match the ``st_mode`` type bits."""

    UNKNOWN = 0
    FIFO = stat.S_IFIFO
    CHR = stat.S_IFCHR
    DIR = stat.S_IFDIR
    REG = stat.S_IFREG

    @classmethod
    def from_mode(cls, mode: int) -> "EntryType":
        """Entry type for an ``st_mode`` value; unrecognised types are UNKNOWN."""
        try:
            return cls(stat.S_IFMT(mode))
        except ValueError:
            return cls.UNKNOWN

    @property
    def mode(self) -> int:
        """The ``st_mode`` type bits for this entry type."""
        return int(self)


@dataclass(frozen=True)
class DirEntry:
    """One entry read from a directory."""

    name: str
    type: EntryType

    @property
    def namlen(self) -> int:
        """Length of the name."""
        return len(self.name)


Compare = Callable[[DirEntry, DirEntry], int]
Predicate = Callable[[DirEntry], bool]


def _at(s: str, i: int) -> str:
    return s[i] if i < len(s) else ""


def _isdigit(c: str) -> bool:
    return len(c) == 1 and "0" <= c <= "9"


def _code(c: str) -> int:
    return ord(c) if c else 0


def strverscmp(a: str, b: str) -> int:
    """Compare two strings, treating runs of digits as version numbers.

    Returns a negative number, zero or a positive number as ``a`` sorts
    before, equal to or after ``b``.  Digit runs with leading zeros are
    treated as fractional parts, so that ``"002" < "01"``, while plain
    digit runs compare numerically, so that ``"999" < "1000"``.
    """
    i = 0
    while _at(a, i) == _at(b, i):
        if _at(a, i) == "":
            return 0
        i += 1

    j = i
    while j > 0 and _isdigit(a[j - 1]):
        j -= 1

    if _at(a, j) == "0" or _at(b, j) == "0":
        while _at(a, j) == "0" and _at(a, j) == _at(b, j):
            j += 1
        if _isdigit(_at(a, j)):
            if not _isdigit(_at(b, j)):
                return -1
        elif _isdigit(_at(b, j)):
            return 1
    elif _isdigit(_at(a, j)) and _isdigit(_at(b, j)):
        k1 = j
        while _isdigit(_at(a, k1)):
            k1 += 1
        k2 = j
        while _isdigit(_at(b, k2)):
            k2 += 1
        if k1 < k2:
            return -1
        if k1 > k2:
            return 1

    return _code(_at(a, i)) - _code(_at(b, i))


def versionsort(a: DirEntry, b: DirEntry) -> int:
    """Order two entries by :func:`strverscmp` of their names."""
    return strverscmp(a.name, b.name)


def alphasort(a: DirEntry, b: DirEntry) -> int:
    """Order two entries by their names in the current locale's collation."""
    return locale.strcoll(a.name, b.name)


def _entry_type(entry: os.DirEntry) -> EntryType:
    try:
        if entry.is_dir():
            return EntryType.DIR
        if entry.is_file():
            return EntryType.REG
        if stat.S_ISCHR(entry.stat().st_mode):
            return EntryType.CHR
    except OSError:
        pass
    return EntryType.REG


def _read_entries(dirname: str) -> Iterator[DirEntry]:
    yield DirEntry(".", EntryType.DIR)
    yield DirEntry("..", EntryType.DIR)
    with os.scandir(dirname) as it:
        for entry in it:
            yield DirEntry(entry.name, _entry_type(entry))


def scandir(
    dirname,
    predicate: Optional[Predicate] = None,
    compare: Optional[Compare] = None,
) -> list[DirEntry]:
    """Read the entries of ``dirname``, keep those ``predicate`` accepts,
    and sort them with the three-way comparison ``compare``.

    Without a predicate every entry is kept; without a comparison the
    entries stay in the order they were read.  Raises ``FileNotFoundError``
    for an empty or missing name and ``NotADirectoryError`` when the name
    is not a directory.
    """
    path = os.fspath(dirname)
    if not path:
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
    if not os.path.exists(path):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
    if not os.path.isdir(path):
        raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)

    entries = [e for e in _read_entries(path) if predicate is None or predicate(e)]
    if compare is not None:
        entries.sort(key=cmp_to_key(compare))
    return entries