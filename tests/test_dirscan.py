import stat
from functools import cmp_to_key

import pytest

from ebtplay.dirscan import (
    DirEntry,
    EntryType,
    alphasort,
    scandir,
    strverscmp,
    versionsort,
)


def _sign(x):
    return (x > 0) - (x < 0)


def test_strverscmp_equal_strings():
    assert strverscmp("song1.ebt", "song1.ebt") == 0
    assert strverscmp("", "") == 0


def test_strverscmp_numeric_runs():
    assert strverscmp("999", "1000") < 0
    assert strverscmp("1000", "999") > 0
    assert strverscmp("item#99", "item#100") < 0


def test_strverscmp_leading_zeros():
    assert strverscmp("002", "01") < 0
    assert strverscmp("01", "002") > 0


def test_strverscmp_plain_text():
    assert strverscmp("abc", "abd") < 0
    assert strverscmp("abd", "abc") > 0
    assert strverscmp("ab", "abc") < 0


def test_strverscmp_documented_order():
    expected = ["000", "00", "01", "010", "09", "0", "1", "9", "10"]
    for smaller, larger in zip(expected, expected[1:]):
        assert strverscmp(smaller, larger) < 0
        assert strverscmp(larger, smaller) > 0
    shuffled = ["10", "0", "09", "1", "000", "9", "010", "00", "01"]
    assert sorted(shuffled, key=cmp_to_key(strverscmp)) == expected


@pytest.mark.parametrize(
    "a,b",
    [("a2", "a10"), ("x001", "x01"), ("v1.2", "v1.10"), ("abc", "abd"), ("0", "1")],
)
def test_strverscmp_antisymmetric(a, b):
    assert _sign(strverscmp(a, b)) == -_sign(strverscmp(b, a))


def test_versionsort_uses_names():
    a = DirEntry("track2", EntryType.REG)
    b = DirEntry("track10", EntryType.REG)
    assert versionsort(a, b) < 0
    assert versionsort(b, a) > 0
    assert versionsort(a, a) == 0


def test_alphasort_orders_names():
    a = DirEntry("apple", EntryType.REG)
    b = DirEntry("banana", EntryType.REG)
    assert alphasort(a, b) < 0
    assert alphasort(b, a) > 0
    assert alphasort(a, a) == 0


def test_entry_type_values_match_mode_bits():
    assert EntryType.DIR == stat.S_IFDIR
    assert EntryType.REG == stat.S_IFREG
    assert EntryType.from_mode(stat.S_IFDIR | 0o755) is EntryType.DIR
    assert EntryType.from_mode(stat.S_IFREG | 0o644) is EntryType.REG


def test_direntry_namlen():
    entry = DirEntry("song.ebt", EntryType.REG)
    assert entry.namlen == len("song.ebt")


def test_scandir_lists_files_and_dirs(tmp_path):
    (tmp_path / "a.ebt").write_bytes(b"x")
    (tmp_path / "b.cfg").write_bytes(b"y")
    (tmp_path / "sub").mkdir()
    entries = scandir(tmp_path)
    by_name = {e.name: e.type for e in entries}
    assert by_name["a.ebt"] is EntryType.REG
    assert by_name["b.cfg"] is EntryType.REG
    assert by_name["sub"] is EntryType.DIR
    assert by_name["."] is EntryType.DIR
    assert by_name[".."] is EntryType.DIR
    assert len(entries) == 5


def test_scandir_predicate_filters(tmp_path):
    for name in ("one.ebt", "two.ebt", "three.txt"):
        (tmp_path / name).write_bytes(b"")
    (tmp_path / "dir.ebt").mkdir()
    entries = scandir(
        tmp_path,
        lambda e: e.type is EntryType.REG and e.name.endswith(".ebt"),
    )
    assert sorted(e.name for e in entries) == ["one.ebt", "two.ebt"]


def test_scandir_versionsort(tmp_path):
    names = ["song10", "song2", "song1", "song002"]
    for name in names:
        (tmp_path / name).write_bytes(b"")
    entries = scandir(tmp_path, lambda e: e.name.startswith("song"), versionsort)
    result = [e.name for e in entries]
    assert result == sorted(names, key=cmp_to_key(strverscmp))
    assert result.index("song2") < result.index("song10")


def test_scandir_alphasort_is_sorted(tmp_path):
    for name in ("c", "a", "b"):
        (tmp_path / name).write_bytes(b"")
    entries = scandir(tmp_path, lambda e: e.type is EntryType.REG, alphasort)
    assert [e.name for e in entries] == ["a", "b", "c"]


def test_scandir_empty_name_raises():
    with pytest.raises(FileNotFoundError):
        scandir("")


def test_scandir_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        scandir(tmp_path / "missing")


def test_scandir_on_file_raises(tmp_path):
    target = tmp_path / "plain.ebt"
    target.write_bytes(b"")
    with pytest.raises(NotADirectoryError):
        scandir(target)