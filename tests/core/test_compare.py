import logging
from collections.abc import Callable, Iterable
from pathlib import Path

import hypothesis.strategies as st
import pytest
from hypothesis import given

from fcmp.core.compare import Comparison, LineEntry, build_symbol_table, compare_files, missing_from, read_lines
from fcmp.utils.datastructures import TernarySearchTrie

type WriteLines = Callable[[str, Iterable[str]], Path]


def table_of(*lines: str) -> TernarySearchTrie[int]:
    table = TernarySearchTrie[int]()
    for index, line in enumerate(lines):
        table.put(line, index)
    return table


def test_read_lines_strips_terminators(tmp_path: Path) -> None:
    path = tmp_path / "mixed.txt"
    path.write_bytes(b"unix\nwindows\r\nold mac\rlast")
    assert list(read_lines(path)) == ["unix", "windows", "old mac", "last"]


def test_read_lines_keeps_indices_on_bad_bytes(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes(b"ok\ncaf\xe9\nend\n")
    lines = list(read_lines(path))
    assert len(lines) == 3
    assert lines[1] == "caf\ufffd"
    assert list(read_lines(path, encoding="latin-1"))[1] == "café"


def test_build_symbol_table(write_lines: WriteLines) -> None:
    path = write_lines("a.txt", ["alpha", "", "beta", "Alpha"])
    table = build_symbol_table(path)
    assert table.size() == 3
    assert table.get("alpha") == 0
    assert table.get("beta") == 2
    assert table.get("Alpha") == 3
    assert "" not in table


def test_build_symbol_table_ignore_case(write_lines: WriteLines) -> None:
    path = write_lines("a.txt", ["alpha", "Alpha", "BETA"])
    table = build_symbol_table(path, ignore_case=True)
    assert table.get_all_keys() == ["ALPHA", "BETA"]
    assert table.get("alpha") is None


def test_duplicates_keep_last_line_number(write_lines: WriteLines, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="fcmp.core.compare")
    path = write_lines("dup.txt", ["same", "other", "same"])
    table = build_symbol_table(path)
    assert table.get("same") == 2
    assert table.size() == 2
    assert "1 duplicate in" in caplog.text
    assert "Read 3 lines" in caplog.text


def test_missing_from_sorted_by_line_number() -> None:
    source = table_of("zebra", "apple", "mango", "kiwi")
    other = table_of("mango")
    assert missing_from(source, other) == [LineEntry(0, "zebra"), LineEntry(1, "apple"), LineEntry(3, "kiwi")]
    assert missing_from(other, source) == []


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        build_symbol_table(tmp_path / "nope.txt")


def test_compare_files(write_lines: WriteLines) -> None:
    first = write_lines("first.txt", ["one", "two", "three", "four"])
    second = write_lines("second.txt", ["four", "five", "one", "TWO"])

    comparison = compare_files(first, second)
    assert comparison == Comparison(
        first=str(first),
        second=str(second),
        only_in_first=[LineEntry(1, "two"), LineEntry(2, "three")],
        only_in_second=[LineEntry(1, "five"), LineEntry(3, "TWO")],
    )
    assert not comparison.identical

    insensitive = compare_files(first, second, ignore_case=True)
    assert insensitive.only_in_first == [LineEntry(2, "THREE")]
    assert insensitive.only_in_second == [LineEntry(1, "FIVE")]


def test_compare_reordered_files_is_identical(write_lines: WriteLines) -> None:
    first = write_lines("first.txt", ["a", "b", "c"])
    second = write_lines("second.txt", ["c", "a", "b", "a"])
    assert compare_files(first, second).identical


@given(
    first=st.lists(st.text(alphabet="abc", max_size=3), max_size=15),
    second=st.lists(st.text(alphabet="abc", max_size=3), max_size=15),
)
def test_missing_from_matches_set_difference(first: list[str], second: list[str]) -> None:
    result = missing_from(table_of(*first), table_of(*second))
    expected = {line for line in first if line} - set(second)
    assert {entry.text for entry in result} == expected
    assert [entry.line_number for entry in result] == sorted(entry.line_number for entry in result)
    for entry in result:
        assert first[entry.line_number] == entry.text
