from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from fcmp.utils.datastructures import TernarySearchTrie
from fcmp.utils.format import plural
from fcmp.utils.wrappers import time_it

if TYPE_CHECKING:
    from collections.abc import Iterator
    from os import PathLike

log = logging.getLogger(__name__)


type StrPath = str | PathLike[str]


@dataclass(slots=True, frozen=True)
class LineEntry:
    line_number: int
    text: str


@dataclass(slots=True, frozen=True)
class Comparison:
    first: str
    second: str
    only_in_first: list[LineEntry]
    only_in_second: list[LineEntry]

    @property
    def identical(self) -> bool:
        return not self.only_in_first and not self.only_in_second


def read_lines(path: StrPath, *, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of *path* without their line terminators.

    Undecodable bytes are replaced so that every physical line keeps its index.
    """
    with Path(path).open(encoding=encoding, errors="replace", newline="") as fp:
        for line in fp:
            yield line.removesuffix("\n").removesuffix("\r")


def build_symbol_table(
    path: StrPath, *, ignore_case: bool = False, encoding: str = "utf-8"
) -> TernarySearchTrie[int]:
    """Map every non-blank line of *path* to its zero-based line number.

    A line that occurs more than once keeps the number of its last occurrence.
    """
    table = TernarySearchTrie[int]()
    read = duplicates = 0

    for index, line in enumerate(read_lines(path, encoding=encoding)):
        read += 1
        key = line.upper() if ignore_case else line
        if not key:
            continue
        if not table.put(key, index):
            duplicates += 1

    log.debug("Read %s from %s (%s)", f"{plural(read):line}", path, f"{plural(len(table)):unique line}")
    if duplicates:
        log.debug("%s in %s overwrote an earlier line number", f"{plural(duplicates):duplicate}", path)
    return table


def missing_from(source: TernarySearchTrie[int], other: TernarySearchTrie[int]) -> list[LineEntry]:
    """Return the lines of *source* that *other* lacks, ordered by line number."""
    entries: list[LineEntry] = []
    for key in source.get_all_keys():
        if other.contains(key):
            continue
        line_number = source.get(key)
        if line_number is not None:
            entries.append(LineEntry(line_number, key))

    entries.sort(key=lambda entry: entry.line_number)
    return entries


def compare_files(
    first: StrPath, second: StrPath, *, ignore_case: bool = False, encoding: str = "utf-8"
) -> Comparison:
    with time_it("compare_files"):
        first_table = build_symbol_table(first, ignore_case=ignore_case, encoding=encoding)
        second_table = build_symbol_table(second, ignore_case=ignore_case, encoding=encoding)

        comparison = Comparison(
            first=str(first),
            second=str(second),
            only_in_first=missing_from(first_table, second_table),
            only_in_second=missing_from(second_table, first_table),
        )

    log.info(
        "%s only in %s, %s only in %s",
        f"{plural(len(comparison.only_in_first)):line}",
        comparison.first,
        f"{plural(len(comparison.only_in_second)):line}",
        comparison.second,
    )
    return comparison
