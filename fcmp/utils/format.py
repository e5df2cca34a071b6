from __future__ import annotations

from enum import StrEnum, auto
from html import escape
from typing import TYPE_CHECKING

import msgspec

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fcmp.core.compare import Comparison, LineEntry


class plural:  # noqa: N801
    """Format a count with a noun, e.g. ``f"{plural(2):line}"`` -> ``"2 lines"``.

    An irregular plural is given after a pipe: ``f"{plural(3):entry|entries}"``.
    """

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value

    def __format__(self, format_spec: str) -> str:
        singular, _, plural_form = format_spec.partition("|")
        plural_form = plural_form or f"{singular}s"
        if abs(self.value) != 1:
            return f"{self.value} {plural_form}"
        return f"{self.value} {singular}"


def human_join(seq: Sequence[str], sep: str = ", ", conjunction: str = "or", *, oxford_comma: bool = True) -> str:
    """Join a sequence of strings into a human-readable format."""
    # hack: str is a Sequence[str], no point in joining it
    if isinstance(seq, str):
        return seq

    if (size := len(seq)) == 0:
        return ""

    if size == 1:
        return seq[0]

    if size == 2:  # noqa: PLR2004
        return f"{seq[0]} {conjunction} {seq[1]}"

    return f"{sep.join(seq[:-1])}{sep if oxford_comma else " "}{conjunction} {seq[-1]}"


class OutputFormat(StrEnum):
    TEXT = auto()
    HTML = auto()
    JSON = auto()


def _sections(comparison: Comparison) -> tuple[tuple[str, str, list[LineEntry]], ...]:
    return (
        ("FIRST", "SECOND", comparison.only_in_first),
        ("SECOND", "FIRST", comparison.only_in_second),
    )


def render_text(comparison: Comparison, *, width: int = 80, fill: str = "*") -> str:
    separator = fill * width
    names = {"FIRST": comparison.first, "SECOND": comparison.second}
    lines: list[str] = [separator]

    for this, other, entries in _sections(comparison):
        lines.append(f"LINES IN {this} ({names[this]}) FILE, BUT NOT IN {other} ({names[other]})")
        lines.append(separator)
        lines.extend(f"line {entry.line_number}: {entry.text}" for entry in entries)
        lines.append(separator)
        lines.append(f"TOTAL: {len(entries)}")
        lines.append(separator)

    return "\n".join(lines)


_HTML_HEAD = """\
<html>
<head>
<style>
.table-section { background-color: #A6AEBF;  }
.table-header { background-color: #C5D3E8; }
.table-body { background-color: #D0E8C5; }
.table-footer { background-color: #FFF8DE; }
</style>
</head>
<body>
<table border="1">"""

_HTML_TAIL = """\
</table>
</body></html>"""


def render_html(comparison: Comparison) -> str:
    names = {"FIRST": escape(comparison.first), "SECOND": escape(comparison.second)}
    lines: list[str] = [_HTML_HEAD]

    for this, other, entries in _sections(comparison):
        lines.append(
            f"<tr class=table-section><td colspan=2>LINES IN {this} (<b>{names[this]}</b>) FILE, "
            f"BUT NOT IN {other} (<b>{names[other]}</b>)</td></tr>"
        )
        lines.append("<tr class=table-header><th>Line Number</th><th>Text</th></tr>")
        lines.extend(
            f"<tr class=table-body><td>{entry.line_number}</td><td>{escape(entry.text)}</td></tr>" for entry in entries
        )
        lines.append(f"<tr class=table-footer><td colspan=2>TOTAL: {len(entries)}</td></tr>")

    lines.append(_HTML_TAIL)
    return "\n".join(lines)


def render_json(comparison: Comparison) -> str:
    return msgspec.json.encode(comparison).decode("utf-8")


def render(comparison: Comparison, fmt: OutputFormat, *, width: int = 80, fill: str = "*") -> str:
    if fmt == OutputFormat.HTML:
        return render_html(comparison)
    if fmt == OutputFormat.JSON:
        return render_json(comparison)
    return render_text(comparison, width=width, fill=fill)
