"""Inspection of delimited text tables: numeric types, glyph counts and HTML output."""

from __future__ import annotations

import copy
import json
import re
import sys
from collections import Counter
from enum import IntEnum

__all__ = [
    "TableFormatError",
    "Strtype",
    "CountByRow",
    "StringMeta",
    "split_lines",
    "parse2table",
    "table2html",
]

_NEWLINE = re.compile(r"\r\n|\n\r|\n|\r")
_DIGITS = frozenset("0123456789")
_ASCIIS = 128
_NON_ASCII = _ASCIIS
_DELIMITER_CANDIDATES = "\t!#$%@,;.:"


class TableFormatError(ValueError):
    """Raised when text cannot be read as a regular table."""


def _drop_trailing_empty(parts: list[str]) -> list[str]:
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def split_lines(text: str) -> list[str]:
    """Split text into rows at "\\n", "\\r", "\\r\\n" or "\\n\\r".

    A final line break does not start another row, so "" gives no rows.
    """
    return _drop_trailing_empty(_NEWLINE.split(text))


def _split_cells(row: str, delimiter: str) -> list[str]:
    return _drop_trailing_empty(row.split(delimiter))


def _split_first_line(text: str) -> tuple[str, str]:
    parts = _NEWLINE.split(text, maxsplit=1)
    return parts[0], (parts[1] if len(parts) > 1 else "")


class _Kind(IntEnum):
    UNDETERMINED = 0
    UINTEGER = 1
    INTEGER = 2
    FLOATING_POINT = 3
    FLOATING_POINT_XTRA = 4
    NON_NUMERIC = 5


_KIND_NAMES = {
    _Kind.UNDETERMINED: "undetermined",
    _Kind.UINTEGER: "unsigned integer",
    _Kind.INTEGER: "integer",
    _Kind.FLOATING_POINT: "floating point",
    _Kind.FLOATING_POINT_XTRA: "floating point (inf/NaN)",
    _Kind.NON_NUMERIC: "textual",
}


def _skip_digits(text: str, start: int) -> int:
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return end


def _xtra(ok: bool) -> _Kind:
    return _Kind.FLOATING_POINT_XTRA if ok else _Kind.NON_NUMERIC


def _scan(text: str) -> _Kind:
    if not text:
        return _Kind.NON_NUMERIC
    n = len(text)
    i = 0
    positive = True
    predigit = True
    first = text[0]

    if first in "+-":
        positive = first != "-"
        i = 1
        if i == n:
            return _Kind.NON_NUMERIC
        rest = text[1:]
        second = text[1]
        if second == "i":
            return _xtra(rest in ("inf", "infinity"))
        if second == "I":
            return _xtra(rest in ("INF", "INFINITY"))
        if second == ".":
            predigit = False
        elif second not in _DIGITS:
            return _Kind.NON_NUMERIC
    elif first == "n":
        return _xtra(text == "nan")
    elif first == "N":
        return _xtra(text in ("NAN", "NaN"))
    elif first == "i":
        return _xtra(text in ("inf", "infinity"))
    elif first == "I":
        return _xtra(text in ("INF", "INFINITY"))
    elif first == ".":
        predigit = False
    elif first not in _DIGITS:
        return _Kind.NON_NUMERIC

    end = _skip_digits(text, i)
    if end > i and end == n:
        return _Kind.UINTEGER if positive else _Kind.INTEGER
    i = end

    if text[i] != ".":
        return _Kind.NON_NUMERIC
    i += 1
    end = _skip_digits(text, i)
    if (end > i or predigit) and end == n:
        return _Kind.FLOATING_POINT
    i = end

    if i == n or text[i] not in "eE":
        return _Kind.NON_NUMERIC
    i += 1
    if i == n:
        return _Kind.NON_NUMERIC
    if text[i] in "+-":
        i += 1
        if i == n:
            return _Kind.NON_NUMERIC
    end = _skip_digits(text, i)
    return _Kind.FLOATING_POINT if end > i and end == n else _Kind.NON_NUMERIC


class Strtype:
    """How a string may be read as a number.

    Adding two Strtype values gives the more general of the two, so the type
    of a whole column is the sum of the types of its cells.
    """

    __slots__ = ("_kind",)

    def __init__(self, text: str | None = None) -> None:
        self._kind = _Kind.UNDETERMINED if text is None else _scan(text)

    @classmethod
    def _of(cls, kind: _Kind) -> Strtype:
        result = cls()
        result._kind = kind
        return result

    def view(self) -> str:
        return _KIND_NAMES[self._kind]

    def is_determined(self) -> bool:
        return self._kind != _Kind.UNDETERMINED

    def is_unsigned_integer(self) -> bool:
        return self._kind == _Kind.UINTEGER

    def is_integer(self) -> bool:
        return self.is_determined() and self._kind <= _Kind.INTEGER

    def is_floating_point(self) -> bool:
        """Floating point number, inf and nan included."""
        return self._kind in (_Kind.FLOATING_POINT, _Kind.FLOATING_POINT_XTRA)

    def is_floating_point_xtra(self) -> bool:
        """Floating point number spelled as inf or nan."""
        return self._kind == _Kind.FLOATING_POINT_XTRA

    def is_numeric(self) -> bool:
        return self.is_determined() and self._kind < _Kind.NON_NUMERIC

    def is_nonnumeric(self) -> bool:
        return self._kind == _Kind.NON_NUMERIC

    def __add__(self, other: Strtype) -> Strtype:
        if not isinstance(other, Strtype):
            return NotImplemented
        return Strtype._of(max(self._kind, other._kind))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Strtype):
            return NotImplemented
        return self._kind == other._kind

    def __hash__(self) -> int:
        return hash(self._kind)

    def __str__(self) -> str:
        return self.view()

    def __repr__(self) -> str:
        return f"Strtype<{self.view()}>"


class CountByRow:
    """Counts occurrences in total and the least and most within one row."""

    __slots__ = ("_row", "_total", "_min", "_max")

    def __init__(self) -> None:
        self._row = 0
        self._total = 0
        self._min: int | None = None
        self._max = 0

    def increment(self) -> None:
        """Count one more occurrence in the current row."""
        self._row += 1

    def _add(self, n: int) -> None:
        self._row += n

    def row_end(self) -> None:
        """Close the current row and fold it into the statistics."""
        if self._min is None or self._row < self._min:
            self._min = self._row
        self._max = max(self._max, self._row)
        self._total += self._row
        self._row = 0

    def valid(self) -> bool:
        """Has at least one row been closed?"""
        return self._min is not None

    def total(self) -> int:
        return self._total

    def min(self) -> int:
        return self._min if self._min is not None else 0

    def max(self) -> int:
        return self._max

    def json(self) -> dict:
        return {"total": self.total(), "row min": self.min(), "row max": self.max()}

    def __str__(self) -> str:
        return f"{{{self.total()} ({self.min()}-{self.max()})}}"

    def __repr__(self) -> str:
        return f"CountByRow{self}"


class StringMeta:
    """Row, glyph and column statistics of a text that may hold a table."""

    def __init__(self, text: str = "") -> None:
        self._size = len(text)
        self._counts = [CountByRow() for _ in range(_NON_ASCII + 1)]
        self._rows = 0
        self._non_empty_rows = 0

        for row in split_lines(text):
            if row:
                seen = Counter(min(ord(ch), _NON_ASCII) for ch in row)
                for code, counter in enumerate(self._counts):
                    counter._add(seen.get(code, 0))
                    counter.row_end()
                self._non_empty_rows += 1
            self._rows += 1

        delimiter = ";"
        for candidate in _DELIMITER_CANDIDATES:
            if self._counts[ord(candidate)].total() > self._counts[ord(delimiter)].total():
                delimiter = candidate
        self._delimiter = delimiter

        first_row, _ = _split_first_line(text)
        self._cols_in_first = 1 + first_row.count(delimiter)

    def size(self) -> int:
        """The total number of characters."""
        return self._size

    def statistics(self, c) -> CountByRow:
        """Counts for character c (a one-character string or a code).

        Codes from 128 upwards give an empty CountByRow.
        """
        code = ord(c) if isinstance(c, str) else int(c)
        if 0 <= code < _ASCIIS:
            return copy.copy(self._counts[code])
        return CountByRow()

    def __getitem__(self, c) -> int:
        return self.statistics(c).total()

    def non_ascii(self) -> int:
        """The number of characters with a code of 128 or more."""
        return self._counts[_NON_ASCII].total()

    def ascii(self) -> int:
        return self.size() - self.non_ascii()

    def rows(self) -> int:
        return self._rows

    def non_empty_rows(self) -> int:
        return self._non_empty_rows

    def col_delimiter(self) -> str:
        """The most frequent of the candidate delimiters, ';' by default."""
        return self._delimiter

    def cols_in_first(self) -> int:
        """Columns in the first row; an empty row has one empty column."""
        return self._cols_in_first

    def minimum_cols(self) -> int:
        return 1 + self.statistics(self._delimiter).min()

    def maximum_cols(self) -> int:
        return 1 + self.statistics(self._delimiter).max()


def parse2table(text: str) -> tuple[list[str], int, str]:
    """Split text into cells, returning (cells, columns per row, delimiter).

    Empty rows are skipped. Raises TableFormatError if rows differ in width.
    """
    meta = StringMeta(text)
    if meta.minimum_cols() != meta.maximum_cols():
        raise TableFormatError(
            f"parse2table: Varying number of columns "
            f"(smallest {meta.minimum_cols()}, largest {meta.maximum_cols()})."
        )
    delimiter = meta.col_delimiter()
    cells = [cell for row in split_lines(text) if row for cell in _split_cells(row, delimiter)]
    return cells, meta.cols_in_first(), delimiter


_TD_EMPTY = "\t\t<td></td>"
_TR_OPEN = "<tr>\n"
_TR_CLOSE = "\t</tr>"


def _td(content: str) -> str:
    return f"\t\t<td>{content} </td>\n"


def _td_titled(title: str, content: str) -> str:
    return f'\t\t<td title="{title}">{content} </td>\n'


_HTML = (
    "<!doctype html>\n"
    '<html lang="se">\n'
    "<head>\n"
    "<title>{title}</title>\n"
    '<meta http-equiv=Content-Type content="text/html; charset=utf-8">\n'
    "<style>\n"
    "\tbody {{\n"
    "\t\tmargin: 0;\n"
    "\t}}\n"
    "\ttable {{\n"
    "\t\tposition: relative;\n"
    "\t\toverflow-x: auto;\n"
    "\t\tborder-spacing: 0;\n"
    "\t\twhite-space: nowrap;\n"
    "\t\ttext-align: left;\n"
    "\t\tfont-family: ArialUnicodeMS, arial, sans-serif;\n"
    "\t\tfont-variant-numeric: lining-nums tabular-nums;\n"
    "\t}}\n"
    "\tthead tr td {{\n"
    "\t\tbackground-color: #70AD47;\n"
    "\t\tfont-weight: bold;\n"
    "\t\tposition: sticky;\n"
    "\t\ttop: 0;\n"
    "\t}}\n"
    "\ttr {{\n"
    "\t\tbackground-color: #D2DFCA;\n"
    "\t}}\n"
    "\ttr:nth-of-type(odd) {{\n"
    "\t\tbackground-color: #E2EFDA;\n"
    "\t}}\n"
    "\ttd {{\n"
    "\t\tpadding: 6px;\n"
    "\t\tfont-variant-numeric: tabular-nums;\n"
    "\t}}\n"
    "{css}"
    "</style>\n"
    '<script src="sorttable.js"></script>\n'
    "</head>\n"
    "<body>\n"
    '<table class="sortable">\n'
    "<thead>\n"
    "\t<tr>\n"
    "{header}"
    "\t</tr>\n"
    "</thead>\n"
    "<tbody>\n"
    "\t{body}\n"
    "</tbody>\n"
    "</table>\n"
    "</body>\n"
    "</html>\n"
)


def _html_row(cells: list[str], num_cols: int, col_types: list[Strtype]) -> str:
    parts = [_TR_OPEN]
    for idx, cell in enumerate(cells):
        content, _, tooltip = cell.partition("|")
        parts.append(_td(content) if not tooltip else _td_titled(tooltip, content))
        if idx < len(col_types) and not col_types[idx].is_nonnumeric():
            col_types[idx] = col_types[idx] + Strtype(content)
    parts.extend([_TD_EMPTY] * max(0, num_cols - len(cells)))
    parts.append(_TR_CLOSE)
    return "".join(parts)


def _describe(title: str, meta: StringMeta, header_cells: list[str], col_types: list[Strtype]) -> str:
    empty_note = (
        ""
        if meta.rows() == meta.non_empty_rows()
        else f" ({meta.non_empty_rows()} non-empty)"
    )
    if meta.minimum_cols() == meta.maximum_cols():
        columns = str(meta.minimum_cols())
    else:
        columns = (
            f"min {meta.minimum_cols()}, max {meta.maximum_cols()} "
            f"({meta.cols_in_first()} in header)"
        )
    lines = [
        f'\nTable: "{title}"\n',
        f"  Column separator: {meta.col_delimiter()!r}\n",
        f"  Rows:             {meta.rows()}{empty_note}\n",
        f"  Columns:          {columns}\n",
    ]
    for cell, kind in zip(header_cells, col_types):
        quoted = json.dumps(cell, ensure_ascii=False)
        lines.append(f"    {quoted:15} {kind.view()}\n")
    return "".join(lines)


def table2html(table: str, title: str, metadata_to_stderr: bool = True) -> str:
    """Render a delimited text table as a sortable HTML page.

    The first row is the header. A cell "text|tip" shows text with tip as its
    tooltip. Numeric columns are right aligned. If metadata_to_stderr is true,
    a summary of the table is written to standard error.
    """
    meta = StringMeta(table)
    delimiter = meta.col_delimiter()
    header, rest = _split_first_line(table)
    col_types = [Strtype() for _ in range(meta.cols_in_first())]

    body = "".join(
        _html_row(_split_cells(row, delimiter), meta.cols_in_first(), col_types)
        for row in split_lines(rest)
        if row
    )

    css = "".join(
        f"\ttd:nth-of-type({c + 1}) {{ text-align:right; }}\n"
        for c, kind in enumerate(col_types)
        if kind.is_numeric()
    )

    header_cells = _split_cells(header, delimiter)
    if metadata_to_stderr:
        sys.stderr.write(_describe(title, meta, header_cells, col_types))

    header_html = "".join(
        _td_titled(kind.view(), cell) for cell, kind in zip(header_cells, col_types)
    )
    return _HTML.format(title=title, css=css, header=header_html, body=body)