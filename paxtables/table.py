"""Two-dimensional data stored row by row in a flat list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .resize_reorder import resize_reorder_2d

__all__ = ["Table"]


class Table:
    """A rows × cols grid of cells kept in row-major order."""

    def __init__(self, cells: Iterable = (), cols: int = 0) -> None:
        self._cells = list(cells)
        if cols < 0:
            raise ValueError("A table cannot have a negative number of columns.")
        if cols == 0:
            if self._cells:
                raise ValueError("Cells were given for a table without columns.")
            self._rows = 0
        else:
            self._rows, rest = divmod(len(self._cells), cols)
            if rest:
                raise ValueError(
                    f"{len(self._cells)} cells do not fill whole rows of {cols} columns."
                )
        self._cols = cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator:
        return iter(self._cells)

    def __repr__(self) -> str:
        return f"Table(rows={self._rows}, cols={self._cols})"

    def _index(self, key) -> int:
        try:
            r, c = key
        except (TypeError, ValueError):
            raise TypeError("Table cells are addressed as table[row, col].") from None
        if not (0 <= r < self._rows and 0 <= c < self._cols):
            raise IndexError(f"Cell ({r}, {c}) is outside a {self._rows}x{self._cols} table.")
        return r * self._cols + c

    def __getitem__(self, key):
        return self._cells[self._index(key)]

    def __setitem__(self, key, value) -> None:
        self._cells[self._index(key)] = value

    def row(self, r: int) -> list:
        """Cells of row r, or an empty list if there is no such row."""
        if 0 <= r < self._rows:
            return self._cells[r * self._cols : (r + 1) * self._cols]
        return []

    def column(self, c: int) -> list:
        """Cells of column c, or an empty list if there is no such column."""
        if 0 <= c < self._cols:
            return self._cells[c :: self._cols]
        return []

    def set_row(self, r: int, values: Iterable) -> None:
        """Replace the cells of row r."""
        values = list(values)
        if not 0 <= r < self._rows:
            raise IndexError(f"Row {r} is outside a table of {self._rows} rows.")
        if len(values) != self._cols:
            raise ValueError(f"A row needs {self._cols} values, got {len(values)}.")
        self._cells[r * self._cols : (r + 1) * self._cols] = values

    def set_column(self, c: int, values: Iterable) -> None:
        """Replace the cells of column c."""
        values = list(values)
        if not 0 <= c < self._cols:
            raise IndexError(f"Column {c} is outside a table of {self._cols} columns.")
        if len(values) != self._rows:
            raise ValueError(f"A column needs {self._rows} values, got {len(values)}.")
        self._cells[c :: self._cols] = values

    def _blank(self):
        if not self._cells:
            return 0
        try:
            return type(self._cells[0])()
        except TypeError:
            return None

    def _fit(self, size: int) -> None:
        if size < len(self._cells):
            del self._cells[size:]
        else:
            self._cells.extend([self._blank()] * (size - len(self._cells)))

    def resize(self, rows: int, cols: int) -> None:
        """Change the shape, keeping the overlapping cells in place."""
        if rows < 0 or cols < 0:
            raise ValueError("A table cannot have a negative size.")
        if cols > self._cols:
            self._fit(rows * cols)
        resize_reorder_2d(self._cells, self._rows, self._cols, rows, cols)
        if cols <= self._cols:
            self._fit(rows * cols)
        self._rows = rows
        self._cols = cols

    def to_text(
        self,
        predicate: Callable[[int], bool] | None = None,
        col_mark: str = ";",
    ) -> str:
        """Rows as text, cells joined by col_mark, each row ended by a newline.

        If predicate is given, only rows whose index it accepts are included.
        """
        lines = (
            col_mark.join(str(cell) for cell in self.row(r)) + "\n"
            for r in range(self._rows)
            if predicate is None or predicate(r)
        )
        return "".join(lines)

    def __str__(self) -> str:
        return self.to_text()