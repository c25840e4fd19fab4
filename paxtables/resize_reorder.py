"""In-place reordering of row-major two-dimensional data held in a flat list."""

from __future__ import annotations

from collections.abc import MutableSequence
from itertools import chain

__all__ = ["resize_reorder_2d", "remove_column"]


def _blank(data: MutableSequence):
    if not data:
        return 0
    try:
        return type(data[0])()
    except TypeError:
        return None


def resize_reorder_2d(
    data: MutableSequence,
    old_rows: int,
    old_cols: int,
    new_rows: int,
    new_cols: int,
) -> None:
    """Move row-major cells so they fit a table of new_cols columns.

    Add room before growing the column count and trim after shrinking it.
    New cells and any trailing cells are blanked. The length of data is kept.
    """
    rows = min(old_rows, new_rows)
    if len(data) < rows * max(old_cols, new_cols):
        raise ValueError(
            f"Data holds {len(data)} cells, too few to reorder "
            f"{rows} rows from {old_cols} to {new_cols} columns."
        )
    if old_cols == new_cols or len(data) <= 1:
        return

    blank = _blank(data)
    keep = min(old_cols, new_cols)
    padding = [blank] * (new_cols - keep)
    reordered = list(
        chain.from_iterable(
            chain(data[r * old_cols : r * old_cols + keep], padding) for r in range(rows)
        )
    )
    used = len(reordered)
    data[:used] = reordered
    data[used:] = [blank] * (len(data) - used)


def remove_column(data: MutableSequence, rows: int, cols: int, remove_col: int) -> int:
    """Drop column remove_col from row-major cells and return the new cell count.

    The remaining cells are packed at the front; cells past the returned count
    are left as they were.
    """
    if len(data) != rows * cols:
        raise ValueError(f"Data holds {len(data)} cells, expected {rows * cols}.")
    if remove_col >= cols or rows <= 0:
        return rows * cols

    kept = [cell for index, cell in enumerate(data) if index % cols != remove_col]
    data[: len(kept)] = kept
    return len(kept)