# paxtables

Small tools for delimited text tables, with helpers for point classification
codes and for reporting the progress of long loops. Pure Python, no
dependencies.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Modules

- `paxtables.string_meta`
  - `StringMeta(text)` counts characters, rows and non-empty rows, keeps
    per-character statistics (`statistics(c)` returns a `CountByRow` with
    `total()`, `min()`, `max()` per row), guesses the column delimiter as the
    most frequent of tab, `!#$%@,;.:` (`;` by default) and reports
    `cols_in_first()`, `minimum_cols()` and `maximum_cols()`.
  - `split_lines(text)` splits at `\n`, `\r`, `\r\n` or `\n\r`; a final line
    break does not start another row.
  - `parse2table(text)` returns `(cells, columns, delimiter)`, skipping empty
    rows, and raises `TableFormatError` when rows differ in width.
  - `Strtype(text)` classifies a string as unsigned integer, integer, floating
    point, floating point spelled as inf/nan, or textual; adding two gives the
    more general kind.
  - `table2html(table, title, metadata_to_stderr=True)` renders a table as a
    sortable HTML page. The first row is the header, a cell `text|tip` gets
    `tip` as its tooltip, and numeric columns are right aligned. Unless
    `metadata_to_stderr` is false, a summary of the table is written to
    standard error.
- `paxtables.table`: `Table(cells, cols)`, a grid stored row by row. Cells are
  read and written as `table[row, col]`; `row`, `column`, `set_row`,
  `set_column`, `resize(rows, cols)` (keeps overlapping cells, blanks new
  ones) and `to_text(predicate=None, col_mark=";")`.
- `paxtables.resize_reorder`: `resize_reorder_2d` and `remove_column`
  rearrange row-major data held in a flat list, in place.
- `paxtables.concat_tables`: `concat_tables(source, dest, verbose=False,
  count=0)` joins every `.csv` file below a directory into one file and
  returns the counts of used, empty and total files. `AppendTables` does the
  same step by step. A file whose header differs from the first raises
  `HeaderMismatchError`.
- `paxtables.progress`: `Progress` counts items and gives speed and estimated
  time left; it reports through a `Reporter`, at most once a second and not
  during the first seconds. `Textual` writes the report on one line of a
  stream (standard error by default); `textual_progress(text, end)` builds
  both.
- `paxtables.classification`: the standard LAS point classes
  (`Classification`, `ClassificationMask`) and predicates such as
  `is_ground`, `is_vegetation`, `is_withheld` and `normal_lm_filter`.
- `paxtables.power`: `power`, `abs_power`, `root`, `square`, `cube`,
  `square_root` and `cube_root`.
- `paxtables.from_string`: `from_string(kind, text)` reads text as a `str`,
  `int` or `float` type and `tuple_from_strings(kinds, texts)` converts
  several at once; text that is not a number raises `ConversionError`.

## Examples

    from paxtables.string_meta import StringMeta, parse2table

    meta = StringMeta("a1,a2\nb1,b2\nc1,c2\n")
    meta.col_delimiter()   # ','
    meta.cols_in_first()   # 2

    cells, cols, delimiter = parse2table("a1,a2\nb1,b2\n")
    # cells == ['a1', 'a2', 'b1', 'b2'], cols == 2, delimiter == ','

    from paxtables.table import Table

    table = Table(range(8), 4)
    table[1, 2]            # 6
    table.row(0)           # [0, 1, 2, 3]

    from paxtables.concat_tables import concat_tables

    summary = concat_tables("plots/", "all-plots.csv")
    # {'used-files': ..., 'empty-files': ..., 'total-files': ...}

## What it does not do

The package has no command-line program; everything is used from Python. It
does not read or write point cloud files and computes no plot or raster
metrics from points: the classification helpers work on classification codes
alone.