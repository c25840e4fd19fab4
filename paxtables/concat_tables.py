"""Concatenation of csv table files that share a header."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .progress import Progress, textual_progress

__all__ = ["HeaderMismatchError", "AppendTables", "concat_tables"]

_NEWLINE = re.compile(r"\r\n|\n\r|\n|\r")


class HeaderMismatchError(ValueError):
    """Raised when a table's header differs from that of the first table."""


def _read(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


class AppendTables:
    """Appends csv tables: the first non-empty file gives the header,
    the rows of later files are added below it.

    Empty files are counted but otherwise ignored; files that are not csv
    files are skipped.
    """

    def __init__(self, verbose: bool = False, count: int = 0) -> None:
        self._table = ""
        self._main_file: Path | None = None
        self._progress = textual_progress("Concatenate files", count) if verbose else Progress()
        self._header_size = 0
        self._empty_files = 0
        self._used_files = 0

    def text(self) -> str:
        """The concatenated table."""
        return self._table

    def process_file(self, path: str | os.PathLike) -> None:
        """Append one csv table file."""
        path = Path(path)
        if path.suffix.lower() != ".csv":
            return

        if path.stat().st_size:
            table = _read(path)
            parts = _NEWLINE.split(table, maxsplit=1)
            header = parts[0]
            rows = parts[1] if len(parts) > 1 else ""

            if not self._header_size:
                self._table = table
                self._main_file = path
                self._header_size = len(header)
            elif self._table[: self._header_size] != header:
                raise HeaderMismatchError(
                    "Headers do not match when concatinating table files."
                    f"\n\tNew file:    '{path}'"
                    f"\n\tNew header:  '{header}'"
                    f"\n\tMain file:   '{self._main_file}'"
                    f"\n\tMain header: '{self._table[: self._header_size]}'"
                )
            else:
                self._table += rows

            if not self._table.endswith(("\n", "\r")):
                self._table += "\n"
            self._used_files += 1
        else:
            self._empty_files += 1
        self._progress.increment()

    def process_directory(self, directory: str | os.PathLike) -> None:
        """Append every csv table file below directory, in path order."""
        directory = Path(directory)
        if not directory.is_dir():
            raise NotADirectoryError(f"Not a directory: '{directory}'.")
        context = f"\n\tProcessing directory '{directory}'."
        try:
            for path in sorted(p for p in directory.rglob("*") if p.is_file()):
                self.process_file(path)
        except HeaderMismatchError as error:
            raise HeaderMismatchError(f"{error}{context}") from error
        except OSError as error:
            raise OSError(f"{error}{context}") from error

    def json(self) -> dict:
        """File counts of the result."""
        return {
            "used-files": self._used_files,
            "empty-files": self._empty_files,
            "total-files": self._used_files + self._empty_files,
        }

    def save(self, dest: str | os.PathLike) -> None:
        """Write the concatenated table to dest."""
        try:
            with open(dest, "w", encoding="utf-8", newline="") as handle:
                handle.write(self._table)
        except OSError as error:
            raise OSError(
                f"{error}\n\tTrying to save concatenated tables to '{dest}'."
            ) from error


def concat_tables(
    source: str | os.PathLike,
    dest: str | os.PathLike,
    verbose: bool = False,
    count: int = 0,
) -> dict:
    """Concatenate the csv tables below source into dest and return file counts."""
    concat = AppendTables(verbose, count)
    concat.process_directory(source)
    concat.save(dest)
    return concat.json()