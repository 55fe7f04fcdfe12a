"""Validation and cell extraction for pipe tables."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .document_models import Table
from .inline_formatter import format_inline

logger = logging.getLogger(__name__)

_separator_cell_re = re.compile(r"-+")


@dataclass(slots=True)
class RawTable:
    """Cell text of a table whose separator row has been accepted."""

    header: list[str]
    rows: list[list[str]]


def is_table_line(line: str) -> bool:
    return line.lstrip().startswith("|")


def split_row(line: str) -> list[str]:
    """Split a ``| a | b |`` row into trimmed cell values.

    Only the empty cells produced by the outer pipes are discarded, so an
    intentionally empty cell in the middle or at the end of a row survives.
    """

    stripped = line.strip()
    cells = [cell.strip() for cell in stripped.split("|")]
    if stripped.startswith("|"):
        cells.pop(0)
    if stripped.endswith("|") and len(stripped) > 1 and cells:
        cells.pop()
    return cells


def _is_separator(cells: list[str], expected: int) -> bool:
    if len(cells) != expected:
        return False
    return all(_separator_cell_re.fullmatch(cell) for cell in cells)


def parse_table_rows(lines: list[str]) -> RawTable | None:
    """Return the raw cells of ``lines`` or ``None`` when they are not a table."""

    if len(lines) < 2:
        return None

    header = split_row(lines[0])
    if not header:
        return None

    separator = split_row(lines[1])
    if not _is_separator(separator, len(header)):
        logger.debug("Rejected table candidate with separator %r", lines[1])
        return None

    rows = [split_row(line) for line in lines[2:]]
    return RawTable(header=header, rows=rows)


def format_table(raw: RawTable) -> Table:
    """Run every cell of ``raw`` through the inline formatter."""

    return Table(
        header=tuple(tuple(format_inline(cell)) for cell in raw.header),
        rows=tuple(
            tuple(tuple(format_inline(cell)) for cell in row)
            for row in raw.rows
        ),
    )


def validate_table(lines: list[str]) -> Table | list[str]:
    """Return a :class:`Table` for ``lines`` or the untouched lines on failure.

    No partial table is ever produced: a bad separator row hands back the
    original list so the caller can treat it as paragraph text.
    """

    raw = parse_table_rows(lines)
    if raw is None:
        return lines
    return format_table(raw)


__all__ = [
    "RawTable",
    "format_table",
    "is_table_line",
    "parse_table_rows",
    "split_row",
    "validate_table",
]
