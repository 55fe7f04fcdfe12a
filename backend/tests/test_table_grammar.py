"""Unit tests for pipe table validation."""

from __future__ import annotations

import pytest

from markdown_docx.document_models import Bold, Link, PlainText, Table
from markdown_docx.table_grammar import parse_table_rows, split_row, validate_table


def _cells(*values: str) -> tuple:
    return tuple((PlainText(value),) for value in values)


def test_well_formed_table() -> None:
    result = validate_table(["| A | B |", "|---|---|", "| 1 | 2 |"])

    assert result == Table(header=_cells("A", "B"), rows=(_cells("1", "2"),))


@pytest.mark.parametrize("columns", [1, 2, 5])
def test_header_cell_count_is_preserved(columns: int) -> None:
    header = "| " + " | ".join(f"h{index}" for index in range(columns)) + " |"
    separator = "|" + "|".join("---" for _ in range(columns)) + "|"

    result = validate_table([header, separator])

    assert isinstance(result, Table)
    assert len(result.header) == columns
    assert result.rows == ()


@pytest.mark.parametrize(
    "lines",
    [
        ["| A | B |", "| x | y |"],
        ["| A | B |", "|---|:--|"],
        ["| A | B", "|---|"],
        ["| A | B |", "|---|---|---|"],
        ["| A | B |"],
    ],
)
def test_invalid_separator_returns_original_lines(lines: list[str]) -> None:
    result = validate_table(lines)

    assert result is lines
    assert parse_table_rows(lines) is None


def test_ragged_body_rows_are_kept_as_written() -> None:
    result = validate_table(["| A | B |", "|---|---|", "| 1 |", "| 1 | 2 | 3 |"])

    assert isinstance(result, Table)
    assert [len(row) for row in result.rows] == [1, 3]
    assert result.column_count == 3


def test_cells_are_inline_formatted() -> None:
    result = validate_table(["| **Name** | *Note* |", "|---|---|", "| [site](https://example.com) | `x` |"])

    assert isinstance(result, Table)
    assert result.header[0] == (Bold((PlainText("Name"),)),)
    assert result.rows[0][0] == (Link(label=(PlainText("site"),), url="https://example.com"),)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("| a | b |", ["a", "b"]),
        ("|a|b", ["a", "b"]),
        ("| a |  | c |", ["a", "", "c"]),
        ("| a | |", ["a", ""]),
        ("  | padded |  ", ["padded"]),
    ],
)
def test_split_row(line: str, expected: list[str]) -> None:
    assert split_row(line) == expected
