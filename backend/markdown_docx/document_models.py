"""Common document model definitions used across parsing and writing."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

RawBlockType = Literal["heading", "paragraph", "list", "table", "code"]


@dataclass(slots=True, frozen=True)
class PlainText:
    text: str


@dataclass(slots=True, frozen=True)
class Bold:
    spans: tuple[InlineSpan, ...]


@dataclass(slots=True, frozen=True)
class Italic:
    spans: tuple[InlineSpan, ...]


@dataclass(slots=True, frozen=True)
class InlineCode:
    text: str


@dataclass(slots=True, frozen=True)
class Link:
    label: tuple[InlineSpan, ...]
    url: str


InlineSpan = Union[PlainText, Bold, Italic, InlineCode, Link]
Cell = tuple[InlineSpan, ...]


@dataclass(slots=True, frozen=True)
class Heading:
    level: int
    spans: tuple[InlineSpan, ...]


@dataclass(slots=True, frozen=True)
class Paragraph:
    spans: tuple[InlineSpan, ...]


@dataclass(slots=True, frozen=True)
class ListBlock:
    """A flat bulleted or numbered list; each item is a single line of spans."""

    ordered: bool
    items: tuple[tuple[InlineSpan, ...], ...]


@dataclass(slots=True, frozen=True)
class Table:
    """A pipe table.

    Body rows are kept exactly as written, so a row may hold fewer or more
    cells than the header.
    """

    header: tuple[Cell, ...]
    rows: tuple[tuple[Cell, ...], ...]

    @property
    def column_count(self) -> int:
        return max([len(self.header), *(len(row) for row in self.rows)])


@dataclass(slots=True, frozen=True)
class CodeBlock:
    text: str
    language: str | None = None


Block = Union[Heading, Paragraph, ListBlock, Table, CodeBlock]


@dataclass(slots=True)
class RawBlock:
    """A segmented block whose inline text has not been formatted yet.

    Parameters
    ----------
    type:
        The kind of block encountered in the source text.
    text:
        Unformatted text for headings, paragraphs and code blocks.
    level:
        Heading level, ``1`` to ``4``.
    ordered:
        Whether a list block is numbered.
    items:
        Raw list item lines with their markers removed.
    header, rows:
        Raw cell text of a validated table.
    language:
        Optional tag that followed the opening code fence.
    """

    type: RawBlockType
    text: str = ""
    level: int | None = None
    ordered: bool = False
    items: list[str] | None = None
    header: list[str] | None = None
    rows: list[list[str]] | None = None
    language: str | None = None


@dataclass(slots=True, frozen=True)
class Document:
    """Root of the parsed document: blocks in source order."""

    blocks: tuple[Block, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)


__all__ = [
    "Block",
    "Bold",
    "Cell",
    "CodeBlock",
    "Document",
    "Heading",
    "InlineCode",
    "InlineSpan",
    "Italic",
    "Link",
    "ListBlock",
    "Paragraph",
    "PlainText",
    "RawBlock",
    "RawBlockType",
    "Table",
]
