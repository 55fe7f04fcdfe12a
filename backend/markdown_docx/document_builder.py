"""Assembles raw blocks into the immutable :class:`Document` tree."""
from __future__ import annotations

from typing import Iterable

from .block_segmenter import segment
from .document_models import (
    Block,
    CodeBlock,
    Document,
    Heading,
    ListBlock,
    Paragraph,
    RawBlock,
)
from .inline_formatter import format_inline
from .normalizer import normalize_text
from .table_grammar import RawTable, format_table


def _spans(text: str) -> tuple:
    return tuple(format_inline(text))


def _build_block(raw: RawBlock) -> Block:
    if raw.type == "heading":
        return Heading(level=raw.level or 1, spans=_spans(raw.text))
    if raw.type == "list":
        return ListBlock(
            ordered=raw.ordered,
            items=tuple(_spans(item) for item in raw.items or []),
        )
    if raw.type == "table":
        return format_table(RawTable(header=list(raw.header or []), rows=list(raw.rows or [])))
    if raw.type == "code":
        return CodeBlock(text=raw.text, language=raw.language)
    return Paragraph(spans=_spans(raw.text))


def build_document(blocks: Iterable[RawBlock]) -> Document:
    """Resolve inline spans for every block and keep them in order.

    Code blocks are copied verbatim. An empty input yields an empty document.
    """

    return Document(blocks=tuple(_build_block(raw) for raw in blocks))


def parse_markdown(text: str) -> Document:
    """Normalize, segment and build ``text`` in one call."""

    return build_document(segment(normalize_text(text)))


__all__ = ["build_document", "parse_markdown"]
