"""Splits normalized markdown text into raw blocks in source order."""
from __future__ import annotations

import logging
import re

from .document_models import RawBlock
from .table_grammar import is_table_line, parse_table_rows

logger = logging.getLogger(__name__)

FENCE = "```"

_heading_re = re.compile(r"^(#{1,4}) ")
_bullet_re = re.compile(r"^- ")
_numbered_re = re.compile(r"^\d+\. ")


def _is_blank(line: str) -> bool:
    return not line.strip()


def _is_fence(line: str) -> bool:
    return line.startswith(FENCE)


class _Segmenter:
    """Line cursor that groups lines into :class:`RawBlock` objects."""

    def __init__(self, lines: list[str]) -> None:
        self.lines = lines
        self.index = 0
        self.blocks: list[RawBlock] = []
        self._paragraph: list[str] = []

    def flush_paragraph(self) -> None:
        if self._paragraph:
            self.blocks.append(RawBlock(type="paragraph", text="\n".join(self._paragraph)))
            self._paragraph = []

    def emit(self, block: RawBlock) -> None:
        self.flush_paragraph()
        self.blocks.append(block)

    def run(self) -> list[RawBlock]:
        while self.index < len(self.lines):
            line = self.lines[self.index]
            if _is_blank(line):
                self.flush_paragraph()
                self.index += 1
            elif is_table_line(line):
                self._table()
            elif _is_fence(line) and self._code():
                continue
            elif _heading_re.match(line):
                self._heading(line)
            elif _bullet_re.match(line):
                self._list(_bullet_re, ordered=False)
            elif _numbered_re.match(line):
                self._list(_numbered_re, ordered=True)
            else:
                self._paragraph.append(line)
                self.index += 1
        self.flush_paragraph()
        return self.blocks

    def _take_run(self, predicate) -> list[str]:
        start = self.index
        while self.index < len(self.lines) and predicate(self.lines[self.index]):
            self.index += 1
        return self.lines[start : self.index]

    def _table(self) -> None:
        candidate = self._take_run(is_table_line)
        raw = parse_table_rows(candidate)
        if raw is None:
            # Rejected candidates read as plain paragraph lines.
            self._paragraph.extend(candidate)
            return
        self.emit(RawBlock(type="table", header=raw.header, rows=raw.rows))

    def _heading(self, line: str) -> None:
        marker = _heading_re.match(line)
        level = len(marker.group(1))
        self.emit(RawBlock(type="heading", level=level, text=line[marker.end() :]))
        self.index += 1

    def _list(self, pattern: re.Pattern[str], *, ordered: bool) -> None:
        run = self._take_run(lambda candidate: pattern.match(candidate) is not None)
        items = [pattern.sub("", item, count=1) for item in run]
        self.emit(RawBlock(type="list", ordered=ordered, items=items))

    def _code(self) -> bool:
        """Consume a fenced code block starting at the cursor.

        Returns ``False`` without moving the cursor when no closing fence
        exists, leaving the opening line to be read as paragraph text. On a
        multi-line fence only a line that starts or ends with the fence
        closes the block. Text following the closing fence is segmented again.
        """

        opening = self.lines[self.index][len(FENCE) :]
        inline_end = opening.find(FENCE)
        if inline_end >= 0:
            self.emit(RawBlock(type="code", text=opening[:inline_end]))
            self._resume(self.index, opening[inline_end + len(FENCE) :])
            return True

        body: list[str] = []
        for cursor in range(self.index + 1, len(self.lines)):
            line = self.lines[cursor]
            stripped = line.lstrip()
            if stripped.startswith(FENCE):
                rest = stripped[len(FENCE) :]
            elif line.rstrip().endswith(FENCE):
                body.append(line.rstrip()[: -len(FENCE)])
                rest = ""
            else:
                body.append(line)
                continue
            language = opening.strip() or None
            self.emit(RawBlock(type="code", text="\n".join(body), language=language))
            self._resume(cursor, rest)
            return True

        logger.debug("Unclosed code fence at line %s", self.index + 1)
        return False

    def _resume(self, cursor: int, rest: str) -> None:
        """Continue after a closing fence, putting trailing text back as a line."""

        rest = rest.strip()
        if rest:
            self.lines[cursor] = rest
            self.index = cursor
        else:
            self.index = cursor + 1


def segment(text: str) -> list[RawBlock]:
    """Partition normalized ``text`` into raw blocks, preserving order."""

    if not text:
        return []
    return _Segmenter(text.split("\n")).run()


__all__ = ["segment"]
