"""Read generated DOCX or HTML files back into a flat structural outline."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from io import BytesIO
from typing import Iterable, Literal

import lxml.html
from docx import Document
from docx.document import Document as _Document
from docx.oxml.table import CT_Tbl
from docx.oxml.text.paragraph import CT_P
from docx.table import Table
from docx.text.paragraph import Paragraph

OutlineType = Literal["heading", "paragraph", "list_item", "table", "code"]

_heading_style_re = re.compile(r"^Heading (\d)$")
_html_heading_re = re.compile(r"^h([1-4])$")
_html_parser = lxml.html.HTMLParser(encoding="utf-8")


@dataclass(slots=True)
class OutlineEntry:
    """One structural element found in a rendered file.

    Parameters
    ----------
    type:
        The kind of element.
    text:
        Visible text; empty for tables.
    level:
        Heading level, or ``None`` for other entries.
    rows:
        Table contents including the header row.
    """

    type: OutlineType
    text: str = ""
    level: int | None = None
    rows: list[list[str]] = field(default_factory=list)


def _iter_docx_blocks(document: _Document) -> Iterable[Paragraph | Table]:
    """Yield paragraphs and tables in body order."""

    body = document.element.body
    for element in body.iterchildren():
        if isinstance(element, CT_P):
            yield Paragraph(element, document)
        elif isinstance(element, CT_Tbl):
            yield Table(element, document)


def _table_to_rows(table: Table) -> list[list[str]]:
    rows: list[list[str]] = []
    for row in table.rows:
        rows.append(["\n".join(paragraph.text for paragraph in cell.paragraphs) for cell in row.cells])
    return rows


def _paragraph_entry(paragraph: Paragraph) -> OutlineEntry:
    style = paragraph.style.name if paragraph.style is not None else ""
    heading = _heading_style_re.match(style)
    if heading:
        return OutlineEntry(type="heading", text=paragraph.text, level=int(heading.group(1)))
    if style.startswith("List"):
        return OutlineEntry(type="list_item", text=paragraph.text)
    if style == "Code Block":
        return OutlineEntry(type="code", text=paragraph.text)
    return OutlineEntry(type="paragraph", text=paragraph.text)


def outline_docx(payload: bytes) -> list[OutlineEntry]:
    """Return the outline of a DOCX package."""

    document = Document(BytesIO(payload))
    entries: list[OutlineEntry] = []
    for item in _iter_docx_blocks(document):
        if isinstance(item, Paragraph):
            entries.append(_paragraph_entry(item))
        elif isinstance(item, Table):
            entries.append(OutlineEntry(type="table", rows=_table_to_rows(item)))
    return entries


def _html_text(element) -> str:
    for br in element.iter("br"):
        br.tail = "\n" + (br.tail or "")
    return element.text_content()


def outline_html(payload: bytes) -> list[OutlineEntry]:
    """Return the outline of a fallback HTML document."""

    root = lxml.html.document_fromstring(payload, parser=_html_parser)
    entries: list[OutlineEntry] = []
    for element in root.body.iterchildren():
        tag = element.tag
        if not isinstance(tag, str):
            continue
        heading = _html_heading_re.match(tag)
        if heading:
            entries.append(OutlineEntry(type="heading", text=_html_text(element), level=int(heading.group(1))))
        elif tag == "p":
            entries.append(OutlineEntry(type="paragraph", text=_html_text(element)))
        elif tag in {"ul", "ol"}:
            entries.extend(
                OutlineEntry(type="list_item", text=_html_text(item)) for item in element.iterchildren("li")
            )
        elif tag == "table":
            rows = [
                [_html_text(cell) for cell in row.iterchildren("th", "td")]
                for row in element.iter("tr")
            ]
            entries.append(OutlineEntry(type="table", rows=rows))
        elif tag == "pre":
            entries.append(OutlineEntry(type="code", text=element.text_content()))
    return entries


__all__ = ["OutlineEntry", "OutlineType", "outline_docx", "outline_html"]
