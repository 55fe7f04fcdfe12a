"""Renders documents into DOCX packages with python-docx."""

from __future__ import annotations

import logging
from io import BytesIO

from docx import Document as DocxDocument
from docx.document import Document as _Document
from docx.enum.style import WD_STYLE_TYPE
from docx.opc.constants import RELATIONSHIP_TYPE
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor
from docx.text.paragraph import Paragraph as DocxParagraph

from markdown_docx.document_models import (
    Bold,
    CodeBlock,
    Document,
    Heading,
    InlineCode,
    InlineSpan,
    Italic,
    Link,
    ListBlock,
    Paragraph,
    PlainText,
    Table,
)
from markdown_docx.services.document_writer import SerializationError

logger = logging.getLogger(__name__)

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
CODE_STYLE = "Code Block"
NUMBERED_STYLE = "List Number"
_LINK_COLOR = RGBColor(0x05, 0x63, 0xC1)


def _check_url(url: str) -> None:
    if not url or any(char.isspace() or ord(char) < 0x20 for char in url):
        raise SerializationError(f"Cannot represent link target {url!r}")


def _restart_numbering(package: _Document) -> int:
    """Add a numbering instance that starts at 1 and return its ``numId``.

    The instance shares the abstract definition of the numbered list style,
    so every ordered list counts on its own.
    """

    style_pr = package.styles[NUMBERED_STYLE].element.pPr
    if style_pr is None or style_pr.numPr is None or style_pr.numPr.numId is None:
        raise SerializationError(f"Style {NUMBERED_STYLE!r} has no numbering definition")
    numbering = package.part.numbering_part.element
    abstract_id = numbering.num_having_numId(style_pr.numPr.numId.val).abstractNumId.val
    num = numbering.add_num(abstract_id)
    num.add_lvlOverride(ilvl=0).add_startOverride(1)
    return num.numId


class PackagedDocumentWriter:
    """Write a :class:`Document` as an Office Open XML word-processing package."""

    content_type = DOCX_CONTENT_TYPE
    extension = "docx"

    def __init__(
        self,
        *,
        creator: str = "Markdown to DOCX Converter",
        code_font: str = "Courier New",
    ) -> None:
        self._creator = creator
        self._code_font = code_font

    # ------------------------------------------------------------------
    def write(self, document: Document, title: str) -> bytes:
        """Return the DOCX bytes for ``document``.

        Every failure, including a link target that cannot be stored as a
        relationship, surfaces as :class:`SerializationError`.
        """

        try:
            package = self._render(document, title)
            buffer = BytesIO()
            package.save(buffer)
        except SerializationError:
            raise
        except Exception as exc:
            raise SerializationError(f"DOCX rendering failed: {exc}") from exc
        payload = buffer.getvalue()
        logger.debug("Rendered %s blocks into %s DOCX bytes", len(document), len(payload))
        return payload

    # ------------------------------------------------------------------
    def _render(self, document: Document, title: str) -> _Document:
        package = DocxDocument()
        properties = package.core_properties
        properties.title = title
        properties.author = self._creator
        properties.last_modified_by = self._creator
        self._add_code_style(package)

        for block in document:
            if isinstance(block, Heading):
                paragraph = package.add_heading(level=block.level)
                self._add_spans(paragraph, block.spans)
            elif isinstance(block, Paragraph):
                self._add_spans(package.add_paragraph(), block.spans)
            elif isinstance(block, ListBlock):
                self._add_list(package, block)
            elif isinstance(block, Table):
                self._add_table(package, block)
            elif isinstance(block, CodeBlock):
                paragraph = package.add_paragraph(style=CODE_STYLE)
                paragraph.add_run(block.text)
        return package

    def _add_code_style(self, package: _Document) -> None:
        style = package.styles.add_style(CODE_STYLE, WD_STYLE_TYPE.PARAGRAPH)
        style.base_style = package.styles["Normal"]
        style.font.name = self._code_font
        style.font.size = Pt(9.5)
        style.paragraph_format.space_after = Pt(6)

    def _add_list(self, package: _Document, block: ListBlock) -> None:
        style = NUMBERED_STYLE if block.ordered else "List Bullet"
        num_id = _restart_numbering(package) if block.ordered else None
        for item in block.items:
            paragraph = package.add_paragraph(style=style)
            if num_id is not None:
                num_pr = paragraph._p.get_or_add_pPr().get_or_add_numPr()
                num_pr.get_or_add_ilvl().val = 0
                num_pr.get_or_add_numId().val = num_id
            self._add_spans(paragraph, item)

    def _add_table(self, package: _Document, table: Table) -> None:
        column_count = table.column_count
        docx_table = package.add_table(rows=len(table.rows) + 1, cols=column_count)
        docx_table.style = "Table Grid"

        for column_index, cell in enumerate(table.header):
            paragraph = docx_table.cell(0, column_index).paragraphs[0]
            self._add_spans(paragraph, cell, bold=True)

        for row_index, row in enumerate(table.rows, start=1):
            for column_index, cell in enumerate(row):
                paragraph = docx_table.cell(row_index, column_index).paragraphs[0]
                self._add_spans(paragraph, cell)

    def _add_spans(
        self,
        paragraph: DocxParagraph,
        spans: tuple[InlineSpan, ...],
        *,
        bold: bool = False,
        italic: bool = False,
    ) -> list:
        runs = []
        for span in spans:
            if isinstance(span, PlainText):
                runs.append(self._add_run(paragraph, span.text, bold=bold, italic=italic))
            elif isinstance(span, Bold):
                runs.extend(self._add_spans(paragraph, span.spans, bold=True, italic=italic))
            elif isinstance(span, Italic):
                runs.extend(self._add_spans(paragraph, span.spans, bold=bold, italic=True))
            elif isinstance(span, InlineCode):
                run = self._add_run(paragraph, span.text, bold=bold, italic=italic)
                run.font.name = self._code_font
                runs.append(run)
            elif isinstance(span, Link):
                runs.extend(self._add_hyperlink(paragraph, span, bold=bold, italic=italic))
        return runs

    @staticmethod
    def _add_run(paragraph: DocxParagraph, text: str, *, bold: bool, italic: bool):
        run = paragraph.add_run(text)
        if bold:
            run.bold = True
        if italic:
            run.italic = True
        return run

    def _add_hyperlink(self, paragraph: DocxParagraph, link: Link, *, bold: bool, italic: bool) -> list:
        _check_url(link.url)
        rel_id = paragraph.part.relate_to(link.url, RELATIONSHIP_TYPE.HYPERLINK, is_external=True)
        hyperlink = OxmlElement("w:hyperlink")
        hyperlink.set(qn("r:id"), rel_id)

        runs = self._add_spans(paragraph, link.label, bold=bold, italic=italic)
        for run in runs:
            run.font.underline = True
            run.font.color.rgb = _LINK_COLOR
            hyperlink.append(run._r)
        paragraph._p.append(hyperlink)
        return runs


__all__ = ["DOCX_CONTENT_TYPE", "PackagedDocumentWriter"]
