"""Tests for the python-docx backed writer."""

from __future__ import annotations

from io import BytesIO

import pytest
from docx import Document as load_docx
from docx.opc.constants import RELATIONSHIP_TYPE

from markdown_docx.document_builder import parse_markdown
from markdown_docx.document_models import Document, Link, Paragraph, PlainText
from markdown_docx.document_outline import outline_docx
from markdown_docx.services.docx_writer import DOCX_CONTENT_TYPE, PackagedDocumentWriter
from markdown_docx.services.document_writer import SerializationError


@pytest.fixture
def writer() -> PackagedDocumentWriter:
    return PackagedDocumentWriter(creator="Test Suite", code_font="Consolas")


def test_writes_zip_package_with_metadata(writer: PackagedDocumentWriter, sample_document: Document) -> None:
    payload = writer.write(sample_document, "Quarterly")

    assert payload.startswith(b"PK")
    properties = load_docx(BytesIO(payload)).core_properties
    assert properties.title == "Quarterly"
    assert properties.author == "Test Suite"
    assert writer.content_type == DOCX_CONTENT_TYPE
    assert writer.extension == "docx"


def test_outline_matches_document_structure(
    writer: PackagedDocumentWriter, sample_document: Document, document_structure
) -> None:
    entries = outline_docx(writer.write(sample_document, "Quarterly"))

    assert [(entry.type, entry.level) for entry in entries] == document_structure(sample_document)


def test_block_contents(writer: PackagedDocumentWriter, sample_document: Document) -> None:
    entries = outline_docx(writer.write(sample_document, "Quarterly"))

    assert entries[0].text == "Quarterly report"
    assert entries[1].text == (
        "Revenue grew by 12% compared to last quarter.\nSee the dashboard for details."
    )
    assert [entry.text for entry in entries if entry.type == "list_item"] == [
        "New export feature",
        "Faster imports",
        "Plan",
        "Ship",
    ]
    (table,) = [entry for entry in entries if entry.type == "table"]
    assert table.rows == [["Region", "Sales"], ["North", "10"], ["South", "7"]]
    (code,) = [entry for entry in entries if entry.type == "code"]
    assert code.text == "SELECT *\nFROM sales;"


def test_runs_carry_inline_formatting(writer: PackagedDocumentWriter) -> None:
    document = parse_markdown("plain **bold** *italic* `code`")

    package = load_docx(BytesIO(writer.write(document, "Runs")))
    runs = {run.text: run for run in package.paragraphs[0].runs}

    assert runs["bold"].bold is True
    assert runs["italic"].italic is True
    assert runs["code"].font.name == "Consolas"
    assert runs["plain "].bold is None


def test_table_header_is_bold_and_ragged_rows_are_padded(writer: PackagedDocumentWriter) -> None:
    document = parse_markdown("| A | B |\n|---|---|\n| 1 |\n| 1 | 2 | 3 |")

    package = load_docx(BytesIO(writer.write(document, "Table")))
    (table,) = package.tables

    assert len(table.columns) == 3
    assert [cell.text for cell in table.rows[1].cells] == ["1", "", ""]
    assert all(run.bold for run in table.rows[0].cells[0].paragraphs[0].runs)
    assert table.style.name == "Table Grid"


def test_each_ordered_list_restarts_numbering(writer: PackagedDocumentWriter) -> None:
    document = parse_markdown("1. a\n2. b\n\nBetween\n\n1. c\n2. d\n\n- bullet")

    package = load_docx(BytesIO(writer.write(document, "Lists")))
    numbered = [p for p in package.paragraphs if p.style.name == "List Number"]
    num_ids = [p._p.pPr.numPr.numId.val for p in numbered]
    numbering = package.part.numbering_part.element

    assert [p.text for p in numbered] == ["a", "b", "c", "d"]
    assert num_ids[0] == num_ids[1]
    assert num_ids[2] == num_ids[3]
    assert num_ids[0] != num_ids[2]
    for num_id in {num_ids[0], num_ids[2]}:
        (override,) = numbering.num_having_numId(num_id).lvlOverride_lst
        assert override.ilvl == 0
        assert override.startOverride.val == 1
    bullet = package.paragraphs[-1]
    assert bullet.style.name == "List Bullet"
    assert bullet._p.pPr.numPr is None


def test_links_become_external_hyperlinks(writer: PackagedDocumentWriter) -> None:
    document = parse_markdown("Go [home](https://example.com/home) now")

    package = load_docx(BytesIO(writer.write(document, "Links")))
    targets = [
        rel.target_ref
        for rel in package.part.rels.values()
        if rel.reltype == RELATIONSHIP_TYPE.HYPERLINK
    ]

    assert targets == ["https://example.com/home"]
    assert package.paragraphs[0].text == "Go home now"


def test_unrepresentable_link_raises_serialization_error(writer: PackagedDocumentWriter) -> None:
    document = Document(blocks=(Paragraph(spans=(Link(label=(PlainText("x"),), url="not a url"),)),))

    with pytest.raises(SerializationError):
        writer.write(document, "Broken")


def test_rendering_errors_are_wrapped(writer: PackagedDocumentWriter) -> None:
    document = Document(blocks=(Paragraph(spans=(PlainText("bad \x00 char"),)),))

    with pytest.raises(SerializationError) as excinfo:
        writer.write(document, "Broken")

    assert excinfo.value.__cause__ is not None


def test_empty_document_is_still_a_package(writer: PackagedDocumentWriter) -> None:
    payload = writer.write(Document(), "Empty")

    assert outline_docx(payload) == []
