"""Word-compatible HTML output used when no DOCX package can be produced."""

from __future__ import annotations

from html import escape

from markdown_docx.document_models import (
    Bold,
    Cell,
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

MSWORD_CONTENT_TYPE = "application/msword"


def _text(value: str) -> str:
    return escape(value, quote=False).replace("\n", "<br>")


def render_spans(spans: tuple[InlineSpan, ...]) -> str:
    parts: list[str] = []
    for span in spans:
        if isinstance(span, PlainText):
            parts.append(_text(span.text))
        elif isinstance(span, Bold):
            parts.append(f"<strong>{render_spans(span.spans)}</strong>")
        elif isinstance(span, Italic):
            parts.append(f"<em>{render_spans(span.spans)}</em>")
        elif isinstance(span, InlineCode):
            parts.append(f"<code>{escape(span.text, quote=False)}</code>")
        elif isinstance(span, Link):
            parts.append(f'<a href="{escape(span.url)}">{render_spans(span.label)}</a>')
    return "".join(parts)


def _render_row(cells: tuple[Cell, ...], tag: str) -> str:
    rendered = "".join(f"<{tag}>{render_spans(cell)}</{tag}>" for cell in cells)
    return f"<tr>{rendered}</tr>"


def _render_table(table: Table) -> str:
    body = "".join(_render_row(row, "td") for row in table.rows)
    return (
        '<table border="1" cellpadding="5" cellspacing="0">'
        f"<thead>{_render_row(table.header, 'th')}</thead>"
        f"<tbody>{body}</tbody>"
        "</table>"
    )


def render_block(block) -> str:
    if isinstance(block, Heading):
        return f"<h{block.level}>{render_spans(block.spans)}</h{block.level}>"
    if isinstance(block, ListBlock):
        tag = "ol" if block.ordered else "ul"
        items = "".join(f"<li>{render_spans(item)}</li>" for item in block.items)
        return f"<{tag}>{items}</{tag}>"
    if isinstance(block, Table):
        return _render_table(block)
    if isinstance(block, CodeBlock):
        return f"<pre><code>{escape(block.text, quote=False)}</code></pre>"
    return f"<p>{render_spans(block.spans)}</p>"


class FallbackMarkupWriter:
    """Render a document as a single HTML file that word processors can open.

    The output is not a real Word document, but served as ``application/msword``
    it is opened and rendered by Word, LibreOffice and similar applications.
    Writing never fails.
    """

    content_type = MSWORD_CONTENT_TYPE
    extension = "doc"

    def write(self, document: Document, title: str) -> bytes:
        body = "\n".join(render_block(block) for block in document)
        markup = (
            "<html><head><meta charset=\"UTF-8\">"
            f"<title>{escape(title, quote=False)}</title></head>"
            f"<body>\n{body}\n</body></html>"
        )
        return markup.encode("utf-8", errors="replace")


__all__ = ["FallbackMarkupWriter", "MSWORD_CONTENT_TYPE", "render_block", "render_spans"]
