"""Service that turns markdown text into a downloadable word-processor file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from markdown_docx.document_builder import parse_markdown
from markdown_docx.document_models import Document
from markdown_docx.services.document_writer import DocumentWriter, SerializationError
from markdown_docx.services.html_writer import FallbackMarkupWriter

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Rendered bytes together with the headers needed to serve them."""

    content: bytes
    content_type: str
    filename: str
    extension: str
    used_fallback: bool


class MarkdownConverter:
    """Convert markdown into DOCX, falling back to Word-compatible HTML.

    ``writer`` is the packaged-document capability. Passing ``None`` means the
    capability is not available and every conversion uses the fallback writer.
    """

    def __init__(
        self,
        writer: Optional[DocumentWriter] = None,
        *,
        fallback_writer: Optional[FallbackMarkupWriter] = None,
    ) -> None:
        self._writer = writer
        self._fallback = fallback_writer or FallbackMarkupWriter()

    @property
    def has_packaged_writer(self) -> bool:
        return self._writer is not None

    # ------------------------------------------------------------------
    def convert(self, markdown_text: str, title: str) -> ConversionResult:
        """Parse ``markdown_text`` and render it under ``title``.

        The caller never sees a writer failure: the worst case is the
        fallback HTML document.
        """

        document = parse_markdown(markdown_text)
        logger.debug("Parsed markdown into %s blocks", len(document))

        if self._writer is not None:
            try:
                payload = self._writer.write(document, title)
            except SerializationError as exc:
                logger.warning("Packaged writer failed: %s", exc)
            except Exception:
                logger.exception("Packaged writer raised an unexpected error")
            else:
                logger.info("Converted '%s' into %s", title, self._writer.extension)
                return self._result(payload, self._writer, title, used_fallback=False)

        logger.info("Running fallback markup writer for '%s'", title)
        return self.render_fallback(document, title)

    def render_fallback(self, document: Document, title: str) -> ConversionResult:
        payload = self._fallback.write(document, title)
        return self._result(payload, self._fallback, title, used_fallback=True)

    # ------------------------------------------------------------------
    @staticmethod
    def _result(payload: bytes, writer: DocumentWriter, title: str, *, used_fallback: bool) -> ConversionResult:
        return ConversionResult(
            content=payload,
            content_type=writer.content_type,
            filename=f"{title}.{writer.extension}",
            extension=writer.extension,
            used_fallback=used_fallback,
        )


__all__ = ["ConversionResult", "MarkdownConverter"]
