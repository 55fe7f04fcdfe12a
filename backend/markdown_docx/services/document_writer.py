"""Contract shared by the document writers."""

from __future__ import annotations

from typing import Protocol

from markdown_docx.document_models import Document


class SerializationError(RuntimeError):
    """Raised when a writer cannot render a document."""


class DocumentWriter(Protocol):
    """Renders a :class:`Document` into downloadable bytes."""

    content_type: str
    extension: str

    def write(self, document: Document, title: str) -> bytes:
        """Return the rendered bytes, raising :class:`SerializationError` on failure."""
        ...
