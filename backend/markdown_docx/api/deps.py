"""Common dependency functions for API routes."""

from functools import lru_cache
from typing import Generator, Optional

from fastapi import Depends

from markdown_docx.core.config import Settings, get_settings
from markdown_docx.services.docx_writer import PackagedDocumentWriter
from markdown_docx.services.markdown_converter import MarkdownConverter


@lru_cache
def get_docx_writer() -> Optional[PackagedDocumentWriter]:
    settings = get_settings()
    if not settings.packaged_writer_enabled:
        return None
    return PackagedDocumentWriter(creator=settings.document_creator, code_font=settings.code_font)


def get_markdown_converter(
    writer: Optional[PackagedDocumentWriter] = Depends(get_docx_writer),
) -> MarkdownConverter:
    return MarkdownConverter(writer)


def get_app_settings() -> Generator[Settings, None, None]:
    yield get_settings()
