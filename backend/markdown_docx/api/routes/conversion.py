"""Endpoints that expose the markdown conversion service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile

from markdown_docx.api.deps import get_app_settings, get_markdown_converter
from markdown_docx.api.filenames import content_disposition, sanitize_stem
from markdown_docx.core.config import Settings
from markdown_docx.schemas.conversion import ConvertRequest, SyntaxHelpItem, SyntaxHelpResponse
from markdown_docx.services.markdown_converter import ConversionResult, MarkdownConverter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conversion"])

SUPPORTED_UPLOADS = {".md", ".markdown", ".txt"}

SYNTAX_HELP = [
    SyntaxHelpItem(name="Headers", example="# H1, ## H2, ### H3, #### H4"),
    SyntaxHelpItem(name="Bold", example="**bold text**"),
    SyntaxHelpItem(name="Italic", example="*italic text*"),
    SyntaxHelpItem(name="Links", example="[link text](URL)"),
    SyntaxHelpItem(name="Lists", example="- item or 1. item"),
    SyntaxHelpItem(name="Code", example="`inline code` or ```code block```"),
    SyntaxHelpItem(
        name="Tables",
        example="| Header 1 | Header 2 |\n|----------|----------|\n| Row A1   | Row A2   |",
    ),
]


def _download(result: ConversionResult, title: str) -> Response:
    stem = sanitize_stem(title)
    return Response(
        content=result.content,
        media_type=result.content_type,
        headers={
            "Content-Disposition": content_disposition(stem, result.extension),
            "Cache-Control": "max-age=0",
            "X-Conversion-Fallback": "true" if result.used_fallback else "false",
        },
    )


def _convert(converter: MarkdownConverter, markdown: str, title: str) -> Response:
    if not markdown.strip():
        raise HTTPException(status_code=400, detail="Markdown content is empty")
    result = converter.convert(markdown, title)
    return _download(result, title)


@router.post("/convert")
def convert_markdown(
    payload: ConvertRequest,
    converter: MarkdownConverter = Depends(get_markdown_converter),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Convert markdown text and return it as a file download."""

    title = (payload.title or "").strip() or settings.default_title
    return _convert(converter, payload.markdown, title)


@router.post("/convert-file")
async def convert_markdown_file(
    file: UploadFile = File(...),
    title: Optional[str] = Form(default=None),
    converter: MarkdownConverter = Depends(get_markdown_converter),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    filename = file.filename or ""
    suffix = Path(filename).suffix.lower()
    if suffix not in SUPPORTED_UPLOADS:
        raise HTTPException(status_code=415, detail="Only .md, .markdown and .txt files are supported")

    contents = await file.read()
    try:
        text = contents.decode("utf-8")
    except UnicodeDecodeError:
        logger.info("Upload '%s' is not UTF-8, decoding as cp1251", filename)
        text = contents.decode("cp1251", errors="ignore")

    resolved_title = (title or "").strip() or Path(filename).stem or settings.default_title
    return _convert(converter, text, resolved_title)


@router.get("/syntax", response_model=SyntaxHelpResponse)
def syntax_help(
    converter: MarkdownConverter = Depends(get_markdown_converter),
) -> SyntaxHelpResponse:
    """List the markdown constructs the converter understands."""

    return SyntaxHelpResponse(items=SYNTAX_HELP, packaged_writer_enabled=converter.has_packaged_writer)
