"""Filename handling for download responses."""
from __future__ import annotations

import re
from urllib.parse import quote

_unsafe_re = re.compile(r"[^\w\-. ]+", re.UNICODE)
_space_re = re.compile(r"\s+")


def sanitize_stem(value: str, fallback: str = "document") -> str:
    """Return a filesystem-safe stem for the generated document."""

    sanitized = _unsafe_re.sub("_", value)
    sanitized = _space_re.sub(" ", sanitized).strip("._ ")
    return sanitized or fallback


def content_disposition(stem: str, extension: str) -> str:
    """Build an ``attachment`` header value that survives non-ASCII titles."""

    filename = f"{stem}.{extension}"
    ascii_name = filename.encode("ascii", "ignore").decode("ascii").strip() or f"document.{extension}"
    if ascii_name.startswith("."):
        ascii_name = f"document{ascii_name}"
    if ascii_name == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"


__all__ = ["content_disposition", "sanitize_stem"]
