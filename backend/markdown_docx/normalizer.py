"""Line-ending normalization applied before segmentation."""
from __future__ import annotations

import re

_line_break_re = re.compile(r"\r\n|\r")


def normalize_text(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` to ``\\n`` and trim surrounding whitespace."""

    return _line_break_re.sub("\n", text).strip()


__all__ = ["normalize_text"]
