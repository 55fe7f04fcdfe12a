"""Recognition of inline spans inside a single block of text."""
from __future__ import annotations

from .document_models import Bold, InlineCode, InlineSpan, Italic, Link, PlainText


class _Scanner:
    """Single left-to-right pass producing inline spans.

    Markers are matched first-come: the closing marker is always the next
    occurrence, and an opening marker without a partner stays literal text.
    """

    def __init__(self, text: str, *, allow_bold: bool = True, allow_italic: bool = True) -> None:
        self.text = text
        self.allow_bold = allow_bold
        self.allow_italic = allow_italic
        self.spans: list[InlineSpan] = []
        self._plain: list[str] = []

    def _flush(self) -> None:
        if self._plain:
            self.spans.append(PlainText("".join(self._plain)))
            self._plain = []

    def _emit(self, span: InlineSpan) -> None:
        self._flush()
        self.spans.append(span)

    def run(self) -> list[InlineSpan]:
        text = self.text
        pos = 0
        while pos < len(text):
            char = text[pos]
            if char == "`":
                pos = self._code(pos)
            elif text.startswith("**", pos):
                pos = self._bold(pos)
            elif char == "*":
                pos = self._italic(pos)
            elif char == "[":
                pos = self._link(pos)
            else:
                self._plain.append(char)
                pos += 1
        self._flush()
        return self.spans

    def _literal(self, pos: int, marker: str) -> int:
        self._plain.append(marker)
        return pos + len(marker)

    def _code(self, pos: int) -> int:
        end = self.text.find("`", pos + 1)
        if end <= pos + 1:
            return self._literal(pos, "`")
        self._emit(InlineCode(self.text[pos + 1 : end]))
        return end + 1

    def _bold(self, pos: int) -> int:
        if not self.allow_bold:
            return self._literal(pos, "**")
        end = self.text.find("**", pos + 2)
        if end <= pos + 2:
            return self._literal(pos, "**")
        inner = self.text[pos + 2 : end]
        self._emit(Bold(tuple(_Scanner(inner, allow_bold=False, allow_italic=self.allow_italic).run())))
        return end + 2

    def _italic(self, pos: int) -> int:
        if not self.allow_italic:
            return self._literal(pos, "*")
        end = self._italic_end(pos + 1)
        if end <= pos + 1:
            return self._literal(pos, "*")
        inner = self.text[pos + 1 : end]
        self._emit(Italic(tuple(_Scanner(inner, allow_bold=self.allow_bold, allow_italic=False).run())))
        return end + 1

    def _italic_end(self, start: int) -> int:
        # a ``**`` pair inside italic text belongs to a nested bold span
        end = self.text.find("*", start)
        while self.allow_bold and end >= 0 and self.text.startswith("**", end):
            bold_end = self.text.find("**", end + 2)
            start = end + 2 if bold_end < 0 else bold_end + 2
            end = self.text.find("*", start)
        return end

    def _link(self, pos: int) -> int:
        label_end = self.text.find("]", pos + 1)
        if label_end <= pos + 1 or not self.text.startswith("(", label_end + 1):
            return self._literal(pos, "[")
        url_end = self.text.find(")", label_end + 2)
        if url_end < 0:
            return self._literal(pos, "[")
        url = self.text[label_end + 2 : url_end].strip()
        if not url:
            return self._literal(pos, "[")
        label = self.text[pos + 1 : label_end]
        self._emit(Link(label=tuple(format_inline(label)), url=url))
        return url_end + 1


def format_inline(raw: str) -> list[InlineSpan]:
    """Return the inline spans of ``raw``.

    Text without any markers comes back as a single :class:`PlainText`.
    Unbalanced markers are kept as literal characters.
    """

    return _Scanner(raw).run()


__all__ = ["format_inline"]
