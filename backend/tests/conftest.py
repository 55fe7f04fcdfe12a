"""Shared fixtures for writer and converter tests."""

from __future__ import annotations

import pytest

from markdown_docx.document_builder import parse_markdown
from markdown_docx.document_models import CodeBlock, Document, Heading, ListBlock, Table

SAMPLE_MARKDOWN = """\
# Quarterly report

Revenue grew by **12%** compared to *last* quarter.
See [the dashboard](https://example.com/dash) for details.

## Highlights

- New `export` feature
- Faster imports

1. Plan
2. Ship

| Region | Sales |
|--------|-------|
| North  | **10** |
| South  | 7 |

### Appendix

```sql
SELECT *
FROM sales;
```

#### Notes
Final line one
final line two
"""


@pytest.fixture
def sample_document() -> Document:
    return parse_markdown(SAMPLE_MARKDOWN)


def _structure(document: Document) -> list[tuple[str, int | None]]:
    entries: list[tuple[str, int | None]] = []
    for block in document:
        if isinstance(block, Heading):
            entries.append(("heading", block.level))
        elif isinstance(block, ListBlock):
            entries.extend(("list_item", None) for _ in block.items)
        elif isinstance(block, Table):
            entries.append(("table", None))
        elif isinstance(block, CodeBlock):
            entries.append(("code", None))
        else:
            entries.append(("paragraph", None))
    return entries


@pytest.fixture
def document_structure():
    """Return the ``(type, level)`` sequence an outline of the document should have."""

    return _structure
