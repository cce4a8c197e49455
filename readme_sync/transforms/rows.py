"""Row transform factories for readme-sync.

A row transform maps one document to one line of the generated section.
"""

import re
from typing import Callable
from urllib.parse import quote

from readme_sync.core.models import DocumentMetadata

RowTransform = Callable[[DocumentMetadata], str]

# Characters that end a link label or a table cell early
MARKDOWN_SPECIAL = re.compile(r'([\\\[\]()|])')


def escape_text(text: str) -> str:
    """Backslash-escape characters that would break a link label or table cell."""
    return MARKDOWN_SPECIAL.sub(r'\\\1', text)


def escape_path(path: str) -> str:
    """Percent-encode characters that would break a link target."""
    return quote(path, safe="/._-~+@!$&*,;=:'")


def fold_whitespace(text: str) -> str:
    """Collapse newlines and runs of whitespace, which would end a row early."""
    return " ".join(text.split())


def _parts(doc: DocumentMetadata, escape: bool):
    if escape:
        return (
            escape_text(fold_whitespace(doc.title)),
            escape_path(doc.filename),
            escape_text(fold_whitespace(doc.description)),
        )
    return doc.title, doc.filename, doc.description


def link_row(escape: bool = True) -> RowTransform:
    """Create a transform producing ``- [title](path)`` rows.

    Args:
        escape: Escape markdown-significant characters in title and path

    Returns:
        A transform function (document) -> row
    """
    def transform(doc: DocumentMetadata) -> str:
        title, path, _ = _parts(doc, escape)
        return f"- [{title}]({path})"
    return transform


def table_row(escape: bool = True) -> RowTransform:
    """Create a transform producing ``| [title](path) | description |`` rows."""
    def transform(doc: DocumentMetadata) -> str:
        title, path, description = _parts(doc, escape)
        return f"| [{title}]({path}) | {description} |"
    return transform
