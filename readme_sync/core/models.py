"""Data models for readme-sync."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


class SpliceError(Exception):
    """Raised when the target document has no place to splice rows into."""


@dataclass
class DocumentContext:
    """Cheapest possible document reference - just location.

    Content is loaded on demand so enumeration never reads files.
    """
    path: Path

    def read_raw(self) -> str:
        """Read file contents on demand."""
        return self.path.read_text(encoding='utf-8')


@dataclass
class DocumentMetadata:
    """What we learn from reading a document once.

    Does NOT store content - get it via context.read_raw() when needed.
    """
    context: DocumentContext
    title: str
    description: str
    frontmatter: Dict[str, Any] = field(default_factory=dict)

    @property
    def path(self) -> Path:
        """Convenience accessor for the document's path."""
        return self.context.path

    @property
    def filename(self) -> str:
        return self.context.path.name


@dataclass
class DocumentError:
    """A non-fatal problem found while extracting a document's metadata."""
    path: Path
    error: str


@dataclass
class SyncResult:
    """Result of a synchronization run."""
    target: Path
    mode: str
    rows: List[str] = field(default_factory=list)
    content: str = ""
    previous: Optional[str] = None
    written: bool = False
    dry_run: bool = False
    warnings: List[DocumentError] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Whether the generated content differs from what was on disk."""
        return self.previous != self.content
