"""Section synchronizer tying discovery, row formatting and splicing together."""

import logging
from pathlib import Path
from typing import List, Optional

from readme_sync.config import MODES, SyncConfig
from readme_sync.core.discovery import DocumentDiscovery
from readme_sync.core.models import SyncResult
from readme_sync.core.splicer import overwrite_all, replace_section, replace_table
from readme_sync.transforms.rows import RowTransform, link_row, table_row
from readme_sync.transforms.titles import humanize_filename, title_case

logger = logging.getLogger(__name__)


class SectionSynchronizer:
    """Regenerates the listing section of a README from its sibling documents.

    One pass: enumerate documents, extract metadata, format rows, splice them
    into the target text and write the target once.
    """

    def __init__(
        self,
        discovery: DocumentDiscovery,
        row_transform: RowTransform,
        mode: str = "overwrite",
        target: Optional[Path] = None,
        header: str = "",
        section_header: str = "",
        table_header: str = "",
    ):
        """Initialize SectionSynchronizer.

        Args:
            discovery: Finds the documents to list
            row_transform: Formats one document as one row
            mode: One of "overwrite", "section" or "table"
            target: Output file (default: discovery's output name in its directory)
            header: Document header written in overwrite mode
            section_header: Heading introducing the generated list
            table_header: Header line of the table replaced in table mode
        """
        if mode not in MODES:
            raise ValueError(f"Unknown mode {mode!r}, expected one of {', '.join(MODES)}")
        self.discovery = discovery
        self.row_transform = row_transform
        self.mode = mode
        self.target = Path(target) if target else discovery.directory / discovery.output_name
        self.header = header
        self.section_header = section_header
        self.table_header = table_header

    def build_rows(self) -> List[str]:
        """Format one row per discovered document."""
        return [self.row_transform(doc) for doc in self.discovery.discover_all()]

    def read_target(self) -> Optional[str]:
        """Current target contents, or None if it does not exist yet.

        Line endings are read untranslated so CRLF files stay CRLF.
        """
        if not self.target.exists():
            return None
        with self.target.open('r', encoding='utf-8', newline='') as f:
            return f.read()

    def render(self, rows: List[str], previous: Optional[str]) -> str:
        """Splice rows into the previous target text according to the mode.

        Raises:
            SpliceError: In table mode, if the table header is missing
        """
        if self.mode == "overwrite":
            return overwrite_all(rows, self.header, self.section_header)
        if self.mode == "section":
            return replace_section(previous or "", rows, self.section_header)
        return replace_table(previous or "", rows, self.table_header)

    def sync(self, dry_run: bool = False) -> SyncResult:
        """Regenerate the target document.

        The target is either fully rewritten or, when splicing fails, left
        untouched.

        Args:
            dry_run: Compute the new content without writing it

        Returns:
            SyncResult describing the generated content
        """
        rows = self.build_rows()
        previous = self.read_target()
        content = self.render(rows, previous)

        result = SyncResult(
            target=self.target,
            mode=self.mode,
            rows=rows,
            content=content,
            previous=previous,
            dry_run=dry_run,
            warnings=list(self.discovery.errors),
        )

        if dry_run:
            logger.info("Dry run: %s not written", self.target.name)
            return result

        with self.target.open('w', encoding='utf-8', newline='') as f:
            f.write(content)
        result.written = True
        logger.info("Wrote %d rows to %s", len(rows), self.target)
        return result


def create_synchronizer_from_config(config: SyncConfig) -> SectionSynchronizer:
    """Build a SectionSynchronizer from a SyncConfig."""
    discovery = DocumentDiscovery(
        Path(config.directory),
        output_name=config.output,
        extension=config.extension,
        sort=config.sort,
        case_sensitive=config.case_sensitive,
        title_transform=title_case() if config.title_style == "titlecase" else None,
        fallback_transform=humanize_filename() if config.fallback_title == "humanized" else None,
        fail_fast=config.fail_fast,
    )

    if config.mode == "table":
        row_transform = table_row(escape=config.escape)
    else:
        row_transform = link_row(escape=config.escape)

    return SectionSynchronizer(
        discovery,
        row_transform,
        mode=config.mode,
        target=config.target_path,
        header=config.header,
        section_header=config.section_header,
        table_header=config.table_header,
    )
