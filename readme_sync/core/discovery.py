"""Document discovery for finding the markdown files to list."""

import logging
from pathlib import Path
from typing import List, Optional

import yaml

from readme_sync.core.metadata import extract_metadata, parse_frontmatter
from readme_sync.core.models import DocumentContext, DocumentError, DocumentMetadata
from readme_sync.transforms.titles import TitleTransform

logger = logging.getLogger(__name__)


class DocumentDiscovery:
    """Enumerates the markdown documents of a directory and reads their metadata."""

    def __init__(
        self,
        directory: Path,
        output_name: str = "README.md",
        extension: str = ".md",
        sort: bool = True,
        case_sensitive: bool = False,
        title_transform: Optional[TitleTransform] = None,
        fallback_transform: Optional[TitleTransform] = None,
        fail_fast: bool = False,
    ):
        """Initialize DocumentDiscovery.

        Args:
            directory: Directory holding the documents (not searched recursively)
            output_name: Name of the generated file, never listed as a document
            extension: Filename suffix a document must end with
            sort: Sort documents by filename instead of directory-listing order
            case_sensitive: Match metadata keys case-sensitively
            title_transform: Applied to titles found in the document
            fallback_transform: Applied to filename fallback titles
            fail_fast: Raise on malformed frontmatter instead of collecting it
        """
        self.directory = Path(directory)
        self.output_name = output_name
        self.extension = extension
        self.sort = sort
        self.case_sensitive = case_sensitive
        self.title_transform = title_transform
        self.fallback_transform = fallback_transform
        self.fail_fast = fail_fast
        self.errors: List[DocumentError] = []

    def list_documents(self) -> List[str]:
        """List candidate document filenames.

        Raises:
            FileNotFoundError: If the directory does not exist
        """
        names = [
            entry.name
            for entry in self.directory.iterdir()
            if entry.name.endswith(self.extension)
            and entry.name != self.output_name
            and entry.is_file()
        ]
        if self.sort:
            names.sort()
        return names

    def discover_all(self) -> List[DocumentMetadata]:
        """Read metadata for every candidate document, in enumeration order."""
        self.errors = []
        documents = []
        for name in self.list_documents():
            documents.append(self.get_document(self.directory / name))
        logger.debug("Discovered %d documents in %s", len(documents), self.directory)
        return documents

    def get_document(self, file_path: Path) -> DocumentMetadata:
        """Read one document and extract its title and description.

        Read errors propagate; malformed frontmatter is recorded in
        ``errors`` (or raised when fail_fast is set).
        """
        context = DocumentContext(path=file_path)
        content = context.read_raw()

        try:
            frontmatter = parse_frontmatter(content)
        except yaml.YAMLError as e:
            if self.fail_fast:
                raise
            logger.warning("Failed to parse YAML in %s: %s", file_path.name, e)
            self.errors.append(DocumentError(path=file_path, error=str(e)))
            frontmatter = {}

        title, description, is_fallback = extract_metadata(
            content,
            file_path.name,
            frontmatter=frontmatter,
            case_sensitive=self.case_sensitive,
        )

        if is_fallback:
            logger.debug("No title in %s, using filename", file_path.name)
            if self.fallback_transform:
                title = self.fallback_transform(title)
        elif self.title_transform:
            title = self.title_transform(title)

        return DocumentMetadata(
            context=context,
            title=title,
            description=description,
            frontmatter=frontmatter,
        )
