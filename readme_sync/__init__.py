"""
readme-sync - Regenerate a README's listing of sibling markdown documents

Scans a directory for markdown files, reads each one's title and
description from its frontmatter, and writes them into the README as:
- A plain link list replacing the whole file
- A link list replacing everything from a section heading onward
- The data rows of an existing table
"""

from readme_sync.config import ConfigError, SyncConfig, load_config
from readme_sync.core.models import DocumentContext, DocumentError, DocumentMetadata, SpliceError, SyncResult
from readme_sync.core.discovery import DocumentDiscovery
from readme_sync.core.synchronizer import SectionSynchronizer, create_synchronizer_from_config

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "SyncConfig",
    "load_config",
    "DocumentContext",
    "DocumentError",
    "DocumentMetadata",
    "SpliceError",
    "SyncResult",
    "DocumentDiscovery",
    "SectionSynchronizer",
    "create_synchronizer_from_config",
]
