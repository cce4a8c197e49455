"""Core components for readme-sync."""

from readme_sync.core.models import DocumentContext, DocumentError, DocumentMetadata, SpliceError, SyncResult
from readme_sync.core.discovery import DocumentDiscovery
from readme_sync.core.splicer import overwrite_all, replace_section, replace_table
from readme_sync.core.synchronizer import SectionSynchronizer, create_synchronizer_from_config

__all__ = [
    "DocumentContext",
    "DocumentError",
    "DocumentMetadata",
    "SpliceError",
    "SyncResult",
    "DocumentDiscovery",
    "overwrite_all",
    "replace_section",
    "replace_table",
    "SectionSynchronizer",
    "create_synchronizer_from_config",
]
