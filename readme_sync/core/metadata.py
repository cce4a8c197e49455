"""Metadata extraction for markdown documents.

Titles and descriptions come from a leading YAML frontmatter block when one
parses cleanly, and otherwise from a loose ``key: "value"`` pattern anywhere in
the text, so documents with a hand-written metadata block still get listed.
"""

import re
from typing import Any, Dict, Optional, Tuple

import yaml

FIELD_PATTERN = r'{key}:\s*["\'](.+)["\']'

_patterns: Dict[Tuple[str, bool], "re.Pattern[str]"] = {}


def _field_pattern(key: str, case_sensitive: bool) -> "re.Pattern[str]":
    cache_key = (key, case_sensitive)
    if cache_key not in _patterns:
        flags = 0 if case_sensitive else re.IGNORECASE
        _patterns[cache_key] = re.compile(FIELD_PATTERN.format(key=re.escape(key)), flags)
    return _patterns[cache_key]


def parse_frontmatter(content: str) -> Dict[str, Any]:
    """Parse a leading YAML frontmatter block.

    Args:
        content: Full document text

    Returns:
        Frontmatter dict (empty if there is no block or it is not a mapping)

    Raises:
        yaml.YAMLError: If the block exists but is not valid YAML
    """
    if not content.startswith('---'):
        return {}

    parts = content.split('---\n', 2)
    if len(parts) < 3:
        return {}

    frontmatter = yaml.safe_load(parts[1])
    if not isinstance(frontmatter, dict):
        return {}

    return frontmatter


def _frontmatter_value(frontmatter: Dict[str, Any], key: str) -> Optional[str]:
    value = frontmatter.get(key)
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    text = str(value).strip()
    return text or None


def find_field(content: str, key: str, case_sensitive: bool = False) -> Optional[str]:
    """Find a quoted ``key: "value"`` anywhere in the text."""
    match = _field_pattern(key, case_sensitive).search(content)
    return match.group(1) if match else None


def extract_metadata(
    content: str,
    filename: str,
    frontmatter: Optional[Dict[str, Any]] = None,
    case_sensitive: bool = False,
) -> Tuple[str, str, bool]:
    """Extract a document's title and description.

    Never fails on malformed metadata: a title falls back to the filename
    (extension included) and a description to an empty string.

    Args:
        content: Raw document text
        filename: Name of the document, used as the fallback title
        frontmatter: Already parsed frontmatter; parsed from content when None
        case_sensitive: Match field keys case-sensitively in the raw text

    Returns:
        Tuple of (title, description, title_is_fallback)
    """
    if frontmatter is None:
        try:
            frontmatter = parse_frontmatter(content)
        except yaml.YAMLError:
            frontmatter = {}

    title = _frontmatter_value(frontmatter, 'title') or find_field(content, 'title', case_sensitive)
    description = (
        _frontmatter_value(frontmatter, 'description')
        or find_field(content, 'description', case_sensitive)
        or ""
    )

    if title is None:
        return filename, description, True
    return title, description, False
