"""Title transform factories for readme-sync.

These factories create transform functions applied to each document's
display title before it is formatted into a row.
"""

from pathlib import PurePath
from typing import Callable

import inflection
import titlecase as tc

TitleTransform = Callable[[str], str]


def identity() -> TitleTransform:
    """Create a pass-through transform that returns the title unchanged."""
    def transform(title: str) -> str:
        return title
    return transform


def title_case() -> TitleTransform:
    """Create a transform that converts titles to proper title case.

    Uses the titlecase library, so small words ("of", "and") stay lowercase.
    """
    def transform(title: str) -> str:
        return tc.titlecase(title)
    return transform


def humanize_filename() -> TitleTransform:
    """Create a transform that turns a filename into a readable title.

    Drops the extension and splits dashes, underscores and CamelCase:
    ``fetch-records.md`` and ``FetchRecords.md`` both become ``Fetch records``.
    """
    def transform(filename: str) -> str:
        stem = PurePath(filename).stem
        words = inflection.underscore(stem.replace('-', '_').replace(' ', '_'))
        return inflection.humanize(words) or filename
    return transform
