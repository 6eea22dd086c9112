"""Controlled vocabulary for ``ResultItem.format``.

A format is either a free-form string or a :class:`ResultFormat` tag.
String values are the last path segment of a schema.org CreativeWork type
(``"Book"`` for ``http://schema.org/Book``); tags cover kinds of material
schema.org has no type for.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union

SCHEMA_ORG_BASE_URL = "http://schema.org/"

# schema.org type names producers commonly use
ARTICLE = "Article"
BOOK = "Book"
MOVIE = "Movie"
MUSIC_RECORDING = "MusicRecording"
PHOTOGRAPH = "Photograph"
SOFTWARE_APPLICATION = "SoftwareApplication"
WEB_PAGE = "WebPage"
VIDEO_OBJECT = "VideoObject"
AUDIO_OBJECT = "AudioObject"


class ResultFormat(Enum):
    """Formats with no direct schema.org type."""

    serial = "serial"  # magazine or journal
    dissertation = "dissertation"  # dissertation or thesis
    conference_paper = "conference_paper"
    conference_proceedings = "conference_proceedings"
    report = "report"  # white paper or other report
    book_item = "book_item"  # section or excerpt from a book


FormatValue = Union[str, ResultFormat]

# Tags that still have a usable schema.org approximation
_SCHEMA_ORG_OVERRIDES: Dict[ResultFormat, str] = {
    ResultFormat.report: ARTICLE,
}


def validate_format(value: Optional[FormatValue]) -> Optional[FormatValue]:
    """Return *value* unchanged, or raise ``TypeError`` if it is not a format."""
    if value is None or isinstance(value, (str, ResultFormat)):
        return value
    raise TypeError(
        f"format must be a str or ResultFormat, got {type(value).__name__}"
    )


def schema_org_type_url(value: Optional[FormatValue]) -> Optional[str]:
    """Translate a format into a schema.org type URL, e.g. ``http://schema.org/Book``.

    Free strings are trusted as schema.org type names. Returns ``None`` for
    a missing format or a tag with no schema.org counterpart.
    """
    if isinstance(value, str):
        return SCHEMA_ORG_BASE_URL + value
    if isinstance(value, ResultFormat):
        mapped = _SCHEMA_ORG_OVERRIDES.get(value)
        if mapped is not None:
            return SCHEMA_ORG_BASE_URL + mapped
    return None
