"""Normalized search result records.

Every engine adapter converts its native hits into :class:`ResultItem`
instances. Decorators, renderers and exporters read *only* this format,
whatever engine the hit came from.

Any field except ``authors``, ``other_links`` and ``custom_data`` may be
``None``; consumers should be prepared for that.

Example::

    ResultItem(
        {
            "title": "Thinking, Fast and Slow",
            "format": "Book",
            "language_code": "en",
            "year": 2011,
            "authors": [Author(first="Daniel", last="Kahneman")],
            "engine_id": "catalog",
        }
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from result_item.exceptions import UnknownFieldError
from result_item.formats import FormatValue, schema_org_type_url, validate_format
from result_item.language import LanguageResolver


@dataclass
class Link:
    """An additional labeled link attached to a result."""

    url: str
    label: Optional[str] = None
    rel: Optional[str] = None  # e.g. "alternate"
    type: Optional[str] = None  # MIME type of the target, if known
    style_classes: List[str] = field(default_factory=list)
    target: Optional[str] = None  # HTML target, e.g. "_blank"


@dataclass
class Author:
    """An author name, structured where the engine allows it."""

    first: Optional[str] = None
    last: Optional[str] = None
    middle: Optional[str] = None
    display: Optional[str] = None  # preformatted name, used as-is

    def display_name(self) -> Optional[str]:
        """Return ``display`` if set, otherwise ``"Last, First Middle"``."""
        if self.display:
            return self.display
        given = " ".join(part for part in (self.first, self.middle) if part)
        if self.last and given:
            return f"{self.last}, {given}"
        return self.last or given or None


# Canonical field names, in declaration order
_FIELDS: Tuple[str, ...] = (
    "unique_id",
    "suppress_link_generation",
    "other_links",
    "title",
    "link",
    "link_is_fulltext",
    "format",
    "format_display_string",
    "language_code",
    "language_display_string",
    "year",
    "publication_date",
    "volume",
    "issue",
    "start_page",
    "end_page",
    "source_title",
    "issn",
    "isbn",
    "oclc_number",
    "doi",
    "publisher",
    "external_citation_blob",
    "abstract",
    "authors",
    "custom_data",
    "decorator_reference",
    "display_configuration",
    "engine_id",
)

# Older names kept for backwards compatibility → canonical field
_ALIASES: Dict[str, str] = {
    "complete_title": "title",
    "journal_title": "source_title",
    "container_title": "source_title",
}

# Fields stored behind properties rather than in a slot of their own
_DERIVED_STORAGE = {"format", "language_code", "language_display_string"}


class ResultItem:
    """A single search hit, normalized across engines.

    Construct from a mapping of field name to value, keyword arguments, or
    both (keywords are applied after the mapping). Unknown names raise
    :class:`~result_item.exceptions.UnknownFieldError` before anything is
    assigned.

    Fields
    ------
    unique_id:
        Engine-native identifier, if the engine has one.
    suppress_link_generation:
        When true, link generators (OpenURL and the like) must produce
        nothing for this item. The record only carries the flag.
    other_links:
        :class:`Link` objects beyond the main ``link``; decorators often
        add these.
    title:
        Complete title. Also available as ``complete_title``.
    link:
        Main URL, usually the engine's own page for the hit.
    link_is_fulltext:
        ``True``/``False``, or ``None`` when unknown.
    format:
        ``str`` schema.org type name or :class:`ResultFormat` tag.
    format_display_string:
        Uncontrolled format label shown in place of ``format``.
    language_code, language_display_string:
        ISO 639-1/639-3 code, and a display string that overrides the name
        derived from the code.
    year, publication_date:
        ``int`` year and ``datetime.date``.
    source_title:
        Container title: journal, book for a chapter, site for a page.
        Also available as ``journal_title`` and ``container_title``.
    external_citation_blob:
        Pre-encoded citation context (e.g. an OpenURL KEV context object)
        supplied by the engine when it beats one built from the fields.
    abstract:
        Short summary. If it contains markup the producer must sanitize it
        and mark it safe.
    authors:
        Ordered :class:`Author` objects.
    custom_data:
        Engine-private data outside the common fields.
    decorator_reference, display_configuration, engine_id:
        Copied from the engine configuration that produced the item.
    """

    __slots__ = tuple(
        name for name in _FIELDS if name not in _DERIVED_STORAGE
    ) + ("_format", "_language")

    def __init__(
        self, fields: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> None:
        values = self._checked(fields, kwargs)

        for name in _FIELDS:
            if name not in _DERIVED_STORAGE:
                setattr(self, name, None)
        self.suppress_link_generation = False
        self._format: Optional[FormatValue] = None
        self._language = LanguageResolver()

        self._apply(values)

        # Each item owns its containers
        if self.authors is None:
            self.authors = []
        if self.other_links is None:
            self.other_links = []
        if self.custom_data is None:
            self.custom_data = {}

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        """Canonical field names, in declaration order."""
        return _FIELDS

    @staticmethod
    def _checked(
        fields: Optional[Mapping[str, Any]], kwargs: Mapping[str, Any]
    ) -> List[Tuple[str, Any]]:
        values = list((fields or {}).items()) + list(kwargs.items())
        unknown = [
            name for name, _ in values if name not in _FIELDS and name not in _ALIASES
        ]
        if unknown:
            raise UnknownFieldError(unknown)
        for name, value in values:
            if name == "format":
                validate_format(value)
        return values

    def _apply(self, values: List[Tuple[str, Any]]) -> None:
        for name, value in values:
            setattr(self, _ALIASES.get(name, name), value)

    def update(
        self, fields: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> None:
        """Set several fields at once, with the same checks as construction.

        Nothing is assigned if any name is unknown.
        """
        self._apply(self._checked(fields, kwargs))

    # ------------------------------------------------------------------
    # Format
    # ------------------------------------------------------------------

    @property
    def format(self) -> Optional[FormatValue]:
        return self._format

    @format.setter
    def format(self, value: Optional[FormatValue]) -> None:
        self._format = validate_format(value)

    @property
    def schema_org_type_url(self) -> Optional[str]:
        """schema.org type URL for ``format``, e.g. ``http://schema.org/Book``."""
        return schema_org_type_url(self._format)

    # ------------------------------------------------------------------
    # Language
    # ------------------------------------------------------------------

    @property
    def language_code(self) -> Optional[str]:
        return self._language.code

    @language_code.setter
    def language_code(self, value: Optional[str]) -> None:
        self._language.code = value

    @property
    def language_display_string(self) -> Optional[str]:
        """Explicitly set display string, else the English name for ``language_code``."""
        return self._language.display_string

    @language_display_string.setter
    def language_display_string(self, value: Optional[str]) -> None:
        self._language.display_override = value

    @property
    def language(self) -> Optional[Any]:
        """pycountry language record for ``language_code``, if it is known."""
        return self._language.language

    @property
    def language_iso_639_1(self) -> Optional[str]:
        return self._language.iso_639_1

    @property
    def language_iso_639_3(self) -> Optional[str]:
        return self._language.iso_639_3

    # ------------------------------------------------------------------
    # Aliases
    # ------------------------------------------------------------------

    @property
    def complete_title(self) -> Optional[str]:
        return self.title

    @complete_title.setter
    def complete_title(self, value: Optional[str]) -> None:
        self.title = value

    @property
    def journal_title(self) -> Optional[str]:
        return self.source_title

    @journal_title.setter
    def journal_title(self, value: Optional[str]) -> None:
        self.source_title = value

    @property
    def container_title(self) -> Optional[str]:
        return self.source_title

    @container_title.setter
    def container_title(self, value: Optional[str]) -> None:
        self.source_title = value

    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Canonical field → value. Containers are copied, their elements are not."""
        result: Dict[str, Any] = {}
        for name in _FIELDS:
            value = getattr(self, name)
            if isinstance(value, (list, dict)):
                value = value.copy()
            result[name] = value
        # The explicit override, not the derived name
        result["language_display_string"] = self._language.display_override
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = []
        for name, value in self.to_dict().items():
            if value is None or isinstance(value, (list, dict)):
                continue
            if name == "suppress_link_generation" and not value:
                continue
            parts.append(f"{name}={value!r}")
        return f"ResultItem({', '.join(parts)})"

