"""Language lookup for result records.

Producers set an ISO 639-1 (two letter) or ISO 639-3 (three letter) code,
and display names plus the other code form are derived from the ISO 639-3
tables shipped with :mod:`pycountry`. Names are English.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

import pycountry

logger = logging.getLogger(__name__)


def find_language(code: Optional[str]) -> Optional[Any]:
    """Return the pycountry language record for *code*, or ``None``.

    Three-letter codes are tried as ISO 639-3 first and then as ISO 639-2/B
    bibliographic codes (``"fre"``, ``"ger"``).
    """
    if not code:
        return None
    key = code.strip().lower()

    language = None
    if len(key) == 2:
        language = pycountry.languages.get(alpha_2=key)
    elif len(key) == 3:
        language = pycountry.languages.get(alpha_3=key)
        if language is None:
            language = pycountry.languages.get(bibliographic=key)

    if language is None:
        logger.debug("No language found for code %r", code)
    return language


class LanguageResolver:
    """Language state of a single record.

    Holds the producer's code, an optional explicit display string, and the
    lookup result for the current code. The cache remembers which code it
    was computed for, so changing ``code`` after a lookup is safe.

    Not synchronized. Concurrent first lookups may each query pycountry,
    but the lookup is pure so they all store the same answer.
    """

    def __init__(
        self,
        code: Optional[str] = None,
        display_override: Optional[str] = None,
    ) -> None:
        self.code = code
        self.display_override = display_override
        self._cache: Optional[Tuple[str, Optional[Any]]] = None

    @property
    def language(self) -> Optional[Any]:
        """Lookup result for the current code, computed once per code value."""
        code = self.code
        if code is None:
            return None
        cache = self._cache
        if cache is None or cache[0] != code:
            cache = (code, find_language(code))
            self._cache = cache
        return cache[1]

    @property
    def display_string(self) -> Optional[str]:
        if self.display_override is not None:
            return self.display_override
        language = self.language
        return language.name if language is not None else None

    @property
    def iso_639_1(self) -> Optional[str]:
        # Many ISO 639-3 languages have no two-letter code
        return getattr(self.language, "alpha_2", None)

    @property
    def iso_639_3(self) -> Optional[str]:
        return getattr(self.language, "alpha_3", None)
