"""Adapter for the Apify *Google Search Scraper* actor.

Actor page: https://apify.com/apify/google-search-scraper

Each dataset item describes one SERP page and carries an ``organicResults``
array; every organic result becomes one :class:`ResultItem`.

Example raw item (abbreviated)::

    {
        "searchQuery": {
            "term": "plumber san jose",
            "countryCode": "US",
            "languageCode": "en"
        },
        "#runId": "abc123",
        "organicResults": [
            {
                "position": 1,
                "title": "Best Plumbers in San Jose",
                "url": "https://example.com/plumber-san-jose",
                "domain": "example.com",
                "description": "Top-rated local plumbers …"
            }
        ]
    }
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from result_item.adapters.base import BaseResultAdapter
from result_item.formats import WEB_PAGE
from result_item.models import ResultItem

logger = logging.getLogger(__name__)


def _extract_domain(url: str) -> Optional[str]:
    """Return the hostname from *url*, stripping any leading ``www.``."""
    host = urlparse(url).hostname
    if not host:
        return None
    return host.removeprefix("www.")


class ApifyGoogleSearchAdapter(BaseResultAdapter):
    """Normalize a single Apify Google Search Scraper dataset item.

    Results without a URL are dropped.
    """

    engine_id = "apify_google"

    def normalize(self, raw: Any) -> List[ResultItem]:
        if not isinstance(raw, dict):
            raise TypeError(
                f"Expected a dict, got {type(raw).__name__}"
            )

        search_query: Dict[str, Any] = raw.get("searchQuery") or {}
        language_code: Optional[str] = (
            search_query.get("languageCode") or raw.get("languageCode") or None
        )
        run_id = raw.get("#runId") or raw.get("runId") or None

        items: List[ResultItem] = []
        for position, hit in enumerate(raw.get("organicResults") or [], start=1):
            url: str = hit.get("url") or ""
            if not url:
                logger.debug("Skipping organic result %d without url", position)
                continue
            custom_data: Dict[str, Any] = {"rank": hit.get("position") or position}
            if run_id:
                custom_data["run_id"] = run_id
            items.append(
                self.build_item(
                    {
                        "unique_id": url,
                        "title": hit.get("title") or None,
                        "link": url,
                        "abstract": hit.get("description") or hit.get("snippet") or None,
                        "format": WEB_PAGE,
                        "language_code": language_code,
                        "source_title": hit.get("domain") or _extract_domain(url),
                        "custom_data": custom_data,
                    }
                )
            )
        return items
