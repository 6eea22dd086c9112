"""result_item – normalized search result records and engine adapters."""

from result_item.exceptions import UnknownFieldError
from result_item.formats import SCHEMA_ORG_BASE_URL, ResultFormat, schema_org_type_url
from result_item.language import LanguageResolver, find_language
from result_item.models import Author, Link, ResultItem
from result_item.adapters.base import BaseResultAdapter
from result_item.adapters.apify import ApifyGoogleSearchAdapter

__all__ = [
    "Author",
    "Link",
    "ResultItem",
    "ResultFormat",
    "SCHEMA_ORG_BASE_URL",
    "schema_org_type_url",
    "LanguageResolver",
    "find_language",
    "UnknownFieldError",
    "BaseResultAdapter",
    "ApifyGoogleSearchAdapter",
]
