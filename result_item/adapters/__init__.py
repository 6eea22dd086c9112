"""result_item.adapters package."""

from result_item.adapters.base import BaseResultAdapter
from result_item.adapters.apify import ApifyGoogleSearchAdapter

__all__ = ["BaseResultAdapter", "ApifyGoogleSearchAdapter"]
