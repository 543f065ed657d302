"""Listing-page and RSS fetchers that produce raw article candidates."""

__all__ = ["feed_fetcher", "fetcher_config", "page_fetcher", "source_fetcher"]
