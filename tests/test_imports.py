def test_package_imports() -> None:
    import sustainability_news  # noqa: F401

    from sustainability_news.core import config  # noqa: F401
    from sustainability_news.export import store  # noqa: F401
    from sustainability_news.processing import pipeline  # noqa: F401

    import pytest

    pytest.importorskip("feedparser")
    pytest.importorskip("bs4")
    from sustainability_news.export import news_exporter  # noqa: F401
    from sustainability_news.scrapers import source_fetcher  # noqa: F401


def test_default_data_paths() -> None:
    from sustainability_news.core.config import DATABASE_JSON, LATEST_JSON

    assert DATABASE_JSON.endswith("/data/database.json") or DATABASE_JSON.endswith("\\data\\database.json")
    assert LATEST_JSON.endswith("/data/scraped_news.json") or LATEST_JSON.endswith("\\data\\scraped_news.json")
