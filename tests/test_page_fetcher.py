from __future__ import annotations

import requests

from sustainability_news.scrapers.fetcher_config import FetcherConfig
from sustainability_news.scrapers.page_fetcher import PageFetcher

SOURCE = {
    "name": "Guardian Environment",
    "baseUrl": "https://www.theguardian.com",
    "searchUrl": "https://www.theguardian.com/environment",
    "selectors": {
        "articles": ".fc-item",
        "title": ".fc-item__title",
        "link": ".fc-item__link",
        "summary": ".fc-item__standfirst",
        "date": "time",
    },
}

LISTING_HTML = """
<html><body>
  <div class="fc-item">
    <h3 class="fc-item__title">Solar farms expand across the region</h3>
    <a class="fc-item__link" href="/environment/solar">read</a>
    <div class="fc-item__standfirst">Renewable energy capacity reached a new record this year.</div>
    <time datetime="2024-01-01T10:00:00Z">1 Jan</time>
  </div>
  <div class="fc-item">
    <h3 class="fc-item__title">Headline without any link at all</h3>
  </div>
</body></html>
"""


class _Response:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code


class _Session:
    def __init__(self, outcomes: list) -> None:
        self._outcomes = list(outcomes)
        self.calls: list[str] = []

    def get(self, url: str, **_kwargs) -> _Response:
        self.calls.append(url)
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _fetcher(session: _Session, sleeps: list[float], **config) -> PageFetcher:
    params = dict(max_retries=3, backoff_base_sec=1.0, max_articles_per_source=25)
    params.update(config)
    return PageFetcher(FetcherConfig(**params), session=session, sleep_func=sleeps.append)


def test_fetch_parses_listing_with_source_selectors() -> None:
    sleeps: list[float] = []
    candidates = _fetcher(_Session([_Response(LISTING_HTML)]), sleeps).fetch(SOURCE)
    assert candidates == [
        {
            "title": "Solar farms expand across the region",
            "link": "/environment/solar",
            "summary": "Renewable energy capacity reached a new record this year.",
            "sourceName": "Guardian Environment",
            "baseUrl": "https://www.theguardian.com",
            "publishedAt": "2024-01-01T10:00:00Z",
        }
    ]
    assert sleeps == []


def test_fetch_retries_with_backoff_after_connection_error() -> None:
    sleeps: list[float] = []
    session = _Session([requests.ConnectionError("boom"), _Response(LISTING_HTML)])
    candidates = _fetcher(session, sleeps).fetch(SOURCE)
    assert len(candidates) == 1
    assert sleeps == [2.0]
    assert len(session.calls) == 2


def test_fetch_retries_server_errors() -> None:
    sleeps: list[float] = []
    session = _Session([_Response("", 503), _Response("", 502), _Response(LISTING_HTML)])
    candidates = _fetcher(session, sleeps).fetch(SOURCE)
    assert len(candidates) == 1
    assert sleeps == [2.0, 4.0]


def test_fetch_gives_up_after_max_retries() -> None:
    sleeps: list[float] = []
    session = _Session([requests.Timeout("slow"), requests.Timeout("slow")])
    assert _fetcher(session, sleeps, max_retries=2).fetch(SOURCE) == []
    assert sleeps == [2.0]


def test_fallback_selectors_when_source_selectors_miss() -> None:
    html = """
    <article>
      <h2>Wind energy jobs grow across the coast</h2>
      <a href="https://example.org/wind">more</a>
      <p>Offshore wind projects are hiring thousands of workers.</p>
    </article>
    """
    source = {**SOURCE, "selectors": {}}
    candidates = _fetcher(_Session([_Response(html)]), []).fetch(source)
    assert len(candidates) == 1
    assert candidates[0]["title"] == "Wind energy jobs grow across the coast"
    assert candidates[0]["link"] == "https://example.org/wind"
    assert candidates[0]["summary"] == "Offshore wind projects are hiring thousands of workers."
    assert candidates[0]["publishedAt"] == ""


def test_per_source_cap() -> None:
    items = "".join(
        f'<div class="fc-item"><h3 class="fc-item__title">Story number {i} about climate</h3>'
        f'<a class="fc-item__link" href="/s/{i}">x</a></div>'
        for i in range(5)
    )
    candidates = _fetcher(_Session([_Response(items)]), [], max_articles_per_source=3).fetch(SOURCE)
    assert [c["link"] for c in candidates] == ["/s/0", "/s/1", "/s/2"]


def test_no_containers_returns_empty() -> None:
    assert _fetcher(_Session([_Response("<html><body><p>nothing</p></body></html>")]), []).fetch(SOURCE) == []
