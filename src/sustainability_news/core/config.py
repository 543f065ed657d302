from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from sustainability_news.core.constants import PILLAR_DEFAULT_SDGS as _PILLAR_DEFAULT_SDGS

load_dotenv(dotenv_path=Path(__file__).resolve().parents[3] / ".env")


def _env_int(name: str, default: int) -> int:
    """정수형 환경변수를 안전하게 파싱."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _env_float(name: str, default: float) -> float:
    """실수형 환경변수를 안전하게 파싱."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _parse_pillar_sdgs(raw: str, default: dict[str, tuple[int, ...]]) -> dict[str, tuple[int, ...]]:
    """'environmental:13,14,15;social:1,2' 형태를 pillar -> SDG 튜플로 파싱.

    명시되지 않은 pillar는 기본값을 유지한다.
    """
    result = dict(default)
    for chunk in (raw or "").split(";"):
        if ":" not in chunk:
            continue
        pillar, _, ids = chunk.partition(":")
        pillar = pillar.strip().lower()
        if pillar not in result:
            continue
        parsed: list[int] = []
        for x in ids.split(","):
            x = x.strip()
            if x.isdigit() and 1 <= int(x) <= 17:
                parsed.append(int(x))
        if parsed:
            result[pillar] = tuple(parsed)
    return result


# ==========================================
# 수집 대상 소스
# ==========================================

SOURCES = [
    # Environment
    {
        "name": "Guardian Environment",
        "category": "environmental",
        "kind": "html",
        "baseUrl": "https://www.theguardian.com",
        "searchUrl": "https://www.theguardian.com/environment",
        "selectors": {
            "articles": ".fc-item, .u-faux-block-link",
            "title": ".fc-item__title, .u-faux-block-link__overlay",
            "link": ".fc-item__link, .u-faux-block-link__overlay",
            "summary": ".fc-item__standfirst, .fc-item__kicker",
            "date": ".fc-item__timestamp, time",
        },
    },
    {
        "name": "BBC News Environment",
        "category": "environmental",
        "kind": "html",
        "baseUrl": "https://www.bbc.com",
        "searchUrl": "https://www.bbc.com/news/science-environment",
        "selectors": {
            "articles": '[data-testid="liverpool-card"], .gs-c-promo',
            "title": '[data-testid="card-headline"], .gs-c-promo-heading__title',
            "link": "a",
            "summary": '[data-testid="card-description"], .gs-c-promo-summary',
            "date": "time, .gs-c-timestamp",
        },
    },
    {
        "name": "UNEP – News & Stories",
        "category": "environmental",
        "kind": "html",
        "baseUrl": "https://www.unep.org",
        "searchUrl": "https://www.unep.org/news-and-stories",
        "selectors": {
            "articles": "article, .views-row",
            "title": "h3 a, .story__title a",
            "link": "h3 a, .story__title a",
            "summary": "p, .story__summary",
            "date": "time, .story__date",
        },
    },
    # Economic
    {
        "name": "UNEP Finance Initiative (UNEP-FI)",
        "category": "economic",
        "kind": "html",
        "baseUrl": "https://www.unepfi.org",
        "searchUrl": "https://www.unepfi.org/news",
        "selectors": {
            "articles": "article, .post",
            "title": "h2 a, h3 a, .entry-title a",
            "link": "h2 a, h3 a, .entry-title a",
            "summary": ".entry-summary, p",
            "date": "time, .entry-date",
        },
    },
    {
        "name": "Reuters Sustainable Business",
        "category": "economic",
        "kind": "html",
        "baseUrl": "https://www.reuters.com",
        "searchUrl": "https://www.reuters.com/business/sustainable-business/",
        "selectors": {
            "articles": '[data-testid="MediaStoryCard"], article',
            "title": '[data-testid="Heading"], h3',
            "link": 'a[data-testid="Link"], a',
            "summary": '[data-testid="Description"], p',
            "date": "time",
        },
    },
    # Social
    {
        "name": "Guardian Global Development",
        "category": "social",
        "kind": "html",
        "baseUrl": "https://www.theguardian.com",
        "searchUrl": "https://www.theguardian.com/global-development",
        "selectors": {
            "articles": ".fc-item, .u-faux-block-link",
            "title": ".fc-item__title, .u-faux-block-link__overlay",
            "link": ".fc-item__link, .u-faux-block-link__overlay",
            "summary": ".fc-item__standfirst",
            "date": "time",
        },
    },
    {
        "name": "UN News – Sustainable Development Goals",
        "category": "social",
        "kind": "rss",
        "baseUrl": "https://news.un.org",
        "searchUrl": "https://news.un.org/feed/subscribe/en/news/topic/sdgs/feed/rss.xml",
        "selectors": {},
    },
    {
        "name": "UNDP News Centre",
        "category": "social",
        "kind": "html",
        "baseUrl": "https://www.undp.org",
        "searchUrl": "https://www.undp.org/news-centre",
        "selectors": {
            "articles": ".content-card, article",
            "title": "h5, h4, h3",
            "link": "a",
            "summary": "p",
            "date": "time, .date",
        },
    },
    # Governance
    {
        "name": "ESG Dive Governance",
        "category": "economic",
        "kind": "html",
        "baseUrl": "https://www.esgdive.com",
        "searchUrl": "https://www.esgdive.com/topic/corporate-governance/",
        "selectors": {
            "articles": ".row.feed__item, li.feed__item",
            "title": ".feed__title a",
            "link": ".feed__title a",
            "summary": ".feed__description",
            "date": ".feed__date, time",
        },
    },
]

REPO_ROOT = Path(__file__).resolve().parents[3]
DATA_DIR = Path(os.getenv("DATA_DIR", str(REPO_ROOT / "data")))

DATABASE_JSON = os.getenv("DATABASE_JSON", str(DATA_DIR / "database.json"))
LATEST_JSON = os.getenv("LATEST_JSON", str(DATA_DIR / "scraped_news.json"))

# ==========================================
# 분류 기준 (근거 없이 조정된 값이므로 환경변수로 덮어쓸 수 있게 둔다)
# ==========================================

MIN_WORD_COUNT = _env_int("MIN_WORD_COUNT", 10)
MIN_CONFIDENCE = _env_float("MIN_CONFIDENCE", 0.02)
MAX_SDGS = _env_int("MAX_SDGS", 3)
FALLBACK_SDG_COUNT = _env_int("FALLBACK_SDG_COUNT", 2)
PILLAR_DEFAULT_SDGS = _parse_pillar_sdgs(os.getenv("PILLAR_DEFAULT_SDGS", ""), _PILLAR_DEFAULT_SDGS)

# ==========================================
# 집계/랭킹
# ==========================================

ACCEPT_CONFIDENCE = _env_float("ACCEPT_CONFIDENCE", 0.01)
CONFIDENCE_TIE_WINDOW = _env_float("CONFIDENCE_TIE_WINDOW", 0.01)
TOP_LIMIT = _env_int("TOP_LIMIT", 100)
HISTORY_LIMIT = _env_int("HISTORY_LIMIT", 1000)
MAX_AGE_DAYS = _env_int("MAX_AGE_DAYS", 0)  # 0이면 발행일 필터 비활성화

CLASSIFY_MAX_WORKERS = _env_int("CLASSIFY_MAX_WORKERS", 1)
SOURCE_DELAY_SEC = _env_float("SOURCE_DELAY_SEC", 3.0)
