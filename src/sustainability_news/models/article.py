from __future__ import annotations

from typing import NotRequired, TypedDict


class SdgRef(TypedDict):
    id: int
    title: str
    description: str
    color: str
    icon: str


class E2SGRating(TypedDict):
    environmental: int
    economic: int
    social: int
    governance: int
    overall: float


class ArticleRecord(TypedDict):
    id: str
    title: str
    summary: str
    content: str
    author: str
    source: str
    sourceUrl: str
    publishedAt: str
    scrapedAt: str
    imageUrl: str
    pillar: str
    sdgs: list[SdgRef]
    tags: list[str]
    readTime: int
    impactScore: int
    e2sgRating: E2SGRating
    region: str
    confidence: float


class ConfidenceDistribution(TypedDict):
    high: int
    medium: int
    low: int


class DatabaseMetadata(TypedDict):
    totalArticles: int
    lastScrapingRun: NotRequired[str]
    newArticlesAdded: NotRequired[int]
    sources: list[str]
    pillarDistribution: dict[str, int]
    averageConfidence: float
    confidenceDistribution: ConfidenceDistribution


class ArticleDatabase(TypedDict):
    articles: list[ArticleRecord]
    lastUpdated: str | None
    metadata: DatabaseMetadata | dict
