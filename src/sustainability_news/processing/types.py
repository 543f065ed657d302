from __future__ import annotations

from typing import Callable, NotRequired, TypedDict


class SourceSelectors(TypedDict, total=False):
    articles: str
    title: str
    link: str
    summary: str
    date: str


class SourceDescriptor(TypedDict):
    name: str
    baseUrl: str
    searchUrl: str
    category: NotRequired[str]
    kind: NotRequired[str]
    selectors: NotRequired[SourceSelectors]


class RawCandidate(TypedDict, total=False):
    title: str
    link: str
    summary: str
    sourceName: str
    baseUrl: str
    publishedAt: str


LogFunc = Callable[[str], None]
GovernanceFunc = Callable[[], int]
