"""Typed models for persisted article records."""

from .article import ArticleDatabase, ArticleRecord, DatabaseMetadata, E2SGRating, SdgRef

__all__ = ["ArticleDatabase", "ArticleRecord", "DatabaseMetadata", "E2SGRating", "SdgRef"]
