"""Classification, rating, assembly and aggregation of news candidates."""

__all__ = [
    "aggregation",
    "assembler",
    "classifier",
    "keywords",
    "pipeline",
    "rating",
    "types",
]
