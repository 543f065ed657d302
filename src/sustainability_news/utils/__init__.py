from .common import (
    clamp,
    clean_text,
    clean_text_ws,
    estimate_read_time_minutes,
    normalize_for_matching,
    parse_datetime_utc,
    round_half_up,
    slugify_source,
    to_iso_utc,
    truncate,
    utc_now,
    word_count,
)

__all__ = [
    "clamp",
    "clean_text",
    "clean_text_ws",
    "estimate_read_time_minutes",
    "normalize_for_matching",
    "parse_datetime_utc",
    "round_half_up",
    "slugify_source",
    "to_iso_utc",
    "truncate",
    "utc_now",
    "word_count",
]
