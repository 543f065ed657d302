import datetime

from sustainability_news.utils import (
    clean_text,
    estimate_read_time_minutes,
    normalize_for_matching,
    parse_datetime_utc,
    round_half_up,
    slugify_source,
    to_iso_utc,
    truncate,
)


def test_clean_text_strips_html_and_ws() -> None:
    assert clean_text("  hello&nbsp;<b>world</b>\n") == "hello world"


def test_normalize_for_matching_lowercases_and_collapses() -> None:
    assert normalize_for_matching("  Renewable\n\tENERGY  now ") == "renewable energy now"


def test_round_half_up_differs_from_bankers_rounding() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(4.75, 1) == 4.8
    assert round_half_up(5.25, 1) == 5.3


def test_read_time_is_at_least_one_minute() -> None:
    assert estimate_read_time_minutes("") == 1
    assert estimate_read_time_minutes("word " * 200) == 1
    assert estimate_read_time_minutes("word " * 201) == 2


def test_truncate_and_slug() -> None:
    assert truncate("abcdef", 3) == "abc"
    assert slugify_source("Guardian  Environment") == "guardian-environment"


def test_parse_datetime_accepts_iso_and_rfc822() -> None:
    iso = parse_datetime_utc("2024-01-01T10:00:00Z")
    rfc = parse_datetime_utc("Mon, 01 Jan 2024 10:00:00 GMT")
    assert iso == rfc == datetime.datetime(2024, 1, 1, 10, tzinfo=datetime.timezone.utc)
    assert parse_datetime_utc("not a date") is None
    assert parse_datetime_utc("") is None


def test_to_iso_utc_uses_millisecond_z_format() -> None:
    dt = datetime.datetime(2024, 1, 1, 9, 30, tzinfo=datetime.timezone(datetime.timedelta(hours=9)))
    assert to_iso_utc(dt) == "2024-01-01T00:30:00.000Z"
