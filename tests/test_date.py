import time
from datetime import datetime, timezone

import pytest

from besiege.date import HttpDate, adjust, parse_http_date


def _utc(*fields):
    return int(datetime(*fields, tzinfo=timezone.utc).timestamp())


SOURCE_DATE = "Tue, 20-Mar-2007 14:31:38 GMT"


@pytest.mark.parametrize("text", ["", None])
def test_empty_input_is_zero(text):
    assert parse_http_date(text) == 0


def test_unknown_word_is_rejected():
    assert parse_http_date("Tue, 20 Blah 2007 14:31:38 GMT") == -1


def test_missing_year_is_rejected():
    assert parse_http_date("Tue, 20 Mar") == -1


def test_source_date_matches_utc():
    assert parse_http_date(SOURCE_DATE) == _utc(2007, 3, 20, 14, 31, 38)


@pytest.mark.parametrize(
    "text",
    [
        "Tuesday, 20 Mar 2007 14:31:38 GMT",
        "Tue Mar 20 14:31:38 2007",
        "tue, 20 mar 2007 14:31:38 gmt",
        "Tue, 20 Mar 2007 14:31:38 UTC",
    ],
)
def test_equivalent_forms(text):
    assert parse_http_date(text) == parse_http_date(SOURCE_DATE)


def test_named_zone_offset():
    est = parse_http_date("Tue, 20 Mar 2007 14:31:38 EST")
    assert est - parse_http_date(SOURCE_DATE) == 300 * 60


def test_numeric_zone_offset():
    plus_one = parse_http_date("Tue, 20 Mar 2007 14:31:38 +0100")
    assert plus_one == _utc(2007, 3, 20, 13, 31, 38)


def test_two_digit_year_counts_from_1900():
    assert parse_http_date("Thursday, 10-Jun-93 01:29:59 GMT") == _utc(1993, 6, 10, 1, 29, 59)


def test_date_without_time_is_midnight():
    assert parse_http_date("20 Mar 2007") == _utc(2007, 3, 20)


def test_rfc850_rendering():
    assert HttpDate(SOURCE_DATE).rfc850() == "Wed, 20 Mar 107 14:31:38 GMT"


def test_str_rendering():
    assert str(HttpDate(SOURCE_DATE)) == "Tue, 2007-03-20 14:31:38 "


def test_stamp_rendering():
    assert HttpDate(SOURCE_DATE).stamp() == "[Tue, 2007-03-20 14:31:38] "


def test_year_1900_has_no_rfc850():
    assert HttpDate("01 Jan 0").rfc850() == ""


def test_past_date_is_expired():
    assert HttpDate(SOURCE_DATE).expired() is True


def test_future_date_is_not_expired():
    assert HttpDate("01 Jan 2037 00:00:00 GMT").expired() is False


def test_default_is_now():
    before = int(time.time())
    moment = HttpDate().moment
    after = int(time.time())
    assert before <= moment.timestamp() <= after + 1


def test_etag_behaviour():
    tag = HttpDate.from_etag('"abc"')
    assert str(tag) == '"abc"'
    assert tag.moment is None
    assert tag.expired() is True
    assert tag.rfc850() == ""


def test_missing_etag_becomes_empty():
    assert HttpDate.from_etag(None).etag == ""


def test_parsed_moment_matches_parser():
    assert HttpDate(SOURCE_DATE).moment.timestamp() == parse_http_date(SOURCE_DATE)


def test_adjust_of_invalid_time_is_zero():
    assert adjust(-1, 10) == 0


def test_adjust_moves_forward():
    start = 1000
    assert adjust(start, 60) == start + 60


def test_adjust_overflow():
    assert adjust(1000, 2**31) == -1