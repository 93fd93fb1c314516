import time

import pytest

from besiege.cookie import Cookie, CookieParseError, parse_cookie, parse_cookie_time


def test_basic_attributes():
    cookie = parse_cookie("exes=X; path=/; domain=.example.com", "www.example.com")
    assert cookie.name == "exes"
    assert cookie.value == "X"
    assert cookie.path == "/"
    assert cookie.domain == ".example.com"
    assert cookie.session is True


def test_none_raises():
    with pytest.raises(CookieParseError):
        parse_cookie(None, "www.example.com")


def test_default_domain_from_host():
    cookie = parse_cookie("a=1", "www.example.com")
    assert cookie.domain == ".example.com"


def test_default_domain_without_dot():
    cookie = parse_cookie("a=1", "localhost")
    assert cookie.domain == "."


def test_future_expiry_makes_persistent_cookie():
    cookie = parse_cookie("exes=X; expires=Fri, 01-May-2099 12:51:25 GMT", "www.example.com")
    assert cookie.session is False
    assert cookie.expires > time.time()


def test_past_expiry_is_session_cookie():
    cookie = parse_cookie("exes=X; expires=Fri, 01-May-2001 12:51:25 GMT", "www.example.com")
    assert cookie.expires == 0
    assert cookie.session is True


def test_max_age_alone_stays_session():
    cookie = parse_cookie("a=1; max-age=3600", "www.example.com")
    assert cookie.session is True


def test_parsing_stops_at_attribute_without_equals():
    cookie = parse_cookie("a=1; secure; b=2", "www.example.com")
    assert cookie.name == "a"
    assert cookie.value == "1"
    assert cookie.secure is False


def test_secure_with_value():
    cookie = parse_cookie("a=1; secure=yes", "www.example.com")
    assert cookie.secure is True


def test_delta_seconds():
    assert parse_cookie_time("3600") == 3600


def test_empty_time():
    assert parse_cookie_time("") == 0
    assert parse_cookie_time(None) == 0


def test_three_formats_agree():
    rfc850 = parse_cookie_time("Thursday, 10-Jun-2093 01:29:59 GMT")
    rfc1123 = parse_cookie_time("Thu, 10 Jun 2093 01:29:59 GMT")
    asctime = parse_cookie_time("Wed Jun 10 01:29:59 2093 GMT")
    assert rfc850 == rfc1123 == asctime
    assert rfc850 > time.time()


def test_past_date_gives_zero():
    assert parse_cookie_time("Thu, 10 Jun 1999 01:29:59 GMT") == 0


def test_out_of_range_hour_gives_zero():
    assert parse_cookie_time("Thu, 10 Jun 2093 25:29:59 GMT") == 0


def test_short_string_gives_zero():
    assert parse_cookie_time("Thu, 10 Jun") == 0


def test_expires_string_round_trip():
    cookie = parse_cookie("a=1; expires=Thu, 10 Jun 2093 01:29:59 GMT", "www.example.com")
    assert "10 Jun 2093 01:29:59" in cookie.expires_string()


def test_str_format():
    cookie = parse_cookie("exes=X; domain=.example.com", "www.example.com")
    assert str(cookie) == "exes=X; domain=.example.com; path=/; expires=0"


def test_str_without_name_is_empty():
    cookie = parse_cookie("secure", "www.example.com")
    assert cookie.name is None
    assert str(cookie) == ""


def test_reset_value():
    cookie = parse_cookie("a=1", "www.example.com")
    cookie.reset_value("2")
    assert cookie.value == "2"


def test_clone_from():
    mine = parse_cookie("a=1; path=/x", "www.example.com")
    theirs = Cookie(name="a", value="9", domain=".other.example.com", path="/y",
                    expires=5000, session=False)
    result = mine.clone_from(theirs)
    assert result is mine
    assert mine.value == "9"
    assert mine.domain == ".other.example.com"
    assert mine.path == "/y"
    assert mine.expires == 0
    assert mine.session is False