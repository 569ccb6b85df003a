"""Tests for setcookie.parser — single Set-Cookie value parsing."""

import logging
from datetime import UTC, datetime
from urllib.parse import quote

import pytest

from setcookie.config import ParseOptions
from setcookie.cookie import INVALID, SetCookie
from setcookie.errors import CookieDecodeError
from setcookie.parser import parse_max_age, parse_one, percent_decode

COMPLEX = (
    "foo=bar; Max-Age=1000; Domain=.example.com; Path=/; "
    "Expires=Tue, 01 Jul 2025 10:01:11 GMT; HttpOnly; Secure"
)

NOT_UTF8 = "R%F3r%EB%80%8DP%FF%3B%2C%23%9A%0CU%8E%A2C8%D7%3C%3C%B0%DF%17%60%F7Y%DB%16%8BQ%D6%1A"


class TestNameValue:
    def test_simple(self) -> None:
        assert parse_one("foo=bar;").to_dict() == {"name": "foo", "value": "bar"}

    def test_no_trailing_semicolon(self) -> None:
        assert parse_one("foo=bar").to_dict() == {"name": "foo", "value": "bar"}

    def test_no_equals_gives_empty_name(self) -> None:
        assert parse_one("foo;").to_dict() == {"name": "", "value": "foo"}

    def test_no_equals_with_attributes(self) -> None:
        cookie = parse_one("foo;SameSite=None;Secure")
        assert cookie.to_dict() == {"name": "", "value": "foo", "sameSite": "None", "secure": True}

    def test_value_keeps_later_equals(self) -> None:
        cookie = parse_one(
            "foo=bar=bar&foo=foo&John=Doe&Doe=John; Max-Age=1000; Domain=.example.com; "
            "Path=/; HttpOnly; Secure"
        )
        assert cookie.name == "foo"
        assert cookie.value == "bar=bar&foo=foo&John=Doe&Doe=John"
        assert cookie.max_age == 1000

    def test_empty_value(self) -> None:
        assert parse_one("foo=").to_dict() == {"name": "foo", "value": ""}

    def test_empty_name(self) -> None:
        assert parse_one("=bar").to_dict() == {"name": "", "value": "bar"}

    def test_empty_string(self) -> None:
        cookie = parse_one("")
        assert cookie.name == ""
        assert cookie.value == ""

    def test_blank_parts_skipped(self) -> None:
        cookie = parse_one(" ;  ; foo=bar; ;Path=/")
        assert cookie.name == " foo"
        assert cookie.value == "bar"
        assert cookie.path == "/"

    @pytest.mark.parametrize(
        ("text", "name", "value"),
        [
            ("a=1", "a", "1"),
            ("session_id=abc123", "session_id", "abc123"),
            ("token=abc=def=", "token", "abc=def="),
            ("x=", "x", ""),
        ],
    )
    def test_plain_pairs_have_no_extra_keys(self, text: str, name: str, value: str) -> None:
        assert parse_one(text).to_dict() == {"name": name, "value": value}


class TestAttributes:
    def test_complex_header(self) -> None:
        assert parse_one(COMPLEX).to_dict() == {
            "name": "foo",
            "value": "bar",
            "path": "/",
            "expires": datetime(2025, 7, 1, 10, 1, 11, tzinfo=UTC),
            "maxAge": 1000,
            "domain": ".example.com",
            "secure": True,
            "httpOnly": True,
        }

    def test_complex_header_fields(self) -> None:
        cookie = parse_one(COMPLEX)
        assert cookie.domain == ".example.com"
        assert cookie.path == "/"
        assert cookie.http_only is True
        assert cookie.secure is True
        assert cookie.same_site is None
        assert dict(cookie.extras) == {}

    @pytest.mark.parametrize("key", ["Max-Age", "MAX-AGE", "max-age", "mAx-AgE"])
    def test_max_age_case_insensitive(self, key: str) -> None:
        assert parse_one(f"a=1; {key}=60").max_age == 60

    @pytest.mark.parametrize("key", ["Secure", "SECURE", "secure"])
    def test_secure_case_insensitive(self, key: str) -> None:
        assert parse_one(f"a=1; {key}").secure is True

    def test_flag_value_ignored(self) -> None:
        cookie = parse_one("a=1; Secure=false; HttpOnly=0")
        assert cookie.secure is True
        assert cookie.http_only is True

    def test_flags_default_false(self) -> None:
        cookie = parse_one("a=1")
        assert cookie.secure is False
        assert cookie.http_only is False

    @pytest.mark.parametrize("same_site", ["Lax", "Strict", "None", "whatever"])
    def test_same_site_verbatim(self, same_site: str) -> None:
        assert parse_one(f"a=1; SameSite={same_site}").same_site == same_site

    def test_unknown_attributes_go_to_extras(self) -> None:
        cookie = parse_one("a=1; Priority=High; Partitioned; X-Thing=a=b")
        assert dict(cookie.extras) == {"priority": "High", "partitioned": "", "x-thing": "a=b"}

    def test_extras_appear_in_dict(self) -> None:
        assert parse_one("a=1; Priority=High").to_dict() == {
            "name": "a",
            "value": "1",
            "priority": "High",
        }

    def test_repeated_attribute_last_wins(self) -> None:
        cookie = parse_one("a=1; Path=/one; Path=/two; Priority=Low; Priority=High")
        assert cookie.path == "/two"
        assert cookie.extras["priority"] == "High"

    def test_attribute_values_not_decoded(self) -> None:
        cookie = parse_one("a=1; Path=/a%20b; Comment=x%3By")
        assert cookie.path == "/a%20b"
        assert cookie.extras["comment"] == "x%3By"

    def test_attribute_value_not_trimmed(self) -> None:
        assert parse_one("a=1; Domain= example.com").domain == " example.com"

    def test_invalid_expires(self) -> None:
        cookie = parse_one("a=1; Expires=garbage")
        assert cookie.expires is INVALID
        assert "expires" in cookie.to_dict()

    def test_invalid_max_age(self) -> None:
        assert parse_one("a=1; Max-Age=abc").max_age is INVALID

    def test_negative_max_age(self) -> None:
        assert parse_one("a=1; Max-Age=-1").max_age == -1

    def test_missing_attributes_are_none(self) -> None:
        cookie = parse_one("a=1")
        assert cookie.expires is None
        assert cookie.max_age is None
        assert cookie.domain is None


class TestDecoding:
    def test_percent_encoded_value(self) -> None:
        cookie = parse_one("foo=asdf%3Basdf%3Dtrue%3Basdf%3Dasdf%3Basdf%3Dtrue%40asdf")
        assert cookie.value == "asdf;asdf=true;asdf=asdf;asdf=true@asdf"

    def test_decode_disabled(self) -> None:
        raw = "asdf%3Basdf%3Dtrue%3Basdf%3Dasdf%3Basdf%3Dtrue%40asdf"
        assert parse_one(f"foo={raw}", decode_values=False).value == raw

    def test_decode_disabled_via_options(self) -> None:
        options = ParseOptions(decode_values=False)
        assert parse_one("foo=a%20b", options).value == "a%20b"

    def test_override_beats_options(self) -> None:
        options = ParseOptions(decode_values=False)
        assert parse_one("foo=a%20b", options, decode_values=True).value == "a b"

    @pytest.mark.parametrize("text", ["hello world", "héllo wörld", "a;b=c,d", "100%", "☃ + ☃"])
    def test_round_trip(self, text: str) -> None:
        encoded = quote(text, safe="")
        assert parse_one(f"foo={encoded}").value == text
        assert parse_one(f"foo={encoded}", decode_values=False).value == encoded

    def test_plus_is_not_space(self) -> None:
        assert parse_one("foo=a+b").value == "a+b"

    def test_non_utf8_value_unchanged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="setcookie.parser"):
            cookie = parse_one(f"foo={NOT_UTF8}")
        assert cookie.value == NOT_UTF8
        assert "Failed to decode value" in caplog.text

    @pytest.mark.parametrize("raw", ["100%", "%zz", "abc%4", "%%41"])
    def test_malformed_escape_unchanged(self, raw: str, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="setcookie.parser"):
            assert parse_one(f"foo={raw}").value == raw
        assert len(caplog.records) == 1

    def test_silent_suppresses_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="setcookie.parser"):
            cookie = parse_one("foo=%zz", silent=True)
        assert cookie.value == "%zz"
        assert caplog.records == []

    def test_callback_receives_error(self, caplog: pytest.LogCaptureFixture) -> None:
        errors: list[CookieDecodeError] = []
        with caplog.at_level(logging.WARNING, logger="setcookie.parser"):
            parse_one("foo=%zz", on_decode_error=errors.append)
        assert len(errors) == 1
        assert errors[0].value == "%zz"
        assert caplog.records == []

    def test_no_warning_when_decoding_succeeds(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="setcookie.parser"):
            parse_one("foo=a%20b")
        assert caplog.records == []

    def test_unknown_option_raises(self) -> None:
        with pytest.raises(TypeError, match="decode"):
            parse_one("foo=bar", decode=True)


class TestPercentDecode:
    def test_no_escapes(self) -> None:
        assert percent_decode("plain") == "plain"

    def test_utf8_escapes(self) -> None:
        assert percent_decode("%E2%98%83") == "☃"

    def test_lowercase_hex(self) -> None:
        assert percent_decode("%e2%98%83") == "☃"

    def test_stray_percent_raises(self) -> None:
        with pytest.raises(CookieDecodeError, match="malformed"):
            percent_decode("50%")

    def test_invalid_utf8_raises(self) -> None:
        with pytest.raises(CookieDecodeError, match="UTF-8"):
            percent_decode("%FF")


class TestParseMaxAge:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1000", 1000),
            ("0", 0),
            ("-5", -5),
            ("+7", 7),
            ("  42", 42),
            ("10abc", 10),
            ("3.9", 3),
        ],
    )
    def test_leading_integer(self, text: str, expected: int) -> None:
        assert parse_max_age(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "-", " ", "x10"])
    def test_invalid(self, text: str) -> None:
        assert parse_max_age(text) is INVALID


class TestRecord:
    def test_returns_set_cookie(self) -> None:
        assert isinstance(parse_one("a=1"), SetCookie)

    def test_extras_read_only(self) -> None:
        cookie = parse_one("a=1; Priority=High")
        with pytest.raises(TypeError):
            cookie.extras["priority"] = "Low"  # type: ignore[index]
