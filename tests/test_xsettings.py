import pytest

from espterm_core.xsettings import (
    XSetResult,
    atoi,
    format_ip,
    parse_ip,
    xget_bool,
    xget_dec,
    xget_ip,
    xget_string,
    xset_bool,
    xset_ip,
    xset_string,
    xset_u8,
    xset_u16,
    xset_u32,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -7x", -7), ("+15", 15), ("abc", 0), ("", 0)],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_parse_ip_stores_first_octet_low():
    assert parse_ip("1.2.3.4") == 0x04030201


@pytest.mark.parametrize("text", ["192.168.4.1", "10.0.0.254", "8.8.8.8"])
def test_ip_round_trip(text):
    assert format_ip(parse_ip(text)) == text
    assert xget_ip(parse_ip(text)) == text


@pytest.mark.parametrize("text", ["1.2.3.4.5", "abc", "256.1.1.1", "1.2.3.x", ""])
def test_parse_ip_rejects(text):
    with pytest.raises(ValueError):
        parse_ip(text)


def test_parse_ip_broadcast():
    assert parse_ip("255.255.255.255") == 0xFFFFFFFF


def test_xset_ip_set_and_unchanged():
    result, value = xset_ip(0, "192.168.4.1")
    assert result is XSetResult.SET
    assert format_ip(value) == "192.168.4.1"
    result2, value2 = xset_ip(value, "192.168.4.1")
    assert result2 is XSetResult.UNCHANGED
    assert value2 == value


@pytest.mark.parametrize("text", ["0.0.0.0", "255.255.255.255", "bogus"])
def test_xset_ip_fail_keeps_value(text):
    current = parse_ip("10.0.0.1")
    assert xset_ip(current, text) == (XSetResult.FAIL, current)


def test_xget_simple():
    assert xget_dec(42) == "42"
    assert xget_bool(True) == "1"
    assert xget_bool(False) == "0"
    assert xget_string("ESPTerm") == "ESPTerm"


def test_xset_bool():
    assert xset_bool(False, "1") == (XSetResult.SET, True)
    assert xset_bool(True, "1") == (XSetResult.UNCHANGED, True)
    assert xset_bool(True, "0") == (XSetResult.SET, False)
    assert xset_bool(False, "junk") == (XSetResult.UNCHANGED, False)


def test_xset_u8():
    assert xset_u8(0, "255") == (XSetResult.SET, 255)
    assert xset_u8(255, "255") == (XSetResult.UNCHANGED, 255)
    assert xset_u8(3, "300") == (XSetResult.FAIL, 3)
    assert xset_u8(3, "-1") == (XSetResult.FAIL, 3)


def test_xset_u16_wraps():
    assert xset_u16(5, "65536") == (XSetResult.SET, 0)
    assert xset_u16(12, "12") == (XSetResult.UNCHANGED, 12)


def test_xset_u32():
    assert xset_u32(0, "-1") == (XSetResult.SET, 0xFFFFFFFF)
    assert xset_u32(1000, "1000") == (XSetResult.UNCHANGED, 1000)


def test_xget_dec_round_trips_through_u32():
    _, value = xset_u32(0, "123456")
    assert xget_dec(value) == "123456"


def test_xset_string():
    assert xset_string("old", "new", 10) == (XSetResult.SET, "new")
    assert xset_string("same", "same", 10) == (XSetResult.UNCHANGED, "same")
    assert xset_string("old", "x" * 11, 10) == (XSetResult.FAIL, "old")


def test_xset_string_result_fits_field():
    result, value = xset_string("", "y" * 10, 10)
    assert result is XSetResult.SET
    assert len(value.encode()) < 10


def test_xset_string_unlimited():
    long_text = "z" * 500
    assert xset_string("", long_text, 0) == (XSetResult.SET, long_text)