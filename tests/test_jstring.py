import pytest

from espterm_core.jstring import encode2b, encode3b, parse2b, parse3b


def test_zero_encodes_to_ones():
    assert encode2b(0) == b"\x01\x01"
    assert encode3b(0) == b"\x01\x01\x01"


def test_parse_accepts_str_and_bytes():
    encoded = encode2b(1000)
    assert parse2b(encoded.decode("latin-1")) == parse2b(encoded) == 1000


@pytest.mark.parametrize("number", [0, 1, 126, 127, 128, 5000, 127 * 127 - 1])
def test_two_byte_round_trip(number):
    assert parse2b(encode2b(number)) == number


@pytest.mark.parametrize("number", [0, 126, 127, 16129, 300000, 127 ** 3 - 1])
def test_three_byte_round_trip(number):
    assert parse3b(encode3b(number)) == number


def test_two_byte_digits_never_zero():
    for number in range(0, 127 * 127, 97):
        encoded = encode2b(number)
        assert all(1 <= b <= 127 for b in encoded)


def test_three_byte_digits_never_zero():
    for number in range(0, 127 ** 3, 12345):
        encoded = encode3b(number)
        assert all(1 <= b <= 127 for b in encoded)


def test_parse_ignores_trailing_data():
    assert parse2b(encode2b(42) + b"xyz") == 42
    assert parse3b(encode3b(99999) + b"\x05") == 99999


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        encode2b(-1)
    with pytest.raises(ValueError):
        encode2b(0x10000)
    with pytest.raises(ValueError):
        encode3b(0x100000000)


def test_short_input_rejected():
    with pytest.raises(ValueError):
        parse2b(b"\x01")
    with pytest.raises(ValueError):
        parse3b("\x01\x01")