import pytest

from espterm_core.ascii import Ascii, control_name


def test_escape_value():
    assert Ascii(27) is Ascii.ESC
    assert control_name(27) == "ESC"
    assert Ascii(127) is Ascii.DEL


def test_aliases_share_members():
    assert Ascii(17) is Ascii.XON
    assert Ascii(19) is Ascii.XOFF
    assert control_name(Ascii.XOFF) == "DC3"


def test_control_name_known_codes():
    assert control_name(10) == "LF"
    assert control_name(127) == "DEL"


def test_control_name_alias_gives_canonical_name():
    assert control_name(Ascii.XON) == "DC1"


def test_control_name_round_trip():
    for member in Ascii:
        assert Ascii[control_name(member)] is member


@pytest.mark.parametrize("code", [33, 65, 126, 128, -1])
def test_control_name_rejects_printable(code):
    with pytest.raises(ValueError):
        control_name(code)