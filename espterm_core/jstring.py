"""Compact number encodings used on the terminal websocket.

Numbers are written in base 127 with every digit offset by one, so that
no encoded byte is ever zero.
"""

from typing import Union

_Data = Union[str, bytes, bytearray]


def encode2b(number: int) -> bytes:
    """Encode a 16-bit number as two bytes, least significant first."""
    if not 0 <= number <= 0xFFFF:
        raise ValueError(f"number out of 16-bit range: {number}")
    high, low = divmod(number, 127)
    return bytes((low + 1, (high + 1) & 0xFF))


def encode3b(number: int) -> bytes:
    """Encode a 32-bit number as three bytes, least significant first."""
    if not 0 <= number <= 0xFFFFFFFF:
        raise ValueError(f"number out of 32-bit range: {number}")
    rest, low = divmod(number, 127)
    rest, mid = divmod(rest, 127)
    return bytes((low + 1, mid + 1, (rest + 1) & 0xFF))


def _codes(data: _Data, count: int) -> list:
    if isinstance(data, str):
        codes = [ord(ch) for ch in data[:count]]
    else:
        codes = list(data[:count])
    if len(codes) < count:
        raise ValueError(f"need {count} characters, got {len(codes)}")
    return codes


def parse2b(data: _Data) -> int:
    """Decode the first two characters of ``data`` into a 16-bit number."""
    low, high = _codes(data, 2)
    return ((low - 1) + (high - 1) * 127) & 0xFFFF


def parse3b(data: _Data) -> int:
    """Decode the first three characters of ``data`` into a 32-bit number."""
    low, mid, high = _codes(data, 3)
    return ((low - 1) + (mid - 1) * 127 + (high - 1) * 127 * 127) & 0xFFFFFFFF