"""Getters and setters that turn configuration values into text and back.

Setters never modify anything in place: each returns a pair of the
outcome and the value the field should hold afterwards.
"""

import logging
from enum import IntEnum
from typing import Tuple

logger = logging.getLogger(__name__)

IP_ADDR_NONE = 0xFFFFFFFF
IP_ADDR_ANY = 0x00000000


class XSetResult(IntEnum):
    """Outcome of applying a textual value to a setting."""

    FAIL = 0
    SET = 1
    UNCHANGED = 2
    NONE = 3


def atoi(text: str) -> int:
    """Read a leading decimal integer the way C ``atoi`` does; 0 if there is none."""
    stripped = text.lstrip(" \t\n\r\v\f")
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = ""
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        digits += ch
    if not digits:
        return 0
    return sign * int(digits)


def _read_number(text: str, pos: int) -> Tuple[int, int]:
    if pos >= len(text) or not text[pos].isdigit():
        raise ValueError(f"bad IP address: {text!r}")
    base = 10
    if text[pos] == "0":
        pos += 1
        if pos < len(text) and text[pos] in "xX":
            base = 16
            pos += 1
        else:
            base = 8
    digits_allowed = {10: "0123456789", 8: "01234567", 16: "0123456789abcdefABCDEF"}[base]
    value = 0
    while pos < len(text) and text[pos] in digits_allowed:
        value = value * base + int(text[pos], 16)
        pos += 1
    if pos < len(text) and text[pos].isdigit():
        raise ValueError(f"bad IP address: {text!r}")
    return value, pos


def parse_ip(text: str) -> int:
    """Parse an IPv4 address in ``inet_aton`` notation.

    The result keeps the first octet in the lowest byte, as the address is
    stored in the configuration. Raises ValueError on malformed input.
    """
    parts = []
    pos = 0
    while True:
        value, pos = _read_number(text, pos)
        if pos < len(text) and text[pos] == ".":
            if len(parts) >= 3:
                raise ValueError(f"bad IP address: {text!r}")
            parts.append(value)
            pos += 1
            continue
        parts.append(value)
        break
    if pos < len(text) and not text[pos].isspace():
        raise ValueError(f"bad IP address: {text!r}")

    *head, last = parts
    if any(p > 0xFF for p in head) or last > (0xFFFFFFFF >> (8 * len(head))):
        raise ValueError(f"bad IP address: {text!r}")
    host = last
    for index, part in enumerate(head):
        host |= part << (24 - 8 * index)
    return int.from_bytes(host.to_bytes(4, "big"), "little")


def format_ip(value: int) -> str:
    """Format a stored IPv4 address (first octet in the lowest byte)."""
    return ".".join(str(b) for b in (value & 0xFFFFFFFF).to_bytes(4, "little"))


def xget_dec(value: int) -> str:
    """Render a 32-bit field as a signed decimal, as ``%d`` prints it."""
    value &= 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return str(value)


def xget_bool(value: bool) -> str:
    """Render a flag as ``1`` or ``0``."""
    number = 1 if value else 0
    return xget_dec(number)


def xget_string(value: str) -> str:
    """Render a string field unchanged."""
    return str(value)


def xget_ip(value: int) -> str:
    """Render a stored IPv4 address in dotted notation."""
    return format_ip(value)


def xset_ip(current: int, text: str) -> Tuple[XSetResult, int]:
    """Set an IP address; 0.0.0.0 and 255.255.255.255 are rejected."""
    logger.debug("Setting ip = %s", text)
    try:
        ip = parse_ip(text)
    except ValueError:
        ip = IP_ADDR_NONE
    if ip in (IP_ADDR_ANY, IP_ADDR_NONE):
        logger.warning("Bad IP: %s", text)
        return XSetResult.FAIL, current
    if current != ip:
        return XSetResult.SET, ip
    return XSetResult.UNCHANGED, current


def xset_bool(current: bool, text: str) -> Tuple[XSetResult, bool]:
    """Set a flag: any nonzero number turns it on."""
    enable = atoi(text) != 0
    if bool(current) != enable:
        return XSetResult.SET, enable
    return XSetResult.UNCHANGED, current


def xset_u8(current: int, text: str) -> Tuple[XSetResult, int]:
    """Set a byte; values above 255 (negatives included) fail."""
    value = atoi(text) & 0xFFFFFFFF
    if value > 255:
        logger.warning("Bad value, max 255: %s", text)
        return XSetResult.FAIL, current
    if current != value:
        return XSetResult.SET, value
    return XSetResult.UNCHANGED, current


def xset_u16(current: int, text: str) -> Tuple[XSetResult, int]:
    """Set a 16-bit field; the number wraps to 16 bits."""
    value = atoi(text) & 0xFFFF
    if current != value:
        return XSetResult.SET, value
    return XSetResult.UNCHANGED, current


def xset_u32(current: int, text: str) -> Tuple[XSetResult, int]:
    """Set a 32-bit field; the number wraps to 32 bits."""
    value = atoi(text) & 0xFFFFFFFF
    if current != value:
        return XSetResult.SET, value
    return XSetResult.UNCHANGED, current


def xset_string(current: str, text: str, max_len: int) -> Tuple[XSetResult, str]:
    """Set a string field holding at most ``max_len`` bytes including its terminator.

    Text longer than ``max_len`` bytes fails; a ``max_len`` of 0 means no limit.
    """
    raw = text.encode("utf-8")
    if max_len > 0 and len(raw) > max_len:
        logger.warning("String too long, max %d", max_len)
        return XSetResult.FAIL, current
    if current == text:
        return XSetResult.UNCHANGED, current
    if max_len > 0:
        raw = raw[: max_len - 1]
    return XSetResult.SET, raw.decode("utf-8", errors="ignore")