"""Mouse reports, heartbeats and focus events on the terminal websocket.

The browser sends mouse events as a one-letter event type followed by four
two-byte numbers; they are turned here into the escape sequences an
application on the serial line expects for the active tracking mode.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .jstring import parse2b
from .term_config import MouseEncoding, MouseTrackingMode

HEARTBEAT_INTERVAL_MS = 1000
SOCK_BUF_LEN = 2000
URL_WS_UPDATE = "/term/update.ws"

MOUSE_PRESS = "p"
MOUSE_RELEASE = "r"
MOUSE_MOVE = "m"
_EVENTS = (MOUSE_PRESS, MOUSE_RELEASE, MOUSE_MOVE)

MOD_CTRL = 1
MOD_SHIFT = 2
MOD_ALT = 4
MOD_META = 8

_CSI = "\x1b["
_FOCUS_FINAL = {True: "I", False: "O"}

_BUTTON_CODES = {1: 0, 2: 1, 3: 2, 4: 64, 5: 65}
_MOTION_MODES = (MouseTrackingMode.BUTTON_MOTION, MouseTrackingMode.ANY_MOTION)


@dataclass(frozen=True)
class MouseReport:
    """A mouse event as sent by the browser (coordinates 0-based)."""

    event: str
    row: int
    col: int
    button: int
    mods: int


def _event_code(event: str, button: int, mods: int, mode: MouseTrackingMode,
                encoding: MouseEncoding) -> int:
    if mode == MouseTrackingMode.X10:
        return button - 1

    if button == 0 or (event == MOUSE_RELEASE and encoding != MouseEncoding.SGR):
        code = 3
    else:
        code = _BUTTON_CODES.get(button, 0)

    if mods & MOD_SHIFT:
        code |= 4
    if mods & (MOD_ALT | MOD_META):
        code |= 8
    if mods & MOD_CTRL:
        code |= 16
    if mode in _MOTION_MODES and event == MOUSE_MOVE:
        code |= 32
    return code


def encode_mouse_action(event: str, row: int, col: int, button: int, mods: int,
                        mode: MouseTrackingMode,
                        encoding: MouseEncoding) -> Optional[str]:
    """Build the escape sequence for a mouse event, or None if none is due.

    ``row`` and ``col`` are 0-based, ``button`` is 1-5 or 0 for none and
    ``mods`` is the ctrl|shift|alt|meta bitmap (1, 2, 4, 8).
    """
    if event not in _EVENTS:
        raise ValueError(f"unknown mouse event: {event!r}")
    mode = MouseTrackingMode(mode)
    encoding = MouseEncoding(encoding)

    if mode == MouseTrackingMode.NONE:
        return None
    if mode == MouseTrackingMode.X10 and (button == 0 or event == MOUSE_RELEASE):
        return None
    if event == MOUSE_MOVE and mode not in _MOTION_MODES:
        return None
    if event == MOUSE_MOVE and mode == MouseTrackingMode.BUTTON_MOTION and button == 0:
        return None

    x = col + 1
    y = row + 1
    code = _event_code(event, button, mods, mode, encoding)

    if encoding in (MouseEncoding.SIMPLE, MouseEncoding.UTF8):
        return _CSI + "M" + "".join(chr((32 + v) & 0xFF) for v in (code, x, y))
    if encoding == MouseEncoding.SGR:
        pressed = event == MOUSE_PRESS or (event == MOUSE_MOVE and button > 0)
        return f"{_CSI}<{code};{x};{y}{'M' if pressed else 'm'}"
    return f"{_CSI}{(32 + code) & 0xFF};{x & 0xFF};{y & 0xFF}M"


def parse_mouse_message(data: Union[str, bytes, bytearray]) -> MouseReport:
    """Decode a browser mouse message: event letter, row, col, button, mods."""
    if len(data) < 9:
        raise ValueError("mouse message too short")
    first = data[0]
    event = first if isinstance(first, str) else chr(first)
    if event not in _EVENTS:
        raise ValueError(f"unknown mouse event: {event!r}")
    row, col, button, mods = (parse2b(data[i:i + 2]) for i in (1, 3, 5, 7))
    return MouseReport(event, row, col, button, mods)


def heartbeat_message(count: int) -> str:
    """The heartbeat packet carrying the 32-bit counter ``count``."""
    return f".{count & 0xFFFFFFFF}"


def focus_sequence(gained: bool) -> str:
    """Focus-tracking report for the first client joining or the last leaving."""
    final = _FOCUS_FINAL[bool(gained)]
    return f"{_CSI}{final}"