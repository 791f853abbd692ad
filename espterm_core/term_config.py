"""Terminal settings, screen enumerations and their limits."""

from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag

TERM_BTN_LEN = 10
TERM_BTN_MSG_LEN = 10
TERM_TITLE_LEN = 64
TERM_BTN_COUNT = 5
TERM_BACKDROP_LEN = 100
TERM_FONTSTACK_LEN = 100

SCR_DEF_DISPLAY_TOUT_MS = 12
SCR_DEF_DISPLAY_COOLDOWN_MS = 35
SCR_DEF_PARSER_TOUT_MS = 0
SCR_DEF_FN_ALT_MODE = True
SCR_DEF_WIDTH = 26
SCR_DEF_HEIGHT = 10
SCR_DEF_TITLE = "ESPTerm"
SCR_DEF_SHOW_BUTTONS = True
SCR_DEF_SHOW_MENU = True
SCR_DEF_CRLF = False
SCR_DEF_ALLFN = False
SCR_DEF_DEBUGBAR = False
SCR_DEF_DECOPT12 = False
SCR_DEF_ASCIIDEBUG = False
SCR_DEF_BUTTON_COUNT = 5

MAX_SCREEN_SIZE = 80 * 25

TERMCONF_SIZE = 500
TERMCONF_VERSION = 6


class CursorShape(IntEnum):
    BLOCK_BL = 0
    DEFAULT = 1
    BLOCK = 2
    UNDERLINE_BL = 3
    UNDERLINE = 4
    BAR_BL = 5
    BAR = 6


SCR_DEF_CURSOR_SHAPE = CursorShape.BLOCK_BL


def cursor_blinks(shape: int) -> bool:
    """True for the blinking cursor shapes."""
    return shape in (CursorShape.BLOCK_BL, CursorShape.UNDERLINE_BL, CursorShape.BAR_BL)


class MouseTrackingMode(IntEnum):
    NONE = 0
    X10 = 1
    NORMAL = 2
    BUTTON_MOTION = 3
    ANY_MOTION = 4


class MouseEncoding(IntEnum):
    SIMPLE = 0
    UTF8 = 1
    SGR = 2
    URXVT = 3


class Charset(Enum):
    B_USASCII = "B"
    A_UKASCII = "A"
    DEC_SUPPLEMENTAL = "0"
    DOS_437 = "1"
    BLOCKS_LINES = "2"
    LINES_EXTRA = "3"


class Topic(IntFlag):
    """Kinds of screen change reported to the front-end."""

    CHANGE_SCREEN_OPTS = 1 << 0
    CHANGE_CONTENT_ALL = 1 << 1
    CHANGE_CONTENT_PART = 1 << 2
    CHANGE_TITLE = 1 << 3
    CHANGE_BUTTONS = 1 << 4
    CHANGE_CURSOR = 1 << 5
    INTERNAL = 1 << 6
    BELL = 1 << 7
    CHANGE_BACKDROP = 1 << 8
    CHANGE_STATIC_OPTS = 1 << 9
    DOUBLE_LINES = 1 << 10
    FLAG_NOCLEAN = 1 << 15

    INITIAL = (
        CHANGE_SCREEN_OPTS
        | CHANGE_STATIC_OPTS
        | CHANGE_CONTENT_ALL
        | CHANGE_CURSOR
        | CHANGE_TITLE
        | CHANGE_BACKDROP
        | CHANGE_BUTTONS
        | DOUBLE_LINES
    )


class ClearMode(IntEnum):
    TO_CURSOR = 0
    FROM_CURSOR = 1
    ALL = 2


class SgrAttr(IntFlag):
    """Cell attribute bits."""

    FG = 1 << 0
    BG = 1 << 1
    BOLD = 1 << 2
    UNDERLINE = 1 << 3
    INVERSE = 1 << 4
    BLINK = 1 << 5
    ITALIC = 1 << 6
    STRIKE = 1 << 7
    OVERLINE = 1 << 8
    FAINT = 1 << 9
    FRAKTUR = 1 << 10


@dataclass
class TerminalConfig:
    """Persistent terminal settings."""

    width: int = SCR_DEF_WIDTH
    height: int = SCR_DEF_HEIGHT
    default_bg: int = 0
    default_fg: int = 0
    title: str = SCR_DEF_TITLE
    btn1: str = ""
    btn2: str = ""
    btn3: str = ""
    btn4: str = ""
    btn5: str = ""
    theme: int = 0
    parser_tout_ms: int = SCR_DEF_PARSER_TOUT_MS
    display_tout_ms: int = SCR_DEF_DISPLAY_TOUT_MS
    fn_alt_mode: bool = SCR_DEF_FN_ALT_MODE
    config_version: int = TERMCONF_VERSION
    display_cooldown_ms: int = SCR_DEF_DISPLAY_COOLDOWN_MS
    loopback: bool = False
    show_buttons: bool = SCR_DEF_SHOW_BUTTONS
    show_config_links: bool = SCR_DEF_SHOW_MENU
    bm1: str = ""
    bm2: str = ""
    bm3: str = ""
    bm4: str = ""
    bm5: str = ""
    cursor_shape: int = SCR_DEF_CURSOR_SHAPE
    crlf_mode: bool = SCR_DEF_CRLF
    want_all_fn: bool = SCR_DEF_ALLFN
    debugbar: bool = SCR_DEF_DEBUGBAR
    allow_decopt_12: bool = SCR_DEF_DECOPT12
    ascii_debug: bool = SCR_DEF_ASCIIDEBUG
    backdrop: str = ""
    button_count: int = SCR_DEF_BUTTON_COUNT
    bc1: int = 0
    bc2: int = 0
    bc3: int = 0
    bc4: int = 0
    bc5: int = 0
    font_stack: str = ""
    font_size: int = 0

    @staticmethod
    def _check_index(index: int) -> None:
        if not 0 <= index < TERM_BTN_COUNT:
            raise IndexError(f"button index out of range: {index}")

    def button_message(self, index: int) -> str:
        """Message sent by the 0-based button ``index``."""
        self._check_index(index)
        return getattr(self, f"bm{index + 1}")

    def button_text(self, index: int) -> str:
        """Label of the 0-based button ``index``."""
        self._check_index(index)
        return getattr(self, f"btn{index + 1}")

    def screen_size_ok(self) -> bool:
        """True if the screen is non-empty and within the maximum size."""
        size = self.width * self.height
        return 0 < size <= MAX_SCREEN_SIZE