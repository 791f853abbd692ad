"""Streaming INI parser.

Data may be fed in arbitrary chunks; every ``key = value`` pair found is
reported to a callback together with the current section name. Syntax
errors are recorded and skipped, never raised.
"""

import logging
from enum import IntEnum
from typing import Callable, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

KEY_MAX = 64
VALUE_MAX = 256

IniCallback = Callable[[str, str, str], None]

_TAB = 9
_LF = 10
_CR = 13
_SP = 32
_DQUOTE = 34
_HASH = 35
_SQUOTE = 39
_COLON = 58
_SEMI = 59
_EQUALS = 61
_LBRACKET = 91
_BACKSLASH = 92
_RBRACKET = 93

_ESCAPES = {ord("n"): _LF, ord("r"): _CR, ord("t"): _TAB, ord("e"): 27}


class _State(IntEnum):
    DEAD = 0
    ROOT = 1
    SECTION_START = 2
    SECTION = 3
    KEY = 4
    VALUE_START = 5
    VALUE = 6
    VALUE_CR = 7
    COMMENT = 8
    COMMENT_CR = 9
    DISCARD = 10
    DISCARD_CR = 11


def _rtrim(buf: bytearray) -> bytes:
    end = len(buf)
    while end > 0 and buf[end - 1] < 33:
        end -= 1
    return bytes(buf[:end])


def _text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


class IniParser:
    """Incremental INI parser calling ``callback(section, key, value)``."""

    def __init__(self, callback: Optional[IniCallback]):
        self._callback = callback
        self.errors: List[str] = []
        self.reset()

    def _reset_partial(self) -> None:
        self._buf = bytearray()
        self._quote = 0
        self._escape = False

    def reset(self) -> None:
        """Forget all parse state, including the current section."""
        self._reset_partial()
        self._key = b""
        self._section = b""
        self._state = _State.ROOT

    def feed(self, data: Union[str, bytes, bytearray]) -> None:
        """Parse a chunk of text; it need not be a whole line."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        for c in data:
            if self._state == _State.DEAD:
                break
            self._step(c)

    def close(self) -> None:
        """Flush a pending last line and detach the callback."""
        self.feed(b"\n")
        self._callback = None

    def _error(self, message: str) -> None:
        logger.debug("INI parser error: %s", message)
        self.errors.append(message)
        self._reset_partial()

    def _step(self, c: int) -> None:
        state = self._state
        if state == _State.ROOT:
            self._root(c)
        elif state == _State.SECTION_START:
            if c in (_TAB, _SP):
                return
            if c == _RBRACKET or c <= 31:
                self._section_error(c)
            else:
                self._section_char(c)
        elif state == _State.SECTION:
            if c == _RBRACKET:
                self._section = _rtrim(self._buf)
                self._state = _State.ROOT
            elif c < 32 and c != _TAB:
                self._section_error(c)
            else:
                self._section_char(c)
        elif state == _State.KEY:
            self._key_char(c)
        elif state == _State.VALUE_START:
            if c in (_TAB, _SP):
                return
            if c == _CR:
                self._state = _State.VALUE_CR
                return
            self._state = _State.VALUE
            self._value_char(c)
        elif state == _State.VALUE:
            if c == _CR:
                self._state = _State.VALUE_CR
            else:
                self._value_char(c)
        elif state == _State.VALUE_CR:
            if c == _LF:
                self._state = _State.VALUE
                self._value_char(c)
            else:
                self._error("Syntax error in key=value")
                self._state = _State.DISCARD
        elif state == _State.COMMENT:
            if c == _LF:
                self._state = _State.ROOT
            elif c == _CR:
                self._state = _State.COMMENT_CR
        elif state == _State.COMMENT_CR:
            if c == _LF:
                self._state = _State.ROOT
            else:
                self._error("Syntax error in comment")
                self._state = _State.DISCARD
        elif state == _State.DISCARD:
            if c == _LF:
                self._state = _State.ROOT
            elif c == _CR:
                self._state = _State.DISCARD_CR
        elif state == _State.DISCARD_CR:
            self._state = _State.ROOT if c == _LF else _State.DEAD

    def _root(self, c: int) -> None:
        if c == _SP or _TAB <= c <= _CR:
            return
        if c in (_HASH, _SEMI):
            self._state = _State.COMMENT
        elif c == _LBRACKET:
            self._buf = bytearray()
            self._state = _State.SECTION_START
        elif c < 32 or c in (_COLON, _EQUALS):
            self._error("Syntax error in root")
            self._state = _State.DISCARD
        else:
            self._buf = bytearray((c,))
            self._state = _State.KEY

    def _section_error(self, c: int) -> None:
        self._error("Syntax error in [section]")
        self._state = _State.ROOT if c == _LF else _State.DISCARD

    def _section_char(self, c: int) -> None:
        if len(self._buf) >= KEY_MAX:
            self._error("Section name too long")
            self._state = _State.DISCARD
            return
        self._buf.append(c)
        self._state = _State.SECTION

    def _key_char(self, c: int) -> None:
        if c == _LF:
            self._error("Syntax error in key=value")
            self._state = _State.ROOT
        elif c in (_COLON, _EQUALS):
            self._key = _rtrim(self._buf)
            self._reset_partial()
            self._state = _State.VALUE_START
        elif len(self._buf) >= KEY_MAX:
            self._error("Key too long")
            self._state = _State.DISCARD
        else:
            self._buf.append(c)

    def _value_char(self, c: int) -> None:
        is_newline = c in (_CR, _LF)
        is_quote = c in (_SQUOTE, _DQUOTE)

        if is_quote and not self._escape and not self._buf and self._quote == 0:
            self._quote = c
            return

        if len(self._buf) >= VALUE_MAX:
            self._error("Value too long")
            self._state = _State.DISCARD
            return

        if (not self._escape and c == self._quote) or is_newline:
            if is_newline and self._quote:
                self._error("Unterminated string")
                self._state = _State.ROOT
                return
            value = bytes(self._buf) if self._quote else _rtrim(self._buf)
            if self._callback is not None:
                self._callback(_text(self._section), _text(self._key), _text(value))
            self._reset_partial()
            # a value ended by its quote leaves the rest of the line to discard
            self._state = _State.ROOT if is_newline else _State.DISCARD
            return

        if self._escape:
            self._buf.append(_ESCAPES.get(c, c))
        elif c != _BACKSLASH:
            self._buf.append(c)
        self._escape = not self._escape and c == _BACKSLASH


def parse_ini(text: Union[str, bytes, bytearray]) -> List[Tuple[str, str, str]]:
    """Parse a whole document and return its (section, key, value) triples."""
    entries: List[Tuple[str, str, str]] = []
    parser = IniParser(lambda section, key, value: entries.append((section, key, value)))
    parser.feed(text)
    parser.close()
    return entries