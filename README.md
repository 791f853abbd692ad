# espterm_core

Pure-Python building blocks for a browser-based serial terminal: encoding
data for the web front-end, parsing settings files, turning configuration
values into text and back, and building the small JSON replies of the
configuration pages. It has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `espterm_core.ascii` | `Ascii` control-code enumeration and `control_name()` |
| `espterm_core.jstring` | Compact base-127 number encoding: `encode2b`, `encode3b`, `parse2b`, `parse3b` |
| `espterm_core.ini_parser` | Streaming INI parser (`IniParser`) and the one-shot `parse_ini()` |
| `espterm_core.xsettings` | Getters (`xget_dec`, `xget_bool`, `xget_string`, `xget_ip`) and setters (`xset_bool`, `xset_u8`, `xset_u16`, `xset_u32`, `xset_string`, `xset_ip`) returning an `XSetResult` and the new value; `atoi`, `parse_ip`, `format_ip` |
| `espterm_core.term_config` | `TerminalConfig` dataclass and the terminal enums (`CursorShape`, `Topic`, `MouseTrackingMode`, `MouseEncoding`, `ClearMode`, `Charset`, `SgrAttr`), `cursor_blinks()` |
| `espterm_core.mouse` | xterm-style mouse reports: `encode_mouse_action`, `parse_mouse_message`, `MouseReport`; `heartbeat_message`, `focus_sequence` |
| `espterm_core.wifi_status` | `rssi_to_percent`, `scan_result_json`, `connection_status_json`, `AccessPoint`, `StationStatus` |
| `espterm_core.gpio_api` | GPIO helpers: `GpioConf`, `inputs_json`, `resolve_output`, `pulse_command`, `pulse_masks`, and `password_change_errors` for the admin password form |

## Examples

Parse an INI document; each key-value pair is reported with its section.
Syntax errors are skipped and collected in `IniParser.errors`, not raised:

```python
from espterm_core.ini_parser import parse_ini

pairs = parse_ini('[terminal]\ntitle = "Hello"\nwidth = 80\n')
# [('terminal', 'title', 'Hello'), ('terminal', 'width', '80')]
```

Feed data in chunks as it arrives:

```python
from espterm_core.ini_parser import IniParser

seen = []
parser = IniParser(lambda section, key, value: seen.append((section, key, value)))
parser.feed("[wifi]\nap_ch")
parser.feed("annel = 6\n")
parser.close()
```

Apply a textual value to a setting; setters return the outcome and the
value the field should hold:

```python
from espterm_core.xsettings import XSetResult, xset_u8

result, value = xset_u8(10, "300")   # (XSetResult.FAIL, 10)
result, value = xset_u8(10, "42")    # (XSetResult.SET, 42)
```

Encode numbers for the front-end and decode them back:

```python
from espterm_core.jstring import encode2b, parse2b

assert parse2b(encode2b(1000)) == 1000
```

Build a mouse report in SGR encoding:

```python
from espterm_core.mouse import encode_mouse_action
from espterm_core.term_config import MouseEncoding, MouseTrackingMode

seq = encode_mouse_action("p", 0, 0, 1, 0, MouseTrackingMode.NORMAL, MouseEncoding.SGR)
# '\x1b[<0;1;1M'
```

## What this package does not do

It contains no HTTP or websocket server, no terminal screen emulation and
no persistent storage of settings. It does not write settings export files
or apply an imported settings file to a configuration; it provides the
parser and the per-field setters such a feature would be built from. It
does not talk to WiFi or GPIO hardware: the WiFi and GPIO modules only
compute replies and bit masks from values passed in.