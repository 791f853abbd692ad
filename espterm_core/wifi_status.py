"""JSON replies of the WiFi scan and station connection status endpoints."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Sequence, Union

from .xsettings import format_ip

API_D2D_MSG = "/api/v1/msg"
API_REBOOT = "/api/v1/reboot"
API_PING = "/api/v1/ping"
API_CLEAR = "/api/v1/clear"
API_GPIO = "/api/v1/gpio"

SET_REDIR_SUC = "/cfg/wifi"
SET_REDIR_ERR = SET_REDIR_SUC + "?err="
CONNECTING_URL = "/cfg/wifi/connecting"

SSID_MAX = 32


class StationStatus(IntEnum):
    """Connection state of the WiFi station interface."""

    IDLE = 0
    CONNECTING = 1
    WRONG_PASSWORD = 2
    NO_AP_FOUND = 3
    CONNECT_FAIL = 4
    GOT_IP = 5


@dataclass(frozen=True)
class AccessPoint:
    """One access point found by a scan."""

    ssid: str
    bssid: Sequence[int]
    channel: int
    rssi: int
    enc: int

    @property
    def bssid_text(self) -> str:
        raw = bytes(self.bssid)
        if len(raw) != 6:
            raise ValueError(f"BSSID must have 6 bytes, got {len(raw)}")
        return ":".join(f"{b:02x}" for b in raw)


def rssi_to_percent(rssi: int) -> int:
    """Approximate signal strength in percent from a raw RSSI reading."""
    if rssi > 200:
        percent = 100
    elif rssi < 100:
        percent = 0
    else:
        percent = 100 - 2 * (200 - rssi)
    return max(0, min(100, percent))


def _ap_json(ap: AccessPoint) -> str:
    return (
        f'{{"essid": "{ap.ssid[:SSID_MAX]}", "bssid": "{ap.bssid_text}", '
        f'"rssi": {ap.rssi}, "rssi_perc": {rssi_to_percent(ap.rssi)}, '
        f'"enc": {ap.enc}, "channel": {ap.channel}}}'
    )


def scan_result_json(access_points: Iterable[AccessPoint], in_progress: bool) -> str:
    """The full scan reply; while a scan runs only the progress flag is sent."""
    if in_progress:
        return '{\n "result": {\n  "inProgress": 1\n }\n}'

    aps = list(access_points)
    parts = ['{\n "result": {\n  "inProgress": 0,\n  "APs": [\n   ']
    for position, ap in enumerate(aps):
        terminator = "\n  " if position == len(aps) - 1 else ",\n   "
        parts.append(_ap_json(ap) + terminator)
    parts.append("  ]\n }\n}")
    return "".join(parts)


def connection_status_json(status: Optional[int], ip: Union[int, str, None] = None) -> str:
    """Reply of the connection status endpoint.

    ``status`` of None means the station is disabled or has no SSID set.
    ``ip`` is used only once an address was obtained; it may be a stored
    address (first octet in the lowest byte) or dotted text.
    """
    if status is None:
        return '{"status": "disabled"}'
    try:
        state = StationStatus(status)
    except ValueError:
        return f'{{"status": "working", "wtf": "state = {status}"}}'

    if state == StationStatus.IDLE:
        return '{"status": "idle"}'
    if state == StationStatus.CONNECTING:
        return '{"status": "working"}'
    if state == StationStatus.WRONG_PASSWORD:
        return '{"status": "fail", "cause": "WRONG_PASSWORD"}'
    if state == StationStatus.NO_AP_FOUND:
        return '{"status": "fail", "cause": "AP_NOT_FOUND"}'
    if state == StationStatus.CONNECT_FAIL:
        return '{"status": "fail", "cause": "CONNECTION_FAILED"}'

    if ip is None:
        ip_text = "0.0.0.0"
    elif isinstance(ip, int):
        ip_text = format_ip(ip)
    else:
        ip_text = ip
    return f'{{"status": "success", "ip": "{ip_text}"}}'