import json

import pytest

from espterm_core.wifi_status import (
    AccessPoint,
    StationStatus,
    connection_status_json,
    rssi_to_percent,
    scan_result_json,
)
from espterm_core.xsettings import parse_ip

BSSID = (0x02, 0x00, 0x00, 0x00, 0x00, 0x01)


def _ap(ssid="TestNet", rssi=180, channel=6, enc=3):
    return AccessPoint(ssid=ssid, bssid=BSSID, channel=channel, rssi=rssi, enc=enc)


def test_rssi_bounds():
    assert rssi_to_percent(201) == 100
    assert rssi_to_percent(99) == 0
    assert rssi_to_percent(100) == 0


@pytest.mark.parametrize("rssi", range(0, 256, 7))
def test_rssi_in_range(rssi):
    assert 0 <= rssi_to_percent(rssi) <= 100


def test_rssi_monotonic():
    values = [rssi_to_percent(r) for r in range(0, 256)]
    assert values == sorted(values)


def test_scan_in_progress():
    data = json.loads(scan_result_json([_ap()], True))
    assert data["result"]["inProgress"] == 1
    assert "APs" not in data["result"]


def test_scan_empty():
    data = json.loads(scan_result_json([], False))
    assert data["result"]["inProgress"] == 0
    assert data["result"]["APs"] == []


def test_scan_round_trip():
    aps = [_ap("One", 180, 1, 0), _ap("Two", 150, 11, 4)]
    data = json.loads(scan_result_json(aps, False))
    listed = data["result"]["APs"]
    assert [a["essid"] for a in listed] == ["One", "Two"]
    assert [a["channel"] for a in listed] == [1, 11]
    assert [a["enc"] for a in listed] == [0, 4]
    assert [a["rssi"] for a in listed] == [180, 150]
    assert [a["rssi_perc"] for a in listed] == [rssi_to_percent(180), rssi_to_percent(150)]


def test_scan_bssid_format():
    data = json.loads(scan_result_json([_ap()], False))
    assert data["result"]["APs"][0]["bssid"] == "02:00:00:00:00:01"


def test_scan_terminators():
    text = scan_result_json([_ap(), _ap()], False)
    assert text.endswith("}\n    ]\n }\n}")
    assert "},\n   {" in text


def test_bad_bssid():
    ap = AccessPoint(ssid="x", bssid=(1, 2, 3), channel=1, rssi=1, enc=0)
    with pytest.raises(ValueError):
        scan_result_json([ap], False)


def test_status_disabled():
    assert connection_status_json(None) == '{"status": "disabled"}'


@pytest.mark.parametrize(
    "status, expected",
    [
        (StationStatus.IDLE, '{"status": "idle"}'),
        (StationStatus.CONNECTING, '{"status": "working"}'),
        (StationStatus.WRONG_PASSWORD, '{"status": "fail", "cause": "WRONG_PASSWORD"}'),
        (StationStatus.NO_AP_FOUND, '{"status": "fail", "cause": "AP_NOT_FOUND"}'),
        (StationStatus.CONNECT_FAIL, '{"status": "fail", "cause": "CONNECTION_FAILED"}'),
    ],
)
def test_status_strings(status, expected):
    assert connection_status_json(status) == expected


def test_status_got_ip_from_stored_address():
    data = json.loads(connection_status_json(StationStatus.GOT_IP, parse_ip("192.168.4.1")))
    assert data == {"status": "success", "ip": "192.168.4.1"}


def test_status_got_ip_from_text():
    data = json.loads(connection_status_json(StationStatus.GOT_IP, "10.0.0.7"))
    assert data["ip"] == "10.0.0.7"


def test_status_unknown():
    data = json.loads(connection_status_json(42))
    assert data["status"] == "working"
    assert data["wtf"] == "state = 42"