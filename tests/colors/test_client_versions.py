# topmark:header:start
#
#   project      : ChatMark
#   file         : test_client_versions.py
#   file_relpath : tests/colors/test_client_versions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for client protocol lookup and the legacy color palette."""

from __future__ import annotations

import pytest

from chatmark.colors.client import client_version, is_legacy, version_for_protocol
from chatmark.colors.palette import RGB, escape, escape_hex, nearest_legacy
from chatmark.recipient import Recipient


@pytest.mark.parametrize(
    ("protocol", "major"),
    [
        (5, 7),
        (47, 8),
        (110, 9),
        (210, 10),
        (340, 12),
        (404, 13),
        (578, 15),
        (754, 16),
        (756, 17),
        (770, 21),
    ],
)
def test_version_for_known_protocols(protocol: int, major: int) -> None:
    assert version_for_protocol(protocol) == major


@pytest.mark.parametrize("protocol", [206, 499, 111, 771, 9999])
def test_version_for_unknown_or_excluded_protocols(protocol: int) -> None:
    """Gaps and excluded snapshot protocols map to 0."""
    assert version_for_protocol(protocol) == 0


def test_client_version_falls_back_to_server() -> None:
    assert client_version(None, 21) == 21
    assert client_version(Recipient("Alex"), 19) == 19
    assert client_version(Recipient("Alex", protocol=340), 21) == 12


def test_is_legacy() -> None:
    """RGB needs both the server and the client at 16 or newer."""
    assert is_legacy(Recipient("Alex", protocol=340), 21)
    assert not is_legacy(Recipient("Alex"), 21)
    assert not is_legacy(Recipient("Alex", protocol=754), 21)
    assert is_legacy(Recipient("Alex", protocol=754), 12)
    assert is_legacy(None, 12)
    assert is_legacy(Recipient("Alex", protocol=9999), 21)


def test_rgb_hex_round_trip() -> None:
    assert RGB.from_hex("#AbCdEf").to_hex() == "abcdef"
    assert RGB.from_int(0x0A0B0C) == RGB(10, 11, 12)


@pytest.mark.parametrize(
    ("color", "code"),
    [
        (RGB(0, 0, 0), "0"),
        (RGB(255, 255, 255), "f"),
        (RGB(255, 0, 0), "4"),
        (RGB(250, 90, 90), "c"),
        (RGB(100, 100, 100), "8"),
    ],
)
def test_nearest_legacy(color: RGB, code: str) -> None:
    assert nearest_legacy(color) == code


def test_escape_forms() -> None:
    assert escape(RGB(1, 2, 3), legacy=False) == "§x§0§1§0§2§0§3"
    assert escape(RGB(1, 2, 3), legacy=True) == "§0"
    assert escape_hex("#55ff55", legacy=True) == "§a"
