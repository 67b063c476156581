"""Tests for decoding raw key bytes into menu commands."""

from collections import deque

import pytest

from Menuebaum.navigation import (
    BACK,
    DOWN,
    ENTER,
    EXIT,
    LEER,
    TOGGLE,
    UP,
    Navigation,
    interpretiere_bytes,
)


@pytest.mark.parametrize(
    ("daten", "erwartet"),
    [
        (b"\x1b[A", UP),
        (b"\x1b[B", DOWN),
        (b"\x1b[D", BACK),
        (b"\x1b[C", ENTER),
        (b"??A", UP),
        (b"\x1b[Z", DOWN),
    ],
)
def test_three_bytes_are_decided_by_last_byte(daten, erwartet):
    assert interpretiere_bytes(daten) == erwartet


@pytest.mark.parametrize(
    ("daten", "erwartet"),
    [
        (b"\r", ENTER),
        (b"\x1b", BACK),
        (b"`", TOGGLE),
        (b"x", EXIT),
        (b"\x03", EXIT),
        (b"\x1b[", BACK),
    ],
)
def test_short_reads_are_decided_by_first_byte(daten, erwartet):
    assert interpretiere_bytes(daten) == erwartet


def test_unknown_single_byte_is_returned_as_literal():
    assert interpretiere_bytes(b"a") == "a"
    # only the lowercase x exits
    assert interpretiere_bytes(b"X") == "X"


def test_multibyte_character_is_returned_as_one_literal():
    assert interpretiere_bytes("ä".encode("utf-8")) == "ä"


def test_empty_read_is_empty_command():
    assert interpretiere_bytes(b"") == LEER


class TerminalStub:
    def __init__(self, *antworten: bytes) -> None:
        self.antworten = deque(antworten)
        self.angefragt: list[int] = []

    def lese_bytes(self, anzahl: int = 3) -> bytes:
        self.angefragt.append(anzahl)
        return self.antworten.popleft()


def test_navigation_reads_up_to_three_bytes():
    terminal = TerminalStub(b"\x1b[A", b"\r", b"q")
    navigation = Navigation(terminal)

    assert navigation.lese_taste() == UP
    assert navigation.lese_taste() == ENTER
    navigation.warte_auf_taste()

    assert terminal.angefragt == [3, 3, 3]
    assert not terminal.antworten


def test_navigation_returns_unknown_keys_as_characters():
    navigation = Navigation(TerminalStub(b"q", "ü".encode("utf-8"), b"\x1b[Z"))

    assert navigation.lese_taste() == "q"
    assert navigation.lese_taste() == "ü"
    assert navigation.lese_taste() == DOWN
