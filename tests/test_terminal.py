"""Tests for the raw terminal reader, with os/termios/tty replaced by fakes."""

from types import SimpleNamespace

import pytest

import Menuebaum.terminal as terminal_modul
from Menuebaum.terminal import Terminal, TerminalFehler


class FakeTermiosError(Exception):
    pass


@pytest.fixture
def protokoll(monkeypatch):
    """Records every system call made by Terminal."""
    aufrufe: list = []
    zustand = {"lesen": lambda fd, n: b"\x1b[A"}

    def fake_open(pfad, flags):
        aufrufe.append(("open", pfad))
        return 7

    def fake_read(fd, anzahl):
        aufrufe.append(("read", anzahl))
        return zustand["lesen"](fd, anzahl)

    fake_os = SimpleNamespace(
        open=fake_open,
        read=fake_read,
        close=lambda fd: aufrufe.append(("close", fd)),
        O_RDWR=2,
        O_NOCTTY=256,
    )
    fake_termios = SimpleNamespace(
        error=FakeTermiosError,
        TCSADRAIN=1,
        tcgetattr=lambda fd: aufrufe.append(("tcgetattr", fd)) or ["alt"],
        tcsetattr=lambda fd, wann, werte: aufrufe.append(("tcsetattr", werte)),
    )
    fake_tty = SimpleNamespace(setraw=lambda fd: aufrufe.append(("setraw", fd)))

    monkeypatch.setattr(terminal_modul, "os", fake_os)
    monkeypatch.setattr(terminal_modul, "termios", fake_termios)
    monkeypatch.setattr(terminal_modul, "tty", fake_tty)
    return SimpleNamespace(aufrufe=aufrufe, zustand=zustand, termios=fake_termios)


def test_read_enters_raw_mode_and_restores(protokoll):
    daten = Terminal("/dev/fake").lese_bytes(3)

    assert daten == b"\x1b[A"
    assert protokoll.aufrufe == [
        ("open", "/dev/fake"),
        ("tcgetattr", 7),
        ("setraw", 7),
        ("read", 3),
        ("tcsetattr", ["alt"]),
        ("close", 7),
    ]


def test_failed_read_is_fatal_but_terminal_is_restored(protokoll):
    def kaputt(fd, anzahl):
        raise OSError("device gone")

    protokoll.zustand["lesen"] = kaputt

    with pytest.raises(TerminalFehler):
        Terminal("/dev/fake").lese_bytes()

    assert ("tcsetattr", ["alt"]) in protokoll.aufrufe
    assert protokoll.aufrufe[-1] == ("close", 7)


def test_raw_mode_failure_closes_device(protokoll):
    def kein_terminal(fd):
        raise FakeTermiosError("not a tty")

    protokoll.termios.tcgetattr = kein_terminal

    with pytest.raises(TerminalFehler):
        Terminal("/dev/fake").lese_bytes()

    assert protokoll.aufrufe == [("open", "/dev/fake"), ("close", 7)]


def test_missing_device_is_fatal(monkeypatch, protokoll):
    def fehlt(pfad, flags):
        raise FileNotFoundError(pfad)

    monkeypatch.setattr(terminal_modul.os, "open", fehlt)

    with pytest.raises(TerminalFehler, match="/dev/missing"):
        Terminal("/dev/missing").lese_bytes()
