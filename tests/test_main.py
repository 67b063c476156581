"""Tests for the demo entry point."""

import pytest

import main
from Menuebaum.einstellungen import Einstellungen
from Menuebaum.terminal import TerminalFehler


def test_demo_tree_structure():
    baum = main.baue_demo_baum(Einstellungen(willkommen_anzeigen=False))

    haupt = baum.hauptMenu
    assert baum.name == "Main"
    assert haupt.optionenReihenfolge == ["foo", "bar"]

    (sub,) = baum.untermenues_von(haupt)
    assert sub.name == "Sub"
    assert sub.optionenReihenfolge == ["baz"]

    (uhr,) = baum.untermenues_von(sub)
    assert uhr.promptFunktion is not None
    assert uhr.prompt_aufloesen().startswith("It is ")


def test_demo_home_option_jumps_back():
    baum = main.baue_demo_baum(Einstellungen(willkommen_anzeigen=False))
    (sub,) = baum.untermenues_von(baum.hauptMenu)
    (uhr,) = baum.untermenues_von(sub)

    baum.menu_wechseln(sub)
    baum.menu_wechseln(uhr)
    uhr.optionen["home"]()

    assert baum.aktuellesMenu is baum.hauptMenu
    assert baum.vorherigesMenu is None


def test_main_exits_with_error_without_terminal(monkeypatch):
    def ohne_terminal(self, sitzung=None, ausfuehrer=None):
        raise TerminalFehler("no tty")

    monkeypatch.setattr(main.MenuBaum, "anzeigen", ohne_terminal)

    with pytest.raises(SystemExit) as beendet:
        main.main()

    assert beendet.value.code == 1
