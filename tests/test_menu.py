"""Tests for the Menu data node."""

from Menuebaum.menu import DynamischerPrompt, Menu, StatischerPrompt


def test_readding_option_moves_it_to_the_end_and_replaces_callback():
    menu = Menu("Main")
    alt = lambda: None  # noqa: E731
    neu = lambda: None  # noqa: E731

    menu.option_hinzufuegen("foo", alt)
    menu.option_hinzufuegen("bar", lambda: None)
    menu.option_hinzufuegen("foo", neu)

    assert menu.optionenReihenfolge == ["bar", "foo"]
    assert menu.optionen["foo"] is neu
    assert set(menu.optionen) == set(menu.optionenReihenfolge)


def test_delete_option_keeps_map_and_order_in_sync():
    menu = Menu("Main")
    menu.option_hinzufuegen("foo", lambda: None)
    menu.option_hinzufuegen("bar", lambda: None)

    menu.option_loeschen("foo")
    menu.option_loeschen("does not exist")

    assert menu.optionenReihenfolge == ["bar"]
    assert list(menu.optionen) == ["bar"]
    assert menu.anzahl_optionen() == 1


def test_prompt_function_takes_precedence():
    menu = Menu("Main", prompt="static", promptFunktion=lambda: "dynamic")

    assert isinstance(menu.promptQuelle, DynamischerPrompt)
    assert menu.prompt_aufloesen() == "dynamic"
    assert menu.prompt == "dynamic"


def test_prompt_function_is_evaluated_on_every_resolve():
    aufrufe = []

    def prompt() -> str:
        aufrufe.append(1)
        return f"call {len(aufrufe)}"

    menu = Menu("Main", promptFunktion=prompt)

    assert menu.prompt == ""
    assert menu.prompt_aufloesen() == "call 1"
    assert menu.prompt_aufloesen() == "call 2"
    assert len(aufrufe) == 2


def test_prompt_setzen_switches_variant():
    menu = Menu("Main", promptFunktion=lambda: "dynamic")

    menu.prompt_setzen("static")

    assert isinstance(menu.promptQuelle, StatischerPrompt)
    assert menu.promptFunktion is None
    assert menu.prompt == "static"


def test_auswahl_begrenzen():
    menu = Menu("Main")
    menu.auswahl = 5

    menu.auswahl_begrenzen(3)
    assert menu.auswahl == 2

    menu.auswahl_begrenzen(0)
    assert menu.auswahl == 0


def test_prompt_query_returns_normalised_line_breaks():
    statisch = Menu("Main", prompt="one\r\ntwo\n\rthree")
    dynamisch = Menu("Clock", promptFunktion=lambda: "a\r\nb")

    dynamisch.prompt_aufloesen()

    assert statisch.prompt == "one\ntwo\nthree"
    assert dynamisch.prompt == "a\nb"
