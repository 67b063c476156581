from __future__ import annotations

from rich.text import Text


# Stile fuer die Menue-Ausgabe (rich-Stilnamen)
TITEL_STYLE = "bold"
UEBERSCHRIFT_STYLE = "bold"
AUSWAHL_STYLE = "italic"
HOTKEY_STYLE = "underline"

# Reservierter Buchstabe zum Beenden, wird nie als Hotkey vergeben
EXIT_BUCHSTABE = "X"

AUSWAHL_MARKER = ">"
KEIN_MARKER = " "
ZEILEN_EINRUECKUNG = "  "
RAND_ZEICHEN = "*"
RAND_BREITE = 2
ZUSATZ_BREITE = 2
TRENN_ZEICHEN = "-"

PFEIL_HOCH_RUNTER = "↕"
PFEIL_LINKS = "←"
PFEIL_RECHTS = "→"

TEXT_OPTIONEN = "Options:"
TEXT_UNTERMENUES = "SubMenus:"
TEXT_AUSGABE = "------------- Output -------------"
TEXT_ENDE = "-------------- End ---------------"
TEXT_WEITER = "(Press any key to continue)"
TEXT_FEHLER_OPTION = "Error, function not found in Options map."
TEXT_FEHLER_UNTERMENUE = "Error, menu not found in subMenu map."
TEXT_REDRAW_AUS = "redraw disabled"
TEXT_REDRAW_AN = "redraw enabled"


def markiere_hotkey(text: str, hotkey: str | None) -> Text:
    """
    Unterstreicht das erste Vorkommen des Hotkeys im Text.
    """
    zeile = Text(text)
    if hotkey:
        position = text.find(hotkey)
        if position >= 0:
            zeile.stylize(HOTKEY_STYLE, position, position + len(hotkey))
    return zeile


def exit_text() -> Text:
    """
    Liefert "Exit" mit unterstrichenem x.
    """
    return Text.assemble("E", ("x", HOTKEY_STYLE), "it")


def fuelle_auf(text: str, breite: int, zeichen: str) -> str:
    """
    Fuellt eine Zeile rechts mit Zeichen auf, bis sie die Breite erreicht.
    """
    fehlend = breite - len(text)
    if fehlend > 0:
        return text + zeichen * fehlend
    return text
