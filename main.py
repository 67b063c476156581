# Einstiegspunkt der Menuebaum-Demo.
# Diese Datei baut einen kleinen Beispielbaum und startet die Sitzung.
# Hier befindet sich bewusst KEINE Navigationslogik.

import sys
from datetime import datetime

from rich.console import Console

from Menuebaum.einstellungen import Einstellungen
from Menuebaum.menu import Menu
from Menuebaum.menu_baum import MenuBaum
from Menuebaum.terminal import TerminalFehler


def baue_demo_baum(einstellungen: Einstellungen | None = None) -> MenuBaum:
    """
    Erzeugt den Beispielbaum:
    Main (foo, bar) -> Sub (baz) -> Uhr (Zeit mit dynamischem Prompt)
    """
    hauptMenu = Menu("Main", prompt="Choose an option or open a submenu.")
    unterMenu = Menu("Sub", prompt="A submenu.\r\nIt has its own options.")
    uhrMenu = Menu(
        "Clock",
        promptFunktion=lambda: f"It is {datetime.now():%H:%M:%S}.",
    )

    zaehler = {"foo": 0}

    def foo() -> None:
        zaehler["foo"] += 1
        print(f"foo was called {zaehler['foo']} time(s)")

    hauptMenu.option_hinzufuegen("foo", foo)
    hauptMenu.option_hinzufuegen("bar", lambda: print("bar!"))
    unterMenu.option_hinzufuegen("baz", lambda: print("baz!"))
    uhrMenu.option_hinzufuegen("refresh", lambda: print("refreshed"))

    baum = MenuBaum(hauptMenu, einstellungen)
    baum.untermenue_hinzufuegen(hauptMenu, unterMenu)
    baum.untermenue_hinzufuegen(unterMenu, uhrMenu)

    # Direkter Sprung zurueck ins Hauptmenue
    uhrMenu.option_hinzufuegen("home", lambda: baum.menu_wechseln(hauptMenu))
    return baum


def main() -> None:
    """
    Hauptfunktion des Programms.
    Startet die Sitzung; ohne Terminal wird mit Fehlercode beendet.
    """
    baum = baue_demo_baum()
    try:
        baum.anzeigen()
    except TerminalFehler as fehler:
        Console(stderr=True, highlight=False).print(f"Terminal error: {fehler}", markup=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
