# Diese Datei enthaelt die Ereignisschleife einer Menue-Sitzung.
# Sie liest Befehle ueber Navigation, veraendert Auswahl und Menuebaum
# und ruft die an Optionen gebundenen Funktionen auf.

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from Menuebaum.menu import Menu
from Menuebaum.menuRenderer import MenuRenderer
from Menuebaum.navigation import BACK, DOWN, ENTER, EXIT, LEER, TOGGLE, UP, Navigation
from Menuebaum.terminal import Terminal
from Menuebaum.ui_layout import (
    RAND_ZEICHEN,
    TEXT_AUSGABE,
    TEXT_ENDE,
    TEXT_FEHLER_OPTION,
    TEXT_FEHLER_UNTERMENUE,
    TEXT_REDRAW_AN,
    TEXT_REDRAW_AUS,
    TEXT_WEITER,
    TRENN_ZEICHEN,
)

if TYPE_CHECKING:
    from Menuebaum.menu_baum import MenuBaum


class Aktionsausfuehrer:
    """
    Ruft die Funktion einer Option auf.
    Kann ersetzt werden, z. B. um Aufrufe in Tests nur aufzuzeichnen.
    """

    def ausfuehren(self, name: str, aktion: Callable[[], None]) -> None:
        aktion()


class Sitzung:
    """
    Eine interaktive Sitzung: vom ersten Rendern bis der Benutzer beendet.
    """

    def __init__(
        self,
        baum: MenuBaum,
        navigation: Optional[Navigation] = None,
        renderer: Optional[MenuRenderer] = None,
        ausfuehrer: Optional[Aktionsausfuehrer] = None,
    ) -> None:
        self.baum = baum
        self.navigation: Navigation = (
            navigation
            if navigation is not None
            else Navigation(Terminal(baum.einstellungen.tty_pfad))
        )
        self.renderer: MenuRenderer = renderer if renderer is not None else MenuRenderer()
        self.ausfuehrer: Aktionsausfuehrer = (
            ausfuehrer if ausfuehrer is not None else Aktionsausfuehrer()
        )
        self.anzeigend: bool = False

    def starten(self) -> None:
        """
        Zeigt das aktuelle Menue an und verarbeitet Befehle bis EXIT.
        """
        baum = self.baum
        self.anzeigend = True
        baum.aktuellesMenu.auswahl = 0
        baum.sitzung_anmelden(self)

        try:
            # Das erste Bild nie zurueckspulen
            redrawVorher = baum.redraw
            baum.redraw = False
            try:
                if baum.einstellungen.willkommen_anzeigen:
                    self.renderer.willkommen_anzeigen()
                    self.navigation.warte_auf_taste()
                self.rendern()
            finally:
                baum.redraw = redrawVorher

            self.renderer.cursor_anzeigen(False)
            while self.anzeigend:
                befehl = self.navigation.lese_taste()
                self.verarbeite_befehl(befehl)
        finally:
            self.anzeigend = False
            baum.sitzung_abmelden(self)
            self.renderer.cursor_anzeigen(True)
            self.renderer.leerzeile()

    def verarbeite_befehl(self, befehl: str) -> None:
        baum = self.baum
        menu = baum.aktuellesMenu

        if befehl == UP:
            self.auswahl_verschieben(-1)
        elif befehl == DOWN:
            self.auswahl_verschieben(1)
        elif befehl == ENTER:
            self.ausfuehren(menu.auswahl)
        elif befehl == BACK:
            if baum.vorherigesMenu is not None:
                baum.menu_wechseln(baum.vorherigesMenu)
        elif befehl == TOGGLE:
            self.redraw_umschalten()
        elif befehl == EXIT:
            self.anzeigend = False
        elif befehl == LEER:
            pass
        else:
            index = menu.hotkeys.get(befehl.upper())
            if index is not None:
                menu.auswahl = index
                self.ausfuehren(index)

    def auswahl_verschieben(self, schritt: int) -> None:
        """
        Bewegt die Auswahl mit Umlauf ueber Optionen und Untermenues.
        """
        menu = self.baum.aktuellesMenu
        gesamt = self.baum.anzahl_eintraege(menu)
        if gesamt == 0:
            menu.auswahl = 0
        else:
            menu.auswahl = (menu.auswahl + schritt) % gesamt
        self.rendern()

    def rendern(self) -> None:
        baum = self.baum
        menu = baum.aktuellesMenu
        menu.auswahl_begrenzen(baum.anzahl_eintraege(menu))
        self.renderer.rendern(
            menu, baum.untermenues_von(menu), baum.vorherigesMenu, baum.redraw
        )

    def redraw_umschalten(self) -> None:
        baum = self.baum
        if baum.redraw:
            baum.redraw = False
            self.renderer.hinweis(TEXT_REDRAW_AUS)
            self.rendern()
        else:
            # Hinweis und Menue erst zeichnen, dann einschalten,
            # sonst wuerde der Hinweis gleich wieder ueberschrieben
            self.renderer.hinweis(TEXT_REDRAW_AN)
            self.rendern()
            baum.redraw = True

    def ausfuehren(self, index: int) -> None:
        """
        Fuehrt eine Option aus oder wechselt in ein Untermenue, je nach Index.
        """
        menu = self.baum.aktuellesMenu
        anzahlOptionen = menu.anzahl_optionen()

        if 0 <= index < anzahlOptionen:
            self._option_ausfuehren(menu, menu.optionenReihenfolge[index])
        else:
            self._untermenue_oeffnen(menu, index - anzahlOptionen)

    def _option_ausfuehren(self, menu: Menu, name: str) -> None:
        redraw = self.baum.redraw
        renderer = self.renderer

        # Fusszeile des Menues durch das Banner ersetzen
        if redraw:
            renderer.cursor_hoch(2)
        menu.letzteRenderZeilen = 0

        renderer.leerzeile()
        renderer.trennzeile(menu, f"*** Executing {name}... ***", RAND_ZEICHEN, redraw)

        funktion = menu.optionen.get(name)
        if funktion is None:
            renderer.fehler_anzeigen(TEXT_FEHLER_OPTION)
            self.navigation.warte_auf_taste()
            renderer.leerzeile()
            self.rendern()
            return

        renderer.trennzeile(menu, TEXT_AUSGABE, TRENN_ZEICHEN, redraw)
        self.ausfuehrer.ausfuehren(name, funktion)
        renderer.trennzeile(menu, TEXT_ENDE, TRENN_ZEICHEN)
        renderer.zeile(TEXT_WEITER)
        self.navigation.warte_auf_taste()
        renderer.leerzeile()
        self.rendern()

    def _untermenue_oeffnen(self, menu: Menu, unterIndex: int) -> None:
        untermenues = self.baum.untermenueMap.get(menu)
        if untermenues is None:
            self._fehler_bestaetigen(menu, TEXT_FEHLER_UNTERMENUE)
        elif 0 <= unterIndex < len(untermenues):
            self.baum.menu_wechseln(untermenues[unterIndex])
        else:
            self._fehler_bestaetigen(menu, TEXT_FEHLER_OPTION)

    def _fehler_bestaetigen(self, menu: Menu, text: str) -> None:
        self.renderer.fehler_anzeigen(text)
        # Fehlertext und Hinweis mitzaehlen, damit der Block wieder oben anfaengt;
        # die beiden Zeilen bleiben unter dem neuen Block stehen
        menu.letzteRenderZeilen += 2
        self.navigation.warte_auf_taste()
        self.rendern()
