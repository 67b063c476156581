from typing import List, Optional, Sequence

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text

from Menuebaum.hotkeys import weise_hotkey_zu
from Menuebaum.menu import Menu, vereinheitliche_umbrueche
from Menuebaum.ui_layout import (
    AUSWAHL_MARKER,
    AUSWAHL_STYLE,
    HOTKEY_STYLE,
    KEIN_MARKER,
    PFEIL_HOCH_RUNTER,
    PFEIL_LINKS,
    PFEIL_RECHTS,
    RAND_BREITE,
    RAND_ZEICHEN,
    TEXT_OPTIONEN,
    TEXT_UNTERMENUES,
    TEXT_WEITER,
    TITEL_STYLE,
    UEBERSCHRIFT_STYLE,
    ZEILEN_EINRUECKUNG,
    ZUSATZ_BREITE,
    exit_text,
    fuelle_auf,
    markiere_hotkey,
)


def normalisiere_prompt(prompt: str) -> List[str]:
    """
    Vereinheitlicht gemischte Zeilenumbrueche und teilt den Prompt in Zeilen.
    """
    return vereinheitliche_umbrueche(prompt).split("\n")


class MenuRenderer:
    """
    Zentrale Klasse fuer die Ausgabe eines Menues im Terminal.
    Merkt sich pro Menue, wie viele Zeilen gedruckt wurden, damit das
    naechste Rendern den alten Block ueberschreiben kann.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console: Console = (
            console
            if console is not None
            else Console(highlight=False, markup=False, emoji=False)
        )

    def baue_zeilen(
        self,
        menu: Menu,
        untermenues: Sequence[Menu],
        vorherigesMenu: Optional[Menu],
    ) -> List[Text]:
        """
        Baut die Textzeilen des Menues (ohne Rahmen).
        Die Hotkeys des Menues werden dabei komplett neu vergeben.
        """
        menu.hotkeys = {}
        zeilen: List[Text] = [Text.assemble("Menu: ", (menu.name, TITEL_STYLE))]

        prompt = menu.prompt_aufloesen()
        if prompt:
            for promptZeile in normalisiere_prompt(prompt):
                zeilen.append(Text(f" {promptZeile}"))

        if menu.optionenReihenfolge:
            zeilen.append(Text(TEXT_OPTIONEN, style=UEBERSCHRIFT_STYLE))
        for index, optionName in enumerate(menu.optionenReihenfolge):
            zeilen.append(self._eintrag_zeile(menu, optionName, index))

        if untermenues:
            zeilen.append(Text(TEXT_UNTERMENUES, style=UEBERSCHRIFT_STYLE))
            anzahlOptionen = menu.anzahl_optionen()
            for index, untermenu in enumerate(untermenues):
                zeilen.append(
                    self._eintrag_zeile(menu, untermenu.name, index + anzahlOptionen)
                )

        zeilen.append(Text(""))
        if vorherigesMenu is not None:
            zeilen.append(
                Text.assemble(
                    f" {PFEIL_LINKS}/esc back to {vorherigesMenu.name}, ",
                    exit_text(),
                    " ",
                )
            )
        else:
            zeilen.append(exit_text())
        return zeilen

    def _eintrag_zeile(self, menu: Menu, name: str, index: int) -> Text:
        hotkey = weise_hotkey_zu(name, index, menu.hotkeys)
        eintrag = markiere_hotkey(name, hotkey)
        if index == menu.auswahl:
            eintrag.stylize(AUSWAHL_STYLE)
            return Text.assemble(AUSWAHL_MARKER, eintrag)
        return Text.assemble(KEIN_MARKER, eintrag)

    def rendern(
        self,
        menu: Menu,
        untermenues: Sequence[Menu],
        vorherigesMenu: Optional[Menu],
        redraw: bool,
    ) -> None:
        """
        Zeichnet das Menue als umrahmten Block.
        Bei aktivem Redraw wird der zuletzt gedruckte Block vorher ueberschrieben.
        """
        if menu.letzteRenderZeilen > 0 and redraw:
            self.cursor_hoch(menu.letzteRenderZeilen)

        zeilen = self.baue_zeilen(menu, untermenues, vorherigesMenu)

        menu.laengsteZeile = max(zeile.cell_len for zeile in zeilen) + ZUSATZ_BREITE
        # +1 fuer die obere Rahmenlinie
        menu.letzteRenderZeilen = len(zeilen) + 1

        self.leerzeile()
        self.zeile(Text(RAND_ZEICHEN * self.rahmen_breite(menu)), redraw)
        for zeile in zeilen[:-1]:
            self.zeile(Text.assemble(ZEILEN_EINRUECKUNG, zeile), redraw)

        # letzte Zeile bildet die untere Rahmenlinie, ohne Zeilenumbruch
        letzte = zeilen[-1]
        fuellung = RAND_ZEICHEN * max(0, menu.laengsteZeile - letzte.cell_len)
        rand = RAND_ZEICHEN * RAND_BREITE
        self.zeile(Text.assemble(rand, letzte, fuellung, rand), redraw, ende="")

    def rahmen_breite(self, menu: Menu) -> int:
        return menu.laengsteZeile + 2 * RAND_BREITE

    def zeile(self, text, loeschen: bool = False, ende: str = "\n") -> None:
        """
        Schreibt eine Zeile. Mit `loeschen` wird die Terminalzeile vorher geleert.
        """
        if loeschen:
            self.console.control(Control((ControlType.ERASE_IN_LINE, 2)))
        if isinstance(text, str):
            text = Text(text)
        self.console.print(text, end=ende, soft_wrap=True)

    def leerzeile(self) -> None:
        self.console.print(end="\n", soft_wrap=True)

    def cursor_hoch(self, anzahl: int) -> None:
        if anzahl > 0:
            self.console.control(Control.move(0, -anzahl))

    def cursor_anzeigen(self, sichtbar: bool) -> None:
        self.console.show_cursor(sichtbar)

    def trennzeile(self, menu: Menu, text: str, zeichen: str, loeschen: bool = False) -> None:
        """
        Banner auf Menuebreite auffuellen (z. B. "*** Executing ... ***").
        """
        self.zeile(fuelle_auf(text, self.rahmen_breite(menu), zeichen), loeschen)

    def fehler_anzeigen(self, text: str, loeschen: bool = False) -> None:
        """
        Zwei Zeilen unter dem Menue: Fehlertext und Tastenhinweis.
        Der Cursor bleibt am Ende des Hinweises stehen.
        """
        self.leerzeile()
        self.zeile(text, loeschen)
        self.zeile(TEXT_WEITER, loeschen, ende="")

    def hinweis(self, text: str) -> None:
        self.leerzeile()
        self.zeile(text)

    def willkommen_anzeigen(self) -> None:
        self.zeile("Welcome to menu tree.")
        self.zeile(f"{PFEIL_HOCH_RUNTER} to move selection cursor.")
        self.zeile(
            Text.assemble(f"{PFEIL_RECHTS}/Enter/H", ("o", HOTKEY_STYLE), "tkey to choose.")
        )
        self.zeile(Text.assemble(f"{PFEIL_LINKS}/Esc to go back, ", ("x", HOTKEY_STYLE), " to Exit."))
        self.zeile("` (backtick) to toggle redraw (small terminals may scramble)")
        self.zeile("Press any key to start menu...")
