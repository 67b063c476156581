# Diese Datei enthaelt den Menuebaum: Hauptmenue, Untermenue-Beziehungen
# sowie aktuelles und vorheriges Menue.
# Die Menues selbst kennen weder Eltern noch Kinder, das regelt nur der Baum.

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from Menuebaum.einstellungen import Einstellungen
from Menuebaum.menu import Menu
from Menuebaum.sitzung import Aktionsausfuehrer, Sitzung


class MenuBaum:
    """
    Haelt alle Menues einer Sitzung zusammen.
    Es gibt nur EIN vorheriges Menue (kein Verlauf), "zurueck" geht also
    hoechstens einen Schritt.
    """

    def __init__(self, hauptMenu: Menu, einstellungen: Einstellungen | None = None) -> None:
        self.einstellungen: Einstellungen = (
            einstellungen if einstellungen is not None else Einstellungen.from_env()
        )

        self.hauptMenu: Menu = hauptMenu
        self.aktuellesMenu: Menu = hauptMenu
        self.vorherigesMenu: Optional[Menu] = None

        # Eltern-Menue -> Untermenues in Anzeigereihenfolge
        self.untermenueMap: Dict[Menu, List[Menu]] = {}

        # Menue vor jedem Rendern zurueckspulen und ueberschreiben
        self.redraw: bool = self.einstellungen.redraw

        self._sitzung: Optional[Sitzung] = None

    @property
    def name(self) -> str:
        """
        Name des aktuellen Menues.
        """
        return self.aktuellesMenu.name

    @property
    def prompt(self) -> str:
        """
        Prompt des aktuellen Menues.
        """
        return self.aktuellesMenu.prompt

    @property
    def anzeigend(self) -> bool:
        return self._sitzung is not None and self._sitzung.anzeigend

    def prompt_setzen(
        self, prompt: str = "", promptFunktion: Optional[Callable[[], str]] = None
    ) -> None:
        """
        Setzt Prompt-Text oder Prompt-Funktion des aktuellen Menues.
        Laeuft gerade eine Sitzung, wird sofort neu gezeichnet.
        """
        self.aktuellesMenu.prompt_setzen(prompt, promptFunktion)
        if self.anzeigend:
            self._sitzung.rendern()

    def untermenue_hinzufuegen(self, elternMenu: Menu, kindMenu: Menu) -> None:
        self.untermenueMap.setdefault(elternMenu, []).append(kindMenu)

    def untermenues_hinzufuegen(self, elternMenu: Menu, kindMenues: Iterable[Menu]) -> None:
        self.untermenueMap.setdefault(elternMenu, []).extend(kindMenues)

    def untermenue_loeschen(self, elternMenu: Menu, kindMenu: Menu) -> None:
        """
        Entfernt das erste passende Kind-Menue. Unbekannte Menues werden ignoriert.
        """
        kinder = self.untermenueMap.get(elternMenu)
        if kinder is None:
            return
        for index, kind in enumerate(kinder):
            if kind is kindMenu:
                del kinder[index]
                break

    def untermenues_loeschen(self, elternMenu: Menu, kindMenues: Iterable[Menu]) -> None:
        for kindMenu in kindMenues:
            self.untermenue_loeschen(elternMenu, kindMenu)

    def untermenues_von(self, menu: Menu) -> List[Menu]:
        return self.untermenueMap.get(menu, [])

    def anzahl_eintraege(self, menu: Menu) -> int:
        """
        Optionen plus Untermenues, also alle auswaehlbaren Zeilen.
        """
        return menu.anzahl_optionen() + len(self.untermenues_von(menu))

    def menu_wechseln(self, menu: Menu) -> None:
        """
        Springt direkt zum Menue. Das bisherige Menue wird zum "zurueck"-Ziel,
        ausser das Ziel ist das Hauptmenue.
        """
        self.vorherigesMenu = self.aktuellesMenu
        if menu is self.hauptMenu:
            self.vorherigesMenu = None
        self.aktuellesMenu = menu
        # erzwingt ein komplettes Neuzeichnen ohne Zurueckspulen
        self.aktuellesMenu.letzteRenderZeilen = 0
        if self.anzeigend:
            self._sitzung.rendern()

    def sitzung_anmelden(self, sitzung: Sitzung) -> None:
        self._sitzung = sitzung

    def sitzung_abmelden(self, sitzung: Sitzung) -> None:
        if self._sitzung is sitzung:
            self._sitzung = None

    def anzeigen(
        self,
        sitzung: Sitzung | None = None,
        ausfuehrer: Aktionsausfuehrer | None = None,
    ) -> None:
        """
        Startet die interaktive Sitzung und blockiert, bis der Benutzer beendet.
        """
        if sitzung is None:
            sitzung = Sitzung(self, ausfuehrer=ausfuehrer)
        sitzung.starten()
