# Diese Datei enthaelt die Menue-Klasse (ein Knoten im Menuebaum).
# Sie haelt nur Daten: Name, Prompt, Optionen und die Auswahl.
# Navigation und Darstellung passieren in Sitzung und MenuRenderer.

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union


@dataclass
class StatischerPrompt:
    """
    Fester Prompt-Text.
    """

    text: str

    def aufloesen(self) -> str:
        return self.text


@dataclass
class DynamischerPrompt:
    """
    Prompt, der bei jedem Rendern neu von einer Funktion erzeugt wird.
    """

    funktion: Callable[[], str]

    def aufloesen(self) -> str:
        return self.funktion()


PromptQuelle = Union[StatischerPrompt, DynamischerPrompt]


def vereinheitliche_umbrueche(text: str) -> str:
    # CRLF und LFCR werden zu LF
    return text.replace("\r\n", "\n").replace("\n\r", "\n")


def baue_prompt_quelle(
    prompt: str = "", promptFunktion: Optional[Callable[[], str]] = None
) -> PromptQuelle:
    """
    Prompt und promptFunktion schliessen sich aus, die Funktion hat Vorrang.
    """
    if promptFunktion is not None:
        return DynamischerPrompt(promptFunktion)
    return StatischerPrompt(prompt)


class Menu:
    """
    Ein benanntes Menue mit Optionen (Name -> Funktion).
    Der Name ist unveraenderlich und dient als Titel und Schluessel im Baum.
    """

    def __init__(
        self,
        name: str,
        prompt: str = "",
        promptFunktion: Optional[Callable[[], str]] = None,
    ) -> None:
        self._name: str = name
        self.promptQuelle: PromptQuelle = baue_prompt_quelle(prompt, promptFunktion)

        # Optionen und ihre Reihenfolge muessen immer synchron bleiben
        self.optionen: Dict[str, Callable[[], None]] = {}
        self.optionenReihenfolge: List[str] = []

        # Index in [Optionen..., Untermenues...]
        self.auswahl: int = 0

        # Wird bei jedem Rendern neu aufgebaut: Buchstabe -> Index
        self.hotkeys: Dict[str, int] = {}

        # Zuletzt angezeigter Prompt-Text (auch bei Prompt-Funktionen)
        self.letzterPrompt: str = prompt if promptFunktion is None else ""

        # Layout-Gedaechtnis fuer den MenuRenderer
        self.letzteRenderZeilen: int = 0
        self.laengsteZeile: int = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def prompt(self) -> str:
        """
        Prompt-Text mit vereinheitlichten Zeilenumbruechen, wie er angezeigt wird.
        Bei einer Prompt-Funktion das Ergebnis des letzten Renderns.
        """
        if isinstance(self.promptQuelle, StatischerPrompt):
            return vereinheitliche_umbrueche(self.promptQuelle.text)
        return vereinheitliche_umbrueche(self.letzterPrompt)

    @property
    def promptFunktion(self) -> Optional[Callable[[], str]]:
        if isinstance(self.promptQuelle, DynamischerPrompt):
            return self.promptQuelle.funktion
        return None

    def prompt_setzen(
        self, prompt: str = "", promptFunktion: Optional[Callable[[], str]] = None
    ) -> None:
        self.promptQuelle = baue_prompt_quelle(prompt, promptFunktion)
        self.letzterPrompt = prompt if promptFunktion is None else ""

    def prompt_aufloesen(self) -> str:
        """
        Wertet die Prompt-Quelle genau einmal aus.
        """
        self.letzterPrompt = self.promptQuelle.aufloesen()
        return self.letzterPrompt

    def option_hinzufuegen(self, name: str, funktion: Callable[[], None]) -> None:
        """
        Fuegt eine Option hinzu. Ein bereits vorhandener Name wird ersetzt
        und rutscht ans Ende der Reihenfolge.
        """
        self.optionen[name] = funktion
        if name in self.optionenReihenfolge:
            self.optionenReihenfolge.remove(name)
        self.optionenReihenfolge.append(name)

    def option_loeschen(self, name: str) -> None:
        self.optionen.pop(name, None)
        if name in self.optionenReihenfolge:
            self.optionenReihenfolge.remove(name)

    def anzahl_optionen(self) -> int:
        return len(self.optionenReihenfolge)

    def auswahl_begrenzen(self, gesamt: int) -> None:
        """
        Haelt die Auswahl im Bereich [0, gesamt), bei leerem Menue auf 0.
        """
        if gesamt <= 0:
            self.auswahl = 0
        elif self.auswahl >= gesamt:
            self.auswahl = gesamt - 1
        elif self.auswahl < 0:
            self.auswahl = 0

    def __repr__(self) -> str:
        return f"Menu({self._name!r})"
