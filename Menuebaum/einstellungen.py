from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any


STANDARD_TTY_PFAD = "/dev/tty"

_FALSCH_WERTE = {"0", "false", "nein", "no", "off", "aus"}
_WAHR_WERTE = {"1", "true", "ja", "yes", "on", "an"}


def _to_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value

    text = str(value).strip().lower()
    if text in _FALSCH_WERTE:
        return False
    if text in _WAHR_WERTE:
        return True
    return default


@dataclass
class Einstellungen:
    """
    Konfiguration einer Menue-Sitzung.
    Werte koennen ueber Umgebungsvariablen (MENUEBAUM_*) gesetzt werden.
    """

    tty_pfad: str = STANDARD_TTY_PFAD
    redraw: bool = True
    willkommen_anzeigen: bool = True

    @classmethod
    def from_env(cls, umgebung: dict[str, Any] | None = None) -> "Einstellungen":
        """
        Liest die Einstellungen aus der Umgebung.
        Unbekannte oder leere Werte fallen auf die Standardwerte zurueck.
        """
        if umgebung is None:
            umgebung = dict(os.environ)

        tty_pfad = (umgebung.get("MENUEBAUM_TTY") or "").strip() or STANDARD_TTY_PFAD

        return cls(
            tty_pfad=tty_pfad,
            redraw=_to_bool(umgebung.get("MENUEBAUM_REDRAW"), True),
            willkommen_anzeigen=_to_bool(umgebung.get("MENUEBAUM_WILLKOMMEN"), True),
        )

