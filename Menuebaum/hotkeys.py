from __future__ import annotations

from typing import Dict, Optional

from Menuebaum.ui_layout import EXIT_BUCHSTABE


def weise_hotkey_zu(name: str, index: int, hotkeys: Dict[str, int]) -> Optional[str]:
    """
    Vergibt den ersten freien Buchstaben aus dem Namen als Hotkey.

    Der Grossbuchstabe wird in `hotkeys` eingetragen (-> index).
    Zurueckgegeben wird das Zeichen in seiner Original-Schreibweise,
    damit es in der Anzeige markiert werden kann. Kein freies Zeichen -> None.
    """
    for zeichen in name:
        gross = zeichen.upper()
        if gross == EXIT_BUCHSTABE:
            continue
        if gross not in hotkeys:
            hotkeys[gross] = index
            return zeichen
    return None
