# Diese Datei uebersetzt rohe Tastatur-Bytes in logische Befehle.
# Die Tastencodes kommen aus readchar.key, das Lesen selbst uebernimmt Terminal.
# Andere Klassen (z. B. Sitzung) sollen NICHT direkt mit dem Terminal arbeiten.

from readchar import key

from Menuebaum.terminal import Terminal
from Menuebaum.ui_layout import EXIT_BUCHSTABE


UP = "UP"
DOWN = "DOWN"
BACK = "BACK"
ENTER = "ENTER"
TOGGLE = "TOGGLE"
EXIT = "EXIT"
LEER = ""

# Pfeiltasten sind das letzte Byte einer 3-Byte-Sequenz (ESC [ X)
PFEIL_BEFEHLE: dict[int, str] = {
    ord(key.UP[-1]): UP,
    ord(key.DOWN[-1]): DOWN,
    ord(key.LEFT[-1]): BACK,
    ord(key.RIGHT[-1]): ENTER,
}

EINZEL_BEFEHLE: dict[int, str] = {
    ord(key.CR): ENTER,
    ord(key.ESC): BACK,
    ord("`"): TOGGLE,
    ord(EXIT_BUCHSTABE.lower()): EXIT,
    ord(key.CTRL_C): EXIT,
}


def interpretiere_bytes(daten: bytes) -> str:
    """
    Liefert genau einen Befehl fuer das Ergebnis eines Lesevorgangs.

    3 Bytes -> Pfeiltaste, entschieden wird nur am dritten Byte.
    Unbekannte Sequenzen werden bewusst als DOWN behandelt.
    Sonst entscheidet das erste Byte, alles Unbekannte kommt als Zeichen zurueck.
    """
    if not daten:
        return LEER

    if len(daten) == 3:
        return PFEIL_BEFEHLE.get(daten[2], DOWN)

    befehl = EINZEL_BEFEHLE.get(daten[0])
    if befehl is not None:
        return befehl

    # Mehrbyte-Zeichen (z. B. Umlaute) als Ganzes zurueckgeben
    zeichen = daten.decode("utf-8", errors="ignore")
    if zeichen:
        return zeichen[0]
    return chr(daten[0])


class Navigation:
    """
    Liest pro Tastendruck bis zu drei Rohbytes vom Terminal.
    Drei Bytes sind eine Pfeil-Sequenz, das letzte Byte bestimmt die Richtung.
    Sonst entscheidet das erste Byte (Enter, Esc, Backtick, x, Ctrl-C);
    alles andere kommt als Zeichen zurueck.
    """

    LESE_LAENGE = 3

    def __init__(self, terminal: Terminal | None = None) -> None:
        self.terminal: Terminal = terminal if terminal is not None else Terminal()

    def lese_taste(self) -> str:
        """
        Liest genau einen Tastendruck (blockierend) und interpretiert ihn.
        """
        daten = self.terminal.lese_bytes(self.LESE_LAENGE)
        return interpretiere_bytes(daten)

    def warte_auf_taste(self) -> None:
        """
        Wartet auf einen beliebigen Tastendruck ("press any key").
        """
        self.terminal.lese_bytes(self.LESE_LAENGE)
