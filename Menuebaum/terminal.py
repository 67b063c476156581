# Diese Datei kapselt den direkten Zugriff auf das Terminal-Geraet.
# Pro Lesevorgang wird das Terminal in den Raw-Modus versetzt und danach
# IMMER wieder zurueckgesetzt, auch im Fehlerfall.

import os
import termios
import tty
from contextlib import contextmanager
from typing import Iterator

from Menuebaum.einstellungen import STANDARD_TTY_PFAD


class TerminalFehler(RuntimeError):
    """
    Das Terminal konnte nicht geoeffnet, konfiguriert oder gelesen werden.
    Ohne Eingabe kann die Sitzung nicht weiterlaufen.
    """


class Terminal:
    """
    Liest rohe Bytes vom steuernden Terminal (Standard: /dev/tty).
    """

    def __init__(self, ttyPfad: str = STANDARD_TTY_PFAD) -> None:
        self.ttyPfad: str = ttyPfad

    @contextmanager
    def rohmodus(self) -> Iterator[int]:
        """
        Oeffnet das Terminal im Raw-Modus (ohne Echo) und liefert den Deskriptor.
        Die alten Einstellungen werden beim Verlassen wiederhergestellt.
        """
        try:
            fd = os.open(self.ttyPfad, os.O_RDWR | os.O_NOCTTY)
        except OSError as fehler:
            raise TerminalFehler(f"Terminal {self.ttyPfad} nicht verfuegbar: {fehler}") from fehler

        try:
            try:
                alte_einstellungen = termios.tcgetattr(fd)
                tty.setraw(fd)
            except (termios.error, OSError) as fehler:
                raise TerminalFehler(f"Raw-Modus nicht moeglich: {fehler}") from fehler

            try:
                yield fd
            finally:
                termios.tcsetattr(fd, termios.TCSADRAIN, alte_einstellungen)
        finally:
            os.close(fd)

    def lese_bytes(self, anzahl: int = 3) -> bytes:
        """
        Blockiert, bis mindestens ein Byte anliegt, und liest bis zu `anzahl` Bytes.
        """
        with self.rohmodus() as fd:
            try:
                return os.read(fd, anzahl)
            except OSError as fehler:
                raise TerminalFehler(f"Lesen vom Terminal fehlgeschlagen: {fehler}") from fehler
