"""Interactive operations on the massage therapist records."""

from __future__ import annotations

import sys
from typing import TextIO

from appmasajistas.models import Masajista
from appmasajistas.storage import MasajistaFile


class _Input:
    """Reads whitespace-separated words and whole lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    @classmethod
    def wrap(cls, stream: TextIO | _Input | None) -> _Input:
        if isinstance(stream, _Input):
            return stream
        return cls(stream if stream is not None else sys.stdin)

    def _fill(self) -> None:
        line = self._stream.readline()
        if not line:
            raise EOFError("end of input")
        self._pending = line

    def word(self) -> str:
        """Return the next word, skipping any whitespace and blank lines."""
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                break
            self._fill()
        parts = stripped.split(maxsplit=1)
        word = parts[0]
        self._pending = stripped[len(word):]
        return word

    def skip(self) -> None:
        """Discard one character of input."""
        if not self._pending:
            self._fill()
        self._pending = self._pending[1:]

    def line(self) -> str:
        """Return the rest of the current line, or the next one, without its newline."""
        if not self._pending:
            self._fill()
        text, newline, rest = self._pending.partition("\n")
        self._pending = rest if newline else ""
        return text


class MasajistaManager:
    """Prompts for, lists and counts the stored massage therapists."""

    def __init__(
        self,
        archivo: MasajistaFile | None = None,
        stdin: TextIO | _Input | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.archivo = archivo if archivo is not None else MasajistaFile()
        self._input = _Input.wrap(stdin)
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)

    def cargar_masajista(self) -> bool:
        """Ask for a new therapist's data and append it to the file."""
        self._write("Ingrese DNI: ")
        dni = self._input.word()
        self._write("Ingrese Nombre: ")
        nombre = self._input.word()
        self._write("Ingrese Apellido: ")
        apellido = self._input.word()
        self._write("Ingrese CUIT: ")
        cuit = self._input.word()
        self._write("Ingrese Dirección: ")
        self._input.skip()
        direccion = self._input.line()
        self._write("Ingrese Teléfono: ")
        telefono = self._input.word()
        self._write("Ingrese E-mail: ")
        email = self._input.word()

        self._write(f"Dirección: {direccion}\n")

        masajista = Masajista(dni, nombre, apellido, cuit, direccion, telefono, email)
        try:
            self.archivo.save(masajista)
        except (OSError, ValueError):
            self._write("Error inesperado, no se guardó el registro\n")
            return False
        self._write("Nuevo masajista guardado con éxito.\n")
        return True

    def listar_masajistas(self) -> None:
        """Print every stored therapist as a CSV line."""
        for registro in self.archivo:
            self._write(registro.to_csv() + "\n")

    def mostrar_cantidad_masajistas(self) -> None:
        """Print how many therapists are stored."""
        cantidad = self.archivo.count()
        self._write(f"Cantidad total de masajistas en la empresa: {cantidad}\n")