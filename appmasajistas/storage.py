"""Fixed-width binary file of massage therapist records."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterator
from pathlib import Path

from appmasajistas.models import Masajista

_FIELDS: tuple[tuple[str, int], ...] = (
    ("dni", 8),
    ("nombre", 20),
    ("apellido", 20),
    ("cuit", 11),
    ("direccion", 50),
    ("telefono", 15),
    ("email", 50),
)

_LAYOUT = struct.Struct("".join(f"{width}s" for _, width in _FIELDS))

RECORD_SIZE = _LAYOUT.size
DEFAULT_FILENAME = "masajistas.dat"


def _encode(registro: Masajista) -> bytes:
    values = []
    for name, width in _FIELDS:
        raw = getattr(registro, name).encode("utf-8")
        if len(raw) > width:
            raise ValueError(f"field {name!r} is longer than {width} bytes")
        values.append(raw)
    return _LAYOUT.pack(*values)


def _decode(data: bytes) -> Masajista:
    values = {
        name: raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        for (name, _), raw in zip(_FIELDS, _LAYOUT.unpack(data))
    }
    return Masajista(**values)


class MasajistaFile:
    """Appends and reads Masajista records stored back to back in a file."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_FILENAME) -> None:
        self.path = Path(path)

    def save(self, registro: Masajista) -> None:
        """Append a record to the end of the file."""
        data = _encode(registro)
        with self.path.open("ab") as handle:
            handle.write(data)

    def count(self) -> int:
        """Return the number of whole records in the file, 0 if it is missing."""
        try:
            size = self.path.stat().st_size
        except FileNotFoundError:
            return 0
        return size // RECORD_SIZE

    def read(self, posicion: int) -> Masajista:
        """Return the record at the given zero-based position."""
        if posicion < 0:
            raise IndexError(f"record position out of range: {posicion}")
        try:
            with self.path.open("rb") as handle:
                handle.seek(RECORD_SIZE * posicion)
                data = handle.read(RECORD_SIZE)
        except FileNotFoundError:
            raise IndexError(f"record position out of range: {posicion}") from None
        if len(data) < RECORD_SIZE:
            raise IndexError(f"record position out of range: {posicion}")
        return _decode(data)

    def __iter__(self) -> Iterator[Masajista]:
        try:
            handle = self.path.open("rb")
        except FileNotFoundError:
            return
        with handle:
            while len(data := handle.read(RECORD_SIZE)) == RECORD_SIZE:
                yield _decode(data)

    def __len__(self) -> int:
        return self.count()