"""Domain records for the massage services application."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Fecha:
    """A calendar date held as day, month and year."""

    dia: int = 0
    mes: int = 0
    anio: int = 0

    def __str__(self) -> str:
        return f"{self.dia}/{self.mes}/{self.anio}"


@dataclass
class Empresa:
    """A client company."""

    id: int = 0
    nombre: str = ""
    cuit: str = ""
    direccion: str = ""
    telefono: str = ""
    email: str = ""


@dataclass
class Sede:
    """A branch or location of a company."""

    id: int = 0
    nombre: str = ""
    direccion: str = ""
    telefono: str = ""
    email: str = ""


@dataclass
class TipoServicio:
    """A kind of service offered, with its hourly rate."""

    id: int = 0
    nombre: str = ""
    descripcion: str = ""
    modalidad: str = ""
    valor_hora: float = 0.0


@dataclass
class Masajista:
    """A massage therapist."""

    dni: str = ""
    nombre: str = ""
    apellido: str = ""
    cuit: str = ""
    direccion: str = ""
    telefono: str = ""
    email: str = ""

    def to_csv(self) -> str:
        """Return the fields joined by commas, each followed by a comma."""
        fields = (
            self.dni,
            self.nombre,
            self.apellido,
            self.cuit,
            self.direccion,
            self.telefono,
            self.email,
        )
        return "".join(f"{value}," for value in fields)