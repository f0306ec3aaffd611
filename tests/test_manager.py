import io

import pytest

from appmasajistas.manager import MasajistaManager
from appmasajistas.models import Masajista
from appmasajistas.storage import MasajistaFile

ENTRY = "1234\nJuan\nPerez\n20-1\nCalle Falsa 12\n555\njuan@example.com\n"


@pytest.fixture
def archivo(tmp_path):
    return MasajistaFile(tmp_path / "masajistas.dat")


def make(archivo, text=""):
    out = io.StringIO()
    return MasajistaManager(archivo, io.StringIO(text), out), out


def test_cargar_saves_record(archivo):
    manager, out = make(archivo, ENTRY)
    assert manager.cargar_masajista() is True
    assert archivo.read(0) == Masajista(
        "1234", "Juan", "Perez", "20-1", "Calle Falsa 12", "555", "juan@example.com"
    )
    text = out.getvalue()
    assert "Nuevo masajista guardado con éxito." in text
    assert "Dirección: Calle Falsa 12\n" in text
    assert text.startswith("Ingrese DNI: ")


def test_cargar_words_on_one_line(archivo):
    manager, _ = make(archivo, "1 Ana Diaz 20-2\nAv Siempre Viva\n555 ana@example.com\n")
    manager.cargar_masajista()
    registro = archivo.read(0)
    assert registro.apellido == "Diaz"
    assert registro.direccion == "Av Siempre Viva"
    assert registro.email == "ana@example.com"


def test_cargar_too_long_field_reports_error(archivo):
    manager, out = make(archivo, ENTRY.replace("1234", "123456789012"))
    assert manager.cargar_masajista() is False
    assert "Error inesperado, no se guardó el registro" in out.getvalue()
    assert archivo.count() == 0


def test_cargar_end_of_input(archivo):
    manager, _ = make(archivo, "1234\nJuan\n")
    with pytest.raises(EOFError):
        manager.cargar_masajista()
    assert archivo.count() == 0


def test_listar_prints_csv_lines(archivo):
    first = Masajista("1", "Ana", "Diaz", "20-2", "Calle 1", "555", "ana@example.com")
    second = Masajista("2", "Luis", "Gomez", "20-3", "Calle 2", "556", "luis@example.com")
    archivo.save(first)
    archivo.save(second)
    manager, out = make(archivo)
    manager.listar_masajistas()
    assert out.getvalue().splitlines() == [first.to_csv(), second.to_csv()]


def test_listar_empty(archivo):
    manager, out = make(archivo)
    manager.listar_masajistas()
    assert out.getvalue() == ""


def test_mostrar_cantidad(archivo):
    archivo.save(Masajista(dni="1"))
    archivo.save(Masajista(dni="2"))
    manager, out = make(archivo)
    manager.mostrar_cantidad_masajistas()
    assert out.getvalue() == "Cantidad total de masajistas en la empresa: 2\n"


def test_mostrar_cantidad_missing_file(archivo):
    manager, out = make(archivo)
    manager.mostrar_cantidad_masajistas()
    assert out.getvalue() == "Cantidad total de masajistas en la empresa: 0\n"