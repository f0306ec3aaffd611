# appmasajistas

A small console application for managing massage services. Its text
menus are in Spanish. It keeps massage therapists (*masajistas*) in a
binary file of fixed-width records. The file is `masajistas.dat` in the
current directory.

## Installation

```
pip install .
```

## Usage

Start the application:

```
appmasajistas
```

The main menu offers:

```
  1. Masajistas
  2. Empresas
  3. Servicios

  0. Salir de App Masajistas
```

The *Masajistas* menu has these options:

- **1. Agregar masajista** asks for DNI, name, surname, CUIT, address,
  phone and e-mail. Each of these is a single word, except the address,
  which takes the whole line. The new record is appended to the file.
- **2. Listar masajista** prints every stored therapist as one
  comma-separated line.
- **5. Mostrar cantitdad de masajistas** prints how many therapists are
  stored.

The application leaves when you choose 0 in the main menu, or when input
ends. An entry that is not a number is reported as an invalid option.

## What it does not do

- Therapists cannot be modified or deleted. Options 3 and 4 of the
  *Masajistas* menu only print their own title.
- The *Empresas* and *Servicios* menus are placeholders. Every option
  there only prints its title, and nothing is stored.
- `Empresa`, `Sede`, `TipoServicio` and `Fecha` are plain data types.
  No file or menu action uses them.

## Using it as a library

```python
from appmasajistas.models import Masajista
from appmasajistas.storage import MasajistaFile

archivo = MasajistaFile("masajistas.dat")
archivo.save(Masajista("00000001", "Ana", "Perez", "00000000001",
                       "Calle Falsa 123", "0000", "ana@example.com"))

print(archivo.count())        # also len(archivo)
print(archivo.read(0).nombre)
for masajista in archivo:
    print(masajista.to_csv())
```

Each field is stored as UTF-8 in a fixed width:

| field       | bytes |
|-------------|-------|
| `dni`       | 8     |
| `nombre`    | 20    |
| `apellido`  | 20    |
| `cuit`      | 11    |
| `direccion` | 50    |
| `telefono`  | 15    |
| `email`     | 50    |

`save` raises `ValueError` for a field that is longer than its width.
`read` raises `IndexError` for a position that has no whole record.
`count` returns 0 when the file does not exist.

`appmasajistas.models` holds these dataclasses:

- `Masajista`. Its `to_csv()` method returns every field followed by a
  comma.
- `Fecha`. Converted to a string, it gives `dia/mes/anio`.
- `Empresa`, `Sede` and `TipoServicio`.

The interactive parts are `MasajistaManager` in `appmasajistas.manager`
and `Menu` in `appmasajistas.menu`. Both take their file and their input
and output streams as arguments, so scripts and tests can drive them.
`MasajistaManager.cargar_masajista()` returns `True` when the record was
saved.

## Running the tests

```
pip install ".[test]"
pytest
```