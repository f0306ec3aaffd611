"""Text menus of the massage services application."""

from __future__ import annotations

import sys
from typing import TextIO

from appmasajistas.manager import MasajistaManager, _Input

_RULE = "=================================================\n"
_THIN_RULE = "-------------------------------------------------\n"
_INVALID = "La ppción ingresada es inválida. Intente de nuevo.\n"
_BACK = "Volviendo al menú principal...\n"


class Menu:
    """The main menu and its sub-menus."""

    def __init__(
        self,
        manager: MasajistaManager | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._input = _Input.wrap(stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self.manager = (
            manager
            if manager is not None
            else MasajistaManager(stdin=self._input, stdout=self._out)
        )

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _ask_option(self) -> int | None:
        """Read an option number; None if it is not a number, 0 at end of input."""
        self._write(_RULE)
        self._write("\n")
        self._write("     Ingrese una opción para continuar:  ")
        try:
            word = self._input.word()
        except EOFError:
            word = "0"
        self._write("\n")
        try:
            return int(word)
        except ValueError:
            return None

    def cabecera(self) -> None:
        """Print the application banner."""
        self._write(_RULE)
        self._write("                 App Masajistas                  \n")
        self._write(_THIN_RULE)
        self._write("    Sistema de gestión de servicios de masaje    \n")
        self._write("            alta, modificación y baja            \n")
        self._write("       de masajistas, empresas y servicios       \n")
        self._write(_THIN_RULE)
        self._write("\n")

    def principal(self) -> None:
        """Run the main menu until the user chooses to leave."""
        while True:
            self.cabecera()
            self._write("  ----- MENÚ PRINCIPAL -----\n\n")
            self._write("  1. Masajistas\n")
            self._write("  2. Empresas\n")
            self._write("  3. Servicios\n\n")
            self._write("  0. Salir de App Masajistas\n\n")
            opcion = self._ask_option()

            match opcion:
                case 1:
                    self.masajistas()
                case 2:
                    self.empresas()
                case 3:
                    self.servicios()
                case 0:
                    self._write("Saliendo del programa...\n")
                case _:
                    self._write("La ppción ingresada no es válida. Intente de nuevo.\n")

            self._write("\n")
            if opcion == 0:
                return

    def masajistas(self) -> None:
        """Run the therapists menu."""
        while True:
            self.cabecera()
            self._write("  ----- MENÚ MASAJISTAS -----\n\n")
            self._write("    1. Agregar masajista\n")
            self._write("    2. Listar masajista\n")
            self._write("    3. Modificar masajista\n")
            self._write("    4. Eliminar masajista\n")
            self._write("    5. Mostrar cantitdad de masajistas\n\n")
            self._write("    0. Volver al Menú Principal\n\n")
            opcion = self._ask_option()

            match opcion:
                case 1:
                    self.manager.cargar_masajista()
                case 2:
                    self.manager.listar_masajistas()
                case 3:
                    self._write("Modificar masajista\n")
                case 4:
                    self._write("Eliminar masajista\n")
                case 5:
                    self.manager.mostrar_cantidad_masajistas()
                case 0:
                    self._write(_BACK)
                case _:
                    self._write(_INVALID)

            self._write("\n")
            if opcion == 0:
                return

    def _placeholder_menu(self, titulo: str, acciones: tuple[str, ...], avisos: tuple[str, ...]) -> None:
        while True:
            self.cabecera()
            self._write(f"  ----- MENÚ {titulo} -----\n\n")
            for numero, accion in enumerate(acciones, start=1):
                self._write(f"    {numero}. {accion}\n")
            self._write("\n    0. Volver al Menú Principal\n\n")
            opcion = self._ask_option()

            if opcion == 0:
                self._write(_BACK)
            elif opcion is not None and 1 <= opcion <= len(avisos):
                self._write(avisos[opcion - 1] + "\n")
            else:
                self._write(_INVALID)

            self._write("\n")
            if opcion == 0:
                return

    def empresas(self) -> None:
        """Run the companies menu."""
        self._placeholder_menu(
            "EMPRESAS",
            ("Listar empresa", "Agregar empresa", "Modificar empresa", "Eliminar empresa"),
            ("Listado de empresa", "Agregrar empresa", "Modificar empresa", "Eliminar empresa"),
        )

    def servicios(self) -> None:
        """Run the services menu."""
        self._placeholder_menu(
            "SERVICIOS",
            ("Listar servicios", "Agregar servicio", "Modificar servicio", "Eliminar servicio"),
            ("Listado de servicios", "Agregrar servicio", "Modificar servicio", "Eliminar servicio"),
        )


def main(argv: list[str] | None = None) -> int:
    """Start the interactive application."""
    try:
        Menu().principal()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())