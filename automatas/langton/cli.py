"""Command-line entry point for the Langton ant simulation."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from automatas.langton.simulator import Simulator


def usage(program: str) -> str:
    """Help text describing how to call the program and the file format."""
    return "\n".join(
        [
            f"Modo de uso: {program} [-h | --help ] <fichero_configuracion.txt>",
            "",
            "-h | --help: Muestra las instrucciones para el correcto funcionamiento del programa.",
            "",
            "<fichero_configuracion.txt>: Fichero de texto que contiene la configuración "
            "inicial de la simulación con el siguiente formato:",
            "",
            "\tLínea 1: Tamaño de la cinta (<tamañoX> <tamañoY>)",
            "\tLínea 2: Posición y orientación inicial de la hormiga "
            "(<coordenadaX> <coordenadaY> <dirección>)",
            "\tDonde <dirección> es un entero que representa la dirección:",
            "\t\t0: Oeste",
            " \t\t1: Este",
            " \t\t2: Norte",
            " \t\t3: Sur",
            "\tLíneas 3..n: Posiciones de las celdas negras (<coordenadaX> <coordenadaY>)",
        ]
    ) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation described by the configuration file given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    program = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "langton"

    if not args:
        print("Error: No se han introducido argumentos por línea de comandos.\n", file=sys.stderr)
        sys.stdout.write(usage(program))
        return 1

    if args[0] in ("--help", "-h"):
        sys.stdout.write(usage(program))
        return 0

    filename = args[0]
    print(f"Inicializando simulación desde el fichero: {filename}")
    try:
        try:
            simulator = Simulator.from_file(filename)
        except OSError as error:
            raise RuntimeError(f"No se puede abrir el fichero: {filename}") from error
        sys.stdout.write("Presiona ENTER para comenzar...")
        sys.stdout.flush()
        sys.stdin.readline()
        simulator.run(sys.stdin, sys.stdout)
        print(f"Total de pasos ejecutados: {simulator.steps}")
    except (RuntimeError, ValueError, IndexError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())