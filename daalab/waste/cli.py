"""Command that solves every waste collection instance in a directory."""

from __future__ import annotations

import subprocess
import sys
import time
from collections.abc import Sequence
from contextlib import redirect_stdout
from pathlib import Path
from typing import TextIO

from daalab.waste.gvns import Gvns
from daalab.waste.loader import read_problem

PROGRAM = "daalab-waste"
OUTPUT_FILE = "salida.txt"
_RULE = "-" * 56


def _clear_screen() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def process_file(path: str | Path, out: TextIO) -> None:
    """Run GVNS on one instance with max_k 3, 4 and 5, three times each.

    The report goes to ``out``; a problem with the instance is reported
    on standard error.
    """
    path = Path(path)
    with redirect_stdout(out):
        print(f'Procesando archivo: "{path.name}"')
        try:
            problem = read_problem(path)
            print("                 ALGORITMO GVNS                        ")
            print()
            for max_k in range(3, 6):
                print(f"Max_k: {max_k}")
                for attempt in range(1, 4):
                    print(f"Iteracion: {attempt}")
                    algorithm = Gvns(problem, max_k=max_k)
                    start = time.perf_counter()
                    algorithm.solve()
                    elapsed = time.perf_counter() - start
                    print(f"Nodos: {len(algorithm.problem.nodes) - 4}")
                    print(f"Camiones: {algorithm.solution.trucks}")
                    print(f"Tiempo de ejecución: {elapsed} segundos")
        except (OSError, ValueError, RuntimeError, IndexError) as error:
            print(f'Error procesando archivo "{path.name}": {error}', file=sys.stderr)
        print(_RULE)


def main(argv: Sequence[str] | None = None) -> int:
    """Process every regular file of a directory, writing the report to salida.txt."""
    args = list(sys.argv[1:] if argv is None else argv)
    _clear_screen()
    print(_RULE)
    print("                 RECOGIDA DE BASURA                    ")
    print(_RULE)
    if not args:
        print(f"Uso: {PROGRAM} <archivo_entrada>", file=sys.stderr)
        return 1

    try:
        out = open(OUTPUT_FILE, "w", encoding="utf-8")
    except OSError:
        print("Error: No se pudo abrir el archivo de salida.", file=sys.stderr)
        return 1

    with out:
        folder = Path(args[0])
        if not folder.is_dir():
            print(f"Error: {args[0]} no es una carpeta válida.", file=sys.stderr)
            return 1
        try:
            entries = sorted(folder.iterdir())
        except OSError as error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
        for entry in entries:
            if entry.is_file():
                process_file(entry, out)
    return 0