"""Command-line entry point: the interactive film catalogue menu."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from catalogo.controller import Controller
from catalogo.model import ARQUIVO_FILMES, Catalog
from catalogo.view import menu_option, pause_screen


def run(catalog: Catalog, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Show the menu and perform actions until the user quits or input ends."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    controller = Controller(catalog, stdin, stdout)
    actions = {
        1: controller.list_films,
        2: controller.search_director,
        3: controller.search_genre,
        4: controller.add_film,
        5: controller.edit_film,
        6: controller.update_rating,
        7: controller.list_by_year,
        8: controller.list_by_title,
    }
    try:
        while True:
            op = menu_option(stdin, stdout)
            if op == 0:
                stdout.write("Saindo...\n")
                return
            action = actions.get(op)
            if action is None:
                continue
            action()
            pause_screen(stdin, stdout)
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Load the catalogue file and run the menu."""
    parser = argparse.ArgumentParser(prog="catalogo", description="Catalogo de filmes.")
    parser.add_argument("arquivo", nargs="?", default=ARQUIVO_FILMES, help="arquivo de filmes")
    args = parser.parse_args(argv)
    catalog = Catalog(args.arquivo)
    catalog.load()
    run(catalog, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())