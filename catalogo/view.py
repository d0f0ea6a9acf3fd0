"""Terminal presentation: film lines, lists, menu and screen helpers."""

from __future__ import annotations

import os
import re
import subprocess
from typing import Iterable, TextIO

from catalogo.model import Filme

MENU = (
    "===== Catalogo de Filmes =====\n"
    "1 - Listar Filmes\n"
    "2 - Buscar por Diretor\n"
    "3 - Buscar por Genero\n"
    "4 - Adicionar Filme\n"
    "5 - Editar Filme\n"
    "6 - Atualizar Avaliacao\n"
    "7 - Listar por Ano\n"
    "8 - Listar por Titulo\n"
    "0 - Sair\n"
    "Escolha uma opcao: "
)
EMPTY_MESSAGE = "Nenhum filme cadastrado.\n"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def format_filme(filme: Filme) -> str:
    """One display line for a film, without a trailing newline."""
    return (
        f"ID: {filme.id} | Titulo: {filme.titulo} | Diretor: {filme.diretor} | "
        f"Genero: {filme.genero} | Ano: {filme.ano} | Avaliacao: {filme.avaliacao}/10"
    )


def render_list(filmes: Iterable[Filme], header: str) -> str:
    """A titled block of film lines, or the empty-catalogue message."""
    filmes = list(filmes)
    if not filmes:
        return EMPTY_MESSAGE
    body = "".join(format_filme(f) + "\n" for f in filmes)
    return f"\n==== {header} ====\n{body}"


def clear_screen() -> None:
    """Clear the console with the platform's command."""
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


def pause_screen(stdin: TextIO, stdout: TextIO) -> None:
    """Wait until the user presses ENTER."""
    stdout.write("\nPressione ENTER para continuar...")
    stdout.flush()
    stdin.readline()


def _read_int(stdin: TextIO) -> int | None:
    """Read the next non-blank line as a leading integer, or None."""
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError
        if line.strip():
            match = _INT_PREFIX.match(line)
            return int(match.group(1)) if match else None


def menu_option(stdin: TextIO, stdout: TextIO) -> int:
    """Show the main menu and return the chosen option, or -1 if invalid."""
    clear_screen()
    stdout.write(MENU)
    stdout.flush()
    op = _read_int(stdin)
    if op is None or not 0 <= op <= 8:
        stdout.write("Opcao invalida! Tente novamente.\n")
        pause_screen(stdin, stdout)
        return -1
    return op