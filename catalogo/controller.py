"""Interactive catalogue operations driven by text input."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from catalogo.model import MAX_FILMES, Catalog, Filme
from catalogo.view import format_filme, render_list

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class Controller:
    """Runs each menu action against a catalogue using the given streams."""

    def __init__(self, catalog: Catalog, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.catalog = catalog
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _prompt(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _next_nonblank(self) -> str:
        while True:
            line = self.stdin.readline()
            if not line:
                raise EOFError
            if line.strip():
                return line

    def _ask_text(self, prompt: str) -> str:
        self._prompt(prompt)
        return self._next_nonblank().lstrip().rstrip("\r\n")

    def _ask_int(self, prompt: str) -> int | None:
        self._prompt(prompt)
        match = _INT_PREFIX.match(self._next_nonblank())
        return int(match.group(1)) if match else None

    def _ask_optional(self, prompt: str) -> str | None:
        """Read a raw line; None when it is empty or input has ended."""
        self._prompt(prompt)
        line = self.stdin.readline()
        if not line or line.startswith("\n"):
            return None
        return line.rstrip("\r\n")

    def _save(self) -> None:
        try:
            self.catalog.save()
        except OSError as exc:
            print(f"Erro ao salvar filmes: {exc.strerror or exc}", file=sys.stderr)

    def _show_matches(self, matches: list[Filme], missing: str) -> bool:
        for filme in matches:
            self._write(format_filme(filme) + "\n")
        if not matches:
            self._write(missing)
        return bool(matches)

    def _find(self, prompt: str) -> Filme | None:
        film_id = self._ask_int(prompt)
        try:
            return self.catalog.get(film_id if film_id is not None else 0)
        except KeyError:
            self._write("ID inválido.\n")
            return None

    def list_films(self) -> bool:
        """Show every film."""
        self._write(render_list(self.catalog, "Lista de Filmes"))
        return True

    def search_director(self) -> bool:
        """Show films whose director contains the entered name."""
        nome = self._ask_text("Digite o nome do diretor: ")
        return self._show_matches(
            self.catalog.by_director(nome),
            f"Nenhum filme encontrado para o diretor '{nome}'.\n",
        )

    def search_genre(self) -> bool:
        """Show films whose genre contains the entered text."""
        genero = self._ask_text("Digite o genero: ")
        return self._show_matches(
            self.catalog.by_genre(genero),
            f"Nenhum filme encontrado para o genero '{genero}'.\n",
        )

    def add_film(self) -> bool:
        """Ask for a new film's data, add it and save."""
        if len(self.catalog) >= MAX_FILMES:
            self._write("Limite de filmes atingido!\n")
            return False
        titulo = self._ask_text("Titulo: ")
        diretor = self._ask_text("Diretor: ")
        genero = self._ask_text("Genero: ")
        ano = self._ask_int("Ano: ")
        avaliacao = self._ask_int("Avaliação (0-10): ")
        if avaliacao is None or not 0 <= avaliacao <= 10:
            self._write("Avaliacao invalida! Definindo para 0.\n")
            avaliacao = 0
        self.catalog.add(titulo, diretor, genero, ano if ano is not None else 0, avaliacao)
        self._save()
        self._write("Filme adicionado!\n")
        return True

    def edit_film(self) -> bool:
        """Edit a film's fields; empty answers keep the current values."""
        filme = self._find("Digite o ID do filme a editar: ")
        if filme is None:
            return False
        titulo = self._ask_optional("Novo título (ENTER para manter): ")
        if titulo is not None:
            filme.titulo = titulo
        diretor = self._ask_optional("Novo diretor (ENTER para manter): ")
        if diretor is not None:
            filme.diretor = diretor
        genero = self._ask_optional("Novo genero (ENTER para manter): ")
        if genero is not None:
            filme.genero = genero
        ano = self._ask_int("Novo ano (0 para manter): ")
        if ano:
            filme.ano = ano
        avaliacao = self._ask_int("Nova avaliacao (0-10, -1 para manter): ")
        if avaliacao is not None and 0 <= avaliacao <= 10:
            filme.avaliacao = avaliacao
        self._save()
        self._write("Filme atualizado com sucesso!\n")
        return True

    def update_rating(self) -> bool:
        """Set a film's rating, asking until it lies between 0 and 10."""
        filme = self._find("Digite o ID do filme: ")
        if filme is None:
            return False
        while True:
            avaliacao = self._ask_int("Nova avaliacao (0-10): ")
            if avaliacao is not None and 0 <= avaliacao <= 10:
                break
            self._write("Avaliação deve ser entre 0 e 10.\n")
        filme.avaliacao = avaliacao
        self._save()
        self._write("Avaliacaoo atualizada com sucesso!\n")
        return True

    def list_by_year(self) -> bool:
        """Show films ordered by year, then title."""
        self._write(render_list(self.catalog.sorted_by_year(), "Filmes Ordenados por Ano"))
        return len(self.catalog) > 0

    def list_by_title(self) -> bool:
        """Show films ordered by title."""
        self._write(render_list(self.catalog.sorted_by_title(), "Filmes Ordenados por Título"))
        return len(self.catalog) > 0