"""Film records and the catalogue stored in a plain-text file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterator

MAX_FILMES = 100
ARQUIVO_FILMES = "filmes.txt"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_FIELDS = frozenset({"id", "ano", "avaliacao"})
_TEXT_FIELDS = frozenset({"titulo", "diretor", "genero"})


def _atoi(text: str) -> int:
    """Read a leading integer from text, returning 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Filme:
    """A single film in the catalogue."""

    id: int = 0
    titulo: str = ""
    diretor: str = ""
    genero: str = ""
    ano: int = 0
    avaliacao: int = 0

    def to_line(self) -> str:
        """Return the record as one ``key:value;`` line, newline included."""
        return (
            f"id:{self.id};titulo:{self.titulo};diretor:{self.diretor};"
            f"genero:{self.genero};ano:{self.ano};avaliacao:{self.avaliacao};\n"
        )


def parse_line(line: str) -> Filme:
    """Build a film from a ``key:value;`` line; unknown keys are ignored."""
    filme = Filme()
    for token in line.rstrip("\r\n").split(";"):
        key, sep, value = token.partition(":")
        if not sep:
            continue
        if key in _INT_FIELDS:
            setattr(filme, key, _atoi(value))
        elif key in _TEXT_FIELDS:
            setattr(filme, key, value)
    return filme


class CatalogFullError(Exception):
    """Raised when a film is added to a catalogue that holds MAX_FILMES."""


class Catalog:
    """An ordered collection of films backed by a text file."""

    def __init__(self, path: str | Path = ARQUIVO_FILMES) -> None:
        self.path = Path(path)
        self._filmes: list[Filme] = []

    def __len__(self) -> int:
        return len(self._filmes)

    def __iter__(self) -> Iterator[Filme]:
        return iter(self._filmes)

    def load(self) -> None:
        """Read films from the file; a missing or unreadable file is ignored."""
        try:
            with self.path.open(encoding="utf-8", errors="surrogateescape") as fh:
                filmes = [parse_line(line) for line in islice(fh, MAX_FILMES)]
        except OSError:
            return
        self._filmes = filmes

    def save(self) -> None:
        """Write every film to the file, replacing its contents."""
        with self.path.open("w", encoding="utf-8", errors="surrogateescape") as fh:
            fh.writelines(filme.to_line() for filme in self._filmes)

    def add(self, titulo: str, diretor: str, genero: str, ano: int, avaliacao: int) -> Filme:
        """Append a new film whose id follows the current count."""
        if len(self._filmes) >= MAX_FILMES:
            raise CatalogFullError("Limite de filmes atingido!")
        filme = Filme(len(self._filmes) + 1, titulo, diretor, genero, ano, avaliacao)
        self._filmes.append(filme)
        return filme

    def get(self, film_id: int) -> Filme:
        """Return the film at 1-based position film_id."""
        if not 1 <= film_id <= len(self._filmes):
            raise KeyError(film_id)
        return self._filmes[film_id - 1]

    def by_director(self, nome: str) -> list[Filme]:
        """Films whose director contains nome."""
        return [f for f in self._filmes if nome in f.diretor]

    def by_genre(self, genero: str) -> list[Filme]:
        """Films whose genre contains genero."""
        return [f for f in self._filmes if genero in f.genero]

    def sorted_by_year(self) -> list[Filme]:
        """Films ordered by year, then title."""
        return sorted(self._filmes, key=lambda f: (f.ano, f.titulo))

    def sorted_by_title(self) -> list[Filme]:
        """Films ordered by title."""
        return sorted(self._filmes, key=lambda f: f.titulo)