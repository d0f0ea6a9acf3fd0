# catalogo

`catalogo` is a small menu-driven film catalogue for the terminal. Films are kept in a
plain text file, by default `filmes.txt` in the current directory, one film per line,
as semicolon-separated `key:value` fields:

```
id:1;titulo:Alien;diretor:Ridley Scott;genero:Ficcao;ano:1979;avaliacao:9;
```

Unknown keys are ignored when reading. The catalogue holds at most 100 films; lines
beyond the hundredth are not loaded. A missing or unreadable file simply gives an
empty catalogue.

## Installation

```
pip install .
```

## Usage

```
catalogo [arquivo]
```

`arquivo` is the film file to use; it defaults to `filmes.txt`. The screen is cleared
before the main menu is shown, which offers:

| Option | Action |
|-------:|--------|
| 1 | List all films |
| 2 | Search by director (substring match) |
| 3 | Search by genre (substring match) |
| 4 | Add a film (a rating outside 0–10 is set to 0) |
| 5 | Edit a film by ID (ENTER keeps a text field, 0 keeps the year, a rating outside 0–10 such as -1 keeps the rating) |
| 6 | Update a film's rating (asked again until it lies in 0–10) |
| 7 | List films sorted by year, then by title |
| 8 | List films sorted by title |
| 0 | Quit |

An ID is the film's position in the catalogue, starting at 1; a new film gets the
next number. Every change is written back to the file at once; if the file cannot be
written, a message goes to standard error. The program also stops when input ends.

## Using it from Python

```python
from catalogo.model import Catalog

catalog = Catalog("filmes.txt")
catalog.load()
catalog.add("Alien", "Ridley Scott", "Ficcao", 1979, 9)
catalog.save()

for filme in catalog.sorted_by_year():
    print(filme.titulo, filme.ano)

print([f.titulo for f in catalog.by_director("Scott")])
print(catalog.get(1).titulo)
```

- `catalogo.model`: `Filme` (with `to_line()`), `parse_line()`, `Catalog` and
  `CatalogFullError`. `Catalog.add` raises `CatalogFullError` once the catalogue is
  full; `Catalog.get` raises `KeyError` for an ID out of range.
- `catalogo.view`: `format_filme()` gives the line shown for a film, `render_list()`
  a titled block of films, and `menu_option()` shows the menu and returns the choice
  (or -1 when it is invalid).
- `catalogo.controller`: `Controller` runs each menu action against a catalogue with
  given input and output streams.
- `catalogo.cli`: `run()` runs the menu against any pair of text streams; `main()` is
  the `catalogo` command.

## Tests

```
pip install .[test]
pytest
```