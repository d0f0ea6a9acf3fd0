import io
from unittest.mock import patch

from catalogo.cli import main, run
from catalogo.model import Catalog, Filme
from catalogo.view import format_filme


def _catalog(tmp_path):
    cat = Catalog(tmp_path / "filmes.txt")
    cat.add("Solaris", "Tarkovsky", "Ficcao", 1972, 9)
    cat.add("Alien", "Ridley Scott", "Terror", 1979, 8)
    cat.save()
    return cat


@patch("catalogo.view.subprocess.run")
def test_run_quits_on_zero(mock_run, tmp_path):
    out = io.StringIO()
    run(_catalog(tmp_path), io.StringIO("0\n"), out)
    assert out.getvalue().endswith("Saindo...\n")


@patch("catalogo.view.subprocess.run")
def test_run_lists_and_pauses(mock_run, tmp_path):
    cat = _catalog(tmp_path)
    out = io.StringIO()
    run(cat, io.StringIO("1\n\n0\n"), out)
    text = out.getvalue()
    assert "==== Lista de Filmes ====" in text
    assert format_filme(cat.get(1)) in text
    assert "Pressione ENTER para continuar..." in text
    assert text.count("===== Catalogo de Filmes =====") == 2


@patch("catalogo.view.subprocess.run")
def test_run_recovers_from_invalid_option(mock_run, tmp_path):
    out = io.StringIO()
    run(_catalog(tmp_path), io.StringIO("42\n\n0\n"), out)
    text = out.getvalue()
    assert "Opcao invalida! Tente novamente.\n" in text
    assert text.endswith("Saindo...\n")


@patch("catalogo.view.subprocess.run")
def test_run_stops_at_end_of_input(mock_run, tmp_path):
    out = io.StringIO()
    run(_catalog(tmp_path), io.StringIO("1\n"), out)
    assert "Saindo..." not in out.getvalue()
    assert "==== Lista de Filmes ====" in out.getvalue()


@patch("catalogo.view.subprocess.run")
def test_run_add_persists(mock_run, tmp_path):
    cat = _catalog(tmp_path)
    run(cat, io.StringIO("4\nStalker\nTarkovsky\nFiccao\n1979\n8\n\n0\n"), io.StringIO())
    reloaded = Catalog(cat.path)
    reloaded.load()
    assert list(reloaded)[-1] == Filme(3, "Stalker", "Tarkovsky", "Ficcao", 1979, 8)


@patch("catalogo.view.subprocess.run")
def test_main_loads_file(mock_run, tmp_path, monkeypatch, capsys):
    cat = _catalog(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("8\n\n0\n"))
    assert main([str(cat.path)]) == 0
    text = capsys.readouterr().out
    assert "==== Filmes Ordenados por Título ====" in text
    assert text.index(format_filme(cat.get(2))) < text.index(format_filme(cat.get(1)))