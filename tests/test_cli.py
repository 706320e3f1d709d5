import pytest

from tocadigital.cli import main, parse_arguments

GENRES = "Sigla;Nome\nRK;Rock\nPC;Podcast Tech\n"
USERS = "Codigo;Tipo;Nome\n1;U;Ana\n2;U;Bruno\n3;A;Zeca\n4;P;alice\n"
MEDIA = (
    "Codigo;Nome;Tipo;Produtores;Duracao;Genero;Temporada;Album;CodAlbum;Ano\n"
    "1;Song A;M;3;3,5;RK;0;Disco;10;2001\n"
    "2;Talk;P;4;40;PC;2;;;2019\n"
    "3;Song B;M;3;2,25;RK;0;Disco;10;2002\n"
)
FAVORITES = "Codigo;Midias\n1;3,1,2\n2;1\n"


def _write_inputs(directory, users=USERS):
    files = {"g.csv": GENRES, "u.csv": users, "m.csv": MEDIA, "f.csv": FAVORITES}
    for name, content in files.items():
        (directory / name).write_text(content, encoding="utf-8")
    return ["-g", "g.csv", "-u", "u.csv", "-m", "m.csv", "-f", "f.csv"]


def test_parse_arguments_in_any_order():
    paths = parse_arguments(["-u", "u.csv", "-g", "g.csv", "-f", "f.csv", "-m", "m.csv"])
    assert paths == {
        "genres": "g.csv",
        "users": "u.csv",
        "media": "m.csv",
        "favorites": "f.csv",
    }


def test_parse_arguments_wrong_count():
    with pytest.raises(ValueError):
        parse_arguments(["-g", "g.csv"])


def test_parse_arguments_unknown_option(capsys):
    with pytest.raises(ValueError):
        parse_arguments(["-x", "a", "-u", "u.csv", "-m", "m.csv", "-f", "f.csv"])
    assert capsys.readouterr().out == "Erro de I/O\n"


def test_parse_arguments_first_occurrence_wins_but_missing_fails():
    with pytest.raises(ValueError):
        parse_arguments(["-g", "a", "-g", "b", "-m", "m.csv", "-f", "f.csv"])


def test_main_wrong_argument_count(capsys):
    assert main(["-g"]) == 1
    assert capsys.readouterr().err == "Erro de I/O\n"


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    argv = _write_inputs(tmp_path)
    (tmp_path / "m.csv").unlink()
    assert main(argv) == 1
    assert capsys.readouterr().err == "Erro de I/O\n"


def test_main_rejects_bad_user_kind(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    argv = _write_inputs(tmp_path, users="Codigo;Tipo;Nome\n1;X;Ana\n")
    assert main(argv) == 1
    assert "Inconsistências na entrada" in capsys.readouterr().err
    assert not (tmp_path / "backup.txt").exists()


def test_main_writes_reports(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    argv = _write_inputs(tmp_path)
    assert main(argv) == 0
    for name in ("backup.txt", "produtores.csv", "favorito.csv", "estatisticas.txt"):
        assert (tmp_path / name).is_file()
    producers = (tmp_path / "produtores.csv").read_text(encoding="utf-8").splitlines()
    assert [line.split(";", 1)[0] for line in producers] == ["alice", "Zeca"]
    favorites = (tmp_path / "favorito.csv").read_text(encoding="utf-8").splitlines()
    assert len(favorites) == 4
    assert all(line.startswith(("1;", "2;")) for line in favorites)