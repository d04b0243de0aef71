import pytest

from snipstash.cli import build_parser, main
from snipstash.store import load_snippets, snippets_file_path


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def _stored(home):
    return load_snippets(snippets_file_path(home))


def test_add_persists_and_reports(home, capsys):
    assert main(["add", "-n", "greet", "-c", "echo hi", "-d", "says hi"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Created a New Snippet\n")
    assert "Name: greet" in out
    stored = _stored(home)
    assert [s.name for s in stored] == ["greet"]
    assert stored[0].description == "says hi"


def test_add_splits_and_repeats_tags(home):
    assert main(["add", "-n", "x", "-c", "y", "-t", "a,b", "-t", "c"]) == 0
    assert _stored(home)[0].tags == ["a", "b", "c"]


def test_ids_increase_across_adds(home):
    main(["add", "-n", "one", "-c", "1"])
    main(["add", "-n", "two", "-c", "2"])
    ids = [s.id for s in _stored(home)]
    assert ids[1] == ids[0] + 1


def test_add_requires_name(home):
    with pytest.raises(SystemExit) as info:
        main(["add", "-c", "content"])
    assert info.value.code == 2


def test_get_prints_snippet(home, capsys):
    main(["add", "-n", "lookup", "-c", "body"])
    ident = _stored(home)[0].id
    capsys.readouterr()
    assert main(["get", "-i", str(ident)]) == 0
    assert "Content: body" in capsys.readouterr().out


def test_get_missing_id(home, capsys):
    assert main(["get", "-i", "77"]) == 1
    assert "issue finding id" in capsys.readouterr().out


def test_delete_removes_snippet(home, capsys):
    main(["add", "-n", "keep", "-c", "k"])
    main(["add", "-n", "drop", "-c", "d"])
    drop_id = next(s.id for s in _stored(home) if s.name == "drop")
    assert main(["delete", "-i", str(drop_id)]) == 0
    assert [s.name for s in _stored(home)] == ["keep"]


def test_delete_missing_reports_error(home, capsys):
    main(["add", "-n", "keep", "-c", "k"])
    assert main(["delete", "-i", "500"]) == 1
    assert "snippet not found: 500" in capsys.readouterr().out
    assert len(_stored(home)) == 1


def test_list_shows_all(home, capsys):
    main(["add", "-n", "first", "-c", "1"])
    main(["add", "-n", "second", "-c", "2"])
    capsys.readouterr()
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Name: first" in out and "Name: second" in out


def test_parser_knows_subcommands():
    args = build_parser().parse_args(["get", "--id", "3"])
    assert args.command == "get" and args.id == "3"