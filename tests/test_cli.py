import io

from onyx.cli import main

WINNING = """
2 1 5
4 4 4 4 4 5
30 1 11 0 0
20 0 0 0 0
10 0 0 0 0
0
0 0 0 4 0 0 1 41 0 4 1 2 3 4
0 0 0 0 0 0 0 0 0
"""

OPENING = """
2 1 1
4 4 4 4 4 5
30 1 2 3 4
20 41 42 43 44
10 71 72 73 74
3 1 2 3
0 0 0 0 0 0 0 0 0
0 0 0 0 0 0 0 0 0
"""


def run(monkeypatch, text, argv):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main(argv)


def test_winning_move_printed(monkeypatch, capsys):
    assert run(monkeypatch, WINNING, ["--depth", "1", "--seed", "0"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "4 11 \n"
    assert "poziții evaluate" in captured.err


def test_opening_move_is_well_formed(monkeypatch, capsys):
    assert run(monkeypatch, OPENING, ["--depth", "1", "--seed", "2"]) == 0
    out = capsys.readouterr().out
    assert out.endswith(" \n")
    tokens = [int(t) for t in out.split()]
    assert tokens[0] in (1, 2, 3, 4)
    if tokens[0] == 1:
        assert tokens[1] == len(tokens) - 2
    else:
        assert len(tokens) == 2


def test_invalid_input_fails(monkeypatch, capsys):
    assert run(monkeypatch, "2 1", ["--depth", "1"]) == 1
    assert "invalid input" in capsys.readouterr().err


def test_same_seed_same_move(monkeypatch, capsys):
    run(monkeypatch, OPENING, ["--depth", "0", "--seed", "5"])
    first = capsys.readouterr().out
    run(monkeypatch, OPENING, ["--depth", "0", "--seed", "5"])
    assert capsys.readouterr().out == first