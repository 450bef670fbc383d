"""Tests for the poker-hands command line."""

import io

import pytest
from poker_hands.scripts.evaluate import main


def test_two_hands(capsys):
    code = main(["Black: 2H 4S 4C 3D 4H", "White: 2S 8S AS QS 3S"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "White wins - Flush"


def test_tie(capsys):
    code = main(["Black: 2H 3D 5S 9C KD", "White: 2D 3H 5C 9S KH"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "Tie"


def test_five_high_wheel_flag(capsys):
    code = main(["--five-high-wheel", "Black: 2H 3S 4S 5H AD", "White: 2D 3C 4H 5S 6C"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "White wins - High card: 6"


def test_verbose_table(capsys):
    code = main(["--verbose", "Black: 3H 3D 5S 5C KD", "White: 2D 2H 5C 5S KH"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.splitlines()[0] == "Black wins - Two pair"
    assert "King" in out
    assert "5, 3" in out


def test_verbose_file(tmp_path, capsys):
    path = tmp_path / "showdowns.txt"
    path.write_text(
        "Black: 2H 3D 5S 9C KD\n"
        "White: 2C 3H 4S 8C AH\n"
        "Black: 3H 3D 5S 5C KD\n"
        "White: 2D 2H 5C 5S KH\n"
    )

    code = main(["--verbose", "--file", str(path)])

    out = capsys.readouterr().out
    lines = out.splitlines()
    assert code == 0
    assert lines[0] == "White wins - High card: Ace"
    assert "Black wins - Two pair" in lines
    assert lines.index("Black wins - Two pair") > 1
    assert "Ace" in out
    assert "5, 3" in out
    assert "5, 2" in out


def test_file(tmp_path, capsys):
    path = tmp_path / "showdowns.txt"
    path.write_text(
        "Black: 2H 3D 5S 9C KD\n"
        "White: 2C 3H 4S 8C AH\n"
        "\n"
        "Black: 3H 3D 5S 5C KD\n"
        "White: 2D 2H 5C 5S KH\n"
    )

    code = main(["--file", str(path)])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "White wins - High card: Ace",
        "Black wins - Two pair",
    ]


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Black: 2H 3D 5S 9C KD\nBlack: 2H 3D 5S 9C KD\n"))

    code = main(["-f", "-"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "Tie"


def test_parse_error_exit_status(capsys):
    code = main(["Black: 2H 3D 5S 9C", "White: 2C 3H 4S 8C AH"])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "Error:" in captured.err


def test_missing_file(tmp_path, capsys):
    code = main(["--file", str(tmp_path / "missing.txt")])

    assert code == 1
    assert "Error:" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["Black: 2H 3D 5S 9C KD"],
        ["--file", "x.txt", "Black: 2H 3D 5S 9C KD", "White: 2C 3H 4S 8C AH"],
    ],
)
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2
