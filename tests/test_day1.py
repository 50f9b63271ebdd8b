from __future__ import annotations

from pathlib import Path

import pytest

from advent_of_code import day1

EXAMPLE = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"


@pytest.fixture
def example_file(tmp_path: Path) -> Path:
    path = tmp_path / "day1_input.txt"
    path.write_text(EXAMPLE)
    return path


def test_load_rotations(example_file: Path) -> None:
    rotations = day1.load_rotations(str(example_file))

    assert len(rotations) == 10
    assert str(rotations[0]) == "L68"
    assert rotations[-1].rotation == -82


def test_main_prints_both_passwords(example_file: Path, capsys) -> None:
    assert day1.main([str(example_file)]) == 0

    out = capsys.readouterr().out
    assert "Info - number of rotations: 10" in out
    assert "Info - max rotations: 60; min rotations: -99" in out
    assert "The dial starts by pointing at 50." in out
    assert "Password [old]: 3 - [new]: 6" in out


def test_debug_prints_every_move(example_file: Path, capsys) -> None:
    assert day1.main([str(example_file), "--debug"]) == 0

    out = capsys.readouterr().out
    assert "The dial is rotated L68 to point at 82 - passing 0 1 times." in out
    assert "The dial is rotated R48 to point at 0 - passing 0 1 times." in out
    assert out.count("The dial is rotated") == 10


def test_debug_defaults_to_test_input(example_file: Path, monkeypatch, capsys) -> None:
    example_file.rename(example_file.with_name(day1.INPUT_TEST_FILE))
    monkeypatch.chdir(example_file.parent)

    assert day1.main(["--debug"]) == 0
    assert "Password [old]: 3 - [new]: 6" in capsys.readouterr().out


def test_empty_input(tmp_path: Path, capsys) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("\n")

    assert day1.main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Info - number of rotations: 0" in out
    assert "Password [old]: 0 - [new]: 0" in out


def test_malformed_line_aborts_run(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("R10\nU5\nL3\n")

    assert day1.main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "line 2" in captured.err
    assert "Password" not in captured.out


def test_missing_file(tmp_path: Path, capsys) -> None:
    assert day1.main([str(tmp_path / "nope.txt")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_undecodable_input_aborts_run(tmp_path: Path, capsys) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"R1\n\xff\n")

    assert day1.main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "Error:" in captured.err
    assert "Password" not in captured.out


def test_invalid_start(example_file: Path, capsys) -> None:
    assert day1.main([str(example_file), "--start", "150"]) == 1
    captured = capsys.readouterr()
    assert "outside the dial" in captured.err
    assert captured.out == ""


def test_invalid_size(example_file: Path, capsys) -> None:
    assert day1.main([str(example_file), "--size", "0"]) == 1
    captured = capsys.readouterr()
    assert "dial size must be positive" in captured.err
    assert captured.out == ""
