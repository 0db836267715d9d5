import sys

import pytest

from fpal.exceptions import ECode
from fpal.scripts import main


def run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["fpal", *args])
    main()


@pytest.fixture
def files_list(tmp_path):
    path = tmp_path / "files.txt"
    path.write_text("README.md\nHelloWorld.swift\n\nFlappyBird.swift\n")
    return path


@pytest.fixture
def numbers_file(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("1\n2\n3\n4\n5\n")
    return path


def test_suffix(monkeypatch, capsys, files_list):
    run(monkeypatch, "suffix", str(files_list))
    assert capsys.readouterr().out == "HelloWorld.swift\nFlappyBird.swift\n"


def test_suffix_custom(monkeypatch, capsys, files_list):
    run(monkeypatch, "suffix", str(files_list), "-s", ".md")
    assert capsys.readouterr().out == "README.md\n"


def test_increment(monkeypatch, capsys, numbers_file):
    run(monkeypatch, "increment", str(numbers_file), "-n", "2")
    assert capsys.readouterr().out == "3\n4\n5\n6\n7\n"


def test_sum(monkeypatch, capsys, numbers_file):
    run(monkeypatch, "sum", str(numbers_file))
    assert capsys.readouterr().out == "15\n"


def test_sum_bad_input_exits_with_dataerr(monkeypatch, capsys, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1\nten\n")

    with pytest.raises(SystemExit) as e:
        run(monkeypatch, "sum", str(path))

    assert e.value.code == ECode.DATAERR
    assert capsys.readouterr().out.startswith("Error: ")


def test_cities_defaults(monkeypatch, capsys):
    run(monkeypatch, "cities")
    assert capsys.readouterr().out == (
        "City: Population\n"
        "Boston: 4180000\n"
        "New York City: 8550000\n"
        "Berlin: 3562000\n"
    )


def test_cities_from_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "cities.tsv"
    path.write_text("# name\tpopulation\nPerth\t2100\nHobart\t250\n")

    run(monkeypatch, "cities", str(path), "-m", "200", "--header", "Big")
    assert capsys.readouterr().out == "Big\nPerth: 2100000\nHobart: 250000\n"


def test_add(monkeypatch, capsys):
    run(monkeypatch, "add", "3", "4")
    assert capsys.readouterr().out == "7\n"


def test_add_missing(monkeypatch, capsys):
    run(monkeypatch, "add", ".", "2")
    assert capsys.readouterr().out == ".\n"


def test_add_bad_value_exits_with_usage(monkeypatch, capsys):
    with pytest.raises(SystemExit) as e:
        run(monkeypatch, "add", "three", "4")

    assert e.value.code == ECode.USAGE


def test_no_subcommand_prints_help(monkeypatch, capsys):
    with pytest.raises(SystemExit) as e:
        run(monkeypatch)

    assert e.value.code == 0
    assert "usage" in capsys.readouterr().out
