"""Tests for the command-line interface."""

import pytest

from amyloidpred import __version__
from amyloidpred.__main__ import build_config, create_parser, main
from amyloidpred.config import ParseMode


def test_literal_sequence(capsys):
    assert main([">sp|X|TEST protein\nMREFTPT\n"]) == 0
    assert capsys.readouterr().out == "3.1416\n"


def test_file_fuzzy(tmp_path, capsys):
    path = tmp_path / "proteins.fasta"
    path.write_text(">A\nMREF\n\n>B\nTPT\n", encoding="utf-8")
    assert main(["-f", str(path), "--fuzzy", "--with-description"]) == 0
    assert capsys.readouterr().out == ">A\t3.1416\n>B\t3.1416\n"


def test_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "nope.fasta")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: cannot open/read file:" in captured.err


def test_invalid_residue_message(capsys):
    assert main([">A\nMREF123\n"]) == 1
    err = capsys.readouterr().err
    assert "Error: cannot parse <SEQUENCE> as FASTA" in err
    assert "Failed at: line 2: MREF123" in err


def test_missing_header_message(capsys):
    assert main(["MREFTPT"]) == 1
    assert "Failed at: line 1: MREFTPT" in capsys.readouterr().err


def test_no_sequences_message(capsys):
    assert main(["--fuzzy", "nothing here"]) == 1
    assert "Error: no sequences found" in capsys.readouterr().err


def test_modes_are_exclusive():
    with pytest.raises(SystemExit):
        create_parser().parse_args(["--strict", "--fuzzy", ">A\nMREF"])


def test_build_config_defaults():
    config = build_config(create_parser().parse_args([">A\nMREF"]))
    assert config.input.mode is ParseMode.STRICT
    assert config.output.precision == 4
    assert config.input.max_sequences is None


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out


@pytest.mark.parametrize("value", ["0", "-1"])
def test_max_sequences_must_be_positive(value, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--fuzzy", "--max-sequences", value, ">A\nMREF\n>B\nTPT\n"])
    assert exc_info.value.code == 2
    assert "expected a positive integer" in capsys.readouterr().err


def test_max_sequences_caps_output(capsys):
    assert main(["--fuzzy", "--max-sequences", "1", ">A\nMREF\n>B\nTPT\n"]) == 0
    assert capsys.readouterr().out == "3.1416\n"


def test_precision_must_be_non_negative(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--precision", "-1", ">A\nMREF\n"])
    assert exc_info.value.code == 2
    assert "expected a non-negative integer" in capsys.readouterr().err


def test_precision_zero(capsys):
    assert main(["--precision", "0", ">A\nMREF\n"]) == 0
    assert capsys.readouterr().out == "3\n"
