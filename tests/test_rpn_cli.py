from pathlib import Path

import pytest

from dsalab.bigint import BigInt, BigIntBadDigit
from dsalab.rpn_cli import main, process_line, process_lines


def test_definition_line():
    board = {}
    assert process_line("N1 = 10, 123", board) == "N1 = 10, 123\n"
    assert board["N1"] == BigInt("123", 10)


def test_definition_in_base_16():
    board = {}
    assert process_line("H = 16, FF", board) == "H = 16, FF\n"
    assert board["H"].base == 16


def test_blank_line_returns_none():
    board = {}
    assert process_line("   ", board) is None
    assert board == {}


def test_statement_line_stores_result():
    board = {}
    process_line("N1 = 10, 12", board)
    process_line("N2 = 10, 30", board)
    output = process_line("N3 ? N1 N2 +", board)
    assert board["N3"] == board["N1"] + board["N2"]
    assert output == f"N3 = 10, {board['N3']}\n"


def test_unknown_marker():
    with pytest.raises(BigIntBadDigit):
        process_line("N1 x 10, 5", {})


def test_single_token_line():
    with pytest.raises(ValueError):
        process_line("N1", {})


def test_process_lines_skips_blank_lines():
    outputs = process_lines(["A = 2, 101", "", "B = 2, 11", "C ? A B *"])
    assert len(outputs) == 3
    assert outputs[0] == "A = 2, 101\n"
    assert outputs[2].startswith("C = 2, ")


def test_main_writes_output_file(tmp_path, capsys):
    lines = ["A = 8, 17", "B = 8, 3", "C ? A B -"]
    source = tmp_path / "input.txt"
    source.write_text("\n".join(lines) + "\n", encoding="utf-8")
    assert main([str(source)]) == 0
    expected = "".join(process_lines(lines))
    assert Path(f"{source}.out").read_text(encoding="utf-8") == expected
    assert capsys.readouterr().out == expected


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Faltan argumentos" in capsys.readouterr().err


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1