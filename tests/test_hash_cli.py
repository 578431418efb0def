import io

import pytest

from dsalab.dispersion import ModuloDispersion, PseudoRandomDispersion, SumDispersion
from dsalab.exploration import (
    DoubleDispersionExploration,
    LinearExploration,
    QuadraticExploration,
    RedispersionExploration,
)
from dsalab.hash_cli import (
    HashParameters,
    build_dispersion,
    build_exploration,
    main,
    parse_arguments,
    run_menu,
)
from dsalab.hashtable import HashTable
from dsalab.keys import Alumno, Nif


def test_parse_all_options():
    params = parse_arguments(
        ["-ts", "7", "-fd", "2", "-hash", "close", "-bs", "3", "-fe", "1"]
    )
    assert params == HashParameters(
        table_size=7, dispersion="2", hash_type="close", block_size=3, exploration="1"
    )


def test_parse_defaults():
    params = parse_arguments(["-ts", "5", "-fd", "0", "-hash", "open"])
    assert params.block_size == 0
    assert params.exploration == ""


def test_parse_too_few_arguments():
    with pytest.raises(ValueError, match="Faltan argumentos obligatorios"):
        parse_arguments(["-ts", "5"])


def test_parse_unknown_option():
    with pytest.raises(ValueError, match="Opción desconocida"):
        parse_arguments(["-ts", "5", "-x", "1"])


def test_parse_missing_value():
    with pytest.raises(ValueError, match="-hash"):
        parse_arguments(["-ts", "5", "-hash"])


def test_parse_non_numeric_size():
    with pytest.raises(ValueError):
        parse_arguments(["-ts", "abc", "-fd", "0"])


@pytest.mark.parametrize(
    "code, cls",
    [("0", ModuloDispersion), ("1", PseudoRandomDispersion), ("2", SumDispersion)],
)
def test_build_dispersion(code, cls):
    dispersion = build_dispersion(code, 11)
    assert isinstance(dispersion, cls)
    assert dispersion.table_size == 11


def test_build_dispersion_invalid():
    with pytest.raises(ValueError):
        build_dispersion("9", 11)


def test_build_linear_exploration():
    exploration = build_exploration("0", ModuloDispersion(3))
    assert isinstance(exploration, LinearExploration)
    assert exploration(Nif(5), 3) == 4


def test_build_quadratic_exploration():
    exploration = build_exploration("1", ModuloDispersion(3))
    assert isinstance(exploration, QuadraticExploration)
    assert exploration(Nif(5), 3) == 9


def test_build_redispersion_exploration():
    exploration = build_exploration("3", ModuloDispersion(3))
    assert isinstance(exploration, RedispersionExploration)
    assert exploration(Nif(5), 2) >= 0


def test_build_double_dispersion_keeps_dispersion():
    dispersion = ModuloDispersion(3)
    exploration = build_exploration("2", dispersion)
    assert isinstance(exploration, DoubleDispersionExploration)
    assert exploration.dispersion is dispersion


def test_build_exploration_invalid():
    with pytest.raises(ValueError):
        build_exploration("7", ModuloDispersion(3))


def run(table, text):
    out = io.StringIO()
    run_menu(table, Alumno.parse, io.StringIO(text), out)
    return out.getvalue()


def test_menu_insert_and_search():
    table = HashTable(5, ModuloDispersion(5))
    output = run(table, "1\nAna Lopez ab1\n2\nAna Lopez ab1\n4\n")
    assert "El elemento se ha insertado correctamente en la tabla" in output
    assert "El elemento está en la tabla" in output
    assert table.search(Alumno("Ana", "Lopez", "ab1"))


def test_menu_duplicate_insert_fails():
    table = HashTable(5, ModuloDispersion(5))
    output = run(table, "1\nAna Lopez ab1\n1\nAna Lopez ab1\n4\n")
    assert "El elemento no se ha podido insertar en la tabla" in output
    assert len(table) == 1


def test_menu_search_missing():
    table = HashTable(5, ModuloDispersion(5))
    output = run(table, "2\nLuis Diaz zz9\n4\n")
    assert "El elemento no está en la tabla" in output


def test_menu_show_table():
    table = HashTable(3, ModuloDispersion(3))
    output = run(table, "3\n4\n")
    assert str(table) in output


def test_menu_invalid_option_and_eof():
    table = HashTable(3, ModuloDispersion(3))
    output = run(table, "9\n")
    assert "Opción no válida" in output
    assert len(table) == 0


def test_main_bad_arguments(capsys):
    assert main(["-ts"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_main_bad_dispersion(capsys):
    assert main(["-ts", "5", "-fd", "8", "-hash", "open"]) == 1
    assert "Código de función de dispersión incorrecto" in capsys.readouterr().out


def test_main_bad_exploration(capsys):
    assert main(["-ts", "5", "-fd", "0", "-hash", "close", "-fe", "8"]) == 1
    assert "Código de función de exploración incorrecto" in capsys.readouterr().out


def test_main_open_table(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nAna Lopez ab1\n4\n"))
    assert main(["-ts", "5", "-fd", "0", "-hash", "open"]) == 0
    output = capsys.readouterr().out
    assert "Tabla hash de dispersión abierta" in output
    assert "El elemento se ha insertado correctamente en la tabla" in output


def test_main_closed_table(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    assert main(["-ts", "5", "-fd", "2", "-hash", "close", "-bs", "2", "-fe", "0"]) == 0
    output = capsys.readouterr().out
    assert "Tabla hash de dispersión cerrada" in output
    assert "Funcion de exploracion Lineal" in output