import pytest

from instacode import cli
from instacode.utils import term


@pytest.fixture(autouse=True)
def minimal_ui(monkeypatch):
    monkeypatch.setenv("INSTACODE_MINIMAL_UI", "1")
    monkeypatch.setattr(term, "MINIMAL", False)
    monkeypatch.delenv("INSTACODE_STRICT", raising=False)
    monkeypatch.delenv("INSTACODE_DATA_FILE", raising=False)


def _script(tmp_path, *lines, name="instrucciones.txt"):
    path = tmp_path / name
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def test_writes_output_file(tmp_path):
    script = _script(tmp_path, "crear variable numero entero edad con valor inicial 20")
    out = tmp_path / "salida" / "programa.cpp"
    assert cli.main([str(script), "-o", str(out)]) == 0
    assert "int edad = 20;" in out.read_text(encoding="utf-8")


def test_prints_code_to_stdout(tmp_path, capsys):
    script = _script(tmp_path, 'mostrar "hola"')
    assert cli.main([str(script), "--minimal"]) == 0
    captured = capsys.readouterr()
    assert 'std::cout << "hola" << std::endl;' in captured.out
    assert "[OK]" in captured.err


def test_missing_input_file(tmp_path):
    assert cli.main([str(tmp_path / "no_existe.txt")]) == 2


def test_missing_data_file(tmp_path):
    script = _script(tmp_path, "leer los datos del archivo")
    assert cli.main([str(script), "-d", str(tmp_path / "no_existe.txt")]) == 2


def test_unrecognized_instruction_exits_with_failure(tmp_path, capsys):
    script = _script(tmp_path, "volar hasta la luna")
    assert cli.main([str(script)]) == 1
    assert "Instrucción no reconocida" in capsys.readouterr().err


def test_data_file_required(tmp_path, capsys):
    script = _script(tmp_path, "leer los datos del archivo")
    out = tmp_path / "programa.cpp"
    assert cli.main([str(script), "-o", str(out)]) == 1
    assert not out.exists()
    assert "archivo de datos" in capsys.readouterr().err


def test_data_file_is_loaded(tmp_path):
    script = _script(tmp_path, "crear una lista de texto para guardar nombres", "leer los datos del archivo")
    data = tmp_path / "alumnos.txt"
    data.write_text("Ana\nLuis\n", encoding="utf-8")
    out = tmp_path / "programa.cpp"
    assert cli.main([str(script), "-d", str(data), "-o", str(out)]) == 0
    code = out.read_text(encoding="utf-8")
    assert 'std::ofstream archivo_datos("alumnos.txt");' in code
    assert 'nombres.push_back("Luis");' in code


def test_strict_flag_turns_warnings_into_failure(tmp_path):
    script = _script(tmp_path, "crear un arreglo de 2 numeros enteros", "agregar 3 al arreglo")
    out = tmp_path / "programa.cpp"
    assert cli.main([str(script), "-o", str(out)]) == 0
    assert cli.main([str(script), "-o", str(out), "--strict"]) == 1


def test_strict_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("INSTACODE_STRICT", "true")
    script = _script(tmp_path, 'sino mostrar "x"')
    assert cli.main([str(script), "-o", str(tmp_path / "p.cpp")]) == 1


def test_issue_table_in_rich_mode(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("INSTACODE_MINIMAL_UI", "0")
    script = _script(tmp_path, "volar hasta la luna")
    assert cli.main([str(script), "-o", str(tmp_path / "p.cpp")]) == 1
    assert "Problemas encontrados" in capsys.readouterr().err
    assert term._is_minimal() is False
