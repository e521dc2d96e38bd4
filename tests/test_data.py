from instacode.core.diagnostics import DataFileRequiredError
from instacode.core.recognizers.data import file_name_from, is_data_instruction


def test_data_instruction_shapes():
    assert is_data_instruction("leer los datos del archivo")
    assert is_data_instruction("cargar desde el archivo notas.txt")
    assert is_data_instruction("importar los datos")
    assert is_data_instruction("leer el archivo de paises")
    assert not is_data_instruction("leer edad")


def test_file_name_override_keeps_case():
    assert file_name_from("Leer los datos del archivo llamado Paises.txt.", "datos.txt") == "Paises.txt"
    assert file_name_from("cargar desde el archivo notas.csv", "datos.txt") == "notas.csv"
    assert file_name_from("leer los datos", "entrada.txt") == "entrada.txt"


def test_missing_payload_aborts_translation(translate):
    result = translate(
        "crear una lista de numeros enteros con 3 elementos",
        "leer los datos del archivo",
        'mostrar "no llega"',
    )
    assert not result.success
    assert result.code == ""
    assert result.issues == [DataFileRequiredError.DEFAULT_MESSAGE]


def test_single_column_loads_latest_collection(translate):
    result = translate(
        "crear una lista de numeros enteros para guardar numeros",
        "leer los datos del archivo",
        data="10\n20\n\n30\n",
    )
    assert result.success
    code = result.code
    assert "#include <fstream>" in code
    assert 'std::ofstream archivo_datos("datos.txt");' in code
    assert 'archivo_datos << "10\\n";' in code
    assert 'archivo_datos << "30\\n";' in code
    assert "// Cargar datos desde archivo (una columna)" in code
    assert "numeros.push_back(10);" in code
    assert "numeros.push_back(30);" in code
    assert code.index("std::ofstream") < code.index("std::vector<int> numeros;")


def test_data_file_name_from_input_is_used(translate):
    result = translate(
        "crear una lista de texto para guardar nombres",
        "leer los datos del archivo",
        data="Ana\nLuis",
        data_name="alumnos.txt",
    )
    assert 'std::ofstream archivo_datos("alumnos.txt");' in result.code
    assert 'nombres.push_back("Ana");' in result.code


def test_sized_vector_is_cleared_and_values_formatted(session, run_line):
    session.data_file_contents = "1\n2,5\n"
    run_line("crear una lista de numeros decimales con 3 elementos", 1)
    run_line("leer los datos del archivo", 2)
    assert session.main.lines[-3:] == [
        "    lista.clear();",
        "    lista.push_back(1.0);",
        "    lista.push_back(2.5);",
    ]
    assert session.symbols.lookup_collection("lista").length == 2


def test_fixed_array_receives_indexed_values(translate):
    result = translate(
        "crear un arreglo de 2 numeros enteros",
        "leer los datos del archivo",
        data="1\n2\n3\n",
    )
    code = result.code
    assert "arreglo[0] = 1;" in code
    assert "arreglo[1] = 2;" in code
    assert "arreglo[2] =" not in code
    assert result.issues == ["El arreglo 'arreglo' solo admite 2 elementos; se ignoraron 1."]


def test_short_payload_shrinks_array_length(session, run_line):
    session.data_file_contents = "1\n2\n3\n"
    run_line("crear un arreglo de 5 numeros enteros", 1)
    run_line("leer los datos del archivo", 2)
    assert session.symbols.lookup_collection("arreglo").length == 3
    run_line("imprimir todos los elementos del arreglo", 3)
    assert "    int arreglo[5];" in session.main.lines
    assert "    for (int i = 0; i < 3; ++i) {" in session.main.lines
    assert not session.diagnostics.has_warnings()


def test_two_columns_fill_the_last_two_collections(translate):
    result = translate(
        "crear una lista de texto para guardar paises",
        "crear una lista de texto para guardar capitales",
        "leer los datos del archivo llamado paises.txt",
        "imprimir los paises y sus capitales",
        data='Francia,París\n"Perú","Lima"\nmal formada\n',
    )
    assert result.success
    code = result.code
    assert 'std::ofstream archivo_datos("paises.txt");' in code
    assert 'paises.push_back("Francia");' in code
    assert 'capitales.push_back("París");' in code
    assert 'paises.push_back("Perú");' in code
    assert 'capitales.push_back("Lima");' in code
    assert 'push_back("mal formada")' not in code
    assert "for (std::size_t i = 0; i < paises.size() && i < capitales.size(); ++i) {" in code
    assert 'std::cout << paises[i] << " - " << capitales[i] << std::endl;' in code


def test_not_enough_collections_for_columns(translate):
    result = translate(
        "crear una lista de texto para guardar paises",
        "leer los datos del archivo",
        data="Chile,Santiago\n",
    )
    assert result.success
    assert len(result.issues) == 1
    assert "Se necesitan 2 listas" in result.issues[0]


def test_pairs_without_data_fail_softly(translate):
    result = translate("imprimir los paises y sus capitales")
    assert not result.success
    assert "int main() {" in result.code
    assert "formato 'País,Capital'" in result.issues[0]


def test_pairs_without_lists(translate):
    result = translate("imprimir los paises y sus capitales", data="Chile,Santiago")
    assert result.success
    assert "No se encontraron las listas de países y capitales" in result.issues[0]
