from instacode.core.symbols import ScalarType


def test_declarations_with_and_without_initial_value(translate):
    result = translate(
        "crear variable numero entero edad con valor inicial 20",
        "crear variable numero decimal precio con valor inicial 3,5",
        'crear variable texto nombre con valor inicial "Ana María"',
        "crear variable booleano activo con valor inicial verdadero",
        "crear variable numero decimal promedio",
        "definir variable cadena apellido",
    )
    assert result.success
    code = result.code
    assert "int edad = 20;" in code
    assert "double precio = 3.5;" in code
    assert 'std::string nombre = "Ana María";' in code
    assert "bool activo = true;" in code
    assert "double promedio = 0.0;" in code
    assert 'std::string apellido = "";' in code
    assert "#include <string>" in code


def test_redeclaration_in_same_scope_becomes_assignment(translate):
    result = translate(
        "crear variable numero entero x con valor inicial 1",
        "crear variable numero entero x con valor inicial 2",
    )
    assert result.code.count("int x = ") == 1
    assert "x = 2;" in result.code
    assert any("ya estaba declarada" in issue for issue in result.issues)
    assert result.success


def test_assignment_infers_type_of_new_variables(translate):
    result = translate(
        "asignar 5 a contador",
        "asignar 2,5 a precio",
        'asignar "Hola" a saludo',
        "asignar verdadero a listo",
        "asignar valor 7 al contador",
    )
    code = result.code
    assert "int contador = 0;" in code
    assert "contador = 5;" in code
    assert "double precio = 0.0;" in code
    assert "precio = 2.5;" in code
    assert 'std::string saludo = "";' in code
    assert 'saludo = "Hola";' in code
    assert "bool listo = false;" in code
    assert "listo = true;" in code
    assert "contador = 7;" in code
    assert code.count("int contador") == 1


def test_assignment_from_expression(translate):
    result = translate(
        "crear variable numero entero a con valor inicial 2",
        "asignar el valor de a mas 3 a b",
    )
    assert "b = a + 3;" in result.code


def test_variable_updates(translate):
    result = translate(
        "crear variable numero entero total con valor inicial 10",
        "crear variable numero entero factor con valor inicial 3",
        "total multiplicar por factor",
        "total restar 1",
        "total sumar 5",
    )
    code = result.code
    assert "total *= factor;" in code
    assert "total -= 1;" in code
    assert "total += 5;" in code


def test_calculate_expression_picks_destination_type(translate):
    result = translate(
        "crear variable numero entero suma con valor inicial 10",
        "calcular suma dividido entre 4 y asignar a promedio",
        "calcular suma por 2 y asignar al doble",
    )
    code = result.code
    assert "double promedio = 0.0;" in code
    assert "promedio = suma / 4.0;" in code
    assert "int doble = 0;" in code
    assert "doble = suma * 2;" in code


def test_calculate_with_como_clause(translate):
    result = translate(
        "crear variable numero entero a con valor inicial 4",
        "calcular el area como a por a y asignar a area",
    )
    assert "area = a * a;" in result.code


def test_scalar_input(translate):
    result = translate("ingresar edad", "ingresar valor x", "ingresar la altura")
    code = result.code
    assert 'std::cout << "Ingrese el valor de edad: ";' in code
    assert "std::cin >> edad;" in code
    assert 'std::cout << "Ingrese el valor de x: ";' in code
    assert "std::cin >> x;" in code
    assert "int altura = 0;" in code
    assert 'std::cout << "Ingrese el valor de altura: ";' in code


def test_variable_named_like_a_collection_is_renamed(translate):
    result = translate(
        "crear una lista de texto para guardar los nombres",
        'crear variable texto nombres con valor inicial "Ana"',
        'mostrar "Hola" y nombres',
    )
    code = result.code
    assert "std::vector<std::string> nombres;" in code
    assert 'std::string nombres2 = "Ana";' in code
    assert 'std::string nombres = "Ana";' not in code
    assert 'std::cout << "Hola" << nombres2 << std::endl;' in code
    assert result.issues == ["'nombres' ya es el nombre de una colección; la variable se declaró como 'nombres2'."]


def test_collection_after_variable_gets_a_fresh_name(translate):
    result = translate(
        "crear variable numero entero numeros con valor inicial 1",
        "crear una lista de numeros enteros para guardar numeros",
    )
    assert "int numeros = 1;" in result.code
    assert "std::vector<int> numeros2;" in result.code
    assert result.issues == []


def test_input_without_variable_warns(translate):
    result = translate("ingresar")
    assert result.success
    assert result.issues == ["Se solicitó ingresar un valor, pero no se indicó la variable."]


def test_declared_variable_is_registered(session, run_line):
    assert run_line("crear variable numero decimal altura con valor inicial 1.75")
    variable = session.symbols.lookup_variable("altura")
    assert variable.type == ScalarType.DOUBLE
    assert variable.declared
    assert session.main.lines == ["    double altura = 1.75;"]
