from instacode.core.instruction import Instruction
from instacode.core.symbols import ScalarType


def test_operator_words(session):
    session.symbols.define_variable("total", ScalarType.INT)
    translate = session.expressions.translate
    assert translate("total mas 5") == "total + 5"
    assert translate("a multiplicado por b") == "a * b"
    assert translate("(a mas b) dividido entre 2") == "(a + b) / 2"
    assert translate("precio menos 2,5") == "precio - 2.5"
    assert translate("verdadero") == "true"
    assert translate("falso") == "false"


def test_int_division_by_literal_is_promoted(session):
    session.symbols.define_variable("suma", ScalarType.INT)
    assert session.expressions.translate("suma dividido entre 3") == "suma / 3.0"
    assert session.expressions.is_floating("suma / 3.0")
    assert not session.expressions.is_floating("suma + 1")


def test_conditions(session):
    session.symbols.define_variable("edad", ScalarType.INT)
    session.symbols.define_variable("activo", ScalarType.BOOL)
    condition = session.expressions.condition
    assert condition("la edad es mayor que 17") == "edad > 17"
    assert condition("edad mayor o igual que 18") == "edad >= 18"
    assert condition("edad distinto de 3") == "edad != 3"
    assert condition("activo igual a falso") == "!activo"
    assert condition("activo igual a verdadero") == "activo"
    assert condition("activo") == "activo"
    assert condition("no activo") == "!activo"
    assert condition("algo raro") is None


def test_condition_auto_declares_article_operands(session):
    session.instruction = Instruction.from_raw("si el contador es menor que 10", 1)
    assert session.expressions.condition("el contador es menor que 10") == "contador < 10"
    assert session.symbols.has_variable("contador")
    assert session.main.lines == ["    int contador = 0;"]


def test_literals(session):
    session.instruction = Instruction.from_raw('asignar "Hola Mundo" a saludo', 1)
    literal = session.expressions.literal
    assert literal("hola mundo", ScalarType.STRING) == '"Hola Mundo"'
    assert literal("3", ScalarType.DOUBLE) == "3.0"
    assert literal("2,5", ScalarType.INT) == "2.5"
    assert literal("verdadero", ScalarType.BOOL) == "true"
    assert literal("quizas", ScalarType.BOOL) == "false"
    assert "string" in session.includes


def test_arithmetic_operand(session):
    session.symbols.define_variable("precio", ScalarType.DOUBLE)
    assert session.expressions.arithmetic_operand("el precio") == ("precio", True)
    assert session.expressions.arithmetic_operand("4") == ("4", False)
    assert session.expressions.arithmetic_operand("4.5") == ("4.5", True)
