from instacode.core.symbols import (
    Collection,
    ContainerKind,
    FunctionDef,
    ScalarType,
    StructType,
    SymbolTable,
    element_type_from_phrase,
    type_from_phrase,
)


def _vector(name, alias=None, element="int", length=0):
    return Collection(name, ContainerKind.VECTOR, element, alias or name, length)


def test_type_phrases():
    assert type_from_phrase("numero decimal") == ScalarType.DOUBLE
    assert type_from_phrase("numero entero") == ScalarType.INT
    assert type_from_phrase("texto") == ScalarType.STRING
    assert type_from_phrase("booleano") == ScalarType.BOOL
    assert type_from_phrase("desconocido") == ScalarType.INT
    assert element_type_from_phrase("numeros decimales") == "double"
    assert element_type_from_phrase("numeros enteros") == "int"
    assert element_type_from_phrase("cadenas") == "std::string"


def test_variables_are_scoped():
    table = SymbolTable()
    table.define_variable("Edad", ScalarType.INT)
    table.enter_scope()
    table.define_variable("i", ScalarType.INT, declared=False)
    assert table.lookup_variable("edad").name == "edad"
    assert table.has_variable("i")

    dropped = table.exit_scope()
    assert [v.name for v in dropped] == ["i"]
    assert table.lookup_variable("i") is None
    assert table.lookup_variable("edad") is not None


def test_exit_scope_never_drops_the_global_scope():
    table = SymbolTable()
    table.define_variable("x", ScalarType.INT)
    assert table.exit_scope() == []
    assert table.has_variable("x")


def test_alias_resolution_prefers_most_recent():
    table = SymbolTable()
    first = table.define_collection(_vector("lista", "lista"))
    second = table.define_collection(_vector("lista2", "lista"))
    assert table.collection_for_alias("lista") is second
    assert table.collection_for_alias("lista2") is second
    assert first is not second


def test_alias_resolution_paises_heuristic_and_fallback():
    table = SymbolTable()
    paises = table.define_collection(_vector("nombres_paises", "lista", "std::string"))
    numeros = table.define_collection(_vector("numeros"))
    assert table.collection_for_alias("paises") is paises
    assert table.collection_for_alias("arreglo") is None
    assert table.resolve_collection("arreglo") is numeros
    assert table.resolve_collection(None) is numeros


def test_recent_collections_in_creation_order():
    table = SymbolTable()
    a = table.define_collection(_vector("a"))
    b = table.define_collection(_vector("b"))
    c = table.define_collection(_vector("c"))
    assert table.recent_collections(2) == [b, c]
    assert table.recent_collections(5) == [a, b, c]
    assert table.recent_collections(0) == []


def test_unique_name_counts_variables_and_collections():
    table = SymbolTable()
    table.define_variable("i", ScalarType.INT)
    table.define_collection(_vector("i2"))
    assert table.unique_name("i") == "i3"
    assert table.unique_name("total") == "total"


def test_renamed_variable_keeps_its_source_name():
    table = SymbolTable()
    table.define_collection(_vector("nombres"))
    table.define_variable("nombres", ScalarType.STRING, cpp_name="nombres2")
    assert table.lookup_variable("nombres").name == "nombres2"
    assert table.is_taken("nombres2")
    assert table.unique_name("nombres") == "nombres3"


def test_collection_declarations():
    assert _vector("v").declaration() == "std::vector<int> v;"
    assert _vector("v", length=3).declaration() == "std::vector<int> v(3);"
    array = Collection("a", ContainerKind.ARRAY, "double", "arreglo", 4, True)
    assert array.declaration() == "double a[4];"
    assert array.size_expr() == "4"
    assert _vector("v").size_expr() == "v.size()"
    assert array.is_numeric
    assert not _vector("t", element="std::string").is_numeric


def test_structs_lookup_is_case_insensitive():
    table = SymbolTable()
    struct = StructType("estudiante", [("nombre", ScalarType.STRING), ("nota", ScalarType.DOUBLE)])
    table.define_struct(struct)
    table.define_collection(_vector("lista", "lista", "estudiante", 3))
    assert table.lookup_struct("Estudiante") is struct
    assert table.collection_of_struct(struct).name == "lista"
    assert [c.name for c in table.struct_collections()] == ["lista"]
    assert struct.field_named("NOTA") == ("nota", ScalarType.DOUBLE)
    assert struct.text_field_before(1) == "nombre"
    assert struct.text_field_before(0) is None
    assert struct.definition() == [
        "struct estudiante {",
        "    std::string nombre;",
        "    double nota;",
        "};",
    ]


def test_function_definition_text():
    function = FunctionDef("doble", ScalarType.INT, [("x", ScalarType.INT)], ["    return x * 2;"])
    assert function.signature() == "int doble(int x)"
    assert function.definition() == ["int doble(int x) {", "    return x * 2;", "}"]
