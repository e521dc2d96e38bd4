#!/usr/bin/env python3
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Tuple

from .normalizer import sanitize_identifier


class ScalarType(Enum):
    INT = "int"
    DOUBLE = "double"
    BOOL = "bool"
    STRING = "std::string"

    @property
    def zero(self) -> str:
        return _ZERO_VALUES[self]

    @property
    def is_numeric(self) -> bool:
        return self in (ScalarType.INT, ScalarType.DOUBLE)

    @classmethod
    def from_cpp(cls, spelling: str) -> Optional['ScalarType']:
        for member in cls:
            if member.value == spelling:
                return member
        return None


_ZERO_VALUES = {
    ScalarType.INT: "0",
    ScalarType.DOUBLE: "0.0",
    ScalarType.BOOL: "false",
    ScalarType.STRING: '""',
}

# Longest phrases first so "numero decimal" wins over a bare "numero"
TYPE_PHRASES: List[Tuple[str, ScalarType]] = [
    ("numero decimal", ScalarType.DOUBLE),
    ("numero entero", ScalarType.INT),
    ("decimal", ScalarType.DOUBLE),
    ("entero", ScalarType.INT),
    ("texto", ScalarType.STRING),
    ("cadena", ScalarType.STRING),
    ("booleano", ScalarType.BOOL),
]


def type_from_phrase(phrase: str, default: ScalarType = ScalarType.INT) -> ScalarType:
    phrase = phrase.strip()
    for words, scalar in TYPE_PHRASES:
        if phrase == words:
            return scalar
    for words, scalar in TYPE_PHRASES:
        if words in phrase:
            return scalar
    return default


def element_type_from_phrase(phrase: str) -> str:
    """C++ element type of a collection described as "numeros enteros", "texto"..."""
    if 'texto' in phrase or 'cadena' in phrase:
        return ScalarType.STRING.value
    if 'decimal' in phrase:
        return ScalarType.DOUBLE.value
    if 'entero' in phrase or 'numero' in phrase:
        return ScalarType.INT.value
    return ScalarType.STRING.value


class ContainerKind(Enum):
    VECTOR = "vector"
    ARRAY = "array"


@dataclass
class Variable:
    name: str
    type: ScalarType
    declared: bool = True
    scope_level: int = 0


@dataclass
class Collection:
    name: str
    kind: ContainerKind
    element_type: str
    alias: str
    length: int = 0
    fixed_size: bool = False

    @property
    def is_array(self) -> bool:
        return self.kind == ContainerKind.ARRAY

    @property
    def element_scalar(self) -> Optional[ScalarType]:
        return ScalarType.from_cpp(self.element_type)

    @property
    def is_numeric(self) -> bool:
        scalar = self.element_scalar
        return scalar is not None and scalar.is_numeric

    def declaration(self) -> str:
        if self.is_array:
            return f"{self.element_type} {self.name}[{self.length}];"
        if self.length > 0:
            return f"std::vector<{self.element_type}> {self.name}({self.length});"
        return f"std::vector<{self.element_type}> {self.name};"

    def size_expr(self) -> str:
        return str(self.length) if self.is_array else f"{self.name}.size()"


@dataclass
class StructType:
    name: str
    fields: List[Tuple[str, ScalarType]] = field(default_factory=list)

    def field_named(self, name: str) -> Optional[Tuple[str, ScalarType]]:
        wanted = name.strip().lower()
        for entry in self.fields:
            if entry[0].lower() == wanted:
                return entry
        return None

    def text_field_before(self, index: int) -> Optional[str]:
        for name, scalar in self.fields[:index]:
            if scalar == ScalarType.STRING:
                return name
        return None

    def definition(self, indent: str = "    ") -> List[str]:
        lines = [f"struct {self.name} {{"]
        for name, scalar in self.fields:
            lines.append(f"{indent}{scalar.value} {name};")
        lines.append("};")
        return lines


@dataclass
class FunctionDef:
    name: str
    return_type: ScalarType
    parameters: List[Tuple[str, ScalarType]] = field(default_factory=list)
    body: List[str] = field(default_factory=list)
    closed: bool = False

    def signature(self) -> str:
        params = ", ".join(f"{scalar.value} {name}" for name, scalar in self.parameters)
        return f"{self.return_type.value} {self.name}({params})"

    def definition(self) -> List[str]:
        return [f"{self.signature()} {{"] + self.body + ["}"]


class SymbolTable:
    """Variables, collections, struct types and functions of one translation.

    Variables live in lexical scopes; collections, structs and functions are
    global. All lookups sanitize the queried name first.
    """

    def __init__(self):
        self.scopes: List[Dict[str, Variable]] = [{}]
        self.current_scope_level = 0
        self.collections: Dict[str, Collection] = {}
        self.structs: Dict[str, StructType] = {}
        self.functions: Dict[str, FunctionDef] = {}

    def enter_scope(self):
        self.current_scope_level += 1
        self.scopes.append({})

    def exit_scope(self) -> List[Variable]:
        if self.current_scope_level == 0:
            return []
        dropped = list(self.scopes.pop().values())
        self.current_scope_level -= 1
        return dropped

    # Variables

    def define_variable(self, name: str, scalar: ScalarType, declared: bool = True,
                        cpp_name: Optional[str] = None) -> Variable:
        """Register ``name``; ``cpp_name`` is the emitted identifier when it differs."""
        ident = sanitize_identifier(name)
        variable = Variable(cpp_name or ident, scalar, declared, self.current_scope_level)
        self.scopes[self.current_scope_level][ident] = variable
        return variable

    def lookup_variable(self, name: str) -> Optional[Variable]:
        ident = sanitize_identifier(name)
        for scope in reversed(self.scopes):
            if ident in scope:
                return scope[ident]
        return None

    def has_variable(self, name: str) -> bool:
        return self.lookup_variable(name) is not None

    def all_variables(self) -> List[Variable]:
        variables = []
        for scope in self.scopes:
            variables.extend(scope.values())
        return variables

    # Collections

    def define_collection(self, collection: Collection) -> Collection:
        self.collections[collection.name] = collection
        return collection

    def lookup_collection(self, name: str) -> Optional[Collection]:
        return self.collections.get(sanitize_identifier(name))

    def last_collection(self) -> Optional[Collection]:
        if not self.collections:
            return None
        return list(self.collections.values())[-1]

    def recent_collections(self, count: int) -> List[Collection]:
        """The last ``count`` collections, oldest first."""
        if count <= 0:
            return []
        return list(self.collections.values())[-count:]

    def collection_for_alias(self, alias: str) -> Optional[Collection]:
        """Exact alias (most recent wins), then the paises/capitales heuristic."""
        alias = alias.strip()
        for collection in reversed(list(self.collections.values())):
            if collection.alias == alias or collection.name == alias:
                return collection
        for keyword in ('paises', 'capitales'):
            if keyword in alias:
                for collection in reversed(list(self.collections.values())):
                    if keyword in collection.name or keyword in collection.alias:
                        return collection
        return None

    def resolve_collection(self, alias: Optional[str] = None) -> Optional[Collection]:
        if alias:
            found = self.collection_for_alias(alias)
            if found is not None:
                return found
        return self.last_collection()

    # Structs

    def define_struct(self, struct: StructType) -> StructType:
        self.structs[struct.name.lower()] = struct
        return struct

    def lookup_struct(self, name: str) -> Optional[StructType]:
        return self.structs.get(name.strip().lower())

    def collection_of_struct(self, struct: StructType) -> Optional[Collection]:
        for collection in reversed(list(self.collections.values())):
            if collection.element_type.lower() == struct.name.lower():
                return collection
        return None

    def struct_collections(self) -> List[Collection]:
        return [c for c in self.collections.values() if self.lookup_struct(c.element_type)]

    # Functions

    def define_function(self, function: FunctionDef) -> FunctionDef:
        self.functions[function.name] = function
        return function

    def lookup_function(self, name: str) -> Optional[FunctionDef]:
        return self.functions.get(sanitize_identifier(name))

    # Names

    def is_taken(self, name: str) -> bool:
        if name in self.collections or self.lookup_variable(name) is not None:
            return True
        return any(variable.name == name for variable in self.all_variables())

    def unique_name(self, base: str) -> str:
        candidate = sanitize_identifier(base)
        if not self.is_taken(candidate):
            return candidate
        suffix = 2
        while self.is_taken(f"{candidate}{suffix}"):
            suffix += 1
        return f"{candidate}{suffix}"
