#!/usr/bin/env python3
"""
Lists, vectors and fixed arrays.

``arreglo`` becomes a native C++ array of fixed length; ``lista`` and
``vector`` become ``std::vector``. Later instructions refer to a collection
by its alias ("la lista", "el vector") or by the noun it was created for.
"""

import re
from typing import Optional

from ..blocks import BlockKind
from ..instruction import Instruction
from ..symbols import Collection, ContainerKind, ScalarType, element_type_from_phrase

ORDINALS = {
    'primer': 0, 'primero': 0, 'primera': 0,
    'segundo': 1, 'segunda': 1,
    'tercer': 2, 'tercero': 2, 'tercera': 2,
    'cuarto': 3, 'cuarta': 3,
    'quinto': 4, 'quinta': 4,
    'sexto': 5, 'sexta': 5,
    'septimo': 6, 'septima': 6,
    'octavo': 7, 'octava': 7,
    'noveno': 8, 'novena': 8,
    'decimo': 9, 'decima': 9,
    'ultimo': -1, 'ultima': -1,
}
_ORDINAL = '(' + '|'.join(sorted(ORDINALS, key=len, reverse=True)) + ')'

_ALIAS = r'([a-z_][a-z0-9_]*)'
_CREATE_SIZED_RE = re.compile(
    r'^crear (?:una |un )?(lista|vector|arreglo) de (?:\d+ )?([a-z ]+?) con (\d+) elementos?$')
_CREATE_COUNT_RE = re.compile(r'^crear (?:una |un )?(lista|vector|arreglo) de (\d+) ([a-z ]+)$')
_CREATE_STORE_RE = re.compile(
    r'^crear (?:una |un )?(?:lista|vector) de (texto|cadenas?|(?:numeros? )?(?:decimales?|enteros?)) '
    r'para guardar (?:los |las )?([a-z ]+)$')
_CREATE_EMPTY_RE = re.compile(r'^crear (?:una |un )?(lista|vector) (?:vacia |vacio )?de ([a-z ]+)$')
_ASSIGN_ELEMENT_RE = re.compile(
    rf'^asignar (?:el )?valor (.+) al {_ORDINAL} elemento (?:de la|del|de el|de) {_ALIAS}$')
_ADD_RE = re.compile(rf'^(?:agregar|agrega|anadir|anade|insertar) (.+?) (?:a la|a el|al|a|en la|en el) {_ALIAS}$')
_REMOVE_RE = re.compile(
    rf'^(?:eliminar|quitar|borrar) el {_ORDINAL} elemento (?:de la|del|de el|de) {_ALIAS}$')
_SORT_RE = re.compile(rf'^ordenar (?:la |el )?{_ALIAS}(?: de (?:forma|manera) (ascendente|descendente))?$')
_ITERATE_RE = re.compile(rf'^recorrer (?:la |el )?{_ALIAS}$')
_ITERATE_SUM_RE = re.compile(
    rf'^recorrer (?:la |el )?{_ALIAS} y sumar (?:cada elemento|los elementos|sus elementos) '
    rf'(?:al|en el|en la|en|a la|a) {_ALIAS}$')
_EACH_IN_RE = re.compile(rf'^ingresar (?:el )?valor de cada (.+) en (?:la|el) {_ALIAS}$')


def ordinal_to_index(word: str) -> Optional[int]:
    """``primer`` -> 0 ... ``decimo`` -> 9, ``ultimo`` -> -1."""
    return ORDINALS.get(word.strip())


def _resolve(session, alias: Optional[str], purpose: str) -> Optional[Collection]:
    collection = session.symbols.resolve_collection(alias)
    if collection is None:
        session.missing(f"No se encontró ninguna colección disponible para {purpose}.")
    return collection


def _register(session, alias: str, element_type: str, length: int, name: Optional[str] = None) -> Collection:
    is_array = alias == 'arreglo'
    collection = Collection(
        name=session.symbols.unique_name(name or alias),
        kind=ContainerKind.ARRAY if is_array else ContainerKind.VECTOR,
        element_type=element_type,
        alias=alias,
        length=length,
        fixed_size=is_array,
    )
    if not is_array:
        session.include("vector")
    if element_type == ScalarType.STRING.value:
        session.include("string")
    session.emit(collection.declaration())
    session.symbols.define_collection(collection)
    return collection


def create_collection(session, ins: Instruction) -> bool:
    """crear una lista de numeros enteros con 5 elementos"""
    text = ins.text
    if not text.startswith('crear '):
        return False

    match = _CREATE_SIZED_RE.match(text)
    if match:
        _register(session, match.group(1), element_type_from_phrase(match.group(2)), int(match.group(3)))
        return True

    match = _CREATE_COUNT_RE.match(text)
    if match:
        _register(session, match.group(1), element_type_from_phrase(match.group(3)), int(match.group(2)))
        return True

    match = _CREATE_STORE_RE.match(text)
    if match:
        noun = match.group(2).strip()
        collection = _register(session, noun, element_type_from_phrase(match.group(1)), 0)
        collection.alias = collection.name
        return True

    match = _CREATE_EMPTY_RE.match(text)
    if match:
        _register(session, match.group(1), element_type_from_phrase(match.group(2)), 0)
        return True
    return False


def _element_literal(session, collection: Collection, value_text: str) -> str:
    scalar = collection.element_scalar or ScalarType.STRING
    return session.expressions.literal(value_text, scalar)


def assign_element(session, ins: Instruction) -> bool:
    """asignar valor 10 al primer elemento de la lista"""
    match = _ASSIGN_ELEMENT_RE.match(ins.text)
    if not match:
        return False
    collection = _resolve(session, match.group(3), "asignar el elemento")
    if collection is None:
        return True

    index = ordinal_to_index(match.group(2))
    value = _element_literal(session, collection, match.group(1))
    if collection.is_array:
        if index == -1:
            index = collection.length - 1
        if index < 0 or index >= collection.length:
            session.warning("El índice indicado está fuera del rango del arreglo.")
            return True
        session.emit(f"{collection.name}[{index}] = {value};")
        return True

    if index == -1:
        session.emit(f"{collection.name}.back() = {value};")
        return True
    if collection.length and index >= collection.length:
        session.warning(f"El índice {index + 1} está fuera de rango para la colección actual.")
    session.emit(f"{collection.name}[{index}] = {value};")
    return True


def add_element(session, ins: Instruction) -> bool:
    """agregar 5 a la lista"""
    match = _ADD_RE.match(ins.text)
    if not match:
        return False
    collection = _resolve(session, match.group(2), "agregar elementos")
    if collection is None:
        return True
    if collection.is_array:
        session.warning("No se pueden agregar elementos a un arreglo de tamaño fijo.")
        return True

    value = _element_literal(session, collection, match.group(1))
    session.emit(f"{collection.name}.push_back({value});")
    collection.length += 1
    return True


def remove_element(session, ins: Instruction) -> bool:
    """eliminar el ultimo elemento de la lista"""
    match = _REMOVE_RE.match(ins.text)
    if not match:
        return False
    collection = _resolve(session, match.group(2), "eliminar elementos")
    if collection is None:
        return True
    if collection.is_array:
        session.warning("No se puede eliminar elementos en un arreglo de tamaño fijo.")
        return True

    index = ordinal_to_index(match.group(1))
    name = collection.name
    if index == -1:
        session.open_block(BlockKind.CONDITIONAL, f"if (!{name}.empty()) {{")
        session.emit(f"{name}.pop_back();")
    else:
        if collection.length and index >= collection.length:
            session.warning(f"El índice {index + 1} está fuera de rango para la colección actual.")
        session.open_block(BlockKind.CONDITIONAL, f"if ({name}.size() > {index}) {{")
        session.emit(f"{name}.erase({name}.begin() + {index});")
    session.close_block()
    if collection.length > 0:
        collection.length -= 1
    return True


def sort_collection(session, ins: Instruction) -> bool:
    """ordenar la lista de forma descendente"""
    match = _SORT_RE.match(ins.text)
    if not match:
        return False
    collection = _resolve(session, match.group(1), "ordenar")
    if collection is None:
        return True

    if collection.is_array:
        if collection.length <= 0:
            session.warning("No se conoce el tamaño del arreglo para ordenarlo.")
            return True
        bounds = f"{collection.name}, {collection.name} + {collection.length}"
    else:
        bounds = f"{collection.name}.begin(), {collection.name}.end()"

    session.include("algorithm")
    element = collection.element_type
    if match.group(2) == 'descendente':
        comparator = f"[](const {element} &a, const {element} &b) {{ return a > b; }}"
        session.emit(f"std::sort({bounds}, {comparator});")
    else:
        session.emit(f"std::sort({bounds});")
    return True


def iterate_collection(session, ins: Instruction) -> bool:
    """recorrer la lista"""
    match = _ITERATE_RE.match(ins.text)
    if not match:
        return False
    collection = _resolve(session, match.group(1), "recorrer")
    if collection is None:
        return True
    index = session.loop_index()
    size = collection.size_expr()
    session.open_block(BlockKind.LOOP, f"for (std::size_t {index} = 0; {index} < {size}; ++{index}) {{")
    session.symbols.define_variable(index, ScalarType.INT, declared=False)
    return True


def iterate_and_sum(session, ins: Instruction) -> bool:
    """recorrer la lista y sumar cada elemento en total"""
    match = _ITERATE_SUM_RE.match(ins.text)
    if not match:
        return False
    collection = _resolve(session, match.group(1), "recorrer")
    if collection is None:
        return True

    scalar = ScalarType.DOUBLE if collection.element_type == ScalarType.DOUBLE.value else ScalarType.INT
    dest = session.ensure_variable(match.group(2), scalar)
    session.open_block(BlockKind.LOOP, f"for (const {collection.element_type} &item : {collection.name}) {{")
    session.emit(f"{dest} += item;")
    session.close_block()
    return True


def request_collection_input(session, alias: Optional[str] = None) -> bool:
    """Loop that prompts for and reads every element of a collection."""
    collection = session.symbols.resolve_collection(alias)
    if collection is None:
        session.missing("No se encontró ninguna colección disponible para ingresar datos.")
        return True

    if collection.is_array and collection.length <= 0:
        session.warning("No se conoce el tamaño del arreglo para solicitar entradas de usuario.")
        return True

    session.include("iostream")
    index = session.loop_index()
    if collection.element_type == ScalarType.DOUBLE.value and 'nota' in collection.name:
        label = "Ingrese la nota "
    else:
        label = "Ingrese el valor "

    size = collection.size_expr()
    session.open_block(BlockKind.LOOP, f"for (std::size_t {index} = 0; {index} < {size}; ++{index}) {{")
    session.emit(f'std::cout << "{label}" << ({index} + 1) << ": ";')
    session.emit(f"std::cin >> {collection.name}[{index}];")
    session.close_block()
    return True


def collection_input(session, ins: Instruction) -> bool:
    """pedir al usuario los valores / ingresar valor de cada nota en la lista"""
    if ins.text.startswith('pedir al usuario'):
        return request_collection_input(session)
    match = _EACH_IN_RE.match(ins.text)
    if match:
        return request_collection_input(session, match.group(2))
    return False


def request_number_input(session, ins: Instruction) -> bool:
    """solicitar al usuario que ingrese cada numero"""
    text = ins.text
    if ('solicitar' in text and 'usuario' in text and 'numero' in text) or \
            ('pedir' in text and 'ingrese' in text and 'consola' in text):
        return request_collection_input(session)
    return False
