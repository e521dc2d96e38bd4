#!/usr/bin/env python3
"""Record types: ``crear estructura``, lists of records, record input and listing."""

import re

from ..blocks import BlockKind
from ..instruction import Instruction
from ..normalizer import sanitize_identifier
from ..symbols import Collection, ContainerKind, ScalarType, StructType

_STRUCT_RE = re.compile(r'^crear (?:una )?estructura ([a-z_][a-z0-9_]*) con (.+)$')
_FIELD_RE = re.compile(r'([a-z_][a-z0-9_]*) \(([^)]+)\)')
_STRUCT_LIST_RE = re.compile(r'^crear (?:una )?lista de ([a-z_][a-z0-9_]*) con (\d+) elementos?$')
_STRUCT_INPUT_RE = re.compile(r'^ingresar los datos de (?:cada|los|las) ([a-z_][a-z0-9_]*)$')
_STRUCT_SHOW_RE = re.compile(r'^recorrer la lista y mostrar (.+)$')


def field_type(phrase: str) -> ScalarType:
    if 'texto' in phrase or 'cadena' in phrase:
        return ScalarType.STRING
    if 'decimal' in phrase:
        return ScalarType.DOUBLE
    if 'booleano' in phrase:
        return ScalarType.BOOL
    return ScalarType.INT


def plural(noun: str) -> str:
    return noun + ('s' if noun[-1:] in 'aeiou' else 'es')


def define_struct(session, ins: Instruction) -> bool:
    """crear estructura estudiante con nombre (texto) edad (entero) nota (decimal)"""
    if not ins.text.startswith('crear estructura') and not ins.text.startswith('crear una estructura'):
        return False
    match = _STRUCT_RE.match(ins.text)
    if not match:
        session.structural(f"Formato de estructura no reconocido: {ins.text}")
        return True

    struct = StructType(sanitize_identifier(match.group(1)))
    for name, phrase in _FIELD_RE.findall(match.group(2)):
        scalar = field_type(phrase)
        if scalar == ScalarType.STRING:
            session.include("string")
        struct.fields.append((sanitize_identifier(name), scalar))

    if not struct.fields:
        session.structural(f"No se encontraron campos válidos en la estructura: {ins.text}")
        return True
    session.symbols.define_struct(struct)
    return True


def create_struct_collection(session, ins: Instruction) -> bool:
    """crear lista de estudiante con 3 elementos"""
    match = _STRUCT_LIST_RE.match(ins.text)
    if not match:
        return False
    struct = session.symbols.lookup_struct(match.group(1))
    if struct is None:
        return False

    session.include("vector")
    collection = Collection(
        name=session.symbols.unique_name("lista"),
        kind=ContainerKind.VECTOR,
        element_type=struct.name,
        alias="lista",
        length=int(match.group(2)),
        fixed_size=True,
    )
    session.emit(collection.declaration())
    session.symbols.define_collection(collection)
    return True


def input_struct_data(session, ins: Instruction) -> bool:
    """ingresar los datos de cada estudiante"""
    match = _STRUCT_INPUT_RE.match(ins.text)
    if not match:
        return False
    word = match.group(1)
    struct = session.symbols.lookup_struct(word) or session.symbols.lookup_struct(word.rstrip('s'))
    if struct is None:
        session.missing(f"Tipo de estructura no encontrado: {word}")
        return True
    collection = session.symbols.collection_of_struct(struct)
    if collection is None:
        session.missing(f"No se encontró una colección para el tipo: {struct.name}")
        return True

    index = session.loop_index()
    session.open_block(BlockKind.LOOP, f"for (std::size_t {index} = 0; {index} < {collection.name}.size(); ++{index}) {{")
    session.symbols.define_variable(index, ScalarType.INT, declared=False)
    for position, (name, scalar) in enumerate(struct.fields):
        label = struct.text_field_before(position)
        if position == 0 or scalar == ScalarType.STRING or label is None:
            prompt = f'"Ingrese el {name} del {struct.name} " << ({index} + 1) << ": "'
        else:
            prompt = f'"Ingrese la {name} de " << {collection.name}[{index}].{label} << ": "'
        session.emit(f"std::cout << {prompt};")
        session.emit(f"std::cin >> {collection.name}[{index}].{name};")
        if position < len(struct.fields) - 1:
            session.emit("")
    session.close_block()
    return True


def show_struct_collection(session, ins: Instruction) -> bool:
    """recorrer la lista y mostrar nombre y nota"""
    match = _STRUCT_SHOW_RE.match(ins.text)
    if not match:
        return False
    collections = session.symbols.struct_collections()
    if not collections:
        session.missing("No se encontró una colección de estructuras")
        return True
    collection = collections[-1]
    struct = session.symbols.lookup_struct(collection.element_type)

    parts = []
    for requested in re.split(r',\s*| y ', match.group(1)):
        requested = requested.strip()
        if not requested:
            continue
        entry = struct.field_named(requested)
        if entry is None:
            session.warning(f"Campo no encontrado en la estructura: {requested}")
            continue
        label = requested[0].upper() + requested[1:]
        parts.append(f'"{label}: " << item.{entry[0]}')

    title = f"\\n--- Registro de {plural(struct.name)} ---\\n"
    session.emit(f'std::cout << "{title}";')
    session.open_block(BlockKind.LOOP, f"for (const auto &item : {collection.name}) {{")
    if parts:
        joined = ' << " | " << '.join(parts)
        session.emit(f"std::cout << {joined} << std::endl;")
    session.close_block()
    return True
