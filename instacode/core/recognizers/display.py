#!/usr/bin/env python3
"""Console output: messages, whole collections and the paises/capitales listing."""

import re

from ..blocks import BlockKind
from ..instruction import Instruction
from ..normalizer import normalize_line, quoted, sanitize_identifier
from ..symbols import ScalarType

PRINT_VERBS = ('mostrar', 'imprimir', 'escribir')
_ELEMENT_RE = re.compile(r'^[a-z_][a-z0-9_]*\s*\[\s*[a-z0-9_]+\s*\]$')
_ALL_ELEMENTS_RE = re.compile(r'^(?:mostrar|imprimir) todos los elementos (?:del|de la|de el|de)(?: (.+))?$')


def _print_verb(text: str):
    for verb in PRINT_VERBS:
        if text == verb or text.startswith(verb + ' '):
            return verb
    return None


def _reference(session, text: str) -> str:
    """A trailing ``y <variable>`` reference."""
    text = text.strip()
    if '[' in text:
        return session.expressions.operand(text)
    for article in ('el ', 'la ', 'los ', 'las '):
        if text.startswith(article):
            bare = text[len(article):]
            if session.symbols.has_variable(bare):
                text = bare
            break
    variable = session.symbols.lookup_variable(text)
    if variable is not None:
        return variable.name
    collection = session.symbols.lookup_collection(text)
    if collection is not None:
        return collection.name
    return sanitize_identifier(text)


def print_message(session, ins: Instruction, action: str):
    """``std::cout`` of the quoted text of the line, or of ``action`` when unquoted.

    ``action`` is the normalized text after the print verb.
    """
    session.include("iostream")
    parts = []
    raw = ins.raw
    first = raw.find('"')
    second = raw.find('"', first + 1) if first >= 0 else -1
    if second > first >= 0:
        parts.append(quoted(raw[first + 1:second]))
        tail = normalize_line(raw[second + 1:])
        if tail.endswith('.'):
            tail = tail[:-1].strip()
        if tail.startswith('y '):
            parts.append(_reference(session, tail[2:]))
    else:
        bare = action.strip()
        if _ELEMENT_RE.match(bare):
            session.emit(f"std::cout << {session.expressions.operand(bare)} << std::endl;")
            return
        variable = session.symbols.lookup_variable(bare)
        if variable is None and ' ' in bare and bare.split(' ', 1)[0] in ('el', 'la'):
            variable = session.symbols.lookup_variable(bare.split(' ', 1)[1])
        if variable is not None and bare:
            parts.append(variable.name)
        else:
            parts.append(quoted(bare))
    session.emit(f"std::cout << {' << '.join(parts)} << std::endl;")


def show_message(session, ins: Instruction) -> bool:
    """mostrar "La edad es" y edad"""
    verb = _print_verb(ins.text)
    if verb is None:
        return False
    print_message(session, ins, ins.text[len(verb):])
    return True


def print_collection(session, ins: Instruction) -> bool:
    """imprimir todos los elementos del vector"""
    text = ins.text
    match = _ALL_ELEMENTS_RE.match(text)
    if not match:
        if not (_print_verb(text) and 'todos los elementos' in text
                and any(alias in text for alias in ('vector', 'lista', 'arreglo'))):
            return False
    collection = session.symbols.last_collection()
    if collection is None:
        session.missing("No se encontró ninguna colección para imprimir sus elementos.")
        return True

    session.include("iostream")
    if collection.is_array:
        if collection.length <= 0:
            session.warning("No se conoce el tamaño del arreglo para imprimir sus elementos.")
            return True
        index = session.loop_index()
        session.open_block(BlockKind.LOOP, f"for (int {index} = 0; {index} < {collection.length}; ++{index}) {{")
        session.emit(f"std::cout << {collection.name}[{index}] << std::endl;")
        session.close_block()
        return True

    session.include("vector")
    item = session.symbols.unique_name("valor")
    session.open_block(BlockKind.LOOP, f"for (const {collection.element_type} &{item} : {collection.name}) {{")
    session.emit(f"std::cout << {item} << std::endl;")
    session.close_block()
    return True


def print_pairs(session, ins: Instruction) -> bool:
    """imprimir los paises y sus capitales"""
    text = ins.text
    verb = _print_verb(text)
    if verb is None:
        return False
    if not (text.startswith(f"{verb} los paises") or ('paises' in text and 'capitales' in text)):
        return False

    if not session.data_file_contents.strip():
        session.missing(
            "Error: Esta instrucción requiere datos cargados de un archivo con el formato "
            "'País,Capital'. Cargue el archivo antes de convertir.",
            fails=True,
        )
        return True

    paises = session.symbols.collection_for_alias('paises')
    capitales = session.symbols.collection_for_alias('capitales')
    if paises is None or capitales is None or paises is capitales:
        session.missing(
            "Error: No se encontraron las listas de países y capitales. "
            "Asegúrese de crear las listas antes de imprimir."
        )
        return True

    session.include("iostream")
    index = session.loop_index()
    session.open_block(
        BlockKind.LOOP,
        f"for (std::size_t {index} = 0; {index} < {paises.size_expr()} && "
        f"{index} < {capitales.size_expr()}; ++{index}) {{",
    )
    session.symbols.define_variable(index, ScalarType.INT, declared=False)
    session.emit(f'std::cout << {paises.name}[{index}] << " - " << {capitales.name}[{index}] << std::endl;')
    session.close_block()
    return True
