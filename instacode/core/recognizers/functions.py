#!/usr/bin/env python3
"""Free functions: definition, ``retornar`` and call-and-assign."""

import re

from ..instruction import Instruction
from ..normalizer import sanitize_identifier
from ..symbols import FunctionDef, ScalarType, type_from_phrase

_DEFINE_RE = re.compile(r'^definir funcion (.+?) ([a-z_][a-z0-9_]*)(?: con (?:el |los )?parametros? (.+))?$')
_PARAM_RE = re.compile(r'^(?:(.+) )?([a-z_][a-z0-9_]*)$')
_CALL_RE = re.compile(
    r'^asignar (?:valor )?(?:a|al) ([a-z_][a-z0-9_]*) con (?:llamar|llamada a) (?:la )?funcion '
    r'([a-z_][a-z0-9_]*) ?\(([^)]*)\)$'
)
_ARG_SPLIT_RE = re.compile(r',\s*| y ')


def define_function(session, ins: Instruction) -> bool:
    """definir funcion numero entero doble con parametro numero entero x"""
    match = _DEFINE_RE.match(ins.text)
    if not match:
        return False

    name = sanitize_identifier(match.group(2))
    function = FunctionDef(name, type_from_phrase(match.group(1)))
    if match.group(3):
        for part in _ARG_SPLIT_RE.split(match.group(3)):
            param = _PARAM_RE.match(part.strip())
            if not param:
                session.warning(f"No se pudo interpretar el parámetro: {part.strip()}")
                continue
            scalar = type_from_phrase(param.group(1) or '')
            function.parameters.append((sanitize_identifier(param.group(2)), scalar))

    if session.symbols.lookup_function(name) is not None:
        session.warning(f"La función '{name}' ya estaba definida; se reemplaza.")
    if function.return_type == ScalarType.STRING:
        session.include("string")
    session.begin_function(function)
    return True


def return_statement(session, ins: Instruction) -> bool:
    """retornar <expresion>"""
    if ins.text != 'retornar' and not ins.text.startswith('retornar '):
        return False
    rest = ins.text[len('retornar'):].strip()

    function = session.function
    if not rest:
        session.warning("La instrucción 'retornar' no indica un valor.")
        expr = function.return_type.zero if function else "0"
    else:
        expr = session.expressions.translate(rest)

    if function is None:
        session.emit(f"return {expr};")
        return True
    session.end_function(expr)
    return True


def call_function(session, ins: Instruction) -> bool:
    """asignar valor a resultado con llamar funcion doble(x)"""
    match = _CALL_RE.match(ins.text)
    if not match:
        return False

    name = sanitize_identifier(match.group(2))
    function = session.symbols.lookup_function(name)
    args = [session.expressions.translate(arg) for arg in _ARG_SPLIT_RE.split(match.group(3).strip()) if arg.strip()]

    if function is None:
        session.warning(f"La función '{name}' no está definida.")
    elif len(args) != len(function.parameters):
        session.warning(
            f"La función '{name}' espera {len(function.parameters)} argumentos, se recibieron {len(args)}."
        )

    # new destinations are always int, whatever the function returns
    dest = session.ensure_variable(match.group(1), ScalarType.INT)
    session.emit(f"{dest} = {name}({', '.join(args)});")
    return True
