#!/usr/bin/env python3
"""Scalar variables: declaration, assignment, in-place updates and ``calcular``."""

import re

from ..instruction import Instruction
from ..normalizer import is_decimal_number, sanitize_identifier
from ..symbols import ScalarType
from .collections import request_collection_input

_DECLARE_RE = re.compile(r'^(?:crear|definir|declarar) (?:una )?variable (.+)$')
_INITIAL_VALUE_RE = re.compile(r' con valor(?: inicial)?(?: de)?(?: (.*))?$')
_MULTIPLY_RE = re.compile(r'^([a-z_][a-z0-9_]*) multiplicar por ([a-z_][a-z0-9_]*|-?\d+(?:[.,]\d+)?)$')
_UPDATE_RE = re.compile(r'^([a-z_][a-z0-9_]*) (restar|sumar) (-?\d+(?:[.,]\d+)?|[a-z_][a-z0-9_]*)$')

DECLARATION_TYPES = [
    ("numero decimal", ScalarType.DOUBLE),
    ("numero entero", ScalarType.INT),
    ("decimal", ScalarType.DOUBLE),
    ("entero", ScalarType.INT),
    ("texto", ScalarType.STRING),
    ("cadena", ScalarType.STRING),
    ("booleano", ScalarType.BOOL),
    ("numero", ScalarType.INT),
]


def infer_type(value_text: str, instruction: Instruction) -> ScalarType:
    """Type of a new variable from the value first assigned to it."""
    value = value_text.strip()
    if instruction.quoted_text or value.startswith('"'):
        return ScalarType.STRING
    if value in ('verdadero', 'falso', 'true', 'false'):
        return ScalarType.BOOL
    if is_decimal_number(value):
        return ScalarType.DOUBLE
    return ScalarType.INT


def declare_variable(session, ins: Instruction) -> bool:
    """crear variable numero entero edad con valor inicial 18"""
    match = _DECLARE_RE.match(ins.text)
    if not match:
        return False
    rest = match.group(1)

    value_text = None
    value_match = _INITIAL_VALUE_RE.search(rest)
    if value_match:
        value_text = (value_match.group(1) or '').strip()
        rest = rest[:value_match.start()].strip()

    scalar = None
    name = rest
    for phrase, candidate in DECLARATION_TYPES:
        if rest == phrase or rest.startswith(phrase + ' '):
            scalar = candidate
            name = rest[len(phrase):].strip()
            break
    if scalar is None:
        scalar = infer_type(value_text, ins) if value_text else ScalarType.INT
    if not name:
        name = "variable"

    if value_text:
        if scalar == ScalarType.BOOL:
            initializer = 'true' if 'verdadero' in value_text or value_text == 'true' else 'false'
        else:
            initializer = session.expressions.literal(value_text, scalar)
    else:
        initializer = scalar.zero

    existing = session.symbols.lookup_variable(name)
    if existing is not None and existing.scope_level == session.symbols.current_scope_level:
        session.warning(f"La variable '{existing.name}' ya estaba declarada; se asigna el nuevo valor.")
        session.emit(f"{existing.name} = {initializer};")
        return True

    session.declare(name, scalar, initializer)
    return True


def assign_value(session, ins: Instruction) -> bool:
    """asignar [valor] <valor> a|al <variable>"""
    text = ins.text
    if text.startswith('asignar valor '):
        rest = text[len('asignar valor '):]
    elif text.startswith('asignar '):
        rest = text[len('asignar '):]
    else:
        return False

    idx = rest.rfind(' a ')
    skip = 3
    if idx < 0:
        idx = rest.rfind(' al ')
        skip = 4
    if idx < 0:
        return False

    value_part = rest[:idx].strip()
    for lead in ('el valor de ', 'valor de '):
        if value_part.startswith(lead):
            value_part = value_part[len(lead):]
            break
    name_part = rest[idx + skip:].strip()
    if name_part.startswith('valor de '):
        name_part = name_part[len('valor de '):].strip()
    for article in ('la ', 'el '):
        if name_part.startswith(article):
            name_part = name_part[len(article):]
            break
    if not value_part or not name_part:
        return False

    if ins.quoted_text:
        session.include("string")
        value_expr = session.expressions.literal(value_part, ScalarType.STRING)
    else:
        value_expr = session.expressions.translate(value_part)

    variable = session.symbols.lookup_variable(name_part)
    if variable is None:
        ident = session.ensure_variable(name_part, infer_type(value_part, ins))
    else:
        ident = variable.name
    session.emit(f"{ident} = {value_expr};")
    return True


def update_variable(session, ins: Instruction) -> bool:
    """x multiplicar por y / contador restar 1 / total sumar 5"""
    match = _MULTIPLY_RE.match(ins.text)
    if match:
        target, _ = session.expressions.arithmetic_operand(match.group(1))
        operand, _ = session.expressions.arithmetic_operand(match.group(2))
        session.emit(f"{target} *= {operand};")
        return True

    match = _UPDATE_RE.match(ins.text)
    if match:
        target, _ = session.expressions.arithmetic_operand(match.group(1))
        operand, _ = session.expressions.arithmetic_operand(match.group(3))
        operator = '-=' if match.group(2) == 'restar' else '+='
        session.emit(f"{target} {operator} {operand};")
        return True
    return False


def calculate_expression(session, ins: Instruction) -> bool:
    """calcular <expr> [como <expr>] y asignar a|al <destino>"""
    if not ins.text.startswith('calcular '):
        return False
    rest = ins.text[len('calcular '):]

    token = ' y asignar a '
    idx = rest.find(token)
    if idx < 0:
        token = ' y asignar al '
        idx = rest.find(token)
    if idx < 0:
        return False

    expr_part = rest[:idx].strip()
    dest_part = rest[idx + len(token):].strip()
    if not expr_part:
        return False
    if ' como ' in expr_part:
        expr_part = expr_part.split(' como ', 1)[1].strip()

    if not dest_part:
        session.warning("No se pudo interpretar la variable destino en la instrucción de cálculo.")
        return True
    dest = sanitize_identifier(dest_part)

    expr = session.expressions.translate(expr_part)
    if not expr:
        session.warning(f"No se pudo interpretar la expresión a calcular: {expr_part}")
        return True

    if not session.symbols.has_variable(dest):
        floating = (session.expressions.is_floating(expr)
                    or any(word in expr_part for word in ('decimal', 'dividir', 'dividido')))
        dest = session.ensure_variable(dest, ScalarType.DOUBLE if floating else ScalarType.INT)
    else:
        dest = session.symbols.lookup_variable(dest).name
    session.emit(f"{dest} = {expr};")
    return True


def input_value(session, ins: Instruction) -> bool:
    """ingresar [valor|los valores] <variable>"""
    text = ins.text
    for prefix in ('ingresar los valores', 'ingresar valor', 'ingresar'):
        if text == prefix or text.startswith(prefix + ' '):
            core = text[len(prefix):].strip()
            break
    else:
        return False

    if not core:
        session.warning("Se solicitó ingresar un valor, pero no se indicó la variable.")
        return True

    for lead in ('de la ', 'del ', 'de el '):
        if core.startswith(lead):
            remainder = core[len(lead):].strip()
            if remainder in ('lista', 'vector', 'arreglo') or session.symbols.collection_for_alias(remainder):
                return request_collection_input(session, remainder)

    match = re.match(r'^de cada (.+) en (?:la|el) ([a-z_][a-z0-9_]*)$', core)
    if match:
        return request_collection_input(session, match.group(2))

    for article in ('la ', 'el '):
        if core.startswith(article):
            core = core[len(article):]
            break
    ident = session.ensure_variable(core, ScalarType.INT)
    session.emit(f'std::cout << "Ingrese el valor de {ident}: ";')
    session.emit(f"std::cin >> {ident};")
    return True
