#!/usr/bin/env python3
"""Control flow: si / sino si / sino, mientras and repetir."""

import re

from ..blocks import BlockKind
from ..instruction import Instruction
from ..normalizer import ensure_number_string, is_decimal_number, quoted
from ..symbols import ScalarType
from .display import print_message

_ACTION_RE = re.compile(r'\s(mostrar|imprimir)\s', re.IGNORECASE)
_WHILE_RE = re.compile(
    r'^mientras (?:el |la )?([a-z_][a-z0-9_]*) (?:sea |es )?'
    r'(mayor o igual que|menor o igual que|mayor que|menor que|igual a|diferente de) (-?\d+(?:[.,]\d+)?|[a-z_][a-z0-9_]*)$'
)
_WHILE_INCREASE_RE = re.compile(
    r'^mientras el ([a-z_]+) sea menor que (-?\d+(?:[.,]\d+)?) sumar (-?\d+(?:[.,]\d+)?) al \1$'
)
_REPEAT_RE = re.compile(r'^repetir (\d+) veces (mostrar|imprimir)(?: (?:el mensaje )?(.+))?$')

WHILE_OPERATORS = {
    'mayor que': '>',
    'menor que': '<',
    'mayor o igual que': '>=',
    'menor o igual que': '<=',
    'igual a': '==',
    'diferente de': '!=',
}


def _split_action(ins: Instruction, rest: str):
    """Split ``<condicion> mostrar <mensaje>`` into the condition and the action line."""
    idx = -1
    verb = ''
    for verb in (' mostrar ', ' imprimir '):
        idx = rest.find(verb)
        if idx >= 0:
            break
    if idx < 0:
        return rest.strip(), None
    condition = rest[:idx].strip()
    match = _ACTION_RE.search(ins.raw)
    action = Instruction.from_raw(ins.raw[match.end():] if match else rest[idx + len(verb):], ins.number)
    return condition, action


def _inline_print(session, action: Instruction):
    if action is not None:
        print_message(session, action, action.text)


def if_condition(session, ins: Instruction) -> bool:
    """si <condicion> [mostrar <mensaje>]"""
    if not ins.text.startswith('si '):
        return False
    condition, action = _split_action(ins, ins.text[3:])
    expr = session.expressions.condition(condition)
    if not expr:
        session.unrecognized(f"No se pudo interpretar la condición del 'si': {condition}")
        return True
    session.open_block(BlockKind.CONDITIONAL, f"if ({expr}) {{")
    _inline_print(session, action)
    return True


def handle_else(session, ins: Instruction) -> bool:
    """sino / sino si <condicion> / sino mostrar <mensaje>"""
    else_if = ins.text.startswith('sino si ')
    problem = session.blocks.else_error(else_if)
    if problem:
        session.structural(problem)
        return True

    block = session.blocks.top()
    if else_if:
        condition, action = _split_action(ins, ins.text[len('sino si '):])
        expr = session.expressions.condition(condition)
        if not expr:
            session.unrecognized(f"No se pudo interpretar la condición del 'sino si': {condition}")
            return True
        session.continue_block(f"}} else if ({expr}) {{")
        block.has_else_if = True
        block.auto_close = True
        _inline_print(session, action)
        return True

    session.continue_block("} else {")
    block.has_else = True
    block.auto_close = True
    rest = ins.text[len('sino'):].strip()
    for verb in ('mostrar', 'imprimir'):
        if rest == verb or rest.startswith(verb + ' '):
            print_message(session, ins, rest[len(verb):])
            break
    return True


def while_loop(session, ins: Instruction) -> bool:
    """mientras contador menor que 10"""
    match = _WHILE_RE.match(ins.text)
    if not match:
        return False
    variable = session.expressions.operand(match.group(1))
    limit = session.expressions.operand(match.group(3))
    operator = WHILE_OPERATORS[match.group(2)]
    session.open_block(BlockKind.LOOP, f"while ({variable} {operator} {limit}) {{")
    return True


def while_increase(session, ins: Instruction) -> bool:
    """mientras el x sea menor que 10 sumar 2 al x"""
    match = _WHILE_INCREASE_RE.match(ins.text)
    if not match:
        return False
    limit = ensure_number_string(match.group(2), True)
    increment = ensure_number_string(match.group(3), True)

    variable = session.symbols.lookup_variable(match.group(1))
    if variable is None:
        name = session.declare(match.group(1), ScalarType.DOUBLE, declared=False)
    else:
        name = variable.name
        if variable.type == ScalarType.INT and not (is_decimal_number(match.group(2)) or is_decimal_number(match.group(3))):
            limit = ensure_number_string(match.group(2), False)
            increment = ensure_number_string(match.group(3), False)

    session.open_block(BlockKind.LOOP, f"while ({name} < {limit}) {{")
    session.emit(f"{name} += {increment};")
    session.close_block()
    return True


def repeat_message(session, ins: Instruction) -> bool:
    """repetir 3 veces mostrar el mensaje Hola"""
    match = _REPEAT_RE.match(ins.text)
    if not match:
        return False
    message = ins.quoted_text
    if not message:
        message = (match.group(3) or '').strip().strip('"')
    if not message:
        return False

    session.include("iostream")
    counter = session.loop_index()
    session.open_block(BlockKind.LOOP, f"for (int {counter} = 0; {counter} < {match.group(1)}; ++{counter}) {{")
    session.symbols.define_variable(counter, ScalarType.INT, declared=False)
    session.emit(f"std::cout << {quoted(message)} << std::endl;")
    session.close_block()
    return True
