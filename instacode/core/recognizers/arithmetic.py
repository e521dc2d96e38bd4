#!/usr/bin/env python3
"""One-shot arithmetic: number sums and binary operations printed at once."""

from ..instruction import Instruction
from ..normalizer import NUMBER_RE, ensure_number_string, is_decimal_number
from ..symbols import ScalarType

SHOW_RESULT = 'y mostrar el resultado'

BINARY_VERBS = [
    ('sumar', '+', ' y '),
    ('restar', '-', ' y '),
    ('multiplicar', '*', ' y '),
    ('dividir', '/', ' entre '),
]


def _literals(text: str):
    numbers = []
    floating = False
    for raw in NUMBER_RE.findall(text):
        decimal = is_decimal_number(raw)
        numbers.append(ensure_number_string(raw, decimal))
        floating = floating or decimal
    return numbers, floating


def _accumulate(session, base: str, numbers, floating: bool, show: bool):
    scalar = ScalarType.DOUBLE if floating else ScalarType.INT
    accumulator = session.temp_name(base)
    session.declare(accumulator, scalar, declared=False)
    for number in numbers:
        session.emit(f"{accumulator} += {number};")
    if show:
        session.emit(f"std::cout << {accumulator} << std::endl;")


def sum_and_show(session, ins: Instruction) -> bool:
    """sumar los numeros 4, 5 y 6 y mostrar el resultado"""
    if not ins.text.startswith('sumar los numeros') or SHOW_RESULT not in ins.text:
        return False
    numbers, floating = _literals(ins.text[:ins.text.index(SHOW_RESULT)])
    if not numbers:
        return False
    _accumulate(session, 'resultado', numbers, floating, show=True)
    return True


def sum_numbers(session, ins: Instruction) -> bool:
    """sumar los numeros 1 2 3"""
    if not ins.text.startswith('sumar los numeros'):
        return False
    numbers, floating = _literals(ins.text)
    if not numbers:
        return False
    _accumulate(session, 'suma', numbers, floating, show=False)
    return True


def binary_arithmetic(session, ins: Instruction) -> bool:
    """sumar 3 y 4 / dividir 10 entre 4"""
    for verb, operator, separator in BINARY_VERBS:
        if not ins.text.startswith(verb + ' '):
            continue
        tail = ins.text[len(verb):].strip()
        if separator not in tail:
            continue
        left_text, right_text = tail.split(separator, 1)
        left, left_floating = session.expressions.arithmetic_operand(left_text)
        right, right_floating = session.expressions.arithmetic_operand(right_text)

        scalar = ScalarType.DOUBLE if left_floating or right_floating else ScalarType.INT
        result = session.temp_name('resultado')
        session.declare(result, scalar, f"{left} {operator} {right}", declared=False)
        session.emit(f"std::cout << {result} << std::endl;")
        return True
    return False
