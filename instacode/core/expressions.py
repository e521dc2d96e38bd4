#!/usr/bin/env python3
"""
Translation of Spanish arithmetic and comparison phrases to C++ expressions.

    calcular total mas 5           ->  total + 5
    si la edad es mayor que 17     ->  edad > 17
    promedio dividido entre 3      ->  promedio / 3.0   (when promedio is int)
"""

import re
from typing import Optional, Tuple, TYPE_CHECKING

from .normalizer import (
    NUMBER_RE, ensure_number_string, is_number, is_decimal_number,
    normalize_line, quoted, sanitize_identifier, first_number,
)
from .symbols import ScalarType

if TYPE_CHECKING:
    from .session import TranslationSession

# Applied in order; multi-word operators first
OPERATOR_WORDS = [
    (re.compile(r'\bmultiplicado por\b'), '*'),
    (re.compile(r'\bdividido (?:entre|por)\b'), '/'),
    (re.compile(r'\bmas\b'), '+'),
    (re.compile(r'\bmenos\b'), '-'),
    (re.compile(r'\bpor\b'), '*'),
    (re.compile(r'\bentre\b'), '/'),
    (re.compile(r'\bdividir\b'), '/'),
]

# Longest phrases first: "mayor o igual que" must not be read as "mayor"
COMPARISONS = [
    ("mayor o igual que", ">="),
    ("mayor o igual a", ">="),
    ("menor o igual que", "<="),
    ("menor o igual a", "<="),
    ("mayor que", ">"),
    ("menor que", "<"),
    ("diferente de", "!="),
    ("distinto de", "!="),
    ("igual a", "=="),
]

ARTICLES = {'el', 'la', 'los', 'las'}

_TOKEN_RE = re.compile(r'"[^"]*"|\d+(?:\.\d+)?|[a-z_][a-z0-9_]*|[-+*/%()\[\]]|\S')
_DIVISION_RE = re.compile(r'^([a-z_][a-z0-9_]*) / (\d+(?:\.\d+)?)$')
_ARRAY_ACCESS_RE = re.compile(r'^([a-z_][a-z0-9_]*)\[([a-z0-9_]+)\]$')


class ExpressionTranslator:
    def __init__(self, session: 'TranslationSession'):
        self.session = session

    @property
    def symbols(self):
        return self.session.symbols

    def _identifier(self, word: str) -> str:
        variable = self.symbols.lookup_variable(word)
        if variable is not None:
            return variable.name
        collection = self.symbols.lookup_collection(word)
        if collection is not None:
            return collection.name
        return sanitize_identifier(word)

    def translate(self, text: str) -> str:
        """Arithmetic phrase to a C++ expression."""
        expr = normalize_line(text)
        if expr in ('verdadero', 'true'):
            return 'true'
        if expr in ('falso', 'false'):
            return 'false'

        expr = NUMBER_RE.sub(lambda m: ensure_number_string(m.group(0), False), expr)
        for pattern, operator in OPERATOR_WORDS:
            expr = pattern.sub(f' {operator} ', expr)

        tokens = []
        for token in _TOKEN_RE.findall(expr):
            if token in ARTICLES:
                continue
            if token[0].isalpha() or token[0] == '_':
                tokens.append(self._identifier(token))
            elif token.startswith('"'):
                self.session.include("string")
                tokens.append(quoted(token[1:-1]))
            else:
                tokens.append(token)

        result = ' '.join(tokens)
        result = re.sub(r'\(\s+', '(', result)
        result = re.sub(r'\s+\)', ')', result)
        result = re.sub(r'\s*\[\s*', '[', result)
        result = re.sub(r'\s+\]', ']', result)
        if result.startswith('- '):
            result = '-' + result[2:]
        return self._promote_division(result)

    def _promote_division(self, expr: str) -> str:
        """``int / literal`` would truncate; make the literal floating."""
        match = _DIVISION_RE.match(expr)
        if not match:
            return expr
        variable = self.symbols.lookup_variable(match.group(1))
        if variable is not None and variable.type == ScalarType.INT:
            return f"{match.group(1)} / {ensure_number_string(match.group(2), True)}"
        return expr

    def is_floating(self, expr: str) -> bool:
        if '.' in expr or '/' in expr:
            return True
        for token in re.findall(r'[a-z_][a-z0-9_]*', expr):
            variable = self.symbols.lookup_variable(token)
            if variable is not None and variable.type == ScalarType.DOUBLE:
                return True
        return False

    def condition(self, text: str) -> Optional[str]:
        """Comparison phrase to a C++ condition, or None when none is found."""
        normalized = normalize_line(text)
        normalized = re.sub(r'\b(?:es|sea|son)\b', ' ', normalized)
        normalized = re.sub(r'\s+', ' ', normalized).strip()

        for keyword, operator in COMPARISONS:
            idx = normalized.find(keyword)
            if idx < 0:
                continue
            left = self.operand(normalized[:idx])
            right = self.operand(normalized[idx + len(keyword):])
            if not left or not right:
                return None
            if operator == '==' and right == 'false':
                return f"!{left}"
            if operator == '==' and right == 'true':
                return left
            return f"{left} {operator} {right}"

        if normalized.startswith('no '):
            inner = self.operand(normalized[3:])
            return f"!{inner}" if inner else None
        variable = self.symbols.lookup_variable(self._strip_article(normalized))
        if variable is not None and variable.type == ScalarType.BOOL:
            return variable.name
        return None

    @staticmethod
    def _strip_article(text: str) -> str:
        words = text.split(' ', 1)
        if len(words) == 2 and words[0] in ARTICLES:
            return words[1]
        return text

    def operand(self, part: str) -> str:
        """One side of a comparison."""
        trimmed = part.strip()
        if not trimmed:
            return ''

        match = _ARRAY_ACCESS_RE.match(trimmed.replace(' ', ''))
        if match:
            collection = self.symbols.resolve_collection(match.group(1))
            index = match.group(2)
            if collection is not None:
                if is_number(index):
                    return f"{collection.name}[{index}]"
                return f"{collection.name}[{self._identifier(index)}]"

        if is_number(trimmed):
            return ensure_number_string(trimmed, is_decimal_number(trimmed))
        if trimmed in ('verdadero', 'true'):
            return 'true'
        if trimmed in ('falso', 'false'):
            return 'false'
        if trimmed.startswith('"'):
            self.session.include("string")
            text = self.session.instruction.quoted_text if self.session.instruction else ''
            return quoted(text or trimmed.strip('"'))

        variable = self.symbols.lookup_variable(trimmed)
        if variable is not None:
            return variable.name

        bare = self._strip_article(trimmed)
        if bare != trimmed:
            variable = self.symbols.lookup_variable(bare)
            if variable is not None:
                return variable.name
            if ' ' not in bare:
                return self.session.ensure_variable(bare, ScalarType.INT)
        return sanitize_identifier(trimmed)

    def literal(self, value_text: str, scalar: ScalarType) -> str:
        """Format ``value_text`` as a C++ literal of ``scalar`` type."""
        trimmed = value_text.strip()
        if scalar == ScalarType.STRING:
            self.session.include("string")
            text = self.session.instruction.quoted_text if self.session.instruction else ''
            return quoted(text or trimmed.strip('"'))

        if scalar == ScalarType.BOOL:
            if trimmed in ('verdadero', 'true'):
                return 'true'
            if trimmed in ('falso', 'false'):
                return 'false'
            variable = self.symbols.lookup_variable(trimmed)
            if variable is not None:
                return variable.name
            return 'false'

        number = first_number(trimmed)
        if number:
            floating = scalar == ScalarType.DOUBLE or is_decimal_number(number)
            return ensure_number_string(number, floating)
        if trimmed:
            return self._identifier(trimmed)
        self.session.warning(f"No se pudo interpretar el valor numérico: {value_text}")
        return scalar.zero

    def arithmetic_operand(self, token: str) -> Tuple[str, bool]:
        """A number or variable operand, and whether it is floating."""
        token = self._strip_article(token.strip())
        if is_number(token):
            floating = is_decimal_number(token)
            return ensure_number_string(token, floating), floating
        variable = self.symbols.lookup_variable(token)
        if variable is not None:
            return variable.name, variable.type == ScalarType.DOUBLE
        return sanitize_identifier(token), False
