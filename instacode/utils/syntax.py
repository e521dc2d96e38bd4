#!/usr/bin/env python3

"""
Bracket balance checker for generated C++.

  check_braces(code: str) -> List[dict]

Each error dict contains: {'line': int|None, 'column': int|None, 'message': str}

String and character literals and ``//`` comments are skipped, so a brace
inside a printed message never counts.
"""

from typing import List, Optional

_PAIRS = {'}': '{', ')': '(', ']': '['}
_OPENERS = set(_PAIRS.values())


def check_braces(code: str) -> List[dict]:
    """Return one error per unmatched bracket. Empty list means balanced."""
    errors: List[dict] = []
    stack = []

    for line_no, line in enumerate(code.splitlines(), start=1):
        quote = None
        escaped = False
        for col, ch in enumerate(line, start=1):
            if quote:
                if escaped:
                    escaped = False
                elif ch == '\\':
                    escaped = True
                elif ch == quote:
                    quote = None
                continue
            if ch in ('"', "'"):
                quote = ch
            elif ch == '/' and line[col:col + 1] == '/':
                break
            elif ch in _OPENERS:
                stack.append((ch, line_no, col))
            elif ch in _PAIRS:
                if not stack or stack[-1][0] != _PAIRS[ch]:
                    errors.append({'line': line_no, 'column': col, 'message': f"'{ch}' sin apertura"})
                else:
                    stack.pop()

    for ch, line_no, col in stack:
        errors.append({'line': line_no, 'column': col, 'message': f"'{ch}' sin cerrar"})
    return errors


def format_errors(errors: List[dict], filename: Optional[str] = None) -> str:
    """Return a printable multi-line string for errors."""
    if not errors:
        return ""

    lines = []
    for err in errors:
        line = err.get('line')
        col = err.get('column')
        location = filename or '<salida>'
        if line is not None:
            location = f"{location}:{line}"
            if col is not None:
                location = f"{location}:{col}"
        lines.append(f"Error de sintaxis en {location}: {err.get('message')}")

    return '\n'.join(lines)
