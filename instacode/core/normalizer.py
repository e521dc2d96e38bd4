#!/usr/bin/env python3
"""
Text helpers shared by every instruction recognizer.

Everything here is a pure function over strings: folding an instruction
line to its canonical lowercase ASCII form, turning free words into valid
C++ identifiers, canonicalizing numeric literals and quoting text as a C++
string literal.
"""

import re
import unicodedata
from typing import List

NUMBER_RE = re.compile(r'-?\d+(?:[.,]\d+)?')
_FULL_NUMBER_RE = re.compile(r'^-?\d+(?:[.,]\d+)?$')
_WHITESPACE_RE = re.compile(r'\s+')
_NON_IDENTIFIER_RE = re.compile(r'[^a-z0-9]+')
_LINE_BREAK_RE = re.compile(r'[\r\n]+')

_COMBINING = ('Mn', 'Mc', 'Me')

CPP_KEYWORDS = {
    'alignas', 'alignof', 'and', 'asm', 'auto', 'bool', 'break', 'case',
    'catch', 'char', 'class', 'const', 'constexpr', 'continue', 'default',
    'delete', 'do', 'double', 'else', 'enum', 'explicit', 'extern', 'false',
    'float', 'for', 'friend', 'goto', 'if', 'inline', 'int', 'long',
    'main', 'mutable', 'namespace', 'new', 'not', 'nullptr', 'operator',
    'or', 'private', 'protected', 'public', 'register', 'return', 'short',
    'signed', 'sizeof', 'static', 'std', 'struct', 'switch', 'template',
    'this', 'throw', 'true', 'try', 'typedef', 'typename', 'union',
    'unsigned', 'using', 'virtual', 'void', 'volatile', 'while', 'xor',
}


def remove_diacritics(text: str) -> str:
    """Strip accents and other combining marks (á -> a, ñ -> n)."""
    decomposed = unicodedata.normalize('NFD', text)
    return ''.join(ch for ch in decomposed if unicodedata.category(ch) not in _COMBINING)


def normalize_line(text: str) -> str:
    """Lowercase, drop diacritics and collapse every whitespace run to one space."""
    folded = remove_diacritics(text.lower())
    return _WHITESPACE_RE.sub(' ', folded).strip()


def sanitize_identifier(text: str) -> str:
    """Map arbitrary text to a C++ identifier matching ``[a-z_][a-z0-9_]*``."""
    folded = remove_diacritics(text.lower())
    ident = _NON_IDENTIFIER_RE.sub('_', folded).strip('_')
    if not ident:
        return 'valor'
    if ident[0].isdigit():
        ident = 'v' + ident
    if ident in CPP_KEYWORDS:
        ident += '_'
    return ident


def escape_string_literal(text: str) -> str:
    escaped = text.replace('\\', '\\\\').replace('"', '\\"')
    return escaped.replace('\r', '').replace('\n', '\\n')


def quoted(text: str) -> str:
    """Wrap text as a C++ string literal."""
    return f'"{escape_string_literal(text)}"'


def ensure_number_string(text: str, floating: bool) -> str:
    """Canonicalize a numeric literal; decimal comma becomes a dot."""
    value = text.strip()
    if not value:
        return '0.0' if floating else '0'
    value = value.replace(',', '.')
    if floating and '.' not in value:
        value += '.0'
    return value


def read_quoted_text(line: str) -> str:
    """Return the text between the first pair of double quotes, or ''."""
    start = line.find('"')
    if start < 0:
        return ''
    end = line.find('"', start + 1)
    if end < 0:
        return ''
    return line[start + 1:end]


def is_number(text: str) -> bool:
    return bool(_FULL_NUMBER_RE.match(text.strip()))


def is_decimal_number(text: str) -> bool:
    value = text.strip()
    return is_number(value) and ('.' in value or ',' in value)


def first_number(text: str) -> str:
    match = NUMBER_RE.search(text)
    return match.group(0) if match else ''


def split_lines(text: str) -> List[str]:
    """Split on any newline run, dropping empty pieces."""
    return [part for part in _LINE_BREAK_RE.split(text) if part]


def indentation_of(raw: str, tab_size: int = 4) -> int:
    expanded = raw.expandtabs(tab_size)
    return len(expanded) - len(expanded.lstrip(' '))
