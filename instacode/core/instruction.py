#!/usr/bin/env python3
from dataclasses import dataclass
from typing import List

from .normalizer import normalize_line, read_quoted_text, indentation_of


@dataclass(frozen=True)
class Instruction:
    """One script line: raw text, normalized text and indentation column."""
    raw: str
    text: str
    indent: int
    number: int = 0

    @classmethod
    def from_raw(cls, raw: str, number: int = 0) -> 'Instruction':
        text = normalize_line(raw)
        if text.endswith('.'):
            text = text[:-1].rstrip()
        return cls(raw=raw, text=text, indent=indentation_of(raw), number=number)

    @property
    def quoted_text(self) -> str:
        """Quoted text taken from the raw line, so case and accents survive."""
        return read_quoted_text(self.raw)

    @property
    def is_blank(self) -> bool:
        return not self.text

    @property
    def is_else_continuation(self) -> bool:
        return self.text == 'sino' or self.text.startswith('sino ')


def read_instructions(source: str) -> List[Instruction]:
    """Split a script into instructions, skipping blank lines."""
    instructions = []
    for number, raw in enumerate(source.splitlines(), start=1):
        instruction = Instruction.from_raw(raw, number)
        if not instruction.is_blank:
            instructions.append(instruction)
    return instructions
