#!/usr/bin/env python3
"""
Indentation-driven nesting of conditional and loop blocks.

A block is opened by a ``si``/``mientras``/``recorrer`` line and closed
automatically when a later line is indented at or left of the opening line.
``sino`` and ``sino si`` continue the innermost conditional instead of
closing it.
"""

from enum import Enum
from dataclasses import dataclass
from typing import List, Optional, Sequence, Iterator, Any


class BlockKind(Enum):
    CONDITIONAL = "conditional"
    LOOP = "loop"


class BlockState(Enum):
    OPEN = "open"
    AWAITING_CONTINUATION = "awaiting_continuation"
    CLOSED = "closed"


@dataclass
class Block:
    kind: BlockKind
    indent: int
    auto_close: bool = True
    has_else: bool = False
    has_else_if: bool = False
    buffer: Any = None
    body_lines: int = 0
    closed: bool = False

    @property
    def state(self) -> BlockState:
        if self.closed:
            return BlockState.CLOSED
        if self.kind == BlockKind.CONDITIONAL and not self.has_else and self.body_lines > 0:
            return BlockState.AWAITING_CONTINUATION
        return BlockState.OPEN


def blocks_to_close(stack: Sequence[Block], next_indent: int, next_is_else_continuation: bool) -> int:
    """How many blocks, counted from the top, end before the next line.

    Only auto-close blocks are popped. A regular line closes blocks opened at
    or right of its column; an else continuation closes only blocks opened
    strictly right of it, leaving its sibling ``si`` on top.
    """
    count = 0
    for block in reversed(stack):
        if not block.auto_close:
            break
        if next_is_else_continuation:
            if next_indent >= block.indent:
                break
        elif next_indent > block.indent:
            break
        count += 1
    return count


class BlockStack:
    def __init__(self):
        self._blocks: List[Block] = []

    def push(self, block: Block) -> Block:
        self._blocks.append(block)
        return block

    def pop(self) -> Block:
        block = self._blocks.pop()
        block.closed = True
        return block

    def top(self) -> Optional[Block]:
        return self._blocks[-1] if self._blocks else None

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def blocks(self) -> List[Block]:
        return list(self._blocks)

    def else_error(self, else_if: bool) -> Optional[str]:
        """Why a continuation cannot attach to the top block, or None if it can."""
        top = self.top()
        if top is None or top.kind != BlockKind.CONDITIONAL:
            return "Se encontró un 'sino' sin un 'si' previo."
        if top.has_else:
            if else_if:
                return "No se puede usar 'sino si' después de un 'sino' final."
            return "El bloque 'si' ya tenía un 'sino' asociado."
        return None
