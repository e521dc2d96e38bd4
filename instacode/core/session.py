#!/usr/bin/env python3
"""
Translation session: the single context object every recognizer receives.

It owns the symbol table, the block stack, the include set, the startup
statements and the code buffers of ``main`` and of the function currently
being defined. Nothing here outlives one call to ``convert``.
"""

import logging
from typing import List, Optional, Set

from .blocks import Block, BlockKind, BlockStack, blocks_to_close
from .config import TranslatorConfig
from .diagnostics import DiagnosticEngine, DataFileRequiredError
from .expressions import ExpressionTranslator
from .instruction import Instruction
from .normalizer import quoted, sanitize_identifier
from .symbols import SymbolTable, ScalarType, FunctionDef


class CodeBuffer:
    """Indented lines of one C++ body (``main`` or a function)."""

    def __init__(self, indent_unit: str = "    ", level: int = 1):
        self.lines: List[str] = []
        self.indent_unit = indent_unit
        self.level = level

    def append(self, line: str):
        if line:
            self.lines.append(self.indent_unit * self.level + line)
        else:
            self.lines.append("")

    def indent(self):
        self.level += 1

    def dedent(self):
        if self.level > 1:
            self.level -= 1

    def __len__(self) -> int:
        return len(self.lines)


class TranslationSession:
    def __init__(self, data_file_contents: str = "", data_file_name: str = "",
                 config: Optional[TranslatorConfig] = None):
        self.config = config or TranslatorConfig()
        self.logger = logging.getLogger(__name__)
        self.symbols = SymbolTable()
        self.blocks = BlockStack()
        self.diagnostics = DiagnosticEngine()
        self.includes: Set[str] = {"iostream"}
        self.startup = CodeBuffer(self.config.indent)
        self.main = CodeBuffer(self.config.indent)
        self.function: Optional[FunctionDef] = None
        self.function_buffer: Optional[CodeBuffer] = None
        self.data_file_contents = data_file_contents or ""
        self.data_file_name = (data_file_name or "").strip() or self.config.default_data_file_name
        self.materialized_files: Set[str] = set()
        self.instruction: Optional[Instruction] = None
        self.expressions = ExpressionTranslator(self)
        self._temp_counter = 1

    @property
    def line_number(self) -> int:
        return self.instruction.number if self.instruction else 0

    @property
    def current_indent(self) -> int:
        return self.instruction.indent if self.instruction else 0

    # Output

    @property
    def buffer(self) -> CodeBuffer:
        if self.function is not None and self.function_buffer is not None:
            return self.function_buffer
        return self.main

    def emit(self, line: str):
        buffer = self.buffer
        buffer.append(line)
        top = self.blocks.top()
        if top is not None and top.buffer is buffer:
            top.body_lines += 1

    def emit_lines(self, lines: List[str]):
        for line in lines:
            self.emit(line)

    def emit_startup(self, line: str):
        self.startup.append(line)

    def include(self, header: str):
        self.includes.add(header)

    # Blocks

    def open_block(self, kind: BlockKind, header: str, auto_close: bool = True) -> Block:
        self.emit(header)
        buffer = self.buffer
        buffer.indent()
        self.symbols.enter_scope()
        return self.blocks.push(Block(kind, self.current_indent, auto_close, buffer=buffer))

    def close_block(self):
        block = self.blocks.pop()
        block.buffer.dedent()
        block.buffer.append("}")
        self.symbols.exit_scope()
        parent = self.blocks.top()
        if parent is not None and parent.buffer is block.buffer:
            parent.body_lines += 1

    def continue_block(self, header: str) -> Block:
        """Turn the top conditional into its ``else``/``else if`` branch."""
        block = self.blocks.top()
        block.buffer.dedent()
        block.buffer.append(header)
        block.buffer.indent()
        self.symbols.exit_scope()
        self.symbols.enter_scope()
        block.indent = self.current_indent
        block.body_lines = 0
        return block

    def close_stale_blocks(self, instruction: Instruction):
        count = blocks_to_close(self.blocks.blocks(), instruction.indent,
                                instruction.is_else_continuation)
        for _ in range(count):
            self.close_block()

    def close_all_blocks(self):
        while len(self.blocks):
            self.close_block()

    # Variables

    def declare(self, name: str, scalar: ScalarType, initializer: Optional[str] = None,
                declared: bool = True) -> str:
        ident = sanitize_identifier(name)
        cpp_name = ident
        if self.symbols.lookup_collection(ident) is not None:
            cpp_name = self.symbols.unique_name(ident)
            self.warning(f"'{ident}' ya es el nombre de una colección; la variable se declaró como '{cpp_name}'.")
        if scalar == ScalarType.STRING:
            self.include("string")
        value = initializer if initializer is not None else scalar.zero
        self.emit(f"{scalar.value} {cpp_name} = {value};")
        self.symbols.define_variable(ident, scalar, declared, cpp_name)
        return cpp_name

    def ensure_variable(self, name: str, scalar: ScalarType = ScalarType.INT,
                        initializer: Optional[str] = None) -> str:
        """Identifier of ``name``, declaring it first when it is unknown."""
        existing = self.symbols.lookup_variable(name)
        if existing is not None:
            return existing.name
        return self.declare(name, scalar, initializer, declared=False)

    def temp_name(self, base: str) -> str:
        while True:
            candidate = f"{base}{self._temp_counter}"
            self._temp_counter += 1
            if not self.symbols.is_taken(candidate):
                return candidate

    def loop_index(self, base: str = "i") -> str:
        return self.symbols.unique_name(base)

    # Functions

    def begin_function(self, function: FunctionDef):
        if self.function is not None:
            self.warning(f"La función '{self.function.name}' no tenía 'retornar'; se cerró automáticamente.")
            self.end_function()
        self.close_all_blocks()
        self.symbols.define_function(function)
        self.function = function
        self.function_buffer = CodeBuffer(self.config.indent)
        self.symbols.enter_scope()
        for name, scalar in function.parameters:
            if scalar == ScalarType.STRING:
                self.include("string")
            self.symbols.define_variable(name, scalar, declared=False)
        self.logger.debug(f"Función abierta: {function.signature()}")

    def end_function(self, return_expr: Optional[str] = None):
        function = self.function
        if function is None:
            return
        while len(self.blocks) and self.blocks.top().buffer is self.function_buffer:
            self.close_block()
        if return_expr is not None:
            self.function_buffer.append(f"return {return_expr};")
        function.body = list(self.function_buffer.lines)
        function.closed = True
        self.symbols.exit_scope()
        self.function = None
        self.function_buffer = None

    # Data file

    def require_data(self) -> str:
        if not self.data_file_contents.strip():
            raise DataFileRequiredError(self.line_number, self.instruction.raw if self.instruction else None)
        return self.data_file_contents

    def materialize_data_file(self, file_name: str, lines: List[str]):
        """Startup statements that write the data payload to ``file_name``."""
        if file_name in self.materialized_files:
            return
        self.materialized_files.add(file_name)
        self.logger.info(f"Archivo de datos materializado como {file_name} ({len(lines)} líneas)")
        self.include("fstream")
        stream = self.symbols.unique_name("archivo_datos")
        self.emit_startup("{")
        self.startup.indent()
        self.emit_startup(f"std::ofstream {stream}({quoted(file_name)});")
        for line in lines:
            literal = quoted(line + "\n")
            self.emit_startup(f"{stream} << {literal};")
        self.startup.dedent()
        self.emit_startup("}")

    # Diagnostics

    def unrecognized(self, message: str):
        self.diagnostics.unrecognized(message, self.line_number)

    def missing(self, message: str, fails: bool = False):
        self.diagnostics.missing(message, self.line_number, fails)

    def warning(self, message: str):
        self.diagnostics.warning(message, self.line_number)

    def structural(self, message: str):
        self.diagnostics.structural(message, self.line_number)
