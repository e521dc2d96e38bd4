#!/usr/bin/env python3
"""
Serializes a finished translation session into one C++ translation unit.

Layout: sorted ``#include`` lines, a blank line, struct definitions,
function definitions, then ``main`` with the startup statements first.
"""

from typing import List


class ProgramAssembler:
    def __init__(self, session):
        self.session = session
        self.output: List[str] = []

    def emit(self, line: str = ""):
        self.output.append(line)

    def assemble(self) -> str:
        self.output = []
        self._emit_includes()
        self._emit_structs()
        self._emit_functions()
        self._emit_main()
        return '\n'.join(self.output) + '\n'

    def _emit_includes(self):
        for header in sorted(self.session.includes):
            self.emit(f"#include <{header}>")
        self.emit()

    def _emit_structs(self):
        indent = self.session.config.indent
        for struct in self.session.symbols.structs.values():
            for line in struct.definition(indent):
                self.emit(line)
            self.emit()

    def _emit_functions(self):
        for function in self.session.symbols.functions.values():
            for line in function.definition():
                self.emit(line)
            self.emit()

    def _emit_main(self):
        indent = self.session.config.indent
        self.emit("int main() {")
        startup = self.session.startup.lines
        body = self.session.main.lines
        for line in startup:
            self.emit(line)
        if startup and body:
            self.emit()
        for line in body:
            self.emit(line)
        self.emit(f"{indent}return 0;")
        self.emit("}")


def assemble(session) -> str:
    return ProgramAssembler(session).assemble()
