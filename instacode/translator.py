#!/usr/bin/env python3
"""
Public entry points: ``convert`` for in-memory scripts and ``convert_file``
for scripts on disk.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .core.assembler import assemble
from .core.config import TranslatorConfig
from .core.diagnostics import DataFileRequiredError, Diagnostic
from .core.dispatcher import InstructionDispatcher
from .core.instruction import read_instructions
from .core.session import TranslationSession


@dataclass
class TranslationInput:
    instructions: str
    data_file_contents: str = ""
    data_file_name: str = ""


@dataclass
class TranslationOutput:
    code: str
    issues: List[str] = field(default_factory=list)
    success: bool = True
    diagnostics: List[Diagnostic] = field(default_factory=list)


class Translator:
    def __init__(self, config: Optional[TranslatorConfig] = None):
        self.config = config or TranslatorConfig()
        self.dispatcher = InstructionDispatcher()
        self.logger = logging.getLogger(__name__)

    def translate(self, request: TranslationInput) -> TranslationOutput:
        session = TranslationSession(request.data_file_contents, request.data_file_name, self.config)
        instructions = read_instructions(request.instructions or "")
        self.logger.info(f"Traduciendo {len(instructions)} instrucciones")

        try:
            for instruction in instructions:
                session.instruction = instruction
                session.close_stale_blocks(instruction)
                if not self.dispatcher.dispatch(session, instruction):
                    self.logger.debug(f"línea {instruction.number} sin reconocer")
                    session.unrecognized(f"Instrucción no reconocida: {instruction.raw.strip()}")
        except DataFileRequiredError as e:
            self.logger.info(f"Traducción abortada en la línea {e.line}: falta el archivo de datos")
            return TranslationOutput(code="", issues=[e.message], success=False)

        self._finish(session)
        code = assemble(session)
        diagnostics = session.diagnostics
        success = not diagnostics.has_failures()
        if self.config.strict and diagnostics.has_warnings():
            success = False

        self.logger.info(f"Traducción terminada: {diagnostics.failure_count} errores, "
                         f"{diagnostics.warning_count} advertencias")
        return TranslationOutput(
            code=code,
            issues=diagnostics.messages(),
            success=success,
            diagnostics=list(diagnostics.diagnostics),
        )

    def _finish(self, session: TranslationSession):
        if session.function is not None:
            session.warning(
                f"La función '{session.function.name}' no tenía 'retornar'; se cerró automáticamente."
            )
            session.end_function()
        session.close_all_blocks()


def convert(request: TranslationInput, config: Optional[TranslatorConfig] = None) -> TranslationOutput:
    """Translate one script into a C++ program."""
    return Translator(config).translate(request)


def convert_file(instructions_path: str, data_path: Optional[str] = None,
                 config: Optional[TranslatorConfig] = None) -> TranslationOutput:
    """Read the script (and the optional data file) from disk and translate it.

    The data file keeps its own name so the generated program writes it back
    under the same name. Raises ``OSError`` when a file cannot be read.
    """
    instructions = Path(instructions_path).read_text(encoding='utf-8')
    data_contents = ""
    data_name = ""
    if data_path:
        data_file = Path(data_path)
        data_contents = data_file.read_text(encoding='utf-8')
        data_name = data_file.name
    return convert(TranslationInput(instructions, data_contents, data_name), config)
