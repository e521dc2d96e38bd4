#!/usr/bin/env python3
from enum import Enum
from dataclasses import dataclass
from typing import List, Optional


class DiagnosticKind(Enum):
    UNRECOGNIZED = "unrecognized"
    MISSING_PREREQUISITE = "missing_prerequisite"
    SEMANTIC_WARNING = "semantic_warning"
    STRUCTURAL_ERROR = "structural_error"


@dataclass
class Diagnostic:
    kind: DiagnosticKind
    message: str
    line: int = 0
    fails: bool = False

    def format(self, with_location: bool = True) -> str:
        if with_location and self.line > 0:
            return f"línea {self.line}: {self.message}"
        return self.message

    def __str__(self) -> str:
        return self.message


class DiagnosticEngine:
    """Collects the per-line problems of one translation, in encounter order."""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []
        self.failure_count = 0
        self.warning_count = 0

    def report(self, diag: Diagnostic):
        self.diagnostics.append(diag)
        if diag.fails:
            self.failure_count += 1
        else:
            self.warning_count += 1

    def unrecognized(self, message: str, line: int = 0):
        self.report(Diagnostic(DiagnosticKind.UNRECOGNIZED, message, line, fails=True))

    def missing(self, message: str, line: int = 0, fails: bool = False):
        self.report(Diagnostic(DiagnosticKind.MISSING_PREREQUISITE, message, line, fails=fails))

    def warning(self, message: str, line: int = 0):
        self.report(Diagnostic(DiagnosticKind.SEMANTIC_WARNING, message, line))

    def structural(self, message: str, line: int = 0):
        self.report(Diagnostic(DiagnosticKind.STRUCTURAL_ERROR, message, line))

    def has_failures(self) -> bool:
        return self.failure_count > 0

    def has_warnings(self) -> bool:
        return self.warning_count > 0

    def messages(self) -> List[str]:
        return [d.message for d in self.diagnostics]


class InstaCodeError(Exception):
    """Base class for translation errors"""

    def __init__(self, message: str, line: int = 0, context: str = ""):
        self.message = message
        self.line = line
        self.context = context
        super().__init__(self._format_error())

    def _format_error(self) -> str:
        if self.line > 0:
            if self.context:
                return f"Error en la línea {self.line}: {self.message}\n  {self.context}"
            return f"Error en la línea {self.line}: {self.message}"
        return self.message


class DataFileRequiredError(InstaCodeError):
    """Raised when an instruction needs the auxiliary data file and none was supplied."""

    DEFAULT_MESSAGE = (
        "Error: Las instrucciones requieren un archivo de datos, pero no se ha "
        "cargado ninguno. Cargue un archivo .txt con los datos antes de convertir."
    )

    def __init__(self, line: int = 0, context: Optional[str] = None):
        super().__init__(self.DEFAULT_MESSAGE, line, context or "")
