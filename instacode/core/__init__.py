from .config import TranslatorConfig
from .diagnostics import (
    DataFileRequiredError,
    Diagnostic,
    DiagnosticEngine,
    DiagnosticKind,
    InstaCodeError,
)
from .session import TranslationSession

__all__ = [
    'TranslatorConfig',
    'DataFileRequiredError',
    'Diagnostic',
    'DiagnosticEngine',
    'DiagnosticKind',
    'InstaCodeError',
    'TranslationSession',
]
