"""InstaCode: turns Spanish pseudo-instructions into a C++ program."""

from .core.config import TranslatorConfig
from .core.diagnostics import DataFileRequiredError, InstaCodeError
from .translator import TranslationInput, TranslationOutput, Translator, convert, convert_file

__version__ = "0.1.0"

__all__ = [
    'TranslatorConfig',
    'DataFileRequiredError',
    'InstaCodeError',
    'TranslationInput',
    'TranslationOutput',
    'Translator',
    'convert',
    'convert_file',
]
