"""Diagnostic system for Sesters errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, TextSpan
from .errors import (
    ConfigurationError,
    ConversionError,
    CurrencyPatternError,
    EngineConfigError,
    NumberFormatConfigError,
    SestersError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "ConversionError",
    "CurrencyPatternError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EngineConfigError",
    "ErrorTemplate",
    "NumberFormatConfigError",
    "OutputFormat",
    "SestersError",
    "TextSpan",
]
