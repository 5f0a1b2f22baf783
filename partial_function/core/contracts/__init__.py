"""
Contract Validation Module

Модуль для валидации JSON контрактов декларативных описаний.
"""

from .validators import (
    ContractValidator,
    PiecewiseDefinitionValidator,
    SchemaLoader,
    format_error_path,
    validate_piecewise_definition,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PiecewiseDefinitionValidator",
    # Functions
    "format_error_path",
    "validate_piecewise_definition",
]
