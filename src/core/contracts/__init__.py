"""
Contract Validation Module

Модуль для валидации JSON контрактов n-tuple входов.
"""

from .validators import (
    ContractValidator,
    NTupleInputValidator,
    SchemaLoader,
    validate_ntuple_input,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NTupleInputValidator",
    # Functions
    "validate_ntuple_input",
]
