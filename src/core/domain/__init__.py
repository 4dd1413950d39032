"""
Domain models and value objects.

IR фичи (переменные, условия, предикаты) и DTO для n-tuple генератора.
"""

from src.core.domain.dto import (
    BoolDTO,
    BoolExpression,
    Input,
    IntervalDTO,
    NTupleInput,
    range_to_contract,
)
from src.core.domain.ir import (
    DEFAULT_PRECISION_CONFIG,
    BoolCondition,
    Condition,
    Feature,
    IntervalCondition,
    IntervalExpression,
    Predicate,
    PrecisionConfig,
    Variable,
    VarType,
)

__all__ = [
    # IR
    "DEFAULT_PRECISION_CONFIG",
    "PrecisionConfig",
    "VarType",
    "Variable",
    "IntervalExpression",
    "BoolCondition",
    "IntervalCondition",
    "Condition",
    "Predicate",
    "Feature",
    # DTO
    "BoolExpression",
    "BoolDTO",
    "IntervalDTO",
    "Input",
    "NTupleInput",
    "range_to_contract",
]
