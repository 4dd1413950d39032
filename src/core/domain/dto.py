"""
DTO — входы n-tuple генератора

Каждый предикат фичи превращается в NTupleInput: по одному DTO на условие.
DTO сериализуются в JSON контракт ntuple_input (contracts/schema/ntuple_input.json).

Бесконечности в контракте записываются строками "Inf" / "-Inf", так как
JSON не имеет представления для них.
"""

import math
from enum import Enum
from typing import Any, Dict, Union

from pydantic import BaseModel, Field

from src.core.domain.ir import IntervalExpression
from src.core.math.intervals import NEG_INF_TOKEN, POS_INF_TOKEN, Range
from src.core.math.range_set import RangeSet


# =============================================================================
# ENUMS
# =============================================================================


class BoolExpression(str, Enum):
    """Ожидаемое значение bool переменной"""

    IS_TRUE = "is_true"
    IS_FALSE = "is_false"


# =============================================================================
# SERIALIZATION HELPERS
# =============================================================================


def _endpoint_to_contract(value: float) -> Union[float, str]:
    if value == math.inf:
        return POS_INF_TOKEN
    if value == -math.inf:
        return NEG_INF_TOKEN
    return value


def range_to_contract(range_: Range) -> Dict[str, Any]:
    """Range → dict контракта"""
    return {
        "lo_boundary": range_.lo_boundary.value,
        "lo": _endpoint_to_contract(range_.lo),
        "hi": _endpoint_to_contract(range_.hi),
        "hi_boundary": range_.hi_boundary.value,
    }


# =============================================================================
# DTO MODELS
# =============================================================================


class BoolDTO(BaseModel):
    """Вход для bool переменной"""

    expression: BoolExpression = Field(..., description="IS_TRUE / IS_FALSE")
    bool_val: bool = Field(..., description="Ожидаемое значение")
    is_constant: bool = Field(False, description="Значение фиксировано генератором")

    model_config = {"frozen": True}

    def to_contract(self) -> Dict[str, Any]:
        return {
            "kind": "bool",
            "expression": self.expression.value,
            "bool_val": self.bool_val,
            "is_constant": self.is_constant,
        }


class IntervalDTO(BaseModel):
    """
    Вход для числовой переменной.

    precision берётся из объявленного типа переменной и должен быть > 0.
    """

    expression: IntervalExpression = Field(..., description="EQUAL / NOT_EQUAL")
    interval: RangeSet = Field(..., description="Множество интервалов")
    precision: float = Field(..., gt=0, description="Шаг значений типа переменной")
    is_constant: bool = Field(False, description="Значение фиксировано генератором")

    model_config = {"frozen": True}

    def to_contract(self) -> Dict[str, Any]:
        return {
            "kind": "interval",
            "expression": self.expression.value,
            "interval": [range_to_contract(r) for r in self.interval],
            "precision": self.precision,
            "is_constant": self.is_constant,
        }


Input = Union[BoolDTO, IntervalDTO]


class NTupleInput(BaseModel):
    """
    Вход генератора для одного предиката.

    inputs: пары (имя переменной, DTO) в порядке условий предиката.
    """

    inputs: tuple[tuple[str, Input], ...] = Field(default=(), description="Пары (переменная, DTO)")

    model_config = {"frozen": True}

    def variables(self) -> list[str]:
        return [name for name, _ in self.inputs]

    def to_contract(self) -> Dict[str, Any]:
        return {
            "inputs": [
                {"variable": name, "input": dto.to_contract()} for name, dto in self.inputs
            ]
        }
