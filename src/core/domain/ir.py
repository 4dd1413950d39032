"""
IR — промежуточное представление фичи для генератора тестов

Фича (Feature) состоит из объявленных переменных и списка предикатов.
Каждый предикат есть набор условий над переменными:
- BoolCondition: "flag is true"
- IntervalCondition: "x is in [5, 10)" / "x is not in [5, 10)"

Immutable Pydantic модели (frozen=True). Интервальная алгебра не зависит
от типа переменной; точность (precision) берётся из объявленного типа при
конвертации в n-tuple DTO.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from src.core.math.range_set import RangeSet


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PrecisionConfig:
    """
    Точность числовых типов.

    precision — минимальный шаг между двумя различимыми значениями типа.
    """

    int_precision: float = 1.0
    float_precision: float = 0.01


DEFAULT_PRECISION_CONFIG = PrecisionConfig()


# =============================================================================
# ENUMS
# =============================================================================


class VarType(str, Enum):
    """Объявленный тип переменной"""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"

    def get_precision(self, config: Optional[PrecisionConfig] = None) -> Optional[float]:
        """
        Точность типа.

        Returns:
            precision для числовых типов, None для BOOL
        """
        config = config or DEFAULT_PRECISION_CONFIG
        if self is VarType.INT:
            return config.int_precision
        if self is VarType.FLOAT:
            return config.float_precision
        return None


class IntervalExpression(str, Enum):
    """EQUAL: значение лежит в множестве; NOT_EQUAL: значение лежит вне его"""

    EQUAL = "equal"
    NOT_EQUAL = "not_equal"


# =============================================================================
# MODELS
# =============================================================================


class Variable(BaseModel):
    """Объявленная переменная фичи"""

    var_name: str = Field(..., min_length=1, description="Имя переменной")
    var_type: VarType = Field(..., description="Объявленный тип")

    model_config = {"frozen": True}


class BoolCondition(BaseModel):
    """Условие над bool переменной"""

    variable: str = Field(..., min_length=1, description="Имя переменной")
    should_equal_to: bool = Field(..., description="Ожидаемое значение")

    model_config = {"frozen": True}

    def get_variable(self) -> str:
        return self.variable


class IntervalCondition(BaseModel):
    """Условие принадлежности числовой переменной множеству интервалов"""

    variable: str = Field(..., min_length=1, description="Имя переменной")
    expression: IntervalExpression = Field(..., description="EQUAL / NOT_EQUAL")
    interval: RangeSet = Field(..., description="Множество интервалов из условия")

    model_config = {"frozen": True}

    def get_variable(self) -> str:
        return self.variable

    def effective_interval(self) -> RangeSet:
        """
        Множество, в котором должно лежать значение.

        Для NOT_EQUAL — дополнение interval над расширенной прямой.
        """
        if self.expression is IntervalExpression.NOT_EQUAL:
            return self.interval.inverse()
        return self.interval


Condition = Union[BoolCondition, IntervalCondition]


class Predicate(BaseModel):
    """Конъюнкция условий; порождает один n-tuple вход"""

    conditions: tuple[Condition, ...] = Field(default=(), description="Условия предиката")

    model_config = {"frozen": True}


class Feature(BaseModel):
    """
    Фича: переменные и предикаты.

    Имена переменных уникальны.
    """

    variables: tuple[Variable, ...] = Field(default=(), description="Объявленные переменные")
    predicates: tuple[Predicate, ...] = Field(default=(), description="Предикаты")

    model_config = {"frozen": True}

    @field_validator("variables")
    @classmethod
    def validate_unique_names(cls, v: tuple[Variable, ...]) -> tuple[Variable, ...]:
        """Проверка уникальности имён переменных"""
        seen: set[str] = set()
        for variable in v:
            if variable.var_name in seen:
                raise ValueError(f"Duplicate variable name: {variable.var_name}")
            seen.add(variable.var_name)
        return v

    def find_variable(self, name: str) -> Optional[Variable]:
        for variable in self.variables:
            if variable.var_name == name:
                return variable
        return None
