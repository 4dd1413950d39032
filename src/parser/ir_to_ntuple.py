"""IR → n-tuple входы генератора тестов.

Каждый предикат фичи конвертируется в один NTupleInput:
- BoolCondition → BoolDTO
- IntervalCondition → IntervalDTO (precision из типа переменной)

Ошибки конвертации фатальны для фичи и пробрасываются вызывающему:
- UndefinedVariableError: условие ссылается на необъявленную переменную
- MissingPrecisionError: у типа переменной нет precision (например, BOOL)
"""

import logging
from typing import Optional, Sequence

from src.core.domain.dto import BoolDTO, BoolExpression, Input, IntervalDTO, NTupleInput
from src.core.domain.ir import (
    BoolCondition,
    Condition,
    Feature,
    IntervalCondition,
    Predicate,
    PrecisionConfig,
    Variable,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConversionError(Exception):
    """Базовая ошибка конвертации IR → n-tuple."""

    pass


class UndefinedVariableError(ConversionError):
    """Условие ссылается на переменную, которой нет среди объявленных."""

    pass


class MissingPrecisionError(ConversionError):
    """Интервальное условие над переменной, тип которой не имеет precision."""

    pass


# =============================================================================
# CONDITION CONVERTERS
# =============================================================================


def convert_bool_dto(condition: BoolCondition) -> BoolDTO:
    expression = BoolExpression.IS_TRUE if condition.should_equal_to else BoolExpression.IS_FALSE
    return BoolDTO(
        expression=expression,
        bool_val=condition.should_equal_to,
        is_constant=False,
    )


def convert_interval_dto(
    variable: Variable,
    condition: IntervalCondition,
    config: Optional[PrecisionConfig] = None,
) -> IntervalDTO:
    """
    IntervalCondition → IntervalDTO.

    Raises:
        MissingPrecisionError: если тип переменной не имеет precision
    """
    precision = variable.var_type.get_precision(config)
    if precision is None:
        raise MissingPrecisionError(
            f"Type error: variable '{variable.var_name}' of type "
            f"'{variable.var_type.value}' has no precision for interval condition"
        )

    return IntervalDTO(
        expression=condition.expression,
        interval=condition.interval,
        precision=precision,
        is_constant=False,
    )


def convert_condition(
    variable: Variable,
    condition: Condition,
    config: Optional[PrecisionConfig] = None,
) -> Input:
    if isinstance(condition, BoolCondition):
        return convert_bool_dto(condition)
    return convert_interval_dto(variable, condition, config)


# =============================================================================
# PREDICATE / FEATURE
# =============================================================================


def convert_predicate_to_ntuple(
    variables: Sequence[Variable],
    predicate: Predicate,
    config: Optional[PrecisionConfig] = None,
) -> NTupleInput:
    """
    Предикат → NTupleInput, сохраняя порядок условий.

    Raises:
        UndefinedVariableError: если условие ссылается на необъявленную переменную
        MissingPrecisionError: см. convert_interval_dto
    """
    by_name = {variable.var_name: variable for variable in variables}
    inputs = []

    for condition in predicate.conditions:
        name = condition.get_variable()
        variable = by_name.get(name)
        if variable is None:
            raise UndefinedVariableError(f"Undefined variable: {name}")
        inputs.append((variable.var_name, convert_condition(variable, condition, config)))

    return NTupleInput(inputs=tuple(inputs))


def ir_to_ntuple(feature: Feature, config: Optional[PrecisionConfig] = None) -> list[NTupleInput]:
    """
    Фича → список NTupleInput, по одному на предикат, в исходном порядке.
    """
    result = [
        convert_predicate_to_ntuple(feature.variables, predicate, config)
        for predicate in feature.predicates
    ]
    logger.debug(
        "Converted %d predicate(s) over %d variable(s) into n-tuple inputs",
        len(result),
        len(feature.variables),
    )
    return result
