"""Parser — текстовая нотация интервалов и конвертация IR → n-tuple входы."""

from .ir_to_ntuple import (
    ConversionError,
    MissingPrecisionError,
    UndefinedVariableError,
    convert_bool_dto,
    convert_condition,
    convert_interval_dto,
    convert_predicate_to_ntuple,
    ir_to_ntuple,
)
from .notation import (
    DEFAULT_NOTATION_CONFIG,
    NotationConfig,
    NotationError,
    format_range,
    format_range_set,
    parse_range,
    parse_range_set,
)

__all__ = [
    # Notation
    "DEFAULT_NOTATION_CONFIG",
    "NotationConfig",
    "NotationError",
    "parse_range",
    "parse_range_set",
    "format_range",
    "format_range_set",
    # IR → n-tuple
    "ConversionError",
    "UndefinedVariableError",
    "MissingPrecisionError",
    "convert_bool_dto",
    "convert_interval_dto",
    "convert_condition",
    "convert_predicate_to_ntuple",
    "ir_to_ntuple",
]
