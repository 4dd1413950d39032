"""
Tests for JSON Schema Contract Validators

Тестирование валидатора контракта ntuple_input:
- Валидность самой схемы
- Валидация правильных данных (в т.ч. из NTupleInput.to_contract())
- Детекция нарушений required полей
- Детекция нарушений типов и enum
- Бесконечности как строки "Inf" / "-Inf"
"""

import copy
import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    NTupleInputValidator,
    SchemaLoader,
    validate_ntuple_input,
)
from src.core.domain import (
    BoolCondition,
    Feature,
    IntervalCondition,
    IntervalExpression,
    Predicate,
    Variable,
    VarType,
)
from src.parser import ir_to_ntuple, parse_range_set


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_ntuple_input():
    """Валидный ntuple_input для тестирования."""
    return {
        "inputs": [
            {
                "variable": "x",
                "input": {
                    "kind": "interval",
                    "expression": "not_equal",
                    "interval": [
                        {"lo_boundary": "open", "lo": "-Inf", "hi": 10, "hi_boundary": "open"},
                        {"lo_boundary": "closed", "lo": 20, "hi": 30.5, "hi_boundary": "open"},
                    ],
                    "precision": 1,
                    "is_constant": False,
                },
            },
            {
                "variable": "flag",
                "input": {
                    "kind": "bool",
                    "expression": "is_true",
                    "bool_val": True,
                    "is_constant": False,
                },
            },
        ]
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_schema_is_valid_json_schema(self) -> None:
        schema = SchemaLoader().load_schema("ntuple_input")
        Draft202012Validator.check_schema(schema)

    def test_load_schema_is_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("ntuple_input") is loader.load_schema("ntuple_input")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# NTUPLE INPUT CONTRACT
# =============================================================================


class TestNTupleInputContract:
    """Тесты валидации ntuple_input"""

    def test_valid_data(self, valid_ntuple_input) -> None:
        validate_ntuple_input(valid_ntuple_input)
        assert NTupleInputValidator().is_valid(valid_ntuple_input)

    def test_empty_inputs_valid(self) -> None:
        validate_ntuple_input({"inputs": []})

    def test_missing_inputs(self) -> None:
        with pytest.raises(ValidationError):
            validate_ntuple_input({})

    def test_missing_precision(self, valid_ntuple_input) -> None:
        data = copy.deepcopy(valid_ntuple_input)
        del data["inputs"][0]["input"]["precision"]
        with pytest.raises(ValidationError):
            validate_ntuple_input(data)

    def test_non_positive_precision(self, valid_ntuple_input) -> None:
        data = copy.deepcopy(valid_ntuple_input)
        data["inputs"][0]["input"]["precision"] = 0
        assert not NTupleInputValidator().is_valid(data)

    def test_invalid_boundary(self, valid_ntuple_input) -> None:
        data = copy.deepcopy(valid_ntuple_input)
        data["inputs"][0]["input"]["interval"][0]["lo_boundary"] = "half-open"
        with pytest.raises(ValidationError):
            validate_ntuple_input(data)

    def test_invalid_infinity_token(self, valid_ntuple_input) -> None:
        data = copy.deepcopy(valid_ntuple_input)
        data["inputs"][0]["input"]["interval"][0]["lo"] = "minus infinity"
        with pytest.raises(ValidationError):
            validate_ntuple_input(data)

    def test_invalid_bool_expression(self, valid_ntuple_input) -> None:
        data = copy.deepcopy(valid_ntuple_input)
        data["inputs"][1]["input"]["expression"] = "equal"
        with pytest.raises(ValidationError):
            validate_ntuple_input(data)

    def test_iter_errors_reports_all(self, valid_ntuple_input) -> None:
        data = copy.deepcopy(valid_ntuple_input)
        data["inputs"][0]["variable"] = ""
        data["inputs"][1]["input"]["bool_val"] = "yes"
        errors = list(NTupleInputValidator().iter_errors(data))
        assert len(errors) >= 2


# =============================================================================
# INTEGRATION WITH DTO MODELS
# =============================================================================


def test_converted_feature_matches_contract() -> None:
    """Все n-tuple входы из ir_to_ntuple соответствуют контракту"""
    feature = Feature(
        variables=(
            Variable(var_name="x", var_type=VarType.INT),
            Variable(var_name="flag", var_type=VarType.BOOL),
        ),
        predicates=(
            Predicate(
                conditions=(
                    IntervalCondition(
                        variable="x",
                        expression=IntervalExpression.EQUAL,
                        interval=parse_range_set("[-42, 3) (3, 67) (700, Inf)"),
                    ),
                    BoolCondition(variable="flag", should_equal_to=False),
                )
            ),
            Predicate(
                conditions=(
                    IntervalCondition(
                        variable="x",
                        expression=IntervalExpression.NOT_EQUAL,
                        interval=parse_range_set("(-Inf, Inf)"),
                    ),
                )
            ),
        ),
    )

    validator = NTupleInputValidator()
    for ntuple in ir_to_ntuple(feature):
        validator.validate(ntuple.to_contract())
