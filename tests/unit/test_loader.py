"""
Тесты для Definition Loader

Проверяет pipeline: schema → модель → resolve → insert/build.
- Построение обоих режимов
- Пересечения в описании → contract violation core
- DefinitionError со списком ошибок
- LoaderConfig (validate_schema, expected_mode)
- Загрузка из файла
- Не-фатальная check_definition
"""

import json

import pytest

from partial_function import (
    DefinitionError,
    DuplicateLowerBoundViolation,
    FunctionDomainViolation,
    LoaderConfig,
    LowerPartialFunction,
    PartialFunction,
    SegmentOverlapViolation,
    check_definition,
    load_partial_function,
    load_partial_function_file,
)
from partial_function.loader import PiecewiseMode, build_partial_function, parse_definition


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def dual_data():
    """[0, 1): x; [1, 2): 5.0 — сегменты в обратном порядке"""
    return {
        "name": "scenario",
        "mode": "dual_bounded",
        "segments": [
            {"lower": 1.0, "higher": 2.0, "function": {"kind": "constant", "value": 5.0}},
            {"lower": 0.0, "higher": 1.0, "function": {"kind": "affine", "slope": 1.0}},
        ],
    }


@pytest.fixture
def lower_data():
    return {
        "mode": "lower_bounded",
        "segments": [
            {"lower": 1.0, "function": {"kind": "constant", "value": 2}},
            {"lower": 0.0, "function": {"kind": "constant", "value": 1}},
        ],
    }


@pytest.fixture
def overlapping_data():
    return {
        "mode": "dual_bounded",
        "segments": [
            {"lower": 0.0, "higher": 1.0, "function": {"kind": "constant", "value": 1}},
            {"lower": 0.5, "higher": 2.0, "function": {"kind": "constant", "value": 2}},
            {"lower": 2.0, "higher": 3.0, "function": {"kind": "constant", "value": 3}},
        ],
    }


# =============================================================================
# ТЕСТЫ: построение
# =============================================================================


class TestLoadPartialFunction:
    """load_partial_function для обоих режимов"""

    def test_dual_bounded(self, dual_data):
        f = load_partial_function(dual_data)

        assert isinstance(f, PartialFunction)
        assert f.eval(0.5) == 0.5
        assert f.eval(1.0) == 5.0
        assert f.eval(1.999) == 5.0
        assert f.eval(2.0) == 5.0
        assert f.eval(2.1) is None

    def test_lower_bounded(self, lower_data):
        f = load_partial_function(lower_data)

        assert isinstance(f, LowerPartialFunction)
        assert f.eval(-1.0) is None
        assert f.eval(0.0) == 1.0
        assert f.eval(0.5) == 1.0
        assert f.eval(1.0) == 2.0
        assert f.eval(1000.0) == 2.0

    def test_overlap_is_contract_violation(self, overlapping_data):
        with pytest.raises(SegmentOverlapViolation):
            load_partial_function(overlapping_data)

    def test_duplicate_lower(self, lower_data):
        lower_data["segments"].append({"lower": 0.0, "function": {"kind": "constant", "value": 9}})
        with pytest.raises(DuplicateLowerBoundViolation):
            load_partial_function(lower_data)

    def test_standard_function_domain_error_at_eval(self):
        """Ошибка стандартной функции пропагирует из eval (не None)"""
        f = load_partial_function(
            {
                "mode": "dual_bounded",
                "segments": [
                    {"lower": -1.0, "higher": 1.0, "function": {"kind": "logarithmic"}},
                ],
            }
        )
        assert f.eval(1.0) == 0.0
        with pytest.raises(FunctionDomainViolation):
            f.eval(0.0)

    def test_build_from_parsed_definition(self, dual_data):
        definition = parse_definition(dual_data)
        f = build_partial_function(definition)
        assert len(f) == 2
        assert [s.lower for s in f.segments] == [0.0, 1.0]


# =============================================================================
# ТЕСТЫ: ошибки описания
# =============================================================================


class TestDefinitionErrors:
    """DefinitionError: schema / model / mode"""

    def test_schema_error(self, dual_data):
        del dual_data["mode"]
        with pytest.raises(DefinitionError) as exc_info:
            load_partial_function(dual_data)
        assert any("'mode' is a required property" in e for e in exc_info.value.errors)

    def test_definition_error_is_value_error(self, dual_data):
        dual_data["segments"][0]["function"] = {"kind": "sine"}
        with pytest.raises(ValueError):
            load_partial_function(dual_data)

    def test_model_error_without_schema(self, dual_data):
        """Без schema ошибки ловит pydantic модель"""
        del dual_data["segments"][0]["higher"]
        config = LoaderConfig(validate_schema=False)

        with pytest.raises(DefinitionError) as exc_info:
            load_partial_function(dual_data, config)
        assert any("higher is required" in e for e in exc_info.value.errors)

    def test_unknown_schema_version_without_schema(self, dual_data):
        """Модель сама держит schema_version == "1", даже без JSON Schema"""
        dual_data["schema_version"] = "2"
        config = LoaderConfig(validate_schema=False)

        with pytest.raises(DefinitionError) as exc_info:
            load_partial_function(dual_data, config)
        assert any(e.startswith("schema_version:") for e in exc_info.value.errors)

    def test_expected_mode(self, lower_data):
        config = LoaderConfig(expected_mode=PiecewiseMode.DUAL_BOUNDED)
        with pytest.raises(DefinitionError, match="expected dual_bounded, got lower_bounded"):
            load_partial_function(lower_data, config)

    def test_expected_mode_matches(self, lower_data):
        config = LoaderConfig(expected_mode=PiecewiseMode.LOWER_BOUNDED)
        assert isinstance(load_partial_function(lower_data, config), LowerPartialFunction)


# =============================================================================
# ТЕСТЫ: файл
# =============================================================================


class TestLoadFile:
    def test_load_file(self, tmp_path, dual_data):
        path = tmp_path / "tariff.json"
        path.write_text(json.dumps(dual_data), encoding="utf-8")

        f = load_partial_function_file(path)
        assert f.eval(1.5) == 5.0

    def test_load_file_str_path(self, tmp_path, lower_data):
        path = tmp_path / "steps.json"
        path.write_text(json.dumps(lower_data), encoding="utf-8")

        assert load_partial_function_file(str(path)).eval(3.0) == 2.0

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DefinitionError, match="not a valid JSON document"):
            load_partial_function_file(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"mode": "\xff"}')

        with pytest.raises(DefinitionError, match="not a valid JSON document") as exc_info:
            load_partial_function_file(path)
        assert exc_info.value.errors

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_partial_function_file(tmp_path / "missing.json")


# =============================================================================
# ТЕСТЫ: не-фатальная проверка
# =============================================================================


class TestCheckDefinition:
    """check_definition ничего не бросает"""

    def test_valid(self, dual_data, lower_data):
        assert check_definition(dual_data) == []
        assert check_definition(lower_data) == []

    def test_reports_overlap_by_index(self, overlapping_data):
        errors = check_definition(overlapping_data)
        assert len(errors) == 1
        assert errors[0].startswith("segments/1: starts_inside")
        assert "lower=0.0" in errors[0]

    def test_reports_every_rejected_segment(self):
        data = {
            "mode": "lower_bounded",
            "segments": [
                {"lower": 0, "function": {"kind": "constant", "value": 1}},
                {"lower": 0, "function": {"kind": "constant", "value": 2}},
                {"lower": 0, "function": {"kind": "constant", "value": 3}},
            ],
        }
        errors = check_definition(data)
        assert [e.split(":")[0] for e in errors] == ["segments/1", "segments/2"]

    def test_reports_invalid_bounds(self):
        data = {
            "mode": "dual_bounded",
            "segments": [
                {"lower": 2.0, "higher": 1.0, "function": {"kind": "constant", "value": 1}},
            ],
        }
        assert check_definition(data) == ["segments/0: lower_above_higher"]

    def test_reports_schema_errors(self):
        errors = check_definition({"mode": "dual_bounded", "segments": [{"lower": "a"}]})
        assert errors
        assert all(isinstance(e, str) for e in errors)

    def test_reports_model_errors(self):
        data = {"mode": "dual_bounded", "segments": [{"lower": 0.0, "function": {"kind": "constant", "value": 1}}]}
        errors = check_definition(data, LoaderConfig(validate_schema=False))
        assert len(errors) == 1
        assert "higher is required" in errors[0]
