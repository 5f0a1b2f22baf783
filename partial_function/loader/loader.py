"""
Definition Loader — построение функции из декларативного описания

Pipeline:
1. JSON Schema контракт (piecewise_definition.json), если включён
2. Pydantic модель PiecewiseDefinition
3. resolve() каждого FunctionDescriptor → callable
4. insert() каждого сегмента в порядке описания, затем build()

Core получает только две точки входа: insert на каждый сегмент и build.
Пересечения сегментов в описании — contract violation core
(SegmentOverlapViolation / DuplicateLowerBoundViolation).

Для непроверенных источников check_definition() возвращает все проблемы
списком строк, ничего не бросая.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from partial_function.core.contracts import PiecewiseDefinitionValidator
from partial_function.core.domain.errors import DefinitionError
from partial_function.core.piecewise import (
    LowerPartialFunction,
    LowerPartialFunctionBuilder,
    PartialFunction,
    PartialFunctionBuilder,
)
from partial_function.loader.models import PiecewiseDefinition, PiecewiseMode

logger = logging.getLogger(__name__)

BuiltFunction = Union[PartialFunction, LowerPartialFunction]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LoaderConfig:
    """
    Конфигурация загрузчика.

    validate_schema: проверять JSON Schema контракт до pydantic модели
    expected_mode: если задан, описание обязано объявлять этот режим
    """
    validate_schema: bool = True
    expected_mode: Optional[PiecewiseMode] = None


DEFAULT_LOADER_CONFIG = LoaderConfig()


# =============================================================================
# PARSE
# =============================================================================


def _pydantic_messages(error: ValidationError) -> list[str]:
    return [
        f"{'/'.join(str(p) for p in e['loc']) or '<root>'}: {e['msg']}"
        for e in error.errors()
    ]


def _collect_definition_errors(data: Dict[str, Any], config: LoaderConfig) -> tuple[Optional[PiecewiseDefinition], list[str]]:
    """Schema + model + mode проверки. Возвращает (definition или None, ошибки)."""
    if config.validate_schema:
        schema_errors = PiecewiseDefinitionValidator().error_messages(data)
        if schema_errors:
            return None, schema_errors

    try:
        definition = PiecewiseDefinition.model_validate(data)
    except ValidationError as e:
        return None, _pydantic_messages(e)

    if config.expected_mode is not None and definition.mode != config.expected_mode:
        return None, [
            f"mode: expected {config.expected_mode.value}, got {definition.mode.value}"
        ]

    return definition, []


def parse_definition(data: Dict[str, Any], config: LoaderConfig = DEFAULT_LOADER_CONFIG) -> PiecewiseDefinition:
    """
    Валидация и разбор декларативного описания.

    Args:
        data: JSON-совместимый dict
        config: Конфигурация загрузчика

    Returns:
        PiecewiseDefinition

    Raises:
        DefinitionError: Описание не прошло schema/model/mode проверки
            (все найденные ошибки в DefinitionError.errors)
    """
    definition, errors = _collect_definition_errors(data, config)
    if definition is None:
        raise DefinitionError(
            f"Invalid piecewise definition ({len(errors)} error(s)): {errors[0]}",
            errors,
        )
    return definition


# =============================================================================
# BUILD
# =============================================================================


def make_builder(definition: PiecewiseDefinition) -> Union[PartialFunctionBuilder, LowerPartialFunctionBuilder]:
    """Builder, соответствующий режиму описания."""
    if definition.mode == PiecewiseMode.DUAL_BOUNDED:
        return PartialFunction.builder()
    return LowerPartialFunction.builder()


def build_partial_function(definition: PiecewiseDefinition) -> BuiltFunction:
    """
    Построение immutable функции из разобранного описания.

    Returns:
        PartialFunction (dual_bounded) или LowerPartialFunction (lower_bounded)

    Raises:
        SegmentOverlapViolation: пересечение сегментов (dual_bounded)
        DuplicateLowerBoundViolation: дубликат lower (lower_bounded)
        InvalidBoundsViolation: lower > higher
    """
    builder = make_builder(definition)

    for segment in definition.segments:
        func = segment.function.resolve()
        if definition.mode == PiecewiseMode.DUAL_BOUNDED:
            builder.insert(segment.lower, segment.higher, func)
        else:
            builder.insert(segment.lower, func)

    logger.debug(
        "Loaded %s definition %r with %d segment(s)",
        definition.mode.value,
        definition.name,
        len(definition.segments),
    )
    return builder.build()


def load_partial_function(data: Dict[str, Any], config: LoaderConfig = DEFAULT_LOADER_CONFIG) -> BuiltFunction:
    """
    Полный pipeline: валидация → модель → build.

    Raises:
        DefinitionError: описание невалидно
        ContractViolation: сегменты описания пересекаются
    """
    return build_partial_function(parse_definition(data, config))


def load_partial_function_file(path: Union[str, Path], config: LoaderConfig = DEFAULT_LOADER_CONFIG) -> BuiltFunction:
    """
    Загрузка описания из JSON файла.

    Raises:
        FileNotFoundError: файл не найден
        DefinitionError: файл не UTF-8 JSON или описание невалидно
        ContractViolation: сегменты описания пересекаются
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DefinitionError(f"{path}: not a valid JSON document: {e}", [str(e)])

    logger.debug("Loading piecewise definition from %s", path)
    return load_partial_function(data, config)


# =============================================================================
# NON-FATAL CHECK
# =============================================================================


def check_definition(data: Dict[str, Any], config: LoaderConfig = DEFAULT_LOADER_CONFIG) -> list[str]:
    """
    Не-фатальная проверка описания из непроверенного источника.

    Проверяет schema, модель, режим и каждую вставку через try_insert
    (без построения функции).

    Returns:
        Список ошибок; пустой список — описание можно загрузить
    """
    definition, errors = _collect_definition_errors(data, config)
    if definition is None:
        return errors

    builder = make_builder(definition)
    for i, segment in enumerate(definition.segments):
        func = segment.function.resolve()
        if definition.mode == PiecewiseMode.DUAL_BOUNDED:
            check = builder.try_insert(segment.lower, segment.higher, func)
        else:
            check = builder.try_insert(segment.lower, func)

        if not check.allowed:
            message = f"segments/{i}: {check.reason}"
            if check.conflict is not None:
                message += f" (conflicts with segment at lower={check.conflict.lower!r})"
            errors.append(message)

    return errors
