"""
Definition Models — Pydantic модели декларативных описаний

Immutable Pydantic модели, соответствующие схеме piecewise_definition:
- FunctionDescriptor: именованная стандартная функция + коэффициенты
  (discriminated union по полю kind)
- SegmentSpec: bounds + FunctionDescriptor
- PiecewiseDefinition: режим + список сегментов

Descriptor не является исполняемым кодом: resolve() превращает его в
унарный callable до вставки в Builder.
"""

from enum import Enum
from typing import Annotated, Callable, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from partial_function.core.math.standard_functions import make_standard_function


# =============================================================================
# ENUMS
# =============================================================================


class PiecewiseMode(str, Enum):
    """Режим доступа кусочно-заданной функции"""

    DUAL_BOUNDED = "dual_bounded"
    LOWER_BOUNDED = "lower_bounded"


# =============================================================================
# FUNCTION DESCRIPTORS
# =============================================================================


class _FunctionDescriptorBase(BaseModel):
    """Общая часть descriptors: resolve() через реестр стандартных функций."""

    model_config = {"frozen": True, "extra": "forbid"}

    def resolve(self) -> Callable[[float], float]:
        """
        Превращение описания в унарный callable.

        Коэффициенты, не заданные в описании (None), берутся по умолчанию
        из соответствующей стандартной функции.
        """
        coefficients = self.model_dump(exclude={"kind"}, exclude_none=True)
        return make_standard_function(self.kind, **coefficients)


class ConstantDescriptor(_FunctionDescriptorBase):
    """f(x) = value"""

    kind: Literal["constant"] = "constant"
    value: float = Field(..., allow_inf_nan=False, description="Значение константы")


class AffineDescriptor(_FunctionDescriptorBase):
    """f(x) = slope * x + intercept"""

    kind: Literal["affine"] = "affine"
    slope: float = Field(..., allow_inf_nan=False, description="Наклон")
    intercept: float = Field(0.0, allow_inf_nan=False, description="Сдвиг по оси значений")


class LogarithmicDescriptor(_FunctionDescriptorBase):
    """f(x) = scale * log_base(x) + offset"""

    kind: Literal["logarithmic"] = "logarithmic"
    scale: float = Field(1.0, allow_inf_nan=False, description="Множитель логарифма")
    offset: float = Field(0.0, allow_inf_nan=False, description="Сдвиг по оси значений")
    base: Optional[float] = Field(None, gt=0, allow_inf_nan=False, description="Основание (None = e)")

    @field_validator("base")
    @classmethod
    def validate_base(cls, v: Optional[float]) -> Optional[float]:
        """Основание 1 вырождено"""
        if v is not None and v == 1.0:
            raise ValueError("base must differ from 1")
        return v


class ExponentialDescriptor(_FunctionDescriptorBase):
    """f(x) = scale * exp(rate * x) + offset"""

    kind: Literal["exponential"] = "exponential"
    scale: float = Field(1.0, allow_inf_nan=False, description="Множитель экспоненты")
    rate: float = Field(1.0, allow_inf_nan=False, description="Скорость роста")
    offset: float = Field(0.0, allow_inf_nan=False, description="Сдвиг по оси значений")


class InverseDescriptor(_FunctionDescriptorBase):
    """f(x) = scale / (x - shift) + offset"""

    kind: Literal["inverse"] = "inverse"
    scale: float = Field(1.0, allow_inf_nan=False, description="Числитель")
    shift: float = Field(0.0, allow_inf_nan=False, description="Положение полюса")
    offset: float = Field(0.0, allow_inf_nan=False, description="Сдвиг по оси значений")


class PolynomialDescriptor(_FunctionDescriptorBase):
    """f(x) = c0 + c1*x + c2*x^2 + ..."""

    kind: Literal["polynomial"] = "polynomial"
    coefficients: list[Annotated[float, Field(allow_inf_nan=False)]] = Field(
        ..., min_length=1, description="Коэффициенты по возрастанию степени"
    )


FunctionDescriptor = Annotated[
    Union[
        ConstantDescriptor,
        AffineDescriptor,
        LogarithmicDescriptor,
        ExponentialDescriptor,
        InverseDescriptor,
        PolynomialDescriptor,
    ],
    Field(discriminator="kind"),
]


# =============================================================================
# SEGMENTS
# =============================================================================


class SegmentSpec(BaseModel):
    """
    Описание одного сегмента.

    higher обязателен для dual_bounded и запрещён для lower_bounded
    (проверяется в PiecewiseDefinition).
    """

    lower: float = Field(..., allow_inf_nan=False, description="Нижняя граница")
    higher: Optional[float] = Field(None, allow_inf_nan=False, description="Верхняя граница")
    function: FunctionDescriptor = Field(..., description="Функция сегмента")

    model_config = {"frozen": True, "extra": "forbid"}


# =============================================================================
# DEFINITION
# =============================================================================


class PiecewiseDefinition(BaseModel):
    """
    Декларативное описание кусочно-заданной функции.

    Порядок сегментов произвольный: сортировка выполняется при build().
    """

    schema_version: Literal["1"] = Field("1", description="Версия контракта")
    name: Optional[str] = Field(None, min_length=1, description="Имя функции")
    mode: PiecewiseMode = Field(..., description="Режим (dual_bounded/lower_bounded)")
    segments: list[SegmentSpec] = Field(default_factory=list, description="Сегменты")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("segments")
    @classmethod
    def validate_segments_match_mode(cls, v: list[SegmentSpec], info) -> list[SegmentSpec]:
        """Проверка, что наличие higher согласовано с mode"""
        mode = info.data.get("mode")
        for i, segment in enumerate(v):
            if mode == PiecewiseMode.DUAL_BOUNDED and segment.higher is None:
                raise ValueError(f"segments[{i}]: higher is required in dual_bounded mode")
            if mode == PiecewiseMode.LOWER_BOUNDED and segment.higher is not None:
                raise ValueError(f"segments[{i}]: higher is not allowed in lower_bounded mode")
        return v
