"""
CalculatorConfig — Конфигурация арифметического модуля

Immutable Pydantic модель, задающая политики арифметического модуля:
- Политика переполнения целых (неограниченная точность / 32-bit wraparound)
- Политика деления на ноль (sentinel + диагностика / исключение)
- Sentinel-значение и текст диагностики для деления на ноль

Конфигурация по умолчанию воспроизводит поведение демо-программы.
"""

import math
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Sentinel, возвращаемый при делении на ноль (неотличим от честного 0.0)
DIVISION_BY_ZERO_SENTINEL: Final[float] = 0.0

# Диагностика, выводимая в поток ошибок при делении на ноль
DIVISION_BY_ZERO_MESSAGE: Final[str] = "Error: Division by zero!"


# =============================================================================
# ENUMS
# =============================================================================


class OverflowPolicy(str, Enum):
    """Политика переполнения для add/subtract/multiply"""

    UNBOUNDED = "unbounded"  # Python int, переполнения нет
    WRAP_INT32 = "wrap_int32"  # two's-complement 32-bit wraparound


class ZeroDivisionPolicy(str, Enum):
    """
    Политика обработки деления на ноль.

    SENTINEL: диагностика в лог + возврат sentinel, исключение не пропагирует.
    RAISE: DivisionByZeroError без диагностики.
    """

    SENTINEL = "sentinel"
    RAISE = "raise"


# =============================================================================
# CALCULATOR CONFIG
# =============================================================================


class CalculatorConfig(BaseModel):
    """
    Конфигурация Calculator.

    Immutable модель (frozen=True): политики не меняются после создания
    калькулятора, все операции остаются stateless.
    """

    overflow_policy: OverflowPolicy = Field(
        default=OverflowPolicy.UNBOUNDED,
        description="Политика переполнения целых для add/subtract/multiply",
    )
    zero_division_policy: ZeroDivisionPolicy = Field(
        default=ZeroDivisionPolicy.SENTINEL,
        description="Политика деления на ноль (sentinel/raise)",
    )
    division_by_zero_sentinel: float = Field(
        default=DIVISION_BY_ZERO_SENTINEL,
        description="Значение, возвращаемое divide() при нулевом делителе",
    )
    division_by_zero_message: str = Field(
        default=DIVISION_BY_ZERO_MESSAGE,
        min_length=1,
        description="Текст диагностики при нулевом делителе",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("division_by_zero_sentinel")
    @classmethod
    def validate_sentinel_finite(cls, v: float) -> float:
        """Sentinel должен быть конечным float (не NaN/Inf)"""
        if not math.isfinite(v):
            raise ValueError(f"division_by_zero_sentinel must be finite, got {v}")
        return v
