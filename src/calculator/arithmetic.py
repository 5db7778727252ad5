"""
Arithmetic Unit — Четыре элементарные операции

Модуль реализует stateless арифметический блок над двумя целыми операндами:
- add / subtract / multiply → int
- divide → float (частное)
- divide_checked → DivisionResult (различимый результат деления на ноль)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль по умолчанию не пропагирует исключение:
   диагностика в лог (ERROR) + возврат sentinel 0.0
2. Sentinel неотличим от честного нулевого частного по значению;
   для различения используется divide_checked
3. Переполнение целых определено политикой OverflowPolicy
   (UNBOUNDED — Python int, WRAP_INT32 — 32-bit wraparound)
4. Калькулятор не хранит состояния, кроме frozen конфигурации
"""

import logging
from typing import Final, NamedTuple

from src.calculator.config import (
    CalculatorConfig,
    OverflowPolicy,
    ZeroDivisionPolicy,
)

logger = logging.getLogger(__name__)

# =============================================================================
# 32-BIT ГРАНИЦЫ
# =============================================================================

INT32_BITS: Final[int] = 32
INT32_MIN: Final[int] = -(2 ** (INT32_BITS - 1))
INT32_MAX: Final[int] = 2 ** (INT32_BITS - 1) - 1


class DivisionByZeroError(ZeroDivisionError):
    """
    Деление на ноль при политике ZeroDivisionPolicy.RAISE.

    Наследует ZeroDivisionError, поэтому перехватывается стандартным
    except ZeroDivisionError.
    """

    pass


class DivisionResult(NamedTuple):
    """Результат divide_checked: значение + признак определённости"""

    value: float  # частное или sentinel
    defined: bool  # False → делитель был равен нулю


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРИМИТИВЫ
# =============================================================================


def wrap_int32(value: int) -> int:
    """
    Приведение целого к диапазону int32 с two's-complement wraparound.

    Args:
        value: Любое целое

    Returns:
        Значение в [INT32_MIN, INT32_MAX], сравнимое с value по модулю 2**32

    Examples:
        >>> wrap_int32(INT32_MAX + 1)
        -2147483648
        >>> wrap_int32(-1)
        -1
        >>> wrap_int32(2**32 + 5)
        5
    """
    return (value - INT32_MIN) % (2**INT32_BITS) + INT32_MIN


def validate_operand(value: int, name: str) -> None:
    """
    Валидация, что операнд является целым.

    bool формально наследует int, но операндом не считается.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


# =============================================================================
# CALCULATOR
# =============================================================================


class Calculator:
    """
    Stateless арифметический блок.

    Все операции независимы и детерминированы; единственный побочный
    эффект — диагностика при делении на ноль (политика SENTINEL).
    """

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self._config = config if config is not None else CalculatorConfig()

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    def add(self, a: int, b: int) -> int:
        a, b = self._operands(a, b)
        return self._result(a + b)

    def subtract(self, a: int, b: int) -> int:
        a, b = self._operands(a, b)
        return self._result(a - b)

    def multiply(self, a: int, b: int) -> int:
        a, b = self._operands(a, b)
        return self._result(a * b)

    def divide(self, a: int, b: int) -> float:
        """
        Деление с float-частным.

        При b == 0:
        - SENTINEL: диагностика в лог (ERROR) и возврат sentinel (0.0)
        - RAISE: DivisionByZeroError

        При WRAP_INT32 делитель приводится к int32 до проверки на ноль:
        кратный 2**32 делитель (например, 2**32) идёт по пути деления на ноль.

        Args:
            a: Числитель
            b: Знаменатель

        Returns:
            a / b или sentinel при нулевом знаменателе

        Raises:
            DivisionByZeroError: b == 0 при политике RAISE
            OverflowError: Частное не представимо в float

        Examples:
            >>> Calculator().divide(10, 5)
            2.0
            >>> Calculator().divide(10, 0)
            0.0
        """
        a, b = self._operands(a, b)

        if b == 0:
            if self._config.zero_division_policy is ZeroDivisionPolicy.RAISE:
                raise DivisionByZeroError(f"division of {a} by zero")
            logger.error(self._config.division_by_zero_message)
            return self._config.division_by_zero_sentinel

        return a / b

    def divide_checked(self, a: int, b: int) -> DivisionResult:
        """
        Деление без побочных эффектов с различимым результатом.

        Не пишет в лог и не бросает исключений при b == 0 независимо от
        политики: возвращает DivisionResult(sentinel, defined=False).

        Args:
            a: Числитель
            b: Знаменатель

        Returns:
            DivisionResult(a / b, True) или DivisionResult(sentinel, False)
        """
        a, b = self._operands(a, b)

        if b == 0:
            return DivisionResult(self._config.division_by_zero_sentinel, False)

        return DivisionResult(a / b, True)

    def _operands(self, a: int, b: int) -> tuple[int, int]:
        validate_operand(a, "a")
        validate_operand(b, "b")

        if self._config.overflow_policy is OverflowPolicy.WRAP_INT32:
            return wrap_int32(a), wrap_int32(b)
        return a, b

    def _result(self, value: int) -> int:
        if self._config.overflow_policy is OverflowPolicy.WRAP_INT32:
            return wrap_int32(value)
        return value
