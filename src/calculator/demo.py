"""
Demo — Консольная демонстрация Calculator

Фиксированная последовательность вызовов с литеральными операндами:
заголовок, четыре операции над (10, 5) и деление на ноль (10, 0).

Каждая строка вычисляется непосредственно перед выводом, поэтому
диагностика деления на ноль попадает в stderr до последней строки stdout.
Код возврата всегда 0.
"""

import logging
import sys
from typing import Final, Iterator, TextIO

from src.calculator.arithmetic import Calculator

# =============================================================================
# ПАРАМЕТРЫ ДЕМО
# =============================================================================

DEMO_TITLE: Final[str] = "Simple Calculator Demo"
DEMO_RULE: Final[str] = "=" * len(DEMO_TITLE)

# Основная пара операндов
DEMO_OPERANDS: Final[tuple[int, int]] = (10, 5)

# Пара для демонстрации деления на ноль
DEMO_ZERO_DIVISION_OPERANDS: Final[tuple[int, int]] = (10, 0)

EXIT_SUCCESS: Final[int] = 0


def format_number(value: int | float) -> str:
    """
    Форматирование результата для вывода.

    int выводится как есть, float — в общем формате с 6 значащими
    цифрами без хвостовых нулей (как %g).

    Examples:
        >>> format_number(15)
        '15'
        >>> format_number(2.0)
        '2'
        >>> format_number(2.5)
        '2.5'
    """
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def demo_lines(calculator: Calculator) -> Iterator[str]:
    """
    Строки демо-вывода в порядке вывода.

    Генератор: результат каждой операции вычисляется лениво, при запросе
    соответствующей строки.
    """
    a, b = DEMO_OPERANDS
    zero_a, zero_b = DEMO_ZERO_DIVISION_OPERANDS

    yield DEMO_TITLE
    yield DEMO_RULE
    yield f"{a} + {b} = {format_number(calculator.add(a, b))}"
    yield f"{a} - {b} = {format_number(calculator.subtract(a, b))}"
    yield f"{a} * {b} = {format_number(calculator.multiply(a, b))}"
    yield f"{a} / {b} = {format_number(calculator.divide(a, b))}"
    yield f"{zero_a} / {zero_b} = {format_number(calculator.divide(zero_a, zero_b))}"


def run_demo(
    calculator: Calculator | None = None,
    stream: TextIO | None = None,
) -> int:
    """
    Вывод демо-последовательности.

    Args:
        calculator: Калькулятор (default: конфигурация по умолчанию)
        stream: Поток вывода (default: sys.stdout)

    Returns:
        Код возврата (всегда EXIT_SUCCESS)
    """
    if calculator is None:
        calculator = Calculator()
    if stream is None:
        stream = sys.stdout

    for line in demo_lines(calculator):
        print(line, file=stream)

    return EXIT_SUCCESS


def configure_logging(stream: TextIO | None = None) -> None:
    """Диагностика калькулятора → stderr, только текст сообщения"""
    logging.basicConfig(
        stream=stream if stream is not None else sys.stderr,
        level=logging.WARNING,
        format="%(message)s",
    )


def main() -> int:
    configure_logging()
    return run_demo()
