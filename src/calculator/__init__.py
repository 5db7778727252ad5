"""
Calculator — арифметический блок и демо-программа

Stateless калькулятор над целыми операндами с политикой деления на ноль
(sentinel + диагностика) и настраиваемой политикой переполнения.
"""

# Configuration
from src.calculator.config import (
    DIVISION_BY_ZERO_MESSAGE,
    DIVISION_BY_ZERO_SENTINEL,
    CalculatorConfig,
    OverflowPolicy,
    ZeroDivisionPolicy,
)

# Arithmetic Unit
from src.calculator.arithmetic import (
    INT32_MAX,
    INT32_MIN,
    Calculator,
    DivisionByZeroError,
    DivisionResult,
    validate_operand,
    wrap_int32,
)

# Demo driver
from src.calculator.demo import (
    DEMO_RULE,
    DEMO_TITLE,
    format_number,
    main,
    run_demo,
)

__all__ = [
    # Configuration — Constants
    "DIVISION_BY_ZERO_MESSAGE",
    "DIVISION_BY_ZERO_SENTINEL",
    # Configuration — Types
    "CalculatorConfig",
    "OverflowPolicy",
    "ZeroDivisionPolicy",
    # Arithmetic — Constants
    "INT32_MAX",
    "INT32_MIN",
    # Arithmetic — Types
    "Calculator",
    "DivisionByZeroError",
    "DivisionResult",
    # Arithmetic — Functions
    "validate_operand",
    "wrap_int32",
    # Demo
    "DEMO_RULE",
    "DEMO_TITLE",
    "format_number",
    "main",
    "run_demo",
]
