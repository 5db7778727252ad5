"""
Test suite для Simple Calculator Demo

Contains:
- tests/unit/          : Unit и property-based тесты калькулятора и демо
"""
