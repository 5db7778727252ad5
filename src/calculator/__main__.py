"""
Точка входа: python -m src.calculator

Запускает демо-программу, код возврата всегда 0.
"""

import sys

from src.calculator.demo import main

if __name__ == "__main__":
    sys.exit(main())
