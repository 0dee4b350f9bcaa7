"""
Numerical Safeguards — Float Primitives

Модуль содержит примитивы для работы с float в доменных моделях:
- Проверка валидности (NaN/Inf)
- Epsilon-сравнения float с учётом машинной точности

ВАЖНО: в отличие от классической санитизации, NaN/Inf здесь НЕ заменяются
на fallback. Доменные операции не валидируют магнитуды и пропагируют
невалидные значения по правилам IEEE-754 (garbage in, garbage out).
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def all_valid_floats(*values: float) -> bool:
    """True если все значения конечные."""
    return all(is_valid_float(v) for v in values)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
