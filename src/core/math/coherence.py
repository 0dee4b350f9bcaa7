"""
Coherence — арифметика дуальной пары

Coherence — мера симметрии двух парных магнитуд (matter/antimatter):
насколько они близки друг к другу относительно общего масштаба.

    coherence = 1 - |primary - secondary| / (|primary| + |secondary| + 1)

ИНВАРИАНТЫ:
1. coherence ∈ [0, 1] для любых конечных входов
2. Знаменатель >= 1, деление на ноль невозможно (оба нуля → coherence = 1)
3. Формула симметрична: coherence(a, b) == coherence(b, a)
4. NaN/Inf не отклоняются и пропагируют по IEEE-754
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

COHERENCE_MIN: Final[float] = 0.0
COHERENCE_MAX: Final[float] = 1.0

# Смещение знаменателя, защищает от деления на ноль при a = b = 0
COHERENCE_DENOM_BIAS: Final[float] = 1.0


# =============================================================================
# ФОРМУЛЫ
# =============================================================================


def compute_coherence(primary: float, secondary: float) -> float:
    """
    Coherence дуальной пары.

    Args:
        primary: Магнитуда primary (matter)
        secondary: Магнитуда secondary (antimatter)

    Returns:
        Coherence в [0, 1] (для конечных входов)

    Examples:
        >>> compute_coherence(1.0, 1.0)
        1.0
        >>> compute_coherence(0.0, 0.0)
        1.0
        >>> compute_coherence(1.0, -1.0)
        0.33333333333333337
    """
    spread = abs(primary - secondary)
    scale = abs(primary) + abs(secondary) + COHERENCE_DENOM_BIAS
    return 1.0 - (spread / scale)


def collapse_mean(primary: float, secondary: float) -> float:
    """
    "Коллапс" пары — среднее арифметическое магнитуд.

    Examples:
        >>> collapse_mean(42.0, -41.8)  # doctest: +ELLIPSIS
        0.100...
    """
    return (primary + secondary) / 2.0
