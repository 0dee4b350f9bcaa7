"""
Core math modules для QUASI

Математические примитивы дуальной пары.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    all_valid_floats,
    is_close,
    is_valid_float,
)

# Coherence
from src.core.math.coherence import (
    COHERENCE_DENOM_BIAS,
    COHERENCE_MAX,
    COHERENCE_MIN,
    collapse_mean,
    compute_coherence,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Checks
    "all_valid_floats",
    "is_close",
    "is_valid_float",
    # Coherence — Constants
    "COHERENCE_DENOM_BIAS",
    "COHERENCE_MAX",
    "COHERENCE_MIN",
    # Coherence — Functions
    "collapse_mean",
    "compute_coherence",
]
