"""
Domain models and value objects.

Contains the dual state entities: Token, DualField, DualState.
"""

from src.core.domain.dual_state import DualField, DualState, StateTag, Token

__all__ = [
    "Token",
    "DualField",
    "DualState",
    "StateTag",
]
