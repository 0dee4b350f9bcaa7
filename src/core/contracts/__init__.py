"""
Contract Validation Module

Модуль для валидации JSON снапшотов DualState.
"""

from .validators import (
    DEFAULT_SCHEMA_DIR,
    ContractValidator,
    DualStateValidator,
    SchemaLoader,
    validate_dual_state,
)

__all__ = [
    # Constants
    "DEFAULT_SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DualStateValidator",
    # Functions
    "validate_dual_state",
]
