"""
Contract Validation Module

Модуль для валидации JSON профилей идентификаторов.
"""

from .validators import (
    ContractValidator,
    IdProfileValidator,
    SchemaLoader,
    validate_id_profile,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IdProfileValidator",
    # Functions
    "validate_id_profile",
]
