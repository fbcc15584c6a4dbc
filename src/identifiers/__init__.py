"""Identifiers — генерация и проверка идентификаторов с контрольным символом.

- Профиль (pool_type, length, case_normalize) с загрузкой из JSON
- Случайное тело + контрольный символ Luhn mod N
- Проверка недоверенного ввода без exception
"""

from .config import (
    DEFAULT_ID_LENGTH,
    MIN_ID_LENGTH,
    IdentifierConfig,
    config_from_dict,
    load_config,
)
from .generator import RandomSource, generate, generate_body
from .service import IdentifierService
from .validator import RejectReason, ValidationResult, inspect, validate

__all__ = [
    # Config
    "DEFAULT_ID_LENGTH",
    "MIN_ID_LENGTH",
    "IdentifierConfig",
    "config_from_dict",
    "load_config",
    # Generation
    "RandomSource",
    "generate",
    "generate_body",
    # Validation
    "RejectReason",
    "ValidationResult",
    "inspect",
    "validate",
    # Service
    "IdentifierService",
]
