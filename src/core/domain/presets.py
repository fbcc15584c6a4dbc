"""
Presets — Именованные пулы символов

Фиксированные наборы символов, которые можно выбрать по имени вместо явной
передачи алфавита:

    "alphanum" = 0-9, a-z, A-Z            (radix 62)
    "alpha"    = a-z, A-Z                 (radix 52)
    "lower"    = a-z                      (radix 26)
    "upper"    = A-Z                      (radix 26)
    "numeric"  = 0-9                      (radix 10)
    "nozero"   = 1-9                      (radix 9)
    "safe"     = 1-9, BCDFGHJKLMNPQRSTVWXZ (radix 29)

В "safe" удалены гласные (нет случайных слов) и цифра 0 (нет путаницы с "O").
Все буквы в верхнем регистре, поэтому ввод нормализуется через upper().

Имя пула нечувствительно к регистру, неизвестное имя → "alphanum".
"""

import logging
from enum import Enum
from typing import Final

from src.core.domain.alphabet import Alphabet

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class PoolType(str, Enum):
    """Имя пресета"""

    ALPHANUM = "alphanum"
    ALPHA = "alpha"
    LOWER = "lower"
    UPPER = "upper"
    NUMERIC = "numeric"
    NOZERO = "nozero"
    SAFE = "safe"


# =============================================================================
# POOLS
# =============================================================================

_DIGITS: Final[str] = "0123456789"
_LOWER: Final[str] = "abcdefghijklmnopqrstuvwxyz"
_UPPER: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

POOLS: Final[dict[PoolType, str]] = {
    PoolType.ALPHANUM: _DIGITS + _LOWER + _UPPER,
    PoolType.ALPHA: _LOWER + _UPPER,
    PoolType.LOWER: _LOWER,
    PoolType.UPPER: _UPPER,
    PoolType.NUMERIC: _DIGITS,
    PoolType.NOZERO: _DIGITS[1:],
    PoolType.SAFE: _DIGITS[1:] + "BCDFGHJKLMNPQRSTVWXZ",
}

DEFAULT_POOL_TYPE: Final[PoolType] = PoolType.ALPHANUM

# Пулы, для которых ввод приводится к верхнему регистру перед проверкой
CASE_NORMALIZED_POOLS: Final[frozenset[PoolType]] = frozenset({PoolType.SAFE})

# Алфавиты строятся один раз при импорте и разделяются всеми вызовами
_ALPHABETS: Final[dict[PoolType, Alphabet]] = {
    pool_type: Alphabet(symbols) for pool_type, symbols in POOLS.items()
}


# =============================================================================
# RESOLUTION
# =============================================================================


def resolve_pool_type(name: str | PoolType | None) -> PoolType:
    """
    Имя пресета → PoolType.

    Args:
        name: имя пула в любом регистре (например, "SAFE"), PoolType или None

    Returns:
        PoolType; для неизвестного или пустого имени — DEFAULT_POOL_TYPE

    Examples:
        >>> resolve_pool_type("SAFE")
        <PoolType.SAFE: 'safe'>
        >>> resolve_pool_type("bogus")
        <PoolType.ALPHANUM: 'alphanum'>
    """
    if isinstance(name, PoolType):
        return name
    if not name:
        return DEFAULT_POOL_TYPE

    try:
        return PoolType(str(name).strip().lower())
    except ValueError:
        logger.warning(
            "Unknown pool type %r, falling back to %r", name, DEFAULT_POOL_TYPE.value
        )
        return DEFAULT_POOL_TYPE


def get_alphabet(name: str | PoolType | None = None) -> Alphabet:
    """Алфавит пресета по имени (см. resolve_pool_type)."""
    return _ALPHABETS[resolve_pool_type(name)]


def is_case_normalized(pool_type: str | PoolType | None) -> bool:
    """True для пулов, ввод которых приводится к верхнему регистру."""
    return resolve_pool_type(pool_type) in CASE_NORMALIZED_POOLS
