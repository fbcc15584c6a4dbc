"""
Domain models and value objects.

Contains the Alphabet value object, its error taxonomy and the named pool presets.
"""

from src.core.domain.alphabet import (
    MIN_RADIX,
    Alphabet,
    AlphabetError,
    IndexOutOfRange,
    InvalidAlphabet,
    UnknownSymbol,
)
from src.core.domain.presets import (
    CASE_NORMALIZED_POOLS,
    DEFAULT_POOL_TYPE,
    POOLS,
    PoolType,
    get_alphabet,
    is_case_normalized,
    resolve_pool_type,
)

__all__ = [
    # Alphabet
    "MIN_RADIX",
    "Alphabet",
    # Alphabet — Exceptions
    "AlphabetError",
    "InvalidAlphabet",
    "UnknownSymbol",
    "IndexOutOfRange",
    # Presets
    "POOLS",
    "PoolType",
    "DEFAULT_POOL_TYPE",
    "CASE_NORMALIZED_POOLS",
    "resolve_pool_type",
    "get_alphabet",
    "is_case_normalized",
]
