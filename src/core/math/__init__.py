"""
Core math modules

Контрольная сумма Luhn mod N над алфавитом произвольного основания.
"""

# Luhn mod N
from src.core.math.luhn_mod_n import (
    GENERATE_START_FACTOR,
    VERIFY_START_FACTOR,
    append_check_symbol,
    compute_check_symbol,
    compute_check_value,
    fold,
    verify,
    weighted_fold_sum,
)

__all__ = [
    # Luhn mod N — Constants
    "GENERATE_START_FACTOR",
    "VERIFY_START_FACTOR",
    # Luhn mod N — Primitives
    "fold",
    "weighted_fold_sum",
    # Luhn mod N — Functions
    "compute_check_value",
    "compute_check_symbol",
    "append_check_symbol",
    "verify",
]
