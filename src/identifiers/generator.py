"""
Generator — Случайное тело идентификатора + контрольный символ

Тело выбирается равномерно и независимо из символов алфавита.
Источник случайности передаётся явно (RandomSource), чтобы тесты могли
подставить детерминированную последовательность.

Криптографическая стойкость не гарантируется.
"""

import logging
import random
from typing import Protocol

from src.core.domain.alphabet import Alphabet
from src.core.math.luhn_mod_n import compute_check_symbol
from src.identifiers.config import MIN_ID_LENGTH

logger = logging.getLogger(__name__)


# =============================================================================
# RANDOM SOURCE
# =============================================================================


class RandomSource(Protocol):
    """Источник случайности: random.Random и random.SystemRandom подходят."""

    def randrange(self, stop: int) -> int: ...


_DEFAULT_RNG: RandomSource = random.SystemRandom()


# =============================================================================
# GENERATION
# =============================================================================


def generate_body(alphabet: Alphabet, body_length: int, rng: RandomSource | None = None) -> str:
    """
    Случайное тело идентификатора без контрольного символа.

    Args:
        alphabet: алфавит идентификатора
        body_length: количество символов (>= 0)
        rng: источник случайности (по умолчанию SystemRandom)

    Raises:
        ValueError: если body_length < 0
    """
    if body_length < 0:
        raise ValueError(f"body_length must be non-negative, got {body_length}")

    if rng is None:
        rng = _DEFAULT_RNG
    return "".join(alphabet.symbol_at(rng.randrange(alphabet.radix)) for _ in range(body_length))


def generate(alphabet: Alphabet, length: int, rng: RandomSource | None = None) -> str:
    """
    Идентификатор длины length: length - 1 случайных символов + контрольный символ.

    Args:
        alphabet: алфавит идентификатора
        length: полная длина (>= 2)
        rng: источник случайности (по умолчанию SystemRandom)

    Returns:
        Строка ровно из length символов алфавита

    Raises:
        ValueError: если length < 2
    """
    if length < MIN_ID_LENGTH:
        raise ValueError(f"length must be at least {MIN_ID_LENGTH}, got {length}")

    body = generate_body(alphabet, length - 1, rng)
    identifier = body + compute_check_symbol(body, alphabet)
    logger.debug("Generated identifier of length %d (radix=%d)", length, alphabet.radix)
    return identifier
