"""
Validator — Проверка идентификаторов из недоверенного ввода

Порядок проверок:
1. Нормализация регистра (только если case_normalize)
2. Длина == required_length
3. Все символы принадлежат алфавиту
4. Контрольный символ (Luhn mod N)

Некорректный ввод никогда не приводит к exception: возвращается False
(или ValidationResult с причиной отказа). Exception только для ошибок
конфигурации (required_length < 2).
"""

import logging
from dataclasses import dataclass
from enum import Enum

from src.core.domain.alphabet import Alphabet
from src.core.math.luhn_mod_n import verify
from src.identifiers.config import MIN_ID_LENGTH

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


class RejectReason(str, Enum):
    """Причина отказа"""

    NOT_A_STRING = "not_a_string"
    LENGTH_MISMATCH = "length_mismatch"
    UNKNOWN_SYMBOL = "unknown_symbol"
    CHECKSUM_MISMATCH = "checksum_mismatch"


@dataclass(frozen=True)
class ValidationResult:
    """Результат проверки идентификатора."""

    is_valid: bool
    reject_reason: RejectReason | None

    # Строка после нормализации регистра (None для не-строкового ввода)
    normalized: str | None

    # Детали
    details: str

    def __bool__(self) -> bool:
        return self.is_valid


# =============================================================================
# VALIDATION
# =============================================================================


def inspect(
    candidate: object,
    alphabet: Alphabet,
    required_length: int,
    case_normalize: bool = False,
) -> ValidationResult:
    """
    Проверка идентификатора с указанием причины отказа.

    Args:
        candidate: проверяемая строка (тело + контрольный символ)
        alphabet: алфавит идентификатора
        required_length: ожидаемая полная длина (>= 2)
        case_normalize: привести ввод к верхнему регистру перед проверкой

    Returns:
        ValidationResult

    Raises:
        ValueError: если required_length < 2 (ошибка конфигурации)
    """
    if required_length < MIN_ID_LENGTH:
        raise ValueError(f"required_length must be at least {MIN_ID_LENGTH}, got {required_length}")

    if not isinstance(candidate, str):
        return _rejected(
            RejectReason.NOT_A_STRING, None, f"expected str, got {type(candidate).__name__}"
        )

    text = candidate.upper() if case_normalize else candidate

    if len(text) != required_length:
        return _rejected(
            RejectReason.LENGTH_MISMATCH, text, f"length {len(text)} != {required_length}"
        )

    if not alphabet.contains_all(text):
        foreign = sorted({symbol for symbol in text if symbol not in alphabet})
        return _rejected(RejectReason.UNKNOWN_SYMBOL, text, f"foreign symbols: {foreign!r}")

    if not verify(text, alphabet):
        return _rejected(RejectReason.CHECKSUM_MISMATCH, text, "check symbol does not match")

    return ValidationResult(is_valid=True, reject_reason=None, normalized=text, details="PASS")


def validate(
    candidate: object,
    alphabet: Alphabet,
    required_length: int,
    case_normalize: bool = False,
) -> bool:
    """True если candidate является корректным идентификатором (см. inspect)."""
    return inspect(candidate, alphabet, required_length, case_normalize).is_valid


def _rejected(reason: RejectReason, normalized: str | None, details: str) -> ValidationResult:
    logger.debug("Identifier rejected: %s (%s)", reason.value, details)
    return ValidationResult(
        is_valid=False, reject_reason=reason, normalized=normalized, details=details
    )
