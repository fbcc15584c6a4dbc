"""
Luhn mod N — Контрольный символ над алфавитом произвольного основания

Обобщение классического алгоритма Luhn (base 10) на основание N = alphabet.radix.
Используется симметрично:
- compute_check_symbol: вычисление контрольного символа для тела идентификатора
- verify: проверка полного идентификатора (тело + контрольный символ)

АЛГОРИТМ (обход справа налево):
    factor чередуется 2, 1, 2, 1, ... (или 1, 2, ... при проверке)
    addend = factor * index_of(symbol)
    sum   += fold(addend) = addend // N + addend % N
    check  = (N - sum % N) % N

При вычислении factor начинается с 2: контрольный символ ещё не добавлен и
займёт позицию с factor = 1. При проверке factor начинается с 1 на самом
контрольном символе. Идентификатор валиден, если sum % N == 0.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. verify(body + compute_check_symbol(body)) == True для любого тела
2. Пустое тело → symbol_at(0)
3. Символ вне алфавита → UnknownSymbol, частичный результат не возвращается

ОГРАНИЧЕНИЯ (не ошибка, свойство Luhn mod N):
- Перестановка соседних символов symbol_at(0) ↔ symbol_at(N-1) не обнаруживается
- Для нечётного N замена одного символа на позиции с factor = 2 не обнаруживается,
  если fold(2a) ≡ fold(2b) (mod N), например a = 1, b = (N + 1) / 2
"""

from typing import Final, Sequence

from src.core.domain.alphabet import Alphabet

# =============================================================================
# CONSTANTS
# =============================================================================

# Начальный factor для самого правого символа тела при вычислении
GENERATE_START_FACTOR: Final[int] = 2

# Начальный factor для контрольного символа при проверке
VERIFY_START_FACTOR: Final[int] = 1


# =============================================================================
# PRIMITIVES
# =============================================================================


def fold(addend: int, radix: int) -> int:
    """
    Сумма "цифр" addend в системе с основанием radix.

    Обобщение шага digit-sum классического Luhn (16 → 1 + 6 = 7 в base 10).
    addend < 2 * radix, поэтому достаточно одного деления.

    Examples:
        >>> fold(16, 10)
        7
        >>> fold(122, 62)
        61
    """
    return addend // radix + addend % radix


def weighted_fold_sum(symbols: Sequence[str], alphabet: Alphabet, start_factor: int) -> int:
    """
    Взвешенная сумма Luhn mod N, обход справа налево.

    Args:
        symbols: последовательность символов алфавита (строка или список)
        alphabet: алфавит, задающий основание и индексы
        start_factor: factor для самого правого символа (1 или 2)

    Returns:
        Сумма fold(factor * index) по всем символам

    Raises:
        UnknownSymbol: если символ отсутствует в алфавите
    """
    radix = alphabet.radix
    factor = start_factor
    total = 0

    for symbol in reversed(symbols):
        addend = factor * alphabet.index_of(symbol)
        factor = 1 if factor == 2 else 2
        total += fold(addend, radix)

    return total


# =============================================================================
# CHECK SYMBOL
# =============================================================================


def compute_check_value(body: Sequence[str], alphabet: Alphabet) -> int:
    """Числовое значение контрольного символа в [0, radix)."""
    radix = alphabet.radix
    total = weighted_fold_sum(body, alphabet, GENERATE_START_FACTOR)
    return (radix - (total % radix)) % radix


def compute_check_symbol(body: Sequence[str], alphabet: Alphabet) -> str:
    """
    Контрольный символ для тела идентификатора.

    Args:
        body: тело идентификатора (может быть пустым)
        alphabet: алфавит идентификатора

    Returns:
        Символ алфавита, который нужно дописать в конец тела

    Raises:
        UnknownSymbol: если тело содержит символ вне алфавита

    Examples:
        >>> compute_check_symbol("7992739871", Alphabet("0123456789"))
        '3'
    """
    return alphabet.symbol_at(compute_check_value(body, alphabet))


def verify(candidate: Sequence[str], alphabet: Alphabet) -> bool:
    """
    Проверка контрольного символа полного идентификатора.

    Args:
        candidate: тело + контрольный символ
        alphabet: алфавит идентификатора

    Returns:
        True если взвешенная сумма делится на radix

    Raises:
        UnknownSymbol: если candidate содержит символ вне алфавита
    """
    total = weighted_fold_sum(candidate, alphabet, VERIFY_START_FACTOR)
    return total % alphabet.radix == 0


def append_check_symbol(body: str, alphabet: Alphabet) -> str:
    """Тело + контрольный символ."""
    return body + compute_check_symbol(body, alphabet)
