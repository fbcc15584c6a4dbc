"""
Alphabet — Упорядоченный набор символов (пул) с фиксированным основанием

Immutable value object, задающий позиционную систему счисления для
идентификаторов:
- symbols: упорядоченная последовательность уникальных символов
- radix: количество символов (основание системы, модуль контрольной суммы)
- index_of / symbol_at: двусторонний lookup символ ↔ позиция за O(1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый символ уникален, radix >= 2
2. Таблица индексов — точная инверсия symbols
3. Обе таблицы строятся один раз при создании и больше не меняются
"""

from dataclasses import dataclass, field
from typing import Final, Iterable, Iterator

# =============================================================================
# CONSTANTS
# =============================================================================

# Минимальное основание: одного символа недостаточно для контрольной суммы
MIN_RADIX: Final[int] = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AlphabetError(Exception):
    """Базовое исключение для ошибок алфавита."""

    pass


class InvalidAlphabet(AlphabetError, ValueError):
    """
    Некорректный набор символов при создании алфавита.

    Менее двух символов, дубликат или элемент, не являющийся одиночным
    символом. Ошибка конфигурации: вызывающий код должен исправить пул.
    """

    pass


class UnknownSymbol(AlphabetError, KeyError):
    """
    Символ отсутствует в алфавите.

    При вычислении контрольной суммы означает ошибку вызывающего кода:
    тело идентификатора должно быть проверено на принадлежность алфавиту заранее.
    """

    def __init__(self, symbol: object, radix: int):
        self.symbol = symbol
        self.radix = radix
        super().__init__(symbol)

    def __str__(self) -> str:
        return f"Symbol {self.symbol!r} is not in alphabet (radix={self.radix})"


class IndexOutOfRange(AlphabetError, IndexError):
    """Индекс вне диапазона [0, radix). Недостижимо при соблюдении инвариантов."""

    pass


# =============================================================================
# ALPHABET
# =============================================================================


@dataclass(frozen=True)
class Alphabet:
    """
    Алфавит идентификаторов.

    Immutable (frozen=True): безопасно разделяется между потоками без блокировок.

    Args:
        symbols: строка или последовательность одиночных символов

    Raises:
        InvalidAlphabet: если символов меньше двух, есть дубликаты или элемент
            не является одиночным символом (графемы из нескольких code point не поддерживаются)

    Examples:
        >>> alphabet = Alphabet("0123456789")
        >>> alphabet.radix
        10
        >>> alphabet.index_of("7")
        7
        >>> alphabet.symbol_at(3)
        '3'
    """

    symbols: tuple[str, ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.symbols, str):
            symbols = tuple(self.symbols)
        else:
            try:
                symbols = tuple(self.symbols)
            except TypeError as e:
                raise InvalidAlphabet(f"Symbols must be iterable, got {self.symbols!r}") from e

        for symbol in symbols:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidAlphabet(f"Each symbol must be a single character, got {symbol!r}")

        if len(symbols) < MIN_RADIX:
            raise InvalidAlphabet(
                f"Alphabet needs at least {MIN_RADIX} symbols, got {len(symbols)}"
            )

        index: dict[str, int] = {}
        for position, symbol in enumerate(symbols):
            if symbol in index:
                raise InvalidAlphabet(
                    f"Duplicate symbol {symbol!r} at positions {index[symbol]} and {position}"
                )
            index[symbol] = position

        # frozen dataclass: обе таблицы фиксируются через object.__setattr__
        object.__setattr__(self, "symbols", symbols)
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_symbols(cls, symbols: Iterable[str]) -> "Alphabet":
        """Создание алфавита из строки или любой последовательности символов."""
        return cls(symbols)

    @property
    def radix(self) -> int:
        """Основание системы счисления (количество символов)."""
        return len(self.symbols)

    @property
    def pool(self) -> str:
        """Символы алфавита одной строкой."""
        return "".join(self.symbols)

    def index_of(self, symbol: str) -> int:
        """
        Позиция символа в алфавите.

        Raises:
            UnknownSymbol: если символа нет в алфавите
        """
        try:
            return self._index[symbol]
        except (KeyError, TypeError):
            raise UnknownSymbol(symbol, self.radix) from None

    def symbol_at(self, index: int) -> str:
        """
        Символ по позиции (обратный lookup).

        Raises:
            IndexOutOfRange: если index вне [0, radix)
        """
        if not 0 <= index < self.radix:
            raise IndexOutOfRange(f"Index {index} out of range [0, {self.radix})")
        return self.symbols[index]

    def contains_all(self, text: Iterable[str]) -> bool:
        """True, если каждый символ text принадлежит алфавиту."""
        return all(symbol in self._index for symbol in text)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol in self._index

    def __len__(self) -> int:
        return self.radix

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)
