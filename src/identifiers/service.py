"""
IdentifierService — Генерация и проверка идентификаторов по профилю

Связывает IdentifierConfig с алфавитом пресета, генератором и валидатором.
Не хранит изменяемого состояния: профиль и алфавит неизменяемы, поэтому
один экземпляр можно использовать из нескольких потоков (потокобезопасность
источника случайности остаётся на вызывающем коде).
"""

from src.core.domain.alphabet import Alphabet
from src.core.domain.presets import PoolType, get_alphabet
from src.identifiers.config import IdentifierConfig
from src.identifiers.generator import RandomSource, generate
from src.identifiers.validator import ValidationResult, inspect


class IdentifierService:
    """
    Генерация и проверка идентификаторов одного профиля.

    Examples:
        >>> service = IdentifierService(IdentifierConfig(pool_type="safe", length=8))
        >>> code = service.generate()
        >>> service.validate(code.lower())
        True
    """

    def __init__(self, config: IdentifierConfig | None = None, rng: RandomSource | None = None):
        """
        Args:
            config: профиль (опционально, используется default: alphanum, 32)
            rng: источник случайности (опционально, SystemRandom)
        """
        self.config = config or IdentifierConfig()
        self._rng = rng
        self._alphabet = get_alphabet(self.config.pool_type)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def pool_type(self) -> PoolType:
        return self.config.pool_type

    @property
    def length(self) -> int:
        return self.config.length

    @property
    def case_normalize(self) -> bool:
        return self.config.effective_case_normalize

    def generate(self) -> str:
        """Новый идентификатор длины config.length."""
        return generate(self._alphabet, self.length, self._rng)

    def generate_many(self, count: int) -> list[str]:
        """
        Несколько идентификаторов.

        Уникальность не гарантируется (нет реестра выданных значений).
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.generate() for _ in range(count)]

    def inspect(self, candidate: object) -> ValidationResult:
        """Проверка с причиной отказа."""
        return inspect(candidate, self._alphabet, self.length, self.case_normalize)

    def validate(self, candidate: object) -> bool:
        """True если candidate является корректным идентификатором профиля."""
        return self.inspect(candidate).is_valid
