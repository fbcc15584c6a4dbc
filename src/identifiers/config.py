"""
IdentifierConfig — Профиль идентификатора

Immutable Pydantic модель: пул символов, длина и обработка регистра.
Профиль может быть загружен из JSON, который сначала проверяется
контрактом id_profile.json (jsonschema), затем разбирается в модель.
"""

import json
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from src.core.contracts import validate_id_profile
from src.core.domain.presets import DEFAULT_POOL_TYPE, PoolType, is_case_normalized, resolve_pool_type

# =============================================================================
# CONSTANTS
# =============================================================================

# Длина идентификатора по умолчанию (включая контрольный символ)
DEFAULT_ID_LENGTH: Final[int] = 32

# Минимальная длина: один символ тела + контрольный символ
MIN_ID_LENGTH: Final[int] = 2


# =============================================================================
# CONFIG MODEL
# =============================================================================


class IdentifierConfig(BaseModel):
    """
    Конфигурация генерации и проверки идентификаторов.

    Immutable модель (frozen=True).
    pool_type принимается в любом регистре, неизвестное имя → alphanum.
    case_normalize=None означает "по умолчанию для пула" (True только для safe).
    """

    pool_type: PoolType = Field(DEFAULT_POOL_TYPE, description="Пресет пула символов")
    length: int = Field(
        DEFAULT_ID_LENGTH, ge=MIN_ID_LENGTH, description="Длина идентификатора с контрольным символом"
    )
    case_normalize: bool | None = Field(
        None, description="Приводить ввод к верхнему регистру перед проверкой"
    )

    model_config = {"frozen": True}

    @field_validator("pool_type", mode="before")
    @classmethod
    def resolve_pool(cls, v: Any) -> PoolType:
        """Имя пула без учёта регистра, неизвестное → alphanum"""
        return resolve_pool_type(v)

    @property
    def effective_case_normalize(self) -> bool:
        """case_normalize с учётом значения по умолчанию для пула."""
        if self.case_normalize is None:
            return is_case_normalized(self.pool_type)
        return self.case_normalize


# =============================================================================
# LOADING
# =============================================================================


def config_from_dict(data: dict[str, Any]) -> IdentifierConfig:
    """
    Профиль из dict.

    Raises:
        jsonschema.ValidationError: если данные не соответствуют id_profile.json
        pydantic.ValidationError: если значения не проходят валидацию модели
    """
    validate_id_profile(data)
    return IdentifierConfig(**data)


def load_config(path: str | Path) -> IdentifierConfig:
    """
    Профиль из JSON файла.

    Raises:
        FileNotFoundError: если файл не найден
        json.JSONDecodeError: если файл не является валидным JSON
        jsonschema.ValidationError: если профиль не соответствует контракту
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return config_from_dict(data)
