"""
Тесты для проверки идентификаторов из недоверенного ввода

Проверяет:
1. Некорректный ввод → False, без exception
2. Порядок проверок и причины отказа (inspect)
3. Нормализацию регистра
4. Ошибку конфигурации required_length < 2
"""

import logging

import pytest

from src.core.domain import PoolType, get_alphabet
from src.identifiers import RejectReason, ValidationResult, generate, inspect, validate

NUMERIC = get_alphabet(PoolType.NUMERIC)
SAFE = get_alphabet(PoolType.SAFE)


class TestValidate:
    """validate: bool-результат"""

    def test_valid(self) -> None:
        assert validate("79927398713", NUMERIC, 11) is True

    def test_wrong_length(self) -> None:
        assert validate("79927398713", NUMERIC, 10) is False
        assert validate("79927398713", NUMERIC, 12) is False
        assert validate("", NUMERIC, 2) is False

    def test_foreign_character(self) -> None:
        assert validate("7992739871X", NUMERIC, 11) is False

    def test_wrong_check_symbol(self) -> None:
        assert validate("79927398710", NUMERIC, 11) is False

    def test_not_a_string(self) -> None:
        assert validate(None, NUMERIC, 11) is False
        assert validate(79927398713, NUMERIC, 11) is False
        assert validate(list("79927398713"), NUMERIC, 11) is False

    def test_required_length_config_error(self) -> None:
        with pytest.raises(ValueError, match="required_length"):
            validate("1", NUMERIC, 1)


class TestCaseNormalization:
    """Нормализация регистра"""

    def test_safe_lowercase_accepted(self) -> None:
        identifier = generate(SAFE, 8)
        assert validate(identifier.lower(), SAFE, 8, case_normalize=True)
        assert validate(identifier, SAFE, 8, case_normalize=True)

    def test_lowercase_rejected_without_normalization(self) -> None:
        assert validate("bcd9", SAFE, 4, case_normalize=False) is False
        assert validate("bcd9", SAFE, 4, case_normalize=True) is True

    def test_normalization_not_applied_to_case_sensitive_pool(self) -> None:
        alphanum = get_alphabet(PoolType.ALPHANUM)
        assert validate("zZs", alphanum, 3)
        assert not validate("zZs", alphanum, 3, case_normalize=True)


class TestInspect:
    """inspect: причина отказа"""

    def test_pass(self) -> None:
        result = inspect("bcd9", SAFE, 4, case_normalize=True)
        assert result == ValidationResult(
            is_valid=True, reject_reason=None, normalized="BCD9", details="PASS"
        )
        assert bool(result) is True

    def test_length_checked_before_alphabet(self) -> None:
        result = inspect("XX", NUMERIC, 3)
        assert result.reject_reason is RejectReason.LENGTH_MISMATCH
        assert "length 2 != 3" in result.details
        assert bool(result) is False

    def test_unknown_symbol(self) -> None:
        result = inspect("12a4", NUMERIC, 4)
        assert result.reject_reason is RejectReason.UNKNOWN_SYMBOL
        assert "'a'" in result.details

    def test_checksum_mismatch(self) -> None:
        result = inspect("BCD8", SAFE, 4)
        assert result.reject_reason is RejectReason.CHECKSUM_MISMATCH
        assert result.normalized == "BCD8"

    def test_not_a_string(self) -> None:
        result = inspect(b"BCD9", SAFE, 4)
        assert result.reject_reason is RejectReason.NOT_A_STRING
        assert result.normalized is None

    def test_rejection_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.identifiers.validator"):
            inspect("BCD8", SAFE, 4)
        assert "checksum_mismatch" in caplog.text
