"""Тесты для CLI luhn-id: вывод и коды возврата."""

import json

import pytest

from src.cli import EXIT_CONFIG_ERROR, EXIT_INVALID, EXIT_OK, build_parser, main
from src.core.domain import get_alphabet
from src.core.math import verify


class TestGenerateCommand:

    def test_generate_default_profile(self, capsys) -> None:
        assert main(["generate"]) == EXIT_OK
        lines = capsys.readouterr().out.split()
        assert len(lines) == 1
        assert len(lines[0]) == 32
        assert verify(lines[0], get_alphabet("alphanum"))

    def test_generate_count(self, capsys) -> None:
        assert main(["generate", "--pool", "SAFE", "--length", "8", "--count", "5"]) == EXIT_OK
        lines = capsys.readouterr().out.split()
        assert len(lines) == 5
        safe = get_alphabet("safe")
        for line in lines:
            assert len(line) == 8
            assert verify(line, safe)

    def test_generate_negative_count(self, capsys) -> None:
        assert main(["generate", "--count", "-1"]) == EXIT_CONFIG_ERROR
        assert "count must be non-negative" in capsys.readouterr().err

    def test_generate_length_too_small(self, capsys) -> None:
        assert main(["generate", "--length", "1"]) == EXIT_CONFIG_ERROR
        assert "invalid identifier profile" in capsys.readouterr().err


class TestValidateCommand:

    def test_all_valid(self, capsys) -> None:
        assert main(["validate", "--pool", "safe", "--length", "4", "BCD9", "bcd9"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "BCD9\tvalid" in out
        assert "bcd9\tvalid" in out

    def test_some_invalid(self, capsys) -> None:
        code = main(["validate", "-p", "numeric", "-l", "11", "79927398713", "79927398710", "123"])
        assert code == EXIT_INVALID
        out = capsys.readouterr().out
        assert "79927398713\tvalid" in out
        assert "79927398710\tinvalid (checksum_mismatch)" in out
        assert "123\tinvalid (length_mismatch)" in out

    def test_profile_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "profile.json"
        path.write_text(json.dumps({"pool_type": "safe", "length": 4}), encoding="utf-8")
        assert main(["validate", "--config", str(path), "bcd9"]) == EXIT_OK

    def test_command_line_overrides_profile(self, tmp_path, capsys) -> None:
        path = tmp_path / "profile.json"
        path.write_text(json.dumps({"pool_type": "safe", "length": 8}), encoding="utf-8")
        assert main(["validate", "--config", str(path), "--length", "4", "BCD9"]) == EXIT_OK

    def test_invalid_profile_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "profile.json"
        path.write_text(json.dumps({"length": "long"}), encoding="utf-8")
        assert main(["validate", "--config", str(path), "BCD9"]) == EXIT_CONFIG_ERROR
        assert "invalid identifier profile" in capsys.readouterr().err

    def test_missing_profile_file(self, tmp_path) -> None:
        assert main(["validate", "--config", str(tmp_path / "none.json"), "BCD9"]) == EXIT_CONFIG_ERROR


class TestPoolsCommand:

    def test_lists_every_pool(self, capsys) -> None:
        assert main(["pools"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "safe\t29\t123456789BCDFGHJKLMNPQRSTVWXZ" in out
        assert "alphanum\t62\t" in out
        assert len(out.strip().splitlines()) == 7


def test_command_required() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
