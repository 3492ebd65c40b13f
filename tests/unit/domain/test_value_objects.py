"""
Unit tests for domain/value_objects.py.

Tests:
  - CPF checksum (masked / unmasked / repeated digits / wrong digits)
  - Fixed-point currency: precision check, scaling, 4-decimal formatting
  - Password policy: first violated rule wins
"""

from decimal import Decimal

import pytest

from finance_api.domain.value_objects import (
    format_currency,
    has_valid_precision,
    is_valid_cpf,
    remove_accents,
    check_password_rules,
    to_scaled_amount,
)

pytestmark = pytest.mark.unit


class TestCpf:
    @pytest.mark.parametrize("value", ["52998224725", "529.982.247-25"])
    def test_valid(self, value):
        assert is_valid_cpf(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "52998224724",  # último dígito errado
            "52998224735",  # primer dígito verificador errado
            "11111111111",
            "00000000000",
            "5299822472",
            "",
            "abc",
        ],
    )
    def test_invalid(self, value):
        assert is_valid_cpf(value) is False


class TestCurrency:
    @pytest.mark.parametrize(
        "value", [5000, 5000.5, 0.0001, Decimal("12.3400"), 1.25]
    )
    def test_valid_precision(self, value):
        assert has_valid_precision(value) is True

    @pytest.mark.parametrize("value", [0.00001, 1.23456, Decimal("1.00001")])
    def test_too_many_decimals(self, value):
        assert has_valid_precision(value) is False

    def test_large_float_uses_positional_notation(self):
        assert has_valid_precision(1e16) is True

    def test_negative_is_not_valid_precision(self):
        assert has_valid_precision(-1) is False

    def test_scaling(self):
        assert to_scaled_amount(5000) == 50_000_000
        assert to_scaled_amount(0.1) == 1_000
        assert to_scaled_amount(Decimal("12.3456")) == 123_456

    def test_formatting_always_has_four_decimals(self):
        assert format_currency(50_000_000) == "5000.0000"
        assert format_currency(1) == "0.0001"
        assert format_currency(123_456) == "12.3456"


class TestPasswordRules:
    def test_valid_password(self):
        assert check_password_rules("Senha@123") is None

    @pytest.mark.parametrize(
        "password, fragment",
        [
            ("Ab@1", "no mínimo 8 caracteres"),
            ("12345678@", "ao menos uma letra"),
            ("senha@123", "letra maiúscula"),
            ("Senha@abc", "ao menos um número"),
            ("Senha1234", "ao menos um símbolo"),
        ],
    )
    def test_first_violated_rule(self, password, fragment):
        message = check_password_rules(password)
        assert message is not None
        assert fragment in message

    def test_accented_letters_count_as_letters(self):
        assert remove_accents("Ção") == "Cao"
        assert check_password_rules("Ção@12345") is None
