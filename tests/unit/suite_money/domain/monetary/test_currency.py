import pytest

from suite_money.domain.monetary.currency import Currency


def test_currency_construction_normalizes_values():
    currency = Currency(" usd ", 2, " US Dollar ")

    assert currency.code == "USD"
    assert currency.fraction_digits == 2
    assert currency.name == "US Dollar"


@pytest.mark.parametrize(
    "code, fraction_digits, name",
    [
        ("", 2, "Empty code"),
        ("USD", -1, "Negative digits"),
        ("USD", 19, "Too many digits"),
        ("USD", 2.0, "Float digits"),
        ("USD", True, "Bool digits"),
        ("USD", 2, "  "),
    ],
)
def test_currency_rejects_invalid_parameters(code, fraction_digits, name):
    with pytest.raises(ValueError):
        Currency(code, fraction_digits, name)


def test_currency_equality_is_by_code():
    assert Currency("BRL", 2, "Brazilian Real") == Currency("brl", 2, "Real")
    assert hash(Currency("BRL", 2, "Brazilian Real")) == hash(Currency("brl", 2, "Real"))
    assert Currency("BRL", 2, "Brazilian Real") != Currency("USD", 2, "US Dollar")
    assert Currency("BRL", 2, "Brazilian Real") != "BRL"


def test_currency_is_read_only():
    currency = Currency("EUR", 2, "Euro")

    with pytest.raises(AttributeError):
        currency.fraction_digits = 4


def test_currency_string_representations():
    currency = Currency("JPY", 0, "Yen")

    assert str(currency) == "JPY"
    assert repr(currency) == "Currency('JPY', 0, 'Yen')"
