from decimal import Decimal

import pytest

from suite_money.domain.monetary.currency_registry import USD
from suite_money.domain.monetary.discounted_money import DiscountedMoney
from suite_money.domain.monetary.errors import DifferentCurrenciesError, InvalidCurrencyScaleError
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.protocol import Monetary
from tests.helpers.test_assistant import TEST_ASSISTANT as TST


def test_apply_discount():
    money = DiscountedMoney.from_float(100.00, "USD")

    actual = money.apply_discount(10.00)

    assert isinstance(actual, DiscountedMoney)
    assert str(actual.amount) == "90.0"
    assert actual.currency.code == "USD"


@pytest.mark.parametrize(
    "value, discount_percentage, expected",
    [
        ("80", 25, "60.00"),
        ("19.99", 0, "19.99"),
        ("50", 7, "46.50"),
        ("100", 100, "0"),
    ],
)
def test_apply_discount_values(value, discount_percentage, expected):
    actual = TST.money.create_discounted_money(value).apply_discount(discount_percentage)

    assert str(actual.amount) == expected


def test_apply_discount_keeps_original_unchanged():
    money = TST.money.create_discounted_money("80")

    money.apply_discount(25)

    assert str(money.amount) == "80"


def test_apply_discount_overflowing_scale():
    money = TST.money.create_discounted_money("200.05")

    with pytest.raises(InvalidCurrencyScaleError) as exc_info:
        money.apply_discount(10)

    assert exc_info.value.scale == 3
    assert exc_info.value.amount == Decimal("180.045")


@pytest.mark.parametrize("discount_percentage", [-1, 100.5, float("nan")])
def test_apply_discount_out_of_range(discount_percentage):
    with pytest.raises(ValueError):
        TST.money.create_discounted_money("10.00").apply_discount(discount_percentage)


def test_operation_between_money_and_discounted_money():
    money = Money.from_float(200.05, "USD")
    discounted_money = DiscountedMoney.from_float(100.05, "USD")

    actual = money.add(discounted_money)

    assert type(actual) is Money
    assert float(actual.amount) == 300.10
    assert str(actual.amount) == "300.10"
    assert actual.currency.code == "USD"


def test_operation_between_discounted_money_and_money():
    discounted_money = TST.money.create_discounted_money("100.05")
    money = TST.money.create_money("200.05")

    actual = discounted_money.add(money)

    assert type(actual) is DiscountedMoney
    assert str(actual.amount) == "300.10"


def test_arithmetic_delegates_to_money():
    left = TST.money.create_discounted_money("8.99")
    right = TST.money.create_money("5")

    assert left.subtract(right).money == left.money.subtract(right)
    assert left.multiply(right).money == left.money.multiply(right)
    assert left.divide(right).money == left.money.divide(right)


def test_different_currencies():
    discounted_money = TST.money.create_discounted_money("1.00", "USD")
    money = TST.money.create_money("1.00", "EUR")

    with pytest.raises(DifferentCurrenciesError) as exc_info:
        discounted_money.add(money)

    assert exc_info.value.currency_code_one == "USD"
    assert exc_info.value.currency_code_two == "EUR"

    with pytest.raises(DifferentCurrenciesError) as exc_info:
        money.add(discounted_money)

    assert exc_info.value.currency_code_one == "EUR"
    assert exc_info.value.currency_code_two == "USD"


def test_scale_is_validated_on_construction():
    with pytest.raises(InvalidCurrencyScaleError):
        DiscountedMoney.from_decimal(Decimal("1.001"), USD)


def test_is_monetary_but_not_money():
    discounted_money = TST.money.create_discounted_money("1.00")

    assert isinstance(discounted_money, Monetary)
    assert not isinstance(discounted_money, Money)


def test_requires_money():
    with pytest.raises(TypeError):
        DiscountedMoney(Decimal("1.00"))


def test_equality_and_representations():
    discounted_money = TST.money.create_discounted_money("1.50")

    assert discounted_money == TST.money.create_discounted_money("1.5")
    assert hash(discounted_money) == hash(TST.money.create_discounted_money("1.5"))
    assert str(discounted_money) == "1.50 USD"
    assert repr(discounted_money) == "DiscountedMoney(1.50, USD)"


def test_operators_with_money_operand():
    discounted_money = TST.money.create_discounted_money("1.50")
    money = TST.money.create_money("2")

    total = discounted_money + money

    assert type(total) is DiscountedMoney
    assert str(total.amount) == "3.50"
    assert discounted_money - money == discounted_money.subtract(money)
    assert discounted_money * money == discounted_money.multiply(money)
    assert discounted_money / money == discounted_money.divide(money)


def test_money_operator_with_discounted_money_operand():
    money = TST.money.create_money("200.05")
    discounted_money = TST.money.create_discounted_money("100.05")

    total = money + discounted_money

    assert type(total) is Money
    assert str(total.amount) == "300.10"


def test_operators_reject_plain_numbers():
    discounted_money = TST.money.create_discounted_money("1.00")

    with pytest.raises(TypeError):
        discounted_money + 1
    with pytest.raises(TypeError):
        discounted_money * Decimal("2")


def test_apply_discount_to_long_amount():
    actual = TST.money.create_discounted_money("1" * 30 + ".00", "TND").apply_discount(50)

    assert str(actual.amount) == "5" * 29 + ".500"
