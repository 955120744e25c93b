from __future__ import annotations

from suite_money.domain.monetary.discounted_money import DiscountedMoney
from suite_money.domain.monetary.money import Money


def create_money(value: str, currency_code: str = "USD") -> Money:
    """Create Money from a decimal string, in USD unless $currency_code says otherwise."""
    return Money.from_str(value, currency_code)


def create_discounted_money(value: str, currency_code: str = "USD") -> DiscountedMoney:
    """Create DiscountedMoney from a decimal string, in USD unless $currency_code says otherwise."""
    return DiscountedMoney.from_str(value, currency_code)


def create_pair(left: str, right: str, currency_code: str = "USD") -> tuple[Money, Money]:
    """Create two Money operands in the same currency."""
    return create_money(left, currency_code), create_money(right, currency_code)
