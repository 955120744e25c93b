from __future__ import annotations

import logging
from decimal import Decimal

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.protocol import Monetary
from suite_money.utils import decimal_tools

logger = logging.getLogger(__name__)

_ONE_HUNDRED = Decimal(100)


class DiscountedMoney:
    """Money that can have a percentage discount applied.

    Wraps a `Money` instead of inheriting from it. Construction and arithmetic are delegated
    to the wrapped `Money`, so the same scale and currency checks apply. Because currencies
    are compared by code, `DiscountedMoney` and `Money` can be mixed as operands either way
    round: `money.add(discounted)` returns `Money` and `discounted.add(money)` returns
    `DiscountedMoney`.

    Attributes:
        money (Money): The wrapped value.
    """

    __slots__ = ("_money",)

    def __init__(self, money: Money):
        # Raise: $money must be a Money instance
        if not isinstance(money, Money):
            raise TypeError(f"$money must be a Money instance, but provided value is: {money!r}")

        self._money = money

    @classmethod
    def from_decimal(cls, amount: Decimal, currency: Currency) -> DiscountedMoney:
        return cls(Money.from_decimal(amount, currency))

    @classmethod
    def from_float(cls, value: float, currency_code: str) -> DiscountedMoney:
        return cls(Money.from_float(value, currency_code))

    @classmethod
    def from_str(cls, value: str, currency_code: str) -> DiscountedMoney:
        return cls(Money.from_str(value, currency_code))

    @property
    def money(self) -> Money:
        return self._money

    @property
    def amount(self) -> Decimal:
        return self._money.amount

    @property
    def currency(self) -> Currency:
        return self._money.currency

    def apply_discount(self, discount_percentage: float) -> DiscountedMoney:
        """Return a new DiscountedMoney reduced by $discount_percentage percent.

        The amount is multiplied by `1 - discount_percentage / 100` without rounding, so
        the result must still fit the currency's fraction digits.

        Args:
            discount_percentage: Discount in percent, from 0 to 100 (e.g. 10.0 for 10%).

        Returns:
            DiscountedMoney: New instance in the same currency.

        Raises:
            ValueError: If $discount_percentage is outside [0, 100].
            InvalidCurrencyScaleError: If the discounted amount has too many fraction digits.
        """
        # Raise: $discount_percentage must be within [0, 100]
        if not 0 <= discount_percentage <= 100:
            raise ValueError(f"$discount_percentage must be between 0 and 100, but provided value is: {discount_percentage}")

        percentage = decimal_tools.as_decimal(discount_percentage)
        # p / 100 terminates within two more fraction digits than p has
        discount_rate = decimal_tools.divide(percentage, _ONE_HUNDRED, decimal_tools.get_scale(percentage) + 2)
        discount_factor = decimal_tools.subtract(decimal_tools.ONE, discount_rate)
        discounted_amount = decimal_tools.multiply(self.amount, discount_factor)

        result = DiscountedMoney(Money(decimal_tools.decimal_from_str(str(discounted_amount)), self.currency))
        logger.debug(f"Applied discount {discount_percentage}% to {self._money}, result is {result.money}")
        return result

    # region Arithmetic

    def add(self, addend: Monetary) -> DiscountedMoney:
        return DiscountedMoney(self._money.add(addend))

    def subtract(self, subtrahend: Monetary) -> DiscountedMoney:
        return DiscountedMoney(self._money.subtract(subtrahend))

    def multiply(self, multiplier: Monetary) -> DiscountedMoney:
        return DiscountedMoney(self._money.multiply(multiplier))

    def divide(self, divisor: Monetary) -> DiscountedMoney:
        return DiscountedMoney(self._money.divide(divisor))

    def __add__(self, other):
        if not isinstance(other, Monetary):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Monetary):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, Monetary):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, Monetary):
            return NotImplemented
        return self.divide(other)

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, DiscountedMoney):
            return False
        return self._money == other.money

    def __hash__(self) -> int:
        return hash(self._money)

    def __str__(self) -> str:
        return str(self._money)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.amount}, {self.currency.code})"
