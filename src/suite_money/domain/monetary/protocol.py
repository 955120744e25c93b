from __future__ import annotations

from decimal import Decimal
from typing import Protocol, runtime_checkable

from suite_money.domain.monetary.currency import Currency


# region Interface


@runtime_checkable
class Monetary(Protocol):
    """Anything that carries an amount bound to a currency.

    `Money` accepts any `Monetary` as the other operand of its arithmetic, so wrappers
    like `DiscountedMoney` interoperate with `Money` without inheriting from it.
    """

    @property
    def amount(self) -> Decimal:
        """The decimal amount."""
        ...

    @property
    def currency(self) -> Currency:
        """The currency the amount is expressed in."""
        ...


# endregion
