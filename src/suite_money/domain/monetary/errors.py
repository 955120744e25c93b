"""Errors raised by monetary values.

Both errors subclass `ValueError` and keep their inputs as attributes, so callers can
inspect the offending values instead of parsing the message.
"""

from __future__ import annotations

from decimal import Decimal


class InvalidCurrencyScaleError(ValueError):
    """Raised when an amount has more fraction digits than its currency allows."""

    def __init__(self, amount: Decimal, scale: int, currency_code: str, fraction_digits: int):
        self.amount = amount
        self.scale = scale
        self.currency_code = currency_code
        self.fraction_digits = fraction_digits

        message = f"The decimal scale <{scale}> provided for currency <{currency_code}> is invalid. "
        message += f"The scale must be less than or equal to <{fraction_digits}>."

        super().__init__(message)


class DifferentCurrenciesError(ValueError):
    """Raised when a binary operation gets operands in two different currencies.

    Codes are kept in operand order: the left operand's currency first.
    """

    def __init__(self, currency_code_one: str, currency_code_two: str):
        self.currency_code_one = currency_code_one
        self.currency_code_two = currency_code_two

        message = f"Currencies <{currency_code_one}> and <{currency_code_two}> are different. "
        message += "The currencies must be the same to perform this operation."

        super().__init__(message)
