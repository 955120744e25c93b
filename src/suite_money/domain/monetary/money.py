from __future__ import annotations

from decimal import Decimal

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import currency_from_code
from suite_money.domain.monetary.errors import DifferentCurrenciesError, InvalidCurrencyScaleError
from suite_money.domain.monetary.protocol import Monetary
from suite_money.utils import decimal_tools


class Money:
    """Represents an immutable monetary amount with currency.

    Uses Python's Decimal for precision arithmetic. The amount never has more fraction
    digits than its currency allows; this is checked when an instance is created, and every
    arithmetic result is created through the same check.

    Only `divide` rounds (down, to the currency's fraction digits). `add`, `subtract` and
    `multiply` keep their natural result scale, so a product with too many fraction digits
    raises `InvalidCurrencyScaleError`.
    """

    __slots__ = ("_amount", "_currency")

    # region Init

    def __init__(self, amount: Decimal, currency: Currency):
        """Initialize Money with amount and currency.

        Args:
            amount: Finite Decimal amount. It is stored as given.
            currency (Currency): Currency object.

        Raises:
            TypeError: If $amount is not Decimal or $currency is not Currency instance.
            ValueError: If $amount is not finite.
            InvalidCurrencyScaleError: If $amount has more fraction digits than $currency allows.
        """
        # Raise: $amount must be a Decimal
        if not isinstance(amount, Decimal):
            raise TypeError(f"$amount must be a Decimal instance, but provided value is: {amount!r}")

        # Raise: $currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        # Raise: scale after a neutral multiply must fit the currency
        effective_scale = decimal_tools.get_scale(decimal_tools.multiply(amount, decimal_tools.ONE))
        if effective_scale > currency.fraction_digits:
            raise InvalidCurrencyScaleError(amount, effective_scale, currency.code, currency.fraction_digits)

        self._amount = amount
        self._currency = currency

    @classmethod
    def from_decimal(cls, amount: Decimal, currency: Currency) -> Money:
        """Create Money from an already-built Decimal and Currency."""
        return cls(amount, currency)

    @classmethod
    def from_float(cls, value: float, currency_code: str) -> Money:
        """Create Money from a float like 100.12 and a currency code like 'USD'.

        The float is converted through its shortest representation, so 100.12 keeps
        2 fraction digits and 100.0 has none.

        Raises:
            UnknownCurrencyError: If $currency_code is not registered.
            TypeError: If $value is a bool or not a number.
            ValueError: If $value is not finite.
            InvalidCurrencyScaleError: If $value has more fraction digits than the currency allows.
        """
        currency = currency_from_code(currency_code)
        amount = decimal_tools.decimal_from_float(value)
        return cls(amount, currency)

    @classmethod
    def from_str(cls, value: str, currency_code: str) -> Money:
        """Create Money from a decimal string like '100.12' and a currency code like 'USD'.

        Raises:
            UnknownCurrencyError: If $currency_code is not registered.
            ValueError: If $value is not a decimal literal.
            InvalidCurrencyScaleError: If $value has more fraction digits than the currency allows.
        """
        currency = currency_from_code(currency_code)
        amount = decimal_tools.decimal_from_str(value)
        return cls(amount, currency)

    # endregion

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def is_zero(self) -> bool:
        return self._amount.is_zero()

    @property
    def is_positive(self) -> bool:
        return self._amount > 0

    @property
    def is_negative(self) -> bool:
        return self._amount < 0

    # endregion

    # region Arithmetic

    def add(self, addend: Monetary) -> Money:
        """Return a new Money with the sum of both amounts.

        Raises:
            DifferentCurrenciesError: If currencies don't match.
            InvalidCurrencyScaleError: If the sum does not fit the currency's fraction digits.
        """
        self._check_same_currency(addend)
        result = decimal_tools.add(self._amount, addend.amount)
        return self._from_result(result)

    def subtract(self, subtrahend: Monetary) -> Money:
        """Return a new Money with $subtrahend's amount subtracted.

        Raises:
            DifferentCurrenciesError: If currencies don't match.
            InvalidCurrencyScaleError: If the difference does not fit the currency's fraction digits.
        """
        self._check_same_currency(subtrahend)
        result = decimal_tools.subtract(self._amount, subtrahend.amount)
        return self._from_result(result)

    def multiply(self, multiplier: Monetary) -> Money:
        """Return a new Money with the product of both amounts.

        The product's scale is the sum of the operands' scales and is not rounded.

        Raises:
            DifferentCurrenciesError: If currencies don't match.
            InvalidCurrencyScaleError: If the product has more fraction digits than the currency allows.
        """
        self._check_same_currency(multiplier)
        result = decimal_tools.multiply(self._amount, multiplier.amount)
        return self._from_result(result)

    def divide(self, divisor: Monetary) -> Money:
        """Return a new Money with the quotient, rounded down to the currency's fraction digits.

        Raises:
            DifferentCurrenciesError: If currencies don't match.
            ZeroDivisionError: If $divisor's amount is zero.
        """
        self._check_same_currency(divisor)
        quotient = decimal_tools.divide(self._amount, divisor.amount, self._currency.fraction_digits)
        result = decimal_tools.with_scale(quotient, self._currency.fraction_digits)
        return self._from_result(result)

    def _check_same_currency(self, other: Monetary) -> None:
        """Check that $other is Monetary and has the same currency code.

        Raises:
            TypeError: If $other is not Monetary.
            DifferentCurrenciesError: If currency codes don't match.
        """
        # Raise: $other must expose amount and currency
        if not isinstance(other, Monetary):
            raise TypeError(f"$other must be a Monetary instance, but provided value is: {other!r}")

        # Raise: both operands must be in the same currency
        if self._currency.code != other.currency.code:
            raise DifferentCurrenciesError(self._currency.code, other.currency.code)

    def _from_result(self, result: Decimal) -> Money:
        # Round-trip through the canonical string and the validating constructor
        amount = decimal_tools.decimal_from_str(str(result))
        return self.__class__(amount, self._currency)

    # endregion

    # region Operators

    def __add__(self, other):
        """Add two Monetary values (same currency)."""
        if not isinstance(other, Monetary):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Monetary values (same currency)."""
        if not isinstance(other, Monetary):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply two Monetary values (same currency)."""
        if not isinstance(other, Monetary):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        """Divide two Monetary values (same currency)."""
        if not isinstance(other, Monetary):
            return NotImplemented
        return self.divide(other)

    def __neg__(self):
        return self.__class__(self._amount.copy_negate(), self._currency)

    def __pos__(self):
        return self.__class__(self._amount, self._currency)

    def __abs__(self):
        return self.__class__(self._amount.copy_abs(), self._currency)

    # endregion

    # region Comparison

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        if self._currency != other.currency:
            return False
        return self._amount == other.amount

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency.code))

    def __lt__(self, other) -> bool:
        """Check if this Money is less than another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount < other.amount

    def __le__(self, other) -> bool:
        """Check if this Money is less than or equal to another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount <= other.amount

    def __gt__(self, other) -> bool:
        """Check if this Money is greater than another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount > other.amount

    def __ge__(self, other) -> bool:
        """Check if this Money is greater than or equal to another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount >= other.amount

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self._amount} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    # endregion
