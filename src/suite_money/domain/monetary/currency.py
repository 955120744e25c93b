from __future__ import annotations


class Currency:
    """Represents a currency with code, allowed fraction digits, and name.

    Instances are immutable. Two currencies are equal when their codes are equal.

    Attributes:
        code (str): ISO 4217 alphabetic code (e.g., "USD", "JPY").
        fraction_digits (int): Maximum count of digits allowed after the decimal point (0-18).
        name (str): Full currency name.
    """

    MAX_FRACTION_DIGITS = 18

    __slots__ = ("_code", "_fraction_digits", "_name")

    def __init__(self, code: str, fraction_digits: int, name: str):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "BRL").
            fraction_digits (int): Number of allowed decimal places.
            name (str): Full currency name.

        Raises:
            ValueError: If parameters are invalid.
        """
        # Raise: $code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        # Raise: $fraction_digits must be an int in the allowed range (bool is rejected too)
        if not isinstance(fraction_digits, int) or isinstance(fraction_digits, bool) or not 0 <= fraction_digits <= self.MAX_FRACTION_DIGITS:
            raise ValueError(f"$fraction_digits must be an integer between 0 and {self.MAX_FRACTION_DIGITS}, but provided value is: {fraction_digits}")

        # Raise: $name must be a non-empty string
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        self._code = code.upper().strip()
        self._fraction_digits = fraction_digits
        self._name = name.strip()

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def fraction_digits(self) -> int:
        """Get the maximum number of fraction digits."""
        return self._fraction_digits

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.fraction_digits}, '{self.name}')"
