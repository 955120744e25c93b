__version__ = "0.0.1"

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import UnknownCurrencyError, currency_from_code
from suite_money.domain.monetary.discounted_money import DiscountedMoney
from suite_money.domain.monetary.errors import DifferentCurrenciesError, InvalidCurrencyScaleError
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.protocol import Monetary

__all__ = [
    "Currency",
    "DifferentCurrenciesError",
    "DiscountedMoney",
    "InvalidCurrencyScaleError",
    "Monetary",
    "Money",
    "UnknownCurrencyError",
    "currency_from_code",
]
