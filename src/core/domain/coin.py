"""
Coin — номиналы монет

Перечисление монет и их стоимость в центах.
"""

from enum import Enum
from typing import Final


class Coin(str, Enum):
    """Монета"""

    PENNY = "penny"
    NICKEL = "nickel"
    DIME = "dime"
    QUARTER = "quarter"

    @property
    def cents(self) -> int:
        """Стоимость монеты в центах."""
        return COIN_VALUES_CENTS[self]


# Номинал каждой монеты (центы)
COIN_VALUES_CENTS: Final[dict[Coin, int]] = {
    Coin.PENNY: 1,
    Coin.NICKEL: 5,
    Coin.DIME: 10,
    Coin.QUARTER: 25,
}


def value_in_cents(coin: Coin) -> int:
    """
    Стоимость монеты в центах.

    Examples:
        >>> value_in_cents(Coin.DIME)
        10
    """
    return COIN_VALUES_CENTS[Coin(coin)]
