"""
Fee and discount strategies (Strategy pattern).

The processor holds a `FeeStrategy` and a `DiscountStrategy` (both Protocols)
and delegates `calculate_fees()` / `apply_discount()` to them. To change the
fee schedule or add a tier, implement the protocol and inject it.

Both strategies are pure functions of their inputs: no I/O, no clock.
Plain float arithmetic is used; currency rounding is left to the caller.
"""

from typing import Protocol


class FeeStrategy(Protocol):
    """Interface for computing the processing fee of a payment."""

    def fee(self, amount: float) -> float: ...


class DiscountStrategy(Protocol):
    """Interface for applying a customer-tier discount to an amount."""

    def apply(self, amount: float, tier: str) -> float: ...


class StandardFeeStrategy:
    """Card-network style fee: 2.9% of the amount plus a fixed 30 cents.

    Examples:
        - 100.00 -> 3.20
        - 10.00  -> 0.59
    """

    PERCENT_RATE: float = 0.029
    FIXED_FEE: float = 0.30

    def fee(self, amount: float) -> float:
        return (amount * self.PERCENT_RATE) + self.FIXED_FEE


class TierDiscountStrategy:
    """Loyalty-tier discount.

    Examples:
        - gold,   100.00 -> 95.00
        - silver, 100.00 -> 97.00
        - none,   100.00 -> 100.00
    """

    MULTIPLIERS: dict[str, float] = {
        "gold": 0.95,    # 5% off
        "silver": 0.97,  # 3% off
        "bronze": 0.99,  # 1% off
    }

    def multiplier(self, tier: str) -> float:
        return self.MULTIPLIERS.get(tier, 1.0)

    def apply(self, amount: float, tier: str) -> float:
        return amount * self.multiplier(tier)
