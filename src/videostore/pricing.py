"""Pricing policy: rental charge and frequent renter points per price category.

Every function here is pure. Charge and points depend only on the
``(category, days_rented)`` pair, never on the customer or on other rentals.

Durations below one day are rejected with ``InvalidRentalDurationError`` for
every category.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import InvalidCategoryError, InvalidRentalDurationError

__all__ = [
    "PRICE_RULES",
    "PriceCategory",
    "PriceRule",
    "Quote",
    "charge",
    "frequent_renter_points",
    "quote",
    "validate_days_rented",
]


class PriceCategory(enum.Enum):
    REGULAR = "regular"
    NEW_RELEASE = "new_release"
    CHILDREN = "children"

    @classmethod
    def parse(cls, value: Any) -> "PriceCategory":
        """Resolve a member from a member, its value or its name.

        ``"New Release"``, ``"new-release"`` and ``"NEW_RELEASE"`` all map to
        ``NEW_RELEASE``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            for member in cls:
                if normalized == member.value:
                    return member
        raise InvalidCategoryError(f"Unknown price category: {value!r}")


@dataclass(frozen=True)
class PriceRule:
    """Tiered charge plus a flat point award.

    The first ``included_days`` cost ``base_charge`` in total; each day after
    that adds ``extra_day_charge``. One point is earned per rental, and one
    bonus point when the rental runs longer than ``bonus_after_days``.
    """

    base_charge: float
    included_days: int
    extra_day_charge: float
    bonus_after_days: Optional[int] = None

    def charge_for(self, days_rented: int) -> float:
        extra_days = max(0, days_rented - self.included_days)
        return self.base_charge + self.extra_day_charge * extra_days

    def points_for(self, days_rented: int) -> int:
        if self.bonus_after_days is not None and days_rented > self.bonus_after_days:
            return 2
        return 1


PRICE_RULES: Dict[PriceCategory, PriceRule] = {
    PriceCategory.REGULAR: PriceRule(base_charge=2.0, included_days=2, extra_day_charge=1.5),
    PriceCategory.NEW_RELEASE: PriceRule(base_charge=0.0, included_days=0, extra_day_charge=3.0, bonus_after_days=1),
    PriceCategory.CHILDREN: PriceRule(base_charge=1.5, included_days=3, extra_day_charge=1.5),
}


@dataclass(frozen=True)
class Quote:
    category: PriceCategory
    days_rented: int
    charge: float
    points: int


def validate_days_rented(days_rented: Any) -> int:
    """Return ``days_rented`` if it is a whole number of days >= 1.

    Raises:
        InvalidRentalDurationError: for booleans, non-integers and values below one.
    """

    if isinstance(days_rented, bool) or not isinstance(days_rented, int):
        raise InvalidRentalDurationError(
            f"Rental duration must be an integer number of days, got {type(days_rented).__name__}"
        )
    if days_rented < 1:
        raise InvalidRentalDurationError(f"Rental duration must be at least 1 day, got {days_rented}")
    return days_rented


def _rule_for(category: PriceCategory) -> PriceRule:
    rule = PRICE_RULES.get(category) if isinstance(category, PriceCategory) else None
    if rule is None:
        raise InvalidCategoryError(f"No price rule configured for category {category!r}")
    return rule


def charge(category: PriceCategory, days_rented: int) -> float:
    days_rented = validate_days_rented(days_rented)
    return _rule_for(category).charge_for(days_rented)


def frequent_renter_points(category: PriceCategory, days_rented: int) -> int:
    days_rented = validate_days_rented(days_rented)
    return _rule_for(category).points_for(days_rented)


def quote(category: PriceCategory, days_rented: int) -> Quote:
    """Price a single rental without building a ``Rental``."""
    return Quote(
        category=category,
        days_rented=days_rented,
        charge=charge(category, days_rented),
        points=frequent_renter_points(category, days_rented),
    )
