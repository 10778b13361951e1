"""Movies, rentals and the customer ledger."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from .pricing import PriceCategory, charge, frequent_renter_points, validate_days_rented
from .statement import Statement, render_statement

logger = logging.getLogger(__name__)

__all__ = ["Customer", "Movie", "Rental"]


@dataclass(frozen=True)
class Movie:
    title: str
    category: PriceCategory

    def __post_init__(self) -> None:
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("Movie title must be a non-empty string")
        object.__setattr__(self, "category", PriceCategory.parse(self.category))


@dataclass(frozen=True)
class Rental:
    """One movie rented for a whole number of days.

    Invariant:
    - ``days_rented`` is at least 1; construction fails otherwise.
    """

    movie: Movie
    days_rented: int

    def __post_init__(self) -> None:
        if not isinstance(self.movie, Movie):
            raise TypeError(f"Rental movie must be a Movie, got {type(self.movie).__name__}")
        validate_days_rented(self.days_rented)

    @property
    def charge(self) -> float:
        return charge(self.movie.category, self.days_rented)

    @property
    def frequent_renter_points(self) -> int:
        return frequent_renter_points(self.movie.category, self.days_rented)


@dataclass
class Customer:
    """A customer and the ordered rentals charged to them.

    Rentals are append-only and keep insertion order, which is the row order
    of every statement. Totals are recomputed on each call.

    Instances are not thread-safe; callers sharing one across threads must
    serialize ``add_rental`` against reads and rendering.
    """

    name: str
    _rentals: List[Rental] = field(default_factory=list, init=False, repr=False)

    @property
    def rentals(self) -> Tuple[Rental, ...]:
        return tuple(self._rentals)

    def add_rental(self, rental: Rental) -> None:
        if not isinstance(rental, Rental):
            raise TypeError(f"Expected a Rental, got {type(rental).__name__}")
        self._rentals.append(rental)
        logger.debug(
            "Added rental of %r (%s, %d days) for %s",
            rental.movie.title,
            rental.movie.category.value,
            rental.days_rented,
            self.name,
        )

    def rent(self, movie: Movie, days_rented: int) -> Rental:
        rental = Rental(movie, days_rented)
        self.add_rental(rental)
        return rental

    def total_charge(self) -> float:
        return sum((rental.charge for rental in self._rentals), 0.0)

    def total_frequent_renter_points(self) -> int:
        return sum(rental.frequent_renter_points for rental in self._rentals)

    def statement(self, fmt: Union[str, Statement, None] = None) -> str:
        """Render a statement; ``fmt`` defaults to the plain text format."""
        return render_statement(self, fmt)

    def html_statement(self) -> str:
        return render_statement(self, "html")
