"""Customer statement rendering.

``Statement.value`` owns the traversal: header, one row per rental in
insertion order, footer. A format only supplies the three templates::

    class CsvStatement(Statement):
        def header_string(self, customer):
            return f"customer,{customer.name}\\n"

        def each_rental_string(self, rental):
            return f"{rental.movie.title},{format_amount(rental.charge)}\\n"

        def footer_string(self, customer):
            return f"total,{format_amount(customer.total_charge())}"

    register_statement_format("csv", CsvStatement)
"""

from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Type, Union

from .errors import UnknownStatementFormatError

if TYPE_CHECKING:
    from .models import Customer, Rental

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_STATEMENT_FORMAT",
    "HtmlStatement",
    "Statement",
    "TextStatement",
    "available_formats",
    "format_amount",
    "get_statement",
    "register_statement_format",
    "render_statement",
]


def format_amount(value: float) -> str:
    """Locale-independent shortest float text with at least one decimal: ``0.0``, ``4.5``.

    Amounts of 1e16 and above switch to exponent notation (``1e+16``); smaller
    amounts always print in plain positional form, e.g. ``12000000.0``.
    """
    return repr(float(value))


class Statement(ABC):
    def value(self, customer: "Customer") -> str:
        rows = [self.each_rental_string(rental) for rental in customer.rentals]
        logger.debug("Rendering %s for %s with %d rows", type(self).__name__, customer.name, len(rows))
        return self.header_string(customer) + "".join(rows) + self.footer_string(customer)

    @abstractmethod
    def header_string(self, customer: "Customer") -> str:
        raise NotImplementedError

    @abstractmethod
    def each_rental_string(self, rental: "Rental") -> str:
        raise NotImplementedError

    @abstractmethod
    def footer_string(self, customer: "Customer") -> str:
        raise NotImplementedError


class TextStatement(Statement):
    def header_string(self, customer: "Customer") -> str:
        return f"Rental Record for {customer.name}\n"

    def each_rental_string(self, rental: "Rental") -> str:
        return f"\t{rental.movie.title}\t{format_amount(rental.charge)}\n"

    def footer_string(self, customer: "Customer") -> str:
        return (
            f"Amount owed is {format_amount(customer.total_charge())}\n"
            f"You earned {customer.total_frequent_renter_points()} frequent renter points"
        )


class HtmlStatement(Statement):
    """HTML statement built from upper-case tag templates.

    Names and titles are HTML-escaped, so ``Tom & Jerry`` renders as
    ``Tom &amp; Jerry`` rather than being spliced into the markup verbatim.
    Text without ``&``, ``<`` or ``>`` renders unchanged.
    """

    def header_string(self, customer: "Customer") -> str:
        return f"<H1>Rentals for <EM>{html.escape(customer.name, quote=False)}</EM></H1><P>\n"

    def each_rental_string(self, rental: "Rental") -> str:
        return f"{html.escape(rental.movie.title, quote=False)}: {format_amount(rental.charge)}<BR>\n"

    def footer_string(self, customer: "Customer") -> str:
        return (
            f"<P>You owe <EM>{format_amount(customer.total_charge())}</EM><P>\n"
            f"On this rental you earned <EM>{customer.total_frequent_renter_points()}</EM>"
            " frequent renter points<P>"
        )


DEFAULT_STATEMENT_FORMAT = "text"

_FORMATS: Dict[str, Type[Statement]] = {
    "text": TextStatement,
    "html": HtmlStatement,
}


def register_statement_format(name: str, statement_cls: Type[Statement]) -> None:
    if not isinstance(statement_cls, type) or not issubclass(statement_cls, Statement):
        raise TypeError(f"Statement format '{name}' must be a Statement subclass")
    _FORMATS[name.strip().lower()] = statement_cls


def available_formats() -> List[str]:
    return sorted(_FORMATS)


def get_statement(name: str) -> Statement:
    statement_cls = _FORMATS.get(name.strip().lower())
    if statement_cls is None:
        raise UnknownStatementFormatError(
            f"Unknown statement format '{name}'. Available formats: {', '.join(available_formats())}"
        )
    return statement_cls()


def render_statement(customer: "Customer", fmt: Union[str, Statement, None] = None) -> str:
    if isinstance(fmt, Statement):
        return fmt.value(customer)
    return get_statement(fmt or DEFAULT_STATEMENT_FORMAT).value(customer)
