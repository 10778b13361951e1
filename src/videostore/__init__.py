"""Rental charges, frequent renter points and customer statements."""

__version__ = "0.1.0"

from .errors import (  # noqa: E402
    InvalidCategoryError,
    InvalidRentalDurationError,
    RentalDocumentError,
    UnknownStatementFormatError,
    VideoStoreError,
)
from .models import Customer, Movie, Rental  # noqa: E402
from .pricing import PriceCategory, charge, frequent_renter_points, quote  # noqa: E402
from .statement import HtmlStatement, Statement, TextStatement, render_statement  # noqa: E402

__all__ = [
    "__version__",
    "Customer",
    "HtmlStatement",
    "InvalidCategoryError",
    "InvalidRentalDurationError",
    "Movie",
    "PriceCategory",
    "Rental",
    "RentalDocumentError",
    "Statement",
    "TextStatement",
    "UnknownStatementFormatError",
    "VideoStoreError",
    "charge",
    "frequent_renter_points",
    "quote",
    "render_statement",
]
