"""Build a ``Customer`` from a JSON rental document.

Document shape::

    {
      "name": "Curly",
      "rentals": [
        {"title": "Jaws", "category": "regular", "days_rented": 4}
      ]
    }

Rentals with the same title and category share one ``Movie``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Tuple

from .errors import RentalDocumentError
from .models import Customer, Movie
from .pricing import PriceCategory

logger = logging.getLogger(__name__)

_REQUIRED_RENTAL_FIELDS: tuple[str, ...] = ("title", "category", "days_rented")


def customer_from_dict(document: Dict[str, Any]) -> Customer:
    if not isinstance(document, dict):
        raise RentalDocumentError("Rental document must be a JSON object")
    name = document.get("name")
    if not isinstance(name, str) or not name.strip():
        raise RentalDocumentError("Rental document missing required string field 'name'")
    rentals = document.get("rentals", [])
    if not isinstance(rentals, list):
        actual = type(rentals).__name__
        raise RentalDocumentError(f"Invalid field 'rentals': expected list, got {actual}")

    customer = Customer(name)
    movies: Dict[Tuple[str, PriceCategory], Movie] = {}
    for index, entry in enumerate(rentals):
        if not isinstance(entry, dict):
            raise RentalDocumentError(f"Invalid rentals[{index}]: expected object, got {type(entry).__name__}")
        for field_name in _REQUIRED_RENTAL_FIELDS:
            if field_name not in entry:
                raise RentalDocumentError(f"rentals[{index}] missing required field '{field_name}'")
        title = entry["title"]
        if not isinstance(title, str) or not title.strip():
            raise RentalDocumentError(f"Invalid rentals[{index}].title: must be non-empty string")
        category = PriceCategory.parse(entry["category"])
        movie = movies.setdefault((title, category), Movie(title, category))
        customer.rent(movie, entry["days_rented"])

    logger.debug("Loaded %d rentals for %s", len(customer.rentals), customer.name)
    return customer


def load_customer(path: str) -> Customer:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            document = json.load(handle)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise RentalDocumentError(f"Rental document {path} is not valid UTF-8 JSON: {exc}") from exc
    return customer_from_dict(document)
