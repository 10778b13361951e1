"""Structured error taxonomy for pricing, ledger and statement failures."""

from __future__ import annotations


class VideoStoreError(Exception):
    """Base class for all videostore domain exceptions."""

    def __init__(self, error_code: str, category: str, explanation: str):
        self.error_code = error_code
        self.category = category
        self.explanation = explanation
        super().__init__(f"[{self.category}:{self.error_code}] {self.explanation}")


class InvalidCategoryError(VideoStoreError, ValueError):
    def __init__(self, explanation: str):
        super().__init__("INVALID_CATEGORY", "PRICING", explanation)


class InvalidRentalDurationError(VideoStoreError, ValueError):
    def __init__(self, explanation: str):
        super().__init__("INVALID_DURATION", "PRICING", explanation)


class UnknownStatementFormatError(VideoStoreError):
    def __init__(self, explanation: str):
        super().__init__("UNKNOWN_FORMAT", "STATEMENT", explanation)


class RentalDocumentError(VideoStoreError):
    """Raised when a rental document does not match the expected shape."""

    def __init__(self, explanation: str):
        super().__init__("RENTAL_DOCUMENT", "INPUT", explanation)
