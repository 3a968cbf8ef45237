"""Exception hierarchy for the e2e toolkit."""
from typing import Optional


class E2EKitError(Exception):
    """Base error for all toolkit failures."""


class PageOutOfRangeError(E2EKitError, IndexError):
    """A page index outside the document was requested."""

    def __init__(self, page_number: int, page_count: int):
        self.page_number = page_number
        self.page_count = page_count
        super().__init__(
            f"Page {page_number} is out of range: valid pages are "
            f"[0, {page_count - 1}]"
        )

    @property
    def bounds(self) -> tuple[int, int]:
        """Inclusive valid interval (empty documents give (0, -1))."""
        return 0, self.page_count - 1


class InvalidPatternError(E2EKitError, ValueError):
    """A keyword search pattern failed to compile."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid keyword pattern {pattern!r}: {reason}")


class PdfExtractionError(E2EKitError):
    """The raw extractor could not read a PDF."""


class ConfigError(E2EKitError):
    """The persisted configuration could not be loaded or saved."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
