"""Exception hierarchy for research-digest."""


class DigestError(Exception):
    """Base exception for all research-digest errors."""


class InvalidDocumentError(DigestError, TypeError):
    """Raised when the document handed to the summarizer is not a ``str``."""


class InvalidBudgetError(DigestError, ValueError):
    """Raised when a summary length budget is negative or not an integer."""


class SummaryWriteError(DigestError):
    """Raised when a summary cannot be written to disk."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path
