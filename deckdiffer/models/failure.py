"""
Failure classification for API responses.

Known failures carry a kind, a user-appropriate message and an optional
suggestion. They are raised from services and converted to HTTP responses
by the exception handler registered in `deckdiffer.main`.

Card lookup failures are NOT represented here: the metadata provider
absorbs them into neutral records and the comparison proceeds.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"
    MISSING_REQUIRED = "missing_required"

    # Resource failures
    NOT_FOUND = "not_found"

    # Service failures
    EXTERNAL_API_ERROR = "external_api_error"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a response body."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class EmptyDecklistError(KnownError):
    """Raised when a decklist to compare is missing or blank."""

    def __init__(self, deck_label: str):
        self.deck_label = deck_label
        super().__init__(
            kind=FailureKind.MISSING_REQUIRED,
            message=f"{deck_label} is empty. Please enter both deck lists.",
            suggestion="Paste one card per line, e.g. '4 Lightning Bolt'.",
            status_code=400,
        )


class ComparisonNotFoundError(KnownError):
    """Raised when a download refers to an unknown comparison or file."""

    def __init__(self, comparison_id: str, file_name: str):
        self.comparison_id = comparison_id
        self.file_name = file_name
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message="File Not Found",
            detail=f"No file '{file_name}' for comparison '{comparison_id}'",
            suggestion="Run the comparison again to regenerate downloads.",
            status_code=404,
        )
