"""
Failure Explanation Envelope: Unified Response Classification.

This module defines the response envelope that the API uses to communicate
outcomes, and the exceptions that map onto it. Every user-visible failure
must be classified and explained.

INVARIANT: No raw 500 errors may reach the client.

Response types:
- Success: Operation completed successfully
- Refusal: System chose not to proceed (expected, explainable)
- KnownFailure: System knows why it failed (e.g. a malformed SKU)
- UnknownFailure: System does not know why it failed

AUTHORITY BOUNDARY:
All user-visible responses MUST pass through `finalize_response()`.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # SKU grammar failures
    INSUFFICIENT_FIELDS = "insufficient_fields"
    EMPTY_FIELD = "empty_field"
    INVALID_DEFINDEX = "invalid_defindex"
    INVALID_QUALITY = "invalid_quality"
    UNKNOWN_ATTRIBUTE = "unknown_attribute"
    DUPLICATE_ATTRIBUTE = "duplicate_attribute"
    INVALID_ATTRIBUTE_VALUE = "invalid_attribute_value"
    ATTRIBUTE_LIMIT_EXCEEDED = "attribute_limit_exceeded"

    # Constraint violations
    BATCH_TOO_LARGE = "batch_too_large"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    REFUSAL = "refusal"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


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


class ApiResponse(BaseModel, Generic[T]):
    """
    Universal response envelope for API endpoints.

    Every response is classified into one of four outcome types,
    ensuring no failure reaches the user unexplained.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    @classmethod
    def success(cls, data: T) -> "ApiResponse[T]":
        """Create a success response."""
        return cls(outcome=OutcomeType.SUCCESS, data=data)

    @classmethod
    def refusal(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a refusal response.

        Use when the system chose not to proceed due to a constraint.
        Example: A batch larger than the configured limit.
        """
        return cls(
            outcome=OutcomeType.REFUSAL,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a known failure response.

        Use when the system knows exactly why the operation failed.
        Example: A SKU with an unknown attribute tag.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
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

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class RefusalError(Exception):
    """
    Exception for constraint-based refusals.

    Use when the system refuses to proceed due to a configured constraint.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.refusal(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


# =============================================================================
# SKU PARSE FAILURES
# =============================================================================
#
# Every way a SKU string can be rejected. Lenient parsing recovers from
# InvalidQualityError only; everything else is terminal in both modes.
#
# =============================================================================

SKU_FORMAT_HINT = 'A SKU begins with a defindex followed by a quality, e.g. "5021;6".'


class SkuParseError(KnownError):
    """Base class for SKU strings that cannot be parsed."""

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        sku: str | None = None,
        suggestion: str | None = None,
    ):
        self.sku = sku
        super().__init__(
            kind=kind,
            message=message,
            detail=f"SKU: {sku!r}" if sku is not None else None,
            suggestion=suggestion,
        )


class InsufficientFieldsError(SkuParseError):
    """The SKU lacks the mandatory defindex and quality fields."""

    def __init__(self, sku: str):
        super().__init__(
            kind=FailureKind.INSUFFICIENT_FIELDS,
            message="Invalid SKU format: expected at least a defindex and a quality.",
            sku=sku,
            suggestion=SKU_FORMAT_HINT,
        )


class EmptyFieldError(SkuParseError):
    """The SKU contains an empty field (doubled, leading or trailing ';')."""

    def __init__(self, sku: str, position: int):
        self.position = position
        super().__init__(
            kind=FailureKind.EMPTY_FIELD,
            message=f"Field {position} of SKU is empty.",
            sku=sku,
            suggestion="Remove repeated, leading or trailing ';' separators.",
        )


class InvalidDefindexError(SkuParseError):
    """The first field is not a non-negative integer defindex."""

    def __init__(self, sku: str, token: str):
        self.token = token
        super().__init__(
            kind=FailureKind.INVALID_DEFINDEX,
            message=f"`{token}` is not a valid defindex.",
            sku=sku,
            suggestion=SKU_FORMAT_HINT,
        )


class InvalidQualityError(SkuParseError):
    """The second field does not encode a known quality."""

    def __init__(self, sku: str, token: str):
        self.token = token
        super().__init__(
            kind=FailureKind.INVALID_QUALITY,
            message=f"`{token}` is not a valid quality.",
            sku=sku,
            suggestion="Use a numeric quality such as 6 (Unique) or 11 (Strange).",
        )


class UnknownAttributeError(SkuParseError):
    """An attribute token matches no known tag."""

    def __init__(self, sku: str, token: str):
        self.token = token
        super().__init__(
            kind=FailureKind.UNKNOWN_ATTRIBUTE,
            message=f"Unknown attribute `{token}` in SKU.",
            sku=sku,
        )


class DuplicateAttributeError(SkuParseError):
    """A singular tag repeats, or a multi-valued tag repeats a member."""

    def __init__(self, sku: str, label: str, token: str):
        self.label = label
        self.token = token
        super().__init__(
            kind=FailureKind.DUPLICATE_ATTRIBUTE,
            message=f"Duplicate {label} `{token}` in SKU.",
            sku=sku,
        )


class InvalidAttributeValueError(SkuParseError):
    """An attribute tag is known but its value is missing or invalid."""

    def __init__(self, sku: str, label: str, token: str):
        self.label = label
        self.token = token
        super().__init__(
            kind=FailureKind.INVALID_ATTRIBUTE_VALUE,
            message=f"`{token}` is not a valid {label}.",
            sku=sku,
        )


class AttributeLimitError(SkuParseError):
    """A multi-valued attribute has more members than an item can hold."""

    def __init__(self, sku: str, label: str, token: str, limit: int):
        self.label = label
        self.token = token
        self.limit = limit
        super().__init__(
            kind=FailureKind.ATTRIBUTE_LIMIT_EXCEEDED,
            message=f"Cannot add {label} `{token}`: an item holds at most {limit}.",
            sku=sku,
        )


# =============================================================================
# FAILURE AUTHORITY BOUNDARY
# =============================================================================
#
# All user-visible responses MUST pass through this boundary.
#
# =============================================================================


# Standard messages are fixed and cannot be customized

STANDARD_MESSAGES: dict[OutcomeType, str] = {
    OutcomeType.REFUSAL: (
        "The system cannot proceed with this request due to a constraint violation."
    ),
    OutcomeType.KNOWN_FAILURE: "The operation failed due to a known issue.",
    OutcomeType.UNKNOWN_FAILURE: (
        "I failed and I don't know why. Try simplifying the request or retrying."
    ),
}

STANDARD_SUGGESTIONS: dict[OutcomeType, str] = {
    OutcomeType.REFUSAL: "Please modify your request to satisfy the constraint.",
    OutcomeType.KNOWN_FAILURE: "Check the error details and adjust your request.",
    OutcomeType.UNKNOWN_FAILURE: "If this persists, please report the issue.",
}


# Track finalized responses
_finalized_responses: set[int] = set()


def finalize_response(response: ApiResponse[Any]) -> ApiResponse[Any]:
    """
    Finalize a response through the authority boundary.

    Every response that passes through this function is guaranteed to:
    1. Have a valid outcome classification
    2. Have failure details if not successful

    Raises:
        ValueError: If response structure is invalid
    """
    if response.outcome == OutcomeType.SUCCESS:
        if response.failure is not None:
            raise ValueError("Success response must not have failure details")
    else:
        if response.failure is None:
            raise ValueError(f"{response.outcome.value} response must have failure details")
        if response.failure.suggestion is None:
            response.failure.suggestion = STANDARD_SUGGESTIONS[response.outcome]

    _finalized_responses.add(id(response))

    return response


def is_finalized(response: ApiResponse[Any]) -> bool:
    """Check if a response has passed through the authority boundary."""
    return id(response) in _finalized_responses


def create_unknown_failure(
    exception: Exception,
    include_type: bool = True,
) -> ApiResponse[Any]:
    """
    Create an unknown failure response from an exception.

    The message is fixed and cannot be customized.

    Args:
        exception: The exception that caused the failure
        include_type: Whether to include exception type in detail

    Returns:
        A finalized unknown failure response
    """
    detail = None
    if include_type:
        detail = f"{type(exception).__name__}"

    response: ApiResponse[Any] = ApiResponse(
        outcome=OutcomeType.UNKNOWN_FAILURE,
        failure=FailureDetail(
            kind=FailureKind.UNKNOWN,
            message=STANDARD_MESSAGES[OutcomeType.UNKNOWN_FAILURE],
            detail=detail,
            suggestion=STANDARD_SUGGESTIONS[OutcomeType.UNKNOWN_FAILURE],
        ),
    )

    return finalize_response(response)


def create_success(data: T) -> ApiResponse[T]:
    """Create a finalized success response."""
    response = ApiResponse[T](outcome=OutcomeType.SUCCESS, data=data)
    return finalize_response(response)
