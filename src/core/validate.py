"""Configuration checks with exception and Result variants."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from returns.result import Result, Success, Failure

if TYPE_CHECKING:
    from pager.window import PaginationState


class InvalidConfigError(Exception):
    """Required configuration is missing or unusable."""

    pass


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


def validate_pagination(state: "PaginationState | None") -> Result["PaginationState", ValidationResult]:
    """
    Check that a pager has pagination state to work with.

    Args:
        state: Pagination state handed to the pager

    Returns:
        Success with the state, or Failure describing what is missing
    """
    if state is None:
        return Failure(ValidationResult('The "pagination" property must be set.', field="pagination"))
    return Success(state)


def require_pagination(state: "PaginationState | None") -> "PaginationState":
    """
    Raising form of validate_pagination().

    Raises:
        InvalidConfigError: If no state was supplied
    """
    result = validate_pagination(state)
    if isinstance(result, Failure):
        raise InvalidConfigError(result.failure().message)
    return result.unwrap()
