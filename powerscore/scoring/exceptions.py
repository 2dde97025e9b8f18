"""Exception hierarchy for the scoring engine.

Scorers never raise for expected bad input: invalid measurements and missing
standards rows come back as sentinel values (``0`` or ``None``). Exceptions are
reserved for broken configuration, which is detected once when the standards
catalog is loaded.

Exception Hierarchy:
- ScoringException (base)
  - StandardsError (standards catalog problems)
    - StandardsNotFoundError (standards file missing)
    - StandardsLoadError (file unreadable or not valid YAML)
    - StandardsValidationError (schema, bracket or monotonicity violations)

Example:
    try:
        catalog = StandardsLoader(path).get_catalog()
    except StandardsValidationError as e:
        logger.error("standards_invalid", error=str(e), details=e.details)
    except StandardsError as e:
        logger.error("standards_unavailable", error=str(e))
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================

class ScoringException(Exception):
    """Base exception for all scoring-related errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary with additional error context
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        return self.message


# =============================================================================
# Standards Exceptions
# =============================================================================

class StandardsError(ScoringException):
    """Base exception for standards catalog errors.

    Attributes:
        path: Path of the standards file involved, when known
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.path = path
        if path:
            message = f"Standards error in '{path}': {message}"
        super().__init__(message, details)


class StandardsNotFoundError(StandardsError):
    """Raised when the standards file does not exist."""

    pass


class StandardsLoadError(StandardsError):
    """Raised when the standards file cannot be read or parsed."""

    pass


class StandardsValidationError(StandardsError):
    """Raised when the standards content violates the catalog schema.

    Covers non-monotonic ladders, missing percentiles, gaps or overlaps
    between age brackets and malformed DOTS coefficients.

    Example:
        ```python
        if bracket.min_age != previous.max_age + 1:
            raise StandardsValidationError(
                f"Age gap between {previous.label} and {bracket.label}",
                details={"metric": metric, "sex": sex},
            )
        ```
    """

    pass
