"""Domain errors raised by the HTTP layer.

The scoring engine itself never raises for bad measurements. These errors
translate its sentinel results (and broken configuration) into the API error
envelope; ``ERROR_STATUS_MAP`` in ``error_handlers`` picks the status code.
"""


class DomainError(Exception):
    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(DomainError):
    """Unknown metric, or no standards row for the requested sex and age."""

    def __init__(self, entity: str, message: str | None = None, details: dict | None = None):
        super().__init__(
            f"NF_{entity.upper()}_001",
            message or f"{entity} not found",
            details,
        )


class ValidationError(DomainError):
    def __init__(self, field: str, message: str, details: dict | None = None):
        super().__init__(
            f"VAL_{field.upper()}_001",
            f"Validation failed for {field}: {message}",
            details or {"field": field},
        )


class BusinessRuleError(DomainError):
    def __init__(self, message: str, code: str = "BR_001", details: dict | None = None):
        super().__init__(code, message, details)


class UnscorableAssessmentError(BusinessRuleError):
    """Valid input that the engine still could not score (no bracket, no lifts)."""

    def __init__(self, assessment: str):
        self.assessment = assessment
        super().__init__(
            f"{assessment} assessment could not be scored with the given inputs",
            code="BR_UNSCORABLE_001",
            details={"assessment": assessment},
        )


class ConfigurationError(DomainError):
    """Standards file missing or invalid at request time."""

    def __init__(self, message: str, code: str = "CFG_001", details: dict | None = None):
        super().__init__(code, message, details)
