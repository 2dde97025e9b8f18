"""Shared dependencies for API routes."""
from powerscore.core.exceptions import ConfigurationError
from powerscore.core.logging import get_logger
from powerscore.scoring import StandardsCatalog, StandardsError, get_standards

logger = get_logger(__name__)


def get_catalog() -> StandardsCatalog:
    """Standards catalog for the request.

    Raises:
        ConfigurationError: If the standards file cannot be loaded
    """
    try:
        return get_standards()
    except StandardsError as e:
        logger.error("standards_unavailable", error=str(e))
        raise ConfigurationError(str(e), details=e.details) from e
