"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    InvalidConfigError,
    ValidationResult,
    validate_pagination,
    require_pagination,
)
from .logging_config import configure_logging, get_logger, LogContext


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "InvalidConfigError",
    "ValidationResult",
    "validate_pagination",
    "require_pagination",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # DI
    "create_container",
]
