"""
Configuration and identity validation utilities.
"""

import importlib
from typing import Any, List, Optional, Tuple
from urllib.parse import urlparse

from .config import ERROR_MESSAGES, LOGGING_CONFIG, ServiceConfig
from .exceptions import ConfigurationError, ConstructionError


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.

    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "requests": "requests",
        "rich": "rich",
    }

    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)

    return len(missing) == 0, missing


def validate_configuration(config: Optional[ServiceConfig] = None) -> Tuple[bool, List[str]]:
    """
    Validate a service configuration.

    Args:
        config: Configuration to check (defaults to a fresh ServiceConfig)

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    config = config or ServiceConfig()
    errors = []

    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )

    parsed = urlparse(config.base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        errors.append(f"BASE_URL must be an absolute http(s) URL, got '{config.base_url}'")

    if not config.timeout or config.timeout <= 0:
        errors.append("TIMEOUT must be > 0")

    if not 0 <= config.filter_threshold <= 100:
        errors.append("FILTER_THRESHOLD must be between 0 and 100")

    for kind in ("artist", "track", "tag", "user"):
        if not config.type_segments.get(kind):
            errors.append(f"No URL segment configured for '{kind}'")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")

    return len(errors) == 0, errors


def validate_and_raise(config: Optional[ServiceConfig] = None):
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration(config)
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)


def validate_identity(kind: str, field_name: str, value: Any) -> str:
    """
    Validate the identity value of an entity.

    Args:
        kind: Entity kind, used in the error message
        field_name: Name of the identity field
        value: Candidate identity value

    Returns:
        The identity, stripped of surrounding whitespace

    Raises:
        ConstructionError: If the value is missing or blank
    """
    if value is None:
        raise ConstructionError(ERROR_MESSAGES["MISSING_IDENTITY"].format(kind=kind, field=field_name))

    value = str(value).strip()
    if not value:
        raise ConstructionError(ERROR_MESSAGES["MISSING_IDENTITY"].format(kind=kind, field=field_name))

    return value
