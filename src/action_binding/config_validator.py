"""
Configuration validation utilities.

Environment lookups with placeholder detection and secret masking.
"""
import os
import warnings
from typing import Optional
from .exceptions import ConfigurationError


def get_required_env(key: str, description: str = None) -> str:
    """
    Get required environment variable with validation.
    
    :param key: Environment variable name
    :param description: Human-readable description for error messages
    :return: Environment variable value
    :raises: ConfigurationError if not set or invalid
    """
    value = os.getenv(key)
    
    if not value:
        desc = description or key
        raise ConfigurationError(
            f"{key} is required but not set.\n"
            f"Set it as an environment variable or in a .env file "
            f"in the project root.\n\n"
            f"Description: {desc}"
        )
    
    if _is_placeholder(value):
        raise ConfigurationError(
            f"{key} appears to be a placeholder value.\n"
            f"Please set a real value. Current value: {_mask_secret(value)}"
        )
    
    return value


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.
    
    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)
    
    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default
    
    return value


def get_float_env(key: str, default: float) -> float:
    """Get a float environment variable, failing loudly on garbage."""
    raw = get_optional_env(key, str(default))
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}")


def get_bool_env(key: str, default: bool = False) -> bool:
    """Get a boolean environment variable ("true"/"false")."""
    raw = get_optional_env(key, "true" if default else "false")
    return raw.strip().lower() == "true"


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False
    
    placeholder_patterns = [
        "your_",
        "placeholder",
        "example",
        "xxx",
        "replace",
        "changeme",
    ]
    
    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)


def _mask_secret(secret: str, show_chars: int = 4) -> str:
    """
    Mask secret for safe display in error messages.
    
    :param secret: Secret to mask
    :param show_chars: Number of characters to show at start/end
    :return: Masked secret
    """
    if not secret or len(secret) <= show_chars * 2:
        return "***"
    
    return f"{secret[:show_chars]}...{secret[-show_chars:]}"
