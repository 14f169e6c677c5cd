class ActionBindingError(Exception):
    """Base exception for action binding."""


class InvalidArgumentError(ActionBindingError, ValueError):
    """Raised when a required argument is missing or blank."""


class FormatError(ActionBindingError):
    """Raised when a raw value cannot be coerced to its declared type."""


class ConfigurationError(ActionBindingError):
    """Raised when configuration is missing or invalid."""


class RegistryFrozenError(ActionBindingError):
    """Raised when a schema is registered after the registry was frozen."""


class DuplicateIntentError(ActionBindingError):
    """Raised when two schemas claim the same intent name."""


class NLUServiceError(ActionBindingError):
    """Raised when the NLU service cannot be reached or returns garbage."""
