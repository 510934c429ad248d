from blockmerge.exceptions.core import BlockmergeError


class ConfigError(BlockmergeError):
    """Base class for configuration-related errors."""

    log_category = 'config_error'


class ConfigValidationError(ConfigError):
    """Configuration validation failed (structure, values, etc.)."""

    log_category = 'config_validation_failed'
