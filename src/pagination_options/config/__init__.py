"""Config – per-endpoint options configuration and its validation errors."""

from pagination_options.config.options import OPERATOR_PREFIX, OptionsConfig, QueryMode
from pagination_options.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "OPERATOR_PREFIX",
    "ConfigError",
    "InvalidSettingValueError",
    "OptionsConfig",
    "QueryMode",
]
