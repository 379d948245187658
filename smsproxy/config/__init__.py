"""
smsproxy Configuration

Validated, immutable settings for the gateway transport proxy.
"""

from .loader import DEFAULT_SECTION, SettingsValidationError, load_settings, validate_settings
from .schemas import ProxySettings, is_valid_hostname

__all__ = [
    "DEFAULT_SECTION",
    "ProxySettings",
    "SettingsValidationError",
    "is_valid_hostname",
    "load_settings",
    "validate_settings",
]
