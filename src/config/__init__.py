"""
League configuration.

Cap engine settings (CapSettings) and the bundled league defaults.
"""

from .cap_settings import CapSettings, CapSettingsLoader, DEFAULT_CAP_SETTINGS, load_cap_settings

__all__ = [
    'CapSettings',
    'CapSettingsLoader',
    'DEFAULT_CAP_SETTINGS',
    'load_cap_settings',
]
