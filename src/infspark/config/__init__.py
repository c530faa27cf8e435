"""
Configuration helpers for the Infinity Spark publisher.
"""

from .models import DEFAULT_SITE, ConfigError, SiteConfig, load_config
from .settings import EnvironmentOverrides, apply_overrides, get_overrides

__all__ = [
    "DEFAULT_SITE",
    "ConfigError",
    "SiteConfig",
    "load_config",
    "EnvironmentOverrides",
    "apply_overrides",
    "get_overrides",
]
