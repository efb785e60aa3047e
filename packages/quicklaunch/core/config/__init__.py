"""Configuration management for QuickLaunch."""

from quicklaunch.core.config.loader import apply_overrides, load_app_config, load_config
from quicklaunch.core.config.models import (
    ICON_SIZES,
    AppConfig,
    CollisionPolicy,
    FaviconConfig,
    GeneratorConfig,
    HttpConfig,
    IconVariant,
    LoggingConfig,
    ResolverConfig,
)

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "apply_overrides",
    # Models
    "AppConfig",
    "HttpConfig",
    "FaviconConfig",
    "ResolverConfig",
    "GeneratorConfig",
    "LoggingConfig",
    "IconVariant",
    "CollisionPolicy",
    "ICON_SIZES",
]
