"""
Nativeset Configuration

Settings for resolving and composing a native library set.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


ENV_PLATFORM = "NATIVESET_PLATFORM"
ENV_LIBRARY_SET = "NATIVESET_LIBRARY_SET"
ENV_PROFILE = "NATIVESET_PROFILE"


@dataclass
class ResolverConfig:
    """
    Configuration for a nativeset run.
    
    Attributes:
        platform_override: Platform tag or classifier to use instead of detection
        library_set: Path to a library set file (None = bundled LWJGL set)
        profile: Library set profile to compose
        output_format: One of gradle, json, text
        all_platforms: Compose for every platform the set bundles
    """
    
    platform_override: Optional[str] = None
    library_set: Optional[str] = None
    profile: str = "core"
    output_format: str = "gradle"
    all_platforms: bool = False
    
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ResolverConfig":
        """Build a configuration from NATIVESET_* environment variables."""
        if environ is None:
            environ = os.environ
        config = cls()
        if environ.get(ENV_PLATFORM):
            config.platform_override = environ[ENV_PLATFORM]
        if environ.get(ENV_LIBRARY_SET):
            config.library_set = environ[ENV_LIBRARY_SET]
        if environ.get(ENV_PROFILE):
            config.profile = environ[ENV_PROFILE]
        return config


# Default configuration
_config = ResolverConfig()


def get_config() -> ResolverConfig:
    """Get the current configuration."""
    return _config


def set_config(config: ResolverConfig) -> None:
    """Set the configuration."""
    global _config
    _config = config


def configure(**kwargs) -> None:
    """Update individual configuration settings."""
    global _config
    for key, value in kwargs.items():
        if hasattr(_config, key):
            setattr(_config, key, value)
