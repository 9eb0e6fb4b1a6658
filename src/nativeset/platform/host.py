"""
Host platform capture.

The raw host strings are captured once and the resolved tag is cached for
the life of the process, so every composition in a build sees the same tag.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Optional

from nativeset import platform as host
from nativeset.platform.detect import resolve
from nativeset.platform.tags import PlatformTag


@dataclass(frozen=True)
class RawHostInfo:
    """Raw OS name and CPU architecture of a build host."""

    os_name: str
    cpu_arch: str

    def resolve(self) -> PlatformTag:
        return resolve(self.os_name, self.cpu_arch)


def capture_host_info() -> RawHostInfo:
    """Return the raw strings of the running process's host."""
    return RawHostInfo(os_name=host.HOST_OS_NAME, cpu_arch=host.HOST_ARCH)


@functools.lru_cache(maxsize=None)
def _detected_platform() -> PlatformTag:
    return capture_host_info().resolve()


def host_platform(override: Optional[str] = None) -> PlatformTag:
    """
    Get the platform tag for the current host.
    
    An override (tag value or classifier) bypasses detection entirely.
    Otherwise the host is resolved once and the result reused.
    """
    if override:
        return PlatformTag.parse(override)
    return _detected_platform()


def clear_host_cache() -> None:
    """Forget the cached host tag so the next lookup resolves again."""
    _detected_platform.cache_clear()
