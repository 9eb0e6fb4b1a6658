"""
Platform detection.

Maps a raw (OS name, CPU architecture) pair, as reported by the JVM
``os.name``/``os.arch`` properties or by Python's ``platform`` module, to
exactly one PlatformTag. Rules are checked in order and the first match wins.
"""

from __future__ import annotations

from typing import Optional, Tuple

from nativeset.errors import UnsupportedPlatformError
from nativeset.platform.tags import OsFamily, PlatformTag


# OS name prefixes per family, lower-case
LINUX_NAMES: Tuple[str, ...] = ("linux", "sunos", "unix")
MACOS_NAMES: Tuple[str, ...] = ("mac os x", "darwin")
WINDOWS_NAMES: Tuple[str, ...] = ("windows",)

# Architecture prefixes and markers, lower-case
ARM_PREFIXES: Tuple[str, ...] = ("arm", "aarch64")
ARM64_PREFIXES: Tuple[str, ...] = ("aarch64", "arm64")
ARMV8_PREFIX = "armv8"
PPC_PREFIX = "ppc"
RISCV_PREFIX = "riscv"
BITS64_MARKER = "64"


def _normalize(value: str) -> str:
    return value.strip().lower()


def classify_family(os_name: str) -> Optional[OsFamily]:
    """Return the OS family for a normalized OS name, or None."""
    if os_name.startswith(LINUX_NAMES):
        return OsFamily.LINUX
    if os_name.startswith(MACOS_NAMES):
        return OsFamily.MACOS
    if os_name.startswith(WINDOWS_NAMES):
        return OsFamily.WINDOWS
    return None


def _linux_variant(arch: str) -> PlatformTag:
    if arch.startswith(ARM_PREFIXES):
        if BITS64_MARKER in arch or arch.startswith(ARMV8_PREFIX):
            return PlatformTag.LINUX_ARM64
        return PlatformTag.LINUX_ARM32
    if arch.startswith(PPC_PREFIX):
        return PlatformTag.LINUX_PPC64LE
    if arch.startswith(RISCV_PREFIX):
        return PlatformTag.LINUX_RISCV64
    return PlatformTag.LINUX_X64


def _macos_variant(arch: str) -> PlatformTag:
    # Python reports "arm64" on Apple silicon, the JVM reports "aarch64"
    if arch.startswith(ARM_PREFIXES):
        return PlatformTag.MACOS_ARM64
    return PlatformTag.MACOS_X64


def _windows_variant(arch: str) -> PlatformTag:
    if BITS64_MARKER in arch:
        if arch.startswith(ARM64_PREFIXES):
            return PlatformTag.WINDOWS_ARM64
        return PlatformTag.WINDOWS_X64
    return PlatformTag.WINDOWS_X86


_VARIANTS = {
    OsFamily.LINUX: _linux_variant,
    OsFamily.MACOS: _macos_variant,
    OsFamily.WINDOWS: _windows_variant,
}


def resolve(os_name: str, cpu_arch: str) -> PlatformTag:
    """
    Resolve the canonical platform tag for a host.
    
    Args:
        os_name: Raw OS name, e.g. "Linux", "Mac OS X", "Windows 11"
        cpu_arch: Raw CPU architecture, e.g. "amd64", "aarch64", "x86"
        
    Returns:
        The single PlatformTag matching the host
        
    Raises:
        UnsupportedPlatformError: If the OS name matches no known family.
            The error carries the original, un-normalized strings.
    """
    family = classify_family(_normalize(os_name))
    if family is None:
        raise UnsupportedPlatformError(os_name, cpu_arch)

    variant = _VARIANTS.get(family)
    if variant is None:
        raise AssertionError(f"No architecture rules for OS family {family.value}")
    return variant(_normalize(cpu_arch))
