"""
Canonical platform tags.

A tag names one operating-system family / CPU architecture pair and maps to
the classifier of the native artifact built for it.
"""

from __future__ import annotations

import enum

from nativeset.errors import UnknownPlatformTagError


class OsFamily(enum.Enum):
    """Operating-system families with prebuilt native binaries."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"


class PlatformTag(enum.Enum):
    """Closed set of platforms a native library can be built for."""

    LINUX_X64 = "linux-x64"
    LINUX_ARM64 = "linux-arm64"
    LINUX_ARM32 = "linux-arm32"
    LINUX_PPC64LE = "linux-ppc64le"
    LINUX_RISCV64 = "linux-riscv64"
    MACOS_X64 = "macos-x64"
    MACOS_ARM64 = "macos-arm64"
    WINDOWS_X64 = "windows-x64"
    WINDOWS_ARM64 = "windows-arm64"
    WINDOWS_X86 = "windows-x86"

    @property
    def family(self) -> OsFamily:
        return OsFamily(self.value.split("-", 1)[0])

    @property
    def classifier(self) -> str:
        """Classifier suffix of the native artifact, e.g. ``natives-linux-arm64``."""
        return _CLASSIFIERS[self]

    @classmethod
    def parse(cls, text: str) -> "PlatformTag":
        """
        Parse a tag from its value or its classifier.

        Both ``macos-arm64`` and ``natives-macos-arm64`` yield MACOS_ARM64.

        Raises:
            UnknownPlatformTagError: If the text names no known tag
        """
        key = text.strip().lower()
        for tag in cls:
            if key == tag.value or key == tag.classifier:
                return tag
        raise UnknownPlatformTagError(
            text,
            details=f"Known platforms: {', '.join(t.value for t in cls)}",
        )

    def __str__(self) -> str:
        return self.value


# x64 variants carry no architecture suffix in their classifier
_CLASSIFIERS = {
    PlatformTag.LINUX_X64: "natives-linux",
    PlatformTag.LINUX_ARM64: "natives-linux-arm64",
    PlatformTag.LINUX_ARM32: "natives-linux-arm32",
    PlatformTag.LINUX_PPC64LE: "natives-linux-ppc64le",
    PlatformTag.LINUX_RISCV64: "natives-linux-riscv64",
    PlatformTag.MACOS_X64: "natives-macos",
    PlatformTag.MACOS_ARM64: "natives-macos-arm64",
    PlatformTag.WINDOWS_X64: "natives-windows",
    PlatformTag.WINDOWS_ARM64: "natives-windows-arm64",
    PlatformTag.WINDOWS_X86: "natives-windows-x86",
}
