# Copyright (c) 2024 Nativeset Contributors
# MIT License

"""
Nativeset Error Classes.

All custom exceptions for clear error handling and exit codes.
"""

from __future__ import annotations

import enum


class ExitCode(enum.IntEnum):
    """Process exit codes used by the nativeset CLI."""

    SUCCESS = 0
    GENERIC_ERROR = 1
    UNSUPPORTED_PLATFORM = 2
    CONFIG_ERROR = 3
    KEYBOARD_INTERRUPT = 130


class NativeSetError(Exception):
    """Base exception for all nativeset errors."""

    exit_code: int = ExitCode.GENERIC_ERROR

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class UnsupportedPlatformError(NativeSetError):
    """The host OS name / CPU architecture pair matches no known platform."""

    exit_code: int = ExitCode.UNSUPPORTED_PLATFORM

    def __init__(
        self,
        os_name: str,
        cpu_arch: str,
        details: str | None = None,
    ) -> None:
        self.os_name = os_name
        self.cpu_arch = cpu_arch
        super().__init__(
            f"Unrecognized or unsupported platform: os={os_name!r} arch={cpu_arch!r}",
            details or "Set the platform manually (--platform or NATIVESET_PLATFORM)",
        )


class UnknownPlatformTagError(NativeSetError):
    """A platform tag or classifier string names no known platform."""

    exit_code: int = ExitCode.UNSUPPORTED_PLATFORM

    def __init__(self, text: str, details: str | None = None) -> None:
        self.text = text
        super().__init__(f"Unknown platform tag {text!r}", details)


class MalformedDescriptorError(NativeSetError):
    """A native library declaration has inconsistent or invalid fields."""

    exit_code: int = ExitCode.CONFIG_ERROR

    def __init__(
        self,
        message: str,
        library: str | None = None,
        source: str | None = None,
    ) -> None:
        self.library = library
        self.source = source
        location = ""
        if library:
            location = f" for library '{library}'"
        if source:
            location += f" in {source}"
        super().__init__(f"Malformed descriptor{location}: {message}")


class LibrarySetError(NativeSetError):
    """Error reading a library set file or resolving one of its profiles."""

    exit_code: int = ExitCode.CONFIG_ERROR

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: str | None = None,
    ) -> None:
        self.file_path = file_path
        location = f" in {file_path}" if file_path else ""
        super().__init__(f"Library set error{location}: {message}", details)
