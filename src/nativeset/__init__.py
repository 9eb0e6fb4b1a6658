# Copyright (c) 2024 Nativeset Contributors
# MIT License

"""
Nativeset: host platform resolution for native library sets.

Picks the one native binary variant that matches the machine running the
build, and pairs every declared native library with both its
platform-independent artifact and its matching native artifact.

Features:
    - Canonical platform tags from raw OS name / CPU architecture strings
    - Declarative YAML library sets with per-library native exclusions
    - Gradle Kotlin DSL, JSON and plain-text dependency output

This package exposes the main CLI entry point and release metadata.
"""

from __future__ import annotations

from nativeset.release import __version__, __author__, __codename__

__all__ = [
    "__version__",
    "__author__",
    "__codename__",
]
