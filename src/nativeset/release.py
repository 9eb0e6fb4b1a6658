# Copyright (c) 2024 Nativeset Contributors
# MIT License

"""Nativeset release metadata."""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Nativeset Contributors"
__codename__ = "Classifier"

# Version info tuple for programmatic comparison
VERSION_INFO = (0, 1, 0)
