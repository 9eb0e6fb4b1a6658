"""
Native library sets.

Descriptors declare each library once; the composer pairs every library with
its platform-independent artifact and the native artifact for a platform.
"""

from nativeset.libraries.composer import compose, compose_many
from nativeset.libraries.descriptor import (
    ArtifactKind,
    NativeLibraryDescriptor,
    ResolvedDependencyEntry,
)
from nativeset.libraries.loader import LibrarySet, load_library_set

__all__ = [
    "ArtifactKind",
    "LibrarySet",
    "NativeLibraryDescriptor",
    "ResolvedDependencyEntry",
    "compose",
    "compose_many",
    "load_library_set",
]
