"""
Native library set composition.

Pure transformations from declared descriptors and an already-resolved
platform tag to an ordered list of dependency entries.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from nativeset.libraries.descriptor import (
    ArtifactKind,
    NativeLibraryDescriptor,
    ResolvedDependencyEntry,
)
from nativeset.platform.tags import PlatformTag


def _common_entry(library: NativeLibraryDescriptor) -> ResolvedDependencyEntry:
    return ResolvedDependencyEntry(
        library_name=library.name,
        kind=ArtifactKind.PLATFORM_INDEPENDENT,
        group=library.group,
        configuration=library.configuration,
    )


def _native_entry(
    library: NativeLibraryDescriptor, tag: PlatformTag
) -> ResolvedDependencyEntry:
    return ResolvedDependencyEntry(
        library_name=library.name,
        kind=ArtifactKind.NATIVE,
        platform_tag=tag,
        group=library.group,
        configuration=library.native_configuration or library.configuration,
    )


def compose(
    platform_tag: PlatformTag,
    libraries: Iterable[NativeLibraryDescriptor],
) -> List[ResolvedDependencyEntry]:
    """
    Pair every library with its platform-independent and native artifacts.
    
    Each library yields one platform-independent entry, followed by one
    native entry for ``platform_tag`` when the library has a native build
    for it. Declaration order is kept and duplicates are not removed.
    
    Args:
        platform_tag: Resolved platform of the build host
        libraries: Declared libraries, in declaration order
        
    Returns:
        Ordered list of entries (empty for an empty library list)
    """
    return compose_many([platform_tag], libraries)


def compose_many(
    platform_tags: Sequence[PlatformTag],
    libraries: Iterable[NativeLibraryDescriptor],
) -> List[ResolvedDependencyEntry]:
    """
    Compose a library set for several platforms at once.
    
    Used to bundle the natives of every platform into one distribution.
    Each library yields its platform-independent entry, then one native
    entry per supported tag in the order the tags are given.
    """
    entries: List[ResolvedDependencyEntry] = []
    for library in libraries:
        entries.append(_common_entry(library))
        for tag in platform_tags:
            if library.has_native_for(tag):
                entries.append(_native_entry(library, tag))
    return entries
