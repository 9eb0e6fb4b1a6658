"""
Native library descriptors and resolved dependency entries.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import FrozenSet, Optional

from nativeset.platform.tags import PlatformTag


API = "api"
IMPLEMENTATION = "implementation"
CONFIGURATIONS = (API, IMPLEMENTATION)


class ArtifactKind(enum.Enum):
    """Which artifact of a library an entry refers to."""

    PLATFORM_INDEPENDENT = "platform-independent"
    NATIVE = "native"


@dataclass(frozen=True)
class NativeLibraryDescriptor:
    """
    Static declaration of one native library.
    
    Attributes:
        name: Artifact name, e.g. "lwjgl-glfw"
        group: Artifact group, e.g. "org.lwjgl"
        configuration: Dependency configuration ("api" or "implementation")
        native_configuration: Configuration of the native artifacts
            (None = same as configuration)
        natives: Whether the library ships native binaries at all
        platforms: Allow-list of platforms with a native build (None = all)
        exclude: Platforms whose native build must not be used
    """
    
    name: str
    group: str = ""
    configuration: str = API
    native_configuration: Optional[str] = None
    natives: bool = True
    platforms: Optional[FrozenSet[PlatformTag]] = None
    exclude: FrozenSet[PlatformTag] = frozenset()
    
    def has_native_for(self, tag: PlatformTag) -> bool:
        """Check if a native artifact should be used on a platform."""
        if not self.natives:
            return False
        if self.platforms is not None and tag not in self.platforms:
            return False
        return tag not in self.exclude


@dataclass(frozen=True)
class ResolvedDependencyEntry:
    """One artifact of one library, ready for dependency-graph assembly."""
    
    library_name: str
    kind: ArtifactKind
    platform_tag: Optional[PlatformTag] = None
    group: str = ""
    configuration: str = API
    
    def __post_init__(self) -> None:
        if (self.kind is ArtifactKind.NATIVE) != (self.platform_tag is not None):
            raise ValueError(
                f"{self.library_name}: platform tag is required for native "
                f"entries and forbidden otherwise"
            )
    
    @property
    def classifier(self) -> Optional[str]:
        if self.platform_tag is None:
            return None
        return self.platform_tag.classifier
