"""
Library Set Loader

Reads a YAML library set, validates every descriptor, and resolves named
profiles to ordered descriptor lists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Union

import yaml

from nativeset.errors import (
    LibrarySetError,
    MalformedDescriptorError,
    UnknownPlatformTagError,
)
from nativeset.libraries.descriptor import API, CONFIGURATIONS, NativeLibraryDescriptor
from nativeset.platform.tags import PlatformTag


DEFAULT_LIBRARY_SET = Path(__file__).parent / "data" / "lwjgl.yml"

# Profile used when a set declares none
ALL_PROFILE = "all"

DESCRIPTOR_KEYS = {
    "name", "group", "configuration", "native_configuration", "natives", "platforms", "exclude",
}
SET_KEYS = {"group", "version", "bom", "platforms", "libraries", "profiles"}


@dataclass
class LibrarySet:
    """A declared set of native libraries and the profiles that use them."""
    
    source: str
    group: str = ""
    version: Optional[str] = None
    bom: Optional[str] = None
    platforms: List[PlatformTag] = field(default_factory=lambda: list(PlatformTag))
    libraries: List[NativeLibraryDescriptor] = field(default_factory=list)
    profiles: Dict[str, List[str]] = field(default_factory=dict)
    
    def get(self, name: str) -> NativeLibraryDescriptor:
        """Look up a library by name."""
        for library in self.libraries:
            if library.name == name:
                return library
        raise LibrarySetError(f"Unknown library '{name}'", file_path=self.source)
    
    def profile(self, name: str) -> List[NativeLibraryDescriptor]:
        """Get the libraries of a profile, in profile order."""
        if name not in self.profiles:
            known = ", ".join(self.profiles) or "none"
            raise LibrarySetError(
                f"Unknown profile '{name}'",
                file_path=self.source,
                details=f"Known profiles: {known}",
            )
        return [self.get(library) for library in self.profiles[name]]


def load_library_set(path: Union[str, Path, None] = None) -> LibrarySet:
    """
    Load a library set from a YAML file.
    
    Args:
        path: Library set file; the bundled LWJGL set when None
        
    Raises:
        LibrarySetError: If the file cannot be read or parsed
        MalformedDescriptorError: If a library declaration is invalid
    """
    file_path = Path(path) if path is not None else DEFAULT_LIBRARY_SET
    
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise LibrarySetError(f"Cannot read file: {e}", file_path=str(file_path))
    
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise LibrarySetError("Invalid YAML", file_path=str(file_path), details=str(e))
    
    return parse_library_set(data, source=str(file_path))


def parse_library_set(data: Any, source: str = "<memory>") -> LibrarySet:
    """Build a LibrarySet from already-parsed YAML data."""
    if not isinstance(data, dict):
        raise LibrarySetError("Library set must be a mapping", file_path=source)
    
    unknown = set(data) - SET_KEYS
    if unknown:
        raise LibrarySetError(
            f"Unknown keys: {', '.join(sorted(unknown))}", file_path=source
        )
    
    group = data.get("group") or ""
    if not isinstance(group, str):
        raise LibrarySetError("'group' must be a string", file_path=source)
    
    version = data.get("version")
    bom = data.get("bom")
    
    platforms = list(PlatformTag)
    if "platforms" in data:
        platforms = _parse_platform_list(data["platforms"], source)
    
    raw_libraries = data.get("libraries") or []
    if not isinstance(raw_libraries, list):
        raise LibrarySetError("'libraries' must be a list", file_path=source)
    
    libraries: List[NativeLibraryDescriptor] = []
    seen = set()
    for raw in raw_libraries:
        library = parse_descriptor(raw, default_group=group, source=source)
        if library.name in seen:
            raise MalformedDescriptorError(
                "declared more than once", library=library.name, source=source
            )
        seen.add(library.name)
        libraries.append(library)
    
    raw_profiles = data.get("profiles")
    if raw_profiles is None:
        profiles = {ALL_PROFILE: [library.name for library in libraries]}
    else:
        profiles = _parse_profiles(raw_profiles, seen, source)
    
    return LibrarySet(
        source=source,
        group=group,
        version=str(version) if version is not None else None,
        bom=str(bom) if bom is not None else None,
        platforms=platforms,
        libraries=libraries,
        profiles=profiles,
    )


def parse_descriptor(
    raw: Any,
    default_group: str = "",
    source: Optional[str] = None,
) -> NativeLibraryDescriptor:
    """
    Validate one library declaration.
    
    A bare string is shorthand for ``{name: <string>}``.
    
    Raises:
        MalformedDescriptorError: On missing names, unknown keys or platforms,
            or platform lists that contradict the ``natives`` flag
    """
    if isinstance(raw, str):
        raw = {"name": raw}
    if not isinstance(raw, dict):
        raise MalformedDescriptorError(
            f"expected a mapping, got {type(raw).__name__}", source=source
        )
    
    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise MalformedDescriptorError("missing library name", source=source)
    name = name.strip()
    
    unknown = set(raw) - DESCRIPTOR_KEYS
    if unknown:
        raise MalformedDescriptorError(
            f"unknown keys: {', '.join(sorted(unknown))}", library=name, source=source
        )
    
    group = raw.get("group") or default_group
    if not isinstance(group, str):
        raise MalformedDescriptorError(
            f"'group' must be a string, got {group!r}", library=name, source=source
        )
    
    configuration = _parse_configuration(raw, "configuration", API, name, source)
    native_configuration = _parse_configuration(
        raw, "native_configuration", configuration, name, source
    )
    
    natives = raw.get("natives", True)
    if not isinstance(natives, bool):
        raise MalformedDescriptorError(
            f"'natives' must be true or false, got {natives!r}",
            library=name, source=source,
        )
    
    platforms = None
    if "platforms" in raw:
        platforms = _parse_tags(raw["platforms"], "platforms", name, source)
    exclude = frozenset()
    if "exclude" in raw:
        exclude = _parse_tags(raw["exclude"], "exclude", name, source)
    
    if not natives and (platforms is not None or exclude):
        raise MalformedDescriptorError(
            "platforms/exclude given for a library without natives",
            library=name, source=source,
        )
    if platforms is not None and platforms & exclude:
        both = ", ".join(sorted(tag.value for tag in platforms & exclude))
        raise MalformedDescriptorError(
            f"platforms both allowed and excluded: {both}",
            library=name, source=source,
        )
    if natives and not (platforms if platforms is not None else frozenset(PlatformTag)) - exclude:
        raise MalformedDescriptorError(
            "natives declared but no platform remains",
            library=name, source=source,
        )
    
    return NativeLibraryDescriptor(
        name=name,
        group=group,
        configuration=configuration,
        native_configuration=native_configuration,
        natives=natives,
        platforms=platforms,
        exclude=exclude,
    )


def _parse_configuration(
    raw: dict, key: str, default: str, library: str, source: Optional[str]
) -> str:
    value = raw.get(key, default)
    if value not in CONFIGURATIONS:
        raise MalformedDescriptorError(
            f"'{key}' must be one of {', '.join(CONFIGURATIONS)}, got {value!r}",
            library=library, source=source,
        )
    return value


def _parse_tags(
    value: Any, key: str, library: str, source: Optional[str]
) -> FrozenSet[PlatformTag]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise MalformedDescriptorError(
            f"'{key}' must be a list of platforms", library=library, source=source
        )
    
    tags = set()
    for item in value:
        try:
            tags.add(PlatformTag.parse(str(item)))
        except UnknownPlatformTagError:
            raise MalformedDescriptorError(
                f"unknown platform {item!r} in '{key}'", library=library, source=source
            )
    return frozenset(tags)


def _parse_profiles(
    raw_profiles: Any, known: set, source: str
) -> Dict[str, List[str]]:
    if not isinstance(raw_profiles, dict):
        raise LibrarySetError("'profiles' must be a mapping", file_path=source)
    
    profiles: Dict[str, List[str]] = {}
    for profile_name, members in raw_profiles.items():
        if not isinstance(members, list):
            raise LibrarySetError(
                f"Profile '{profile_name}' must be a list of library names",
                file_path=source,
            )
        names = [str(member) for member in members]
        for member in names:
            if member not in known:
                raise LibrarySetError(
                    f"Profile '{profile_name}' references unknown library '{member}'",
                    file_path=source,
                )
        if len(set(names)) != len(names):
            raise LibrarySetError(
                f"Profile '{profile_name}' lists a library more than once",
                file_path=source,
            )
        profiles[str(profile_name)] = names
    return profiles


def _parse_platform_list(value: Any, source: str) -> List[PlatformTag]:
    if not isinstance(value, list):
        raise LibrarySetError("'platforms' must be a list", file_path=source)
    
    tags: List[PlatformTag] = []
    for item in value:
        try:
            tag = PlatformTag.parse(str(item))
        except UnknownPlatformTagError:
            raise LibrarySetError(f"Unknown platform {item!r} in 'platforms'", file_path=source)
        if tag not in tags:
            tags.append(tag)
    return tags
