"""
Nativeset Dependency Assembly

Turns resolved entries into library coordinates and renders them as a
Gradle Kotlin DSL dependencies block, JSON, or plain notation lines.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from jinja2 import Environment, StrictUndefined

from nativeset.libraries.descriptor import ResolvedDependencyEntry
from nativeset.libraries.loader import LibrarySet


GRADLE_TEMPLATE = """\
dependencies {
{%- if bom %}
    api(platform("{{ bom }}"))
{% endif %}
{%- for c in coordinates %}
{%- if c.classifier %}
    {{ c.configuration }}("{{ c.base_notation }}") { artifact { classifier = "{{ c.classifier }}" } }
{%- else %}
    {{ c.configuration }}("{{ c.base_notation }}")
{%- endif %}
{%- endfor %}
}
"""


@dataclass(frozen=True)
class Coordinate:
    """A resolvable library coordinate with an optional classifier."""
    
    group: str
    artifact: str
    version: Optional[str] = None
    classifier: Optional[str] = None
    configuration: str = "api"
    
    @property
    def base_notation(self) -> str:
        """``group:artifact[:version]`` without the classifier."""
        parts = [self.group, self.artifact]
        if self.version:
            parts.append(self.version)
        return ":".join(parts)
    
    @property
    def notation(self) -> str:
        """``group:artifact[:version][:classifier]``."""
        if not self.classifier:
            return self.base_notation
        return f"{self.group}:{self.artifact}:{self.version or ''}:{self.classifier}"
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "group": self.group,
            "artifact": self.artifact,
            "version": self.version,
            "classifier": self.classifier,
            "configuration": self.configuration,
            "notation": self.notation,
        }


def assemble(
    entries: Sequence[ResolvedDependencyEntry],
    library_set: LibrarySet,
) -> List[Coordinate]:
    """
    Map entries to coordinates, keeping their order.
    
    Versions are left out when the set has a BOM to manage them.
    """
    version = None if library_set.bom else library_set.version
    return [
        Coordinate(
            group=entry.group or library_set.group,
            artifact=entry.library_name,
            version=version,
            classifier=entry.classifier,
            configuration=entry.configuration,
        )
        for entry in entries
    ]


def bom_notation(library_set: LibrarySet) -> Optional[str]:
    if not library_set.bom:
        return None
    notation = f"{library_set.group}:{library_set.bom}"
    if library_set.version:
        notation += f":{library_set.version}"
    return notation


class DependencyRenderer:
    """Renders assembled coordinates in the supported output formats."""
    
    FORMATS = ("gradle", "json", "text")
    
    def __init__(self):
        self.env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self.gradle_template = self.env.from_string(GRADLE_TEMPLATE)
    
    def render(
        self,
        coordinates: Sequence[Coordinate],
        bom: Optional[str] = None,
        output_format: str = "gradle",
    ) -> str:
        if output_format == "gradle":
            return self.render_gradle(coordinates, bom)
        if output_format == "json":
            return self.render_json(coordinates, bom)
        if output_format == "text":
            return self.render_text(coordinates)
        raise ValueError(f"Unknown output format: {output_format}")
    
    def render_gradle(self, coordinates: Sequence[Coordinate], bom: Optional[str] = None) -> str:
        return self.gradle_template.render(coordinates=coordinates, bom=bom)
    
    def render_json(self, coordinates: Sequence[Coordinate], bom: Optional[str] = None) -> str:
        return json.dumps(
            {"bom": bom, "dependencies": [c.to_dict() for c in coordinates]},
            indent=2,
        )
    
    def render_text(self, coordinates: Sequence[Coordinate]) -> str:
        return "".join(f"{c.notation}\n" for c in coordinates)
