# OSGi Runtime Composer — declarative OSGi runtime image assembly
# Copyright (c) 2025
# OSGi Runtime Composer contributors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Offline artifact resolution.

Handles:
- Parsing colon-separated artifact specs
  (group:id:type:version or group:id:type:classifier:version)
- Mapping specs ({group, id, type, classifier, version})
- SpecResolver: the default ArtifactResolver used when the host build
  does not inject its own

Nothing here downloads anything; a resolved Artifact is only a
normalized coordinate.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_TYPE = "jar"


@dataclass(frozen=True)
class Artifact:
    """Normalized artifact coordinate."""

    group: str
    id: str
    type: str
    version: str
    classifier: str | None = None

    def to_spec(self) -> str:
        parts = [self.group, self.id, self.type]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)

    def __str__(self) -> str:
        return self.to_spec()


def parse_spec(text: str) -> Artifact:
    """Parse a colon-separated artifact spec.

    Accepts 4 parts (group:id:type:version) or 5 parts
    (group:id:type:classifier:version). Surrounding whitespace is ignored.
    """
    if not isinstance(text, str):
        raise ValueError(f"Artifact spec must be a string, got {text!r}")

    parts = [p.strip() for p in text.strip().split(":")]
    if len(parts) not in (4, 5) or not all(parts):
        raise ValueError(
            f"Invalid artifact spec {text!r}: expected "
            "group:id:type:version or group:id:type:classifier:version"
        )

    if len(parts) == 4:
        group, artifact_id, type_, version = parts
        return Artifact(group, artifact_id, type_, version)

    group, artifact_id, type_, classifier, version = parts
    return Artifact(group, artifact_id, type_, version, classifier)


def artifact_from_mapping(data: Mapping[str, Any]) -> Artifact:
    """Build an Artifact from a mapping spec; type defaults to jar."""
    missing = [k for k in ("group", "id", "version") if not data.get(k)]
    if missing:
        raise ValueError(
            f"Artifact spec {dict(data)!r} is missing: {', '.join(missing)}"
        )
    return Artifact(
        group=str(data["group"]),
        id=str(data["id"]),
        type=str(data.get("type") or DEFAULT_TYPE),
        version=str(data["version"]),
        classifier=(str(data["classifier"]) if data.get("classifier") else None),
    )


class SpecResolver:
    """ArtifactResolver that only normalizes specs, without fetching."""

    def resolve(self, spec: Any) -> Artifact:
        if isinstance(spec, Artifact):
            return spec
        if isinstance(spec, Mapping):
            return artifact_from_mapping(spec)
        if hasattr(spec, "to_spec"):
            return parse_spec(spec.to_spec())
        return parse_spec(spec)

    def resolve_all(self, specs: Iterable[Any]) -> list[Artifact]:
        return [self.resolve(spec) for spec in specs]
