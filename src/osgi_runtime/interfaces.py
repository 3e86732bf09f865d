# OSGi Runtime Composer — declarative OSGi runtime image assembly
# Copyright (c) 2025
# OSGi Runtime Composer contributors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Protocol definitions for dependency injection.

These interfaces separate the composition engine from the container
backends it delegates to and from the host's artifact resolution.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from .bundle import Bundle


class Container(Protocol):
    """Protocol for an OSGi container backend (Felix, Equinox, ...)."""

    def bundles(self) -> list[Bundle]:
        """Mandatory system bundles of the container, in start order."""
        ...

    def configuration_dir(self) -> str:
        """Directory holding the launcher configuration."""
        ...

    def bundle_dir(self) -> str:
        """Directory holding the deployed bundles."""
        ...

    def system_bundle_repository(self) -> str:
        """Directory holding the container's own system bundles."""
        ...


class Artifact(Protocol):
    """Resolved artifact handle returned by an ArtifactResolver."""

    def to_spec(self) -> str:
        """Render the artifact coordinate (group:id:type[:classifier]:version)."""
        ...


class ArtifactResolver(Protocol):
    """Protocol for the host's artifact-resolution capability."""

    def resolve(self, spec: Any) -> Artifact:
        """Resolve a single artifact specification."""
        ...

    def resolve_all(self, specs: Iterable[Any]) -> list[Artifact]:
        """Resolve several specifications, preserving order."""
        ...


class ConfigModel(Protocol):
    """Protocol for runtime descriptor access."""

    @property
    def container(self) -> str | None:
        """Container type name, or None for the default."""
        ...

    @property
    def features(self) -> dict[str, Any]:
        """Feature catalog: key -> bundle specifications."""
        ...

    @property
    def enable(self) -> list[str]:
        """Feature keys to enable, in order."""
        ...

    @property
    def bundles(self) -> list[Any]:
        """Application bundle declarations, in order."""
        ...
