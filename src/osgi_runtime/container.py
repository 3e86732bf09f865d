# OSGi Runtime Composer — declarative OSGi runtime image assembly
# Copyright (c) 2025
# OSGi Runtime Composer contributors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Container backends and the backend registry.

A backend supplies the container's mandatory system bundles and the
directory names of the runtime image layout. Backends are looked up by
type name in CONTAINER_FACTORIES; adding one (e.g. Equinox) means
implementing the interfaces.Container protocol and registering it.
"""

from __future__ import annotations

from collections.abc import Callable

from .bundle import Bundle
from .interfaces import Container

FELIX_MAIN = "org.apache.felix:org.apache.felix.main:jar:2.0.4"


class Felix:
    """Apache Felix backend."""

    def bundles(self) -> list[Bundle]:
        return [Bundle(FELIX_MAIN, 1)]

    def configuration_dir(self) -> str:
        return "conf"

    def bundle_dir(self) -> str:
        return "bundles"

    def system_bundle_repository(self) -> str:
        return "system"

    def __repr__(self) -> str:
        return "Felix()"


ContainerFactory = Callable[[], Container]

CONTAINER_FACTORIES: dict[str, ContainerFactory] = {
    "felix": Felix,
}


def register_container(name: str, factory: ContainerFactory) -> None:
    """Register a container backend under a type name."""
    key = (name or "").strip()
    if not key:
        raise ValueError("Container type name must be a non-empty string")
    if key in CONTAINER_FACTORIES:
        raise ValueError(f"Container type {key} already registered")
    CONTAINER_FACTORIES[key] = factory


def available_containers() -> tuple[str, ...]:
    return tuple(sorted(CONTAINER_FACTORIES))
