# OSGi Runtime Composer — declarative OSGi runtime image assembly
# Copyright (c) 2025
# OSGi Runtime Composer contributors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
OSGi runtime composition engine.

The Runtime owns:
- one lazily built, cached container backend
- a registry of enabled features (insertion ordered)
- the list of application bundles

and composes them into the final bundle list:

    container bundles + feature bundles (in enable order) + application bundles

Important boundary:
- Runtime does not load YAML or read descriptor files (see config.py).
- Runtime does not fetch artifacts; it consumes the injected resolver.
- Runtime writes nothing to disk; the packaging stage consumes
  ``bundles`` and the container's directory names.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .bundle import DEFAULT_RUN_LEVEL, Bundle
from .container import CONTAINER_FACTORIES, ContainerFactory
from .errors import (
    DuplicateFeatureError,
    FeatureKeyMismatchError,
    InvalidFeatureArgumentError,
    InvalidFeatureFactoryError,
    UnsupportedContainerError,
    UnsupportedFeatureError,
)
from .feature import Feature
from .interfaces import ArtifactResolver, Container
from .resolver import SpecResolver

logger = logging.getLogger(__name__)

BundlesFactory = Callable[["Runtime"], Iterable[Bundle]]
FeatureFactory = Callable[["Runtime"], Feature]

_RUN_LEVEL_OPTIONS = ("run_level", "run-level")


def _flatten(specs: Iterable[Any]) -> list[Any]:
    """Flatten nested lists/tuples of specs, keeping order."""
    out: list[Any] = []
    for spec in specs:
        if isinstance(spec, (list, tuple)):
            out.extend(_flatten(spec))
        else:
            out.append(spec)
    return out


def coordinate_of(artifact: Any) -> str:
    to_spec = getattr(artifact, "to_spec", None)
    if callable(to_spec):
        return to_spec()
    return str(artifact)


@dataclass
class Runtime:
    """Composition engine for one build project."""

    resolver: ArtifactResolver = field(default_factory=SpecResolver)
    project: Any = None
    container_type: str = "felix"

    # None means "use the module-level backend registry"
    container_factories: Mapping[str, ContainerFactory] | None = None

    _container: Container | None = field(default=None, init=False, repr=False)
    _features: dict[str, Feature] = field(default_factory=dict, init=False)
    _application_bundles: list[Bundle] = field(
        default_factory=list, init=False
    )
    _bundle_factories: dict[str, BundlesFactory] = field(
        default_factory=dict, init=False, repr=False
    )
    _feature_factories: dict[str, FeatureFactory] = field(
        default_factory=dict, init=False, repr=False
    )

    # ---- Container ----

    @property
    def container(self) -> Container:
        """The container backend, built on first access and then cached.

        Changing ``container_type`` after this has been read has no effect.
        """
        if self._container is None:
            factories = (
                self.container_factories
                if self.container_factories is not None
                else CONTAINER_FACTORIES
            )
            factory = factories.get(self.container_type)
            if factory is None:
                raise UnsupportedContainerError(self.container_type)
            self._container = factory()
            logger.debug("Built %s container", self.container_type)
        return self._container

    # ---- Feature factories ----

    def define_bundles(self, key: str, factory: BundlesFactory) -> None:
        """Register a factory returning the bundle list of feature ``key``."""
        if key in self._bundle_factories:
            raise ValueError(f"Bundles factory for feature {key} already defined")
        self._bundle_factories[key] = factory

    def define_feature(self, key: str, factory: FeatureFactory) -> None:
        """Register a factory returning a fully formed Feature for ``key``."""
        if key in self._feature_factories:
            raise ValueError(f"Feature factory for feature {key} already defined")
        self._feature_factories[key] = factory

    # ---- Features ----

    def enable_feature(self, feature: str | Feature) -> Feature:
        """Enable a feature given by key or as a Feature instance."""
        if isinstance(feature, str):
            return self.enable_feature_by_key(feature)
        if isinstance(feature, Feature):
            return self._add_feature(feature)
        raise InvalidFeatureArgumentError(feature)

    def enable_feature_by_key(self, key: str) -> Feature:
        if key in self._features:
            raise DuplicateFeatureError(key)
        return self._add_feature(self._create_feature(key))

    @property
    def features(self) -> list[Feature]:
        return list(self._features.values())

    def feature(self, key: str) -> Feature | None:
        return self._features.get(key)

    def _add_feature(self, feature: Feature) -> Feature:
        if feature.key in self._features:
            raise DuplicateFeatureError(feature.key)
        feature.seal()
        self._features[feature.key] = feature
        logger.debug(
            "Enabled feature %s (%d bundles)", feature.key, len(feature.bundles)
        )
        return feature

    def _create_feature(self, key: str) -> Feature:
        bundles_factory = self._bundle_factories.get(key)
        if bundles_factory is not None:
            return Feature(key, bundles_factory(self))

        feature_factory = self._feature_factories.get(key)
        if feature_factory is None:
            raise UnsupportedFeatureError(key)

        feature = feature_factory(self)
        if not isinstance(feature, Feature):
            raise InvalidFeatureFactoryError(key, feature)
        if feature.key != key:
            raise FeatureKeyMismatchError(key, feature.key)
        return feature

    # ---- Bundles ----

    @property
    def system_bundles(self) -> list[Bundle]:
        bundles = list(self.container.bundles())
        for feature in self._features.values():
            bundles.extend(feature.bundles)
        return bundles

    @property
    def application_bundles(self) -> list[Bundle]:
        return self._application_bundles

    def include_bundles(self, *specs: Any, run_level: int = DEFAULT_RUN_LEVEL) -> list[Bundle]:
        """Resolve ``specs`` and append one application bundle per artifact.

        A trailing mapping argument is read as options (``run_level``).
        All bundles of one call share its run level. Nothing is
        deduplicated.
        """
        items = list(specs)
        if items and isinstance(items[-1], Mapping):
            options = dict(items.pop())
            for name in _RUN_LEVEL_OPTIONS:
                if name in options:
                    run_level = options.pop(name)
            if options:
                raise ValueError(
                    f"Unknown include_bundles options: {', '.join(sorted(options))}"
                )

        artifacts = self.resolver.resolve_all(_flatten(items))
        added = [Bundle(coordinate_of(a), run_level) for a in artifacts]
        self._application_bundles.extend(added)
        logger.debug("Included %d bundles at run level %s", len(added), run_level)
        return added

    @property
    def bundles(self) -> list[Bundle]:
        return self.system_bundles + self._application_bundles
