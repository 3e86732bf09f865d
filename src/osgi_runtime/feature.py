# OSGi Runtime Composer — declarative OSGi runtime image assembly
# Copyright (c) 2025
# OSGi Runtime Composer contributors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Feature: a named group of bundles enabled as a unit.
"""

from __future__ import annotations

from collections.abc import Iterable

from .bundle import Bundle
from .errors import FeatureSealedError


class Feature:
    """Keyed, write-once collection of bundles.

    ``bundles`` may be set once, either through the constructor or by a
    single assignment. Once a Runtime registers the feature it is sealed
    and the bundle list can no longer be assigned at all.
    """

    def __init__(self, key: str, bundles: Iterable[Bundle] | None = None):
        if not isinstance(key, str) or not key.strip():
            raise ValueError("Feature key must be a non-empty string")
        self._key = key
        self._bundles: tuple[Bundle, ...] | None = None
        self._sealed = False
        if bundles is not None:
            self.bundles = bundles

    @property
    def key(self) -> str:
        return self._key

    @property
    def bundles(self) -> tuple[Bundle, ...]:
        return self._bundles if self._bundles is not None else ()

    @bundles.setter
    def bundles(self, bundles: Iterable[Bundle]) -> None:
        if self._sealed or self._bundles is not None:
            raise FeatureSealedError(self._key)
        items = tuple(bundles)
        for item in items:
            if not isinstance(item, Bundle):
                raise TypeError(
                    f"Feature {self._key} bundles must be Bundle instances, "
                    f"got {type(item).__name__}"
                )
        self._bundles = items

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Freeze the bundle list (called by the owning Runtime)."""
        self._sealed = True

    def __repr__(self) -> str:
        return f"Feature(key={self._key!r}, bundles={list(self.bundles)!r})"
