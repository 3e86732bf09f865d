# OSGi Runtime Composer — declarative OSGi runtime image assembly
# Copyright (c) 2025
# OSGi Runtime Composer contributors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Error taxonomy for runtime composition.

Every error is raised at the call that detects it and is never caught
inside the engine. The surrounding build surfaces them as failures.
"""

from __future__ import annotations


class OSGiRuntimeError(Exception):
    """Base class for all composition failures."""


class UnsupportedContainerError(OSGiRuntimeError):
    """No container factory is registered for the configured type."""

    def __init__(self, container_type: str):
        self.container_type = container_type
        super().__init__(f"Container type {container_type} not supported")


class UnsupportedFeatureError(OSGiRuntimeError):
    """Neither a bundles factory nor a feature factory exists for a key."""

    def __init__(self, feature_key: str):
        self.feature_key = feature_key
        super().__init__(f"Feature {feature_key} not supported")


class FeatureKeyMismatchError(OSGiRuntimeError):
    """A feature factory produced a Feature with a different key."""

    def __init__(self, requested_key: str, actual_key: str):
        self.requested_key = requested_key
        self.actual_key = actual_key
        super().__init__(
            f"Feature factory for feature {requested_key} created a feature "
            f"with key {actual_key} rather than {requested_key}"
        )


class InvalidFeatureFactoryError(OSGiRuntimeError):
    """A feature factory returned something other than a Feature."""

    def __init__(self, feature_key: str, value: object):
        self.feature_key = feature_key
        self.value = value
        super().__init__(
            f"Feature factory for feature {feature_key} returned "
            f"{type(value).__name__} rather than a Feature"
        )


class DuplicateFeatureError(OSGiRuntimeError):
    """A feature with the same key is already registered."""

    def __init__(self, feature_key: str):
        self.feature_key = feature_key
        super().__init__(f"Feature {feature_key} already defined")


class InvalidFeatureArgumentError(OSGiRuntimeError, TypeError):
    """enable_feature() received neither a key nor a Feature."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            "Feature must be a feature key or an instance of Feature, "
            f"got {type(value).__name__}"
        )


class FeatureSealedError(OSGiRuntimeError):
    """A Feature's bundles were assigned twice or after registration."""

    def __init__(self, feature_key: str):
        self.feature_key = feature_key
        super().__init__(f"Bundles of feature {feature_key} are already set")
