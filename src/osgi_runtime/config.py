# OSGi Runtime Composer — declarative OSGi runtime image assembly
# Copyright (c) 2025
# OSGi Runtime Composer contributors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Runtime descriptor loading and Runtime wiring.

Handles:
- Packaged YAML defaults loading (osgi_runtime/defaults/*.yaml)
- Descriptor discovery by walking up to osgi-runtime.yaml
- OSGI_RUNTIME_CONTAINER container type override
- Building a Runtime from a descriptor (feature catalog, enabled
  features, application bundles)
- ANSI coloring constants used by the CLI

Example descriptor:

    container: felix
    features:
      web:
        - org.example:web-api:jar:1.0
        - spec: org.example:web-impl:jar:1.0
          run_level: 3
    enable: [web]
    bundles:
      - com.example:app:jar:1.0
      - specs: [com.example:plugin-a:jar:1.0, com.example:plugin-b:jar:1.0]
        run_level: 5
"""

from __future__ import annotations

import logging
import os
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml

from .bundle import DEFAULT_RUN_LEVEL, Bundle
from .interfaces import ArtifactResolver, ConfigModel
from .runtime import Runtime, coordinate_of

logger = logging.getLogger(__name__)

DESCRIPTOR_FILENAME = "osgi-runtime.yaml"
CONTAINER_ENV_VAR = "OSGI_RUNTIME_CONTAINER"


# -----------------------
# UI constants
# -----------------------

ANSI_COLORS: dict[str, str] = {
    "cyan": "\033[38;5;69;1m",
    "pink": "\033[38;5;169;1m",
    "magenta": "\033[38;5;126;1m",
    "yellow": "\033[38;5;226;1m",
    "reset": "\033[0m",
    "dim": "\033[2m",
    "green": "\033[32m",
    "red": "\033[31m",
}


# -----------------------
# Config model wrapper
# -----------------------


class RuntimeConfig:
    """Descriptor wrapper that implements the ConfigModel protocol."""

    def __init__(self, config_dict: dict[str, Any]):
        if not isinstance(config_dict, dict):
            raise ValueError("Runtime descriptor must be a mapping/dict.")
        self._config = config_dict

    @property
    def container(self) -> str | None:
        value = self._config.get("container")
        return str(value) if value else None

    @property
    def features(self) -> dict[str, Any]:
        features = self._config.get("features") or {}
        if not isinstance(features, dict):
            raise ValueError("'features' must be a mapping of key -> bundles")
        return features

    @property
    def enable(self) -> list[str]:
        enable = self._config.get("enable") or []
        if isinstance(enable, str):
            return [enable]
        if not isinstance(enable, list):
            raise ValueError("'enable' must be a list of feature keys")
        return [str(key) for key in enable]

    @property
    def bundles(self) -> list[Any]:
        bundles = self._config.get("bundles") or []
        if not isinstance(bundles, list):
            raise ValueError("'bundles' must be a list")
        return bundles

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def get_path(self, path: str, default: Any = None) -> Any:
        """
        Nested lookup using dot-separated path.
        Example: get_path("features.web", []) -> web bundle specs
        """
        if not path:
            return default

        cur: Any = self._config
        for part in path.split("."):
            if not isinstance(cur, dict):
                return default
            if part not in cur:
                return default
            cur = cur[part]
        return cur


# -----------------------
# Packaged defaults loading
# -----------------------


def _defaults_dir() -> Path:
    """Return the installed path to the packaged defaults directory."""
    return Path(
        importlib_resources.files("osgi_runtime.defaults")
    )  # type: ignore[arg-type]


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"YAML file {path.name} must load to a mapping/dict.")
    return data


def load_defaults_yaml(filename: str) -> dict[str, Any]:
    """
    Load a YAML file from osgi_runtime/defaults/.
    """
    defaults_dir = _defaults_dir()
    path = defaults_dir / filename
    if not path.exists():
        raise FileNotFoundError(
            f"Missing defaults YAML: {filename} "
            f"(looked in {defaults_dir})"
        )
    return _load_yaml_mapping(path)


def default_container_type() -> str:
    """Container type to use when neither env nor descriptor names one.

    Resolution order:
    1. OSGI_RUNTIME_CONTAINER environment variable (if set)
    2. ``container`` in the packaged system.yaml
    """
    env_value = os.getenv(CONTAINER_ENV_VAR)
    if env_value:
        return env_value.strip()
    return str(load_defaults_yaml("system.yaml").get("container", "felix"))


# -----------------------
# Descriptor discovery
# -----------------------


def find_descriptor(cwd: Path) -> Path | None:
    """Find osgi-runtime.yaml by walking up from cwd."""
    current = cwd.resolve()

    while True:
        candidate = current / DESCRIPTOR_FILENAME
        if candidate.exists():
            return candidate

        parent = current.parent
        if parent == current:
            return None

        current = parent


def load_descriptor(path: Path) -> RuntimeConfig:
    """Load and parse a runtime descriptor file."""
    if not path.exists():
        raise FileNotFoundError(f"Missing runtime descriptor: {path}")
    return RuntimeConfig(_load_yaml_mapping(path))


# -----------------------
# Runtime wiring
# -----------------------


def _split_entry(entry: Any) -> tuple[list[Any], int]:
    """Normalize a bundle declaration to (specs, run_level)."""
    if not isinstance(entry, dict):
        return [entry], DEFAULT_RUN_LEVEL

    run_level = entry.get("run_level", DEFAULT_RUN_LEVEL)
    if "specs" in entry:
        specs = entry["specs"]
        if not isinstance(specs, list):
            specs = [specs]
    elif "spec" in entry:
        specs = [entry["spec"]]
    else:
        # Bare artifact mapping ({group, id, version, ...})
        return [entry], DEFAULT_RUN_LEVEL
    return list(specs), run_level


def _feature_bundles_factory(key: str, entries: Any):
    if not isinstance(entries, list):
        raise ValueError(f"Feature {key} must list its bundles")

    def factory(runtime: Runtime) -> list[Bundle]:
        bundles: list[Bundle] = []
        for entry in entries:
            specs, run_level = _split_entry(entry)
            for artifact in runtime.resolver.resolve_all(specs):
                bundles.append(Bundle(coordinate_of(artifact), run_level))
        return bundles

    return factory


def build_runtime(
    cfg: ConfigModel,
    resolver: ArtifactResolver | None = None,
    project: Any = None,
) -> Runtime:
    """Create a Runtime and apply a descriptor to it, in descriptor order."""
    container_type = (
        (os.getenv(CONTAINER_ENV_VAR) or "").strip()
        or cfg.container
        or default_container_type()
    )

    runtime = Runtime(project=project, container_type=container_type)
    if resolver is not None:
        runtime.resolver = resolver

    for key, entries in cfg.features.items():
        runtime.define_bundles(str(key), _feature_bundles_factory(str(key), entries))

    for key in cfg.enable:
        runtime.enable_feature(key)

    for entry in cfg.bundles:
        specs, run_level = _split_entry(entry)
        runtime.include_bundles(specs, run_level=run_level)

    logger.debug(
        "Built runtime: container=%s features=%s application_bundles=%d",
        container_type,
        [f.key for f in runtime.features],
        len(runtime.application_bundles),
    )
    return runtime
