# OSGi Runtime Composer — declarative OSGi runtime image assembly
# Copyright (c) 2025
# OSGi Runtime Composer contributors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Bundle value type.
"""

from __future__ import annotations

from dataclasses import dataclass

# Run level given to bundles that do not ask for one
DEFAULT_RUN_LEVEL = 1


@dataclass(frozen=True)
class Bundle:
    """One deployable artifact coordinate plus the run level it starts at.

    The coordinate is kept as given (e.g. ``group:artifact:type:version``);
    checking its syntax is the artifact resolver's job.
    """

    coordinate: str
    run_level: int = DEFAULT_RUN_LEVEL

    def __post_init__(self) -> None:
        if isinstance(self.run_level, bool) or not isinstance(self.run_level, int):
            raise ValueError(
                f"run_level must be an integer, got {self.run_level!r}"
            )
        if self.run_level < 0:
            raise ValueError(
                f"run_level must be non-negative, got {self.run_level}"
            )

    def __str__(self) -> str:
        return f"{self.coordinate}@{self.run_level}"
