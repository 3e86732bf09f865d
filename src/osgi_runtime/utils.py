# OSGi Runtime Composer — declarative OSGi runtime image assembly
# Copyright (c) 2025
# OSGi Runtime Composer contributors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Utility functions for rendering composed runtimes.
"""

from __future__ import annotations

from typing import Any

from .bundle import Bundle
from .runtime import Runtime


def format_table(
    headers: list[str],
    rows: list[list[Any]],
    title: str = ""
) -> str:
    """
    Format data as a simple text table.

    Args:
        headers: List of column header names
        rows: List of rows, where each row is a list of values
        title: Optional title to display above the table

    Returns:
        Formatted table as a string
    """
    if not rows:
        return ""

    str_headers = [str(h) for h in headers]
    str_rows = [[str(val) for val in row] for row in rows]

    # Column width = widest of header and values
    col_widths = []
    for i, header in enumerate(str_headers):
        max_width = len(header)
        for row in str_rows:
            if i < len(row):
                max_width = max(max_width, len(row[i]))
        col_widths.append(max_width)

    lines = []
    if title:
        lines.append(title)

    lines.append(
        "  ".join(h.ljust(col_widths[i]) for i, h in enumerate(str_headers))
        .rstrip()
    )
    for row in str_rows:
        lines.append(
            "  ".join(v.ljust(col_widths[i]) for i, v in enumerate(row)).rstrip()
        )

    return "\n".join(lines)


def bundle_sources(runtime: Runtime) -> list[tuple[Bundle, str, str]]:
    """Tag every bundle of ``runtime`` with (kind, label).

    Kind is one of "system", "feature" or "application"; label is the
    feature key for feature bundles and the kind otherwise. Order
    matches ``runtime.bundles``.
    """
    entries: list[tuple[Bundle, str, str]] = [
        (b, "system", "system") for b in runtime.container.bundles()
    ]
    for feature in runtime.features:
        entries.extend((b, "feature", feature.key) for b in feature.bundles)
    entries.extend(
        (b, "application", "application") for b in runtime.application_bundles
    )
    return entries
