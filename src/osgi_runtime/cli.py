# OSGi Runtime Composer — declarative OSGi runtime image assembly
# Copyright (c) 2025
# OSGi Runtime Composer contributors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
osgi-runtime CLI entry point.

Design:
- CLI owns descriptor discovery and logging setup.
- Runtime is the composition engine (resolver + descriptor injected).
- Output goes through prompt_toolkit so ANSI colors render on every
  terminal prompt_toolkit supports.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from pathlib import Path

from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.shortcuts import print_formatted_text

from . import config
from .errors import OSGiRuntimeError
from .runtime import Runtime
from .utils import bundle_sources, format_table

logger = logging.getLogger(__name__)


def write_ansi(text: str) -> None:
    """Write EXACTLY what we receive (no extra newline)."""
    if not text:
        return
    print_formatted_text(ANSI(text), end="")


def _colorize(text: str, color: str | None, enabled: bool) -> str:
    if not enabled or not color or color not in config.ANSI_COLORS:
        return text
    return config.ANSI_COLORS[color] + text + config.ANSI_COLORS["reset"]


def render_runtime(runtime: Runtime, color: bool = True) -> str:
    """Render the container layout and the composed bundle table."""
    colors: dict[str, str] = {}
    if color:
        colors = (
            config.load_defaults_yaml("system.yaml")
            .get("cli", {})
            .get("colors", {})
        ) or {}

    container = runtime.container
    lines = [
        _colorize(f"Container: {runtime.container_type}", "pink", color),
        f"  configuration dir:        {container.configuration_dir()}",
        f"  bundle dir:               {container.bundle_dir()}",
        f"  system bundle repository: {container.system_bundle_repository()}",
        "",
    ]

    rows = []
    kinds = []
    entries = bundle_sources(runtime)
    for index, (bundle, kind, label) in enumerate(entries, start=1):
        rows.append([index, bundle.run_level, bundle.coordinate, label])
        kinds.append(kind)

    title = f"Bundles ({len(rows)})"
    table = format_table(["#", "run level", "coordinate", "source"], rows, title=title)
    table_lines = table.splitlines()
    if table_lines:
        lines.append(_colorize(table_lines[0], "pink", color))
        lines.append(_colorize(table_lines[1], "dim", color))
        for kind, line in zip(kinds, table_lines[2:]):
            lines.append(_colorize(line, colors.get(kind), color))

    return "\n".join(lines) + "\n"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osgi-runtime",
        description="Compose an OSGi runtime from an osgi-runtime.yaml descriptor.",
    )
    parser.add_argument(
        "descriptor",
        nargs="?",
        help="Descriptor path (default: search upward for osgi-runtime.yaml)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(
    argv: list[str] | None = None,
    output_fn: Callable[[str], None] = write_ansi,
    cwd: Path | None = None,
) -> int:
    """Main entry point for the osgi-runtime CLI."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.descriptor:
            descriptor = Path(args.descriptor)
        else:
            descriptor = config.find_descriptor(cwd or Path.cwd())
            if descriptor is None:
                raise FileNotFoundError(
                    f"No {config.DESCRIPTOR_FILENAME} found in this directory "
                    "or any parent"
                )

        logger.debug("Using descriptor %s", descriptor)
        runtime = config.build_runtime(config.load_descriptor(descriptor))
        output_fn(render_runtime(runtime, color=not args.no_color))
    except (OSGiRuntimeError, FileNotFoundError, ValueError) as e:
        output_fn(
            _colorize(f"[ERROR] {e}", "red", not args.no_color) + "\n"
        )
        return 1

    return 0


def run() -> None:
    raise SystemExit(main())
