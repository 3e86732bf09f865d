# tests/test_headers.py
"""
Source files carry the project's BSL header.
"""
from __future__ import annotations

from pathlib import Path

import osgi_runtime

PACKAGE_DIR = Path(osgi_runtime.__file__).parent


def test_every_source_file_has_project_header() -> None:
    sources = sorted(PACKAGE_DIR.rglob("*.py"))
    assert sources

    for path in sources:
        head = path.read_text(encoding="utf-8").splitlines()[:8]
        assert head[0].startswith("# OSGi Runtime Composer"), path
        assert head[2] == "# OSGi Runtime Composer contributors", path
        assert "# Licensed under the Business Source License 1.1 (BSL 1.1)." in head, path
