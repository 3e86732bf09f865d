# tests/test_resolver.py
from __future__ import annotations

import pytest

from osgi_runtime.resolver import Artifact, SpecResolver, parse_spec


def test_parse_four_part_spec():
    artifact = parse_spec("com.example:app:jar:1.0")
    assert artifact == Artifact("com.example", "app", "jar", "1.0")
    assert artifact.to_spec() == "com.example:app:jar:1.0"


def test_parse_five_part_spec_with_classifier():
    artifact = parse_spec(" com.example:app:jar:sources:1.0 ")
    assert artifact.classifier == "sources"
    assert artifact.version == "1.0"
    assert str(artifact) == "com.example:app:jar:sources:1.0"


@pytest.mark.parametrize(
    "bad",
    ["", "com.example:app", "com.example:app:jar", "a:b:c:d:e:f", "a::jar:1"],
)
def test_parse_rejects_malformed_specs(bad):
    with pytest.raises(ValueError, match="Invalid artifact spec"):
        parse_spec(bad)


def test_parse_rejects_non_strings():
    with pytest.raises(ValueError):
        parse_spec(42)  # type: ignore[arg-type]


def test_resolver_accepts_mapping_and_defaults_type_to_jar():
    artifact = SpecResolver().resolve(
        {"group": "com.example", "id": "app", "version": "2.0"}
    )
    assert artifact.to_spec() == "com.example:app:jar:2.0"


def test_resolver_mapping_reports_missing_keys():
    with pytest.raises(ValueError, match="id, version"):
        SpecResolver().resolve({"group": "com.example"})


def test_resolver_returns_artifact_unchanged():
    artifact = Artifact("g", "a", "bundle", "1")
    assert SpecResolver().resolve(artifact) is artifact


def test_resolver_accepts_objects_with_to_spec():
    class Handle:
        def to_spec(self) -> str:
            return "g:a:jar:1"

    assert SpecResolver().resolve(Handle()) == Artifact("g", "a", "jar", "1")


def test_resolve_all_preserves_order():
    specs = ["g:b:jar:1", "g:a:jar:1", "g:b:jar:1"]
    assert [a.to_spec() for a in SpecResolver().resolve_all(specs)] == specs
