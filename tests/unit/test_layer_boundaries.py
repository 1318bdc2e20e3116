"""Hexagonal layering rules for the src package.

- domain/ imports nothing from other src layers
- application/ imports from domain/ only
- api/ never imports infrastructure/ directly (wiring goes through bootstrap)
"""

import ast
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[2] / "src"

FORBIDDEN = {
    "domain": {"application", "infrastructure", "api", "bootstrap", "config"},
    "application": {"infrastructure", "api", "bootstrap", "config"},
    "api": {"infrastructure"},
}


def _src_layers_imported(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    layers: set[str] = set()
    for node in ast.walk(tree):
        names: list[str] = []
        if isinstance(node, ast.Import):
            names = [alias.name for alias in node.names]
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            names = [node.module]
        for name in names:
            parts = name.split(".")
            if len(parts) > 1 and parts[0] == "src":
                layers.add(parts[1])
    return layers


@pytest.mark.parametrize("layer", sorted(FORBIDDEN))
def test_layer_does_not_import_outer_layers(layer: str) -> None:
    violations = []
    for path in sorted((SRC_ROOT / layer).rglob("*.py")):
        bad = _src_layers_imported(path) & FORBIDDEN[layer]
        if bad:
            violations.append(f"{path.relative_to(SRC_ROOT)}: {sorted(bad)}")
    assert violations == []


def test_helper_detects_src_imports(tmp_path: Path) -> None:
    module = tmp_path / "sample.py"
    module.write_text(
        "import os\n"
        "from src.domain.errors import ConflictError\n"
        "import src.infrastructure.observability.metrics\n"
        "from . import sibling\n"
    )

    assert _src_layers_imported(module) == {"domain", "infrastructure"}
