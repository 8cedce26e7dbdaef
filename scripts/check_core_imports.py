#!/usr/bin/env python3
"""
Fail if jenkins_mcp.core imports the MCP server layer.

The core (transport, crumb issuer, resource APIs, dispatch) must stay usable
without a running MCP server, so only mcp.types / mcp.shared are allowed.
Relative imports are resolved before checking.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from typing import Iterator, Tuple

REPO_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = REPO_ROOT / "src"
CORE_DIR = SRC_DIR / "jenkins_mcp" / "core"

FORBIDDEN_PREFIXES = (
    "mcp.server",
    "fastmcp",
    "starlette",
    "uvicorn",
    "jenkins_mcp.server",
)


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def _package_of(path: Path) -> list[str]:
    # package __init__ and plain modules both anchor at their directory
    return list(path.relative_to(SRC_DIR).parent.parts)


def iter_imports(path: Path) -> Iterator[Tuple[int, str]]:
    tree = ast.parse(path.read_text())
    package = _package_of(path)
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield node.lineno, alias.name
        elif isinstance(node, ast.ImportFrom):
            base = node.module or ""
            if node.level:
                anchor = package[: len(package) - (node.level - 1)]
                base = ".".join([*anchor, base] if base else anchor)
            yield node.lineno, base
            for alias in node.names:
                yield node.lineno, f"{base}.{alias.name}"


def scan_file(path: Path) -> list[str]:
    return [
        f"{path.relative_to(REPO_ROOT)}:{lineno}: forbidden import '{module}'"
        for lineno, module in iter_imports(path)
        if is_forbidden(module)
    ]


def main() -> int:
    violations: list[str] = []
    for py_file in sorted(CORE_DIR.rglob("*.py")):
        violations.extend(scan_file(py_file))

    for v in violations:
        print(v, file=sys.stderr)
    return 1 if violations else 0


if __name__ == "__main__":
    sys.exit(main())
