"""
Utility script to generate and write the OpenAPI schema for the Todo API.

The schema is serialized to interfaces/openapi.json (next to src/) so API
clients and documentation tools can consume it without running the server.

Usage:
    python -m todo_api.generate_openapi
"""
from __future__ import annotations

import json
import os
from typing import Optional

from .main import app


def _default_out_path() -> str:
    package_dir = os.path.dirname(os.path.abspath(__file__))  # .../src/todo_api
    project_root = os.path.dirname(os.path.dirname(package_dir))
    return os.path.join(project_root, "interfaces", "openapi.json")


# PUBLIC_INTERFACE
def generate_openapi(out_path: Optional[str] = None) -> str:
    """Write the OpenAPI schema to out_path (default interfaces/openapi.json) and return the path."""
    out_path = out_path or _default_out_path()
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(app.openapi(), f, indent=2, ensure_ascii=False)
    return out_path


def main() -> None:
    path = generate_openapi()
    print(f"Wrote OpenAPI schema to: {path}")


if __name__ == "__main__":
    main()
