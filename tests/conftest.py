from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest

from electronize_cli.core.config import ElectronizeConfig
from electronize_cli.pipeline.registry import StageRegistry

INDEX_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>Vite + React + TS</title>
  </head>
  <body>
    <div id="root"></div>
    <script type="module" src="/src/main.tsx"></script>
  </body>
</html>
"""

PACKAGE_JSON = {
    "name": "demo-app",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {
        "dev": "vite",
        "build": "tsc -b && vite build",
        "lint": "eslint .",
        "preview": "vite preview",
    },
    "dependencies": {
        "react": "^18.3.1",
        "react-dom": "^18.3.1",
    },
    "devDependencies": {
        "@vitejs/plugin-react": "^4.3.1",
        "typescript": "^5.5.3",
        "vite": "^4.0.0",
    },
}


def write_package_json(root: Path, data: dict) -> Path:
    path = root / "package.json"
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def vite_project(tmp_path: Path) -> Path:
    """A freshly scaffolded Vite + React + TS project."""
    project = tmp_path / "demo-app"
    src = project / "src"
    (src / "assets").mkdir(parents=True)
    (src / "main.tsx").write_text("import App from './App'\n", encoding="utf-8")
    (src / "App.tsx").write_text("export default function App() { return null }\n", encoding="utf-8")
    (src / "index.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    (src / "assets" / "react.svg").write_text("<svg/>\n", encoding="utf-8")
    (project / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    write_package_json(project, PACKAGE_JSON)
    return project


@pytest.fixture()
def project_config(vite_project: Path) -> ElectronizeConfig:
    return ElectronizeConfig(root_directory=vite_project)


@pytest.fixture()
def registry_restore() -> Iterator[None]:
    original = StageRegistry._stages.copy()
    yield
    StageRegistry._stages = original


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo handler changes made by CLI commands so caplog keeps working."""
    package_logger = logging.getLogger("electronize_cli")
    yield
    package_logger.handlers = []
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
