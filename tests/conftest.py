"""Shared fixtures for bundlescope tests."""

import json
import os

import pytest

from bundlescope.models import ModuleRecord


@pytest.fixture
def records():
    """A small bundle mixing dependencies, workspace siblings and local source."""
    return [
        ModuleRecord("node_modules/react-dom/cjs/react-dom.production.js", 130_000, True),
        ModuleRecord("node_modules/react/index.js", 6_000, True),
        ModuleRecord("node_modules/@tanstack/query-core/build/index.js", 40_000, True),
        ModuleRecord("node_modules/.pnpm/lodash@4.17.21/node_modules/lodash/lodash.js", 70_000, True),
        ModuleRecord("../../packages/ui/src/button.tsx", 3_000),
        ModuleRecord("../../packages/ui/src/index.ts", 500),
        ModuleRecord("src/index.ts", 800),
        ModuleRecord("src/app.tsx", 4_200),
        ModuleRecord("index.html", 300),
    ]


@pytest.fixture
def diamond_graph():
    """Reverse adjacency for: A imports B and C, B and C import D, D imports E."""
    return {
        "B": ["A"],
        "C": ["A"],
        "D": ["B", "C"],
        "E": ["D"],
    }


@pytest.fixture
def analysis_document():
    """Analysis JSON as an adapter would write it."""
    return {
        "target": "web",
        "bundler": "esbuild",
        "entry": "src/index.ts",
        "output_bytes": 9000,
        "modules": [
            {"path": "src/index.ts", "bytes": 800, "is_external_dependency": False},
            {"path": "src/app.tsx", "bytes": 4200, "is_external_dependency": False},
            {"path": "node_modules/lodash/lodash.js", "bytes": 7000, "isNodeModule": True},
            {"path": "node_modules/lodash/lodash.js", "bytes": 5000, "isNodeModule": True},
            {"path": "node_modules/@scope/pkg/dist/x.js", "bytes": 1000},
        ],
        "imports": {
            "src/index.ts": {"imports": [{"path": "src/app.tsx"}]},
            "src/app.tsx": {
                "imports": [
                    {"path": "node_modules/lodash/lodash.js"},
                    {"path": "node_modules/@scope/pkg/dist/x.js"},
                ]
            },
            "node_modules/lodash/lodash.js": {},
        },
    }


@pytest.fixture
def analysis_file(tmp_path, analysis_document):
    path = tmp_path / "web.analysis.json"
    path.write_text(json.dumps(analysis_document), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and BUNDLESCOPE_* vars out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("BUNDLESCOPE_"):
            monkeypatch.delenv(key)
