"""Tests for the typer CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from bundlescope import __version__
from bundlescope.cli import app


@pytest.fixture
def runner():
    return CliRunner()


class TestPackagesCommand:
    def test_table(self, runner, analysis_file):
        result = runner.invoke(app, ["packages", str(analysis_file)])
        assert result.exit_code == 0, result.output
        assert "lodash" in result.stdout
        assert "src (local)" in result.stdout
        assert "@scope/pkg" in result.stdout

    def test_json(self, runner, analysis_file):
        result = runner.invoke(app, ["packages", str(analysis_file), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["input_bytes"] == 13_000
        assert [p["name"] for p in data["packages"]] == ["lodash", "src (local)", "@scope/pkg"]
        assert data["packages"][1]["category"] == "local"

    def test_header_shows_output_and_source_bytes(self, runner, analysis_file):
        result = runner.invoke(app, ["packages", str(analysis_file)])
        assert "output 8.8 KB" in result.stdout
        assert "source 12.7 KB" in result.stdout

    def test_limit(self, runner, analysis_file):
        result = runner.invoke(app, ["packages", str(analysis_file), "--json", "-n", "1"])
        assert [p["name"] for p in json.loads(result.stdout)["packages"]] == ["lodash"]

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["packages", str(tmp_path / "missing.json")])
        assert result.exit_code != 0

    def test_invalid_document(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[]")
        result = runner.invoke(app, ["packages", str(path)])
        assert result.exit_code == 1
        assert "Error" in result.stdout


class TestModulesCommand:
    def test_table(self, runner, analysis_file):
        result = runner.invoke(app, ["modules", str(analysis_file)])
        assert result.exit_code == 0, result.output
        assert "lodash/lodash.js" in result.stdout
        assert "node_modules/lodash" not in result.stdout
        assert "src/app.tsx" in result.stdout
        assert "53.8%" in result.stdout

    def test_json(self, runner, analysis_file):
        result = runner.invoke(app, ["modules", str(analysis_file), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert (data["input_bytes"], data["output_bytes"]) == (13_000, 9000)
        assert data["module_count"] == 4
        assert [m["path"] for m in data["modules"]] == [
            "node_modules/lodash/lodash.js",
            "src/app.tsx",
            "node_modules/@scope/pkg/dist/x.js",
            "src/index.ts",
        ]
        lodash = data["modules"][0]
        assert lodash["bytes"] == 7000
        assert lodash["short_path"] == "lodash/lodash.js"
        assert lodash["pct"] == pytest.approx(7000 / 13_000)

    def test_limit(self, runner, analysis_file):
        result = runner.invoke(app, ["modules", str(analysis_file), "-n", "1"])
        assert result.exit_code == 0, result.output
        assert "Showing 1 of 4 modules" in result.stdout
        result = runner.invoke(app, ["modules", str(analysis_file), "--json", "--limit", "1"])
        data = json.loads(result.stdout)
        assert [m["short_path"] for m in data["modules"]] == ["lodash/lodash.js"]
        assert data["module_count"] == 4

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["modules", str(tmp_path / "missing.json")])
        assert result.exit_code != 0

class TestChainCommand:
    def test_single_module(self, runner, analysis_file):
        result = runner.invoke(app, ["chain", str(analysis_file), "node_modules/lodash/lodash.js"])
        assert result.exit_code == 0, result.output
        lines = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        assert lines == ["src/index.ts", "→ src/app.tsx", "→ lodash/lodash.js"]

    def test_single_module_json(self, runner, analysis_file):
        result = runner.invoke(
            app, ["chain", str(analysis_file), "node_modules/lodash/lodash.js", "--json"]
        )
        data = json.loads(result.stdout)
        assert data["chain"] == [
            "src/index.ts",
            "src/app.tsx",
            "node_modules/lodash/lodash.js",
        ]

    def test_not_found(self, runner, analysis_file):
        result = runner.invoke(app, ["chain", str(analysis_file), "src/unused.ts"])
        assert result.exit_code == 1

    def test_entry_override(self, runner, analysis_file):
        result = runner.invoke(
            app,
            ["chain", str(analysis_file), "node_modules/lodash/lodash.js", "-e", "src/app.tsx", "--json"],
        )
        assert json.loads(result.stdout)["chain"] == ["src/app.tsx", "node_modules/lodash/lodash.js"]

    def test_all_packages_json(self, runner, analysis_file):
        result = runner.invoke(app, ["chain", str(analysis_file), "--json"])
        assert result.exit_code == 0, result.output
        data = {item["package"]: item["chain"] for item in json.loads(result.stdout)}
        assert data["@scope/pkg"] == [
            "src/index.ts",
            "src/app.tsx",
            "node_modules/@scope/pkg/dist/x.js",
        ]
        assert data["src (local)"] == ["src/index.ts", "src/app.tsx"]

    def test_no_entry(self, runner, tmp_path):
        path = tmp_path / "noentry.json"
        path.write_text(json.dumps({"modules": [{"path": "src/a.ts", "bytes": 1}]}))
        result = runner.invoke(app, ["chain", str(path), "src/a.ts"])
        assert result.exit_code == 1
        assert "--entry" in result.stdout

    def test_bracketed_route_paths_printed_verbatim(self, runner, tmp_path):
        path = tmp_path / "routes.json"
        path.write_text(
            json.dumps(
                {
                    "entry": "src/index.ts",
                    "modules": [
                        {"path": "src/index.ts", "bytes": 10},
                        {"path": "src/pages/[id].tsx", "bytes": 20},
                        {"path": "src/pages/[slug]/[...rest].tsx", "bytes": 30},
                    ],
                    "imports": {"src/index.ts": ["src/pages/[id].tsx"]},
                }
            )
        )
        result = runner.invoke(app, ["chain", str(path), "src/pages/[id].tsx"])
        assert result.exit_code == 0, result.output
        lines = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        assert lines == ["src/index.ts", "→ src/pages/[id].tsx"]

        result = runner.invoke(app, ["chain", str(path)])
        assert result.exit_code == 0, result.output
        assert "no chain to src/pages/[slug]/[...rest].tsx" in result.stdout


class TestLayoutCommand:
    def test_package_view(self, runner, analysis_file):
        result = runner.invoke(app, ["layout", str(analysis_file), "-W", "100", "-H", "30"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert (data["width"], data["height"]) == (100, 30)
        tiles = data["tiles"]
        assert [t["name"] for t in tiles] == ["lodash", "src (local)", "@scope/pkg"]
        assert sum(t["w"] * t["h"] for t in tiles) == 100 * 30

    def test_default_canvas_from_config(self, runner, analysis_file, tmp_path):
        (tmp_path / "bundlescope.toml").write_text("canvas_width = 60\ncanvas_height = 20\n")
        result = runner.invoke(app, ["layout", str(analysis_file)])
        data = json.loads(result.stdout)
        assert (data["width"], data["height"]) == (60, 20)

    def test_zoomed_view(self, runner, analysis_file):
        result = runner.invoke(app, ["layout", str(analysis_file), "-p", "src (local)"])
        assert result.exit_code == 0, result.output
        tiles = json.loads(result.stdout)["tiles"]
        assert [(t["name"], t["path"]) for t in tiles] == [
            ("app.tsx", "src/app.tsx"),
            ("index.ts", "src/index.ts"),
        ]
        assert tiles[0]["pct"] == pytest.approx(0.84)

    def test_unknown_package(self, runner, analysis_file):
        result = runner.invoke(app, ["layout", str(analysis_file), "-p", "left-pad"])
        assert result.exit_code == 1


def test_version(runner):
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
