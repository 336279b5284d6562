"""End-to-end tests for the viewforge command line."""

import json

import pytest
import yaml

from viewforge.cli import build_parser, main
from viewforge.cli.commands.build import parse_library_overrides
from viewforge.cli.errors import format_cli_error
from viewforge.errors import ConfigError


def _run(args, workspace):
    main(["--log-level", "error", "--workspace", str(workspace), *args])


@pytest.fixture
def project_file(tmp_path, nested_routes_project):
    path = tmp_path / "project.json"
    path.write_text(json.dumps(nested_routes_project), encoding="utf-8")
    return path


# =============================================================================
# build
# =============================================================================


def test_build_writes_project(tmp_path, project_file, capsys):
    out = tmp_path / "app"
    _run(["build", str(project_file), "-o", str(out)], tmp_path)

    assert capsys.readouterr().out.strip() == f"✓ Generated 11 files in {out}"
    assert (out / "src" / "components" / "Route1.js").exists()
    assert json.loads((out / "package.json").read_text(encoding="utf-8"))["name"] == "demo-app"


def test_build_applies_flags(tmp_path, project_file):
    out = tmp_path / "app"
    _run(
        [
            "build",
            str(project_file),
            "-o",
            str(out),
            "--app-version",
            "3.0.0",
            "--container-id",
            "root",
            "--library",
            "Bootstrap=reactstrap",
        ],
        tmp_path,
    )

    assert json.loads((out / "package.json").read_text(encoding="utf-8"))["version"] == "3.0.0"
    assert '<div id="root"></div>' in (out / "public" / "index.html").read_text(encoding="utf-8")
    assert "from 'reactstrap';" in (out / "src" / "components" / "Route1.js").read_text(encoding="utf-8")


def test_build_uses_workspace_config(tmp_path, project_file, capsys):
    (tmp_path / ".viewforgerc").write_text(
        json.dumps({"build": {"out_dir": "dist", "archive": True}, "libraries": {"Bootstrap": "reactstrap"}}),
        encoding="utf-8",
    )
    _run(["build", str(project_file)], tmp_path)

    out = tmp_path / "dist"
    assert "from 'reactstrap';" in (out / "src" / "components" / "Route1.js").read_text(encoding="utf-8")
    assert (tmp_path / "dist.zip").exists()
    assert "✓ Archived project to" in capsys.readouterr().out


def test_build_reads_yaml_projects(tmp_path, nested_routes_project):
    path = tmp_path / "project.yaml"
    path.write_text(yaml.safe_dump(nested_routes_project), encoding="utf-8")
    out = tmp_path / "app"

    _run(["build", str(path), "-o", str(out)], tmp_path)
    assert (out / "src" / "components" / "RouteAbout3.js").exists()


def test_build_reports_errors(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        _run(["build", str(tmp_path / "missing.json")], tmp_path)

    assert excinfo.value.code == 1
    assert capsys.readouterr().out.startswith("✗ Project file not found")


def test_build_reports_invalid_library_flag(tmp_path, project_file, capsys):
    with pytest.raises(SystemExit):
        _run(["build", str(project_file), "--library", "Bootstrap"], tmp_path)
    assert "(VF_CONFIG)" in capsys.readouterr().out


def test_verbose_reraises(tmp_path):
    with pytest.raises(ConfigError):
        main(["-v", "--log-level", "error", "--workspace", str(tmp_path), "--config", str(tmp_path / "nope.toml"), "inspect", "x.json"])


# =============================================================================
# inspect
# =============================================================================


def test_inspect_prints_summary(tmp_path, project_file, capsys):
    _run(["inspect", str(project_file)], tmp_path)
    summary = json.loads(capsys.readouterr().out)

    assert summary["name"] == "demo-app"
    assert summary["usingGraphQL"] is False
    assert [route["path"] for route in summary["routes"]] == ["/", "/users", "/about"]
    assert summary["routes"][0]["indexFile"] == "Route1Index"
    assert [file["name"] for file in summary["files"]] == ["Route1", "Route1Index", "RouteUsers2", "RouteAbout3"]
    assert summary["files"][0]["usingReactRouter"] is True
    assert summary["redirects"] == []


# =============================================================================
# Parser and helpers
# =============================================================================


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1
    assert "usage: viewforge" in capsys.readouterr().out


def test_clean_flags():
    parser = build_parser()
    assert parser.parse_args(["build", "p.json"]).clean is None
    assert parser.parse_args(["build", "p.json", "--no-clean"]).clean is False
    assert parser.parse_args(["build", "p.json", "--clean"]).clean is True


def test_parse_library_overrides():
    assert parse_library_overrides(["A=a", "B=@scope/b"]) == {"A": "a", "B": "@scope/b"}
    assert parse_library_overrides(None) == {}
    with pytest.raises(ConfigError):
        parse_library_overrides(["=x"])


def test_format_cli_error():
    assert format_cli_error(ConfigError("bad table")) == "bad table (VF_CONFIG)"
    assert format_cli_error(ValueError("boom")) == "ValueError: boom"
