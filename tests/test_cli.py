"""Tests for the quilt command line."""

import pytest
from typer.testing import CliRunner

from quilt._version import __version__
from quilt.main import typer_app

runner = CliRunner()

LAYOUT = '<div><placeholder name="body" /></div>'


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("QUILT_DEBUG", raising=False)


def test_version():
    result = runner.invoke(typer_app, ["--version"])
    assert result.exit_code == 0
    assert f"quilt {__version__}" in result.output


def test_render_site(make_tree, tmp_path):
    root = make_tree(
        {
            "main.layout.html": LAYOUT,
            "frag.fragment.html": "<p>hi</p>",
            "a/b/home.page.html": '<layout name="main"><fill placeholder="body" fragment="frag" /></layout>',
        }
    )
    out = tmp_path / "out"

    result = runner.invoke(typer_app, ["-s", str(root), "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert "Rendered 1 page(s)" in result.output
    assert (out / "a" / "b" / "home.page.html").read_text() == "<div><p>hi</p></div>"


def test_long_options(make_tree, tmp_path):
    root = make_tree({"main.layout.html": LAYOUT, "x.page.html": '<layout name="main"></layout>'})
    out = tmp_path / "out"

    result = runner.invoke(typer_app, ["--source", str(root), "--output", str(out)])

    assert result.exit_code == 0, result.output
    assert (out / "x.page.html").read_text() == LAYOUT


def test_failure_exits_nonzero(make_tree, tmp_path):
    root = make_tree({"home.page.html": "<p>no layout here</p>"})

    result = runner.invoke(typer_app, ["-s", str(root), "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "home.page.html" in result.output
    assert "Tag not found: <layout>" in result.output


def test_missing_output_is_usage_error(make_tree):
    root = make_tree({})

    result = runner.invoke(typer_app, ["-s", str(root)])

    assert result.exit_code == 2
    assert "--output" in result.output


def test_config_file_supplies_paths(make_tree, tmp_path):
    make_tree({"main.layout.html": LAYOUT, "x.page.html": '<layout name="main"></layout>'})
    (tmp_path / "quilt.yaml").write_text("source: src\noutput: dist\n")

    result = runner.invoke(typer_app, [])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "dist" / "x.page.html").exists()


def test_cli_flags_override_config(make_tree, tmp_path):
    make_tree({"main.layout.html": LAYOUT, "x.page.html": '<layout name="main"></layout>'})
    cfg = tmp_path / "conf" / "site.yaml"
    cfg.parent.mkdir()
    cfg.write_text("source: ../src\noutput: ../dist\n")

    result = runner.invoke(typer_app, ["-c", str(cfg), "-o", str(tmp_path / "other")])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "other" / "x.page.html").exists()
    assert not (tmp_path / "dist").exists()


def test_invalid_config_exits_with_usage_code(tmp_path):
    (tmp_path / "quilt.yaml").write_text("naming: 3\n")

    result = runner.invoke(typer_app, [])

    assert result.exit_code == 2
    assert "Invalid config" in result.output


def test_dry_run_prints_and_writes_nothing(make_tree, tmp_path):
    root = make_tree(
        {"main.layout.html": LAYOUT, "x.page.html": '<layout name="main"><fill placeholder="body">B</fill></layout>'}
    )
    out = tmp_path / "out"

    result = runner.invoke(typer_app, ["-s", str(root), "-o", str(out), "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "<div>B</div>" in result.output
    assert not out.exists()
