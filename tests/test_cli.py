"""Tests for the pagesmith CLI."""

from typer.testing import CliRunner

from pagesmith import __version__
from pagesmith.cli import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_render_to_stdout(site):
    page = site / "pages" / "index.template.html"
    page.write_text('{"title":"Hi"}Hello {var("title")}!')

    result = runner.invoke(app, ["render", str(page)])
    assert result.exit_code == 0
    assert "<html>Hello Hi!</html>" in result.output


def test_render_to_file_with_config(site):
    (site / "layout").mkdir()
    (site / "layout" / "base.html").write_text("<body>{content()}</body>")
    (site / "pagesmith.yaml").write_text(
        "templates_dir: layout\ndefault_template: base.html\n"
    )
    page = site / "pages" / "p.template.html"
    page.write_text("{}x")
    out = site / "out" / "p.html"

    result = runner.invoke(
        app, ["render", str(page), "-c", "pagesmith.yaml", "-o", str(out)]
    )
    assert result.exit_code == 0
    assert out.read_text() == "<body>x</body>"


def test_render_missing_page(site):
    result = runner.invoke(app, ["render", "pages/missing.template.html"])
    assert result.exit_code == 2
    assert "Page not found" in result.output


def test_render_broken_page(site):
    page = site / "pages" / "p.template.html"
    page.write_text("{}{bogus()}")

    result = runner.invoke(app, ["render", str(page)])
    assert result.exit_code == 1
    assert "unexpected token" in result.output
