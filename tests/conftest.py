from __future__ import annotations

from pathlib import Path

import pytest

from pagesmith.config import SiteConfig
from pagesmith.template import TemplateContext


@pytest.fixture
def ctx() -> TemplateContext:
    return TemplateContext(
        static_dir="static",
        content="<p>inner</p>",
        variables={"title": "Hi", "raw": '{content()} \\{ "x"'},
    )


@pytest.fixture
def site(tmp_path: Path, monkeypatch) -> Path:
    """A site laid out with the default directory names, cwd set to its root."""
    (tmp_path / "pages").mkdir()
    (tmp_path / "templates").mkdir()
    (tmp_path / "static" / "img").mkdir(parents=True)
    (tmp_path / "templates" / "default-template.html").write_text(
        "<html>{content()}</html>"
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config(site: Path) -> SiteConfig:
    return SiteConfig()
