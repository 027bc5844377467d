"""Tests for site configuration."""

from pathlib import Path

import yaml

from pagesmith.config import SiteConfig


def test_defaults():
    config = SiteConfig()
    assert config.port == 6969
    assert config.pages_dir == "pages"
    assert config.static_dir == "static"
    assert config.wrapper_path == Path("templates") / "default-template.html"


def test_load_missing_file_gives_defaults(tmp_path):
    assert SiteConfig.load(tmp_path / "pagesmith.yaml") == SiteConfig()


def test_load_yaml(tmp_path):
    path = tmp_path / "pagesmith.yaml"
    path.write_text(yaml.safe_dump({"port": 8080, "static_dir": "assets"}))

    config = SiteConfig.load(path)
    assert config.port == 8080
    assert config.static_dir == "assets"
    assert config.pages_dir == "pages"


def test_empty_yaml(tmp_path):
    path = tmp_path / "pagesmith.yaml"
    path.write_text("")
    assert SiteConfig.load(path) == SiteConfig()


def test_overrides_win_and_none_is_ignored(tmp_path):
    path = tmp_path / "pagesmith.yaml"
    path.write_text("port: 8080\npages_dir: content\n")

    config = SiteConfig.load(path, port=9000, pages_dir=None)
    assert config.port == 9000
    assert config.pages_dir == "content"
