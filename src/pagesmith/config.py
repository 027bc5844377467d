"""Site configuration, loaded once at startup."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel

log = logging.getLogger(__name__)


class SiteConfig(BaseModel):
    """Server and directory settings (pagesmith.yaml)"""

    host: str = "0.0.0.0"
    port: int = 6969
    pages_dir: str = "pages"
    templates_dir: str = "templates"
    default_template: str = "default-template.html"
    static_dir: str = "static"

    @property
    def wrapper_path(self) -> Path:
        """Wrapper template every page is rendered into"""
        return Path(self.templates_dir) / self.default_template

    @classmethod
    def load(cls, path: Path | None = None, **overrides) -> "SiteConfig":
        """Load config from a yaml file, then apply non-None overrides"""
        data: dict = {}
        if path is not None and path.exists():
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            log.debug("Loaded config from %s", path)

        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(data)
