"""URL path helpers for locating page-data files."""

from __future__ import annotations

import posixpath
from pathlib import Path

PAGE_SUFFIX = ".template.html"
INDEX_PAGE = "index" + PAGE_SUFFIX


def file_extension(name: str) -> str:
    """Extension of the last path element, including the dot.

    `"a.tar.gz"` -> `".gz"`, `".bashrc"` -> `".bashrc"`, `"README"` -> `""`.
    """
    dot = name.rfind(".")
    if dot < 0 or "/" in name[dot:]:
        return ""
    return name[dot:]


def strip_extension(name: str) -> str:
    ext = file_extension(name)
    return name[: len(name) - len(ext)]


def drop_first_component(url_path: str) -> str:
    """`/pages/blog/post.html` -> `/blog/post.html`"""
    parts = posixpath.normpath("/" + url_path).lstrip("/").split("/", 1)
    if len(parts) < 2:
        return "/"
    return "/" + parts[1]


def page_file_for(pages_dir: str | Path, url_path: str) -> Path | None:
    """Map a `/pages/...` URL path to its page-data file.

    Returns None when the resolved file would fall outside `pages_dir`.
    """
    relative = strip_extension(drop_first_component(url_path)) + PAGE_SUFFIX
    relative = posixpath.normpath(relative.lstrip("/"))
    if relative == ".." or relative.startswith("../"):
        return None
    return Path(pages_dir) / relative
