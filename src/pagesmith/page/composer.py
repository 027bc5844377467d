"""Page composer - renders a page-data file inside the site wrapper.

A page-data file is a JSON object (comments allowed) immediately followed
by the page body:

    {
      // shown in <title>
      "title": "Home"
    }
    <h1>{var("title")}</h1>

The header becomes the variable set of both the body and the wrapper
template. The rendered body is what the wrapper's `content()` returns.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path

import msgspec

from pagesmith.config import SiteConfig
from pagesmith.errors import (
    InvalidJsonHeaderError,
    JsoncError,
    PageNotFoundError,
    TemplateFileError,
)
from pagesmith.page.jsonc import decode_object
from pagesmith.template.compiler import compile_template, compile_template_file
from pagesmith.template.context import RandomSource, TemplateContext
from pagesmith.template.portions import Template
from pagesmith.template.renderer import Renderer
from pagesmith.template.tokenizer import Location

log = logging.getLogger(__name__)

# What `content()` yields inside a page body: the body has no inner content.
CONTENT_SENTINEL = "[content()]"


class _ScanState(enum.Enum):
    NORMAL = "normal"
    IN_STRING = "in_string"
    ESCAPED = "escaped"


def split_header(text: str, location: Location) -> tuple[str, str, Location]:
    """Split page-data text into its JSON header and body.

    Scans from the first character, counting braces outside strings, and
    stops on the character that brings the depth back to zero.

    Returns:
        (header, body, location of the first body character)
    """
    state = _ScanState.NORMAL
    depth = 0
    i = 0

    while i < len(text):
        char = text[i]

        if state is _ScanState.ESCAPED:
            state = _ScanState.IN_STRING
        elif state is _ScanState.IN_STRING:
            if char == "\\":
                state = _ScanState.ESCAPED
            elif char == '"':
                state = _ScanState.NORMAL
        else:
            if char == '"':
                state = _ScanState.IN_STRING
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1

        location = location.advance(char)
        i += 1

        if state is _ScanState.NORMAL and depth == 0:
            break

    return text[:i], text[i:], location


@dataclass(frozen=True)
class PageInput:
    """A parsed page-data file: header variables and the compiled body."""

    variables: dict[str, str]
    body: Template

    def render(self) -> str:
        return Renderer().render(self.body)


def load_page_input(
    text: str,
    location: Location,
    static_dir: str,
    rng: RandomSource | None = None,
) -> PageInput:
    """Parse page-data text into a `PageInput`.

    Raises:
        InvalidJsonHeaderError: If the header is not a flat JSON object of
            strings.
        UnterminatedCodeBlockError: If the body has an unclosed `{`.
    """
    header, body, body_location = split_header(text, location)

    try:
        variables = decode_object(header)
    except (JsoncError, msgspec.DecodeError) as e:
        log.debug("%s: bad header: %s", location.path, e)
        raise InvalidJsonHeaderError(location) from e

    ctx = _context(static_dir, CONTENT_SENTINEL, variables, rng)
    return PageInput(
        variables=variables,
        body=compile_template(body, body_location, ctx),
    )


def load_page_input_file(
    path: str | Path, static_dir: str, rng: RandomSource | None = None
) -> PageInput:
    """Read a page-data file and parse it."""
    path = str(path)
    try:
        text = Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateFileError(path, str(e)) from e
    return load_page_input(text, Location(path), static_dir, rng)


def render_page(
    page_path: str | Path, config: SiteConfig, rng: RandomSource | None = None
) -> str:
    """Render a page-data file wrapped in the site wrapper template.

    Args:
        page_path: Page-data file to render.
        config: Site configuration (static dir and wrapper template).
        rng: Random source for `chooseRandomTopLevelFileFromStaticPath`.

    Returns:
        Final HTML.

    Raises:
        PageNotFoundError: If `page_path` is not an existing file.
        PagesmithError: For every other failure.
    """
    page_path = Path(page_path)
    if not page_path.is_file():
        raise PageNotFoundError(str(page_path))

    page = load_page_input_file(page_path, config.static_dir, rng)
    content = page.render()
    log.debug("Rendered body of %s (%d chars)", page_path, len(content))

    wrapper = compile_template_file(
        config.wrapper_path,
        _context(config.static_dir, content, page.variables, rng),
    )
    return Renderer().render(wrapper)


def _context(
    static_dir: str,
    content: str,
    variables: dict[str, str],
    rng: RandomSource | None,
) -> TemplateContext:
    if rng is None:
        return TemplateContext(static_dir, content, variables)
    return TemplateContext(static_dir, content, variables, rng)
