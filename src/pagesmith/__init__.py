"""Pagesmith - JSON-headed page templates rendered into a site wrapper."""

from pagesmith._version import __version__
from pagesmith.config import SiteConfig
from pagesmith.errors import (
    IncorrectArgsCountError,
    InternalFunctionError,
    InvalidJsonHeaderError,
    PageNotFoundError,
    PagesmithError,
    TemplateError,
    TemplateFileError,
    UnexpectedEofError,
    UnexpectedTokenError,
    UnterminatedCodeBlockError,
    UnterminatedStringError,
    VariableNotFoundError,
)
from pagesmith.page import PageInput, load_page_input, render_page
from pagesmith.template import (
    Location,
    Renderer,
    Template,
    TemplateContext,
    compile_template,
)

__all__ = [
    "__version__",
    # config
    "SiteConfig",
    # errors
    "IncorrectArgsCountError",
    "InternalFunctionError",
    "InvalidJsonHeaderError",
    "PageNotFoundError",
    "PagesmithError",
    "TemplateError",
    "TemplateFileError",
    "UnexpectedEofError",
    "UnexpectedTokenError",
    "UnterminatedCodeBlockError",
    "UnterminatedStringError",
    "VariableNotFoundError",
    # pages
    "PageInput",
    "load_page_input",
    "render_page",
    # templates
    "Location",
    "Renderer",
    "Template",
    "TemplateContext",
    "compile_template",
]
