"""Pagesmith Exceptions

Every failure raised while composing a page derives from `PagesmithError`.
Template errors carry the `Location` that triggered them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pagesmith.template.tokenizer import Location


class PagesmithError(Exception):
    """Base exception for all pagesmith errors."""

    pass


class PageNotFoundError(PagesmithError):
    """Raised when the requested page-data file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Page not found: {path}")


class TemplateFileError(PagesmithError):
    """Raised when a template or page-data file cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: failed to read template file: {reason}")


class JsoncError(PagesmithError):
    """Raised when comments cannot be stripped from a JSON document."""

    pass


class TemplateError(PagesmithError):
    """Base exception for template parse and evaluation failures."""

    kind = "template error"

    def __init__(self, location: Location | None = None, detail: str | None = None):
        self.location = location
        self.detail = detail
        message = self.kind if detail is None else f"{detail!r}: {self.kind}"
        if location is not None:
            message = f"{location}: {message}"
        super().__init__(message)


class UnexpectedTokenError(TemplateError):
    kind = "unexpected token"


class UnexpectedEofError(TemplateError):
    kind = "unexpected end of file"


class UnterminatedStringError(TemplateError):
    kind = "unterminated string literal"


class UnterminatedCodeBlockError(TemplateError):
    kind = "unterminated code block"


class VariableNotFoundError(TemplateError):
    kind = "variable not present in template input"


class IncorrectArgsCountError(TemplateError):
    kind = "provided an incorrect number of arguments"


class InternalFunctionError(TemplateError):
    """Raised when a directive fails for reasons outside the template text."""

    kind = "internal error while executing function"


class InvalidJsonHeaderError(TemplateError):
    kind = "invalid JSON header"
