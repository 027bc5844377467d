"""Compiled template representation.

A `Template` is an ordered, immutable sequence of portions. A portion is
either literal text or a code block; both render to a string on their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from pagesmith.template.context import TemplateContext
from pagesmith.template.directives import evaluate
from pagesmith.template.tokenizer import Location


@dataclass(frozen=True)
class TextPortion:
    """Literal text, emitted verbatim."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class CodePortion:
    """A `{...}` block bound to its rendering context."""

    code: str
    location: Location  # first character after the opening brace
    ctx: TemplateContext = field(repr=False)

    def render(self) -> str:
        return evaluate(self.code, self.location, self.ctx)


Portion = Union[TextPortion, CodePortion]


@dataclass(frozen=True)
class Template:
    portions: tuple[Portion, ...] = ()
