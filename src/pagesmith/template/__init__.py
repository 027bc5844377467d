"""Template engine - tokenizer, directives, compiler and renderer."""

from pagesmith.template.compiler import compile_template, compile_template_file
from pagesmith.template.context import TemplateContext
from pagesmith.template.portions import CodePortion, Template, TextPortion
from pagesmith.template.renderer import Renderer
from pagesmith.template.tokenizer import Location, Token, TokenKind, Tokenizer

__all__ = [
    "compile_template",
    "compile_template_file",
    "TemplateContext",
    "CodePortion",
    "Template",
    "TextPortion",
    "Renderer",
    "Location",
    "Token",
    "TokenKind",
    "Tokenizer",
]
