"""Directive evaluation for `{...}` code blocks.

A code block holds exactly one directive call:

    {var("title")}
    {content()}
    {chooseRandomTopLevelFileFromStaticPath("img/banners", ".txt")}

The first token names the directive, the rest is a parenthesized,
comma-separated argument list.
"""

from __future__ import annotations

import logging
import os
import posixpath
from typing import Callable

from pagesmith.errors import (
    IncorrectArgsCountError,
    InternalFunctionError,
    UnexpectedEofError,
    UnexpectedTokenError,
    VariableNotFoundError,
)
from pagesmith.paths import file_extension
from pagesmith.template.context import TemplateContext
from pagesmith.template.tokenizer import Location, Token, Tokenizer

log = logging.getLogger(__name__)

Directive = Callable[[Tokenizer, Token, TemplateContext], str]


def _must_next_token(tokenizer: Tokenizer) -> Token:
    token = tokenizer.next_token()
    if token is None:
        raise UnexpectedEofError(tokenizer.location)
    return token


def parse_function_args(tokenizer: Tokenizer) -> list[Token]:
    """Parse `( arg, arg, ... )` and return the argument tokens.

    Stops right after the closing parenthesis; anything that follows is
    left in the tokenizer.

    Raises:
        UnexpectedTokenError: On a missing `(`, or a misplaced `,` or `)`.
        UnexpectedEofError: If the code ends before the closing `)`.
    """
    token = _must_next_token(tokenizer)
    if not token.is_single_char("("):
        raise UnexpectedTokenError(token.location, token.value)

    args: list[Token] = []

    token = _must_next_token(tokenizer)
    if token.is_single_char(")"):
        return args
    if token.is_single_char(","):
        raise UnexpectedTokenError(token.location, token.value)
    args.append(token)

    while True:
        token = _must_next_token(tokenizer)
        if token.is_single_char(")"):
            return args
        if not token.is_single_char(","):
            raise UnexpectedTokenError(token.location, token.value)

        token = _must_next_token(tokenizer)
        if token.is_single_char(")") or token.is_single_char(","):
            raise UnexpectedTokenError(token.location, token.value)
        args.append(token)


def _string_arg(token: Token) -> str:
    if not token.is_string():
        raise UnexpectedTokenError(token.location, token.value)
    return token.value


def render_var(tokenizer: Tokenizer, func: Token, ctx: TemplateContext) -> str:
    """`var("name")` - the value of a header variable, verbatim."""
    args = parse_function_args(tokenizer)
    if len(args) != 1:
        raise IncorrectArgsCountError(func.location, func.value)

    name = _string_arg(args[0])
    if name not in ctx.variables:
        raise VariableNotFoundError(args[0].location, name)
    return ctx.variables[name]


def render_content(tokenizer: Tokenizer, func: Token, ctx: TemplateContext) -> str:
    """`content()` - the page content injected into this template."""
    args = parse_function_args(tokenizer)
    if args:
        raise IncorrectArgsCountError(func.location, func.value)
    return ctx.content


def render_choose_random_top_level_file_from_static_path(
    tokenizer: Tokenizer, func: Token, ctx: TemplateContext
) -> str:
    """`chooseRandomTopLevelFileFromStaticPath("dir"[, ".ext"])`

    Picks one entry of `<static_dir>/<dir>` (not recursive) and returns
    its absolute web path. The optional second argument is an extension
    to leave out.
    """
    args = parse_function_args(tokenizer)
    if not 1 <= len(args) <= 2:
        raise IncorrectArgsCountError(func.location, func.value)

    dir_path = _string_arg(args[0])
    ignored_ext = _string_arg(args[1]) if len(args) > 1 else ""

    # Leading slashes and ".." never leave static_dir.
    relative_dir = posixpath.normpath("/" + dir_path).lstrip("/")
    listing_dir = posixpath.join(ctx.static_dir, relative_dir)
    try:
        entries = sorted(os.listdir(listing_dir))
    except OSError as e:
        log.debug("Cannot list %s: %s", listing_dir, e)
        raise InternalFunctionError(func.location, func.value) from e

    candidates = [
        name
        for name in entries
        if not (ignored_ext and file_extension(name) == ignored_ext)
    ]
    if not candidates:
        log.debug("No eligible files in %s", listing_dir)
        raise InternalFunctionError(func.location, func.value)

    chosen = ctx.rng.choice(candidates)
    web_path = posixpath.normpath("/".join([ctx.static_dir, relative_dir, chosen]))
    return "/" + web_path.lstrip("/")


# Directive registry
DIRECTIVES: dict[str, Directive] = {
    "var": render_var,
    "content": render_content,
    "chooseRandomTopLevelFileFromStaticPath": render_choose_random_top_level_file_from_static_path,
}


def evaluate(code: str, location: Location, ctx: TemplateContext) -> str:
    """Evaluate the code of one `{...}` block and return its substitution.

    Args:
        code: Text between the braces.
        location: Location of the first character of `code`.
        ctx: Rendering context.
    """
    tokenizer = Tokenizer(code, location)

    func = tokenizer.next_token()
    if func is None:
        raise UnexpectedEofError(location)

    directive = DIRECTIVES.get(func.value) if func.is_word() else None
    if directive is None:
        raise UnexpectedTokenError(func.location, func.value)
    return directive(tokenizer, func, ctx)
