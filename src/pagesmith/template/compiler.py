"""Template compiler - splits raw text into text and code portions."""

from __future__ import annotations

from pathlib import Path

from pagesmith.errors import TemplateFileError, UnterminatedCodeBlockError
from pagesmith.template.context import TemplateContext
from pagesmith.template.portions import CodePortion, Portion, Template, TextPortion
from pagesmith.template.tokenizer import Location


def compile_template(text: str, location: Location, ctx: TemplateContext) -> Template:
    """Compile template text into a `Template`.

    Rules:
    - `\\X` emits `X` literally (a trailing lone backslash is kept).
    - `{` starts a code block, the next `}` ends it. Blocks do not nest.
    - Everything else is literal text.

    Args:
        text: Raw template source.
        location: Location of the first character of `text`.
        ctx: Context bound to every code portion.

    Raises:
        UnterminatedCodeBlockError: If a `{` is never closed. The error
            points at the opening brace.
    """
    portions: list[Portion] = []
    buffer: list[str] = []
    code_mode = False
    brace_location = location
    code_location = location

    i = 0
    while i < len(text):
        char = text[i]

        if char == "\\":
            if i + 1 >= len(text):
                buffer.append(char)
                break
            escaped = text[i + 1]
            buffer.append(escaped)
            location = location.advance(char).advance(escaped)
            i += 2
            continue

        if char == "{" and not code_mode:
            if buffer:
                portions.append(TextPortion("".join(buffer)))
            buffer = []
            code_mode = True
            brace_location = location
            location = location.advance(char)
            code_location = location
            i += 1
            continue

        if char == "}" and code_mode:
            code_mode = False
            portions.append(CodePortion("".join(buffer), code_location, ctx))
            buffer = []
            location = location.advance(char)
            i += 1
            continue

        buffer.append(char)
        location = location.advance(char)
        i += 1

    if code_mode:
        raise UnterminatedCodeBlockError(brace_location)

    if buffer:
        portions.append(TextPortion("".join(buffer)))

    return Template(tuple(portions))


def compile_template_file(path: str | Path, ctx: TemplateContext) -> Template:
    """Read a template file and compile it."""
    path = str(path)
    try:
        text = Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateFileError(path, str(e)) from e
    return compile_template(text, Location(path), ctx)
