from __future__ import annotations

from pagesmith.template import Location, Renderer, TemplateContext, compile_template


class LastChoice:
    """Random source that always picks the last candidate."""

    def __init__(self) -> None:
        self.seen: list[list[str]] = []

    def choice(self, seq):
        self.seen.append(list(seq))
        return seq[-1]


def render_text(text: str, ctx: TemplateContext) -> str:
    return Renderer().render(compile_template(text, Location("test.html"), ctx))
