"""Renderer - turns a compiled Template into its final text."""

from pagesmith.template.portions import Template


class Renderer:
    """Renders Templates by concatenating their portions in order."""

    def render(self, template: Template) -> str:
        """Render a Template to a string.

        The first failing portion aborts the render; no partial output is
        returned.
        """
        return "".join(portion.render() for portion in template.portions)
