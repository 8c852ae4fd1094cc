"""
Jinja2 templates for the fixed parts of the generated module.

The file prefix, the story wrapper envelope and the hand-written standard
schemas live under templates/zod. Every template receives ``z``, the
validator namespace followed by a dot (or nothing when no namespace is
configured).
"""

from __future__ import annotations

from pathlib import Path

import jinja2

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates" / "zod"


class TemplateRenderer:
    """Renders the Zod templates for one validator namespace."""

    def __init__(self, namespace: str = "z"):
        self.namespace = namespace
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self.prefix_template = self.jinja_env.get_template("prefix.ts.jinja2")
        self.story_wrapper_template = self.jinja_env.get_template("story_wrapper.ts.jinja2")

    @property
    def z(self) -> str:
        return f"{self.namespace}." if self.namespace else ""

    def render_prefix(self, generation_comment: str, imports: list[str]) -> str:
        """Render the header comment and import block."""
        return self.prefix_template.render(generation_comment=generation_comment, imports=imports)

    def render_story_wrapper(self, content: str) -> str:
        """
        Render the story envelope expression.

        Args:
            content: Expression placed in the ``content`` member

        Returns:
            A lazy object expression describing a story around ``content``
        """
        return self.story_wrapper_template.render(z=self.z, content=content).strip()

    def render_standard_schema(self, template_name: str) -> str:
        """Render the expression of one hand-written standard schema."""
        template = self.jinja_env.get_template(f"standard/{template_name}.ts.jinja2")
        return template.render(z=self.z).strip()

