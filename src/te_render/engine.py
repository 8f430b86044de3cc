"""Template parsing and rendering on top of Jinja2."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from jinja2 import Environment, StrictUndefined, Template, Undefined

from te_render.config import RenderSettings
from te_render.functions import function_table

logger = logging.getLogger(__name__)


class Renderer:
    """Holds the function table and the Jinja2 environment for one run.

    Built once at process entry and passed to whatever needs to parse or
    render; there is no module-level environment.
    """

    def __init__(
        self,
        settings: RenderSettings | None = None,
        functions: dict[str, Callable[..., Any]] | None = None,
    ) -> None:
        self.settings = settings if settings is not None else RenderSettings()
        self.functions = (
            functions
            if functions is not None
            else function_table(self.settings.encoding)
        )
        self.environment = self._create_environment()

    def _create_environment(self) -> Environment:
        env = Environment(
            autoescape=False,
            undefined=StrictUndefined if self.settings.strict_undefined else Undefined,
            trim_blocks=self.settings.trim_blocks,
            lstrip_blocks=self.settings.lstrip_blocks,
            keep_trailing_newline=self.settings.keep_trailing_newline,
        )
        env.globals.update(self.functions)
        return env

    def parse(self, source: str) -> Template:
        """Compile template text.

        Raises:
            jinja2.TemplateSyntaxError: If the text is not a valid template.
        """
        return self.environment.from_string(source)

    def render(self, template: Template) -> str:
        """Execute a compiled template.

        Errors raised by helper functions propagate unchanged.
        """
        output = template.render()
        logger.debug("rendered %d characters", len(output))
        return output

    def render_string(self, source: str) -> str:
        """Parse and render template text in one step."""
        return self.render(self.parse(source))
