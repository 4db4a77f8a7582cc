"""Jinja2 template rendering for the generated project files.

The stylesheet, script and markup templates ship as ``.j2`` files in the
``webstarter/templates/`` directory.  ``TemplateRenderer`` loads them;
``css_template``, ``make_js_template`` and ``make_html_template`` are the
pure producers the generator calls.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

CSS_TEMPLATE = "styles/main.css.j2"
JS_TEMPLATE = "src/index.js.j2"
HTML_TEMPLATE = "index.html.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the bundled Jinja2 templates.

    Autoescaping is off: the project name is substituted into the generated
    files as literal text.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"index.html.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


@lru_cache(maxsize=1)
def _default_renderer() -> TemplateRenderer:
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Content producers
# ---------------------------------------------------------------------------


def css_template() -> str:
    """Return the fixed stylesheet: a CSS reset plus two sample rules."""
    return _default_renderer().render(CSS_TEMPLATE, {})


def make_js_template(project_name: str) -> str:
    """Return a script that logs a greeting naming *project_name*."""
    return _default_renderer().render(JS_TEMPLATE, {"project_name": project_name})


def make_html_template(project_name: str) -> str:
    """Return an HTML document titled *project_name* that links the stylesheet and script."""
    return _default_renderer().render(HTML_TEMPLATE, {"project_name": project_name})
