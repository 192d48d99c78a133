"""Template rendering engine."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError

from ..core.errors import TemplateExecutionError, TemplateParseError
from ..core.models import VALUES_ROOT_NAME, CandidateDocument, RenderedFragment
from ..core.tree import ConfigurationTree

logger = logging.getLogger(__name__)


class ValuesEnvironment(Environment):
    """Environment where mapping keys win over Python attributes.

    ``Values.items`` resolves to the configured ``items`` key, not a method.
    Private attributes of mappings are never exposed.
    """

    def getattr(self, obj: Any, attribute: str) -> Any:
        if isinstance(obj, Mapping):
            try:
                return obj[attribute]
            except (KeyError, TypeError):
                pass
            if attribute.startswith("_"):
                return self.undefined(obj=obj, name=attribute)
        return super().getattr(obj, attribute)


def build_environment() -> Environment:
    """Create the Jinja2 environment shared by all render tasks of a run.

    Missing fields raise instead of rendering as empty strings.

    Returns:
        Configured Jinja2 environment
    """
    return ValuesEnvironment(
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_document(
    document: CandidateDocument,
    tree: ConfigurationTree,
    env: Environment,
    root_name: str = VALUES_ROOT_NAME,
) -> RenderedFragment:
    """Expand one document against the values tree.

    Args:
        document: Template document to expand
        tree: Read-only values tree
        env: Shared Jinja2 environment
        root_name: Name the tree is bound to inside the template

    Returns:
        Rendered fragment

    Raises:
        TemplateParseError: The document is not a valid template
        TemplateExecutionError: Expansion failed at runtime
    """
    logger.debug(f"Rendering template: {document.path}")

    try:
        template = env.from_string(document.content)
    except TemplateSyntaxError as exc:
        raise TemplateParseError(
            document.path, f"line {exc.lineno}: {exc.message}"
        ) from exc

    try:
        text = template.render({root_name: tree})
    except Exception as exc:
        raise TemplateExecutionError(
            document.path, f"{type(exc).__name__}: {exc}"
        ) from exc

    return RenderedFragment(path=document.path, text=text)
