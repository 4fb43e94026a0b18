"""Template variable extraction for Nunjucks/Jinja-style prompts."""

from __future__ import annotations

from typing import Iterable

from jinja2 import Environment, TemplateSyntaxError, meta, nodes

from .logger import get_logger

logger = get_logger(__name__)

_env = Environment()


def extract_variables_from_template(template: str) -> list[str]:
    """Return the undeclared variable names of one template, in source order.

    Names bound inside the template (``{% for %}`` targets, ``{% set %}``)
    are not reported. A template jinja2 cannot parse reports no variables.
    """
    try:
        ast = _env.parse(template)
    except TemplateSyntaxError as e:
        logger.debug(f"Could not parse prompt template for variables: {e}")
        return []

    undeclared = meta.find_undeclared_variables(ast)
    result: list[str] = []
    for node in ast.find_all(nodes.Name):
        if node.name in undeclared and node.name not in result:
            result.append(node.name)
    return result


def extract_variables_from_templates(templates: Iterable[str]) -> list[str]:
    """Return distinct variable names referenced across ``templates``.

    Names are returned in first-seen order; an empty list means the
    templates contain no ``{{ variable }}`` references at all.
    """
    result: list[str] = []
    for template in templates:
        for name in extract_variables_from_template(template):
            if name not in result:
                result.append(name)
    return result
