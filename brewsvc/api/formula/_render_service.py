"""Render templated values of a service declaration."""

from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined

_ENV = Environment(loader=BaseLoader(), undefined=StrictUndefined, keep_trailing_newline=True)


def _render_service(value: Any, context: dict[str, Any]) -> Any:
    """Render every string in a (nested) service declaration against context.

    Raises:
        jinja2.TemplateError: If a template is malformed or names an unknown variable
    """
    if isinstance(value, str):
        return _ENV.from_string(value).render(**context)
    if isinstance(value, list):
        return [_render_service(item, context) for item in value]
    if isinstance(value, dict):
        return {key: _render_service(item, context) for key, item in value.items()}
    return value
