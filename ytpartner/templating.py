"""URL template rendering.

Templates use ``{name}`` placeholders, each replaced by the percent-encoded
string form of a value. ``{+name}`` (reserved expansion, as found in API
discovery documents) leaves ``/`` unescaped so a value can span several path
segments. Placeholders are matched literally: there is no nesting and no
default values.
"""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from ytpartner.exceptions import TemplateResolutionError

__all__ = ('placeholders', 'render', 'to_text')

_PLACEHOLDER = re.compile(r'\{(\+?)([^{}]+)\}')


def placeholders(template: str) -> list[str]:
    """Return the placeholder names of a template, in order of appearance."""
    return [match.group(2) for match in _PLACEHOLDER.finditer(template)]


def to_text(value: Any) -> str:
    """Convert a parameter value to its wire string form."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def render(template: str, path_values: Mapping[str, Any]) -> str:
    """Substitute every placeholder of ``template`` with its encoded value.

    Args:
        template: URL template, e.g. ``https://host/assets/{assetId}``.
        path_values: Values for the placeholders.

    Returns:
        The resolved URL.

    Raises:
        TemplateResolutionError: If a placeholder has no value.
    """

    def substitute(match: re.Match) -> str:
        reserved, name = match.groups()
        if name not in path_values or path_values[name] is None:
            raise TemplateResolutionError(template, name)
        safe = '/' if reserved else ''
        return quote(to_text(path_values[name]), safe=safe)

    return _PLACEHOLDER.sub(substitute, template)
