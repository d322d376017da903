from typing import Any
from urllib.parse import urlparse

__all__ = ('is_url', 'parse_assignment', 'parse_assignments')

_BOOLEANS = {'true': True, 'false': False}


def is_url(text):
    try:
        result = urlparse(text)
        return all([result.scheme, result.netloc])
    except (ValueError, AttributeError):
        return False


def parse_assignment(text: str) -> tuple[str, Any]:
    """Parse ``name=value`` into a parameter pair.

    ``true`` and ``false`` become booleans; every other value stays a
    string, which is how it travels on the wire anyway.
    """
    name, sep, raw = text.partition('=')
    if not sep or not name:
        raise ValueError(f"Expected name=value, got '{text}'")
    return name, _BOOLEANS.get(raw, raw)


def parse_assignments(items: list[str]) -> dict[str, Any]:
    """Parse several ``name=value`` strings, collecting repeated names in a list."""
    params: dict[str, Any] = {}
    for item in items:
        name, value = parse_assignment(item)
        if name in params:
            existing = params[name]
            params[name] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            params[name] = value
    return params
