"""
URL rendering — turns a UrlDescriptor into its final string.

Rendering is a pure function of the descriptor and runs in a fixed order:
  1. Base URL     prefix + host [+ ':' port]      (skipped without a host)
  2. Path         ['/' path_prefix] + '/' segment for each segment
  3. Parameters   ':name' placeholders in the path replaced by their values
  4. Queries      '?k=v&k2=v2' in insertion order
"""

import re
from typing import Any
from urllib.parse import quote

from urlbuildr.domain.models import UrlDescriptor


def format_value(value: Any) -> str:
    """Render a parameter or query value the way a URL spells it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_base(descriptor: UrlDescriptor) -> str:
    if not descriptor.host:
        return ""
    base = f"{descriptor.prefix}{descriptor.host}"
    if descriptor.port:
        base += f":{descriptor.port}"
    return base


def build_path(descriptor: UrlDescriptor) -> str:
    path = f"/{descriptor.path_prefix}" if descriptor.path_prefix else ""
    for segment in descriptor.segments:
        path += f"/{segment}"
    return path


def substitute_params(path: str, parameters: dict[str, Any]) -> str:
    """
    Replace every ':name' placeholder in the path with its value.

    A placeholder only matches when followed by '/' or the end of the path,
    so ':user' leaves ':userId' alone. Unknown placeholders stay as they are.
    """
    for name, value in parameters.items():
        pattern = re.compile(":" + re.escape(name) + r"(?=/|\Z)")
        replacement = format_value(value)
        path = pattern.sub(lambda _match: replacement, path)
    return path


def build_query(queries: dict[str, Any], encode: bool = False) -> str:
    pairs = []
    for key, value in queries.items():
        key, value = str(key), format_value(value)
        if encode:
            key, value = quote(key, safe=""), quote(value, safe="")
        pairs.append(f"{key}={value}")
    return "?" + "&".join(pairs) if pairs else ""


def render(descriptor: UrlDescriptor, *, encode_queries: bool = False) -> str:
    """
    Assemble the full URL for a descriptor.

    Never raises for missing parts: without a host the result is a bare
    path and/or query string.

    Args:
        descriptor: The URL parts to assemble.
        encode_queries: Percent-encode query keys and values. Off by
            default, which writes them verbatim.

    Returns:
        The rendered URL string.
    """
    path = substitute_params(build_path(descriptor), descriptor.parameters)
    return (
        build_base(descriptor)
        + path
        + build_query(descriptor.queries, encode=encode_queries)
    )
