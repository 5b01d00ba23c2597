"""Endpoint template resolution and query string construction."""

import re
from typing import Any, Mapping, Optional, Sequence

from authlib.common.urls import url_encode

PLACEHOLDER_PATTERN = re.compile(r":(\w+)")


def bracket_placeholders(template: str) -> str:
    """Rewrite ``:name`` placeholders to ``{name}``."""
    return PLACEHOLDER_PATTERN.sub(lambda match: "{" + match.group(1) + "}", template)


def resolve_path(template: str, replacement: Optional[Mapping[str, Any]] = None) -> str:
    """Resolve an endpoint template into a request path.

    Placeholders without a replacement are left in their ``{name}`` form.

    Args:
        template: Endpoint path such as "/data/wow/item/:id".
        replacement: Placeholder name to literal value.

    Returns:
        The resolved path, e.g. "/data/wow/item/19019".
    """
    path = bracket_placeholders(template)
    for name, value in (replacement or {}).items():
        path = path.replace("{" + name + "}", str(value))
    return path


def build_query(
    region: str,
    locale: Optional[str],
    namespace: Optional[str] = None,
    search: Optional[Sequence[str]] = None,
) -> str:
    """Build the query string of a REST call.

    Args:
        region: Configured region, appended to the namespace.
        locale: Configured locale; sent empty when unset.
        namespace: Namespace prefix such as "static" or "dynamic".
        search: Pre-encoded ``key=value`` fragments, placed first and not re-encoded.

    Returns:
        Query string without the leading ``?``.
    """
    params = []
    if namespace is not None:
        params.append(("namespace", f"{namespace}-{region}"))
    params.append(("locale", locale or ""))

    query = url_encode(params)
    if search:
        query = "&".join(search) + "&" + query
    return query
