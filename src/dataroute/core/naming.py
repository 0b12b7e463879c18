# dataroute/core/naming.py
"""
Qualified-name resolution for raw data requests.

The routing path is the request path below the mount prefix. Its segments
are read left to right: every segment up to the first one that looks like an
entity name is a namespace segment (folded to lower case), the entity
segment ends the name, and whatever follows is the path *below* the data
service.

Examples (mount prefix ``/raw/``)::

    /raw/Orders                   -> Orders
    /raw/sales/eu/Orders/42       -> sales/eu/Orders     (remainder /42)
    /raw/saLES/Orders             -> sales/Orders
    /raw/sales/orders             -> no match
"""
from __future__ import annotations

import logging
import re

from dataroute.contracts.names import SEPARATOR, QualifiedName

logger = logging.getLogger(__name__)

_ENTITY_RE = re.compile(r"[A-Z_][A-Za-z0-9_-]*")


def is_entity_token(token: str) -> bool:
    """Return True if ``token`` names an entity rather than a namespace.

    Entity segments start with an upper-case ASCII letter or an underscore,
    followed by ASCII letters, digits, underscores or hyphens.
    """
    return _ENTITY_RE.fullmatch(token) is not None


def _strip_mount_prefix(path: str, mount_prefix: str) -> str | None:
    prefix = mount_prefix if mount_prefix.endswith(SEPARATOR) else mount_prefix + SEPARATOR
    if not path.startswith(prefix):
        return None
    return path[len(prefix):]


def split_routing_path(
    path: str, mount_prefix: str
) -> tuple[QualifiedName, str] | None:
    """Split a request path into the addressed service and the path below it.

    Args:
        path: Normalized request path, e.g. ``/raw/sales/Orders/42``.
        mount_prefix: Prefix the raw route is mounted under, e.g. ``/raw/``.

    Returns:
        ``(qualified_name, remainder)`` where ``remainder`` is either empty
        or starts with ``/``; ``None`` when the path names no data service.
    """
    routing_path = _strip_mount_prefix(path, mount_prefix)
    if routing_path is None:
        logger.debug("Path %r is not below mount prefix %r", path, mount_prefix)
        return None

    tokens = routing_path.split(SEPARATOR)
    namespace: list[str] = []
    for index, token in enumerate(tokens):
        if not token:
            logger.debug("Empty segment in routing path %r", routing_path)
            return None

        if is_entity_token(token):
            remainder = SEPARATOR.join(tokens[index + 1:])
            if remainder and not remainder.startswith(SEPARATOR):
                remainder = SEPARATOR + remainder
            return QualifiedName(namespace=tuple(namespace), name=token), remainder

        namespace.append(token.lower())

    logger.debug("No entity segment in routing path %r", routing_path)
    return None


def resolve_qualified_name(path: str, mount_prefix: str) -> QualifiedName | None:
    """Resolve the data service addressed by ``path``, or ``None``."""
    split = split_routing_path(path, mount_prefix)
    return split[0] if split is not None else None


def determine_qualified_name(path: str, mount_prefix: str) -> str | None:
    """String form of :func:`resolve_qualified_name` (``ns1/ns2/Name``)."""
    qualified_name = resolve_qualified_name(path, mount_prefix)
    return str(qualified_name) if qualified_name is not None else None
