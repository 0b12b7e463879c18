# dataroute/core/address.py
"""
OData-style resource addresses for outbound data requests.

A :class:`ResourceAddress` is created per request, configured through a
fluent chain and rendered with :meth:`ResourceAddress.get_uri`::

    ResourceAddress("sales", "Orders").set_key(42).set_property("Total").get_uri()
    # -> "sales/Orders(42)/Total"

Rendering has three mutually exclusive modes, picked in this order:

1. ``$metadata`` - ``{service_root}/$metadata``; everything else is ignored.
2. ``$count`` - ``{service_root}/{entity}/$count``; key and property are ignored.
3. normal - ``{service_root}/{entity}[(key)][/property]``.
"""
from __future__ import annotations

from typing import Any

from dataroute.core.keys import KeyPredicate, key_predicate

METADATA_SEGMENT = "$metadata"
COUNT_SEGMENT = "$count"


class ResourceAddress:
    """Builder for the path component of an outbound OData request.

    Not safe for concurrent mutation; each request owns its own instance.
    """

    def __init__(self, service_root: str, entity_name: str) -> None:
        self._service_root = service_root
        self._entity_name = entity_name
        self._metadata = False
        self._count = False
        self._key: KeyPredicate | None = None
        self._property: str | None = None

    @classmethod
    def for_type(cls, full_name: str) -> ResourceAddress:
        """Create an address from a dotted type name such as ``sales.Orders``.

        The part before the last dot is the service root.
        """
        service_root, sep, entity_name = full_name.rpartition(".")
        if not sep or not service_root or not entity_name:
            raise ValueError(f"Expected '<namespace>.<name>', got '{full_name}'")
        return cls(service_root, entity_name)

    # -- identity ------------------------------------------------------------

    @property
    def service_root(self) -> str:
        return self._service_root

    @property
    def entity_name(self) -> str:
        return self._entity_name

    # -- modifiers -----------------------------------------------------------

    @property
    def key(self) -> KeyPredicate | None:
        return self._key

    @property
    def property_name(self) -> str | None:
        return self._property

    def set_metadata(self) -> ResourceAddress:
        self._metadata = True
        return self

    def set_count(self) -> ResourceAddress:
        self._count = True
        return self

    def set_key(self, key: Any) -> ResourceAddress:
        """Replace the key predicate.

        Args:
            key: A ``str``, ``int`` or ``datetime.date`` for a single key, or
                a mapping of key names to such values for a multi-part key.

        Raises:
            InvalidKeyTypeError: If any value has an unsupported type.
            InvalidKeyNameError: If a multi-part key name is not a str.
            KeyPredicateError: If a multi-part key has no entries.

        The previous key is kept when any of these is raised.
        """
        self._key = key_predicate(key)
        return self

    def set_property(self, name: str) -> ResourceAddress:
        self._property = name
        return self

    # -- rendering -----------------------------------------------------------

    def get_uri(self) -> str:
        """Render the address.

        Raises:
            MissingKeyNameError: If a multi-part key has an unnamed entry.
        """
        if self._metadata:
            return f"{self._service_root}/{METADATA_SEGMENT}"

        entity_path = f"{self._service_root}/{self._entity_name}"
        if self._count:
            return f"{entity_path}/{COUNT_SEGMENT}"

        uri = entity_path
        if self._key is not None:
            uri += f"({self._key.format()})"
        if self._property is not None:
            uri += f"/{self._property}"
        return uri

    def __str__(self) -> str:
        return self.get_uri()

    def __repr__(self) -> str:
        return (
            f"ResourceAddress(service_root={self._service_root!r}, "
            f"entity_name={self._entity_name!r}, metadata={self._metadata}, "
            f"count={self._count}, key={self._key!r}, property={self._property!r})"
        )
