"""Path resolution and resource addressing."""
from dataroute.core.address import ResourceAddress
from dataroute.core.keys import (
    CompositeKey,
    DateKey,
    IntegerKey,
    InvalidKeyNameError,
    InvalidKeyTypeError,
    KeyPredicateError,
    MissingKeyNameError,
    SingleKey,
    TextKey,
)
from dataroute.core.naming import (
    determine_qualified_name,
    is_entity_token,
    resolve_qualified_name,
    split_routing_path,
)

__all__ = [
    "ResourceAddress",
    "CompositeKey", "DateKey", "IntegerKey", "SingleKey", "TextKey",
    "InvalidKeyNameError", "InvalidKeyTypeError", "KeyPredicateError", "MissingKeyNameError",
    "determine_qualified_name", "is_entity_token",
    "resolve_qualified_name", "split_routing_path",
]
