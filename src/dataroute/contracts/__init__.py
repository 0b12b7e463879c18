"""Public contracts for the routing core."""
from dataroute.contracts.names import QualifiedName
from dataroute.contracts.data import DataDispatcher, DataError, RawQuery

__all__ = [
    "QualifiedName",
    "DataDispatcher", "DataError", "RawQuery",
]
