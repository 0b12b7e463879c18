# dataroute/contracts/data.py
"""
Contracts between the raw endpoint and the data services behind it.

The endpoint resolves a request into a :class:`RawQuery` and hands it to a
:class:`DataDispatcher`. Locating the target service and executing the
request is the dispatcher's business.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Protocol, runtime_checkable

from dataroute.contracts.names import QualifiedName


@dataclass(frozen=True)
class RawQuery:
    """A request addressed to one data service.

    Attributes:
        qualified_name: Target data service.
        uri_path: Path below the service, e.g. ``/orders/42``. Empty when the
            request addressed the service itself.
        raw_query: Undecoded query string without the leading ``?``.
        method: Upper-case HTTP method.
        headers: Request headers, lower-case names. Stored read-only and
            left out of the hash.
    """

    qualified_name: QualifiedName
    uri_path: str = ""
    raw_query: str = ""
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


class DataError(Exception):
    """Failure reported by a data service, carrying the status to forward."""

    def __init__(self, status_code: int = 500, message: str | None = None):
        self.status_code = status_code
        self.message = message
        super().__init__(message or f"Data request failed with status {status_code}")


@runtime_checkable
class DataDispatcher(Protocol):
    """Delivers a resolved query to the data service it names."""

    async def dispatch(self, query: RawQuery) -> Any: ...
