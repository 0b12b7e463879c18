# dataroute/contracts/names.py
"""
Qualified names for data services.

A qualified name identifies one logical data service: zero or more
lower-case namespace segments followed by a case-preserving entity name,
rendered as ``ns1/ns2/EntityName``.
"""
from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "/"
HIDDEN_PREFIX = "_"


@dataclass(frozen=True)
class QualifiedName:
    """Canonical identifier of a data service.

    Attributes:
        namespace: Ordered namespace segments, each non-empty and lower-case.
        name: Entity name, case preserved.
    """

    namespace: tuple[str, ...]
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Qualified name requires a non-empty entity name")
        for segment in self.namespace:
            if not segment:
                raise ValueError(f"Empty namespace segment in {self.namespace!r}")
            if segment != segment.lower():
                raise ValueError(f"Namespace segment '{segment}' must be lower-case")

    @classmethod
    def parse(cls, text: str) -> QualifiedName:
        """Build a qualified name from its ``ns1/ns2/Name`` string form."""
        *namespace, name = text.split(SEPARATOR)
        return cls(namespace=tuple(namespace), name=name)

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(HIDDEN_PREFIX)

    def __str__(self) -> str:
        return SEPARATOR.join((*self.namespace, self.name))
