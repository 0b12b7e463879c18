# dataroute/core/keys.py
"""
Key predicate values for resource addresses.

Supported key values are text, signed 64-bit integers and calendar dates.
Caller-supplied Python values are classified as soon as they are handed
over, so an unsupported type fails at the call that introduced it.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class KeyPredicateError(ValueError):
    """Base class for malformed key predicates."""


class InvalidKeyTypeError(KeyPredicateError):
    """Raised when a key value is not text, an integer or a date."""

    def __init__(self, received_type: type, reason: str = ""):
        self.received_type = received_type
        type_name = f"{received_type.__module__}.{received_type.__qualname__}"
        msg = f"Expecting either type str, int or date as key, but received {type_name}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class InvalidKeyNameError(KeyPredicateError):
    """Raised when a multi-part key entry is named by anything but a str."""

    def __init__(self, received_type: type):
        self.received_type = received_type
        type_name = f"{received_type.__module__}.{received_type.__qualname__}"
        super().__init__(f"Expecting type str as key name, but received {type_name}")


class MissingKeyNameError(KeyPredicateError):
    """Raised when a multi-part key has an entry without a name."""

    def __init__(self) -> None:
        super().__init__("For multi-part keys the full key predicate is required.")


# -- key values ----------------------------------------------------------------


@dataclass(frozen=True)
class TextKey:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidKeyTypeError(type(self.value))

    def format(self) -> str:
        return f"'{self.value}'"


@dataclass(frozen=True)
class IntegerKey:
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidKeyTypeError(type(self.value))
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise InvalidKeyTypeError(
                type(self.value), f"{self.value} is outside the signed 64-bit range"
            )

    def format(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DateKey:
    value: date

    def __post_init__(self) -> None:
        if not isinstance(self.value, date) or isinstance(self.value, datetime):
            raise InvalidKeyTypeError(type(self.value))

    def format(self) -> str:
        return self.value.isoformat()


KeyValue = TextKey | IntegerKey | DateKey


def key_value(value: Any) -> KeyValue:
    """Classify a Python value as a key value.

    ``bool`` is rejected although it subclasses ``int``, and so is
    ``datetime`` although it subclasses ``date``: neither is a key value.

    Raises:
        InvalidKeyTypeError: For any other type, or an integer outside the
            signed 64-bit range.
    """
    if isinstance(value, (TextKey, IntegerKey, DateKey)):
        return value
    if isinstance(value, str):
        return TextKey(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return IntegerKey(value)
    if isinstance(value, date) and not isinstance(value, datetime):
        return DateKey(value)
    raise InvalidKeyTypeError(type(value))


# -- key predicates ------------------------------------------------------------


@dataclass(frozen=True)
class SingleKey:
    """Key predicate made of one unnamed value, rendered as ``(value)``.

    Plain ``str``/``int``/``date`` values are classified on construction.
    """

    value: KeyValue

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", key_value(self.value))

    def format(self) -> str:
        return self.value.format()


@dataclass(frozen=True)
class CompositeKey:
    """Multi-part key predicate, rendered as ``(name1=value1,name2=value2)``.

    Name types and values are checked on construction. Empty names are
    only rejected when the predicate is rendered.
    """

    entries: tuple[tuple[str, KeyValue], ...]

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        if not entries:
            raise KeyPredicateError("Multi-part keys require at least one key property")
        checked: list[tuple[str, KeyValue]] = []
        for name, value in entries:
            if not isinstance(name, str):
                raise InvalidKeyNameError(type(name))
            checked.append((name, key_value(value)))
        object.__setattr__(self, "entries", tuple(checked))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> CompositeKey:
        return cls(entries=tuple(mapping.items()))

    def format(self) -> str:
        if any(not name for name, _ in self.entries):
            raise MissingKeyNameError()
        return ",".join(f"{name}={value.format()}" for name, value in self.entries)


KeyPredicate = SingleKey | CompositeKey


def key_predicate(value: Any) -> KeyPredicate:
    """Build a key predicate from a scalar or a mapping of names to scalars."""
    if isinstance(value, (SingleKey, CompositeKey)):
        return value
    if isinstance(value, Mapping):
        return CompositeKey.from_mapping(value)
    return SingleKey(value)
