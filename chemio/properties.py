"""
Type-erased property storage for atoms, bonds and molecules.

Each entity carries a `PropertyMap` keyed by its own property enumeration.
Values keep their concrete Python type; reading a value back under a
different type raises `PropertyTypeError` instead of coercing it.

    >>> from chemio.properties import MoleculeProperty, PropertyMap
    >>> props = PropertyMap(MoleculeProperty)
    >>> props.set(MoleculeProperty.NAME, "L-Alanine")
    >>> props.get(MoleculeProperty.NAME, str)
    'L-Alanine'
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

from .exceptions import PropertyTypeError

K = TypeVar("K", bound=Enum)
T = TypeVar("T")


class AtomProperty(Enum):
    """Keys of per-atom properties."""

    PARTIAL_CHARGE = "partial_charge"


class BondProperty(Enum):
    """Keys of per-bond properties (reserved for stereo and topology flags)."""


class MoleculeProperty(Enum):
    """Keys of per-molecule properties."""

    NAME = "name"
    COMMENT = "comment"
    CREATION_USER = "creation_user"
    CREATION_PROGRAM = "creation_program"
    CREATION_DATE = "creation_date"


class PropertyMap(Generic[K]):
    """Mapping from a property enumeration to runtime-typed values."""

    __slots__ = ("_key_type", "_values")

    def __init__(self, key_type: type[K]) -> None:
        self._key_type = key_type
        self._values: dict[K, Any] = {}

    def _check_key(self, key: K) -> None:
        if not isinstance(key, self._key_type):
            raise TypeError(
                f"Property key must be {self._key_type.__name__}, got {key!r}"
            )

    def set(self, key: K, value: Any) -> None:
        """Store a value, replacing any previous value and its type."""
        self._check_key(key)
        self._values[key] = value

    def get(self, key: K, expected_type: type[T]) -> T | None:
        """Read a value stored under exactly `expected_type`.

        Args:
            key: Property key.
            expected_type: The concrete type the value must have.

        Returns:
            The stored value, or None if the property is unset.

        Raises:
            PropertyTypeError: If the value was stored with another type.
        """
        self._check_key(key)
        if key not in self._values:
            return None
        value = self._values[key]
        if type(value) is not expected_type:
            raise PropertyTypeError(key, expected_type.__name__, type(value).__name__)
        return value

    def get_string(self, key: K) -> str | None:
        """Read a string property."""
        return self.get(key, str)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = ", ".join(f"{k.name}={v!r}" for k, v in self._values.items())
        return f"PropertyMap({self._key_type.__name__}: {items})"


class HasProperties:
    """Mixin giving an entity with a `properties` map typed accessors."""

    __slots__ = ()

    properties: PropertyMap

    def set_property(self, key: Enum, value: Any) -> None:
        self.properties.set(key, value)

    def get_property(self, key: Enum, expected_type: type[T]) -> T | None:
        return self.properties.get(key, expected_type)

    def get_property_string(self, key: Enum) -> str | None:
        return self.properties.get_string(key)
