"""
Composite base shared by ``Organization``, ``Department`` and ``Employee``.

The hierarchy is closed: an organization's children are departments, a
department's children are employees, and an employee has no children.
"""

from abc import ABC, abstractmethod
from numbers import Integral
from typing import Any

from hrdirectory.exceptions import ValidationError


class OrganizationComponent(ABC):
    """Read-only identity, name, type tag, and children of one node."""

    @property
    @abstractmethod
    def id(self) -> int:
        """External ID of the component."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the component."""

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Type tag: ``Organization``, ``Department`` or ``Employee``."""

    @property
    @abstractmethod
    def children(self) -> list["OrganizationComponent"]:
        """Direct children, as a new list."""


def require_id(value: Any, label: str) -> int:
    """Return ``value`` as an ``int``; floats, strings and bools are rejected."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(f"{label} ID must be an integer, got {value!r}")
    return int(value)


def require_name(value: Any, label: str) -> str:
    """Return ``value`` unchanged, or raise if it is not a non-blank string."""
    if not isinstance(value, str):
        raise ValidationError(f"{label} name must be a string, got {value!r}")
    if not value.strip():
        raise ValidationError(f"{label} name must not be empty")
    return value
