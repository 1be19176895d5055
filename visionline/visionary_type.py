"""Visionary product types."""

from __future__ import annotations

from enum import Enum


class VisionaryType(Enum):
    """The supported Visionary products, valued by their type names."""

    VISIONARY_S = "Visionary-S"
    VISIONARY_T_MINI = "Visionary-T_Mini"

    @classmethod
    def from_string(cls, typestring: str) -> VisionaryType:
        """Look up a product type by name; raise ValueError if unknown."""
        for member in cls:
            if member.value == typestring:
                return member
        raise ValueError("Unknown Visionary type")

    def to_string(self) -> str:
        """Return the product type name."""
        return self.value

    @classmethod
    def names(cls) -> list[str]:
        """Return all product type names."""
        return [member.value for member in cls]