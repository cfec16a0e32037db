"""Shared enumerations for the gallery."""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class Level(_ValuesMixin, str, Enum):
    """Academic level; also the name of the level folder under Images."""

    UG = "UG"
    PG = "PG"
    PHD = "PHD"

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]


_LEVEL_LABELS = {
    Level.UG: "Undergraduate",
    Level.PG: "Postgraduate",
    Level.PHD: "Doctorate",
}
