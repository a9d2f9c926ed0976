"""Single cells of a QR code matrix, tagged with the pattern they belong to."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ModuleType", "Module"]


class ModuleType(IntEnum):
    """The part of the QR code a module belongs to."""

    DATA = 0
    FINDER_PATTERN = 1
    ALIGNMENT = 2
    TIMING = 3
    FORMAT = 4
    VERSION = 5
    DARK_MODULE = 6
    EMPTY = 7


class Module:
    """A single pixel of a QR code: a dark/light value plus its module type.

    The value and the type are packed in one small integer: bit 0 holds the
    value, the remaining bits hold the type.
    """

    __slots__ = ("_bits",)

    DARK = True
    LIGHT = False

    def __init__(self, value: bool = False, module_type: ModuleType = ModuleType.DATA) -> None:
        self._bits = (int(ModuleType(module_type)) << 1) | int(bool(value))

    @classmethod
    def data(cls, value: bool) -> "Module":
        """Create a data module."""
        return cls(value, ModuleType.DATA)

    @classmethod
    def finder_pattern(cls, value: bool) -> "Module":
        """Create a finder pattern module."""
        return cls(value, ModuleType.FINDER_PATTERN)

    @classmethod
    def alignment(cls, value: bool) -> "Module":
        """Create an alignment pattern module."""
        return cls(value, ModuleType.ALIGNMENT)

    @classmethod
    def timing(cls, value: bool) -> "Module":
        """Create a timing pattern module."""
        return cls(value, ModuleType.TIMING)

    @classmethod
    def format(cls, value: bool) -> "Module":
        """Create a format information module."""
        return cls(value, ModuleType.FORMAT)

    @classmethod
    def version(cls, value: bool) -> "Module":
        """Create a version information module."""
        return cls(value, ModuleType.VERSION)

    @classmethod
    def dark(cls, value: bool) -> "Module":
        """Create the always-dark module."""
        return cls(value, ModuleType.DARK_MODULE)

    @classmethod
    def empty(cls, value: bool) -> "Module":
        """Create a separator module (space around the finder patterns)."""
        return cls(value, ModuleType.EMPTY)

    @property
    def value(self) -> bool:
        """True for a dark module, False for a light one."""
        return bool(self._bits & 1)

    @value.setter
    def value(self, value: bool) -> None:
        self._bits = (self._bits & ~1) | int(bool(value))

    @property
    def module_type(self) -> ModuleType:
        """The pattern this module belongs to."""
        return ModuleType(self._bits >> 1)

    def toggle(self) -> None:
        """Flip the module between dark and light."""
        self._bits ^= 1

    def __eq__(self, other: object) -> bool:
        if isinstance(other, bool):
            return self.value == other
        if isinstance(other, Module):
            return self._bits == other._bits
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Module(value={self.value}, module_type={self.module_type.name})"