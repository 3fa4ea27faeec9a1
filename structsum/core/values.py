# structsum/core/values.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

INT_WIDTHS = (8, 16, 32, 64)
FLOAT_WIDTHS = (16, 32, 64)


@dataclass(frozen=True)
class Int:
    """Signed integer carrying its bit width."""
    value: int
    width: int = 64

    def __post_init__(self) -> None:
        if self.width not in INT_WIDTHS:
            raise ValueError(f"int width must be one of {INT_WIDTHS}, got {self.width}")


@dataclass(frozen=True)
class UInt:
    """Unsigned integer carrying its bit width."""
    value: int
    width: int = 64

    def __post_init__(self) -> None:
        if self.width not in INT_WIDTHS:
            raise ValueError(f"uint width must be one of {INT_WIDTHS}, got {self.width}")


@dataclass(frozen=True)
class Float:
    """IEEE-754 float carrying its bit width."""
    value: float
    width: int = 64

    def __post_init__(self) -> None:
        if self.width not in FLOAT_WIDTHS:
            raise ValueError(f"float width must be one of {FLOAT_WIDTHS}, got {self.width}")


@dataclass(frozen=True)
class Ref:
    """
    Transparent reference to another value.
    Ref() / Ref(None) is the null reference.
    """
    target: Any = None

    @property
    def is_null(self) -> bool:
        return self.target is None


def int8(v: int) -> Int:
    return Int(v, 8)


def int16(v: int) -> Int:
    return Int(v, 16)


def int32(v: int) -> Int:
    return Int(v, 32)


def int64(v: int) -> Int:
    return Int(v, 64)


def uint8(v: int) -> UInt:
    return UInt(v, 8)


def uint16(v: int) -> UInt:
    return UInt(v, 16)


def uint32(v: int) -> UInt:
    return UInt(v, 32)


def uint64(v: int) -> UInt:
    return UInt(v, 64)


def float32(v: float) -> Float:
    return Float(v, 32)


def float64(v: float) -> Float:
    return Float(v, 64)
