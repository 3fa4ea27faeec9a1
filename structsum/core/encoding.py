# structsum/core/encoding.py
from __future__ import annotations

import numpy as np

from structsum.core.values import INT_WIDTHS, FLOAT_WIDTHS
from structsum.exceptions import ScalarRangeError

EMPTY = b""


def _check_width(width: int, allowed: tuple) -> None:
    if width not in allowed:
        raise ValueError(f"width must be one of {allowed}, got {width}")


def encode_bool(v: bool) -> bytes:
    return b"\x01" if v else b"\x00"


def encode_int(v: int, width: int = 64) -> bytes:
    """Big-endian two's complement, width/8 bytes."""
    _check_width(width, INT_WIDTHS)
    v = int(v)
    bound = 1 << (width - 1)
    if not -bound <= v < bound:
        raise ScalarRangeError(v, width, signed=True)
    return np.array(v, dtype=f">i{width // 8}").tobytes()


def encode_uint(v: int, width: int = 64) -> bytes:
    """Big-endian unsigned, width/8 bytes."""
    _check_width(width, INT_WIDTHS)
    v = int(v)
    if not 0 <= v < (1 << width):
        raise ScalarRangeError(v, width, signed=False)
    return np.array(v, dtype=f">u{width // 8}").tobytes()


def encode_float(v: float, width: int = 64) -> bytes:
    """Big-endian IEEE-754 bit pattern, width/8 bytes."""
    _check_width(width, FLOAT_WIDTHS)
    # narrowing a float64 past the float32/float16 range gives inf
    with np.errstate(over="ignore"):
        return np.array(float(v), dtype=f">f{width // 8}").tobytes()


def encode_string(v: str) -> bytes:
    return v.encode("utf-8")
