# structsum/core/checksum.py
"""
Structural checksums of nested Python values.

digest(hf, value) folds a value into a single digest produced by the hash
primitive hf (any bytes -> fixed-length bytes callable):

  scalars     hf(encoded scalar)
  sequences   acc = hf(acc + digest(item)) for each item, left to right
  mappings    hf(b"") XOR digest([k, v]) for each pair, in any order
  records     folded like a mapping keyed by field name

Mapping and record digests do not depend on iteration order; sequence
digests do. There is no cycle detection: a structure that contains itself
recurses until max_depth (when given) or the interpreter's recursion limit.
"""
from __future__ import annotations

import dataclasses
import logging
import weakref
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Tuple

import numpy as np

from structsum.core.encoding import (
    EMPTY,
    encode_bool,
    encode_float,
    encode_int,
    encode_string,
    encode_uint,
)
from structsum.core.primitives import HashFunc
from structsum.core.values import FLOAT_WIDTHS, Float, Int, Ref, UInt
from structsum.exceptions import (
    DepthLimitError,
    PrimitiveContractError,
    UnsupportedShapeError,
)

logger = logging.getLogger(__name__)

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1


# -----------------------------
# Scalars
# -----------------------------

def digest_bool(hf: HashFunc, value: bool) -> bytes:
    return hf(encode_bool(value))


def digest_signed_int(hf: HashFunc, value: int, width: int = 64) -> bytes:
    return hf(encode_int(value, width))


def digest_unsigned_int(hf: HashFunc, value: int, width: int = 64) -> bytes:
    return hf(encode_uint(value, width))


def digest_float(hf: HashFunc, value: float, width: int = 64) -> bytes:
    return hf(encode_float(value, width))


def digest_string(hf: HashFunc, value: str) -> bytes:
    return hf(encode_string(value))


# -----------------------------
# Combiners
# -----------------------------

def _xor(acc: bytes, d: bytes, path: str) -> bytes:
    if len(d) != len(acc):
        raise PrimitiveContractError(
            f"digest length changed from {len(acc)} to {len(d)} bytes at {path}"
        )
    return (int.from_bytes(acc, "big") ^ int.from_bytes(d, "big")).to_bytes(len(acc), "big")


def _fold_sequence(hf, items: Iterable, path, depth, max_depth) -> bytes:
    acc = EMPTY
    count = 0
    for i, item in enumerate(items):
        acc = hf(acc + _digest(hf, item, f"{path}[{i}]", depth, max_depth))
        count += 1
    if not count:
        return hf(EMPTY)
    return acc


def _fold_pairs(hf, pairs: Iterable[Tuple[Any, Any, str]], path, depth, max_depth) -> bytes:
    """XOR-fold the [key, value] sequence digests of pairs into hf(b"")."""
    result = hf(EMPTY)
    for key, value, value_path in pairs:
        # same bytes as _fold_sequence over [key, value]
        acc = hf(_digest(hf, key, f"{path}<key {key!r}>", depth, max_depth))
        acc = hf(acc + _digest(hf, value, value_path, depth, max_depth))
        result = _xor(result, acc, value_path)
    return result


def _mapping_pairs(m: Mapping, path: str):
    for k, v in m.items():
        yield k, v, f"{path}[{k!r}]"


def _record_pairs(rec, path: str):
    if isinstance(rec, tuple):
        names = rec._fields
    else:
        names = [f.name for f in dataclasses.fields(rec)]
    for name in names:
        yield name, getattr(rec, name), f"{path}.{name}"


def _descend(path: str, depth: int, max_depth: Optional[int]) -> int:
    if max_depth is not None and depth >= max_depth:
        raise DepthLimitError(max_depth, path)
    return depth + 1


def _is_record(v) -> bool:
    if dataclasses.is_dataclass(v) and not isinstance(v, type):
        return True
    return isinstance(v, tuple) and hasattr(v, "_fields")


# -----------------------------
# Dispatcher
# -----------------------------

def _digest(hf, v, path: str, depth: int, max_depth: Optional[int]) -> bytes:
    # references carry no identity: hash what they point to
    if isinstance(v, Ref):
        return _digest(hf, v.target, path, depth, max_depth)
    if isinstance(v, weakref.ReferenceType):
        return _digest(hf, v(), path, depth, max_depth)

    if v is None:
        return hf(EMPTY)

    if isinstance(v, (bool, np.bool_)):
        return digest_bool(hf, bool(v))

    if isinstance(v, Int):
        return digest_signed_int(hf, v.value, v.width)
    if isinstance(v, UInt):
        return digest_unsigned_int(hf, v.value, v.width)
    if isinstance(v, Float):
        return digest_float(hf, v.value, v.width)

    if isinstance(v, np.signedinteger):
        return digest_signed_int(hf, int(v), v.dtype.itemsize * 8)
    if isinstance(v, np.unsignedinteger):
        return digest_unsigned_int(hf, int(v), v.dtype.itemsize * 8)
    if isinstance(v, np.floating) and v.dtype.itemsize * 8 in FLOAT_WIDTHS:
        return digest_float(hf, float(v), v.dtype.itemsize * 8)

    if isinstance(v, int):
        # int64 first, then uint64 for the top half of the unsigned range
        if _INT64_MIN <= v <= _INT64_MAX:
            return digest_signed_int(hf, v, 64)
        if 0 <= v <= _UINT64_MAX:
            return digest_unsigned_int(hf, v, 64)
        logger.debug("int %d fits no 64-bit width at %s", v, path)
        raise UnsupportedShapeError(v, path)
    if isinstance(v, float):
        return digest_float(hf, v, 64)
    if isinstance(v, str):
        return digest_string(hf, v)

    if isinstance(v, np.ndarray) and v.ndim == 0:
        return _digest(hf, v[()], path, depth, max_depth)

    if isinstance(v, (bytes, bytearray, memoryview)):
        depth = _descend(path, depth, max_depth)
        return _fold_sequence(hf, (UInt(b, 8) for b in bytes(v)), path, depth, max_depth)

    if isinstance(v, Mapping):
        depth = _descend(path, depth, max_depth)
        return _fold_pairs(hf, _mapping_pairs(v, path), path, depth, max_depth)

    if _is_record(v):
        depth = _descend(path, depth, max_depth)
        return _fold_pairs(hf, _record_pairs(v, path), path, depth, max_depth)

    if isinstance(v, (list, tuple, np.ndarray)):
        depth = _descend(path, depth, max_depth)
        return _fold_sequence(hf, v, path, depth, max_depth)

    logger.debug("unsupported value shape %s at %s", type(v).__name__, path)
    raise UnsupportedShapeError(v, path)


def digest(hf: HashFunc, value: Any, max_depth: Optional[int] = None) -> bytes:
    """
    Return the structural digest of value under hash primitive hf.

    Raises UnsupportedShapeError for values that are not data (functions,
    generators, sets, files, ...). With max_depth set, containers nested
    deeper than max_depth raise DepthLimitError.
    """
    return _digest(hf, value, "$", 0, max_depth)
