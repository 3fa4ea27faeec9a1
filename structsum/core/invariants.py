# structsum/core/invariants.py
from __future__ import annotations

from typing import Callable, List

PRIMITIVE_INVARIANTS = [
    "returns-bytes",
    "deterministic",
    "fixed-length",
    "non-empty-output",
]

_PROBES = (b"", b"\x00", b"\x01", b"structsum", bytes(range(256)))


def check_primitive(hf: Callable[[bytes], bytes]) -> List[str]:
    """Return list of violated primitive invariants (empty = pass)."""
    violated: List[str] = []

    first = [hf(p) for p in _PROBES]
    if not all(isinstance(d, bytes) for d in first):
        violated.append("returns-bytes")
        return violated

    second = [hf(p) for p in _PROBES]
    if first != second:
        violated.append("deterministic")

    if len({len(d) for d in first}) != 1:
        violated.append("fixed-length")

    if any(len(d) == 0 for d in first):
        violated.append("non-empty-output")

    return violated
