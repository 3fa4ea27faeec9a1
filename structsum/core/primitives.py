# structsum/core/primitives.py
from __future__ import annotations

import hashlib
import logging
import zlib
from typing import Callable, Dict, List

from structsum.core.invariants import check_primitive
from structsum.exceptions import PrimitiveContractError, UnknownAlgorithmError

logger = logging.getLogger(__name__)

HashFunc = Callable[[bytes], bytes]

# ISO 3309 polynomial, bit-reversed
CRC64_ISO_POLY = 0xD800000000000000
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _make_crc64_table(poly: int) -> tuple:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ poly
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


_CRC64_ISO_TABLE = _make_crc64_table(CRC64_ISO_POLY)


def crc32(data: bytes) -> bytes:
    """IEEE CRC32, 4 bytes big-endian."""
    return zlib.crc32(data).to_bytes(4, "big")


def crc64(data: bytes) -> bytes:
    """CRC64 with the ISO polynomial, 8 bytes big-endian."""
    crc = _MASK64
    for b in data:
        crc = _CRC64_ISO_TABLE[(crc ^ b) & 0xFF] ^ (crc >> 8)
    return (crc ^ _MASK64).to_bytes(8, "big")


def md5(data: bytes) -> bytes:
    return hashlib.md5(data).digest()


def sha1(data: bytes) -> bytes:
    return hashlib.sha1(data).digest()


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


_PRIMITIVES: Dict[str, HashFunc] = {
    "crc32": crc32,
    "crc64": crc64,
    "md5": md5,
    "sha1": sha1,
    "sha256": sha256,
}


def register_primitive(name: str, hf: HashFunc, *, replace: bool = False) -> None:
    """
    Make hf selectable by name.
    Refuses primitives that break the bytes -> fixed-length bytes contract.
    """
    if not replace and name in _PRIMITIVES:
        raise ValueError(f"hash algorithm '{name}' already registered")

    violated = check_primitive(hf)
    if violated:
        raise PrimitiveContractError(
            f"hash algorithm '{name}' violates: {', '.join(violated)}"
        )

    _PRIMITIVES[name] = hf
    logger.debug("registered hash algorithm %s (%d bytes)", name, len(hf(b"")))


def get_primitive(name: str) -> HashFunc:
    try:
        return _PRIMITIVES[name.lower()]
    except KeyError:
        raise UnknownAlgorithmError(name, available()) from None


def available() -> List[str]:
    return sorted(_PRIMITIVES)


def digest_size(name: str) -> int:
    return len(get_primitive(name)(b""))
