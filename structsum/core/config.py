# structsum/core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from structsum.core.primitives import available


@dataclass
class Config:
    default_algorithm: str
    max_depth: Optional[int]
    version: str

    @classmethod
    def load(cls) -> "Config":
        algorithm = os.environ.get("STRUCTSUM_DEFAULT_ALGORITHM", "md5")
        raw_depth = os.environ.get("STRUCTSUM_MAX_DEPTH", "")
        version = os.environ.get("STRUCTSUM_VERSION", "0.1.0")
        try:
            max_depth = int(raw_depth) if raw_depth.strip() else None
        except ValueError:
            raise ValueError(f"STRUCTSUM_MAX_DEPTH must be an integer, got {raw_depth!r}") from None
        return cls(algorithm.lower(), max_depth, version)

    def validate(self, check_algorithm: bool = True) -> None:
        if check_algorithm and self.default_algorithm not in available():
            raise ValueError(f"default_algorithm '{self.default_algorithm}' is not registered")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        if not self.version:
            raise ValueError("version must be set")
