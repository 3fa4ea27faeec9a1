from typing import Any, Callable, Optional, Union

from structsum.core.checksum import digest
from structsum.core.config import Config
from structsum.core.primitives import HashFunc, get_primitive

Algorithm = Union[str, Callable[[bytes], bytes], None]


def resolve(algorithm: Algorithm = None, config: Optional[Config] = None) -> HashFunc:
    if callable(algorithm):
        return algorithm
    if algorithm is None:
        algorithm = (config or Config.load()).default_algorithm
    return get_primitive(algorithm)


def checksum(value: Any, algorithm: Algorithm = None, *, max_depth: Optional[int] = None,
             config: Optional[Config] = None) -> bytes:
    config = config or Config.load()
    config.validate(check_algorithm=algorithm is None)
    if max_depth is None:
        max_depth = config.max_depth
    return digest(resolve(algorithm, config), value, max_depth=max_depth)


def hexdigest(value: Any, algorithm: Algorithm = None, **kwargs) -> str:
    return checksum(value, algorithm, **kwargs).hex()
