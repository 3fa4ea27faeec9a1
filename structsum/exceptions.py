class ChecksumError(Exception):
    """Base class for structsum errors."""


class UnsupportedShapeError(ChecksumError, TypeError):
    def __init__(self, value, path="$"):
        self.type_name = type(value).__name__
        self.path = path
        super().__init__(
            f"Unsupported value shape at {path}: {self.type_name}"
        )


class ScalarRangeError(ChecksumError, OverflowError):
    def __init__(self, value, width, signed):
        kind = "int" if signed else "uint"
        super().__init__(f"{value} does not fit in {kind}{width}")
        self.value = value
        self.width = width
        self.signed = signed


class PrimitiveContractError(ChecksumError, ValueError):
    pass


class DepthLimitError(ChecksumError, RecursionError):
    def __init__(self, max_depth, path):
        super().__init__(f"Nesting deeper than {max_depth} at {path}")
        self.max_depth = max_depth
        self.path = path


class UnknownAlgorithmError(ChecksumError, KeyError):
    def __init__(self, name, known):
        super().__init__(f"Unknown hash algorithm '{name}' (known: {', '.join(known)})")
        self.name = name

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]
