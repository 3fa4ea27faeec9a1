import argparse
import json
import logging
import sys
from dataclasses import dataclass

import msgpack

from structsum.api import checksum
from structsum.core.config import Config
from structsum.core.primitives import available, digest_size
from structsum.core.values import Ref, float32, int8, int16, int32, int64, uint32, uint64
from structsum.exceptions import ChecksumError

logger = logging.getLogger("structsum")


@dataclass
class DemoRecord:
    FieldString: str
    FieldInt: object
    FieldUint: object
    FieldFloat: float
    FieldBool: bool


def _demo_values():
    record = DemoRecord(
        FieldString="a string",
        FieldInt=int32(1),
        FieldUint=uint64(2),
        FieldFloat=3.0,
        FieldBool=True,
    )
    map1 = {
        "FieldString": "a string",
        "FieldInt": int16(1),
        "FieldUint": uint32(2),
        "FieldFloat": float32(3.0),
        "FieldBool": True,
    }
    map2 = dict(reversed(list(map1.items())))
    nested = {
        "a": ["1", 2, True, {"one": 1, "two": 2, "three": 3}],
        "m": {"s": "a string", "i": 1, "b": True, "a2": [1, 2, 3]},
    }
    return [
        ("Bool", True),
        ("Int16", int16(1)),
        ("UInt32", uint32(1)),
        ("Float32", float32(1)),
        ("Float64", 1.0),
        ("String", "1"),
        ("Slice", [1, int8(2), int16(3), int32(4), int64(5)]),
        ("Array", [uint64(i) for i in range(1, 6)]),
        ("Strings", ["1", "2", "3", "4", "5"]),
        ("Struct", record),
        ("Map1", map1),
        ("Map2", map2),
        ("Nested", nested),
        ("Nil", None),
        ("Int", 1),
        ("Ref", Ref(1)),
    ]


def _load_document(path, fmt):
    if path == "-":
        data = sys.stdin.buffer.read()
    else:
        with open(path, "rb") as f:
            data = f.read()

    if fmt == "msgpack":
        try:
            return msgpack.unpackb(data, raw=False, strict_map_key=False)
        except TypeError as e:
            # array-valued map keys come back as unhashable lists
            raise ValueError(f"unusable msgpack map key: {e}") from e
    return json.loads(data.decode("utf-8"))


def main(argv=None):
    parser = argparse.ArgumentParser(prog="structsum")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="cmd", required=True)

    digest_p = sub.add_parser("digest")
    digest_p.add_argument("path", nargs="?", default="-", help="document file, '-' for stdin")
    digest_p.add_argument("-a", "--algorithm", default=None)
    digest_p.add_argument("-f", "--format", choices=("json", "msgpack"), default="json")
    digest_p.add_argument("--max-depth", type=int, default=None)

    sub.add_parser("algorithms")

    demo_p = sub.add_parser("demo")
    demo_p.add_argument("-a", "--algorithm", default=None)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = Config.load()

        if args.cmd == "digest":
            doc = _load_document(args.path, args.format)
            logger.debug("loaded %s document from %s", args.format, args.path)
            print(checksum(doc, args.algorithm, max_depth=args.max_depth, config=config).hex())

        elif args.cmd == "algorithms":
            print(f"{'NAME':<10}  BYTES")
            print("-" * 17)
            for name in available():
                print(f"{name:<10}  {digest_size(name)}")

        elif args.cmd == "demo":
            for label, value in _demo_values():
                print(f"{label:<8}: {checksum(value, args.algorithm, config=config).hex()}")

    except (ChecksumError, ValueError, OSError) as e:
        print(f"structsum: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
