"""
Print the Keccak-256 digest of hex arguments, or of hex read from stdin.

Usage:
  python -m keccak256 deadbeef 00
  printf 68656c6c6f | python -m keccak256

Outputs one digest per input; stops at the first rejected input.
"""

import argparse
import logging
import sys

from . import InvalidArgument, keccak256


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="keccak256",
        description="Keccak-256 (Ethereum-style) of hex-encoded input",
    )
    parser.add_argument("hex", nargs="*", help="hex-encoded input; read from stdin when omitted")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    inputs = args.hex or [sys.stdin.read().strip()]
    for text in inputs:
        try:
            print(keccak256(text))
        except InvalidArgument as e:
            print(f"keccak256: {e}", file=sys.stderr)
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
