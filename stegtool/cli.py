"""Command-line entry point of the steganography tool."""

import argparse

from .crypto import CipherError
from .image import ImageError
from .lsb_embedder import CapacityError, LSBEmbedder
from .stego import UsageError, resolve_options, stego

_PROMPT = "[INFO] please enter a password : "


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser():
    """Return the argument parser for the tool."""
    parser = _Parser(prog="stego", description="Steganography tool", add_help=False)
    parser.add_argument("-i", "--input", help="Input image")
    parser.add_argument("-o", "--output", help="Output image")
    parser.add_argument("-m", "--mode", help="Mode: embed or extract")
    parser.add_argument("-d", "--data", help="Data file (for embedding)")
    parser.add_argument("-h", "--help", action="store_true", help="Print usage")
    return parser


def _read_password():
    try:
        words = input(_PROMPT).split()
    except EOFError:
        return ""
    return words[0] if words else ""


def main(argv=None):
    """Run the tool and return its exit status."""
    parser = build_parser()
    try:
        namespace = parser.parse_args(argv)
        if namespace.help:
            print(parser.format_help())
            return 0
        options = resolve_options(namespace)
    except UsageError as exc:
        print(f"[Usage] {exc}")
        return 0

    embedder = LSBEmbedder(_read_password())
    try:
        stego(options, embedder)
    except CipherError as exc:
        print(exc)
        print("[ERROR] Please try again")
        return 1
    except CapacityError as exc:
        print(f"[Usage] {exc}")
        return 1
    except (ImageError, OSError) as exc:
        print(f"[ERROR] {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())