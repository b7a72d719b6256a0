#!/usr/bin/env python3
"""
rotate — rotate a whole file by one bit

Command-line interface.

Usage:
    rotate left <in-file> <out-file>     Output is the input bit stream b1 … bN b0
    rotate right <in-file> <out-file>    Output is the input bit stream bN b0 … bM
"""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from typing import Optional, Sequence

from rotate import __version__
from rotate.core import Direction
from rotate.errors import FileAccessError, IntegrityError, RotateError, UsageError
from rotate.files import rotate_file
from rotate.stream import DEFAULT_CHUNK_SIZE


# ============================================================================
# Formatting helpers
# ============================================================================

class C:
    """ANSI colors."""
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    RESET = "\033[0m"

    @staticmethod
    def off():
        C.BOLD = C.DIM = C.RED = C.GREEN = C.YELLOW = C.CYAN = C.RESET = ""


def header(text: str) -> str:
    return f"\n{C.BOLD}{C.CYAN}{'─' * 60}{C.RESET}\n{C.BOLD}  {text}{C.RESET}\n{C.BOLD}{C.CYAN}{'─' * 60}{C.RESET}"


def ok(text: str) -> str:
    return f"  {C.GREEN}✓{C.RESET} {text}"


def fail(text: str) -> str:
    return f"  {C.RED}✗{C.RESET} {text}"


def dim(text: str) -> str:
    return f"{C.DIM}{text}{C.RESET}"


def filesize(n: int) -> str:
    if n > 1_000_000:
        return f"{n/1_000_000:.1f} MB"
    if n > 1_000:
        return f"{n/1_000:.1f} KB"
    return f"{n} B"


def error(text: str) -> None:
    print(fail(text), file=sys.stderr)


# ============================================================================
# Argument types
# ============================================================================

def direction_arg(token: str) -> Direction:
    try:
        return Direction.parse(token)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def chunk_size_arg(value: str) -> int:
    try:
        size = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid chunk size: {value!r}") from None
    if size <= 0:
        raise argparse.ArgumentTypeError(f"chunk size must be positive, got {size}")
    return size


# ============================================================================
# CLI setup
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rotate",
        description="Rotate the contents of a file one bit left or right",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        The file is treated as one bit stream b0 b1 … bM bN, where b0 is the
        most significant bit of the first byte and bN the least significant
        bit of the last byte.

          left   writes b1 … bM bN b0
          right  writes bN b0 b1 … bM

        examples:
          rotate left firmware.bin firmware.rol
          rotate right firmware.rol firmware.bin
          rotate --buffered -v left small.bin small.rol
        """),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--chunk-size", type=chunk_size_arg, default=DEFAULT_CHUNK_SIZE,
                        help=f"Bytes read per step when streaming (default: {DEFAULT_CHUNK_SIZE})")
    parser.add_argument("--buffered", action="store_true",
                        help="Read the whole input into memory instead of streaming")

    parser.add_argument("direction", type=direction_arg, metavar="{left,right}",
                        help="Rotation direction")
    parser.add_argument("input", help="File to read")
    parser.add_argument("output", help="File to write (created or truncated)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        C.off()

    root = logging.getLogger()
    logging.basicConfig()
    if args.verbose:
        root.setLevel(logging.DEBUG)
        print(header(f"ROTATE {args.direction.value.upper()}: {args.input} → {args.output}"))
    else:
        root.setLevel(logging.WARNING)

    try:
        result = rotate_file(
            args.input,
            args.output,
            args.direction,
            chunk_size=args.chunk_size,
            buffered=args.buffered,
        )
    except UsageError as e:
        error(e.message)
        print(dim(parser.format_usage().rstrip()), file=sys.stderr)
        return 1
    except FileAccessError as e:
        error(e.message)
        return 1
    except IntegrityError as e:
        error(f"Integrity check failed: {e.message}")
        return 1
    except RotateError as e:
        error(f"Error: {e.message}")
        return 1
    except OSError as e:
        error(f"I/O error: {e}")
        return 1

    print(ok(
        f"Rotated {args.input} {C.BOLD}{result.direction}{C.RESET} → {args.output} "
        f"({filesize(result.input_size)})"
    ))
    if args.verbose:
        print(f"  {dim(f'mode={result.mode}  chunk={args.chunk_size}')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
