"""
sha2digest - Main Entry Point
Command-line SHA-224 / SHA-256 digests of strings and files.
"""

import argparse
import logging
import os
import sys

from .core_crypto.sha256 import Variant, compute_digest
from .core_crypto.selftest import run_self_test, all_passed
from .files.file_hash import compute_file_digest, DEFAULT_CHUNK_SIZE


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sha2digest',
        description='Fun with cryptographic hash functions: SHA-224 / SHA-256 from scratch',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sha2digest --string abc
  sha2digest --path ./disk.img --algo 224
  sha2digest --test
""",
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--string',
        help='Hash the exact bytes of this argument (UTF-8 for ordinary text)'
    )
    source.add_argument(
        '--path',
        help='Hash the contents of this file'
    )
    source.add_argument(
        '--test',
        action='store_true',
        help='Run the built-in known-answer self-test'
    )

    parser.add_argument(
        '--algo',
        choices=['224', '256'],
        default='256',
        help='Digest variant (default: 256)'
    )
    parser.add_argument(
        '--chunk-size',
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f'Read size for --path in bytes (default: {DEFAULT_CHUNK_SIZE})'
    )
    parser.add_argument(
        '--quick',
        action='store_true',
        help='Skip the one-million-byte vectors in --test'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def _self_test(include_long: bool) -> int:
    results = run_self_test(include_long=include_long)
    for result in results:
        status = "PASS" if result.passed else "FAIL"
        print(f"[{status}] SHA-{result.variant.bits} {result.label}: {result.actual}")

    passed = sum(1 for r in results if r.passed)
    print(f"{passed}/{len(results)} vectors passed")
    return 0 if all_passed(results) else 1


def main(argv=None) -> int:
    """Main entry point for sha2digest."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    if args.chunk_size <= 0:
        parser.error("--chunk-size must be positive")

    if args.test:
        return _self_test(include_long=not args.quick)

    variant = Variant.from_name(args.algo)

    if args.string is not None:
        digest = compute_digest(variant, os.fsencode(args.string))
    else:
        try:
            digest = compute_file_digest(args.path, variant, args.chunk_size)
        except OSError as e:
            logger.error("Cannot read %s: %s", args.path, e)
            return 1

    print(digest.hex())
    return 0


if __name__ == "__main__":
    sys.exit(main())
