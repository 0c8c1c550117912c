#!/usr/bin/env python3
"""
SHA-512 Utils CLI - Command line interface for python-sha512-utils

Computes, verifies and decodes SHA-512 digests with the pure Python
implementation of the library, and runs its known-answer self-test.
"""

import argparse
import logging
import sys

from sha512utils.constants import TEST_STR_PAIR
from sha512utils.sha512 import calc_digest
from sha512utils.utils import dump_digest, read_digest, DigestFormatError
from sha512utils.selftest import unit_test
from sha512utils.hashfunctions import calculate_hash_rate

logger = logging.getLogger("sha512_utils_cli")


def _read_input(name):
    """Read a whole file (or stdin for '-') into memory"""
    if name == "-":
        return sys.stdin.buffer.read()
    with open(name, "rb") as f:
        return f.read()


def _messages(args):
    """Yield (label, message bytes) pairs for the inputs of a command"""
    if getattr(args, "string", None) is not None:
        yield repr(args.string), args.string.encode("utf-8")
        return
    names = getattr(args, "files", None) or ["-"]
    stdin_data = None
    for name in names:
        if name == "-":
            # stdin can only be consumed once
            if stdin_data is None:
                stdin_data = _read_input(name)
            yield name, stdin_data
        else:
            yield name, _read_input(name)


def digest_files(args):
    """Print the hex digest of each input"""
    try:
        for label, data in _messages(args):
            logger.debug("Hashing %d bytes from %s", len(data), label)
            print(f"{dump_digest(calc_digest(data))}  {label}")
    except OSError as e:
        print(f"Error reading input: {str(e)}")
        return 1
    return 0


def verify_digest(args):
    """Verify a message against an expected hex digest"""
    try:
        expected = read_digest(args.digest)
    except DigestFormatError as e:
        print(f"Error: {str(e)}")
        return 1

    try:
        if args.string is not None:
            label, data = repr(args.string), args.string.encode("utf-8")
        else:
            label, data = args.file, _read_input(args.file)
    except OSError as e:
        print(f"Error reading input: {str(e)}")
        return 1

    actual = calc_digest(data)
    if actual == expected:
        print(f"✅ Digest matches: {label}")
        return 0

    print(f"❌ Digest mismatch: {label}")
    print(f"Expected: {dump_digest(expected)}")
    print(f"Computed: {dump_digest(actual)}")
    return 1


def run_selftest(args):
    """Run the known-answer self-test"""
    if unit_test(args.message, args.expected):
        print("✅ SHA-512 self-test passed")
        return 0
    print("❌ SHA-512 self-test FAILED - digests from this build cannot be trusted")
    return 1


def decode_digest(args):
    """Validate a hex digest and print its canonical form"""
    try:
        raw = read_digest(args.digest)
    except DigestFormatError as e:
        print(f"Error: {str(e)}")
        return 1
    print(dump_digest(raw))
    print(f"{len(raw)} bytes")
    return 0


def benchmark(args):
    """Measure the hash rate of the implementation"""
    if args.size < 0 or args.duration <= 0:
        print("Error: size must be >= 0 and duration > 0")
        return 1
    sample = bytes(args.size)
    count = calculate_hash_rate(calc_digest, args.duration, sample)
    rate = count / args.duration
    print(f"{count} hashes of {args.size} bytes in {args.duration}s ({rate:.1f} hashes/s)")
    return 0


def main(argv=None):
    """Main entry point for the CLI"""
    parser = argparse.ArgumentParser(
        description='SHA-512 Utils CLI - compute and check SHA-512 digests'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # Digest command
    digest_parser = subparsers.add_parser('digest', help='Print the SHA-512 digest of files')
    digest_parser.add_argument('files', nargs='*', help="Files to hash ('-' for stdin)")
    digest_parser.add_argument('--string', '-s', help='Hash this string (UTF-8) instead of files')

    # Verify command
    verify_parser = subparsers.add_parser('verify', help='Check a message against a digest')
    verify_parser.add_argument('digest', help='Expected digest (128 hex characters)')
    verify_parser.add_argument('file', nargs='?', default='-', help="File to check ('-' for stdin)")
    verify_parser.add_argument('--string', '-s', help='Check this string (UTF-8) instead of a file')

    # Self-test command
    selftest_parser = subparsers.add_parser('selftest', help='Run the known-answer self-test')
    selftest_parser.add_argument('--message', default=TEST_STR_PAIR[0], help='Test message')
    selftest_parser.add_argument('--expected', default=TEST_STR_PAIR[1],
                                 help='Expected hex digest of the test message')

    # Decode command
    decode_parser = subparsers.add_parser('decode', help='Validate and normalize a hex digest')
    decode_parser.add_argument('digest', help='Digest in hexadecimal format')

    # Benchmark command
    bench_parser = subparsers.add_parser('bench', help='Measure hashing speed')
    bench_parser.add_argument('--duration', '-d', type=float, default=1.0,
                              help='Seconds to run for')
    bench_parser.add_argument('--size', type=int, default=64, help='Message size in bytes')

    # Parse arguments
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Execute the requested command
    if args.command == 'digest':
        return digest_files(args)
    elif args.command == 'verify':
        return verify_digest(args)
    elif args.command == 'selftest':
        return run_selftest(args)
    elif args.command == 'decode':
        return decode_digest(args)
    elif args.command == 'bench':
        return benchmark(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
