# Copyright (C) 2024-2025 The python-sha512-utils developers
#
# This file is part of python-sha512-utils
#
# It is subject to the license terms in the LICENSE file found in the top-level
# directory of this distribution.
#
# No part of python-sha512-utils, including this file, may be copied,
# modified, propagated, or distributed except according to the terms contained
# in the LICENSE file.

from sha512utils.setup import setup
from sha512utils.sha512 import calc_digest
from sha512utils.utils import dump_digest, read_digest, DigestFormatError


def main():
    # always remember to setup (runs the self-test, raises if it fails)
    setup()

    message = b"The test!"

    # raw digest is 64 bytes
    raw = calc_digest(message)
    print("\nMessage:", message)
    print("Raw digest length:", len(raw))

    # hex digest is 128 lowercase characters
    hex_digest = dump_digest(raw)
    print("Hex digest:", hex_digest)

    # and back again (uppercase input is accepted)
    assert read_digest(hex_digest.upper()) == raw

    print("\n--------------------------------------\n")

    # malformed digests are rejected, never truncated
    try:
        read_digest(hex_digest[:-1])
    except DigestFormatError as e:
        print("Rejected:", e)


if __name__ == "__main__":
    main()
