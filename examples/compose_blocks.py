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

import sys

from sha512utils.constants import BLK_LEN
from sha512utils.padding import final_blocks
from sha512utils.sha512 import dm_compress, initial_state, state_to_digest
from sha512utils.utils import new_hex_digest, dump_digest_into


def main():
    if len(sys.argv) != 2:
        print("Usage: python compose_blocks.py <path_to_file>")
        return

    with open(sys.argv[1], "rb") as f:
        data = f.read()

    # compress the whole blocks straight from the file buffer...
    state = initial_state()
    whole = len(data) - len(data) % BLK_LEN
    dm_compress(state, data, whole)

    # ...then the padded tail the library synthesizes
    dm_compress(state, final_blocks(data))

    # fixed-size, null-terminated hex form
    hex_chars = new_hex_digest()
    dump_digest_into(state_to_digest(state), hex_chars)
    print(hex_chars[:-1].decode("ascii"))


if __name__ == "__main__":
    main()
