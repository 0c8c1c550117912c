# Copyright (C) 2024-2025 The python-sha512-utils developers
#
# This file is part of python-sha512-utils
#
# It is subject to the license terms in the LICENSE file found in the top-level
# directory of this distribution.
#
# No part of python-sha512-utils, including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

import time

from sha512utils.sha512 import calc_digest
from sha512utils.utils import dump_digest


def hash_sha512(b: bytes) -> bytes:
    """Computes SHA-512 hash of the given bytes."""
    return calc_digest(b)


def hash_sha512_hex(b: bytes) -> str:
    """Computes SHA-512 hash of the given bytes as a lowercase hex string."""
    return dump_digest(calc_digest(b))


def calculate_hash_rate(
    hash_function=hash_sha512,
    duration_seconds: float = 1,
    sample_data: bytes = b"SHA-512 hash rate test data",
) -> int:
    """Measure the number of hashes computed in a specified duration using the given hash function."""
    start_time = time.perf_counter()
    end_time = start_time + duration_seconds
    hash_count = 0

    while time.perf_counter() < end_time:
        hash_function(sample_data)
        hash_count += 1

    return hash_count
