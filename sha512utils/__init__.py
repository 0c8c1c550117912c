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

__version__ = "0.1.0"

from sha512utils.setup import setup, is_verified

from sha512utils.constants import (
    SHA_LEN,
    BLK_LEN,
    HEX_LEN,
    HEX_DIGEST_SIZE,
    STATE_CONSTS,
    ROUND_CONSTS,
    TEST_STR_PAIR,
    NULL_RAW_DIGEST,
    NULL_HEX_DIGEST,
)

from sha512utils.sha512 import (
    calc_digest,
    calc_digest_into,
    dm_compress,
    initial_state,
    state_to_digest,
)

from sha512utils.utils import (
    DigestFormatError,
    dump_digest,
    dump_digest_into,
    read_digest,
    read_digest_into,
    is_hex_digest,
    new_hex_digest,
)

from sha512utils.selftest import SelfTestError, unit_test, verify_implementation

__all__ = [
    'setup',
    'is_verified',
    'SHA_LEN',
    'BLK_LEN',
    'HEX_LEN',
    'HEX_DIGEST_SIZE',
    'STATE_CONSTS',
    'ROUND_CONSTS',
    'TEST_STR_PAIR',
    'NULL_RAW_DIGEST',
    'NULL_HEX_DIGEST',
    'calc_digest',
    'calc_digest_into',
    'dm_compress',
    'initial_state',
    'state_to_digest',
    'DigestFormatError',
    'dump_digest',
    'dump_digest_into',
    'read_digest',
    'read_digest_into',
    'is_hex_digest',
    'new_hex_digest',
    'SelfTestError',
    'unit_test',
    'verify_implementation',
]
