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

import logging

from sha512utils.selftest import verify_implementation

logger = logging.getLogger(__name__)

SELF_TEST_ON_SETUP = True
VERIFIED = False


def setup(self_test: bool = True) -> bool:
    """Setup sha512 utils library with the specified options.

    Args:
        self_test: Whether to run the known-answer self-test now. A failing
                   self-test raises SelfTestError and leaves the library
                   unverified; callers should treat it as fatal.

    Returns whether the library has been verified.
    """
    global SELF_TEST_ON_SETUP, VERIFIED
    SELF_TEST_ON_SETUP = self_test
    if self_test:
        VERIFIED = False
        verify_implementation()
        VERIFIED = True
        logger.info("SHA-512 implementation verified")
    return VERIFIED


def is_verified() -> bool:
    """Returns whether a self-test has passed during setup"""
    global VERIFIED
    return VERIFIED


def get_self_test_on_setup() -> bool:
    global SELF_TEST_ON_SETUP
    return SELF_TEST_ON_SETUP
