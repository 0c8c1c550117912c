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

from __future__ import annotations
from typing import Union

import logging

from sha512utils.constants import TEST_STR_PAIR
from sha512utils.sha512 import calc_digest
from sha512utils.utils import dump_digest

logger = logging.getLogger(__name__)


Message = Union[str, bytes, bytearray, memoryview]


class SelfTestError(Exception):
    """Raised when the implementation produces a wrong digest for a known answer.

    A failing self-test means the compression arithmetic is broken on this
    build/platform and no digest it produces can be trusted.
    """

    def __init__(self, message: Message, expected: str, actual: str):
        super().__init__(
            f"SHA-512 self-test failed: expected {expected}, computed {actual}"
        )
        self.message = message
        self.expected = expected
        self.actual = actual


def _message_bytes(msg: Message) -> bytes:
    if isinstance(msg, str):
        return msg.encode("utf-8")
    return bytes(msg)


def _expected_text(sha_str: Message) -> str:
    if isinstance(sha_str, str):
        return sha_str
    if isinstance(sha_str, (bytes, bytearray, memoryview)):
        data = bytes(sha_str)
        # fixed-size hex digests carry a trailing null
        if data.endswith(b"\x00"):
            data = data[:-1]
        return data.decode("ascii", errors="replace")
    raise TypeError(
        f"Expected digest must be str or bytes-like, not {type(sha_str).__name__}"
    )


def _check(msg_str: Message, sha_str: Message) -> tuple[bool, str]:
    data = _message_bytes(msg_str)
    expected = _expected_text(sha_str)
    actual = dump_digest(calc_digest(data))
    passed = actual == expected.lower()
    if passed:
        logger.debug("SHA-512 self-test passed (%d byte message)", len(data))
    else:
        logger.error("SHA-512 self-test failed: expected %s, computed %s", expected, actual)
    return passed, actual


def unit_test(msg_str: Message = TEST_STR_PAIR[0], sha_str: Message = TEST_STR_PAIR[1]) -> bool:
    """
    Hashes msg_str and compares the hex digest with sha_str. Defaults to the
    empty message and its known digest.
    """
    passed, _ = _check(msg_str, sha_str)
    return passed


def verify_implementation(
    msg_str: Message = TEST_STR_PAIR[0], sha_str: Message = TEST_STR_PAIR[1]
) -> None:
    """Like unit_test() but raises SelfTestError on mismatch"""
    passed, actual = _check(msg_str, sha_str)
    if not passed:
        raise SelfTestError(msg_str, sha_str, actual)
