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
from typing import Iterator, Union

from sha512utils.constants import BLK_LEN, LENGTH_FIELD_LEN, PADDED_TAIL_LEN


BytesLike = Union[bytes, bytearray, memoryview]


def padding_for_length(msg_len: int) -> bytes:
    """Returns the padding that follows a message of msg_len bytes

    The padding is a single 0x80 byte, the minimum number of zero bytes that
    bring the length to 112 (mod 128) and finally the message length in bits
    as a 128-bit big-endian integer. The padded message is always a whole
    number of blocks.
    """
    if msg_len < 0:
        raise ValueError("Message length cannot be negative")

    # bit lengths beyond 2^128 are not representable; such messages cannot
    # exist in memory so this is not checked
    zeros = (PADDED_TAIL_LEN - 1 - msg_len) % BLK_LEN
    bit_len = (msg_len * 8).to_bytes(LENGTH_FIELD_LEN, byteorder="big")

    return b"\x80" + b"\x00" * zeros + bit_len


def pad_message(msg: BytesLike) -> bytes:
    """Returns the message followed by its padding"""
    data = bytes(msg)
    return data + padding_for_length(len(data))


def final_blocks(msg: BytesLike) -> bytes:
    """
    Returns the one or two blocks synthesized at the end of a message: the
    trailing partial block of the message (possibly empty) plus padding.

    The message's whole blocks are not included, they can be compressed
    directly from the caller's buffer.
    """
    view = memoryview(msg).cast("B")
    whole = len(view) - len(view) % BLK_LEN
    return bytes(view[whole:]) + padding_for_length(len(view))


def iter_blocks(data: BytesLike) -> Iterator[memoryview]:
    """Yields consecutive blocks of already padded data"""
    view = memoryview(data).cast("B")
    if len(view) % BLK_LEN:
        raise ValueError(
            f"Data length {len(view)} is not a multiple of the block size {BLK_LEN}"
        )
    for offset in range(0, len(view), BLK_LEN):
        yield view[offset : offset + BLK_LEN]
