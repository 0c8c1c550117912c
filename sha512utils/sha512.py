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
from typing import Optional

import struct

from sha512utils.constants import (
    SHA_LEN,
    BLK_LEN,
    NUM_STATE_CONSTS,
    NUM_ROUND_CONSTS,
    STATE_CONSTS,
    ROUND_CONSTS,
    WORD_MASK,
)
from sha512utils.padding import BytesLike, final_blocks, iter_blocks


#
# 64-bit word functions, FIPS 180-4 section 4.1.3
#
def _rotr(x: int, n: int) -> int:
    """64-bit right rotation."""
    return ((x >> n) | (x << (64 - n))) & WORD_MASK


def _big_sigma0(x: int) -> int:
    return _rotr(x, 28) ^ _rotr(x, 34) ^ _rotr(x, 39)


def _big_sigma1(x: int) -> int:
    return _rotr(x, 14) ^ _rotr(x, 18) ^ _rotr(x, 41)


def _small_sigma0(x: int) -> int:
    return _rotr(x, 1) ^ _rotr(x, 8) ^ (x >> 7)


def _small_sigma1(x: int) -> int:
    return _rotr(x, 19) ^ _rotr(x, 61) ^ (x >> 6)


def _ch(x: int, y: int, z: int) -> int:
    # equivalent to (x & y) ^ (~x & z) without negative ints
    return z ^ (x & (y ^ z))


def _maj(x: int, y: int, z: int) -> int:
    return (x & y) ^ (x & z) ^ (y & z)


def _message_schedule(block: memoryview) -> list[int]:
    """Expands a block to the 80 words W(0)..W(79)."""
    w = list(struct.unpack(">16Q", block))
    for t in range(16, NUM_ROUND_CONSTS):
        w.append(
            (_small_sigma1(w[t - 2]) + w[t - 7] + _small_sigma0(w[t - 15]) + w[t - 16])
            & WORD_MASK
        )
    return w


def _compress_block(state: list[int], block: memoryview) -> None:
    """Folds a single block into state (in place)."""
    w = _message_schedule(block)

    a, b, c, d, e, f, g, h = state
    for t in range(NUM_ROUND_CONSTS):
        t1 = (h + _big_sigma1(e) + _ch(e, f, g) + ROUND_CONSTS[t] + w[t]) & WORD_MASK
        t2 = (_big_sigma0(a) + _maj(a, b, c)) & WORD_MASK
        h = g
        g = f
        f = e
        e = (d + t1) & WORD_MASK
        d = c
        c = b
        b = a
        a = (t1 + t2) & WORD_MASK

    # Davies-Meyer feed-forward
    for i, word in enumerate((a, b, c, d, e, f, g, h)):
        state[i] = (state[i] + word) & WORD_MASK


def _check_state(state: list[int]) -> None:
    if len(state) != NUM_STATE_CONSTS:
        raise ValueError(f"State must have exactly {NUM_STATE_CONSTS} words")
    for word in state:
        if not 0 <= word <= WORD_MASK:
            raise ValueError(f"State word {word:#x} is not a 64-bit unsigned value")


def initial_state() -> list[int]:
    """Returns a fresh state initialized to the SHA-512 IV"""
    return list(STATE_CONSTS)


def state_to_digest(state: list[int]) -> bytes:
    """Serializes the 8 state words (big-endian) to a 64-byte raw digest"""
    _check_state(state)
    return struct.pack(">8Q", *state)


def dm_compress(
    state: list[int], blocks: BytesLike, length: Optional[int] = None
) -> list[int]:
    """Compresses whole blocks into a running state.

    The state is updated in place, one block after the other, and is also
    returned for convenience. Callers that compose a digest out of several
    buffers call this once per buffer and then compress the padded tail
    themselves (see padding.final_blocks).

    Parameters
    ----------
    state : list[int]
        the 8 word running state, mutated in place
    blocks : bytes-like
        buffer holding the block data
    length : int
        the number of bytes of blocks to consume, must be a multiple of the
        block size (defaults to the whole buffer)
    """
    _check_state(state)

    view = memoryview(blocks).cast("B")
    if length is None:
        length = len(view)
    if length < 0 or length > len(view):
        raise ValueError(
            f"Length {length} is out of range for a buffer of {len(view)} bytes"
        )
    if length % BLK_LEN:
        raise ValueError(f"Length {length} is not a multiple of {BLK_LEN} bytes")

    for block in iter_blocks(view[:length]):
        _compress_block(state, block)

    return state


def calc_digest(msg: BytesLike) -> bytes:
    """
    Computes the SHA-512 digest of a complete message. Returns the 64-byte
    raw digest; use utils.dump_digest() to get the hexadecimal form.
    """
    if isinstance(msg, str):
        raise TypeError("Strings must be encoded before hashing")

    view = memoryview(msg).cast("B")
    whole = len(view) - len(view) % BLK_LEN

    state = initial_state()
    dm_compress(state, view, whole)
    dm_compress(state, final_blocks(view))

    return state_to_digest(state)


def calc_digest_into(msg: BytesLike, sha_bytes: bytearray | memoryview) -> None:
    """Computes the digest of msg and writes it to the first 64 bytes of sha_bytes"""
    out = memoryview(sha_bytes).cast("B")
    if len(out) < SHA_LEN:
        raise ValueError(f"Output buffer must hold at least {SHA_LEN} bytes")
    out[:SHA_LEN] = calc_digest(msg)
