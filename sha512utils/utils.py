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

import re

from sha512utils.constants import SHA_LEN, HEX_LEN, HEX_DIGEST_SIZE


HexInput = Union[str, bytes, bytearray, memoryview]

_HEX_DIGEST_RE = re.compile(r"[0-9a-fA-F]{%d}" % HEX_LEN)


class DigestFormatError(ValueError):
    """Raised when a hexadecimal digest is malformed

    Attributes
    ----------
    value : str | bytes
        the rejected input
    """

    def __init__(self, message: str, value: str | bytes | None = None):
        super().__init__(message)
        self.value = value


def new_hex_digest() -> bytearray:
    """Allocates a zeroed fixed-size (null-terminated) hex digest buffer"""
    return bytearray(HEX_DIGEST_SIZE)


def _raw_bytes(raw: bytes | bytearray | memoryview) -> bytes:
    data = bytes(memoryview(raw).cast("B"))
    if len(data) != SHA_LEN:
        raise ValueError(f"Raw digest must be {SHA_LEN} bytes, got {len(data)}")
    return data


def _encode_hex(raw: bytes | bytearray | memoryview) -> bytes:
    # bytes.hex() emits lowercase, most significant nibble first
    return _raw_bytes(raw).hex().encode("ascii")


def _hex_text(hex_digest: HexInput) -> str:
    """Returns the 128 validated hex characters of any accepted hex form"""
    if isinstance(hex_digest, str):
        text = hex_digest
    elif isinstance(hex_digest, (bytes, bytearray, memoryview)):
        data = bytes(memoryview(hex_digest).cast("B"))
        # fixed-size form carries a trailing null
        if len(data) == HEX_DIGEST_SIZE and data[-1] == 0:
            data = data[:-1]
        try:
            text = data.decode("ascii")
        except UnicodeDecodeError:
            raise DigestFormatError(
                "Hex digest contains non-ASCII bytes", hex_digest
            ) from None
    else:
        raise TypeError(
            f"Hex digest must be str or bytes-like, not {type(hex_digest).__name__}"
        )

    if len(text) != HEX_LEN:
        raise DigestFormatError(
            f"Hex digest must be {HEX_LEN} characters, got {len(text)}", hex_digest
        )
    if not _HEX_DIGEST_RE.fullmatch(text):
        raise DigestFormatError(
            "Hex digest contains non-hexadecimal characters", hex_digest
        )
    return text


#
# Raw (64 bytes) to hex (128 lowercase characters)
#
def dump_digest(raw: bytes | bytearray | memoryview) -> str:
    """Converts a raw digest to its 128 character lowercase hex string"""
    return _encode_hex(raw).decode("ascii")


def dump_digest_into(
    raw: bytes | bytearray | memoryview, hex_chars: bytearray | memoryview
) -> None:
    """
    Writes the hex form of a raw digest to a fixed-size buffer (see
    new_hex_digest()). The 128 ASCII characters are followed by a null byte.
    """
    out = memoryview(hex_chars).cast("B")
    if len(out) < HEX_DIGEST_SIZE:
        raise ValueError(f"Hex digest buffer must hold at least {HEX_DIGEST_SIZE} bytes")
    out[:HEX_LEN] = _encode_hex(raw)
    out[HEX_LEN] = 0


#
# Hex to raw
#
def read_digest(hex_digest: HexInput) -> bytes:
    """Converts a hex digest to the 64 raw bytes

    Accepts a 128 character string (either case) or the fixed-size bytes
    form, with or without its null terminator. Anything else raises
    DigestFormatError; input is never truncated or padded.
    """
    return bytes.fromhex(_hex_text(hex_digest))


def read_digest_into(hex_digest: HexInput, sha_bytes: bytearray | memoryview) -> None:
    """Decodes a hex digest into the first 64 bytes of sha_bytes"""
    out = memoryview(sha_bytes).cast("B")
    if len(out) < SHA_LEN:
        raise ValueError(f"Output buffer must hold at least {SHA_LEN} bytes")
    out[:SHA_LEN] = read_digest(hex_digest)


def is_hex_digest(hex_digest: HexInput) -> bool:
    """Checks whether the input is a well-formed hex digest"""
    try:
        _hex_text(hex_digest)
    except (DigestFormatError, TypeError):
        return False
    return True
