#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Fixed-width big-endian byte/integer conversion utilities.

All multi-byte integers used in key derivation (scalars, coordinates,
child indexes) are big-endian unsigned, see SEC 1 v.2 2.3
https://www.secg.org/sec1-v2.pdf
"""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from hdkeys.alias import Integer, Octets
from hdkeys.exceptions import HDKeysTypeError, HDKeysValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    If the input is not a string, then it goes untouched.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = bytes.fromhex(octets)
    elif isinstance(octets, (bytearray, memoryview)):
        octets = bytes(octets)
    elif not isinstance(octets, bytes):
        raise HDKeysTypeError(f"not bytes or hex-string: {type(octets).__name__}")

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise HDKeysValueError(err_msg)


def int_from_bytes(octets: Octets) -> int:
    "Return the big-endian unsigned integer encoded by the octets."
    return int.from_bytes(bytes_from_octets(octets), byteorder="big", signed=False)


def bytes_from_int(i: int, size: int) -> bytes:
    "Return the size-byte big-endian unsigned encoding of the integer."

    if i < 0:
        raise HDKeysValueError(f"negative integer: {i}")
    if i.bit_length() > size * 8:
        raise HDKeysValueError(f"integer too large for {size} bytes: {hex_string(i)}")
    return i.to_bytes(size, byteorder="big", signed=False)


def ser32(i: int) -> bytes:
    "Serialize a 32-bit unsigned integer (e.g. a child index)."
    return bytes_from_int(i, 4)


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise HDKeysValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()
