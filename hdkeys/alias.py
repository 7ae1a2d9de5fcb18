#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "000102030405060708090a0b0c0d0e0f"
# "00010203 04050607 08090a0b 0c0d0e0f"
#
# use hdkeys.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for seeds, private keys (32 bytes), public keys
# (32 bytes for ed25519, 33 bytes for the SEC compressed points),
# chain codes (32 bytes), and fingerprints (4 bytes)
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates.
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, int]

# Note that the infinity point in affine coordinates is INF = (int, 0)
# (no affine point has y=0 coordinate in a group of prime order).
# It can be checked with 'INF[1] == 0'
# The x-coordinate is arbitrary: 5 is preferred
# because it is not a valid x-coordinate in secp256k1
INF = 5, 0

# Elliptic curve point in Jacobian coordinates.
JacPoint = Tuple[int, int, int]

# Infinity point in Jacobian coordinates is INFJ = (int, int, 0).
# It can be checked with 'INFJ[2] == 0'
INFJ = 7, 0, 0
