#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC compressed point representation.

SLIP-0010 serializes Weierstrass public keys as
compressed points only, see SEC 1 v.2, section 2.3.3.
"""

from hdkeys.alias import Octets, Point
from hdkeys.ecc.curve import Curve, secp256k1
from hdkeys.exceptions import HDKeysValueError
from hdkeys.utils import bytes_from_int, bytes_from_octets, hex_string


def bytes_from_point(Q: Point, ec: Curve = secp256k1) -> bytes:
    "Return a point as compressed (0x02, 0x03) octet sequence."

    # check that Q is a point and that is on curve
    ec.require_on_curve(Q)

    if Q[1] == 0:  # infinity point in affine coordinates
        raise HDKeysValueError("no bytes representation for infinity point")

    return (b"\x03" if (Q[1] & 1) else b"\x02") + bytes_from_int(Q[0], ec.p_size)


def point_from_octets(pub_key: Octets, ec: Curve = secp256k1) -> Point:
    """Return a tuple (x_Q, y_Q) that belongs to the curve.

    Return a tuple (x_Q, y_Q) that belongs to the curve according to
    SEC 1 v.2, section 2.3.4.
    """

    pub_key = bytes_from_octets(pub_key, ec.p_size + 1)

    if pub_key[0] not in (0x02, 0x03):
        raise HDKeysValueError(f"not a compressed point: {pub_key.hex()}")

    x_Q = int.from_bytes(pub_key[1:], byteorder="big", signed=False)
    try:
        y_Q = ec.y_even(x_Q)  # also check x_Q validity
    except HDKeysValueError as e:
        raise HDKeysValueError(f"invalid x-coordinate: '{hex_string(x_Q)}'") from e
    return x_Q, y_Q if pub_key[0] == 0x02 else ec.p - y_Q
