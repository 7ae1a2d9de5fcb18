#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkeys.ecc.sec_point` module."

import secrets

import pytest

from hdkeys.alias import INF
from hdkeys.ecc.curve import CURVES, Curve, mult, secp256k1
from hdkeys.ecc.sec_point import bytes_from_point, point_from_octets
from hdkeys.exceptions import HDKeysValueError


def test_octets2point() -> None:
    for ec in CURVES.values():

        G_bytes = bytes_from_point(ec.G, ec)
        assert len(G_bytes) == ec.p_size + 1
        assert point_from_octets(G_bytes, ec) == ec.G
        assert point_from_octets(G_bytes.hex(), ec) == ec.G

        # just a random point, not INF
        q = 1 + secrets.randbelow(ec.n - 1)
        Q = mult(q, ec.G, ec)
        Q_bytes = b"\x03" if Q[1] & 1 else b"\x02"
        Q_bytes += Q[0].to_bytes(ec.p_size, byteorder="big", signed=False)
        assert bytes_from_point(Q, ec) == Q_bytes
        assert point_from_octets(Q_bytes, ec) == Q
        # the opposite point only differs in the prefix
        minus_Q_bytes = bytes_from_point(mult(ec.n - q, ec.G, ec), ec)
        assert minus_Q_bytes[1:] == Q_bytes[1:]
        assert minus_Q_bytes[0] != Q_bytes[0]

        with pytest.raises(HDKeysValueError, match="no bytes representation for "):
            bytes_from_point(INF, ec)

        with pytest.raises(HDKeysValueError, match="not a compressed point: "):
            point_from_octets(b"\x04" + Q_bytes[1:], ec)

        # uncompressed points are not supported
        Q_bytes = b"\x04" + Q[0].to_bytes(ec.p_size, "big")
        Q_bytes += Q[1].to_bytes(ec.p_size, "big")
        with pytest.raises(HDKeysValueError, match="invalid size: "):
            point_from_octets(Q_bytes, ec)

        with pytest.raises(HDKeysValueError, match="invalid size: "):
            point_from_octets(G_bytes[:-1], ec)

        with pytest.raises(HDKeysValueError, match="point not on curve"):
            bytes_from_point((ec.G[0], ec.G[1] + 1), ec)


def test_invalid_x_coordinate() -> None:
    # y^2 = x^3 + 5x + 1 mod 23 has no solution for x = 1
    ec = Curve(23, 5, 1, (0, 1), 31, 1)
    with pytest.raises(HDKeysValueError, match="invalid x-coordinate: "):
        point_from_octets(b"\x02\x01", ec)
    assert point_from_octets(b"\x02\x00", ec) == (0, 22)

    # x = p is not a field element
    x_bytes = secp256k1.p.to_bytes(32, "big")
    with pytest.raises(HDKeysValueError, match="invalid x-coordinate: "):
        point_from_octets(b"\x02" + x_bytes, secp256k1)
