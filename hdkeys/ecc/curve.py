#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and the SLIP-0010 Weierstrass curves.

SEC 2 v.2 curve parameters, see https://www.secg.org/sec2-v2.pdf
"""

from typing import Dict

from hdkeys.alias import INF, Integer, Point
from hdkeys.ecc.curve_group import CurveGroup, jac_from_aff, mult_jac
from hdkeys.exceptions import HDKeysValueError
from hdkeys.utils import hex_string, int_from_integer


class Curve(CurveGroup):
    "Prime order subgroup of the points of an elliptic curve over Fp."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Point,
        n: Integer,
        h: int,
        name: str = "",
    ) -> None:

        super().__init__(p, a, b)

        self.G = int_from_integer(G[0]), int_from_integer(G[1])
        # 4. Check that G is on the curve and it is not INF
        if self.G[1] == 0:
            raise HDKeysValueError("INF point cannot be a generator")
        self.require_on_curve(self.G)
        self.GJ = jac_from_aff(self.G)

        n = int_from_integer(n)
        # 5. Check that n is prime.
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            raise HDKeysValueError(f"n is not prime: {hex_string(n)}")
        if n == self.p:
            raise HDKeysValueError(f"n=p weak curve: {hex_string(n)}")
        self.n = n
        self.n_size = (n.bit_length() + 7) // 8
        self.h = h
        self.name = name

    def __repr__(self) -> str:
        if self.name:
            return f"Curve({self.name})"
        return super().__repr__().replace("CurveGroup", "Curve")

    def is_valid_scalar(self, q: int) -> bool:
        "Return True if q is a valid private key scalar, i.e. in 1..n-1."
        return 0 < q < self.n


def mult(m: Integer, Q: Point, ec: Curve) -> Point:
    "Elliptic curve scalar multiplication of the point Q by m."
    QJ = jac_from_aff(Q)
    m = int_from_integer(m) % ec.n
    if m == 0:
        return INF
    return ec.aff_from_jac(mult_jac(m, QJ, ec))


secp256k1 = Curve(
    p="FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F",
    a=0,
    b=7,
    G=(
        "79BE667E F9DCBBAC 55A06295 CE870B07 029BFCDB 2DCE28D9 59F2815B 16F81798",
        "483ADA77 26A3C465 5DA4FBFC 0E1108A8 FD17B448 A6855419 9C47D08F FB10D4B8",
    ),
    n="FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE BAAEDCE6 AF48A03B BFD25E8C D0364141",
    h=1,
    name="secp256k1",
)

# aka secp256r1 or NIST P-256
nist256p1 = Curve(
    p="FFFFFFFF 00000001 00000000 00000000 00000000 FFFFFFFF FFFFFFFF FFFFFFFF",
    a="FFFFFFFF 00000001 00000000 00000000 00000000 FFFFFFFF FFFFFFFF FFFFFFFC",
    b="5AC635D8 AA3A93E7 B3EBBD55 769886BC 651D06B0 CC53B0F6 3BCE3C3E 27D2604B",
    G=(
        "6B17D1F2 E12C4247 F8BCE6E5 63A440F2 77037D81 2DEB33A0 F4A13945 D898C296",
        "4FE342E2 FE1A7F9B 8EE7EB4A 7C0F9E16 2BCE3357 6B315ECE CBB64068 37BF51F5",
    ),
    n="FFFFFFFF 00000000 FFFFFFFF FFFFFFFF BCE6FAAD A7179E84 F3B9CAC2 FC632551",
    h=1,
    name="nist256p1",
)

CURVES: Dict[str, Curve] = {
    "secp256k1": secp256k1,
    "nist256p1": nist256p1,
}
