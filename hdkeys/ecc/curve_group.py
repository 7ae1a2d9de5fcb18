#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

Short Weierstrass group law, in affine and Jacobian coordinates,
as needed by SLIP-0010 derivation over secp256k1 and nist256p1.
For the cyclic subgroup of prime order with its generator,
see the hdkeys.ecc.curve module.
"""

from math import ceil

from hdkeys.alias import INF, INFJ, Integer, JacPoint, Point
from hdkeys.ecc.number_theory import mod_inv, mod_sqrt
from hdkeys.exceptions import HDKeysValueError
from hdkeys.utils import hex_string, int_from_integer

HEX_THRESHOLD = 0xFFFFFFFF


def _str(i: int) -> str:
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


def jac_from_aff(Q: Point) -> JacPoint:
    """Return the Jacobian representation of the affine point.

    The input point is assumed to be on curve.
    """
    return Q[0], Q[1], 1 if Q[1] else 0


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise HDKeysValueError(f"p is not prime: {_str(p)}")

        self.p = p
        self.p_size = ceil(p.bit_length() / 8)

        # 2. check that a and b are integers in the interval [0, p−1]
        if not 0 <= a < p:
            raise HDKeysValueError(f"a not in 0..p-1: {_str(a)}")
        if not 0 <= b < p:
            raise HDKeysValueError(f"b not in 0..p-1: {_str(b)}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        if (4 * a * a * a + 27 * b * b) % p == 0:
            raise HDKeysValueError("zero discriminant")
        self._a = a
        self._b = b

    def __repr__(self) -> str:
        return f"CurveGroup({_str(self.p)}, {_str(self._a)}, {_str(self._b)})"

    def aff_from_jac(self, Q: JacPoint) -> Point:
        # point is assumed to be on curve
        if Q[2] == 0:  # Infinity point in Jacobian coordinates
            return INF
        Z2 = Q[2] * Q[2]
        x = (Q[0] * mod_inv(Z2, self.p)) % self.p
        y = (Q[1] * mod_inv(Z2 * Q[2], self.p)) % self.p
        return x, y

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        # no Jacobian coordinates here as aff_from_jac would cost 2 mod_inv
        # while add_aff costs only one mod_inv
        return self.add_aff(Q1, Q2)

    def add_jac(self, Q: JacPoint, R: JacPoint) -> JacPoint:
        # points are assumed to be on curve

        if Q[2] == 0:  # Infinity point in Jacobian coordinates
            return R
        if R[2] == 0:  # Infinity point in Jacobian coordinates
            return Q

        RZ2 = R[2] * R[2]
        RZ3 = RZ2 * R[2]
        QZ2 = Q[2] * Q[2]
        QZ3 = QZ2 * Q[2]

        M = Q[0] * RZ2
        N = R[0] * QZ2
        T = Q[1] * RZ3
        U = R[1] * QZ3

        if M % self.p == N % self.p:  # same affine x
            if T % self.p == U % self.p:  # point doubling
                return self.double_jac(Q)
            return INFJ  # opposite points

        W = U - T
        V = N - M

        V2 = V * V
        V3 = V2 * V
        MV2 = M * V2

        X = (W * W - V3 - 2 * MV2) % self.p
        Y = (W * (MV2 - X) - T * V3) % self.p
        Z = (V * Q[2] * R[2]) % self.p
        return X, Y, Z

    def double_jac(self, Q: JacPoint) -> JacPoint:
        # point is assumed to be on curve

        QZ2 = Q[2] * Q[2]
        QY2 = Q[1] * Q[1]
        W = 3 * Q[0] * Q[0] + self._a * QZ2 * QZ2
        V = 4 * Q[0] * QY2
        X = W * W - 2 * V
        Y = W * (V - X) - 8 * QY2 * QY2
        Z = 2 * Q[1] * Q[2]
        return X % self.p, Y % self.p, Z % self.p

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if R[1] == 0:  # Infinity point in affine coordinates
            return Q
        if Q[1] == 0:  # Infinity point in affine coordinates
            return R

        if R[0] == Q[0]:
            if R[1] == Q[1]:  # point doubling
                return self.double_aff(R)
            # opposite points
            return INF

        lam = (R[1] - Q[1]) * mod_inv(R[0] - Q[0], self.p)
        x = lam * lam - Q[0] - R[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if Q[1] == 0:  # Infinity point in affine coordinates
            return INF

        lam = (3 * Q[0] * Q[0] + self._a) * mod_inv(2 * Q[1], self.p)
        x = lam * lam - Q[0] - Q[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def _y2(self, x: int) -> int:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        # This is a good reason to keep this method private
        return ((x * x + self._a) * x + self._b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y)."""
        if not 0 <= x < self.p:
            raise HDKeysValueError(f"x-coordinate not in 0..p-1: {_str(x)}")
        try:
            return mod_sqrt(self._y2(x), self.p)
        except HDKeysValueError as e:
            raise HDKeysValueError(f"invalid x-coordinate: {_str(x)}") from e

    def y_even(self, x: int) -> int:
        """Return the even affine y-coordinate associated to x."""
        root = self.y(x)
        return self.p - root if root % 2 else root

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise HDKeysValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if len(Q) != 2:
            raise HDKeysValueError("point must be a tuple[int, int]")
        if Q[1] == 0:  # Infinity point in affine coordinates
            return True
        if not 0 < Q[1] < self.p:  # y cannot be zero
            raise HDKeysValueError(f"y-coordinate not in 1..p-1: {_str(Q[1])}")
        return self._y2(Q[0]) == (Q[1] * Q[1] % self.p)


def mult_jac(m: int, Q: JacPoint, ec: CurveGroup) -> JacPoint:
    """Scalar multiplication of a curve point in Jacobian coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    Jacobian coordinates.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise HDKeysValueError(f"negative m: {hex(m)}")

    # R[0] is the running result, R[1] is an ancillary variable
    R = [INFJ, Q]
    # if least significant bit of m is 1, then R[0] starts as Q
    R[not m & 1] = Q
    # remove the bit just accounted for
    m >>= 1
    while m > 0:
        # the doubling part of 'double & add'
        Q = ec.double_jac(Q)
        # always perform the addition, even if useless,
        # but use it as R[0] only if least significant bit of m is 1
        R[not m & 1] = ec.add_jac(R[0], Q)
        m >>= 1
    return R[0]
