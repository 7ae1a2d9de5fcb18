#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions needed by the Weierstrass curves."""

from hdkeys.exceptions import HDKeysValueError
from hdkeys.utils import hex_string


def _str(i: int) -> str:
    return f"'{hex_string(i)}'" if i > 0xFFFFFFFF else f"{i}"


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime."""

    a %= m
    try:
        return pow(a, -1, m)
    except ValueError as e:
        raise HDKeysValueError(f"No inverse for {_str(a)} mod {_str(m)}") from e


def mod_sqrt(a: int, p: int) -> int:
    """Return a quadratic residue (mod p) of a; p must be a prime.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    Only primes p = 3 (mod 4) are supported,
    which is the case of both secp256k1 and nist256p1.
    """

    if p % 4 != 3:
        raise HDKeysValueError(f"field prime is not equal to 3 mod 4: {_str(p)}")

    a %= p
    # inverse candidate is pow(a, (p + 1) // 4, p)
    r = pow(a, (p >> 2) + 1, p)
    if r * r % p != a:
        raise HDKeysValueError(f"no root for {_str(a)} mod {_str(p)}")
    return r
