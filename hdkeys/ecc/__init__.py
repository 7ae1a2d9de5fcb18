#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module hdkeys.ecc."""

from hdkeys.ecc.curve import CURVES, Curve, mult, nist256p1, secp256k1
from hdkeys.ecc.curve_group import CurveGroup, jac_from_aff, mult_jac
from hdkeys.ecc.ed25519 import is_valid_pub_key, pub_key_from_seed
from hdkeys.ecc.sec_point import bytes_from_point, point_from_octets

__all__ = [
    "CURVES",
    "Curve",
    "CurveGroup",
    "bytes_from_point",
    "jac_from_aff",
    "mult",
    "mult_jac",
    "nist256p1",
    "point_from_octets",
    "is_valid_pub_key",
    "pub_key_from_seed",
    "secp256k1",
]
