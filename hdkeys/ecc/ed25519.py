#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ed25519 public key projection.

SLIP-0010 Ed25519 private keys are RFC 8032 32-byte seeds:
the secret scalar is the clamped first half of SHA512(seed),
multiplied by the fixed base point to obtain the public key.
libsodium, through the PyNaCl bindings, does the whole computation.
"""

from nacl.bindings import crypto_core_ed25519_is_valid_point
from nacl.signing import SigningKey

from hdkeys.alias import Octets
from hdkeys.utils import bytes_from_octets

SEED_SIZE = 32
PUB_KEY_SIZE = 32


def pub_key_from_seed(seed: Octets) -> bytes:
    "Return the 32 bytes Ed25519 public key of the 32 bytes private seed."

    seed = bytes_from_octets(seed, SEED_SIZE)
    return bytes(SigningKey(seed).verify_key)


def is_valid_pub_key(pub_key: Octets) -> bool:
    """Return True if the public key is a valid Ed25519 point.

    The encoding must be canonical, on the curve, in the prime order
    subgroup, and not of small order.
    """

    pub_key = bytes_from_octets(pub_key, PUB_KEY_SIZE)
    return crypto_core_ed25519_is_valid_point(pub_key)
