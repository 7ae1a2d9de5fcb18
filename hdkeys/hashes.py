#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import contextlib
import hashlib
import hmac

from hdkeys.alias import Octets
from hdkeys.utils import bytes_from_octets

# see https://bugs.python.org/issue47101
# With OpenSSL 3.x, hashlib still includes ripemd160
# but it is not usable unless the legacy provider is loaded.
try:
    hashlib.new("ripemd160")
except ValueError:  # pragma: no cover
    import ctypes

    with contextlib.suppress(OSError):
        ctypes.CDLL("libssl.so").OSSL_PROVIDER_load(None, b"legacy")
        ctypes.CDLL("libssl.so").OSSL_PROVIDER_load(None, b"default")


def hmac_sha512(key: Octets, msg: Octets) -> bytes:
    """Return the 64 bytes HMAC-SHA512 of msg keyed with key.

    It is the pseudo-random function of every derivation step.
    """
    key = bytes_from_octets(key)
    msg = bytes_from_octets(msg)
    return hmac.new(key, msg, "sha512").digest()


def ripemd160(octets: Octets) -> bytes:
    """Return the RIPEMD160(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.new("ripemd160", octets).digest()


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def hash160(octets: Octets) -> bytes:
    """Return the HASH160=RIPEMD160(SHA256) of the input octet sequence."""
    return ripemd160(sha256(octets))
