#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SLIP-0010 curve policies and public key projection.

https://github.com/satoshilabs/slips/blob/master/slip-0010.md

Each curve defines:

- the HMAC key used to derive the master node from the seed
- whether non-hardened derivation is possible
- how a private key is projected to its public key
- how the left half of the HMAC digest (IL) is combined
  with the parent key to obtain the child key

For ed25519 the child private key is IL itself
and only hardened derivation is possible;
for the Weierstrass curves the child private key is (IL + k_par) mod n
and the child public key is K_par + IL*G.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from hdkeys.alias import Octets
from hdkeys.ecc.curve import Curve, mult, nist256p1, secp256k1
from hdkeys.ecc.ed25519 import pub_key_from_seed
from hdkeys.ecc.sec_point import bytes_from_point, point_from_octets
from hdkeys.exceptions import HDKeysValueError, InvalidScalarError
from hdkeys.utils import bytes_from_int, bytes_from_octets, int_from_bytes

DEFAULT_CURVE = "ed25519"

PRV_KEY_SIZE = 32


@dataclass(frozen=True)
class Slip10Curve:
    name: str
    # HMAC-SHA512 key of the master node derivation
    seed_key: bytes
    hardened_only: bool
    # None for ed25519, which is not handled as a Weierstrass curve
    ec: Optional[Curve] = None

    @property
    def pub_key_size(self) -> int:
        return 32 if self.ec is None else self.ec.p_size + 1

    def prv_key_int(self, prv_key: Octets) -> int:
        """Return the private key as integer, checking its validity.

        The private key must be 32 bytes, not zero,
        and (for Weierstrass curves) lower than the curve order n.
        """

        try:
            prv_key = bytes_from_octets(prv_key, PRV_KEY_SIZE)
        except HDKeysValueError as e:
            raise InvalidScalarError(f"invalid private key: {e}") from e
        q = int_from_bytes(prv_key)
        if q == 0:
            raise InvalidScalarError("invalid zero private key")
        if self.ec is not None and not self.ec.is_valid_scalar(q):
            raise InvalidScalarError(f"private key not in 1..n-1 for {self.name}")
        return q

    def pub_key(self, prv_key: Octets) -> bytes:
        "Return the public key of the private key."

        q = self.prv_key_int(prv_key)
        prv_key = bytes_from_int(q, PRV_KEY_SIZE)
        if self.ec is None:
            return pub_key_from_seed(prv_key)
        return bytes_from_point(mult(q, self.ec.G, self.ec), self.ec)

    def ser_pub_key(self, pub_key: bytes) -> bytes:
        """Return the SLIP-0010 serialization of a public key.

        It is used for non-hardened derivation and fingerprints:
        ed25519 keys are prefixed with 0x00 to have 33 bytes as
        the compressed points of the Weierstrass curves.
        """
        if self.ec is None:
            return b"\x00" + pub_key
        return pub_key

    def child_prv_key(self, parent_prv_key: bytes, il: bytes) -> Optional[bytes]:
        """Return the child private key, None if invalid.

        An invalid child (only possible for Weierstrass curves, with
        negligible probability) requires the derivation to be repeated.
        """

        if self.ec is None:
            return il

        offset = int_from_bytes(il)
        if offset >= self.ec.n:
            return None
        q = (int_from_bytes(parent_prv_key) + offset) % self.ec.n
        if q == 0:
            return None
        return bytes_from_int(q, PRV_KEY_SIZE)

    def child_pub_key(self, parent_pub_key: bytes, il: bytes) -> Optional[bytes]:
        """Return the child public key of a public-only parent, None if invalid.

        This is only possible for Weierstrass curves.
        """

        if self.ec is None:
            raise HDKeysValueError(f"no public derivation for {self.name}")

        offset = int_from_bytes(il)
        if offset >= self.ec.n:
            return None
        Q = point_from_octets(parent_pub_key, self.ec)
        Q = self.ec.add(Q, mult(offset, self.ec.G, self.ec))
        if Q[1] == 0:  # infinity point
            return None
        return bytes_from_point(Q, self.ec)


SLIP10_CURVES: Dict[str, Slip10Curve] = {
    "ed25519": Slip10Curve("ed25519", b"ed25519 seed", True),
    "secp256k1": Slip10Curve("secp256k1", b"Bitcoin seed", False, secp256k1),
    "nist256p1": Slip10Curve("nist256p1", b"Nist256p1 seed", False, nist256p1),
}


def slip10_curve(curve: str = DEFAULT_CURVE) -> Slip10Curve:
    "Return the SLIP-0010 curve policy given its (case insensitive) name."

    name = curve.strip().lower()
    try:
        return SLIP10_CURVES[name]
    except KeyError:
        err_msg = f"unknown curve: {curve!r} not in {list(SLIP10_CURVES)}"
        raise HDKeysValueError(err_msg) from None


def pub_key_from_prv_key(prv_key: Octets, curve: str = DEFAULT_CURVE) -> bytes:
    """Return the public key of a private key.

    It is 32 bytes for ed25519, a 33 bytes compressed point otherwise.
    InvalidScalarError is raised for zero or out of range private keys.
    """
    return slip10_curve(curve).pub_key(prv_key)
