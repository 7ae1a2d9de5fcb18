#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SLIP-0010 Hierarchical Deterministic key derivation.

A hierarchical deterministic wallet is a tree of key pairs
derived from a single root (the seed),
which is the only element requiring backup.

Here, the derivation is implemented according to SLIP-0010
https://github.com/satoshilabs/slips/blob/master/slip-0010.md
which generalizes BIP32 to ed25519 and nist256p1:

- ed25519 allows hardened derivation only,
  the child private key being the left half of the HMAC digest
- secp256k1 (matching BIP32) and nist256p1 allow
  both hardened and non-hardened derivation,
  also from public-only nodes
"""

import logging
from typing import Optional

from hdkeys.alias import Octets
from hdkeys.exceptions import (
    DepthOverflowError,
    IndexOutOfRangeError,
    InvalidSeedLengthError,
    NonHardenedUnsupportedError,
    PrivateKeyRequiredError,
)
from hdkeys.hashes import hmac_sha512
from hdkeys.slip10.curves import DEFAULT_CURVE, slip10_curve
from hdkeys.slip10.der_path import HARDENED, DerPath, der_path_from, format_path
from hdkeys.slip10.key_material import KeyMaterial
from hdkeys.utils import bytes_from_octets, hex_string, int_from_bytes, ser32

logger = logging.getLogger(__name__)

_MIN_SEED_SIZE = 16
_MAX_SEED_SIZE = 64
_MAX_DEPTH = 255


def master_key_from_seed(seed: Octets, curve: str = DEFAULT_CURVE) -> KeyMaterial:
    """Return the master node of the tree derived from the seed.

    The seed must be 16 to 64 bytes (128 to 512 bits).
    For Weierstrass curves, if the left half of the HMAC digest
    is not a valid private key the HMAC is repeated on the digest itself.
    """

    seed = bytes_from_octets(seed)
    if not _MIN_SEED_SIZE <= len(seed) <= _MAX_SEED_SIZE:
        err_msg = f"invalid seed length: {len(seed)} bytes"
        err_msg += f" not in {_MIN_SEED_SIZE}..{_MAX_SEED_SIZE}"
        raise InvalidSeedLengthError(err_msg)

    curve_ = slip10_curve(curve)
    data = seed
    while True:
        hmac_ = hmac_sha512(curve_.seed_key, data)
        q = int_from_bytes(hmac_[:32])
        if curve_.ec is None or curve_.ec.is_valid_scalar(q):
            break
        logger.debug("invalid %s master key, repeating", curve_.name)
        data = hmac_

    logger.debug("%s master key from %d bytes seed", curve_.name, len(seed))
    return KeyMaterial(
        curve=curve_.name,
        depth=0,
        parent_fingerprint=b"\x00" * 4,
        index=0,
        chain_code=hmac_[32:],
        private_key=hmac_[:32],
    )


def derive_child(
    parent: KeyMaterial, index: int, hardened: bool = False
) -> KeyMaterial:
    """Child Key Derivation (CKD).

    Return the child node at the given index (0..2^31-1)
    of a parent node; hardened derivation requires the
    parent private key, non-hardened derivation is
    not available for ed25519.
    """

    if not 0 <= index < HARDENED:
        raise IndexOutOfRangeError(f"invalid index: {index} not in 0..{HARDENED - 1}")

    curve_ = slip10_curve(parent.curve)
    if not hardened and curve_.hardened_only:
        err_msg = f"non-hardened derivation not supported for {curve_.name}"
        raise NonHardenedUnsupportedError(err_msg)
    if hardened and parent.private_key is None:
        raise PrivateKeyRequiredError("hardened derivation from public key")

    if parent.depth >= _MAX_DEPTH:
        raise DepthOverflowError(f"depth greater than {_MAX_DEPTH}")

    i = index + HARDENED if hardened else index
    if hardened:
        # private key is not None, as checked above
        data = b"\x00" + parent.private_key + ser32(i)  # type: ignore
    else:
        data = curve_.ser_pub_key(parent.public_key) + ser32(i)

    child_key: Optional[bytes] = None
    while True:
        hmac_ = hmac_sha512(parent.chain_code, data)
        il, chain_code = hmac_[:32], hmac_[32:]
        if parent.private_key is not None:
            child_key = curve_.child_prv_key(parent.private_key, il)
        else:
            child_key = curve_.child_pub_key(parent.public_key, il)
        if child_key is not None:
            break
        logger.debug("invalid %s child key at index %s, repeating", curve_.name, i)
        data = b"\x01" + chain_code + ser32(i)

    logger.debug(
        "%s child at depth %d, index %s", curve_.name, parent.depth + 1, hex_string(i)
    )
    if parent.private_key is not None:
        return KeyMaterial(
            curve=curve_.name,
            depth=parent.depth + 1,
            parent_fingerprint=parent.fingerprint,
            index=i,
            chain_code=chain_code,
            private_key=child_key,
        )
    return KeyMaterial(
        curve=curve_.name,
        depth=parent.depth + 1,
        parent_fingerprint=parent.fingerprint,
        index=i,
        chain_code=chain_code,
        public_key=child_key,
    )


def derive(node: KeyMaterial, der_path: DerPath) -> KeyMaterial:
    """Derive a node across a path spanning multiple depth levels.

    Valid DerPath examples:

    - string like "m/44'/501'/0h/0H"
    - sequence of PathStep(index, hardened)
    - sequence of 32-bit integer indexes

    The final depth is checked before any derivation step.
    """

    steps = der_path_from(der_path)

    final_depth = node.depth + len(steps)
    if final_depth > _MAX_DEPTH:
        err_msg = f"final depth greater than {_MAX_DEPTH}: {final_depth}"
        raise DepthOverflowError(err_msg)

    for index, hardened in steps:
        node = derive_child(node, index, hardened)
    return node


def derive_path(
    seed: Octets, der_path: DerPath, curve: str = DEFAULT_CURVE
) -> KeyMaterial:
    """Return the node at the given path of the tree derived from the seed.

    An empty path (e.g. "m") returns the master node.
    """

    master = master_key_from_seed(seed, curve)
    node = derive(master, der_path)
    logger.debug("derived %s node at %s", node.curve, format_path(der_path))
    return node


def neuter(node: KeyMaterial) -> KeyMaterial:
    """Neutered Derivation (ND).

    Return the public-only copy of a node
    ("neutered" as it removes the ability to sign).
    """

    return KeyMaterial(
        curve=node.curve,
        depth=node.depth,
        parent_fingerprint=node.parent_fingerprint,
        index=node.index,
        chain_code=node.chain_code,
        public_key=node.public_key,
    )
