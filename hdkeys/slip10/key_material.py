#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Key material of a node of the derivation tree.

A node is immutable: derivation functions build new nodes
and never modify existing ones.
The stable output contract is made of
private_key, public_key, and chain_code.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from hdkeys.alias import Octets
from hdkeys.ecc.ed25519 import is_valid_pub_key
from hdkeys.ecc.sec_point import point_from_octets
from hdkeys.exceptions import HDKeysValueError
from hdkeys.hashes import hash160
from hdkeys.slip10.curves import PRV_KEY_SIZE, slip10_curve
from hdkeys.slip10.der_path import HARDENED
from hdkeys.utils import bytes_from_octets

_KEY_SIZE: List[Tuple[str, int]] = [
    ("parent_fingerprint", 4),
    ("chain_code", 32),
]


@dataclass(frozen=True)
class KeyMaterial:
    curve: str
    depth: int
    parent_fingerprint: bytes
    # index is an int, not bytes, to avoid any byteorder ambiguity
    index: int
    chain_code: bytes
    public_key: bytes
    private_key: Optional[bytes] = field(default=None, repr=False)

    @property
    def is_private(self) -> bool:
        return self.private_key is not None

    @property
    def is_hardened(self) -> bool:
        return self.index >= HARDENED

    @property
    def is_root(self) -> bool:
        return (
            self.depth == 0
            and self.index == 0
            and self.parent_fingerprint == b"\x00" * 4
        )

    @property
    def fingerprint(self) -> bytes:
        "Return the first four bytes of the HASH160 of the public key."
        ser_pub_key = slip10_curve(self.curve).ser_pub_key(self.public_key)
        return hash160(ser_pub_key)[:4]

    def __init__(
        self,
        curve: str,
        depth: int,
        parent_fingerprint: Octets,
        index: int,
        chain_code: Octets,
        public_key: Optional[Octets] = None,
        private_key: Optional[Octets] = None,
        check_validity: bool = True,
    ) -> None:

        curve_ = slip10_curve(curve)
        object.__setattr__(self, "curve", curve_.name)
        object.__setattr__(self, "depth", depth)
        object.__setattr__(
            self, "parent_fingerprint", bytes_from_octets(parent_fingerprint)
        )
        object.__setattr__(self, "index", index)
        object.__setattr__(self, "chain_code", bytes_from_octets(chain_code))

        if private_key is not None:
            private_key = bytes_from_octets(private_key)
            projected_pub_key = curve_.pub_key(private_key)
            if public_key is None:
                public_key = projected_pub_key
            elif bytes_from_octets(public_key) != projected_pub_key:
                raise HDKeysValueError("public key does not match private key")
        elif public_key is None:
            raise HDKeysValueError("missing both private and public key")
        object.__setattr__(self, "private_key", private_key)
        object.__setattr__(self, "public_key", bytes_from_octets(public_key))

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:

        curve_ = slip10_curve(self.curve)

        for key, size in _KEY_SIZE:
            value = getattr(self, key)
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise HDKeysValueError(err_msg)

        if len(self.public_key) != curve_.pub_key_size:
            err_msg = f"invalid public_key length: {len(self.public_key)} bytes"
            err_msg += f" instead of {curve_.pub_key_size}"
            raise HDKeysValueError(err_msg)
        if curve_.ec is not None:
            point_from_octets(self.public_key, curve_.ec)
        elif not is_valid_pub_key(self.public_key):
            err_msg = f"invalid ed25519 public key: {self.public_key.hex()}"
            raise HDKeysValueError(err_msg)

        if self.private_key is not None:
            if len(self.private_key) != PRV_KEY_SIZE:
                err_msg = f"invalid private_key length: {len(self.private_key)} bytes"
                err_msg += f" instead of {PRV_KEY_SIZE}"
                raise HDKeysValueError(err_msg)
            curve_.prv_key_int(self.private_key)

        if not 0 <= self.index <= 0xFFFFFFFF:
            raise HDKeysValueError(f"invalid index: {self.index}")

        if not 0 <= self.depth <= 255:
            raise HDKeysValueError(f"invalid depth: {self.depth}")

        if self.depth == 0:
            if self.parent_fingerprint != b"\x00" * 4:
                err_msg = "zero depth with non-zero parent fingerprint: "
                err_msg += f"0x{self.parent_fingerprint.hex()}"
                raise HDKeysValueError(err_msg)
            if self.index != 0:
                raise HDKeysValueError(f"zero depth with non-zero index: {self.index}")

    def to_dict(self, check_validity: bool = True) -> Dict[str, Union[str, int, None]]:

        if check_validity:
            self.assert_valid()

        return {
            "curve": self.curve,
            "depth": self.depth,
            "parent_fingerprint": self.parent_fingerprint.hex(),
            "index": self.index,
            "chain_code": self.chain_code.hex(),
            "public_key": self.public_key.hex(),
            "private_key": self.private_key.hex() if self.private_key else None,
        }
