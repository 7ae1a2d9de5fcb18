#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkeys.ecc.ed25519` module."

import pytest
from nacl.signing import SigningKey

from hdkeys.ecc.ed25519 import PUB_KEY_SIZE, is_valid_pub_key, pub_key_from_seed
from hdkeys.exceptions import HDKeysTypeError, HDKeysValueError


def test_rfc8032_vectors() -> None:
    "https://datatracker.ietf.org/doc/html/rfc8032#section-7.1"

    test_vectors = [
        (
            "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60",
            "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a",
        ),
        (
            "4ccd089b28ff96da9db6c346ec114e0f5b8a319f35aba624da8cf6ed4fb8a6fb",
            "3d4017c3e843895a92b70aa74d1b7ebc9c982ccf2ec4968cc0cd55f12af4660c",
        ),
        (
            "c5aa8df43f9f837bedb7442f31dcb7b166d38535076f094b85ce3a2e0b4458f7",
            "fc51cd8e6218a1a38da47ed00230f0580816ed13ba3303ac5deb911548908025",
        ),
    ]
    for seed, pub_key in test_vectors:
        assert pub_key_from_seed(seed).hex() == pub_key
        assert pub_key_from_seed(bytes.fromhex(seed)).hex() == pub_key


def test_pub_key_from_seed() -> None:
    seed = bytes(range(32))
    pub_key = pub_key_from_seed(seed)
    assert len(pub_key) == PUB_KEY_SIZE
    assert isinstance(pub_key, bytes)
    assert pub_key == SigningKey(seed).verify_key.encode()

    with pytest.raises(HDKeysValueError, match="invalid size: "):
        pub_key_from_seed(seed[:-1])
    with pytest.raises(HDKeysValueError, match="invalid size: "):
        pub_key_from_seed(seed + b"\x00")
    with pytest.raises(HDKeysTypeError, match="not bytes or hex-string: "):
        pub_key_from_seed(list(seed))  # type: ignore


def test_is_valid_pub_key() -> None:
    pub_key = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
    assert is_valid_pub_key(pub_key)
    assert is_valid_pub_key(pub_key_from_seed(bytes(range(32))))

    # neutral point and a point of order 4
    assert not is_valid_pub_key("01" + "00" * 31)
    assert not is_valid_pub_key("00" * 32)
    # y = 2^255 - 1 is not a canonical encoding
    assert not is_valid_pub_key("ff" * 32)

    with pytest.raises(HDKeysValueError, match="invalid size: "):
        is_valid_pub_key(pub_key[:-2])
