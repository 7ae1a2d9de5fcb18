#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Coin constants and HD addresses.

A coin fixes the BIP44-style derivation path
"m / purpose' / coin_type' / account' / change / address_index"
and the SLIP-0010 curve of its keys.

Coins whose curve allows hardened derivation only (e.g. solana)
harden every level: "m/44'/501'/0'/0'".
"""

import json
import logging
from dataclasses import dataclass
from os import path
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from hdkeys.alias import Octets
from hdkeys.exceptions import HDKeysValueError, IndexOutOfRangeError
from hdkeys.slip10.curves import slip10_curve
from hdkeys.slip10.der_path import HARDENED, format_path, parse_path
from hdkeys.slip10.key_material import KeyMaterial
from hdkeys.slip10.slip10 import derive_path

logger = logging.getLogger(__name__)

_Coin = TypeVar("_Coin", bound="Coin")


def _assert_valid_level(name: str, value: int) -> None:
    if not 0 <= value < HARDENED:
        raise IndexOutOfRangeError(f"invalid {name}: {value} not in 0..{HARDENED - 1}")


@dataclass(frozen=True)
class Coin:
    name: str
    purpose: int
    coin_type: int
    curve: str
    # every derivation level is hardened
    always_hardened: bool

    def __init__(
        self,
        name: str,
        purpose: int,
        coin_type: int,
        curve: str,
        always_hardened: bool,
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "purpose", purpose)
        object.__setattr__(self, "coin_type", coin_type)
        object.__setattr__(self, "curve", slip10_curve(curve).name)
        object.__setattr__(self, "always_hardened", always_hardened)

        if check_validity:
            self.assert_valid()

    def to_dict(self, check_validity: bool = True) -> Dict[str, Union[str, int, bool]]:

        if check_validity:
            self.assert_valid()

        return {
            "name": self.name,
            "purpose": self.purpose,
            "coin_type": self.coin_type,
            "curve": self.curve,
            "always_hardened": self.always_hardened,
        }

    @classmethod
    def from_dict(
        cls: Type[_Coin], dict_: Mapping[str, Any], check_validity: bool = True
    ) -> _Coin:

        return cls(
            dict_["name"],
            dict_["purpose"],
            dict_["coin_type"],
            dict_["curve"],
            dict_["always_hardened"],
            check_validity,
        )

    def assert_valid(self) -> None:

        if not self.name:
            raise HDKeysValueError("empty coin name")
        _assert_valid_level("purpose", self.purpose)
        _assert_valid_level("coin type", self.coin_type)
        if not self.always_hardened and slip10_curve(self.curve).hardened_only:
            err_msg = f"{self.curve} coin must always be hardened: {self.name}"
            raise HDKeysValueError(err_msg)

    def der_path(
        self, account: int = 0, change: int = 0, address_index: Optional[int] = None
    ) -> str:
        """Return the derivation path of an address.

        The address index level is omitted if address_index is None.
        """

        levels = [("account", account), ("change", change)]
        if address_index is not None:
            levels.append(("address index", address_index))
        for level, value in levels:
            _assert_valid_level(level, value)

        steps = [(self.purpose, True), (self.coin_type, True), (account, True)]
        steps += [(value, self.always_hardened) for _, value in levels[1:]]
        return format_path(steps)


COINS: Dict[str, Coin] = {}
datadir = path.join(path.dirname(__file__), "_data")
with open(path.join(datadir, "coins.json"), "r") as f:
    for coin_name, coin_dict in json.load(f).items():
        COINS[coin_name] = Coin.from_dict(coin_dict)


def coin_from_name(coin: Union[str, Coin]) -> Coin:
    "Return the Coin given its (case insensitive) name."

    if isinstance(coin, Coin):
        return coin
    name = coin.strip().lower()
    try:
        return COINS[name]
    except KeyError:
        err_msg = f"unknown coin: {coin!r} not in {list(COINS)}"
        raise HDKeysValueError(err_msg) from None


@dataclass(frozen=True)
class HDAddress:
    "A derived node with the coin and the path it was derived at."

    key: KeyMaterial
    coin: Coin
    path: str

    def __init__(
        self, key: KeyMaterial, coin: Coin, path: str, check_validity: bool = True
    ) -> None:

        object.__setattr__(self, "key", key)
        object.__setattr__(self, "coin", coin)
        object.__setattr__(self, "path", format_path(path))

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:

        self.key.assert_valid()
        if self.key.curve != self.coin.curve:
            err_msg = f"curve mismatch: {self.key.curve} key"
            err_msg += f" for {self.coin.name} coin ({self.coin.curve})"
            raise HDKeysValueError(err_msg)
        depth = len(parse_path(self.path))
        if self.key.depth != depth:
            err_msg = f"depth mismatch: {self.key.depth} key depth"
            err_msg += f" for path {self.path}"
            raise HDKeysValueError(err_msg)

    @property
    def private_key(self) -> Optional[bytes]:
        return self.key.private_key

    @property
    def public_key(self) -> bytes:
        return self.key.public_key


def derive_address(
    seed: Octets,
    coin: Union[str, Coin],
    account: int = 0,
    change: int = 0,
    address_index: Optional[int] = None,
) -> HDAddress:
    """Derive the HD address of a coin from the seed.

    >>> seed = bytes(range(32))
    >>> derive_address(seed, "solana").path
    "m/44'/501'/0'/0'"
    """

    coin = coin_from_name(coin)
    der_path = coin.der_path(account, change, address_index)
    logger.debug("deriving %s address at %s", coin.name, der_path)
    key = derive_path(seed, der_path, coin.curve)
    return HDAddress(key, coin, der_path)
