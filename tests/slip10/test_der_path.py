#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkeys.slip10.der_path` module."

import pytest

from hdkeys.exceptions import (
    HDKeysTypeError,
    HDKeysValueError,
    IndexOutOfRangeError,
    MalformedPathError,
)
from hdkeys.slip10.der_path import (
    HARDENED,
    PathStep,
    der_path_from,
    format_path,
    indexes_from_path,
    int_from_step,
    parse_path,
    path_from_indexes,
    step_from_int,
)


def test_parse_path() -> None:
    assert parse_path("m") == []
    assert parse_path("m/0'/1") == [(0, True), (1, False)]
    assert parse_path("m/0'/1") == [PathStep(0, True), PathStep(1, False)]

    solana = [PathStep(44, True), PathStep(501, True), PathStep(0, True)]
    solana.append(PathStep(0, True))
    assert parse_path("m/44'/501'/0'/0'") == solana
    # hardening symbols and blanks
    assert parse_path("m/44h/501H/0'/0h") == solana
    assert parse_path(" m / 44' / 501' / 0' / 0' ") == solana

    assert parse_path(f"m/{HARDENED - 1}'") == [PathStep(HARDENED - 1, True)]
    assert parse_path("m/" + "/".join(["1"] * 255))[-1] == PathStep(1, False)


def test_parse_path_exceptions() -> None:
    invalid_paths = [
        "",
        "/",
        "M/0'",
        "n/0'",
        "44'/501'",
        "m/",
        "m//0'",
        "m/0'/",
        "m/x",
        "m/-1",
        "m/+1",
        "m/1.5",
        "m/0x1",
        "m/1''",
        "m/1hh",
        "m/h",
        "m/1 h",
        "m/١",  # non ASCII digit
    ]
    for der_path in invalid_paths:
        with pytest.raises(MalformedPathError):
            parse_path(der_path)

    with pytest.raises(MalformedPathError, match="invalid index: "):
        parse_path(f"m/{HARDENED}")
    with pytest.raises(MalformedPathError, match="invalid index: "):
        parse_path(f"m/{HARDENED}'")

    with pytest.raises(MalformedPathError, match="depth greater than 255: 256"):
        parse_path("m/" + "/".join(["1"] * 256))

    with pytest.raises(MalformedPathError, match="not a path string: "):
        parse_path(b"m/0'")  # type: ignore

    # MalformedPathError is an HDKeysValueError and a ValueError
    with pytest.raises(HDKeysValueError):
        parse_path("m/x")
    with pytest.raises(ValueError):
        parse_path("m/x")


def test_format_path() -> None:
    for der_path in ("m", "m/0'/1", "m/44'/501'/0'/0'", "m/0/2147483647'/1"):
        assert format_path(parse_path(der_path)) == der_path
        assert format_path(der_path) == der_path

    der_path = "m / 44h / 501H / 0' / 0h"
    assert format_path(der_path) == "m/44'/501'/0'/0'"
    assert format_path(der_path, "h") == "m/44h/501h/0h/0h"
    assert parse_path(format_path(der_path, "H")) == parse_path(der_path)

    with pytest.raises(HDKeysValueError, match="invalid hardening symbol: "):
        format_path(der_path, "p")


def test_indexes() -> None:
    indexes = [44 + HARDENED, 501 + HARDENED, 0 + HARDENED, 0]
    der_path = "m/44'/501'/0'/0"
    assert indexes_from_path(der_path) == indexes
    assert path_from_indexes(indexes) == parse_path(der_path)
    assert indexes_from_path(path_from_indexes(indexes)) == indexes
    assert format_path(indexes) == der_path

    assert indexes_from_path("m") == []
    assert path_from_indexes([]) == []

    assert int_from_step(PathStep(0, True)) == HARDENED
    assert int_from_step(PathStep(HARDENED - 1, False)) == HARDENED - 1
    assert step_from_int(0xFFFFFFFF) == PathStep(HARDENED - 1, True)
    assert step_from_int(0) == PathStep(0, False)

    for step in (PathStep(HARDENED, False), PathStep(-1, True)):
        with pytest.raises(IndexOutOfRangeError, match="invalid index: "):
            int_from_step(step)
    for i in (0xFFFFFFFF + 1, -1):
        with pytest.raises(IndexOutOfRangeError, match="invalid index: "):
            step_from_int(i)

    with pytest.raises(MalformedPathError, match="depth greater than 255: 256"):
        path_from_indexes([0] * 256)


def test_der_path_from() -> None:
    der_path = [PathStep(44, True), PathStep(0, False)]
    assert der_path_from("m/44'/0") == der_path
    assert der_path_from(der_path) == der_path
    assert der_path_from([(44, True), (0, 0)]) == der_path
    assert der_path_from([44 + HARDENED, 0]) == der_path
    assert der_path_from([]) == []

    # the result is a new list
    assert der_path_from(der_path) is not der_path

    for bad_path in ([(HARDENED, True)], [PathStep(HARDENED, False)], [2**32], [-1]):
        with pytest.raises(IndexOutOfRangeError, match="invalid index: "):
            der_path_from(bad_path)  # type: ignore
    with pytest.raises(MalformedPathError, match="depth greater than 255: 256"):
        der_path_from([PathStep(0, True)] * 256)
    with pytest.raises(MalformedPathError, match="depth greater than 255: 256"):
        der_path_from([0] * 256)

    with pytest.raises(HDKeysTypeError, match="invalid path step: "):
        der_path_from(["44'", "501'"])  # type: ignore
    with pytest.raises(HDKeysTypeError, match="invalid path step: "):
        der_path_from([(44, True, 0)])  # type: ignore
    with pytest.raises(HDKeysTypeError, match="invalid index type: "):
        der_path_from([("44", True)])  # type: ignore
