#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Derivation path parsing and formatting.

A derivation path is a list of PathStep(index, hardened) pairs,
with index in 0..2^31-1; the empty list is the master node.

It can be represented as:

- "m/44'/501'/0'/0'" string, hardening symbol among "'", "h", "H"
- sequence of 32-bit integer indexes, where the top bit is
  the hardened flag (e.g. 0x8000002C for 44')
"""

import re
from typing import List, NamedTuple, Sequence, Union

from hdkeys.exceptions import (
    HDKeysTypeError,
    HDKeysValueError,
    IndexOutOfRangeError,
    MalformedPathError,
)

HARDENED = 0x80000000

# default hardening symbol among the possible ones: "'", "h", "H"
_HARDENING = "'"

_MAX_DEPTH = 255

_STEP_RE = re.compile(r"([0-9]+)(['hH]?)")


class PathStep(NamedTuple):
    index: int
    hardened: bool


DerivationPath = List[PathStep]

DerPath = Union[str, Sequence[PathStep], Sequence[int]]


def int_from_step(step: PathStep) -> int:
    "Return the 32-bit index of the step, top bit set if hardened."

    index, hardened = step
    if not 0 <= index < HARDENED:
        raise IndexOutOfRangeError(f"invalid index: {index} not in 0..{HARDENED - 1}")
    return index + (HARDENED if hardened else 0)


def step_from_int(i: int) -> PathStep:
    "Return the PathStep of a 32-bit index."

    if not 0 <= i <= 0xFFFFFFFF:
        raise IndexOutOfRangeError(f"invalid index: {i} not in 0..0xFFFFFFFF")
    if i < HARDENED:
        return PathStep(i, False)
    return PathStep(i - HARDENED, True)


def _step_from_str(s: str) -> PathStep:

    match = _STEP_RE.fullmatch(s.strip())
    if match is None:
        raise MalformedPathError(f"invalid path step: {s!r}")
    index = int(match.group(1))
    if index >= HARDENED:
        raise MalformedPathError(f"invalid index: {index}")
    return PathStep(index, match.group(2) != "")


def parse_path(text: str) -> DerivationPath:
    """Return the list of steps of a derivation path string.

    The path must start with "m", followed by "/"-separated steps;
    "m" alone is the master node:

    >>> parse_path("m/0'/1")
    [PathStep(index=0, hardened=True), PathStep(index=1, hardened=False)]
    """

    if not isinstance(text, str):
        raise MalformedPathError(f"not a path string: {text!r}")

    segments = text.split("/")
    if segments[0].strip() != "m":
        raise MalformedPathError(f"path must start with 'm': {text!r}")

    steps = [_step_from_str(s) for s in segments[1:]]
    if len(steps) > _MAX_DEPTH:
        raise MalformedPathError(f"depth greater than {_MAX_DEPTH}: {len(steps)}")
    return steps


def format_path(der_path: DerPath, hardening: str = _HARDENING) -> str:
    "Return the canonical string of a derivation path."

    if hardening not in ("'", "h", "H"):
        raise HDKeysValueError(f"invalid hardening symbol: {hardening}")
    steps = der_path_from(der_path)
    return "/".join(
        ["m"] + [f"{index}{hardening if hardened else ''}" for index, hardened in steps]
    )


def indexes_from_path(der_path: DerPath) -> List[int]:
    "Return the 32-bit indexes of a derivation path."
    return [int_from_step(step) for step in der_path_from(der_path)]


def path_from_indexes(indexes: Sequence[int]) -> DerivationPath:
    "Return the derivation path of a sequence of 32-bit indexes."
    if len(indexes) > _MAX_DEPTH:
        raise MalformedPathError(f"depth greater than {_MAX_DEPTH}: {len(indexes)}")
    return [step_from_int(i) for i in indexes]


def der_path_from(der_path: DerPath) -> DerivationPath:
    """Return a DerivationPath from any of its representations.

    PathStep and (index, hardened) pairs are validated,
    plain integers are handled as 32-bit indexes.
    """

    if isinstance(der_path, str):
        return parse_path(der_path)

    steps: DerivationPath = []
    for step in der_path:
        if isinstance(step, int):
            steps.append(step_from_int(step))
        elif isinstance(step, tuple) and len(step) == 2:
            index, hardened = step
            if not isinstance(index, int):
                raise HDKeysTypeError(f"invalid index type: {type(index).__name__}")
            int_from_step(PathStep(index, hardened))
            steps.append(PathStep(index, bool(hardened)))
        else:
            raise HDKeysTypeError(f"invalid path step: {step!r}")
    if len(steps) > _MAX_DEPTH:
        raise MalformedPathError(f"depth greater than {_MAX_DEPTH}: {len(steps)}")
    return steps
