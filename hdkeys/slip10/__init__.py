#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module hdkeys.slip10."""

from hdkeys.slip10.curves import (
    DEFAULT_CURVE,
    SLIP10_CURVES,
    Slip10Curve,
    pub_key_from_prv_key,
    slip10_curve,
)
from hdkeys.slip10.der_path import (
    HARDENED,
    DerivationPath,
    DerPath,
    PathStep,
    der_path_from,
    format_path,
    indexes_from_path,
    parse_path,
    path_from_indexes,
)
from hdkeys.slip10.key_material import KeyMaterial
from hdkeys.slip10.slip10 import (
    derive,
    derive_child,
    derive_path,
    master_key_from_seed,
    neuter,
)

__all__ = [
    "DEFAULT_CURVE",
    "SLIP10_CURVES",
    "Slip10Curve",
    "pub_key_from_prv_key",
    "slip10_curve",
    "HARDENED",
    "DerivationPath",
    "DerPath",
    "PathStep",
    "der_path_from",
    "format_path",
    "indexes_from_path",
    "parse_path",
    "path_from_indexes",
    "KeyMaterial",
    "derive",
    "derive_child",
    "derive_path",
    "master_key_from_seed",
    "neuter",
]
