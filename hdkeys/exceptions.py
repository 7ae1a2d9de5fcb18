#!/usr/bin/env python3

# Copyright (C) 2022 The hdkeys developers
#
# This file is part of hdkeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by hdkeys from those raised by other codebase.

Every derivation failure is a deterministic input-validation failure:
it derives from HDKeysValueError, itself a regular ValueError,
so that users can catch the specific error, the hdkeys one,
or just the plain ValueError.
"""


class HDKeysValueError(ValueError):
    pass


class HDKeysTypeError(TypeError):
    pass


class InvalidSeedLengthError(HDKeysValueError):
    pass


class IndexOutOfRangeError(HDKeysValueError):
    pass


class PrivateKeyRequiredError(HDKeysValueError):
    pass


class NonHardenedUnsupportedError(HDKeysValueError):
    pass


class DepthOverflowError(HDKeysValueError):
    pass


class MalformedPathError(HDKeysValueError):
    pass


class InvalidScalarError(HDKeysValueError):
    pass
