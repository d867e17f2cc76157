#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted input conversion utilities."""

from typing import Union

from ecexplorer.exceptions import ECExplorerTypeError, ECExplorerValueError

# int or its decimal/hex-string representation,
# e.g. 17, "17", " -3 ", "0x11"
Integer = Union[str, int]


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 17
    * -3
    * "17"
    * "0x11"
    * "-0x11"

    Leading/trailing blanks are stripped from strings.
    bool is not an integer here, even if it is an int subclass.
    """

    if isinstance(i, bool):
        raise ECExplorerTypeError(f"not an integer: {i!r}")

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i_str = i.strip().lower()
        try:
            if i_str.startswith("0x") or i_str.startswith("-0x"):
                return int(i_str, 16)
            return int(i_str, 10)
        except ValueError as e:
            raise ECExplorerValueError(f"not an integer: {i!r}") from e

    raise ECExplorerTypeError(f"not an integer: {i!r}")


def is_odd_prime(n: int) -> bool:
    """Return True if n is an odd prime.

    Deterministic trial division by 6k +/- 1 candidates:
    fine for the small moduli this package is meant for.
    """

    if n < 3 or n % 2 == 0:
        return False
    if n == 3:
        return True
    if n % 3 == 0:
        return False

    i = 5
    w = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += w
        w = 6 - w

    return True
