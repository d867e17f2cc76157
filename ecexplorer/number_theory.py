#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions.

Implementations originally from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
with the following modifications:

* type annotated python3
* explicit exception when no inverse exists
"""

from typing import Tuple

from ecexplorer.exceptions import ECExplorerValueError


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m), i.e. x in [1, m-1] with a*x = 1 (mod m).

    m does not have to be a prime.
    An ECExplorerValueError is raised if a has no inverse,
    in particular if a = 0 (mod m):
    there is no sentinel return value.
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise ECExplorerValueError(f"No inverse for {a} mod {m}")


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    p is an odd prime.
    It returns 1 if a is a non-zero quadratic residue modulo p,
    -1 if it is a non-residue, and 0 if p divides a.
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls
