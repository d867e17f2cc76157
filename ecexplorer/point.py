#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points.

A curve Point is either the point at infinity (the group neutral element)
or an affine point (x, y).
Both are immutable value objects with structural equality.

The infinity point is not encoded as a special affine point:
small curves can have affine points with y=0 coordinate.
It can be checked with 'isinstance(Q, Infinity)' or 'Q == INF'.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from ecexplorer.exceptions import ECExplorerTypeError


@dataclass(frozen=True)
class Infinity:
    "The point at infinity: all instances are equal."

    def __str__(self) -> str:
        return "INF"


@dataclass(frozen=True)
class AffinePoint:
    """Elliptic curve point in affine coordinates.

    Coordinates are not reduced, nor checked to be on any curve:
    see CurveGroup.is_on_curve.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        for coord in (self.x, self.y):
            if isinstance(coord, bool) or not isinstance(coord, int):
                raise ECExplorerTypeError(f"not an int coordinate: {coord!r}")

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


INF = Infinity()

Point = Union[Infinity, AffinePoint]


def is_point(Q: object) -> bool:
    return isinstance(Q, (Infinity, AffinePoint))


def point_sort_key(Q: Point) -> Tuple[int, int, int]:
    "Return a sort key putting INF first, then affine points by (x, y)."

    if isinstance(Q, Infinity):
        return 0, 0, 0
    return 1, Q.x, Q.y
