#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Cyclic subgroups of a CurveGroup.

Subgroup is the cyclic subgroup generated by a group point;
SubgroupCatalog collects the distinct cyclic subgroups
generated by all the group points, sorted by subgroup order.

Both are frozen dataclasses, serializable to/from json.
Points are serialized as [x, y] or "INF".
"""

import bisect
import logging
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterator, List, Sequence, Tuple, Type, TypeVar

from dataclasses_json import DataClassJsonMixin, config

from ecexplorer.curve_group import CurveGroup
from ecexplorer.curve_group_f import find_subgroup_points
from ecexplorer.exceptions import ECExplorerValueError
from ecexplorer.point import INF, AffinePoint, Infinity, Point, point_sort_key

logger = logging.getLogger(__name__)

_Subgroup = TypeVar("_Subgroup", bound="Subgroup")
_SubgroupCatalog = TypeVar("_SubgroupCatalog", bound="SubgroupCatalog")


def _encode_point(Q: Point) -> Any:
    if isinstance(Q, Infinity):
        return "INF"
    return [Q.x, Q.y]


def _decode_point(value: Any) -> Point:
    if value == "INF":
        return INF
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return AffinePoint(value[0], value[1])
    raise ECExplorerValueError(f"invalid serialized point: {value!r}")


def _encode_points(points: Sequence[Point]) -> List[Any]:
    return [_encode_point(Q) for Q in points]


def _decode_points(values: Sequence[Any]) -> Tuple[Point, ...]:
    return tuple(_decode_point(v) for v in values)


@dataclass(frozen=True)
class Subgroup(DataClassJsonMixin):
    """Cyclic subgroup generated by a point.

    members are [INF, G, 2G, ..., (n-1)G], n being the subgroup order.
    """

    generator: Point = field(
        metadata=config(encoder=_encode_point, decoder=_decode_point)
    )
    members: Tuple[Point, ...] = field(
        metadata=config(encoder=_encode_points, decoder=_decode_points)
    )

    @classmethod
    def from_generator(cls: Type[_Subgroup], ec: CurveGroup, G: Point) -> _Subgroup:
        return cls(ec.canonical(G), tuple(find_subgroup_points(ec, G)))

    @property
    def order(self) -> int:
        return len(self.members)

    @property
    def point_set(self) -> FrozenSet[Point]:
        return frozenset(self.members)

    @property
    def canonical_points(self) -> Tuple[Point, ...]:
        "Return the distinct members sorted with INF first, then by (x, y)."
        return tuple(sorted(self.point_set, key=point_sort_key))

    def same_points(self, other: "Subgroup") -> bool:
        "Return True if the two subgroups have the same points, in any order."
        return self.canonical_points == other.canonical_points

    def __iter__(self) -> Iterator[Point]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)


def _encode_subgroups(subgroups: Sequence[Subgroup]) -> List[Any]:
    return [subgroup.to_dict() for subgroup in subgroups]


def _decode_subgroups(values: Sequence[Any]) -> Tuple[Subgroup, ...]:
    return tuple(Subgroup.from_dict(v) for v in values)


@dataclass(frozen=True)
class SubgroupCatalog(DataClassJsonMixin):
    """The distinct cyclic subgroups of a CurveGroup.

    Subgroups are sorted by non-decreasing order;
    subgroups with the same points, but different generators,
    are catalogued only once (with the first generator found).
    """

    p: int
    a: int
    b: int
    group_order: int
    subgroups: Tuple[Subgroup, ...] = field(
        metadata=config(encoder=_encode_subgroups, decoder=_decode_subgroups)
    )

    @classmethod
    def build(cls: Type[_SubgroupCatalog], ec: CurveGroup) -> _SubgroupCatalog:
        "Return the catalog of the cyclic subgroups generated by all the points."

        logger.debug("building the subgroup catalog of %r", ec)
        subgroups: List[Subgroup] = []
        orders: List[int] = []
        for G in ec.points:
            subgroup = Subgroup.from_generator(ec, G)
            # first position whose order is >= the new subgroup order
            i = bisect.bisect_left(orders, subgroup.order)
            if not _is_catalogued(subgroup, subgroups, orders, i):
                subgroups.insert(i, subgroup)
                orders.insert(i, subgroup.order)
        logger.debug("%r has %d distinct cyclic subgroups", ec, len(subgroups))

        return cls(ec.p, ec.a, ec.b, ec.order, tuple(subgroups))

    @property
    def orders(self) -> Tuple[int, ...]:
        return tuple(subgroup.order for subgroup in self.subgroups)

    def __iter__(self) -> Iterator[Subgroup]:
        return iter(self.subgroups)

    def __len__(self) -> int:
        return len(self.subgroups)

    def __getitem__(self, i: int) -> Subgroup:
        return self.subgroups[i]


def _is_catalogued(
    subgroup: Subgroup, subgroups: Sequence[Subgroup], orders: Sequence[int], i: int
) -> bool:
    "Scan the same-order entries starting at i for a subgroup with the same points."

    while i < len(subgroups) and orders[i] == subgroup.order:
        if subgroups[i].same_points(subgroup):
            return True
        i += 1
    return False
