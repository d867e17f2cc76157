#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecexplorer.subgroups` module."

import json

import pytest

from ecexplorer.curve_group import CurveGroup, mult_aff
from ecexplorer.exceptions import ECExplorerTypeError, ECExplorerValueError
from ecexplorer.point import INF, AffinePoint
from ecexplorer.subgroups import Subgroup, SubgroupCatalog

curves = [
    CurveGroup(5, 1, 0),
    CurveGroup(5, 1, 1),
    CurveGroup(7, 3, 0),
    CurveGroup(13, 7, 6),
    CurveGroup(17, 2, 2),
    CurveGroup(17, 6, 8),
    CurveGroup(19, 0, 2),
    CurveGroup(23, 5, 1),
    CurveGroup(31, 2, 3),
]


def test_subgroup() -> None:
    ec = CurveGroup(5, 1, 1)
    subgroup = Subgroup.from_generator(ec, AffinePoint(2, 4))
    assert subgroup.generator == AffinePoint(2, 4)
    assert subgroup.members == (INF, AffinePoint(2, 4), AffinePoint(2, 1))
    assert subgroup.order == len(subgroup) == 3
    assert list(subgroup) == list(subgroup.members)
    assert subgroup.point_set == {INF, AffinePoint(2, 1), AffinePoint(2, 4)}
    assert subgroup.canonical_points == (INF, AffinePoint(2, 1), AffinePoint(2, 4))

    other = Subgroup.from_generator(ec, AffinePoint(2, 1))
    assert other != subgroup
    assert other.same_points(subgroup)
    assert subgroup.same_points(other)

    trivial = Subgroup.from_generator(ec, INF)
    assert trivial.members == (INF,)
    assert trivial.order == 1
    assert not trivial.same_points(subgroup)

    with pytest.raises(ECExplorerValueError, match="point not in the group: "):
        Subgroup.from_generator(ec, AffinePoint(1, 1))


def test_scalar_order_relation() -> None:
    for ec in curves:
        for G in ec.points:
            subgroup = Subgroup.from_generator(ec, G)
            n = subgroup.order
            assert mult_aff(n, G, ec) == INF
            for m in range(1, n):
                assert mult_aff(m, G, ec) != INF


def test_catalog_5_1_1() -> None:
    ec = CurveGroup(5, 1, 1)
    catalog = SubgroupCatalog.build(ec)
    assert (catalog.p, catalog.a, catalog.b) == (5, 1, 1)
    assert catalog.group_order == 9
    assert catalog.orders == (1, 3, 9)
    assert len(catalog) == 3
    assert catalog[0].members == (INF,)
    assert catalog[1].point_set == {INF, AffinePoint(2, 1), AffinePoint(2, 4)}
    # first generator found in enumeration order
    assert catalog[1].generator == AffinePoint(2, 1)
    assert catalog[2].generator == AffinePoint(0, 1)
    assert catalog[2].point_set == set(ec.points)


def test_catalog_equal_orders() -> None:
    # Z2 x Z2: three distinct subgroups of order 2
    ec = CurveGroup(5, 1, 0)
    catalog = SubgroupCatalog.build(ec)
    assert catalog.orders == (1, 2, 2, 2)
    assert {subgroup.generator for subgroup in catalog} == set(ec.points)
    assert {subgroup.point_set for subgroup in catalog} == {
        frozenset({INF}),
        frozenset({INF, AffinePoint(0, 0)}),
        frozenset({INF, AffinePoint(2, 0)}),
        frozenset({INF, AffinePoint(3, 0)}),
    }


def test_catalog_17_2_2() -> None:
    # prime order group: every non-INF point generates the whole group
    ec = CurveGroup(17, 2, 2)
    catalog = SubgroupCatalog.build(ec)
    assert catalog.orders == (1, 19)
    assert catalog[1].generator == ec.points[1]
    assert catalog[1].point_set == set(ec.points)


def test_catalog_properties() -> None:
    for ec in curves:
        catalog = SubgroupCatalog.build(ec)
        assert catalog.group_order == ec.order

        orders = catalog.orders
        assert list(orders) == sorted(orders)
        assert orders[0] == 1

        point_sets = [subgroup.point_set for subgroup in catalog]
        assert len(set(point_sets)) == len(point_sets)

        # every group point generates a catalogued subgroup
        for G in ec.points:
            generated = Subgroup.from_generator(ec, G).point_set
            assert generated in point_sets

        for subgroup in catalog:
            # Lagrange
            assert ec.order % subgroup.order == 0
            assert subgroup.members[0] == INF
            assert len(subgroup.point_set) == subgroup.order
            # the largest cyclic subgroup order is a multiple of all others
            assert orders[-1] % subgroup.order == 0


def test_catalog_is_immutable() -> None:
    catalog = SubgroupCatalog.build(CurveGroup(5, 1, 1))
    assert isinstance(catalog.subgroups, tuple)
    with pytest.raises(AttributeError):
        catalog.group_order = 0  # type: ignore


def test_json() -> None:
    catalog = SubgroupCatalog.build(CurveGroup(5, 1, 1))

    dict_ = catalog.to_dict()
    assert dict_["group_order"] == 9
    assert dict_["subgroups"][0] == {"generator": "INF", "members": ["INF"]}
    assert dict_["subgroups"][1] == {
        "generator": [2, 1],
        "members": ["INF", [2, 1], [2, 4]],
    }

    json_str = catalog.to_json()
    assert json.loads(json_str)["p"] == 5
    assert SubgroupCatalog.from_json(json_str) == catalog
    assert SubgroupCatalog.from_dict(dict_) == catalog

    subgroup = catalog[2]
    assert Subgroup.from_json(subgroup.to_json()) == subgroup

    invalid = {"generator": [2], "members": ["INF"]}
    with pytest.raises(ECExplorerValueError, match="invalid serialized point: "):
        Subgroup.from_dict(invalid)

    for coords in ([2.9, 1], ["2", 1], [True, 4], [2, 4.5]):
        invalid = {"generator": coords, "members": ["INF"]}
        with pytest.raises(ECExplorerTypeError, match="not an int coordinate: "):
            Subgroup.from_dict(invalid)
