#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecexplorer.session` module."

import pytest

from ecexplorer.curve_group import CurveGroup
from ecexplorer.exceptions import ECExplorerValueError
from ecexplorer.session import CurveSession


def test_update() -> None:
    with CurveSession() as session:
        old = session.curve
        assert old == CurveGroup(17, 2, 2)

        new = session.update(5, 1, 1)
        assert session.curve is new
        assert new == CurveGroup(5, 1, 1)
        # the old curve is discarded, not mutated
        assert (old.p, old.a, old.b, old.order) == (17, 2, 2, 19)

        with pytest.raises(ECExplorerValueError, match="p is not an odd prime: "):
            session.update(15, 1, 1)
        assert session.curve is new


def test_submit() -> None:
    with CurveSession(5, 1, 1) as session:
        future = session.submit(23, 5, 1)
        ec = future.result()
        assert ec == CurveGroup(23, 5, 1)
        assert session.curve is ec

        future = session.submit(11, 7, 7)
        with pytest.raises(ECExplorerValueError, match="zero discriminant"):
            future.result()
        assert session.curve is ec


def test_latest_wins() -> None:
    with CurveSession(5, 1, 1, max_workers=2) as session:
        slow = session.submit(1009, 7, 11)
        fast = session.submit(13, 7, 6)
        assert fast.result() == CurveGroup(13, 7, 6)
        # the older request completes, but it is not applied
        assert slow.result().p == 1009
        assert session.curve == CurveGroup(13, 7, 6)

    with CurveSession(5, 1, 1) as session:
        superseded = session.submit(1009, 7, 11)
        latest = session.update(17, 2, 2)
        assert superseded.result().p == 1009
        assert session.curve is latest


def test_workers_lifecycle() -> None:
    session = CurveSession(5, 1, 1)
    # synchronous updates need no background workers
    session.update(17, 2, 2)
    assert session._executor is None
    session.close()

    future = session.submit(13, 7, 6)
    assert session._executor is not None
    assert future.result() == CurveGroup(13, 7, 6)
    session.close()
    assert session._executor is None
    # closing twice is harmless
    session.close()
