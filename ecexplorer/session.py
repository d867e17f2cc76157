#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""The active curve of an interactive front end.

A parameter change never mutates the active CurveGroup:
a new one is built from scratch and swapped in.
When recomputations run on background workers,
only the result of the most recent request is applied (latest wins).
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from types import TracebackType
from typing import Optional, Type

from ecexplorer.curve_group import CurveGroup
from ecexplorer.utils import Integer

logger = logging.getLogger(__name__)


class CurveSession:
    """Holder of the active CurveGroup.

    Background workers are started by the first submit;
    close the session (or use it as a context manager) to release them.
    """

    def __init__(
        self, p: Integer = 17, a: Integer = 2, b: Integer = 2, max_workers: int = 1
    ) -> None:
        self._curve = CurveGroup(p, a, b)
        self._ticket = 0
        self._lock = threading.Lock()
        self._max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def curve(self) -> CurveGroup:
        with self._lock:
            return self._curve

    def _new_ticket(self) -> int:
        with self._lock:
            self._ticket += 1
            return self._ticket

    def _recompute(self, ticket: int, p: Integer, a: Integer, b: Integer) -> CurveGroup:
        # errors propagate, leaving the active curve untouched
        ec = CurveGroup(p, a, b)
        with self._lock:
            if ticket == self._ticket:
                self._curve = ec
            else:
                logger.debug("discarding superseded %r (request %d)", ec, ticket)
        return ec

    def update(self, p: Integer, a: Integer, b: Integer) -> CurveGroup:
        """Build the new curve synchronously and make it the active one.

        Still-running background requests are superseded.
        """
        return self._recompute(self._new_ticket(), p, a, b)

    def submit(self, p: Integer, a: Integer, b: Integer) -> "Future[CurveGroup]":
        """Build the new curve on a background worker.

        The new curve becomes the active one only if no other request
        has been made in the meantime.
        The returned future provides the new curve,
        or raises the error of the failed construction.
        """
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=self._max_workers)
            executor = self._executor
        ticket = self._new_ticket()
        logger.debug("submitting request %d: (%s, %s, %s)", ticket, p, a, b)
        return executor.submit(self._recompute, ticket, p, a, b)

    def close(self) -> None:
        "Wait for the background requests, then release the workers."
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)

    def __enter__(self) -> "CurveSession":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()
