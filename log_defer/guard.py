"""Reference-counted release actions.

A :class:`Guard` runs its release action exactly once, when the last
:class:`Lease` taken on it is released. Each lease can be released at most
once, so a holder that releases twice cannot steal another holder's reference.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Coroutine
from typing import Any, Callable, Optional

from .errors import UsageAfterFlushError

LOGGER = logging.getLogger(__name__)


class Guard:
    """Counts outstanding leases and fires ``on_release`` when none remain."""

    def __init__(self, on_release: Callable[[], None], name: str = "guard") -> None:
        self._on_release = on_release
        self._holders = 0
        self._fired = False
        self.name = name

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def holders(self) -> int:
        return self._holders

    def lease(self) -> "Lease":
        """Take a new owning reference."""

        if self._fired:
            raise UsageAfterFlushError(f"{self.name} already released")
        self._holders += 1
        return Lease(self)

    def _drop(self) -> None:
        self._holders -= 1
        if self._holders > 0:
            return
        self._fired = True
        LOGGER.debug("Last lease on %s released", self.name)
        self._on_release()


class Lease:
    """One owning reference on a :class:`Guard`."""

    def __init__(self, guard: Guard) -> None:
        self._guard: Optional[Guard] = guard

    @property
    def released(self) -> bool:
        return self._guard is None

    def release(self) -> None:
        """Drop this reference. Releasing an already released lease is a no-op."""

        guard, self._guard = self._guard, None
        if guard is not None:
            guard._drop()

    def __enter__(self) -> "Lease":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


def _abandon(coro: Coroutine, lease: Lease) -> None:
    try:
        coro.close()
    finally:
        lease.release()


class LeasedCoroutine(Coroutine):
    """Coroutine that releases ``lease`` however ``coro`` ends.

    The lease goes when the coroutine returns, raises, is cancelled (even
    before its first step), is closed, or is garbage collected unawaited.
    """

    def __init__(self, coro: Coroutine, lease: Lease) -> None:
        self._coro = coro
        self._lease = lease
        self._finalizer = weakref.finalize(self, _abandon, coro, lease)
        self._finalizer.atexit = False

    def send(self, value: Any) -> Any:
        try:
            return self._coro.send(value)
        except BaseException:
            self._lease.release()
            raise

    def throw(self, typ, val=None, tb=None) -> Any:
        try:
            if val is None and tb is None:
                return self._coro.throw(typ)
            return self._coro.throw(typ, val, tb)
        except BaseException:
            self._lease.release()
            raise

    def close(self) -> None:
        self._finalizer()

    def __await__(self) -> "LeasedCoroutine":
        return self

    def __iter__(self) -> "LeasedCoroutine":
        return self

    def __next__(self) -> Any:
        return self.send(None)
