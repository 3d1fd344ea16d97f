"""Cooperative cancellation for searches and resolutions."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import Any, TypeVar

T = TypeVar("T")


class OperationCancelledError(Exception):
    """The caller's cancellation token fired before the operation finished."""


class CancellationToken:
    """A one-shot cancellation signal handed in by the caller."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        await self._event.wait()


async def run_cancellable(awaitable: Awaitable[T], token: CancellationToken | None) -> T:
    """Await ``awaitable`` unless ``token`` fires first.

    Raises :class:`OperationCancelledError` if the token is already cancelled
    or fires while waiting; the pending operation is cancelled in that case.
    """
    if token is None:
        return await awaitable
    if token.is_cancellation_requested:
        _discard(awaitable)
        raise OperationCancelledError

    task: asyncio.Future[T] = asyncio.ensure_future(awaitable)
    waiter = asyncio.ensure_future(token.wait())
    try:
        await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        task.cancel()
        raise
    finally:
        waiter.cancel()
    if not task.done():
        task.cancel()
        raise OperationCancelledError
    return task.result()


def _discard(awaitable: Awaitable[Any]) -> None:
    close = getattr(awaitable, "close", None)
    if close is not None:
        close()
