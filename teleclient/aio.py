"""Coroutine flavour of :class:`~teleclient.client.TelegramClient`.

Blocking ``requests`` calls are offloaded with :func:`asyncio.to_thread`, so
the event loop stays free while a request (including a long poll) is in
flight.
"""

from __future__ import annotations

import asyncio
import functools
from typing import Any, Awaitable, Callable, Optional

from teleclient.client import TelegramClient


class AsyncTelegramClient:
    """Expose every public :class:`TelegramClient` operation as a coroutine.

    Arguments, results and exceptions are exactly those of the wrapped
    client::

        client = AsyncTelegramClient.from_env()
        updates = await client.get_updates(timeout=30)
    """

    def __init__(self, client: Optional[TelegramClient] = None, **kwargs: Any) -> None:
        """Wrap *client*, or build a :class:`TelegramClient` from *kwargs*."""
        self._client = client if client is not None else TelegramClient(**kwargs)

    @classmethod
    def from_env(cls) -> "AsyncTelegramClient":
        return cls(TelegramClient.from_env())

    @property
    def sync(self) -> TelegramClient:
        """The underlying blocking client."""
        return self._client

    def file_url(self, file_path: str) -> str:
        return self._client.file_url(file_path)

    def __getattr__(self, name: str) -> Callable[..., Awaitable[Any]]:
        if name.startswith("_"):
            raise AttributeError(name)
        target = getattr(self._client, name)
        if not callable(target):
            raise AttributeError(f"{type(self).__name__} does not proxy non-callable attribute {name!r}")

        @functools.wraps(target)
        async def call(*args: Any, **kwargs: Any) -> Any:
            return await asyncio.to_thread(target, *args, **kwargs)

        return call
