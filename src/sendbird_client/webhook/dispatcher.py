"""Fire-and-forget delivery of bot callbacks to the application's handler.

The webhook endpoint answers Sendbird before the handler runs. A positive
``max_concurrency`` caps how many handlers run at once; further callbacks
wait for a free slot instead of piling up as running tasks. The bound is
kept per event loop, so one dispatcher can serve several apps.
"""

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any

from starlette.concurrency import run_in_threadpool

from sendbird_client.models.bot import BotCallback

logger = logging.getLogger(__name__)

MessageReceivedHandler = Callable[[BotCallback], Any]


class CallbackDispatcher:
    """Holds the registered handler and runs it for each decoded callback."""

    def __init__(
        self,
        handler: MessageReceivedHandler | None = None,
        max_concurrency: int = 0,
    ) -> None:
        self._handler = handler
        self.max_concurrency = max_concurrency
        self._slots: asyncio.Semaphore | None = None
        self._slots_loop: asyncio.AbstractEventLoop | None = None

    @property
    def handler(self) -> MessageReceivedHandler | None:
        return self._handler

    def register(self, handler: MessageReceivedHandler | None) -> None:
        """Replace the handler. ``None`` unregisters it."""
        self._handler = handler

    async def dispatch(self, callback: BotCallback) -> None:
        """Run the handler for one callback. Handler errors are logged, never raised."""
        handler = self._handler
        if handler is None:
            return

        slots = self._slots_for_running_loop()
        if slots is None:
            await self._run(handler, callback)
            return

        async with slots:
            await self._run(handler, callback)

    def _slots_for_running_loop(self) -> asyncio.Semaphore | None:
        """The bound for the current event loop, created on first use in that loop."""
        if self.max_concurrency <= 0:
            return None
        loop = asyncio.get_running_loop()
        if self._slots is None or self._slots_loop is not loop:
            self._slots = asyncio.Semaphore(self.max_concurrency)
            self._slots_loop = loop
        return self._slots

    async def _run(self, handler: MessageReceivedHandler, callback: BotCallback) -> None:
        try:
            if _is_async(handler):
                await handler(callback)
            else:
                await run_in_threadpool(handler, callback)
        except Exception:
            logger.error(
                "Bot message handler failed for bot %s in channel %s",
                callback.bot_userid,
                callback.channel_url,
                exc_info=True,
            )


def _is_async(handler: MessageReceivedHandler) -> bool:
    return inspect.iscoroutinefunction(handler) or inspect.iscoroutinefunction(
        getattr(handler, "__call__", None)
    )
