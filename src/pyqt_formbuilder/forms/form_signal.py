"""
Request/response signals scoped to one render pass.

A FormSignal has one sender and any number of subscribers. send() calls every
subscriber with the request and awaits all of their responses together
(fan-out/fan-in); notify() is the synchronous variant for subscribers that
return plain values. There is no timeout: a subscriber that never completes
stalls send().

Each render pass owns two instances, validation (None -> bool) and update
(None -> None), and closes them when the pass is disposed.
"""

import asyncio
import inspect
import logging
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]


class Subscription:
    """Disposable handle returned by FormSignal.subscribe()."""

    def __init__(self, signal: "FormSignal", handler: Handler):
        self._signal: Optional[FormSignal] = signal
        self.handler = handler

    @property
    def active(self) -> bool:
        return self._signal is not None

    def dispose(self) -> None:
        """Unsubscribe; safe to call more than once."""
        if self._signal is None:
            return
        self._signal._unsubscribe(self)
        self._signal = None


class FormSignal:
    """One-to-many request/response channel."""

    def __init__(self, name: str = "signal"):
        self.name = name
        self._subscriptions: List[Subscription] = []
        self._closed = False

    def __len__(self) -> int:
        return len(self._subscriptions)

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, handler: Handler) -> Subscription:
        if self._closed:
            raise RuntimeError(f"Cannot subscribe to closed signal '{self.name}'")
        subscription = Subscription(self, handler)
        self._subscriptions.append(subscription)
        return subscription

    def _unsubscribe(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    async def send(self, request: Any = None) -> List[Any]:
        """
        Call every subscriber and await all responses.

        Returns:
            Responses in subscription order
        """
        handlers = [subscription.handler for subscription in self._subscriptions]
        logger.debug(f"Signal '{self.name}' sending to {len(handlers)} subscribers")
        results = [handler(request) for handler in handlers]
        pending = [(i, result) for i, result in enumerate(results) if inspect.isawaitable(result)]
        if pending:
            resolved = await asyncio.gather(*(result for _, result in pending))
            for (i, _), value in zip(pending, resolved):
                results[i] = value
        return results

    def notify(self, request: Any = None) -> List[Any]:
        """Synchronous fire; subscribers must not return awaitables."""
        results = []
        for subscription in list(self._subscriptions):
            result = subscription.handler(request)
            if inspect.isawaitable(result):
                raise TypeError(f"Signal '{self.name}' subscriber returned an awaitable from notify()")
            results.append(result)
        return results

    def close(self) -> None:
        """Drop every subscriber; later subscribe() calls fail."""
        for subscription in list(self._subscriptions):
            subscription.dispose()
        self._closed = True
