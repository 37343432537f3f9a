"""Manages WebSocket subscriber queues and thread-safe status broadcasting."""

import asyncio
from collections.abc import Iterator
from contextlib import contextmanager

__all__ = ["broadcast_message", "subscribe"]

_QUEUE_MAX_SIZE = 10

_subscriber_queues: list[asyncio.Queue[str]] = []


@contextmanager
def subscribe(maxsize: int = _QUEUE_MAX_SIZE) -> Iterator[asyncio.Queue[str]]:
    """Register a bounded queue for the duration of a client connection."""
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=maxsize)
    _subscriber_queues.append(queue)
    try:
        yield queue
    finally:
        _subscriber_queues.remove(queue)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    # Drop the oldest message so a slow client never stalls the reader thread
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


def broadcast_message(message: str, loop: asyncio.AbstractEventLoop) -> None:
    """Hand a message to every subscriber queue from any thread."""
    for queue in list(_subscriber_queues):
        loop.call_soon_threadsafe(_enqueue_message, queue, message)
