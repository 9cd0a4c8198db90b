"""
Batching for a fast producer and a slow consumer.

Items are chunked into fixed-size batches and published one event per batch,
optionally paced with a delay and capped at a number of batches.
"""

from __future__ import annotations

import itertools
import logging
import math
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TypeVar

from flowcore.dispatcher import Dispatcher
from flowcore.events import validate_event_type

logger = logging.getLogger(__name__)

T = TypeVar("T")


def batched(items: Iterable[T], batch_size: int) -> Iterator[list[T]]:
    """Yield consecutive lists of batch_size items; the last may be shorter."""
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")
    batch: list[T] = []
    for item in items:
        batch.append(item)
        if len(batch) == batch_size:
            yield batch
            batch = []
    if batch:
        yield batch


class BatchPublisher:
    """
    Publish items to a dispatcher in batches.

    Each batch is emitted as one event whose payload is the batch list.
    Handlers run synchronously, so a slow handler slows the producer down.
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        event_type: str,
        *,
        batch_size: int = 10,
        delay: float = 0.0,
        max_batches: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        if max_batches is not None and max_batches < 0:
            raise ValueError(f"max_batches must be >= 0, got {max_batches}")
        self.dispatcher = dispatcher
        self.event_type = validate_event_type(event_type)
        self.batch_size = batch_size
        self.delay = delay
        self.max_batches = max_batches
        self._sleep = sleep

    def total_batches(self, items: Sequence[object]) -> int:
        """Batches items would produce, ignoring max_batches."""
        return math.ceil(len(items) / self.batch_size)

    def publish(self, items: Iterable[T]) -> int:
        """Emit items batch by batch. Returns the number of batches emitted."""
        emitted = 0
        batches: Iterator[list[T]] = batched(items, self.batch_size)
        if self.max_batches is not None:
            # islice stops before pulling past the cap
            batches = itertools.islice(batches, self.max_batches)
        for batch in batches:
            if emitted and self.delay:
                self._sleep(self.delay)
            self.dispatcher.emit(self.event_type, batch)
            emitted += 1
        if self.max_batches is not None and emitted == self.max_batches:
            logger.info("Stopped %s at max_batches=%d", self.event_type, self.max_batches)
        logger.info("Published %d batch(es) of up to %d to %s", emitted, self.batch_size, self.event_type)
        return emitted
