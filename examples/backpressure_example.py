"""
Backpressure example: fast producer, slow consumer.

1000 items are chunked into batches of 10; only the first 3 batches are
published, with a pause between them.
"""

from __future__ import annotations

from flowcore import BatchPublisher, Dispatcher, Event


def main() -> None:
    data = list(range(1, 1001))
    dispatcher = Dispatcher()

    def slow_consumer(event: Event) -> None:
        print(f"  Processing batch: {event.payload}")

    dispatcher.on("data.batch", slow_consumer)
    publisher = BatchPublisher(dispatcher, "data.batch", batch_size=10, delay=0.1, max_batches=3)

    print("--- Backpressure ---")
    print(f"  Total batches: {publisher.total_batches(data)}")
    print(f"  First batch: {data[:publisher.batch_size]}")
    sent = publisher.publish(data)
    print(f"  Published {sent} batch(es)")


if __name__ == "__main__":
    main()
