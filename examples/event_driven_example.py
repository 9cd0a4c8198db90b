"""
Event-driven example: notifications and a chained order pipeline.

Shows: Dispatcher.on/emit, registration-order dispatch, re-entrant emits
(order.created -> inventory.check -> payment.process).
"""

from __future__ import annotations

from flowcore import Dispatcher, Event
from flowcore.examples.order_pipeline import OrderPipeline


def main() -> None:
    dispatcher = Dispatcher()

    print("--- Notifications ---")
    dispatcher.on("user.login", lambda ev: print(f"  User logged in: {ev.payload}"))
    dispatcher.on("user.logout", lambda ev: print(f"  User logged out: {ev.payload}"))
    dispatcher.on("data.updated", lambda ev: print(f"  Data updated: {ev.payload}"))

    dispatcher.emit("user.login", "Alice")
    dispatcher.emit("user.logout", "Bob")
    dispatcher.emit("data.updated", "User profile")
    dispatcher.emit("user.deleted", "Carol")  # no handlers: nothing happens

    print("\n--- Chained events ---")
    pipeline = OrderPipeline(dispatcher, echo=True)

    def audit(event: Event) -> None:
        print(f"  [Audit] {event.type} -> {event.payload}")

    dispatcher.on("payment.process", audit)
    pipeline.place("Laptop")

    print("\n--- Registry ---")
    for event_type in dispatcher.event_types():
        print(f"  {event_type}: {dispatcher.handler_count(event_type)} handler(s)")


if __name__ == "__main__":
    main()
