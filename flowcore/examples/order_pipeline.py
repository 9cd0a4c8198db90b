"""
Order pipeline example: chained events.

order.created triggers inventory.check, which triggers payment.process.
Each stage only knows the next event type, never the next handler.
"""

from __future__ import annotations

from flowcore.dispatcher import Dispatcher
from flowcore.events import Event

ORDER_CREATED = "order.created"
INVENTORY_CHECK = "inventory.check"
PAYMENT_PROCESS = "payment.process"


class OrderPipeline:
    """
    Wires the three order stages onto a dispatcher.

    Every stage appends a line to `log`; `echo` also prints it.
    """

    def __init__(self, dispatcher: Dispatcher, *, echo: bool = False) -> None:
        self.dispatcher = dispatcher
        self.echo = echo
        self.log: list[str] = []
        dispatcher.on(ORDER_CREATED, self._on_order_created)
        dispatcher.on(INVENTORY_CHECK, self._on_inventory_check)
        dispatcher.on(PAYMENT_PROCESS, self._on_payment_process)

    def _record(self, line: str) -> None:
        self.log.append(line)
        if self.echo:
            print(f"  {line}")

    def _on_order_created(self, event: Event) -> None:
        self._record(f"Order created: {event.payload}")
        self.dispatcher.emit(INVENTORY_CHECK, event.payload)

    def _on_inventory_check(self, event: Event) -> None:
        self._record(f"Checking inventory for: {event.payload}")
        self.dispatcher.emit(PAYMENT_PROCESS, event.payload)

    def _on_payment_process(self, event: Event) -> None:
        self._record(f"Processing payment for: {event.payload}")

    def place(self, item: object) -> None:
        """Start the chain for one item."""
        self.dispatcher.emit(ORDER_CREATED, item)
