"""
Async composition example: combine and chain futures, and collect
parse results without raising.
"""

from __future__ import annotations

import time

from flowcore import DispatchError, safe_parse_int, successes
from flowcore.futures import (
    shutdown_default_executor,
    supply_async,
    then_apply,
    then_combine,
    wait_result,
)


def _delayed(value: str, seconds: float) -> str:
    time.sleep(seconds)
    return value


def main() -> None:
    print("--- Asynchronous processing ---")
    hello = supply_async(_delayed, "Hello", 1.0)
    world = supply_async(_delayed, "World", 1.5)
    bang = supply_async(_delayed, "!", 0.5)
    combined = then_combine(then_combine(hello, world, lambda a, b: f"{a} {b}"), bang, lambda s, e: s + e)
    try:
        print(f"  Combined result: {wait_result(combined, timeout=3.0)}")
    except DispatchError as exc:
        print(f"  Error: {exc}")

    chained = supply_async(lambda: "async")
    chained = then_apply(chained, str.upper)
    chained = then_apply(chained, lambda s: f"Result: {s}")
    chained = then_apply(chained, lambda s: f"{s} processed")
    print(f"  Chained result: {wait_result(chained, timeout=3.0)}")

    print("\n--- Error handling ---")
    results = [safe_parse_int(s) for s in ["123", "abc", "456", "def", "789"]]
    for r in results:
        print(f"    Success: {r.value}" if r.is_success else f"    Error: {r.error}")
    valid = successes(results)
    print(f"  Valid numbers: {valid}")
    print(f"  Sum of valid numbers: {sum(valid)}")

    shutdown_default_executor()


if __name__ == "__main__":
    main()
