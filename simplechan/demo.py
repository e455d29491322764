"""Example: several producer threads feeding one consumer."""

from __future__ import annotations

import argparse
import threading
from typing import Sequence

from .channel import Sender, bounded


def _produce(sender: Sender, start: int, stop: int) -> None:
    with sender:
        for number in range(start, stop):
            sender.send(number)


def run_producers(
    num_producers: int, messages_per_producer: int, capacity: int
) -> list[int]:
    """Send distinct ranges of numbers from several threads; return all received."""
    tx, rx = bounded(capacity)
    threads = []
    for index in range(num_producers):
        start = index * messages_per_producer
        thread = threading.Thread(
            target=_produce,
            args=(tx.clone(), start, start + messages_per_producer),
        )
        thread.start()
        threads.append(thread)
    # The receiver only stops once every sender, including this one, is closed.
    tx.close()
    with rx:
        received = list(rx)
    for thread in threads:
        thread.join()
    return received


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Send numbers from several threads through one channel."
    )
    parser.add_argument("--producers", type=int, default=4)
    parser.add_argument("--messages", type=int, default=100)
    parser.add_argument("--capacity", type=int, default=64)
    args = parser.parse_args(argv)

    print(
        f"Spawning {args.producers} producer threads, "
        f"each sending {args.messages} numbers."
    )
    print("Main thread is now receiving all numbers...")
    received = run_producers(args.producers, args.messages, args.capacity)
    print(f"Receiver loop finished. Total numbers received: {len(received)}")

    expected = args.producers * args.messages
    if len(received) != expected:
        raise RuntimeError(f"expected {expected} numbers, received {len(received)}")

    print(
        f"\nSuccessfully received all {expected} numbers "
        f"from {args.producers} threads."
    )
    received.sort()
    print(f"First 10 numbers (sorted): {received[:10]}")
    print(f"Last 10 numbers (sorted): {received[-10:]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())