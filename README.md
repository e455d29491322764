# simplechan

A small bounded channel for passing values between threads. It has any
number of senders and exactly one receiver.

Values travel through a fixed-size ring buffer. When the buffer is full, a
sender waits until the receiver makes room. The receiver waits until a value
arrives. Once every sender is closed and the buffer is drained, receiving
reports that the channel is disconnected.

## Installing

```
pip install simplechan
```

To install the test dependencies and run the tests:

```
pip install "simplechan[test]"
pytest
```

## Creating a channel

```python
from simplechan.channel import bounded

tx, rx = bounded(64)
```

`bounded(capacity)` returns a `Sender` and a `Receiver` that share one
buffer. The capacity must be a power of two (1, 2, 4, 8, ...). Any other
value raises `ValueError`.

## Sending from several threads

Each producer needs its own sender, made with `Sender.clone()`. Closing a
sender, or leaving its `with` block, tells the channel that this producer is
done.

```python
import threading
from simplechan.channel import bounded

tx, rx = bounded(64)

def produce(sender, start):
    with sender:
        for number in range(start, start + 100):
            sender.send(number)

threads = [
    threading.Thread(target=produce, args=(tx.clone(), i * 100))
    for i in range(4)
]
for thread in threads:
    thread.start()

tx.close()  # the original sender is not needed any more

received = list(rx)  # stops once all senders are closed and the buffer is empty

for thread in threads:
    thread.join()

assert sorted(received) == list(range(400))
```

Make the clones before you close the original sender. A sender that is
already closed raises `ValueError` from `clone()` and `send()`. Iterating
over a `Receiver` yields values until the channel is disconnected.

## Receiving

- `Receiver.recv()` waits for the next value. It raises `RecvError` when the
  buffer is empty and every sender is closed.
- `Receiver.try_recv()` returns a value if one is ready and never waits.
  If no value is ready it raises `TryRecvError`. The error's `kind` is a
  `TryRecvKind`: `EMPTY` means the channel has no value for now, and
  `DISCONNECTED` means it is empty and every sender is closed.
- `Receiver.close()`, or leaving a `with rx:` block, drops the receiving
  side. After that, `recv()` and `try_recv()` on it raise `ValueError`.

## Sending

`Sender.send(value)` puts a value in the buffer and waits while the buffer is
full. If the receiver is closed, it raises `SendError`. The exception keeps
the value that was not delivered in its `value` attribute.

```python
from simplechan.channel import bounded
from simplechan.errors import SendError

tx, rx = bounded(4)
rx.close()
try:
    tx.send("hello")
except SendError as err:
    print("undelivered:", err.value)
```

`SendError`, `RecvError` and `TryRecvError` all derive from `ChannelError`
in `simplechan.errors`.

## The ring buffer

`simplechan.ring_buffer.RingBuffer(capacity)` is the fixed-capacity FIFO
store behind a channel. You can also use it on its own, and it is safe to
share between threads.

- `push(value)` stores the value and returns `True`. If the buffer is full it
  returns `False` and stores nothing.
- `pop()` removes and returns the oldest value. It raises `IndexError` when
  the buffer is empty.
- `len(buffer)` gives the number of values held.
- `capacity()` gives the number of slots.

## Demo

The demo starts several producer threads, collects every number they send on
one receiver, checks the count and prints a summary:

```
simplechan-demo
simplechan-demo --producers 8 --messages 50 --capacity 16
```

The options default to 4 producers, 100 messages each and a capacity of 64.
The same run is available from Python as
`simplechan.demo.run_producers(num_producers, messages_per_producer, capacity)`.
It returns the list of received numbers.

## Limits

- Channels are bounded only. There is no unbounded variant.
- A channel has a single `Receiver`, and it cannot be cloned.
- Blocking calls have no timeout. For a call that never waits, use
  `try_recv()`.
- Channels work between threads of one process, not between processes.