import threading

import pytest

from simplechan.channel import bounded
from simplechan.errors import RecvError, SendError, TryRecvError, TryRecvKind


def _join(thread):
    thread.join(timeout=10)
    assert not thread.is_alive()


def test_sends_and_receives_value():
    tx, rx = bounded(4)

    def worker():
        with tx:
            tx.send("hello")

    t = threading.Thread(target=worker)
    t.start()
    assert rx.recv() == "hello"
    _join(t)


def test_throughput_batch_in_order():
    batch = 1000
    tx, rx = bounded(64)

    def worker():
        with tx:
            for i in range(batch):
                tx.send(i)

    t = threading.Thread(target=worker)
    t.start()
    received = [rx.recv() for _ in range(batch)]
    _join(t)
    assert received == list(range(batch))


def test_ping_pong_latency_roundtrip():
    ping_tx, ping_rx = bounded(1)
    pong_tx, pong_rx = bounded(1)

    def echo():
        pong_tx.send(ping_rx.recv())

    t = threading.Thread(target=echo)
    t.start()
    ping_tx.send(0)
    assert pong_rx.recv() == 0
    _join(t)


def test_rejects_bad_capacity():
    with pytest.raises(ValueError):
        bounded(3)


def test_try_recv_empty_then_value():
    tx, rx = bounded(2)
    with pytest.raises(TryRecvError) as info:
        rx.try_recv()
    assert info.value.kind is TryRecvKind.EMPTY
    tx.send(7)
    assert rx.try_recv() == 7


def test_try_recv_disconnected():
    tx, rx = bounded(2)
    tx.close()
    with pytest.raises(TryRecvError) as info:
        rx.try_recv()
    assert info.value.kind is TryRecvKind.DISCONNECTED


def test_buffered_values_survive_sender_close():
    tx, rx = bounded(4)
    tx.send(1)
    tx.send(2)
    tx.close()
    assert rx.recv() == 1
    assert rx.recv() == 2
    with pytest.raises(RecvError):
        rx.recv()


def test_send_after_receiver_closed():
    tx, rx = bounded(4)
    rx.close()
    with pytest.raises(SendError) as info:
        tx.send("lost")
    assert info.value.value == "lost"


def test_blocked_sender_released_by_receiver_close():
    tx, rx = bounded(1)
    tx.send(1)
    errors = []

    def worker():
        try:
            tx.send(2)
        except SendError as exc:
            errors.append(exc)

    t = threading.Thread(target=worker)
    t.start()
    rx.close()
    _join(t)
    assert len(errors) == 1
    assert errors[0].value == 2
    assert str(errors[0]) == "sending on a disconnected channel"
    with pytest.raises(SendError) as info:
        tx.send(3)
    assert info.value.value == 3


def test_clone_keeps_channel_connected():
    tx, rx = bounded(4)
    tx2 = tx.clone()
    tx.close()
    with pytest.raises(TryRecvError) as info:
        rx.try_recv()
    assert info.value.kind is TryRecvKind.EMPTY
    tx2.send("still here")
    tx2.close()
    assert list(rx) == ["still here"]


def test_close_is_idempotent():
    tx, rx = bounded(2)
    tx2 = tx.clone()
    tx.close()
    tx.close()
    tx2.send(3)
    assert rx.recv() == 3


def test_closed_sender_cannot_send_or_clone():
    tx, _rx = bounded(2)
    tx.close()
    with pytest.raises(ValueError):
        tx.send(1)
    with pytest.raises(ValueError):
        tx.clone()


def test_closed_receiver_cannot_recv():
    _tx, rx = bounded(2)
    rx.close()
    with pytest.raises(ValueError):
        rx.recv()


def test_send_blocks_until_space():
    tx, rx = bounded(1)
    tx.send("first")
    done = threading.Event()

    def worker():
        tx.send("second")
        done.set()

    t = threading.Thread(target=worker)
    t.start()
    assert not done.wait(0.1)
    assert rx.recv() == "first"
    _join(t)
    assert done.is_set()
    assert rx.recv() == "second"


def test_many_producers_iteration():
    producers = 4
    per_producer = 100
    tx, rx = bounded(8)
    threads = []
    for p in range(producers):
        clone = tx.clone()

        def worker(sender=clone, start=p * per_producer):
            with sender:
                for n in range(start, start + per_producer):
                    sender.send(n)

        threads.append(threading.Thread(target=worker))
    tx.close()
    for t in threads:
        t.start()
    with rx:
        received = list(rx)
    for t in threads:
        _join(t)
    assert sorted(received) == list(range(producers * per_producer))