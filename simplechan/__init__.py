"""Bounded multi-producer, single-consumer channels for threads.

Modules: channel (bounded, Sender, Receiver), errors, ring_buffer, demo.
"""

__version__ = "0.1.2"