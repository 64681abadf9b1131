"""Testing Harness: helpers for driving a live server from tests.

Invariants:
    - Nothing in person_service outside testing/ imports from here
    - Every helper is safe to use from any thread
"""

from person_service.testing.latch import InFlightLatch, LatchState
from person_service.testing.server import TestingHttpServer
from person_service.testing.slow_handler import SlowRequestHandler

__all__ = [
    "InFlightLatch",
    "LatchState",
    "SlowRequestHandler",
    "TestingHttpServer",
]
