"""
Record identifier and invoice number generation.

Identifiers are derived from the millisecond clock but never repeat
within a generator: a value that would not be larger than the last one
issued is bumped past it.
"""

import itertools
import threading
from collections.abc import Collection

from src.core.clock import Clock, utc_now
from src.core.exceptions import InvoicingError
from src.core.interfaces.identity import IIdGenerator

INVOICE_SUFFIX_SPACE = 10_000


def _epoch_millis(clock: Clock) -> int:
    return int(clock().timestamp() * 1000)


class TimestampIdGenerator(IIdGenerator):
    """Strictly increasing millisecond-based identifiers."""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            value = max(_epoch_millis(self._clock), self._last + 1)
            self._last = value
            return str(value)


class SequentialIdGenerator(IIdGenerator):
    """Deterministic identifiers (``prefix1``, ``prefix2``, ...)."""

    def __init__(self, prefix: str = "", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return f"{self._prefix}{next(self._counter)}"


class InvoiceNumberGenerator:
    """
    Human-readable invoice numbers: ``INV-{yyyy}{mm}-{nnnn}``.

    ``nnnn`` is the last four digits of the current millisecond
    timestamp. If that number is already taken, the suffix is advanced
    until a free one is found.
    """

    def __init__(self, prefix: str = "INV", clock: Clock = utc_now) -> None:
        self._prefix = prefix
        self._clock = clock

    def generate(self, taken: Collection[str] = ()) -> str:
        now = self._clock()
        head = f"{self._prefix}-{now.year}{now.month:02d}-"
        suffix = int(now.timestamp() * 1000) % INVOICE_SUFFIX_SPACE
        taken_numbers = set(taken)

        for step in range(INVOICE_SUFFIX_SPACE):
            candidate = f"{head}{(suffix + step) % INVOICE_SUFFIX_SPACE:04d}"
            if candidate not in taken_numbers:
                return candidate

        raise InvoicingError(
            f"No free invoice number left for {head}*",
            code="INVOICE_NUMBERS_EXHAUSTED",
            details={"prefix": head},
        )
