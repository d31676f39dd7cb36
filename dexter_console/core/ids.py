"""Id generation for messages and agent cards.

Stores never build ids themselves; they receive an ``IdGenerator`` so tests
can swap in a deterministic one.
"""

import itertools
import uuid
from typing import Protocol, runtime_checkable

from dexter_console.utils.config import IdStrategy


@runtime_checkable
class IdGenerator(Protocol):
    """Source of fresh, unique entity ids."""

    def new_id(self) -> str:
        """Return an id never returned before by this generator."""
        ...


class UuidIdGenerator:
    """Short random ids of the form ``<prefix>-<hex>``.

    Issued ids are remembered so a truncated-uuid collision is re-rolled
    instead of handed out twice.
    """

    def __init__(self, prefix: str = "id", length: int = 8) -> None:
        if not 1 <= length <= 32:
            raise ValueError("length must be between 1 and 32")
        self.prefix = prefix
        self.length = length
        self._issued: set[str] = set()

    def new_id(self) -> str:
        while True:
            candidate = f"{self.prefix}-{uuid.uuid4().hex[: self.length]}"
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate


class CounterIdGenerator:
    """Monotonic ids of the form ``<prefix>-<n>``."""

    def __init__(self, prefix: str = "id", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


def create_id_generator(strategy: IdStrategy, prefix: str = "id") -> IdGenerator:
    """Build the generator selected in configuration."""
    if strategy == IdStrategy.COUNTER:
        return CounterIdGenerator(prefix)
    return UuidIdGenerator(prefix)
