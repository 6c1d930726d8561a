# topmark:header:start
#
#   project      : ChatMark
#   file         : applier.py
#   file_relpath : src/chatmark/pipeline/applier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String appliers: the backbone every rendering stage is built on.

A `StringApplier` owns exactly one string value and a sequence of operators.

* `SimpleApplier` folds each operator into the value as soon as it is
  applied; the ``priority`` argument is accepted and ignored.
* `PriorityApplier` queues ``(priority, insertion order, operator)`` entries
  and executes them only when `result()` is called, using a stable sort by
  tier. The folded value is cached: reading the result again does not
  re-execute anything, and operators applied afterwards only see the cached
  value.

If an operator raises, the exception propagates out of `result()` unchanged.
The queue and the cache are left as they were before the call, so no partial
string is ever exposed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chatmark.config.logging import get_logger
from chatmark.pipeline.priority import Priority

if TYPE_CHECKING:
    from chatmark.config.logging import ChatmarkLogger
    from chatmark.pipeline.contracts import TextOperator

logger: ChatmarkLogger = get_logger(__name__)


def _source_text(source: str | StringApplier) -> str:
    return source.result() if isinstance(source, StringApplier) else source


class StringApplier(ABC):
    """Abstract string pipeline.

    Use the factory helpers rather than the concrete classes:

        >>> StringApplier.simplified("a").apply(str.upper).result()
        'A'
    """

    @staticmethod
    def simplified(source: str | StringApplier) -> SimpleApplier:
        """Return an applier that runs operators immediately.

        Args:
            source (str | StringApplier): Initial value, or another applier whose
                current result is used as the initial value.

        Returns:
            SimpleApplier: The new applier.
        """
        return SimpleApplier(_source_text(source))

    @staticmethod
    def prioritized(source: str | StringApplier) -> PriorityApplier:
        """Return an applier that defers operators until the result is read.

        Args:
            source (str | StringApplier): Initial value, or another applier whose
                current result is used as the initial value.

        Returns:
            PriorityApplier: The new applier.
        """
        return PriorityApplier(_source_text(source))

    @abstractmethod
    def apply(
        self,
        operator: TextOperator,
        priority: Priority = Priority.NORMAL,
    ) -> StringApplier:
        """Add an operator and return ``self`` for chaining."""

    @abstractmethod
    def result(self) -> str:
        """Return the value after every applied operator has run."""

    def __str__(self) -> str:
        return self.result()


class SimpleApplier(StringApplier):
    """Applier that folds each operator into its value right away."""

    def __init__(self, value: str) -> None:
        self._value: str = value

    def apply(
        self,
        operator: TextOperator,
        priority: Priority = Priority.NORMAL,
    ) -> SimpleApplier:
        """Run ``operator`` on the current value; ``priority`` is ignored."""
        self._value = operator(self._value)
        logger.trace("simple applier -> %r", self._value)
        return self

    def result(self) -> str:
        """Return the current value."""
        return self._value


@dataclass(frozen=True)
class _Entry:
    priority: Priority
    order: int
    operator: TextOperator = field(compare=False)


class PriorityApplier(StringApplier):
    """Applier that queues operators and runs them in priority order."""

    def __init__(self, value: str) -> None:
        self._value: str = value
        self._pending: list[_Entry] = []
        self._counter: int = 0

    @property
    def pending(self) -> int:
        """Number of operators waiting to run."""
        return len(self._pending)

    def apply(
        self,
        operator: TextOperator,
        priority: Priority = Priority.NORMAL,
    ) -> PriorityApplier:
        """Queue ``operator`` at ``priority`` (default ``NORMAL``)."""
        self._pending.append(_Entry(Priority(priority), self._counter, operator))
        self._counter += 1
        return self

    def result(self) -> str:
        """Run all queued operators once and return the cached value."""
        if not self._pending:
            return self._value

        value: str = self._value
        for entry in sorted(self._pending, key=lambda e: (e.priority, e.order)):
            value = entry.operator(value)
            logger.trace("priority applier [%s] -> %r", entry.priority.name, value)

        self._value = value
        self._pending.clear()
        return value
