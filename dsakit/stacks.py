"""Stacks and queues: a min-tracking stack, adapters between the two, a stock spanner."""

from __future__ import annotations

from collections import deque


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val``."""
        current_min = val if not self._items else min(val, self._items[-1][1])
        self._items.append((val, current_min))

    def pop(self) -> None:
        """Drop the top element; does nothing on an empty stack."""
        if self._items:
            self._items.pop()

    def top(self) -> int:
        """Return the top element. Raises IndexError if empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest element. Raises IndexError if empty."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]


class QueueStack:
    """A LIFO stack kept in a single FIFO queue."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def push(self, x: int) -> None:
        """Push ``x``, rotating the queue so it sits at the front."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> int:
        """Remove and return the top element. Raises IndexError if empty."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top element. Raises IndexError if empty."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._queue


class StackQueue:
    """A FIFO queue kept in two LIFO stacks."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, x: int) -> None:
        """Add ``x`` at the back."""
        self._inbox.append(x)

    def pop(self) -> int:
        """Remove and return the front element. Raises IndexError if empty."""
        self._refill()
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the front element. Raises IndexError if empty."""
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return not self._inbox and not self._outbox


class StockSpanner:
    """Report, for each day's price, how many consecutive days up to it were no higher."""

    def __init__(self) -> None:
        self._day = -1
        self._stack: list[tuple[int, int]] = []

    def next(self, price: int) -> int:
        """Record today's ``price`` and return its span."""
        self._day += 1
        while self._stack and self._stack[-1][0] <= price:
            self._stack.pop()
        span = self._day + 1 if not self._stack else self._day - self._stack[-1][1]
        self._stack.append((price, self._day))
        return span