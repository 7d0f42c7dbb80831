"""
frontier.py - Shared Work Queue with Termination Detection

Holds the FIFO queue of (url, depth) work items that all workers drain,
together with the in-flight counter that tells an empty-but-busy crawl
apart from a finished one:
- push/pop/mark_done/is_complete all run under one condition variable
- Workers that find the queue empty block until new work is pushed or the
  crawl is complete, instead of polling
- shutdown() lets the coordinator cancel a run

Key role: the crawl is complete exactly when the queue is empty AND no
popped item is still being processed.
"""

from collections import deque, namedtuple
from threading import Condition

from utils import get_logger
from utils.errors import FrontierError


WorkItem = namedtuple("WorkItem", ["url", "depth"])


class Frontier(object):
    """
    Thread-safe FIFO frontier.

    Every successful pop (pop() or get_tbd_item()) must be matched by exactly
    one mark_done(), including when processing the item fails.
    """

    def __init__(self):
        self.logger = get_logger("FRONTIER")

        # Thread synchronization
        self.cond = Condition()  # Protects queue, in_flight, shut_down

        self.queue = deque()
        self._in_flight = 0  # Popped but not yet marked done
        self.shut_down = False

    def push(self, item):
        """Append a work item. Never blocks."""
        with self.cond:
            self.queue.append(item)
            self.cond.notify()

    def pop(self):
        """
        Take the head item without waiting.

        Returns:
            WorkItem, or None if the queue is currently empty. None does not
            mean the crawl is complete; see is_complete().
        """
        with self.cond:
            return self._pop_locked()

    def _pop_locked(self):
        if not self.queue:
            return None
        self._in_flight += 1
        return self.queue.popleft()

    def mark_done(self):
        """
        Record that a popped item has been fully processed (children pushed).

        Raises:
            FrontierError: if there is no matching pop
        """
        with self.cond:
            if self._in_flight <= 0:
                raise FrontierError("mark_done() called with nothing in flight")
            self._in_flight -= 1
            if self._is_complete_locked():
                # Wake every waiter so the whole pool terminates together
                self.cond.notify_all()

    def is_complete(self):
        """True iff the queue is empty and nothing is in flight."""
        with self.cond:
            return self._is_complete_locked()

    def _is_complete_locked(self):
        return not self.queue and self._in_flight == 0

    def get_tbd_item(self):
        """
        Block until there is work to do or none will ever appear.

        Returns:
            WorkItem (counted as in flight), or None once the crawl is
            complete or the frontier has been shut down.

        An empty queue alone is not enough to stop: a sibling holding an
        in-flight item may still push children, so the caller waits on the
        condition until push() or the final mark_done() wakes it.
        """
        with self.cond:
            while True:
                if self.shut_down:
                    return None
                item = self._pop_locked()
                if item is not None:
                    return item
                if self._in_flight == 0:
                    return None
                self.cond.wait()

    def shutdown(self):
        """Stop handing out work. Items already in flight still finish."""
        with self.cond:
            if not self.shut_down:
                self.logger.info(
                    f"Shutting down with {len(self.queue)} queued and "
                    f"{self._in_flight} in-flight items.")
            self.shut_down = True
            self.cond.notify_all()

    @property
    def in_flight(self):
        with self.cond:
            return self._in_flight

    def __len__(self):
        with self.cond:
            return len(self.queue)
