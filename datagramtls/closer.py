"""A shutdown signal that can be chained to a parent signal."""

from __future__ import annotations

import threading
from typing import List, Optional


class Closer:
    """A one-shot shutdown signal.

    A closer created with a parent is closed whenever the parent is closed.
    """

    def __init__(self, parent: Optional["Closer"] = None) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._children: List["Closer"] = []
        if parent is not None:
            parent._adopt(self)

    def _adopt(self, child: "Closer") -> None:
        with self._lock:
            if not self._event.is_set():
                self._children.append(child)
                return
        child.close()

    @property
    def is_closed(self) -> bool:
        """Whether the signal has fired."""
        return self._event.is_set()

    def close(self) -> None:
        """Fire the signal; closing twice has no further effect."""
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            children, self._children = self._children, []
        for child in children:
            child.close()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until closed or until ``timeout`` seconds pass; return whether closed."""
        return self._event.wait(timeout)

    def __enter__(self) -> "Closer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()