"""
Entry identifier generation.

Ids are tied to the wall-clock millisecond they were issued in. Entries created
in the same millisecond (e.g. a batch of suggested skills) get a random suffix
so that none of them collide.
"""

import secrets
import time
from typing import Callable, Set


class IdentifierGenerator:
    """
    Issues ids that are unique for the lifetime of the generator.

    The millisecond clock is made monotonic so a clock step backwards cannot
    reissue an id from an earlier millisecond.

    Attributes:
        clock: Callable returning the current time in milliseconds
    """

    def __init__(self, clock: Callable[[], int] = None):
        self.clock = clock or (lambda: time.time_ns() // 1_000_000)
        self._last_ms = -1
        self._issued_this_ms: Set[str] = set()

    def __call__(self) -> str:
        return self.new_id()

    def new_id(self) -> str:
        """
        Generate a fresh id.

        Returns:
            The millisecond timestamp as a string, with a hex suffix when another
            id was already issued in the same millisecond
        """
        current_ms = max(self.clock(), self._last_ms)

        if current_ms != self._last_ms:
            self._last_ms = current_ms
            self._issued_this_ms = set()

        candidate = str(current_ms)
        while candidate in self._issued_this_ms:
            candidate = f"{current_ms}-{secrets.token_hex(4)}"

        self._issued_this_ms.add(candidate)
        return candidate


_default_generator = IdentifierGenerator()


def new_id() -> str:
    """Generate a session-unique entry id from the module-level generator."""
    return _default_generator.new_id()
