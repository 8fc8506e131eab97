from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for container state.

    Containers default to ``NONE``: concurrent ``construct`` calls for the same
    unresolved key may build it more than once, with the last write winning.
    Use ``THREAD`` when a container is shared between threads.
    """

    THREAD = "thread"
    """Guard construction and registration with a re-entrant ``threading.RLock``."""

    NONE = "none"
    """Disable locking around cache reads/writes."""
