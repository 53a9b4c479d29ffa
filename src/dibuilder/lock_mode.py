from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for singleton materialization.

    Builders default to ``NONE``: one builder serves one logical unit of work
    and no locks are taken. Choose ``THREAD`` when a single builder is shared
    between worker threads so that two threads never both observe a missing
    singleton and both materialize it.
    """

    THREAD = "thread"
    """Guard singleton creation with ``threading.RLock``."""

    NONE = "none"
    """Disable locking around singleton reads/writes."""
