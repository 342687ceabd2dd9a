"""
Run identity and the epoch guard that drops data from superseded runs.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RunIdentity:
    """The parameters a measurement run was started with. Compared by value."""
    lap_count: int
    player_count: int


class RunEpoch:
    """
    Holds the active run.

    Producers tag every result with the identity that was active when they were
    asked for it; anything tagged with another identity is stale.
    """

    def __init__(self):
        self.active: Optional[RunIdentity] = None

    def set_active(self, identity: RunIdentity) -> None:
        self.active = identity

    def is_active(self, identity: RunIdentity) -> bool:
        return self.active is not None and identity == self.active
