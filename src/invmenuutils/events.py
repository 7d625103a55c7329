"""Interaction records passed to inventory menu listeners."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SlotChangeAction:
    """A change to a single slot of an inventory, caused by a player click.

    Listeners receive this as their fourth argument alongside the player and
    the two items involved. The combinators only read ``slot``; the other
    fields are carried for listeners that need them.

    Attributes:
        inventory: The host inventory the slot belongs to.
        slot: Index of the slot being changed.
        source_item: Item in the slot before the change.
        target_item: Item in the slot after the change.
    """

    inventory: Any
    slot: int
    source_item: Any = None
    target_item: Any = None

    def get_slot(self) -> int:
        """Get the index of the slot being changed."""
        return self.slot
