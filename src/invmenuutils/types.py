"""Listener type aliases and the host interfaces they rely on."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from invmenuutils.events import SlotChangeAction
    from invmenuutils.tags import NamedTag


class TagContainer(Protocol):
    """Metadata container attached to an item."""

    def has_tag(self, name: str, expected_class: type[NamedTag] = ...) -> bool:
        """Check whether a tag named ``name`` of kind ``expected_class`` exists."""
        ...


class Item(Protocol):
    """Item involved in a slot interaction."""

    def get_named_tag(self) -> TagContainer:
        """Get the item's tag container."""
        ...


class InvMenu(Protocol):
    """Inventory menu a listener is registered on."""

    def is_readonly(self) -> bool:
        """Whether players are prevented from changing the menu's contents."""
        ...


# (player, item_clicked, item_clicked_with, action)
ReadonlyListener = Callable[[Any, "Item", "Item", "SlotChangeAction"], None]
ReadWriteListener = Callable[[Any, "Item", "Item", "SlotChangeAction"], bool]
Listener = ReadonlyListener | ReadWriteListener
