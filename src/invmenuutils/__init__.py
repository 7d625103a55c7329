"""invmenuutils - combinators for inventory menu click listeners.

This package provides:
- Sequential composition of listeners (multiple)
- Per-slot dispatch with a catch-all entry (slot_specific)
- Slot blacklists and whitelists
- Filters on the clicked item's tags
- A named tag model usable as an item's tag container

Quick start:
    from invmenuutils import blacklist_slots, multiple, only_items_with_tag

    menu.set_listener(
        multiple(
            menu,
            blacklist_slots([0, 8]),
            only_items_with_tag("tradeable"),
        )
    )
"""

__version__ = "1.0.0"

from invmenuutils.conf import settings
from invmenuutils.constants import CATCH_ALL_SLOT
from invmenuutils.events import SlotChangeAction
from invmenuutils.helpers import setup_logging
from invmenuutils.listeners import (
    blacklist_slots,
    multiple,
    multiple_read_write,
    multiple_readonly,
    only_items_with_tag,
    only_items_without_tag,
    slot_specific,
    slot_specific_read_write,
    slot_specific_readonly,
    whitelist_slots,
)
from invmenuutils.tags import ByteTag, CompoundTag, FloatTag, IntTag, ListTag, NamedTag, StringTag

__all__ = [
    "CATCH_ALL_SLOT",
    "ByteTag",
    "CompoundTag",
    "FloatTag",
    "IntTag",
    "ListTag",
    "NamedTag",
    "SlotChangeAction",
    "StringTag",
    "__version__",
    "blacklist_slots",
    "multiple",
    "multiple_read_write",
    "multiple_readonly",
    "only_items_with_tag",
    "only_items_without_tag",
    "settings",
    "setup_logging",
    "slot_specific",
    "slot_specific_read_write",
    "slot_specific_readonly",
    "whitelist_slots",
]
