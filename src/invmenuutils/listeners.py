"""Combinators for inventory menu listeners.

An inventory menu calls its listener every time a player clicks one of its
slots, passing ``(player, item_clicked, item_clicked_with, action)``. The
functions in this module take one or more such listeners and return a single
listener with the same signature, so the result can be registered anywhere a
plain listener can.

Two listener flavours exist, matching the two kinds of menu:

- Readonly menus take listeners that return nothing. The click never changes
  the menu, so the listener can only observe it.
- Read-write menus take listeners that return a bool. True lets the
  transaction go through, False cancels it.

Functions named ``*_readonly`` / ``*_read_write`` build one flavour
explicitly; ``multiple()`` and ``slot_specific()`` pick the flavour from the
menu they will be registered on. The slot and tag filters only make sense on
read-write menus and always return a bool.

Every combinator captures its inputs when it is built (listeners are copied
into a tuple or dict, slots into a frozenset) and keeps no state between
clicks. Exceptions raised by the wrapped listeners or by the host objects are
never caught here.

Example usage:
    menu.set_listener(
        multiple(
            menu,
            whitelist_slots(range(9)),
            only_items_without_tag("locked"),
            slot_specific(menu, {4: on_confirm, CATCH_ALL_SLOT: on_other}),
        )
    )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from invmenuutils.constants import CATCH_ALL_SLOT
from invmenuutils.tags import NamedTag

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from invmenuutils.events import SlotChangeAction
    from invmenuutils.types import InvMenu, Item, Listener, ReadonlyListener, ReadWriteListener

logger = logging.getLogger(__name__)


def multiple(menu: InvMenu, *listeners: Listener) -> Listener:
    """Combine listeners so they run one after another, first listener first.

    Args:
        menu: Menu the combined listener will be registered on. Its
            is_readonly() decides which flavour is built.
        *listeners: Listeners in the order they should run.

    Returns:
        multiple_readonly(*listeners) for readonly menus,
        multiple_read_write(*listeners) otherwise.
    """
    if menu.is_readonly():
        return multiple_readonly(*listeners)
    return multiple_read_write(*listeners)


def multiple_readonly(*listeners: ReadonlyListener) -> ReadonlyListener:
    """Combine readonly listeners. Every listener runs on every click, in order."""
    captured = tuple(listeners)
    logger.debug("Combining %d readonly listeners", len(captured))

    def listener(
        player: Any,  # noqa: ANN401
        item_clicked: Item,
        item_clicked_with: Item,
        action: SlotChangeAction,
    ) -> None:
        for wrapped in captured:
            wrapped(player, item_clicked, item_clicked_with, action)

    return listener


def multiple_read_write(*listeners: ReadWriteListener) -> ReadWriteListener:
    """Combine read-write listeners with short-circuit AND semantics.

    Listeners run in order until one of them returns False; the rest are not
    called and the click is cancelled. With no listeners at all the click is
    allowed.
    """
    captured = tuple(listeners)
    logger.debug("Combining %d read-write listeners", len(captured))

    def listener(
        player: Any,  # noqa: ANN401
        item_clicked: Item,
        item_clicked_with: Item,
        action: SlotChangeAction,
    ) -> bool:
        for wrapped in captured:
            if not wrapped(player, item_clicked, item_clicked_with, action):
                return False
        return True

    return listener


def slot_specific(menu: InvMenu, listeners: Mapping[int, Listener]) -> Listener:
    """Dispatch each click to the listener registered for its slot.

    Args:
        menu: Menu the combined listener will be registered on.
        listeners: Listeners keyed by slot index. The CATCH_ALL_SLOT (-1)
            entry handles every slot without an entry of its own.

    Returns:
        slot_specific_readonly(listeners) for readonly menus,
        slot_specific_read_write(listeners) otherwise.
    """
    if menu.is_readonly():
        return slot_specific_readonly(listeners)
    return slot_specific_read_write(listeners)


def _lookup(listeners: Mapping[int, Listener], slot: int) -> Listener | None:
    listener = listeners.get(slot)
    if listener is None:
        listener = listeners.get(CATCH_ALL_SLOT)
    return listener


def slot_specific_readonly(listeners: Mapping[int, ReadonlyListener]) -> ReadonlyListener:
    """Readonly per-slot dispatch. Clicks on unmatched slots are ignored."""
    captured = dict(listeners)
    logger.debug("Dispatching readonly listeners for %d slots", len(captured))

    def listener(
        player: Any,  # noqa: ANN401
        item_clicked: Item,
        item_clicked_with: Item,
        action: SlotChangeAction,
    ) -> None:
        wrapped = _lookup(captured, action.get_slot())
        if wrapped is not None:
            wrapped(player, item_clicked, item_clicked_with, action)

    return listener


def slot_specific_read_write(listeners: Mapping[int, ReadWriteListener]) -> ReadWriteListener:
    """Read-write per-slot dispatch.

    The matched listener's result decides the click. Clicks on slots with no
    entry and no catch-all are allowed.
    """
    captured = dict(listeners)
    logger.debug("Dispatching read-write listeners for %d slots", len(captured))

    def listener(
        player: Any,  # noqa: ANN401
        item_clicked: Item,
        item_clicked_with: Item,
        action: SlotChangeAction,
    ) -> bool:
        wrapped = _lookup(captured, action.get_slot())
        if wrapped is None:
            return True
        return bool(wrapped(player, item_clicked, item_clicked_with, action))

    return listener


def blacklist_slots(slots: Iterable[int]) -> ReadWriteListener:
    """Cancel clicks on any of the given slots and allow all others.

    Args:
        slots: Slot indices to deny. Duplicates are fine.
    """
    blacklist = frozenset(slots)
    logger.debug("Blacklisting %d slots", len(blacklist))

    def listener(
        player: Any,  # noqa: ANN401
        item_clicked: Item,
        item_clicked_with: Item,
        action: SlotChangeAction,
    ) -> bool:
        return action.get_slot() not in blacklist

    return listener


def whitelist_slots(slots: Iterable[int]) -> ReadWriteListener:
    """Allow clicks on the given slots only.

    Args:
        slots: Slot indices to allow. Duplicates are fine.
    """
    whitelist = frozenset(slots)
    logger.debug("Whitelisting %d slots", len(whitelist))

    def listener(
        player: Any,  # noqa: ANN401
        item_clicked: Item,
        item_clicked_with: Item,
        action: SlotChangeAction,
    ) -> bool:
        return action.get_slot() in whitelist

    return listener


def only_items_with_tag(name: str, expected_class: type[NamedTag] = NamedTag) -> ReadWriteListener:
    """Allow clicks only on items carrying the named tag.

    Args:
        name: Tag name looked up in the clicked item's tag container.
        expected_class: Tag kind the tag must be. The default matches any kind.
    """
    logger.debug("Filtering for items with tag '%s' (%s)", name, expected_class.__name__)

    def listener(
        player: Any,  # noqa: ANN401
        item_clicked: Item,
        item_clicked_with: Item,
        action: SlotChangeAction,
    ) -> bool:
        return item_clicked.get_named_tag().has_tag(name, expected_class)

    return listener


def only_items_without_tag(name: str, expected_class: type[NamedTag] = NamedTag) -> ReadWriteListener:
    """Allow clicks only on items not carrying the named tag."""
    logger.debug("Filtering for items without tag '%s' (%s)", name, expected_class.__name__)

    def listener(
        player: Any,  # noqa: ANN401
        item_clicked: Item,
        item_clicked_with: Item,
        action: SlotChangeAction,
    ) -> bool:
        return not item_clicked.get_named_tag().has_tag(name, expected_class)

    return listener
