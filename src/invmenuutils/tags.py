"""Named tag model for item metadata.

Items carry their metadata as a tree of named, typed tags. The host server
usually owns this model; the classes here mirror its shape so plugins (and
tests) have a concrete container to hand to the tag filters in
invmenuutils.listeners.

The tag kind is the tag's class. NamedTag is the base of every kind, so
``has_tag(name, NamedTag)`` matches any tag with that name, while
``has_tag(name, StringTag)`` only matches string tags.

Example usage:
    root = CompoundTag()
    root.set_tag("locked", ByteTag(1))
    root.set_tag("owner", StringTag("steve"))

    root.has_tag("owner")             # True
    root.has_tag("owner", StringTag)  # True
    root.has_tag("owner", IntTag)     # False
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class NamedTag:
    """Base tag class."""

    value: Any = None


@dataclass
class ByteTag(NamedTag):
    """Tag holding a single byte, commonly used as a boolean flag."""

    value: int = 0


@dataclass
class IntTag(NamedTag):
    """Tag holding an integer."""

    value: int = 0


@dataclass
class FloatTag(NamedTag):
    """Tag holding a float."""

    value: float = 0.0


@dataclass
class StringTag(NamedTag):
    """Tag holding a string."""

    value: str = ""


@dataclass
class ListTag(NamedTag):
    """Tag holding an ordered list of tags."""

    value: list[NamedTag] = field(default_factory=list)


@dataclass
class CompoundTag(NamedTag):
    """Tag holding named child tags.

    This is the container returned by an item's get_named_tag() and the
    one queried by only_items_with_tag() / only_items_without_tag().
    """

    value: dict[str, NamedTag] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate children passed to the constructor.

        Raises:
            TypeError: If any child is not a NamedTag.
        """
        for name, tag in self.value.items():
            _check_tag(name, tag)

    def has_tag(self, name: str, expected_class: type[NamedTag] = NamedTag) -> bool:
        """Check whether a child tag exists and is of the expected kind.

        Args:
            name: Name of the child tag.
            expected_class: Tag class the child must be an instance of.

        Returns:
            True if a child named ``name`` exists and is an instance of
            ``expected_class``, False otherwise.
        """
        tag = self.value.get(name)
        return tag is not None and isinstance(tag, expected_class)

    def get_tag(self, name: str) -> NamedTag | None:
        """Get a child tag by name, or None if absent."""
        return self.value.get(name)

    def set_tag(self, name: str, tag: NamedTag) -> CompoundTag:
        """Set a child tag, replacing any existing tag with the same name.

        Returns:
            This compound, so calls can be chained.

        Raises:
            TypeError: If ``tag`` is not a NamedTag.
        """
        _check_tag(name, tag)
        self.value[name] = tag
        return self

    def remove_tag(self, name: str) -> None:
        """Remove a child tag. Does nothing if it is absent."""
        self.value.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self.value

    def __iter__(self) -> Iterator[str]:
        return iter(self.value)

    def __len__(self) -> int:
        return len(self.value)


def _check_tag(name: str, tag: object) -> None:
    if not isinstance(tag, NamedTag):
        msg = f"Expected a NamedTag for '{name}', got {type(tag).__name__}"
        raise TypeError(msg)
