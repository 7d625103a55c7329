"""Unit tests for the named tag model."""

import unittest

import pytest

from invmenuutils.tags import ByteTag, CompoundTag, FloatTag, IntTag, ListTag, NamedTag, StringTag


class TestCompoundTag(unittest.TestCase):
    """Test CompoundTag."""

    def setUp(self) -> None:
        """Create a compound with a few children."""
        self.tag = CompoundTag()
        self.tag.set_tag("owner", StringTag("steve"))
        self.tag.set_tag("level", IntTag(3))
        self.tag.set_tag("lore", ListTag([StringTag("line one")]))

    def test_has_tag_any_kind(self) -> None:
        """Test that the default kind matches any tag."""
        assert self.tag.has_tag("owner") is True
        assert self.tag.has_tag("level") is True
        assert self.tag.has_tag("missing") is False

    def test_has_tag_expected_kind(self) -> None:
        """Test that only tags of the expected kind match."""
        assert self.tag.has_tag("level", IntTag) is True
        assert self.tag.has_tag("level", FloatTag) is False
        assert self.tag.has_tag("lore", ListTag) is True

    def test_has_tag_nested_compound(self) -> None:
        """Test that compounds can be matched by kind."""
        self.tag.set_tag("display", CompoundTag().set_tag("name", StringTag("Sword")))

        assert self.tag.has_tag("display", CompoundTag) is True
        assert self.tag.has_tag("display", StringTag) is False

    def test_get_tag(self) -> None:
        """Test child lookup."""
        assert self.tag.get_tag("level") == IntTag(3)
        assert self.tag.get_tag("missing") is None

    def test_set_tag_replaces(self) -> None:
        """Test that setting an existing name replaces the child."""
        self.tag.set_tag("level", ByteTag(1))

        assert self.tag.has_tag("level", ByteTag) is True
        assert self.tag.has_tag("level", IntTag) is False

    def test_constructor_rejects_non_tags(self) -> None:
        """Test that raw values passed to the constructor are rejected."""
        with pytest.raises(TypeError, match="x"):
            CompoundTag({"x": "raw"})  # type: ignore[dict-item]

    def test_constructor_accepts_tags(self) -> None:
        """Test that tag children passed to the constructor are kept."""
        tag = CompoundTag({"level": IntTag(2)})

        assert tag.has_tag("level", IntTag) is True

    def test_set_tag_rejects_non_tags(self) -> None:
        """Test that raw values cannot be stored."""
        with pytest.raises(TypeError, match="owner"):
            self.tag.set_tag("owner", "steve")  # type: ignore[arg-type]

    def test_remove_tag(self) -> None:
        """Test child removal, including of absent children."""
        self.tag.remove_tag("owner")
        self.tag.remove_tag("missing")

        assert self.tag.has_tag("owner") is False
        assert len(self.tag) == 2

    def test_container_protocol(self) -> None:
        """Test membership, length and iteration over child names."""
        assert "owner" in self.tag
        assert "missing" not in self.tag
        assert len(self.tag) == 3
        assert list(self.tag) == ["owner", "level", "lore"]

    def test_compounds_do_not_share_children(self) -> None:
        """Test that each compound gets its own child dict."""
        CompoundTag().set_tag("a", ByteTag(1))

        assert len(CompoundTag()) == 0


def test_named_tag_is_base_of_all_kinds() -> None:
    """Test that NamedTag matches every tag kind."""
    for tag in (ByteTag(), IntTag(), FloatTag(), StringTag(), ListTag(), CompoundTag()):
        assert isinstance(tag, NamedTag)
