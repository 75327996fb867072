"""Tests for token tree parsing."""

import pytest
from pydantic import ValidationError

from tokensmith.core.ir import (
    TokenGroup,
    TokenLeaf,
    TokenType,
    is_leaf_mapping,
    parse_document,
    parse_tree,
)


class TestTokenType:
    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("color", TokenType.COLOR),
            ("number", TokenType.NUMBER),
            ("string", TokenType.STRING),
            ("dimension", TokenType.UNTYPED),
            (None, TokenType.UNTYPED),
            (42, TokenType.UNTYPED),
        ],
    )
    def test_from_tag(self, tag, expected):
        assert TokenType.from_tag(tag) is expected


class TestLeafDetection:
    def test_value_without_type_is_not_a_leaf(self):
        assert not is_leaf_mapping({"$value": 4})

    def test_type_alone_makes_a_leaf(self):
        assert is_leaf_mapping({"$type": "color"})

    def test_plain_object_is_a_group(self):
        assert not is_leaf_mapping({"500": {"$value": "#fff"}})

    def test_scalar_is_not_a_leaf(self):
        assert not is_leaf_mapping("#fff")


class TestParseTree:
    def test_metadata_is_separated_from_children(self):
        tree = parse_tree(
            {
                "$description": "Palette",
                "$extensions": {"tool": "figma"},
                "blue": {"500": {"$type": "color", "$value": {"hex": "#0066CC"}}},
            }
        )

        assert list(tree.children) == ["blue"]
        assert tree.description == "Palette"
        assert tree.metadata["$extensions"] == {"tool": "figma"}

    def test_leaf_fields(self):
        tree = parse_tree(
            {
                "accent": {
                    "$type": "color",
                    "$value": "{blue.500}",
                    "$description": "Primary accent",
                    "$deprecated": True,
                }
            }
        )
        leaf = tree.children["accent"]

        assert isinstance(leaf, TokenLeaf)
        assert leaf.type is TokenType.COLOR
        assert leaf.value == "{blue.500}"
        assert leaf.description == "Primary accent"

    def test_unknown_type_is_untyped(self):
        leaf = parse_tree({"shadow": {"$type": "shadow", "$value": "0 1px 2px"}}).children[
            "shadow"
        ]

        assert leaf.type is TokenType.UNTYPED
        assert leaf.value == "0 1px 2px"

    def test_scalars_and_arrays_in_group_position_are_dropped(self):
        tree = parse_tree({"note": "hello", "list": [1, 2], "x": {"$type": "number", "$value": 1}})

        assert list(tree.children) == ["x"]

    def test_document_order_is_kept(self):
        tree = parse_tree(
            {
                "b": {"$type": "number", "$value": 1},
                "a": {"$type": "number", "$value": 2},
                "c": {"$type": "number", "$value": 3},
            }
        )

        assert list(tree.children) == ["b", "a", "c"]

    def test_untagged_value_object_is_a_group(self):
        node = parse_tree({"x": {"$value": 1}}).children["x"]

        assert isinstance(node, TokenGroup)
        assert node.untyped_value
        assert node.children == {}

    def test_nodes_are_frozen(self):
        leaf = TokenLeaf(value=1)

        with pytest.raises(ValidationError):
            leaf.value = 2

    def test_parse_document_keeps_absence(self):
        assert parse_document(None) is None
        assert parse_document({}) == TokenGroup()


class TestGroupAccess:
    @pytest.fixture
    def tree(self):
        return parse_tree(
            {
                "Family": {"Sans": {"$type": "string", "$value": "Inter"}},
                "weights": {"Bold": {"$type": "number", "$value": 700}},
                "base": {"$type": "number", "$value": 16},
                "gutter": {"$value": 24},
            }
        )

    def test_group_uses_first_matching_name(self, tree):
        group = tree.group("Weights", "weights")

        assert group is not None
        assert [key for key, _ in group.leaves()] == ["Bold"]

    def test_group_ignores_leaves(self, tree):
        assert tree.group("base") is None

    def test_groups_and_leaves(self, tree):
        assert [key for key, _ in tree.groups()] == ["Family", "weights", "gutter"]
        assert [key for key, _ in tree.leaves()] == ["base"]

    def test_entries_read_untagged_values(self, tree):
        entries = dict(tree.entries())

        assert list(entries) == ["base", "gutter"]
        assert entries["base"].type is TokenType.NUMBER
        assert entries["gutter"].type is TokenType.UNTYPED
        assert entries["gutter"].value == 24

    def test_entries_skip_plain_groups(self, tree):
        assert tree.group("Family").entries() == [
            ("Sans", TokenLeaf(type=TokenType.STRING, value="Inter"))
        ]
