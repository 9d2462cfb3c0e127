"""Nested map reconstruction from split property names."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..coercion import coerce_types
from ..errors import KeyConflictError
from .keys import resolve_key


if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..descriptors import MapType


class FragmentTree:
    """Submaps under construction, indexed by raw key fragment.

    Typed keys are only resolved by ``materialize`` once every property has
    been placed, so entries sharing a fragment always share a submap.
    """

    def __init__(self) -> None:
        super().__init__()
        self.leaves: dict[str, tuple[str, Any]] = {}
        self.children: dict[str, FragmentTree] = {}

    def child(self, fragment: str) -> FragmentTree:
        if fragment in self.leaves:
            raise KeyConflictError(self.leaves[fragment][0])
        subtree = self.children.get(fragment)
        if subtree is None:
            subtree = FragmentTree()
            self.children[fragment] = subtree
        return subtree

    def put(self, parts: tuple[str, ...], property_key: str, value: Any) -> None:
        """Place a value at the path given by ``parts``."""
        node = self
        for fragment in parts[:-1]:
            node = node.child(fragment)
        leaf = parts[-1]
        if leaf in node.children:
            raise KeyConflictError(property_key)
        node.leaves[leaf] = (property_key, value)


def build_fragment_tree(items: Iterable[tuple[str, tuple[str, ...], Any]]) -> FragmentTree:
    """Group ``(property_key, parts, value)`` items into a fragment tree."""
    tree = FragmentTree()
    for property_key, parts, value in items:
        tree.put(parts, property_key, value)
    return tree


def materialize(tree: FragmentTree, map_type: MapType | None = None) -> dict[Any, Any]:
    """Resolve typed keys and coerce leaves level by level."""
    key_type = map_type.key_type if map_type is not None else None
    leaf_type = map_type.leaf_type if map_type is not None else None
    nested_type = map_type.nested if map_type is not None else None

    result: dict[Any, Any] = {}
    for fragment, subtree in tree.children.items():
        result[resolve_key(fragment, key_type)] = materialize(subtree, nested_type)
    for fragment, (_, value) in tree.leaves.items():
        key = resolve_key(fragment, key_type)
        result[key] = coerce_types(leaf_type, value) if leaf_type is not None else value
    return result
