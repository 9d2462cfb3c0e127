"""Flat property key mapping and nested reconstruction utilities."""

from .keys import key_fragment, resolve_key
from .mapper import PropertyKeyMapper
from .nested import FragmentTree, build_fragment_tree, materialize


__all__ = ["FragmentTree", "PropertyKeyMapper", "build_fragment_tree", "key_fragment", "materialize", "resolve_key"]
