"""Attribute names resolved at lookup time rather than from the schema.

For a `hash` node, `foo_pair`, `foo_value` and `foo_source` look up the
pair whose key is `:foo` (or, failing that, `"foo"`):

    node = read_sexp('(hash (pair (sym :foo) (str "bar")))')
    node.foo_pair    # (pair (sym :foo) (str "bar"))
    node.foo_value   # (str "bar")
    node.foo_source  # '"bar"' when the node carries a span

A missing key gives None for `_pair`/`_value` but "" for `_source`.

For an `args` node, the public methods of the children tuple (`count`
and `index`) are forwarded to it. Length, iteration and indexing are not:
Python looks those up on the class, so use `node.children` for them.
"""

from __future__ import annotations

from enum import StrEnum
import logging
from typing import Any

from rubyast.ast.accessors import has_key, hash_pair, hash_value, to_source
from rubyast.ast.literal import Symbol
from rubyast.ast.node import Node
from rubyast.syntax import NodeType

logger = logging.getLogger(__name__)


class HashSuffix(StrEnum):
    """Dynamic hash accessor families, in resolution order."""

    PAIR = "_pair"
    VALUE = "_value"
    SOURCE = "_source"


def _split_hash_name(name: str) -> tuple[HashSuffix, str] | None:
    for suffix in HashSuffix:
        if name.endswith(suffix) and len(name) > len(suffix):
            return suffix, name[: -len(suffix)]
    return None


def _lookup_key(node: Node, key_text: str) -> Symbol | str | None:
    """Key present in the hash for `key_text`, symbol form first."""
    for key in (Symbol(key_text), key_text):
        if has_key(node, key):
            return key
    return None


def _forwards_to_children(node: Node, name: str) -> bool:
    return node.type == NodeType.ARGS and not name.startswith("_") and hasattr(node.children, name)


def resolve_dynamic(node: Node, name: str, *args: Any) -> Any:
    """Resolve `name` against `node`; AttributeError if no rule applies.

    `args` are passed on to forwarded children-tuple methods.
    """
    if _forwards_to_children(node, name):
        attribute = getattr(node.children, name)
        return attribute(*args) if callable(attribute) else attribute

    if node.type == NodeType.HASH:
        split = _split_hash_name(name)
        if split is not None:
            suffix, key_text = split
            key = _lookup_key(node, key_text)
            if key is None:
                logger.debug("hash has no key %r for %s", key_text, name)
                return "" if suffix == HashSuffix.SOURCE else None

            match suffix:
                case HashSuffix.PAIR:
                    return hash_pair(node, key)
                case HashSuffix.VALUE:
                    return hash_value(node, key)
                case HashSuffix.SOURCE:
                    value = hash_value(node, key)
                    return to_source(value) if isinstance(value, Node) else None

    raise AttributeError(f"'{type(node).__name__}' object has no attribute {name!r} for {node.type} node")


def dynamic_attribute(node: Node, name: str) -> Any:
    """`resolve_dynamic` for attribute access: forwarded methods are returned, not called."""
    if _forwards_to_children(node, name):
        return getattr(node.children, name)
    return resolve_dynamic(node, name)


def can_resolve_dynamic(node: Node, name: str) -> bool:
    """Whether `resolve_dynamic` would find something for `name`.

    Hash names answer True only when the key exists, even for `_source`,
    which still resolves to "" on a missing key.
    """
    if _forwards_to_children(node, name):
        return True

    if node.type == NodeType.HASH:
        split = _split_hash_name(name)
        if split is not None:
            return _lookup_key(node, split[1]) is not None

    return False


__all__ = ["HashSuffix", "can_resolve_dynamic", "dynamic_attribute", "resolve_dynamic"]
