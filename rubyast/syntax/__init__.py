"""Node type vocabulary and slot schema."""

from rubyast.syntax.kind import NodeTag, NodeType, node_tag
from rubyast.syntax.schema import NODE_SLOTS, SLOT_NAMES, slot_index, slots_for

__all__ = [
    "NODE_SLOTS",
    "SLOT_NAMES",
    "NodeTag",
    "NodeType",
    "node_tag",
    "slot_index",
    "slots_for",
]
