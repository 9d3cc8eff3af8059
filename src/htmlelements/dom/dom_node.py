from dataclasses import dataclass, field
from typing import List, Optional

from .attribute import Attribute
from .node_type import NodeType


@dataclass(eq=False)
class DOMNode:
    """Represents a single node of a parsed document

    A node owns its children. The parent link is a plain back reference
    kept out of repr, and sibling links are derived from the parent's
    children list. Nodes compare and hash by identity, so query results
    can be kept in sets or used as dict keys.
    """
    node_type: NodeType
    tag_name: Optional[str] = None
    data: str = ''
    attributes: List[Attribute] = None
    children: List['DOMNode'] = None
    parent: Optional['DOMNode'] = field(default=None, repr=False)

    def __post_init__(self):
        if self.attributes is None:
            self.attributes = []
        if self.children is None:
            self.children = []
        for child in self.children:
            child.parent = self

    @property
    def is_element(self) -> bool:
        return self.node_type is NodeType.ELEMENT

    @property
    def is_text(self) -> bool:
        return self.node_type is NodeType.TEXT

    @property
    def first_child(self) -> Optional['DOMNode']:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional['DOMNode']:
        return self.children[-1] if self.children else None

    @property
    def next_sibling(self) -> Optional['DOMNode']:
        index = self._sibling_index()
        if index is None or index + 1 >= len(self.parent.children):
            return None
        return self.parent.children[index + 1]

    @property
    def previous_sibling(self) -> Optional['DOMNode']:
        index = self._sibling_index()
        if not index:
            return None
        return self.parent.children[index - 1]

    def append_child(self, child: 'DOMNode') -> 'DOMNode':
        """Attach child as the last child of this node and return it"""
        child.parent = self
        self.children.append(child)
        return child

    def _sibling_index(self) -> Optional[int]:
        if self.parent is None:
            return None
        for index, sibling in enumerate(self.parent.children):
            if sibling is self:
                return index
        return None
