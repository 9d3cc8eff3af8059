"""
Element search and text extraction, patterned after the browser DOM API
"""

from typing import List, Optional

from ..dom.dom_node import DOMNode
from .attributes import get_attribute
from .traversal import find_all, find_first

ID_ATTRIBUTE = 'id'
CLASS_ATTRIBUTE = 'class'


def has_class(node: DOMNode, class_name: str) -> bool:
    """Check whether class_name is one of the space separated tokens of the class attribute

    The value is split on single spaces only, so runs of spaces produce
    empty tokens rather than being collapsed.
    """
    return class_name in get_attribute(node, CLASS_ATTRIBUTE).split(' ')


def get_elements_by_class_name(root: DOMNode, class_name: str) -> List[DOMNode]:
    """Return all elements under root (root included) carrying class_name"""
    return find_all(root, lambda node: node.is_element and has_class(node, class_name))


def get_elements_by_tag_name(root: DOMNode, tag_name: str) -> List[DOMNode]:
    """Return all elements under root (root included) with exactly this tag name"""
    return find_all(root, lambda node: node.is_element and node.tag_name == tag_name)


def get_element_by_id(root: DOMNode, element_id: str) -> Optional[DOMNode]:
    """Return the first element in document order whose id equals element_id"""
    return find_first(
        root,
        lambda node: node.is_element and get_attribute(node, ID_ATTRIBUTE) == element_id
    )


def inner_text(node: DOMNode) -> str:
    """Concatenate the content of every text node under node, without separators"""
    if node.is_text:
        return node.data
    parts = []
    for child in node.children:
        parts.append(inner_text(child))
    return ''.join(parts)
