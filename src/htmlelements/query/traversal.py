"""
Pre-order depth-first traversal helpers shared by the query functions
"""

from typing import Callable, Iterator, List, Optional

from ..dom.dom_node import DOMNode

NodePredicate = Callable[[DOMNode], bool]


def walk(root: DOMNode) -> Iterator[DOMNode]:
    """Yield root and every descendant, parents before children, left to right"""
    yield root
    for child in root.children:
        yield from walk(child)


def find_all(root: DOMNode, predicate: NodePredicate) -> List[DOMNode]:
    """Collect every node matching predicate in document order

    A match does not stop the walk from descending into its subtree.
    """
    return [node for node in walk(root) if predicate(node)]


def find_first(root: DOMNode, predicate: NodePredicate) -> Optional[DOMNode]:
    """Return the first node in document order matching predicate, or None"""
    for node in walk(root):
        if predicate(node):
            return node
    return None
