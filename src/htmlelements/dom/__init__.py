"""
DOM tree model and conversion from parsed markup
"""

from .node_type import NodeType
from .attribute import Attribute
from .dom_node import DOMNode
from .dom_tree_builder import DOMTreeBuilder, parse_html

__all__ = [
    'NodeType',
    'Attribute',
    'DOMNode',
    'DOMTreeBuilder',
    'parse_html'
]
