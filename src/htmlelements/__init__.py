"""
htmlelements - DOM style queries over parsed HTML documents

Lookup by id, class and tag name, text extraction and attribute
editing, patterned after the familiar JavaScript functions.
"""

from .config import ParserConfig, RemovalStrategy
from .dom import Attribute, DOMNode, DOMTreeBuilder, NodeType, parse_html
from .errors import (
    ConfigurationError,
    HTMLElementsError,
    InvalidMarkupError,
    ParserNotAvailableError,
    TreeBuildError
)
from .monitoring import LogManager
from .query import (
    add_attribute,
    find_all,
    find_attribute,
    find_first,
    get_attribute,
    get_element_by_id,
    get_elements_by_class_name,
    get_elements_by_tag_name,
    has_attribute,
    has_class,
    inner_text,
    remove_attribute,
    walk
)

__version__ = '0.1.0'

__all__ = [
    'ParserConfig',
    'RemovalStrategy',
    'Attribute',
    'DOMNode',
    'DOMTreeBuilder',
    'NodeType',
    'parse_html',
    'ConfigurationError',
    'HTMLElementsError',
    'InvalidMarkupError',
    'ParserNotAvailableError',
    'TreeBuildError',
    'LogManager',
    'add_attribute',
    'find_all',
    'find_attribute',
    'find_first',
    'get_attribute',
    'get_element_by_id',
    'get_elements_by_class_name',
    'get_elements_by_tag_name',
    'has_attribute',
    'has_class',
    'inner_text',
    'remove_attribute',
    'walk'
]
