"""
DOM query and mutation functions
"""

from .attributes import (
    add_attribute,
    find_attribute,
    get_attribute,
    has_attribute,
    remove_attribute
)
from .elements import (
    get_element_by_id,
    get_elements_by_class_name,
    get_elements_by_tag_name,
    has_class,
    inner_text
)
from .traversal import find_all, find_first, walk

__all__ = [
    'add_attribute',
    'find_attribute',
    'get_attribute',
    'has_attribute',
    'remove_attribute',
    'get_element_by_id',
    'get_elements_by_class_name',
    'get_elements_by_tag_name',
    'has_class',
    'inner_text',
    'find_all',
    'find_first',
    'walk'
]
