"""
Attribute lookup and mutation on a single node
"""

import logging
from typing import Optional

from ..config import DEFAULT_REMOVAL_STRATEGY, RemovalStrategy
from ..dom.attribute import Attribute
from ..dom.dom_node import DOMNode

logger = logging.getLogger(__name__)


def find_attribute(node: DOMNode, name: str) -> Optional[str]:
    """Return the value of the first attribute named name, or None if there is none

    Unlike get_attribute, an attribute set to the empty string is reported
    as '' and a missing one as None.
    """
    for attribute in node.attributes:
        if attribute.key == name:
            return attribute.value
    return None


def has_attribute(node: DOMNode, name: str) -> bool:
    return find_attribute(node, name) is not None


def get_attribute(node: DOMNode, name: str) -> str:
    """Return the value of the first attribute named name, or '' if not found"""
    value = find_attribute(node, name)
    return value if value is not None else ''


def remove_attribute(node: DOMNode, name: str,
                     strategy: RemovalStrategy = None) -> None:
    """
    Remove every attribute named name from node

    Args:
        node: Node whose attribute list is edited in place
        name: Attribute key, compared case-sensitively
        strategy: SWAP moves the last entry into each removed slot, so the
            order of the remaining attributes can change. STABLE keeps it.
    """
    strategy = strategy or DEFAULT_REMOVAL_STRATEGY
    attributes = node.attributes
    before = len(attributes)

    if strategy is RemovalStrategy.STABLE:
        attributes[:] = [a for a in attributes if a.key != name]
    else:
        removed = True
        while removed:
            removed = False
            for index, attribute in enumerate(attributes):
                if attribute.key == name:
                    attributes[index] = attributes[-1]
                    attributes.pop()
                    removed = True
                    break

    if len(attributes) != before:
        logger.debug(f"Removed {before - len(attributes)} '{name}' attribute(s) "
                     f"from <{node.tag_name}>")


def add_attribute(node: DOMNode, name: str, value: str) -> None:
    """Add an attribute, appending to an existing value with a single space

    Only the first entry named name is extended; duplicates already present
    are left alone.
    """
    for attribute in node.attributes:
        if attribute.key == name:
            attribute.value += ' ' + value
            logger.debug(f"Extended '{name}' on <{node.tag_name}> with {value!r}")
            return
    node.attributes.append(Attribute(name, value))
    logger.debug(f"Added '{name}' to <{node.tag_name}>")
