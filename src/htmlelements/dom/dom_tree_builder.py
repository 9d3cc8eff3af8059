"""
DOM Tree Building Module
Parses markup with BeautifulSoup and converts the soup into DOMNode trees
"""

import logging
from typing import Union

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import Comment, Doctype, NavigableString, PreformattedString, Tag

from ..config import ParserConfig
from ..errors import InvalidMarkupError, ParserNotAvailableError
from .attribute import Attribute
from .dom_node import DOMNode
from .node_type import NodeType

logger = logging.getLogger(__name__)


class DOMTreeBuilder:
    """Builds DOMNode trees from markup or from an existing soup"""

    def __init__(self, config: ParserConfig = None):
        self.config = config or ParserConfig()

    def parse(self, markup: Union[str, bytes]) -> DOMNode:
        """
        Parse markup and return the DOCUMENT node of the converted tree

        Args:
            markup: Raw HTML as str or bytes

        Raises:
            InvalidMarkupError: markup is neither str nor bytes
            ParserNotAvailableError: the configured parser backend is missing
        """
        if not isinstance(markup, (str, bytes)):
            logger.error(f"Cannot parse markup of type {type(markup).__name__}")
            raise InvalidMarkupError(
                f"markup must be str or bytes, got {type(markup).__name__}"
            )

        logger.info(f"Parsing document with {self.config.parser}")

        # Keep attribute values as raw strings so class lists are split by the query layer
        parser_kwargs = {'multi_valued_attributes': None}
        if self.config.parser == 'html.parser':
            parser_kwargs['on_duplicate_attribute'] = self.config.on_duplicate_attribute

        try:
            soup = BeautifulSoup(markup, self.config.parser, **parser_kwargs)
        except FeatureNotFound as e:
            logger.error(f"Parser backend not available: {self.config.parser}")
            raise ParserNotAvailableError(self.config.parser) from e

        return self.from_soup(soup)

    def from_soup(self, element: Union[Tag, NavigableString]) -> DOMNode:
        """Convert a BeautifulSoup object, Tag or string into a DOMNode tree"""
        root = self._build_dom_node(element)
        if root is None:
            # The starting element itself was filtered out; keep an empty document
            root = DOMNode(NodeType.DOCUMENT)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Built DOM tree with {self.count_nodes(root)} nodes, "
                         f"max depth {self.get_max_depth(root)}")
        return root

    def _build_dom_node(self, element) -> DOMNode:
        """Recursively build DOM node from BeautifulSoup element"""
        if isinstance(element, BeautifulSoup):
            node = DOMNode(NodeType.DOCUMENT)
        elif isinstance(element, Tag):
            if element.name in self.config.skip_tags:
                return None
            node = DOMNode(
                NodeType.ELEMENT,
                tag_name=element.name,
                attributes=self._convert_attributes(element)
            )
        elif isinstance(element, Comment):
            return DOMNode(NodeType.COMMENT, data=str(element))
        elif isinstance(element, Doctype):
            return DOMNode(NodeType.DOCTYPE, data=str(element))
        elif isinstance(element, PreformattedString):
            # CDATA, processing instructions and declarations
            return DOMNode(NodeType.OTHER, data=str(element))
        elif isinstance(element, NavigableString):
            text = str(element)
            if not self.config.keep_whitespace_text and not text.strip():
                return None
            return DOMNode(NodeType.TEXT, data=text)
        else:
            logger.debug(f"Skipping unsupported element type {type(element).__name__}")
            return None

        for child in element.children:
            child_node = self._build_dom_node(child)
            if child_node is not None:
                node.append_child(child_node)

        return node

    def _convert_attributes(self, element: Tag):
        """Copy tag attributes in parser order, joining multi-valued ones"""
        return [Attribute(key, value if isinstance(value, str) else ' '.join(value))
                for key, value in element.attrs.items()]

    def count_nodes(self, node: DOMNode) -> int:
        """Count total nodes in DOM tree"""
        count = 1
        for child in node.children:
            count += self.count_nodes(child)
        return count

    def get_max_depth(self, node: DOMNode, current_depth: int = 0) -> int:
        """Get maximum depth of DOM tree"""
        max_depth = current_depth
        for child in node.children:
            child_depth = self.get_max_depth(child, current_depth + 1)
            max_depth = max(max_depth, child_depth)
        return max_depth


def parse_html(markup: Union[str, bytes], config: ParserConfig = None) -> DOMNode:
    """Parse markup with a one-off DOMTreeBuilder"""
    return DOMTreeBuilder(config).parse(markup)
