"""
Shared fixtures for the htmlelements test suite
"""

import pytest

from htmlelements import Attribute, DOMNode, NodeType, parse_html

TEST_DOC = """
<html>
<head>
<title>Test Document</title>
</head>
<body>
<div id="content">
<p class="para">
Paragraph 1
</p>
<p class="para">
Paragraph 2
</p>
</div>
</body>
</html>
"""


@pytest.fixture
def document():
    """The test document parsed with the default html.parser backend"""
    return parse_html(TEST_DOC)


@pytest.fixture
def make_element():
    """Factory for hand-built element nodes: make_element('p', [('class', 'a')], child, ...)"""
    def _make_element(tag_name, attributes=None, *children):
        return DOMNode(
            NodeType.ELEMENT,
            tag_name=tag_name,
            attributes=[Attribute(key, value) for key, value in (attributes or [])],
            children=list(children)
        )
    return _make_element


@pytest.fixture
def make_text():
    def _make_text(data, *children):
        return DOMNode(NodeType.TEXT, data=data, children=list(children))
    return _make_text
