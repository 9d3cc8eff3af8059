"""
Tests for attribute lookup, addition and removal
"""

import pytest

from htmlelements import (
    RemovalStrategy,
    add_attribute,
    find_attribute,
    get_attribute,
    get_elements_by_tag_name,
    has_attribute,
    remove_attribute
)


def keys(node):
    return [a.key for a in node.attributes]


class TestGetAttribute:

    def test_returns_first_matching_value(self, make_element):
        node = make_element('div', [('a', '1'), ('b', '2'), ('a', '3')])
        assert get_attribute(node, 'a') == '1'
        assert get_attribute(node, 'b') == '2'

    def test_missing_attribute_is_empty_string(self, make_element):
        node = make_element('div', [('a', '1')])
        assert get_attribute(node, 'missing') == ''

    def test_text_node_has_no_attributes(self, make_text):
        assert get_attribute(make_text('hello'), 'id') == ''

    def test_keys_are_case_sensitive(self, make_element):
        node = make_element('div', [('ID', 'upper')])
        assert get_attribute(node, 'id') == ''
        assert get_attribute(node, 'ID') == 'upper'

    def test_empty_value_looks_like_missing(self, make_element):
        node = make_element('input', [('disabled', '')])
        assert get_attribute(node, 'disabled') == get_attribute(node, 'checked') == ''

    def test_reads_parsed_document(self, document):
        div = get_elements_by_tag_name(document, 'div')[0]
        assert get_attribute(div, 'id') == 'content'


class TestFindAttribute:

    def test_distinguishes_empty_from_missing(self, make_element):
        node = make_element('input', [('disabled', '')])
        assert find_attribute(node, 'disabled') == ''
        assert find_attribute(node, 'checked') is None

    def test_has_attribute(self, make_element):
        node = make_element('input', [('disabled', '')])
        assert has_attribute(node, 'disabled')
        assert not has_attribute(node, 'checked')


class TestAddAttribute:

    def test_appends_new_attribute_at_end(self, make_element):
        node = make_element('div', [('id', 'x')])
        add_attribute(node, 'title', 'hello')
        assert keys(node) == ['id', 'title']
        assert get_attribute(node, 'title') == 'hello'

    def test_space_joins_existing_value(self, make_element):
        node = make_element('div', [('class', 'a')])
        add_attribute(node, 'class', 'b')
        assert get_attribute(node, 'class') == 'a b'
        add_attribute(node, 'class', 'c')
        assert get_attribute(node, 'class') == 'a b c'
        assert keys(node) == ['class']

    def test_only_first_duplicate_is_extended(self, make_element):
        node = make_element('div', [('class', 'a'), ('id', 'x'), ('class', 'z')])
        add_attribute(node, 'class', 'b')
        assert [(a.key, a.value) for a in node.attributes] == [
            ('class', 'a b'), ('id', 'x'), ('class', 'z')
        ]

    def test_extends_empty_value(self, make_element):
        node = make_element('div', [('class', '')])
        add_attribute(node, 'class', 'a')
        assert get_attribute(node, 'class') == ' a'


class TestRemoveAttribute:

    def test_removes_every_duplicate(self, make_element):
        node = make_element('div', [('data-x', '1'), ('a', 'A'), ('data-x', '2'),
                                    ('b', 'B'), ('c', 'C')])
        remove_attribute(node, 'data-x')
        assert 'data-x' not in keys(node)
        assert sorted(keys(node)) == ['a', 'b', 'c']

    def test_swap_strategy_moves_last_entry_into_the_gap(self, make_element):
        node = make_element('div', [('data-x', '1'), ('a', 'A'), ('data-x', '2'),
                                    ('b', 'B'), ('c', 'C')])
        remove_attribute(node, 'data-x', RemovalStrategy.SWAP)
        assert keys(node) == ['c', 'a', 'b']

    def test_stable_strategy_keeps_order(self, make_element):
        node = make_element('div', [('data-x', '1'), ('a', 'A'), ('data-x', '2'),
                                    ('b', 'B'), ('c', 'C')])
        remove_attribute(node, 'data-x', RemovalStrategy.STABLE)
        assert keys(node) == ['a', 'b', 'c']

    @pytest.mark.parametrize('strategy', list(RemovalStrategy))
    def test_absent_key_is_noop(self, make_element, strategy):
        node = make_element('div', [('a', 'A'), ('b', 'B')])
        remove_attribute(node, 'missing', strategy)
        assert keys(node) == ['a', 'b']

    def test_removes_last_entry(self, make_element):
        node = make_element('div', [('a', 'A'), ('x', 'X')])
        remove_attribute(node, 'x')
        assert keys(node) == ['a']

    def test_removes_only_entry(self, make_element):
        node = make_element('div', [('x', 'X')])
        remove_attribute(node, 'x')
        assert node.attributes == []

    def test_text_node_is_noop(self, make_text):
        node = make_text('hello')
        remove_attribute(node, 'id')
        assert node.attributes == []
