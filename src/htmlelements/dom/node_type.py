from enum import Enum


class NodeType(Enum):
    """Enum for the kinds of node a parsed document can contain"""
    DOCUMENT = 'document'
    ELEMENT = 'element'
    TEXT = 'text'
    COMMENT = 'comment'
    DOCTYPE = 'doctype'
    OTHER = 'other'
