from dataclasses import dataclass


@dataclass
class Attribute:
    """A single key/value attribute pair on an element"""
    key: str
    value: str = ''
