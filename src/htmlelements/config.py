from dataclasses import dataclass
from enum import Enum
from typing import Set

from .errors import ConfigurationError


class RemovalStrategy(Enum):
    """How remove_attribute takes matching entries out of the list"""
    SWAP = 'swap'      # overwrite with the last entry and truncate
    STABLE = 'stable'  # filter in place, keeping the order of the rest


DEFAULT_REMOVAL_STRATEGY = RemovalStrategy.SWAP

DUPLICATE_ATTRIBUTE_MODES = {'replace', 'ignore'}


@dataclass
class ParserConfig:
    """Configuration for turning markup into a DOM tree"""
    parser: str = 'html.parser'
    keep_whitespace_text: bool = True
    on_duplicate_attribute: str = 'replace'
    skip_tags: Set[str] = None

    def __post_init__(self):
        if self.skip_tags is None:
            self.skip_tags = set()
        if self.on_duplicate_attribute not in DUPLICATE_ATTRIBUTE_MODES:
            raise ConfigurationError(
                f"on_duplicate_attribute must be one of "
                f"{sorted(DUPLICATE_ATTRIBUTE_MODES)}, got {self.on_duplicate_attribute!r}"
            )
