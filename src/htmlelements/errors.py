"""
Exception hierarchy for tree building and configuration

Query operations never raise these; they report absence through
empty strings, empty lists and None.
"""


class HTMLElementsError(Exception):
    """Base class for all htmlelements errors"""


class ConfigurationError(HTMLElementsError):
    """Raised when a configuration value is not supported"""


class TreeBuildError(HTMLElementsError):
    """Raised when markup cannot be turned into a DOM tree"""


class ParserNotAvailableError(TreeBuildError):
    """Raised when the requested parser backend is not installed"""

    def __init__(self, parser: str):
        self.parser = parser
        super().__init__(f"HTML parser backend not available: {parser}")


class InvalidMarkupError(TreeBuildError):
    """Raised when the markup passed in is neither str nor bytes"""
