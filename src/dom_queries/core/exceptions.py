from typing import Any, Optional


class DomQueriesError(Exception):
    """Base exception for dom-queries"""
    pass


class ConfigurationError(DomQueriesError):
    """Invalid options, container or configuration file"""
    pass


class QueryError(DomQueriesError):
    """Base class for errors raised about the elements of a container"""

    def __init__(self, message: str, container: Any = None):
        super().__init__(message)
        self.message = message
        self.container = container


class ElementNotFoundError(QueryError):
    """A required query found no element"""
    pass


class MultipleElementsFoundError(QueryError):
    """A single-element query found more than one element"""
    pass


class SuggestionError(QueryError):
    """A query succeeded but a better query is available"""
    pass


class QueryTimeoutError(QueryError):
    """An async query did not succeed before its deadline"""

    def __init__(self, message: str, container: Any = None,
                 last_error: Optional[Exception] = None, timeout: Optional[float] = None):
        super().__init__(message, container)
        self.last_error = last_error
        self.timeout = timeout
