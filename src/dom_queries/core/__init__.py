from .base import QueryVariant, Strategy
from .config import ConfigManager, QueryConfig, resolve_config
from .exceptions import (
    DomQueriesError,
    ConfigurationError,
    QueryError,
    ElementNotFoundError,
    MultipleElementsFoundError,
    SuggestionError,
    QueryTimeoutError,
)

__all__ = [
    # Base classes
    "QueryVariant",
    "Strategy",

    # Configuration
    "ConfigManager",
    "QueryConfig",
    "resolve_config",

    # Exceptions
    "DomQueriesError",
    "ConfigurationError",
    "QueryError",
    "ElementNotFoundError",
    "MultipleElementsFoundError",
    "SuggestionError",
    "QueryTimeoutError",
]
