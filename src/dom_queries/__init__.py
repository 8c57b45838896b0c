"""
dom-queries - find elements the way users find them
"""

__version__ = "0.1.0"
__author__ = "dom-queries Contributors"

from .core import (
    ConfigManager,
    QueryConfig,
    QueryVariant,
    DomQueriesError,
    ConfigurationError,
    QueryError,
    ElementNotFoundError,
    MultipleElementsFoundError,
    SuggestionError,
    QueryTimeoutError,
)
from .matches import (
    fuzzy_matches,
    get_default_normalizer,
    make_normalizer,
    matches,
)
from .helpers import check_container_type, get_node_text, pretty_dom
from .roles import compute_accessible_name, get_roles
from .suggestions import Suggestion, get_suggested_query
from .query_helpers import (
    QuerySet,
    build_queries,
    make_find_query,
    make_get_all_query,
    make_single_query,
    query_all_by_attribute,
    query_by_attribute,
    wrap_all_by_query_with_suggestion,
    wrap_single_query_with_suggestion,
)
from .wait_for import wait_for
from .page import LivePage, snapshot, snapshot_async
from .queries import *  # noqa: F401,F403
from .queries import __all__ as _query_names
from .bound_queries import BoundQueries, get_queries_for_element, within

__all__ = [
    # Configuration
    "ConfigManager",
    "QueryConfig",
    "QueryVariant",

    # Exceptions
    "DomQueriesError",
    "ConfigurationError",
    "QueryError",
    "ElementNotFoundError",
    "MultipleElementsFoundError",
    "SuggestionError",
    "QueryTimeoutError",

    # Matching
    "fuzzy_matches",
    "get_default_normalizer",
    "make_normalizer",
    "matches",

    # Helpers
    "check_container_type",
    "get_node_text",
    "pretty_dom",
    "compute_accessible_name",
    "get_roles",

    # Suggestions
    "Suggestion",
    "get_suggested_query",

    # Query factory
    "QuerySet",
    "build_queries",
    "make_find_query",
    "make_get_all_query",
    "make_single_query",
    "query_all_by_attribute",
    "query_by_attribute",
    "wrap_all_by_query_with_suggestion",
    "wrap_single_query_with_suggestion",
    "wait_for",

    # Playwright
    "LivePage",
    "snapshot",
    "snapshot_async",

    # Bound queries
    "BoundQueries",
    "get_queries_for_element",
    "within",
] + list(_query_names)
