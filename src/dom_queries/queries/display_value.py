from typing import List, Optional

from bs4 import Tag

from ..core.config import QueryConfig
from ..helpers import (
    check_container_type,
    get_form_value,
    get_node_text,
    get_selected_options,
    query_selector_all,
)
from ..matches import Matcher, describe_matcher, get_matcher, make_normalizer
from ..query_helpers import build_queries


def query_all_by_display_value(container: Tag, value: Matcher, *,
                               exact: bool = True,
                               collapse_whitespace: Optional[bool] = None,
                               trim: Optional[bool] = None,
                               normalizer=None,
                               config: Optional[QueryConfig] = None) -> List[Tag]:
    """Form controls showing ``value``; selects match on selected option text"""
    check_container_type(container)
    matcher = get_matcher(exact)
    match_normalizer = make_normalizer(trim, collapse_whitespace, normalizer)

    def shows_value(node: Tag) -> bool:
        if node.name == "select":
            return any(
                matcher(get_node_text(option), option, value, match_normalizer)
                for option in get_selected_options(node)
            )
        return matcher(get_form_value(node), node, value, match_normalizer)

    return [node for node in query_selector_all(container, "input, select, textarea") if shows_value(node)]


def get_multiple_error(container, value) -> str:
    return f"Found multiple elements with the display value: {describe_matcher(value)}."


def get_missing_error(container, value) -> str:
    return f"Unable to find an element with the display value: {describe_matcher(value)}."


queries = build_queries(
    query_all_by_display_value, get_multiple_error, get_missing_error, name="DisplayValue",
)
