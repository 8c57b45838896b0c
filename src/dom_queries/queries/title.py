from typing import List, Optional

from bs4 import Tag

from ..core.config import QueryConfig
from ..helpers import (
    check_container_type,
    get_attribute,
    get_node_text,
    is_document,
    query_selector_all,
)
from ..matches import Matcher, describe_matcher, get_matcher, make_normalizer
from ..query_helpers import build_queries


def is_svg_title(node: Tag) -> bool:
    return node.name == "title" and node.parent is not None and node.parent.name == "svg"


def query_all_by_title(container: Tag, text: Matcher, *,
                       exact: bool = True,
                       collapse_whitespace: Optional[bool] = None,
                       trim: Optional[bool] = None,
                       normalizer=None,
                       config: Optional[QueryConfig] = None) -> List[Tag]:
    """Elements with a matching ``title`` attribute, and svgs with a matching <title>"""
    check_container_type(container)
    matcher = get_matcher(exact)
    match_normalizer = make_normalizer(trim, collapse_whitespace, normalizer)

    matched = set()
    for node in query_selector_all(container, "[title], svg > title"):
        if matcher(get_attribute(node, "title"), node, text, match_normalizer):
            matched.add(id(node))
        elif is_svg_title(node) and matcher(get_node_text(node), node, text, match_normalizer):
            matched.add(id(node.parent))

    # an svg starts before its <title>, so re-walk to keep document order
    candidates = query_selector_all(container, "*")
    if not is_document(container):
        candidates.insert(0, container)
    return [node for node in candidates if id(node) in matched]


def get_multiple_error(container, title) -> str:
    return f"Found multiple elements with the title: {describe_matcher(title)}."


def get_missing_error(container, title) -> str:
    return f"Unable to find an element with the title: {describe_matcher(title)}."


queries = build_queries(query_all_by_title, get_multiple_error, get_missing_error, name="Title")
