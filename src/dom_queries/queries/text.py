from typing import List, Optional, Union

from bs4 import Tag

from ..core.config import QueryConfig, resolve_config
from ..helpers import (
    check_container_type,
    get_node_text,
    is_document,
    matches_selector,
    query_selector_all,
)
from ..matches import Matcher, describe_matcher, get_matcher, make_normalizer
from ..query_helpers import build_queries


def query_all_by_text(container: Tag, text: Matcher, *,
                      selector: str = "*",
                      exact: bool = True,
                      collapse_whitespace: Optional[bool] = None,
                      trim: Optional[bool] = None,
                      ignore: Optional[Union[str, bool]] = None,
                      normalizer=None,
                      config: Optional[QueryConfig] = None) -> List[Tag]:
    """
    Elements whose own text matches ``text``.

    Only the text nodes directly inside an element count, so
    ``<p>Hello <b>world</b></p>`` matches "Hello" on the ``p`` and "world" on
    the ``b``. Elements matching ``ignore`` (``config.default_ignore`` unless
    given, ``False`` to disable) are skipped.
    """
    check_container_type(container)
    config = resolve_config(config)
    if ignore is None:
        ignore = config.default_ignore
    matcher = get_matcher(exact)
    match_normalizer = make_normalizer(trim, collapse_whitespace, normalizer)

    candidates = []
    if not is_document(container) and matches_selector(container, selector):
        candidates.append(container)
    candidates.extend(query_selector_all(container, selector))

    return [
        node for node in candidates
        if not (ignore and matches_selector(node, ignore))
        and matcher(get_node_text(node), node, text, match_normalizer)
    ]


def get_multiple_error(container, text) -> str:
    return f"Found multiple elements with the text: {describe_matcher(text)}"


def get_missing_error(container, text) -> str:
    return (
        f"Unable to find an element with the text: {describe_matcher(text)}. "
        f"This could be because the text is broken up by multiple elements. "
        f"In this case, you can provide a function for your text matcher to make "
        f"your matcher more flexible."
    )


queries = build_queries(query_all_by_text, get_multiple_error, get_missing_error, name="Text")
