import re
from typing import List

from bs4 import Tag

from ..matches import Matcher, describe_matcher
from ..query_helpers import build_queries, query_all_by_attribute

# alt is only meaningful on these, and on custom elements
VALID_TAG = re.compile(r"^(img|input|area|.+-.+)$", re.IGNORECASE)


def query_all_by_alt_text(container: Tag, alt: Matcher, **options) -> List[Tag]:
    return [
        node for node in query_all_by_attribute("alt", container, alt, **options)
        if VALID_TAG.match(node.name)
    ]


def get_multiple_error(container, alt) -> str:
    return f"Found multiple elements with the alt text: {describe_matcher(alt)}"


def get_missing_error(container, alt) -> str:
    return f"Unable to find an element with the alt text: {describe_matcher(alt)}"


queries = build_queries(query_all_by_alt_text, get_multiple_error, get_missing_error, name="AltText")
