from typing import List

from bs4 import Tag

from ..matches import Matcher, describe_matcher
from ..query_helpers import build_queries, query_all_by_attribute


def query_all_by_placeholder_text(container: Tag, text: Matcher, **options) -> List[Tag]:
    return query_all_by_attribute("placeholder", container, text, **options)


def get_multiple_error(container, text) -> str:
    return f"Found multiple elements with the placeholder text of: {describe_matcher(text)}"


def get_missing_error(container, text) -> str:
    return f"Unable to find an element with the placeholder text of: {describe_matcher(text)}"


queries = build_queries(
    query_all_by_placeholder_text, get_multiple_error, get_missing_error, name="PlaceholderText",
)
