"""
Query form controls by the text of their label.

An element counts as labelled by a piece of text when:
    - a <label> with that text natively controls it, points at it with
      ``for``, is referenced by its ``aria-labelledby``, or contains it
    - its own ``aria-label`` is that text
    - any element with that text and an ``id`` is referenced by its
      ``aria-labelledby``
"""

import logging
from abc import abstractmethod
from typing import List, Optional

from bs4 import Tag

from ..core.base import Strategy
from ..core.config import QueryConfig, resolve_config
from ..helpers import (
    FORM_CONTROL_SELECTOR,
    check_container_type,
    find_by_id,
    find_labelled_by,
    get_form_value,
    get_label_control,
    get_text_content,
    matches_selector,
    query_selector_all,
    unique,
)
from ..matches import Matcher, describe_matcher, get_matcher, make_normalizer
from ..query_helpers import make_query_set, query_all_by_attribute
from .text import query_all_by_text

logger = logging.getLogger(__name__)


class LabelResolver(Strategy):
    """Finds the elements one label labels through a single mechanism"""

    @abstractmethod
    def apply(self, label: Tag, container: Tag, selector: str) -> List[Optional[Tag]]:
        """Elements ``label`` labels; may contain None"""
        pass


class ControlOwnershipResolver(LabelResolver):
    """<label for="x"> or a nested labelable element, as the browser resolves it"""

    @property
    def name(self) -> str:
        return "control"

    @property
    def priority(self) -> int:
        return 1

    def apply(self, label, container, selector):
        return [get_label_control(label)]


class ForAttributeResolver(LabelResolver):
    """<label for="someId">text</label><input id="someId" />"""

    @property
    def name(self) -> str:
        return "for"

    @property
    def priority(self) -> int:
        return 2

    def apply(self, label, container, selector):
        for_id = label.get("for")
        if not for_id:
            return []
        # ids are compared verbatim, so "user.name" needs no escaping
        return [find_by_id(container, for_id)]


class AriaLabelledByResolver(LabelResolver):
    """<label id="someId">text</label><input aria-labelledby="someId" />"""

    @property
    def name(self) -> str:
        return "aria-labelledby"

    @property
    def priority(self) -> int:
        return 3

    def apply(self, label, container, selector):
        label_id = label.get("id")
        if not label_id:
            return []
        return find_labelled_by(container, label_id)


class NestedControlResolver(LabelResolver):
    """<label>text: <input /></label>"""

    @property
    def name(self) -> str:
        return "nested"

    @property
    def priority(self) -> int:
        return 4

    def apply(self, label, container, selector):
        if not label.contents:
            return []
        for element in query_selector_all(label, FORM_CONTROL_SELECTOR):
            if matches_selector(element, selector):
                return [element]
        return []


LABEL_RESOLVERS = sorted(
    [
        ControlOwnershipResolver(),
        ForAttributeResolver(),
        AriaLabelledByResolver(),
        NestedControlResolver(),
    ],
    key=lambda resolver: resolver.priority,
)


def query_all_labels_by_text(container: Tag, text: Matcher, *,
                             exact: bool = True,
                             collapse_whitespace: Optional[bool] = None,
                             trim: Optional[bool] = None,
                             normalizer=None,
                             config: Optional[QueryConfig] = None) -> List[Tag]:
    """<label> elements whose text matches, ignoring text of nested controls"""
    matcher = get_matcher(exact)
    match_normalizer = make_normalizer(trim, collapse_whitespace, normalizer)

    labels = []
    for label in container.find_all("label"):
        text_to_match = get_text_content(label)

        # the content of textareas and selects is part of the label text
        for textarea in label.find_all("textarea"):
            text_to_match = text_to_match.replace(get_form_value(textarea), "", 1)
        for select in label.find_all("select"):
            text_to_match = text_to_match.replace(get_text_content(select), "", 1)

        if matcher(text_to_match, label, text, match_normalizer):
            labels.append(label)
    return labels


def query_all_by_label_text(container: Tag, text: Matcher, *,
                            selector: str = "*",
                            exact: bool = True,
                            collapse_whitespace: Optional[bool] = None,
                            trim: Optional[bool] = None,
                            normalizer=None,
                            config: Optional[QueryConfig] = None) -> List[Tag]:
    """
    Elements labelled by ``text``, in the order they were resolved.

    Args:
        container: Document or element to search
        text: Label text matcher
        selector: Only return elements matching this CSS selector
        exact: Exact match, or case-insensitive substring for strings
        collapse_whitespace: Collapse whitespace runs before matching
        trim: Strip surrounding whitespace before matching
        normalizer: Custom normalizer, exclusive with trim/collapse_whitespace
        config: Query configuration

    Raises:
        ConfigurationError: Invalid container or options
    """
    check_container_type(container)
    match_normalizer = make_normalizer(trim, collapse_whitespace, normalizer)

    labelled = []
    for label in query_all_labels_by_text(container, text, exact=exact, normalizer=match_normalizer):
        for resolver in LABEL_RESOLVERS:
            labelled.extend(resolver.apply(label, container, selector))

    labelled.extend(query_all_by_attribute(
        "aria-label", container, text, exact=exact, normalizer=match_normalizer,
    ))

    # aria-labelledby can point at any element, not only labels
    for element in query_all_by_text(container, text, exact=exact,
                                     normalizer=match_normalizer, config=config):
        label_id = element.get("id")
        if label_id:
            labelled.extend(find_labelled_by(container, label_id))

    elements = [element for element in unique(labelled) if matches_selector(element, selector)]
    logger.debug(f"Label text {describe_matcher(text)!r} resolved {len(elements)} element(s)")
    return elements


def get_all_by_label_text(container: Tag, text: Matcher, **options) -> List[Tag]:
    """Like query_all_by_label_text, but explains why nothing was found"""
    elements = query_all_by_label_text(container, text, **options)
    if elements:
        return elements

    config = resolve_config(options.get("config"))
    label_options = {key: value for key, value in options.items() if key != "selector"}
    if query_all_labels_by_text(container, text, **label_options):
        raise config.element_error(
            f"Found a label with the text of: {describe_matcher(text)}, however no form "
            f"control was found associated to that label. Make sure you're using the "
            f"\"for\" attribute or \"aria-labelledby\" attribute correctly.",
            container,
        )
    raise config.element_error(
        f"Unable to find a label with the text of: {describe_matcher(text)}",
        container,
    )


def get_multiple_error(container, text) -> str:
    return f"Found multiple elements with the text of: {describe_matcher(text)}"


queries = make_query_set("LabelText", query_all_by_label_text, get_all_by_label_text, get_multiple_error)
