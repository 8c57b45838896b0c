"""
Suggest the query a test author should prefer for an element.

Families are tried in a fixed order: Role, LabelText, PlaceholderText,
Text, DisplayValue, AltText, Title. The first applicable one wins.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from bs4 import Tag

from .core.base import QueryVariant
from .core.config import QueryConfig, resolve_config
from .core.exceptions import ConfigurationError
from .helpers import (
    find_by_id,
    get_document_root,
    get_form_value,
    get_labels,
    get_text_content,
    get_tokens,
)
from .matches import get_default_normalizer

logger = logging.getLogger(__name__)

normalize = get_default_normalizer()

QUERY_FAMILIES = (
    "Role",
    "LabelText",
    "PlaceholderText",
    "Text",
    "DisplayValue",
    "AltText",
    "Title",
)


def to_snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


@dataclass(frozen=True)
class Suggestion:
    query_name: str
    content: str
    variant: QueryVariant
    name: Optional[str] = None

    @property
    def query_method(self) -> str:
        """Name of the suggested function, e.g. ``get_by_label_text``"""
        return f"{self.variant.prefix}_{to_snake_case(self.query_name)}"

    def __str__(self) -> str:
        options = ""
        if self.name:
            # re.escape leaves quotes alone; \" keeps the raw literal closed
            pattern = re.escape(self.name.lower()).replace('"', r'\"')
            options = f', name=re.compile(r"{pattern}", re.I)'
        return f"{self.query_method}({json.dumps(self.content, ensure_ascii=False)}{options})"


def get_label_text_for(element: Tag) -> Optional[str]:
    label = next(
        (label for label in get_labels(element) if normalize(get_text_content(label))),
        None,
    )

    # elements labelled through aria-labelledby have no native labels
    if label is None:
        root = get_document_root(element)
        for label_id in get_tokens(element.get("aria-labelledby")):
            label = find_by_id(root, label_id)
            if label is not None:
                break

    if label is not None:
        return normalize(get_text_content(label))
    return None


def _can_suggest(current: str, requested: Optional[str], data) -> bool:
    return bool(data) and (requested is None or requested.lower() == current.lower())


def get_suggested_query(element: Tag,
                        variant: Union[QueryVariant, str] = QueryVariant.GET,
                        method: Optional[str] = None,
                        config: Optional[QueryConfig] = None) -> Optional[Suggestion]:
    """
    Suggest the preferred query for ``element``.

    Args:
        element: Element a query returned
        variant: Variant to phrase the suggestion with (``get``, ``find_all``...)
        method: Only consider this family (``"Role"``, ``"LabelText"``...)
        config: Supplies the role and accessible name functions

    Returns:
        Suggestion, or None when no family applies
    """
    config = resolve_config(config)
    variant = QueryVariant.coerce(variant)
    if method is not None and method.lower() not in {f.lower() for f in QUERY_FAMILIES}:
        raise ConfigurationError(f"Unknown query family: {method!r}")

    roles = config.get_roles(element)
    if _can_suggest("Role", method, roles):
        return Suggestion("Role", roles[0], variant, name=config.compute_accessible_name(element))

    label_text = get_label_text_for(element)
    if _can_suggest("LabelText", method, label_text):
        return Suggestion("LabelText", label_text, variant)

    placeholder = element.get("placeholder")
    if _can_suggest("PlaceholderText", method, placeholder):
        return Suggestion("PlaceholderText", placeholder, variant)

    text_content = normalize(get_text_content(element))
    if _can_suggest("Text", method, text_content):
        return Suggestion("Text", text_content, variant)

    value = get_form_value(element)
    if _can_suggest("DisplayValue", method, value):
        return Suggestion("DisplayValue", normalize(value), variant)

    alt = element.get("alt")
    if _can_suggest("AltText", method, alt):
        return Suggestion("AltText", alt, variant)

    title = element.get("title")
    if _can_suggest("Title", method, title):
        return Suggestion("Title", title, variant)

    logger.debug(f"No query to suggest for <{element.name}>")
    return None
