"""
Text normalization and matching shared by every query family.

A matcher is one of:
    - a string, compared against the normalized text of a node
    - a compiled regular expression, searched in the normalized text
    - a callable ``(text, node) -> bool``
"""

import re
from typing import Any, Callable, Optional, Pattern, Union

from .core.exceptions import ConfigurationError

Normalizer = Callable[[str], str]
Matcher = Union[str, Pattern, Callable[[str, Any], bool]]

_WHITESPACE = re.compile(r"\s+")


def get_default_normalizer(trim: bool = True, collapse_whitespace: bool = True) -> Normalizer:
    """Normalizer that collapses whitespace runs and trims, unless disabled"""

    def normalize(text: str) -> str:
        normalized = text
        if collapse_whitespace:
            normalized = _WHITESPACE.sub(" ", normalized)
        if trim:
            normalized = normalized.strip()
        return normalized

    return normalize


def make_normalizer(trim: Optional[bool] = None,
                    collapse_whitespace: Optional[bool] = None,
                    normalizer: Optional[Normalizer] = None) -> Normalizer:
    """
    Build the normalizer for one query call.

    Raises:
        ConfigurationError: If a custom normalizer is combined with trim or
            collapse_whitespace
    """
    if normalizer is None:
        return get_default_normalizer(
            trim=True if trim is None else trim,
            collapse_whitespace=True if collapse_whitespace is None else collapse_whitespace,
        )

    if trim is not None or collapse_whitespace is not None:
        raise ConfigurationError(
            "trim and collapse_whitespace are not supported with a normalizer. "
            "If you want to use the default trim and collapse_whitespace logic in your "
            "normalizer, use get_default_normalizer(trim=..., collapse_whitespace=...) "
            "and compose that into your normalizer"
        )
    return normalizer


def _match(text: Optional[str], node: Any, matcher: Matcher,
           normalizer: Normalizer, fuzzy: bool) -> bool:
    if not isinstance(text, str):
        return False

    normalized_text = normalizer(text)

    if isinstance(matcher, str):
        expected = normalizer(matcher)
        if fuzzy:
            return expected.lower() in normalized_text.lower()
        return normalized_text == expected
    if isinstance(matcher, re.Pattern):
        return matcher.search(normalized_text) is not None
    if callable(matcher):
        return bool(matcher(normalized_text, node))

    raise ConfigurationError(
        f"Matcher must be a string, a compiled regular expression or a function, "
        f"got {type(matcher).__name__}"
    )


def matches(text: Optional[str], node: Any, matcher: Matcher, normalizer: Normalizer) -> bool:
    """Exact match of ``text`` against ``matcher``"""
    return _match(text, node, matcher, normalizer, fuzzy=False)


def fuzzy_matches(text: Optional[str], node: Any, matcher: Matcher, normalizer: Normalizer) -> bool:
    """Case-insensitive substring match for strings; exact semantics otherwise"""
    return _match(text, node, matcher, normalizer, fuzzy=True)


def get_matcher(exact: bool = True):
    return matches if exact else fuzzy_matches


def describe_matcher(matcher: Matcher) -> str:
    """Human readable form of a matcher for error messages"""
    if isinstance(matcher, re.Pattern):
        return f"/{matcher.pattern}/"
    if callable(matcher) and not isinstance(matcher, str):
        return getattr(matcher, "__name__", repr(matcher))
    return str(matcher)
