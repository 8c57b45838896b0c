"""
Query factory.

Every query family starts from one ``query_all_by_x(container, text, **options)``
function returning the matching elements in document order.
``build_queries`` derives the rest of the family from it:

    query_by_x      None on zero matches, error on many
    get_by_x        error on zero or many matches
    get_all_by_x    error on zero matches
    find_by_x       async get_by_x, retried until it passes or times out
    find_all_by_x   async get_all_by_x, retried the same way
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

from bs4 import Tag

from .core.base import QueryVariant
from .core.config import QueryConfig, resolve_config
from .core.exceptions import MultipleElementsFoundError, SuggestionError
from .helpers import check_container_type, get_attribute
from .matches import Matcher, get_matcher, make_normalizer
from .suggestions import get_suggested_query, to_snake_case
from .wait_for import wait_for

logger = logging.getLogger(__name__)

QueryAllBy = Callable[..., List[Tag]]
MessageTemplate = Callable[[Any, Matcher], str]


def get_multiple_elements_found_error(message: str, container: Any,
                                      config: QueryConfig) -> Exception:
    return config.element_error(
        f"{message}\n\n(If this is intentional, then use the `*_all_by_*` variant of the "
        f"query (like `query_all_by_text`, `get_all_by_text`, or `find_all_by_text`)).",
        container,
        MultipleElementsFoundError,
    )


def query_all_by_attribute(attribute: str, container: Tag, text: Matcher, *,
                           exact: bool = True,
                           collapse_whitespace: Optional[bool] = None,
                           trim: Optional[bool] = None,
                           normalizer=None,
                           config: Optional[QueryConfig] = None) -> List[Tag]:
    """Elements whose ``attribute`` value matches ``text``"""
    check_container_type(container)
    matcher = get_matcher(exact)
    match_normalizer = make_normalizer(trim, collapse_whitespace, normalizer)
    return [
        node for node in container.find_all(attrs={attribute: True})
        if matcher(get_attribute(node, attribute), node, text, match_normalizer)
    ]


def query_by_attribute(attribute: str, container: Tag, text: Matcher, **options) -> Optional[Tag]:
    elements = query_all_by_attribute(attribute, container, text, **options)
    if len(elements) > 1:
        raise get_multiple_elements_found_error(
            f"Found multiple elements by: [{attribute}={text}]",
            container,
            resolve_config(options.get("config")),
        )
    return elements[0] if elements else None


def _named(function: Callable, name: str) -> Callable:
    function.__name__ = name
    function.__qualname__ = name
    return function


def make_single_query(all_query: QueryAllBy, get_multiple_error: MessageTemplate) -> Callable:
    def query(container, text, **options):
        elements = all_query(container, text, **options)
        if len(elements) > 1:
            raise get_multiple_elements_found_error(
                get_multiple_error(container, text),
                container,
                resolve_config(options.get("config")),
            )
        return elements[0] if elements else None

    return query


def make_get_all_query(all_query: QueryAllBy, get_missing_error: MessageTemplate) -> Callable:
    def get_all(container, text, **options):
        elements = all_query(container, text, **options)
        if not elements:
            config = resolve_config(options.get("config"))
            raise config.element_error(get_missing_error(container, text), container)
        return elements

    return get_all


def make_find_query(getter: Callable) -> Callable:
    """Async version of ``getter``, polled until it stops raising"""

    async def find(container, text, *, timeout: Optional[float] = None,
                   interval: Optional[float] = None, **options):
        return await wait_for(
            lambda root: getter(root, text, **options),
            container,
            timeout=timeout,
            interval=interval,
            config=options.get("config"),
        )

    return find


def _report_suggestion(elements: List[Tag], query_name: str, variant: QueryVariant,
                       container: Any, config: QueryConfig) -> None:
    if not elements or not (config.throw_suggestions or config.warn_suggestions):
        return

    suggestions = [get_suggested_query(element, variant, config=config) for element in elements]
    rendered = {str(suggestion) for suggestion in suggestions if suggestion is not None}
    # only suggest when every element agrees
    if None in suggestions or len(rendered) != 1:
        return

    suggestion = suggestions[0]
    if suggestion.query_name == query_name:
        return

    message = f"A better query is available, try this:\n{suggestion}\n"
    if config.throw_suggestions:
        raise config.element_error(message, container, SuggestionError)
    logger.warning(message)


def wrap_single_query_with_suggestion(query: Callable, query_name: str,
                                      variant: QueryVariant) -> Callable:
    def wrapped(container, text, **options):
        element = query(container, text, **options)
        if element is not None:
            _report_suggestion([element], query_name, variant, container,
                               resolve_config(options.get("config")))
        return element

    return wrapped


def wrap_all_by_query_with_suggestion(query: Callable, query_name: str,
                                      variant: QueryVariant) -> Callable:
    def wrapped(container, text, **options):
        elements = query(container, text, **options)
        _report_suggestion(elements, query_name, variant, container,
                           resolve_config(options.get("config")))
        return elements

    return wrapped


@dataclass(frozen=True)
class QuerySet:
    """
    The six functions of one query family.

    Iterating yields ``query_by, get_all, get_by, find_all, find_by`` so a
    module can unpack it directly.
    """
    name: str
    query_all: Callable
    query_by: Callable
    get_all: Callable
    get_by: Callable
    find_all: Callable
    find_by: Callable

    def __iter__(self) -> Iterator[Callable]:
        return iter((self.query_by, self.get_all, self.get_by, self.find_all, self.find_by))

    def functions(self) -> Dict[str, Callable]:
        """Functions keyed by their public name, e.g. ``get_all_by_title``"""
        return {
            function.__name__: function
            for function in (self.query_all, self.query_by, self.get_all,
                             self.get_by, self.find_all, self.find_by)
        }


def make_query_set(name: str, query_all: QueryAllBy, get_all: Callable,
                   get_multiple_error: MessageTemplate) -> QuerySet:
    """Family from a query_all function and an already built get_all"""
    suffix = to_snake_case(name)
    single_query = make_single_query(query_all, get_multiple_error)
    get_by = make_single_query(get_all, get_multiple_error)

    def derive(function: Callable, variant: QueryVariant) -> Callable:
        if variant in (QueryVariant.QUERY_ALL, QueryVariant.GET_ALL, QueryVariant.FIND_ALL):
            wrapped = wrap_all_by_query_with_suggestion(function, name, variant)
        else:
            wrapped = wrap_single_query_with_suggestion(function, name, variant)
        if variant.is_async:
            wrapped = make_find_query(wrapped)
        return _named(wrapped, f"{variant.prefix}_{suffix}")

    return QuerySet(
        name=name,
        query_all=derive(query_all, QueryVariant.QUERY_ALL),
        query_by=derive(single_query, QueryVariant.QUERY),
        get_all=derive(get_all, QueryVariant.GET_ALL),
        get_by=derive(get_by, QueryVariant.GET),
        find_all=derive(get_all, QueryVariant.FIND_ALL),
        find_by=derive(get_by, QueryVariant.FIND),
    )


def build_queries(query_all_by: QueryAllBy, get_multiple_error: MessageTemplate,
                  get_missing_error: MessageTemplate, *, name: str) -> QuerySet:
    """
    Derive a query family from its ``query_all_by`` function.

    Args:
        query_all_by: ``(container, text, **options) -> list of elements``
        get_multiple_error: ``(container, text) -> message`` for many matches
        get_missing_error: ``(container, text) -> message`` for no match
        name: Family name used in suggestions and function names, e.g. "Title"
    """
    get_all = make_get_all_query(query_all_by, get_missing_error)
    return make_query_set(name, query_all_by, get_all, get_multiple_error)
