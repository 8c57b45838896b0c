from typing import List, Optional

from bs4 import Tag

from ..core.config import QueryConfig, resolve_config
from ..helpers import check_container_type, query_selector_all
from ..matches import Matcher, describe_matcher, get_matcher, make_normalizer, matches
from ..query_helpers import build_queries
from ..roles import is_inaccessible


def query_all_by_role(container: Tag, role: Matcher, *,
                      name: Optional[Matcher] = None,
                      hidden: bool = False,
                      exact: bool = True,
                      collapse_whitespace: Optional[bool] = None,
                      trim: Optional[bool] = None,
                      normalizer=None,
                      config: Optional[QueryConfig] = None) -> List[Tag]:
    """
    Elements whose role matches ``role``.

    Args:
        name: Also match the accessible name (always exact for strings)
        hidden: Include elements hidden from the accessibility tree
    """
    check_container_type(container)
    config = resolve_config(config)
    matcher = get_matcher(exact)
    match_normalizer = make_normalizer(trim, collapse_whitespace, normalizer)

    elements = []
    for element in query_selector_all(container, "*"):
        if hidden:
            roles = config.get_roles(element, hidden=True)
        elif is_inaccessible(element):
            continue
        else:
            roles = config.get_roles(element)

        # the first token is the effective role, the rest are fallbacks
        if not roles or not matcher(roles[0], element, role, match_normalizer):
            continue
        if name is not None and not matches(
            config.compute_accessible_name(element), element, name, match_normalizer,
        ):
            continue
        elements.append(element)
    return elements


def get_multiple_error(container, role) -> str:
    return f"Found multiple elements with the role \"{describe_matcher(role)}\""


def get_missing_error(container, role) -> str:
    return f"Unable to find an accessible element with the role \"{describe_matcher(role)}\""


queries = build_queries(query_all_by_role, get_multiple_error, get_missing_error, name="Role")
