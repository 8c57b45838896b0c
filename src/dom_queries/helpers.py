"""
Read-only helpers over BeautifulSoup trees.

Everything the queries need to know about a node (its text, its label
control, its form value) goes through this module.
"""

from typing import Any, Iterable, List, Optional

import soupsieve as sv
from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from .core.exceptions import ConfigurationError


# Elements that can be associated with a <label>
LABELABLE_TAGS = ("button", "input", "meter", "output", "progress", "select", "textarea")
FORM_CONTROL_SELECTOR = "button, input, meter, output, progress, select, textarea"


def check_container_type(container: Any) -> None:
    """
    Raises:
        ConfigurationError: If ``container`` cannot hold elements
    """
    if not isinstance(container, Tag):
        raise ConfigurationError(
            f"Expected container to be a BeautifulSoup document or a Tag "
            f"but got {type(container).__name__}."
        )


def is_document(node: Any) -> bool:
    return isinstance(node, BeautifulSoup)


def query_selector_all(container: Tag, selector: str) -> List[Tag]:
    """Descendants of ``container`` matching ``selector``, in document order"""
    try:
        return container.select(selector)
    except sv.SelectorSyntaxError as e:
        raise ConfigurationError(f"Invalid selector {selector!r}: {e}") from e


def matches_selector(element: Tag, selector: str) -> bool:
    if selector == "*":
        return not is_document(element)
    try:
        return sv.match(selector, element)
    except sv.SelectorSyntaxError as e:
        raise ConfigurationError(f"Invalid selector {selector!r}: {e}") from e


def get_text_content(node: Tag) -> str:
    """Concatenated text of the node and all its descendants"""
    return node.get_text()


def get_node_text(node: Tag) -> str:
    """Text a user reads on the node itself, ignoring child elements"""
    if node.name == "input" and (node.get("type") or "").lower() in ("submit", "button"):
        return node.get("value", "")

    return "".join(
        str(child) for child in node.children
        if isinstance(child, NavigableString) and not isinstance(child, Comment)
    )


def get_attribute(node: Tag, name: str) -> Optional[str]:
    """Attribute value as a string, joining values bs4 split into a list"""
    value = node.get(name)
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value


def get_document_root(node: Tag) -> Tag:
    root = node
    while root.parent is not None:
        root = root.parent
    return root


def get_tokens(value: Any) -> List[str]:
    """Split a token-list attribute value (bs4 may already have split it)"""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return value.split()


def find_by_id(container: Tag, element_id: str) -> Optional[Tag]:
    """First descendant whose id equals ``element_id`` verbatim"""
    return container.find(attrs={"id": element_id})


def find_labelled_by(container: Tag, label_id: str) -> List[Tag]:
    """Descendants whose aria-labelledby token list contains ``label_id``"""
    return [
        element for element in container.find_all(attrs={"aria-labelledby": True})
        if label_id in get_tokens(element.get("aria-labelledby"))
    ]


def is_labelable(element: Optional[Tag]) -> bool:
    if element is None or element.name not in LABELABLE_TAGS:
        return False
    return not (element.name == "input" and (element.get("type") or "").lower() == "hidden")


def get_label_control(label: Tag) -> Optional[Tag]:
    """The element a <label> natively controls, if any"""
    for_id = label.get("for")
    if for_id is not None:
        control = find_by_id(get_document_root(label), for_id)
        return control if is_labelable(control) else None

    for element in label.find_all(True):
        if is_labelable(element):
            return element
    return None


def get_labels(element: Tag) -> List[Tag]:
    """Labels whose native control is ``element``"""
    if not is_labelable(element):
        return []
    root = get_document_root(element)
    return [label for label in root.find_all("label") if get_label_control(label) is element]


def get_selected_options(select: Tag) -> List[Tag]:
    options = select.find_all("option")
    selected = [option for option in options if option.has_attr("selected")]
    if not selected and options and not select.has_attr("multiple"):
        return options[:1]
    return selected


def get_form_value(element: Tag) -> Optional[str]:
    """Current value of a form control, ``None`` for other elements"""
    if element.name == "input":
        input_type = (element.get("type") or "").lower()
        default = "on" if input_type in ("checkbox", "radio") else ""
        return element.get("value", default)
    if element.name == "textarea":
        return element.get_text()
    if element.name == "select":
        selected = get_selected_options(element)
        if not selected:
            return ""
        option = selected[0]
        return option.get("value", option.get_text())
    if element.name in ("button", "meter", "progress", "option", "li", "data"):
        return element.get("value")
    if element.name == "output":
        return element.get_text()
    return None


def unique(elements: Iterable[Optional[Tag]]) -> List[Tag]:
    """Drop ``None`` and repeated nodes, keeping first-seen order"""
    seen = set()
    result = []
    for element in elements:
        if element is None or id(element) in seen:
            continue
        seen.add(id(element))
        result.append(element)
    return result


def pretty_dom(container: Any, max_length: int = 7000) -> str:
    """Prettified markup of ``container`` for error messages"""
    if max_length <= 0 or not isinstance(container, Tag):
        return ""

    markup = container.prettify()
    if len(markup) > max_length:
        return markup[:max_length] + "..."
    return markup
