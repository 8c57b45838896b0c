"""
Best-effort ARIA role lookup and accessible name computation.

These are the defaults carried by QueryConfig. They cover the common HTML
elements, not the full ARIA in HTML and accname specifications; swap them
through ``QueryConfig(get_roles=..., compute_accessible_name=...)`` when a
test needs exact results.
"""

from typing import List, Optional

from bs4 import Tag

from .helpers import (
    find_by_id,
    get_document_root,
    get_labels,
    get_text_content,
    get_tokens,
)
from .matches import get_default_normalizer

normalize = get_default_normalizer()

IMPLICIT_ROLES = {
    "article": "article",
    "aside": "complementary",
    "button": "button",
    "datalist": "listbox",
    "dd": "definition",
    "details": "group",
    "dialog": "dialog",
    "dt": "term",
    "fieldset": "group",
    "figure": "figure",
    "form": "form",
    "h1": "heading",
    "h2": "heading",
    "h3": "heading",
    "h4": "heading",
    "h5": "heading",
    "h6": "heading",
    "hr": "separator",
    "li": "listitem",
    "main": "main",
    "math": "math",
    "menu": "list",
    "meter": "meter",
    "nav": "navigation",
    "ol": "list",
    "optgroup": "group",
    "option": "option",
    "output": "status",
    "progress": "progressbar",
    "table": "table",
    "tbody": "rowgroup",
    "td": "cell",
    "textarea": "textbox",
    "tfoot": "rowgroup",
    "th": "columnheader",
    "thead": "rowgroup",
    "tr": "row",
    "ul": "list",
}

INPUT_ROLES = {
    "button": "button",
    "checkbox": "checkbox",
    "email": "textbox",
    "image": "button",
    "number": "spinbutton",
    "radio": "radio",
    "range": "slider",
    "reset": "button",
    "search": "searchbox",
    "submit": "button",
    "tel": "textbox",
    "text": "textbox",
    "url": "textbox",
}

# Roles whose accessible name comes from their content
NAME_FROM_CONTENT = {
    "button", "cell", "checkbox", "columnheader", "gridcell", "heading", "link",
    "listitem", "menuitem", "option", "radio", "row", "rowheader", "switch",
    "tab", "term", "tooltip", "treeitem",
}


def get_implicit_role(element: Tag) -> Optional[str]:
    name = element.name
    if name in ("a", "area"):
        return "link" if element.has_attr("href") else None
    if name == "img":
        return "presentation" if element.get("alt") == "" else "img"
    if name == "input":
        input_type = (element.get("type") or "text").lower()
        if input_type in ("text", "search", "email", "tel", "url") and element.has_attr("list"):
            return "combobox"
        return INPUT_ROLES.get(input_type)
    if name == "select":
        size = element.get("size") or "0"
        if element.has_attr("multiple") or (size.isdigit() and int(size) > 1):
            return "listbox"
        return "combobox"
    if name == "section":
        if element.has_attr("aria-label") or element.has_attr("aria-labelledby"):
            return "region"
        return None
    if name == "header" or name == "footer":
        if element.find_parent(("article", "aside", "main", "nav", "section")) is not None:
            return None
        return "banner" if name == "header" else "contentinfo"
    return IMPLICIT_ROLES.get(name)


def is_inaccessible(element: Tag) -> bool:
    """Hidden from the accessibility tree by markup"""
    node = element
    while isinstance(node, Tag):
        if node.has_attr("hidden") or node.get("aria-hidden") == "true":
            return True
        style = (node.get("style") or "").replace(" ", "").lower()
        if "display:none" in style or "visibility:hidden" in style:
            return True
        node = node.parent
    return False


def get_element_roles(element: Tag) -> List[str]:
    """Explicit role tokens, else the implicit role"""
    explicit = get_tokens(element.get("role"))
    if explicit:
        return explicit
    implicit = get_implicit_role(element)
    return [implicit] if implicit else []


def get_roles(element: Tag, hidden: bool = False) -> List[str]:
    """Roles of an element exposed in the accessibility tree, or of any element when ``hidden``"""
    if not hidden and is_inaccessible(element):
        return []
    return get_element_roles(element)


def _text_of_ids(element: Tag, ids: List[str]) -> str:
    root = get_document_root(element)
    texts = []
    for element_id in ids:
        referenced = find_by_id(root, element_id)
        if referenced is not None:
            texts.append(compute_accessible_name(referenced, _from_reference=True))
    return normalize(" ".join(texts))


def compute_accessible_name(element: Tag, _from_reference: bool = False) -> str:
    if not _from_reference:
        labelled_by = get_tokens(element.get("aria-labelledby"))
        if labelled_by:
            name = _text_of_ids(element, labelled_by)
            if name:
                return name

    aria_label = normalize(element.get("aria-label") or "")
    if aria_label:
        return aria_label

    labels = get_labels(element)
    if labels:
        name = normalize(" ".join(get_text_content(label) for label in labels))
        if name:
            return name

    if element.name == "input":
        input_type = (element.get("type") or "").lower()
        if input_type in ("submit", "reset", "button"):
            return normalize(element.get("value") or {"submit": "Submit", "reset": "Reset"}.get(input_type, ""))
        if input_type == "image":
            return normalize(element.get("alt") or "")

    if element.name in ("img", "area"):
        alt = normalize(element.get("alt") or "")
        if alt:
            return alt

    roles = get_element_roles(element)
    if _from_reference or (roles and roles[0] in NAME_FROM_CONTENT):
        text = normalize(get_text_content(element))
        if text:
            return text

    return normalize(element.get("title") or element.get("placeholder") or "")
