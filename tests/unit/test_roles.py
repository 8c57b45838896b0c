import pytest
from bs4 import BeautifulSoup

from dom_queries.roles import compute_accessible_name, get_implicit_role, get_roles


def parse(html):
    return BeautifulSoup(html, "html.parser")


class TestRoles:
    """Test role lookup"""

    @pytest.mark.parametrize("html,role", [
        ("<button>x</button>", "button"),
        ('<a href="/">x</a>', "link"),
        ("<a>x</a>", None),
        ("<input>", "textbox"),
        ('<input type="checkbox">', "checkbox"),
        ('<input type="submit">', "button"),
        ('<input type="search">', "searchbox"),
        ("<select><option>a</option></select>", "combobox"),
        ("<select multiple><option>a</option></select>", "listbox"),
        ('<img alt="">', "presentation"),
        ('<img alt="Logo">', "img"),
        ("<h2>x</h2>", "heading"),
        ("<div>x</div>", None),
        ("<header>x</header>", "banner"),
        ("<article><header>x</header></article>", None),
    ])
    def test_implicit_role(self, html, role):
        soup = parse(html)
        element = soup.find(["header"]) or soup.find(True)
        assert get_implicit_role(element) == role

    def test_explicit_role_wins(self):
        soup = parse('<div role="switch checkbox">x</div>')
        assert get_roles(soup.div) == ["switch", "checkbox"]

    @pytest.mark.parametrize("html", [
        "<button hidden>x</button>",
        '<button aria-hidden="true">x</button>',
        '<div style="display: none"><button>x</button></div>',
    ])
    def test_hidden_elements_have_no_roles(self, html):
        assert get_roles(parse(html).button) == []
        assert get_roles(parse(html).button, hidden=True) == ["button"]


class TestAccessibleName:
    """Test accessible name computation"""

    def test_aria_labelledby_union(self):
        soup = parse(
            '<span id="a">First</span><span id="b">Name</span>'
            '<input aria-labelledby="a b" aria-label="ignored">'
        )
        assert compute_accessible_name(soup.input) == "First Name"

    def test_aria_label(self):
        soup = parse('<button aria-label="Close">×</button>')
        assert compute_accessible_name(soup.button) == "Close"

    def test_native_label(self):
        soup = parse('<label for="e">  Email  </label><input id="e">')
        assert compute_accessible_name(soup.input) == "Email"

    def test_content(self):
        assert compute_accessible_name(parse("<button> Save  changes </button>").button) == "Save changes"

    def test_input_button_value(self):
        soup = parse('<input type="submit"><input type="button" value="Go">')
        first, second = soup.find_all("input")
        assert compute_accessible_name(first) == "Submit"
        assert compute_accessible_name(second) == "Go"

    def test_alt_and_title(self):
        soup = parse('<img alt="Logo"><div title="Tip">text</div>')
        assert compute_accessible_name(soup.img) == "Logo"
        assert compute_accessible_name(soup.div) == "Tip"

    def test_no_name(self):
        assert compute_accessible_name(parse("<input>").input) == ""
