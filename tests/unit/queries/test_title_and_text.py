import asyncio
import re
import pytest
from bs4 import BeautifulSoup

from dom_queries.core import (
    ElementNotFoundError,
    MultipleElementsFoundError,
    QueryConfig,
    QueryTimeoutError,
)
from dom_queries.queries import (
    find_by_text,
    get_all_by_text,
    get_all_by_title,
    get_by_text,
    get_by_title,
    query_all_by_text,
    query_all_by_title,
    query_by_text,
    query_by_title,
)


def parse(html):
    return BeautifulSoup(html, "html.parser")


class TestTitleQueries:
    """Test queries by title"""

    def test_svg_title_returns_svg(self):
        soup = parse("<svg><title>Close</title></svg>")
        assert get_by_title(soup, "Close", exact=True) is soup.svg

    def test_title_attribute(self):
        soup = parse('<span title="Delete">×</span><span title="Delete all">×</span>')
        assert get_by_title(soup, "Delete") is soup.span
        assert len(get_all_by_title(soup, "delete", exact=False)) == 2

    def test_svg_matching_both_ways_is_returned_once(self):
        soup = parse('<svg title="Close"><title>Close</title></svg>')
        assert query_all_by_title(soup, "Close") == [soup.svg]

    def test_svg_keeps_document_order(self):
        soup = parse('<svg><g title="X"></g><title>X</title></svg>')
        assert query_all_by_title(soup, "X") == [soup.svg, soup.g]

    def test_svg_container(self):
        soup = parse("<svg><title>Close</title></svg>")
        assert query_all_by_title(soup.svg, "Close") == [soup.svg]

    def test_title_outside_svg_is_ignored(self):
        soup = parse("<html><head><title>Home</title></head><body></body></html>")
        assert query_by_title(soup, "Home") is None

    def test_errors(self):
        soup = parse('<i title="a"></i><b title="a"></b>')
        with pytest.raises(ElementNotFoundError, match=r"Unable to find an element with the title: b\."):
            get_by_title(soup, "b")
        with pytest.raises(MultipleElementsFoundError, match=r"Found multiple elements with the title: a\."):
            get_by_title(soup, "a")

    def test_regex_in_error(self):
        soup = parse("<p></p>")
        with pytest.raises(ElementNotFoundError, match=re.escape("title: /^Sa/")):
            get_by_title(soup, re.compile(r"^Sa"))


class TestTextQueries:
    """Test queries by text"""

    def test_button_text(self):
        soup = parse("<button>Submit</button>")
        assert get_by_text(soup, "Submit") is soup.button

    def test_only_own_text(self):
        soup = parse("<p>Hello <b>world</b></p>")
        assert get_by_text(soup, "Hello") is soup.p
        assert get_by_text(soup, "world") is soup.b
        assert query_by_text(soup, "Hello world") is None

    def test_input_buttons(self):
        soup = parse('<input type="submit" value="Send"><input value="Send">')
        assert get_by_text(soup, "Send") is soup.input

    def test_container_itself_can_match(self):
        soup = parse("<div><p>inside</p></div>")
        assert query_all_by_text(soup.p, "inside") == [soup.p]

    def test_script_and_style_are_ignored(self):
        soup = parse("<script>go</script><style>go</style><p>go</p>")
        assert query_all_by_text(soup, "go") == [soup.p]
        assert len(query_all_by_text(soup, "go", ignore=False)) == 3
        assert len(query_all_by_text(soup, "go", ignore="p")) == 2

    def test_default_ignore_from_config(self):
        soup = parse("<script>go</script><p>go</p>")
        config = QueryConfig(default_ignore="p")
        assert query_all_by_text(soup, "go", config=config) == [soup.script]

    def test_selector(self):
        soup = parse("<p>Go</p><button>Go</button>")
        assert get_by_text(soup, "Go", selector="button") is soup.button

    def test_multiple_and_missing(self):
        soup = parse("<li>Item</li><li>Item</li>")
        assert len(get_all_by_text(soup, "Item")) == 2
        with pytest.raises(MultipleElementsFoundError):
            get_by_text(soup, "Item")
        with pytest.raises(ElementNotFoundError, match="broken up by multiple elements"):
            get_by_text(soup, "Nothing")


class TestFindByText:
    """Test async text queries"""

    @pytest.mark.asyncio
    async def test_resolves_immediately(self):
        soup = parse("<p>Ready</p>")
        assert await find_by_text(soup, "Ready", timeout=0) is soup.p

    @pytest.mark.asyncio
    async def test_times_out_with_sync_error(self):
        soup = parse("<p>Loading</p>")
        config = QueryConfig(async_util_timeout=30, async_util_interval=10)

        with pytest.raises(ElementNotFoundError) as sync_error:
            get_by_text(soup, "Ready", config=config)
        with pytest.raises(QueryTimeoutError) as exc_info:
            await find_by_text(soup, "Ready", config=config)

        assert str(exc_info.value) == str(sync_error.value)
        assert isinstance(exc_info.value.last_error, ElementNotFoundError)

    @pytest.mark.asyncio
    async def test_custom_error_reporter_keeps_polling(self):
        soup = parse("<main></main>")
        config = QueryConfig(
            get_element_error=lambda message, container: AssertionError(message),
            async_util_timeout=1000,
            async_util_interval=5,
        )

        async def render_later():
            await asyncio.sleep(0.02)
            paragraph = soup.new_tag("p")
            paragraph.string = "Loaded"
            soup.main.append(paragraph)

        task = asyncio.create_task(render_later())
        element = await find_by_text(soup, "Loaded", config=config)
        await task

        assert element is soup.p
