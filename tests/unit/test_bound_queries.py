import pytest
from bs4 import BeautifulSoup

from dom_queries import QueryConfig, get_queries_for_element, within
from dom_queries.bound_queries import BoundQueries


@pytest.fixture
def soup():
    return BeautifulSoup(
        '<form><label for="email">Email</label><input id="email"></form>'
        '<aside><label for="other">Email</label><input id="other" data-qa="x"></aside>',
        "html.parser",
    )


class TestBoundQueries:
    """Test queries bound to a container"""

    def test_scoped_to_container(self, soup):
        form = within(soup.form)
        assert form.get_by_label_text("Email")["id"] == "email"
        assert len(within(soup).get_all_by_label_text("Email")) == 2

    def test_exposes_every_variant(self, soup):
        queries = get_queries_for_element(soup)
        assert isinstance(queries, BoundQueries)
        for name in ("query_all_by_role", "query_by_title", "get_all_by_alt_text",
                     "get_by_test_id", "find_all_by_text", "find_by_display_value"):
            assert callable(getattr(queries, name))
            assert name in dir(queries)

    def test_unknown_query(self, soup):
        with pytest.raises(AttributeError, match="get_by_css"):
            within(soup).get_by_css("input")

    def test_bound_config(self, soup):
        queries = within(soup, QueryConfig(test_id_attribute="data-qa"))
        assert queries.get_by_test_id("x")["id"] == "other"

    def test_call_time_config_wins(self, soup):
        queries = within(soup, QueryConfig(test_id_attribute="data-qa"))
        assert queries.query_by_test_id("x", config=QueryConfig()) is None

    @pytest.mark.asyncio
    async def test_find(self, soup):
        form = within(soup.form)
        assert (await form.find_by_label_text("Email", timeout=0))["id"] == "email"
